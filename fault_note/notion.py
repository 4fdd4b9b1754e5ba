"""
Notion document store

Implements the RemoteCollaborator contract on top of the Notion REST API
with a blocking httpx client. Each entry becomes one toggleable heading
block holding labelled Error / Problem / Solution paragraphs and an
optional code block.
"""
import logging
import os
from typing import Any, Dict, Iterator, List, Optional

import httpx

from .config import AppConfig
from .errors import (
    AuthError,
    ConfigurationError,
    NetworkError,
    NotFoundError,
    RemoteTimeoutError,
)
from .models import Entry, TargetRef
from .remote import RemoteCollaborator

logger = logging.getLogger("fault_note.notion")

# Notion rejects rich_text content longer than this
RICH_TEXT_LIMIT = 2000

ENTRY_HEADING = "📋 Error Log Entry"
TITLE_PROPERTIES = ("title", "Name", "Title")
UNTITLED = "Untitled"


def _text_segments(content: str) -> Iterator[Dict[str, Any]]:
    for start in range(0, len(content), RICH_TEXT_LIMIT):
        yield {"type": "text", "text": {"content": content[start:start + RICH_TEXT_LIMIT]}}


def _rich_text(content: str) -> List[Dict[str, Any]]:
    return list(_text_segments(content))


def _labelled_paragraph(label: str, color: str, content: str) -> Dict[str, Any]:
    return {
        "object": "block",
        "type": "paragraph",
        "paragraph": {
            "rich_text": [
                {
                    "type": "text",
                    "text": {"content": label},
                    "annotations": {"bold": True, "color": color},
                },
                *_rich_text(content),
            ],
            "color": "default",
        },
    }


def create_error_block(error: str, problem: str, solution: str,
                       code: Optional[str] = None,
                       language: Optional[str] = None) -> List[Dict[str, Any]]:
    """
    Build the block list appended to a page for one entry.

    Args:
        error: Error text
        problem: Problem description
        solution: Solution description
        code: Optional code snippet, skipped when blank
        language: Notion code language ("plain text" when not given)

    Returns:
        A one-element list holding the toggleable heading_3 block
    """
    children = [
        _labelled_paragraph("🔴 Error: ", "red", error),
        _labelled_paragraph("🟡 Problem: ", "yellow", problem),
        _labelled_paragraph("🟢 Solution: ", "green", solution),
    ]

    if code is not None and code.strip():
        children.append({
            "object": "block",
            "type": "code",
            "code": {
                "caption": [],
                "rich_text": _rich_text(code),
                "language": language or "plain text",
            },
        })

    return [{
        "object": "block",
        "type": "heading_3",
        "heading_3": {
            "rich_text": [{"type": "text", "text": {"content": ENTRY_HEADING}}],
            "color": "red",
            "is_toggleable": True,
            "children": children,
        },
    }]


def extract_page_info(result: Dict[str, Any]) -> Optional[TargetRef]:
    """Turn one search result into a TargetRef; None when it has no id."""
    page_id = result.get("id")
    if not isinstance(page_id, str) or not page_id:
        return None

    title = UNTITLED
    properties = result.get("properties") or {}
    for name in TITLE_PROPERTIES:
        prop = properties.get(name)
        if not prop:
            continue
        parts = prop.get("title") or []
        if parts and isinstance(parts[0].get("plain_text"), str):
            title = parts[0]["plain_text"]
        break

    return TargetRef(id=page_id, title=title)


class NotionClient(RemoteCollaborator):
    """Blocking Notion API client"""

    def __init__(self, api_key: str, config: Optional[AppConfig] = None,
                 transport: Optional[httpx.BaseTransport] = None):
        self.config = config or AppConfig()
        self._client = httpx.Client(
            base_url=self.config.notion_base_url,
            timeout=self.config.request_timeout_seconds,
            headers={
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
                "Notion-Version": self.config.notion_version,
            },
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        """Send a request and translate every failure into a RemoteError."""
        try:
            response = self._client.request(method, url, **kwargs)
        except httpx.TimeoutException as e:
            raise RemoteTimeoutError(
                f"no answer within {self.config.request_timeout_seconds:g}s", cause=e
            ) from e
        except httpx.HTTPError as e:
            raise NetworkError(str(e) or type(e).__name__, cause=e) from e

        if response.is_success:
            return response

        detail = self._error_detail(response)
        status = response.status_code
        if status in (401, 403):
            raise AuthError(detail, status_code=status)
        if status == 404:
            raise NotFoundError(detail, status_code=status)
        raise NetworkError(f"HTTP {status}: {detail}", status_code=status)

    @staticmethod
    def _error_detail(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.reason_phrase or "unexpected response"
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return response.reason_phrase or "unexpected response"

    def list_targets(self) -> List[TargetRef]:
        """Fetch all pages visible to the integration, following pagination."""
        pages: List[TargetRef] = []
        start_cursor: Optional[str] = None

        while True:
            body: Dict[str, Any] = {
                "filter": {"property": "object", "value": "page"},
                "page_size": self.config.search_page_size,
            }
            if start_cursor:
                body["start_cursor"] = start_cursor

            response = self._request("POST", "/v1/search", json=body)
            try:
                data = response.json()
            except ValueError as e:
                raise NetworkError("invalid JSON in search response", cause=e) from e

            for result in data.get("results", []):
                page = extract_page_info(result)
                if page is not None:
                    pages.append(page)

            if data.get("has_more") and data.get("next_cursor"):
                start_cursor = data["next_cursor"]
            else:
                break

        logger.info(f"Fetched {len(pages)} pages from Notion")
        return pages

    def append_entry(self, target_id: str, entry: Entry) -> None:
        blocks = create_error_block(
            entry.error,
            entry.problem,
            entry.solution,
            entry.code,
            self.config.code_language,
        )
        self._request("PATCH", f"/v1/blocks/{target_id}/children", json={"children": blocks})
        logger.info(f"Appended entry to page {target_id}")


def create_client(config: AppConfig) -> NotionClient:
    """
    Create a NotionClient from the environment.

    Raises:
        ConfigurationError: the API key variable is not set or cannot be sent in a header
    """
    api_key = os.getenv(config.api_key_env, "").strip()
    if not api_key:
        raise ConfigurationError(f"{config.api_key_env} not found in environment variables")
    # HTTP header values must be ASCII
    if not api_key.isascii():
        raise ConfigurationError(f"Invalid API key format: {config.api_key_env} contains non-ASCII characters")
    return NotionClient(api_key, config)


__all__ = [
    "NotionClient",
    "create_client",
    "create_error_block",
    "extract_page_info",
]
