import json
import os
import unittest
from unittest.mock import patch

import httpx

from fault_note.config import AppConfig
from fault_note.errors import (
    AuthError,
    ConfigurationError,
    NetworkError,
    NotFoundError,
    RemoteTimeoutError,
)
from fault_note.models import Entry, TargetRef
from fault_note.notion import (
    NotionClient,
    RICH_TEXT_LIMIT,
    create_client,
    create_error_block,
    extract_page_info,
)


def page(page_id, title, prop="title"):
    return {"id": page_id, "properties": {prop: {"title": [{"plain_text": title}]}}}


class TestCreateErrorBlock(unittest.TestCase):
    def test_without_code(self):
        blocks = create_error_block("Error", "Problem", "Solution")
        self.assertEqual(len(blocks), 1)
        heading = blocks[0]
        self.assertEqual(heading["type"], "heading_3")
        self.assertTrue(heading["heading_3"]["is_toggleable"])
        children = heading["heading_3"]["children"]
        self.assertEqual(len(children), 3)
        labels = [c["paragraph"]["rich_text"][0]["text"]["content"] for c in children]
        self.assertEqual(labels, ["🔴 Error: ", "🟡 Problem: ", "🟢 Solution: "])
        self.assertEqual(children[1]["paragraph"]["rich_text"][1]["text"]["content"], "Problem")

    def test_with_code(self):
        blocks = create_error_block("E", "P", "S", "fn main() {}", "rust")
        children = blocks[0]["heading_3"]["children"]
        self.assertEqual(len(children), 4)
        self.assertEqual(children[3]["type"], "code")
        self.assertEqual(children[3]["code"]["language"], "rust")

    def test_default_language(self):
        blocks = create_error_block("E", "P", "S", "x = 1")
        self.assertEqual(blocks[0]["heading_3"]["children"][3]["code"]["language"], "plain text")

    def test_blank_code_ignored(self):
        blocks = create_error_block("E", "P", "S", "   ")
        self.assertEqual(len(blocks[0]["heading_3"]["children"]), 3)

    def test_long_text_split_into_segments(self):
        long_text = "x" * (RICH_TEXT_LIMIT * 2 + 5)
        blocks = create_error_block(long_text, "P", "S")
        rich_text = blocks[0]["heading_3"]["children"][0]["paragraph"]["rich_text"]
        segments = [r["text"]["content"] for r in rich_text[1:]]
        self.assertEqual([len(s) for s in segments], [RICH_TEXT_LIMIT, RICH_TEXT_LIMIT, 5])
        self.assertEqual("".join(segments), long_text)


class TestExtractPageInfo(unittest.TestCase):
    def test_title_property(self):
        self.assertEqual(extract_page_info(page("id-1", "My Test Page")), TargetRef("id-1", "My Test Page"))

    def test_name_property(self):
        self.assertEqual(extract_page_info(page("id-2", "Named Page", "Name")).title, "Named Page")

    def test_untitled(self):
        self.assertEqual(extract_page_info({"id": "id-3", "properties": {}}).title, "Untitled")
        self.assertEqual(extract_page_info({"id": "id-4", "properties": {"title": {"title": []}}}).title, "Untitled")

    def test_missing_id(self):
        self.assertIsNone(extract_page_info({"properties": {}}))


class TestNotionClient(unittest.TestCase):
    def make_client(self, handler):
        self.requests = []

        def recording_handler(request):
            self.requests.append(request)
            return handler(request)

        return NotionClient("secret", AppConfig(), transport=httpx.MockTransport(recording_handler))

    def test_headers(self):
        client = self.make_client(lambda request: httpx.Response(200, json={"results": [], "has_more": False}))
        client.list_targets()
        request = self.requests[0]
        self.assertEqual(request.headers["Authorization"], "Bearer secret")
        self.assertEqual(request.headers["Notion-Version"], "2022-06-28")
        self.assertEqual(request.url, "https://api.notion.com/v1/search")

    def test_list_targets_follows_pagination(self):
        responses = [
            {"results": [page("a", "A"), {"object": "page"}], "has_more": True, "next_cursor": "c1"},
            {"results": [page("b", "B"), page("a", "A")], "has_more": False, "next_cursor": None},
        ]
        client = self.make_client(lambda request: httpx.Response(200, json=responses[len(self.requests) - 1]))

        targets = client.list_targets()

        self.assertEqual(targets, [TargetRef("a", "A"), TargetRef("b", "B"), TargetRef("a", "A")])
        first, second = (json.loads(r.content) for r in self.requests)
        self.assertEqual(first["filter"], {"property": "object", "value": "page"})
        self.assertEqual(first["page_size"], 100)
        self.assertNotIn("start_cursor", first)
        self.assertEqual(second["start_cursor"], "c1")

    def test_append_entry(self):
        client = self.make_client(lambda request: httpx.Response(200, json={"object": "list", "results": []}))

        client.append_entry("page-1", Entry("E", "P", "S", "print(1)"))

        request = self.requests[0]
        self.assertEqual(request.method, "PATCH")
        self.assertEqual(request.url.path, "/v1/blocks/page-1/children")
        children = json.loads(request.content)["children"]
        self.assertEqual(len(children[0]["heading_3"]["children"]), 4)

    def test_status_mapping(self):
        cases = [
            (401, AuthError),
            (403, AuthError),
            (404, NotFoundError),
            (500, NetworkError),
            (429, NetworkError),
        ]
        for status, error_class in cases:
            with self.subTest(status=status):
                client = self.make_client(
                    lambda request, status=status: httpx.Response(status, json={"message": "nope"})
                )
                with self.assertRaises(error_class) as ctx:
                    client.append_entry("page-1", Entry("E", "P", "S"))
                self.assertEqual(ctx.exception.status_code, status)
                self.assertIn("nope", ctx.exception.message)

    def test_timeout(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        client = self.make_client(handler)
        with self.assertRaises(RemoteTimeoutError) as ctx:
            client.append_entry("page-1", Entry("E", "P", "S"))
        self.assertIsInstance(ctx.exception, NetworkError)
        self.assertEqual(ctx.exception.user_message(), "Request timed out: no answer within 30s")

    def test_connection_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = self.make_client(handler)
        with self.assertRaises(NetworkError):
            client.list_targets()

    def test_non_json_error_body(self):
        client = self.make_client(lambda request: httpx.Response(502, text="Bad gateway"))
        with self.assertRaises(NetworkError) as ctx:
            client.list_targets()
        self.assertEqual(ctx.exception.status_code, 502)


class TestCreateClient(unittest.TestCase):
    def test_missing_key(self):
        with patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(ConfigurationError):
                create_client(AppConfig())

    def test_non_ascii_key(self):
        with patch.dict(os.environ, {"API_KEY": "secret_ключ"}, clear=True):
            with self.assertRaises(ConfigurationError) as ctx:
                create_client(AppConfig())
        self.assertIn("Invalid API key format", ctx.exception.message)

    def test_custom_env_var(self):
        with patch.dict(os.environ, {"NOTION_TOKEN": "abc"}, clear=True):
            client = create_client(AppConfig(api_key_env="NOTION_TOKEN"))
        self.assertIsInstance(client, NotionClient)
        client.close()


if __name__ == '__main__':
    unittest.main()
