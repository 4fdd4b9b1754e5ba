import json
import logging
from dataclasses import dataclass, asdict, fields
from pathlib import Path

logger = logging.getLogger("fault_note.config")


@dataclass
class AppConfig:
    # Notion API
    notion_base_url: str = "https://api.notion.com"
    notion_version: str = "2022-06-28"
    api_key_env: str = "API_KEY"
    request_timeout_seconds: float = 30.0
    search_page_size: int = 100

    # Entry formatting
    code_language: str = "plain text"

    # Event loop
    poll_interval_ms: int = 100

    # Startup behaviour
    demo_pages_on_failure: bool = True

    # Paths & Logging
    log_path: str = "logs/fault_note.log"

    @classmethod
    def load(cls, path: Path) -> "AppConfig":
        """Loads configuration from a JSON file. Creates a default one if it doesn't exist."""
        if not path.exists():
            default_config = cls()
            default_config.save(path)
            return default_config

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)

            # Filter out keys that are not in the dataclass
            valid_keys = {f.name for f in fields(cls)}
            filtered_data = {k: v for k, v in data.items() if k in valid_keys}

            return cls(**filtered_data)
        except (OSError, ValueError, TypeError) as e:
            logger.warning(f"Error loading config from {path}: {e}. Using defaults.")
            return cls()

    def save(self, path: Path) -> None:
        """Saves the current configuration to a JSON file."""
        try:
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(asdict(self), f, ensure_ascii=False, indent=4)
        except OSError as e:
            logger.warning(f"Error saving config to {path}: {e}")

