import logging
import sys
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv
from rich.console import Console

from fault_note.config import AppConfig
from fault_note.errors import ConfigurationError
from fault_note.models import TargetRef
from fault_note.notion import create_client
from fault_note.remote import RemoteCollaborator
from fault_note.utils import setup_logging
from fault_note.ui import run_form_ui
from fault_note.ui.core import AppState, load_targets

CONFIG_FILE = Path.cwd() / "config.json"

DEMO_TARGETS = [
    TargetRef(id="demo-1", title="Demo: Project Errors"),
    TargetRef(id="demo-2", title="Demo: Bug Tracker"),
]

# Console for application output outside the form
console = Console(emoji=False)


def connect(config: AppConfig, state: AppState,
            logger: logging.Logger) -> Tuple[AppState, Optional[RemoteCollaborator]]:
    """
    Create the Notion client and load the page list into ``state``.

    Without a client the form still opens: demo pages are shown (when enabled)
    and submissions report that Notion is not connected.
    """
    try:
        remote = create_client(config)
    except ConfigurationError as e:
        logger.warning(f"Notion client unavailable: {e}")
        if config.demo_pages_on_failure:
            state.set_targets(DEMO_TARGETS)
            state.set_error(f"Notion API error: {e}. Using demo pages.")
        else:
            state.set_error(f"Notion API error: {e}")
        return state, None

    state.set_info("Fetching pages from Notion...")
    load_targets(state, remote)
    return state, remote


def main() -> int:
    load_dotenv()

    config = AppConfig.load(CONFIG_FILE)
    logger = setup_logging(Path(config.log_path))
    logger.info("FaultNote starting")

    state, remote = connect(config, AppState(), logger)

    try:
        run_form_ui(state, remote, poll_interval_ms=config.poll_interval_ms)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except OSError as e:
        logger.error(f"Terminal input failed: {e}")
        console.print(f"[red]Application error: {e}[/red]")
        return 1
    finally:
        if remote is not None:
            remote.close()

    logger.info("FaultNote stopped")
    console.print("Thanks for using FaultNote! 👋")
    return 0


if __name__ == "__main__":
    sys.exit(main())
