"""
FaultNote UI Package

Main entry point for the form UI with single Live context.
"""
from typing import Optional

from rich.console import Console

from .core import AppState, UIController
from ..remote import RemoteCollaborator


def run_form_ui(
    state: AppState,
    remote: Optional[RemoteCollaborator],
    poll_interval_ms: int = 100,
    console: Optional[Console] = None
) -> AppState:
    """
    Run the form until the user quits

    Args:
        state: Prepared application state (pages already loaded)
        remote: Connected collaborator, or None for read-only navigation
        poll_interval_ms: Bounded wait for the next key
        console: Console to draw on (a fresh full-colour one by default)

    Returns:
        The final AppState
    """
    if console is None:
        console = Console(force_terminal=True, color_system="truecolor")

    controller = UIController(
        console,
        state=state,
        remote=remote,
        poll_interval=poll_interval_ms / 1000.0
    )
    return controller.run()


__all__ = [
    'run_form_ui',
    'UIController',
    'AppState',
]
