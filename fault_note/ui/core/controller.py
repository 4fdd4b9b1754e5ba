"""
UI Controller - Single Live Context Manager

This is the heart of the UI system. It manages:
- Single Live context (created once, never destroyed)
- Event loop (one key per iteration, bounded wait)
- Key dispatch for normal and editing mode
- The submission sequence against the remote collaborator
"""
import logging
from typing import Callable, Optional

from rich.console import Console
from rich.live import Live

from .state import AppState, Direction, StateSnapshot
from .events import EventDispatcher, Event, EventType
from ..keymap import KeyMap
from ...errors import RemoteError
from ...remote import RemoteCollaborator

logger = logging.getLogger("fault_note.controller")

NOT_CONNECTED_TEXT = "Notion not connected"
NOTHING_TO_SUBMIT_TEXT = "Internal error: nothing to submit"
CLEARED_TEXT = "Inputs cleared"
ALREADY_SUBMITTING_TEXT = "A submission is already in progress"


def load_targets(state: AppState, remote: Optional[RemoteCollaborator]) -> bool:
    """
    Fetch the page list from the remote collaborator.

    Any failure leaves the form with no pages and an error status.

    Returns:
        True if the list was loaded
    """
    if remote is None:
        state.set_error(NOT_CONNECTED_TEXT)
        return False

    try:
        targets = remote.list_targets()
    except RemoteError as e:
        logger.warning(f"Failed to fetch pages: {e!r}")
        state.set_targets([])
        state.set_error(f"Failed to fetch pages: {e.user_message()}")
        return False
    except Exception as e:
        logger.exception("Unexpected error while fetching pages")
        state.set_targets([])
        state.set_error(f"Failed to fetch pages: {e}")
        return False

    state.set_targets(targets)
    if targets:
        state.set_success(f"Loaded {len(targets)} pages from Notion")
    else:
        state.set_info("No pages found. Create a page in Notion first.")
    return True


class UIController:
    """
    Central UI controller with single Live context.

    All rendering happens through live.update() from a snapshot of the state
    taken at the top of each loop iteration.
    """

    def __init__(self, console: Console, state: Optional[AppState] = None,
                 remote: Optional[RemoteCollaborator] = None,
                 dispatcher: Optional[EventDispatcher] = None,
                 poll_interval: float = 0.1,
                 renderer: Optional[Callable[[StateSnapshot], object]] = None):
        self.console = console
        self.state = state if state is not None else AppState()
        self.remote = remote
        self.dispatcher = dispatcher if dispatcher is not None else EventDispatcher()
        self.poll_interval = poll_interval
        self.live: Optional[Live] = None
        self._renderer = renderer
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running

    def run(self) -> AppState:
        """
        Main event loop - runs until the user quits

        Returns:
            The final AppState

        Raises:
            OSError: the terminal can no longer be read
        """
        # Create single Live context
        self.live = Live(
            console=self.console,
            auto_refresh=False,  # Disable background thread
            screen=True,
            transient=False
        )

        self._running = True
        needs_redraw = True

        with self.live, self.dispatcher:
            while self._running:
                if needs_redraw:
                    renderable = self._render(self.state.snapshot())
                    self.live.update(renderable, refresh=True)  # Manual refresh
                    needs_redraw = False

                event = self.dispatcher.get_event(timeout=self.poll_interval)
                if event:
                    self.handle_event(event)
                    needs_redraw = True

        return self.state

    def stop(self):
        """Stop the event loop"""
        self._running = False

    def _render(self, snapshot: StateSnapshot):
        if self._renderer is not None:
            return self._renderer(snapshot)
        from ..screens import form
        return form.render(snapshot)

    def handle_event(self, event: Event):
        """Route events to appropriate handlers"""
        if event.type == EventType.KEYBOARD and event.key:
            self.handle_key(event.key)

    def handle_key(self, key: str):
        """Dispatch one key through the table of the current input mode"""
        if self.state.is_editing:
            self._handle_editing_keys(key)
        else:
            self._handle_normal_keys(key)

    def _handle_normal_keys(self, key: str):
        """Handle keys in normal (navigation) mode"""
        state = self.state

        if KeyMap.is_quit(key):
            self.stop()

        elif KeyMap.is_tab(key):
            state.toggle_focus()

        elif KeyMap.is_up(key) or KeyMap.is_alt_up(key):
            self._navigate(Direction.PREV)

        elif KeyMap.is_down(key) or KeyMap.is_alt_down(key):
            self._navigate(Direction.NEXT)

        elif KeyMap.is_edit(key):
            state.enter_edit()

        elif KeyMap.is_enter(key):
            self.submit()

        elif KeyMap.is_clear(key):
            state.clear_all_fields()
            state.set_info(CLEARED_TEXT)

        elif KeyMap.is_reload(key):
            self.reload_targets()

        elif KeyMap.is_escape(key):
            state.clear_status()

    def _navigate(self, direction: Direction):
        if self.state.is_target_list_focused:
            self.state.navigate_target(direction)
        else:
            self.state.navigate_field(direction)

    def _handle_editing_keys(self, key: str):
        """Handle keys while typing into a field"""
        state = self.state

        if KeyMap.is_escape(key):
            state.exit_edit()

        elif KeyMap.is_backspace(key):
            state.delete_last_char()

        elif KeyMap.is_enter(key):
            # Enter is a newline here; submitting needs normal mode
            state.insert_newline()

        elif KeyMap.is_tab(key):
            # Keep typing on the next field
            state.exit_edit()
            state.navigate_field(Direction.NEXT)
            state.enter_edit()

        elif KeyMap.is_up(key):
            state.exit_edit()
            state.navigate_field(Direction.PREV)

        elif KeyMap.is_down(key):
            state.exit_edit()
            state.navigate_field(Direction.NEXT)

        elif KeyMap.is_printable(key):
            state.insert_char(key)

    def submit(self):
        """
        Validate the form and append it to the selected page.

        Blocks on the remote call; no other key is processed until it returns.
        Fields are cleared only on success so a failed submission can be retried.
        """
        state = self.state

        if state.is_loading:
            state.set_error(ALREADY_SUBMITTING_TEXT)
            return

        reason = state.validation_error()
        if reason is not None:
            state.set_error(reason)
            return

        if self.remote is None:
            state.set_error(NOT_CONNECTED_TEXT)
            return

        submission = state.build_submission()
        if submission is None:
            state.set_error(NOTHING_TO_SUBMIT_TEXT)
            return

        target_id, entry = submission
        target = state.selected_target
        title = target.title if target is not None else target_id

        state.start_loading()
        logger.info(f"Submitting entry to page {target_id}")
        try:
            self.remote.append_entry(target_id, entry)
        except RemoteError as e:
            logger.warning(f"Submission to {target_id} failed: {e!r}")
            state.set_error(f"Failed to submit: {e.user_message()}")
            return
        except Exception as e:
            logger.exception(f"Unexpected error while submitting to {target_id}")
            state.set_error(f"Failed to submit: {e}")
            return

        state.set_success(f"Entry added to '{title}'")
        state.clear_all_fields()

    def reload_targets(self) -> bool:
        """Fetch the page list from the remote collaborator into the state."""
        return load_targets(self.state, self.remote)
