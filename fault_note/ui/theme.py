"""
Theme and Color Configuration
"""
from typing import Dict

from .core.state import InputField, StatusKind


class Theme:
    """UI color and style theme"""

    # Colors
    PRIMARY = "cyan"

    # Styles
    TITLE_STYLE = "bold cyan"
    FOCUSED_BORDER = "yellow"
    EDITING_BORDER = "green"
    IDLE_BORDER = "bright_black"
    SELECTED_STYLE = "bold yellow"
    SELECTED_IDLE_STYLE = "white on rgb(45,85,155)"
    NORMAL_STYLE = "white"
    DIM_STYLE = "dim"

    NORMAL_BADGE = "bold white on blue"
    EDITING_BADGE = "bold black on green"

    # UI Elements
    ARROW_SELECTED = "▶ "
    ARROW_EMPTY = "  "
    CURSOR = "▌"

    FIELD_ICONS: Dict[InputField, str] = {
        InputField.ERROR: "🔴",
        InputField.PROBLEM: "🟡",
        InputField.SOLUTION: "🟢",
        InputField.CODE: "💻",
    }

    STATUS_STYLES: Dict[StatusKind, str] = {
        StatusKind.INFO: "yellow",
        StatusKind.SUCCESS: "bold green",
        StatusKind.ERROR: "bold red",
    }

    # Command bar hints: (key, description)
    NORMAL_COMMANDS = (
        ("q", "Quit"),
        ("Tab", "Switch Focus"),
        ("↑↓", "Navigate"),
        ("e/i", "Edit"),
        ("Enter", "Submit"),
        ("c", "Clear"),
        ("r", "Reload"),
        ("Esc", "Dismiss"),
    )
    EDITING_COMMANDS = (
        ("Esc", "Exit Edit"),
        ("Tab", "Next Field"),
        ("Enter", "New Line"),
        ("↑↓", "Switch Field"),
    )

    @classmethod
    def get_border_style(cls, focused: bool, editing: bool) -> str:
        """Get border style for a panel based on state"""
        if editing:
            return cls.EDITING_BORDER
        if focused:
            return cls.FOCUSED_BORDER
        return cls.IDLE_BORDER
