"""
Field Box Widget - one input field

Pure render function - returns Rich renderables only.
"""
from rich.panel import Panel
from rich.text import Text

from ..core.state import InputField
from ..theme import Theme


def render_field_box(input_field: InputField, content: str, focused: bool, editing: bool) -> Panel:
    """
    Render a single input field

    Args:
        input_field: Which field this is (drives the title)
        content: Current buffer text, may span several lines
        focused: Field is the active one and the input section has focus
        editing: Field is being typed into (shows the cursor)
    """
    border_style = Theme.get_border_style(focused, editing)
    if editing or focused:
        title_style = f"bold {border_style}"
    else:
        title_style = "bright_black"

    text = Text(content, style=Theme.NORMAL_STYLE)
    if editing:
        text.append(Theme.CURSOR, style="bold green")

    title = Text(f" {Theme.FIELD_ICONS[input_field]} {input_field.label} ", style=title_style)

    return Panel(
        text,
        title=title,
        title_align="left",
        border_style=border_style,
    )
