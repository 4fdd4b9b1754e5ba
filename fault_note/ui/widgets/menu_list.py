"""
Target List Widget - page list rendering

Pure render function - returns Rich renderables only.
No state mutation, no event handling, no Live manipulation.
"""
from typing import Sequence

from rich.panel import Panel
from rich.text import Text

from ...models import TargetRef
from ..theme import Theme


def render_target_list(
    targets: Sequence[TargetRef],
    selected_index: int,
    focused: bool,
    title: str = "📚 Notion Pages"
) -> Panel:
    """
    Render the page list as a bordered panel

    Args:
        targets: Pages in display order
        selected_index: Currently selected page
        focused: Whether the list has keyboard focus
        title: Panel title

    Returns:
        Rich Panel renderable
    """
    body = Text(no_wrap=True, overflow="ellipsis")

    if not targets:
        body.append(" No pages loaded", style=Theme.DIM_STYLE)

    for i, target in enumerate(targets):
        is_selected = (i == selected_index)
        if is_selected:
            style = Theme.SELECTED_STYLE if focused else Theme.SELECTED_IDLE_STYLE
        else:
            style = Theme.NORMAL_STYLE
        arrow = Theme.ARROW_SELECTED if is_selected else Theme.ARROW_EMPTY

        if i:
            body.append("\n")
        body.append(f"{arrow}{target.title}", style=style)

    return Panel(
        body,
        title=f" {title} ",
        title_align="left",
        border_style=Theme.get_border_style(focused, editing=False),
    )
