"""
Form Screen

Title bar, page list on the left, the four input fields on the right and
the command bar at the bottom. Reads a StateSnapshot only.
"""
from rich.layout import Layout
from rich.panel import Panel
from rich.text import Text

from ..core.state import FocusArea, InputField, StateSnapshot
from ..theme import Theme
from ..widgets import render_field_box, render_target_list


def render_title_bar(snapshot: StateSnapshot) -> Panel:
    title = Text()
    title.append(" 📋 FaultNote ", style=Theme.TITLE_STYLE)
    title.append("- Error Logger ")
    if snapshot.is_editing:
        title.append(" EDITING ", style=Theme.EDITING_BADGE)
    else:
        title.append(" NORMAL ", style=Theme.NORMAL_BADGE)

    if snapshot.status is not None:
        title.append("  ")
        title.append(snapshot.status.render(), style=Theme.STATUS_STYLES[snapshot.status.kind])

    return Panel(title, border_style=Theme.PRIMARY)


def render_command_bar(snapshot: StateSnapshot) -> Panel:
    commands = Theme.EDITING_COMMANDS if snapshot.is_editing else Theme.NORMAL_COMMANDS

    line = Text(justify="center")
    for key, description in commands:
        line.append(f" [{key}] ", style=f"bold {Theme.PRIMARY}")
        line.append(f"{description} ")

    return Panel(line, title=" Commands ", border_style=Theme.IDLE_BORDER)


def render(snapshot: StateSnapshot) -> Layout:
    """
    Render the whole form.

    Args:
        snapshot: Frozen copy of the application state

    Returns:
        Rich Layout renderable
    """
    layout = Layout()
    layout.split_column(
        Layout(render_title_bar(snapshot), name="title", size=3),
        Layout(name="main", minimum_size=10),
        Layout(render_command_bar(snapshot), name="commands", size=3),
    )

    list_focused = snapshot.focus is FocusArea.TARGET_LIST
    fields = Layout(name="fields", ratio=3)
    fields.split_column(*[
        Layout(
            render_field_box(
                input_field,
                snapshot.field_text(input_field),
                focused=not list_focused and snapshot.active_field is input_field,
                editing=snapshot.is_editing and snapshot.active_field is input_field,
            ),
            name=input_field.name.lower(),
        )
        for input_field in InputField
    ])

    layout["main"].split_row(
        Layout(
            render_target_list(snapshot.targets, snapshot.selected_index, focused=list_focused),
            name="pages",
            ratio=1,
        ),
        fields,
    )

    return layout
