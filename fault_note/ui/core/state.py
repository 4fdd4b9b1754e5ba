"""
UI State Management - Enums and Data Structures

AppState is the single mutable record of the form. It is created once at
startup, handed to the UIController and mutated only by it. Renderers never
touch it directly; they receive a StateSnapshot.
"""
from enum import Enum, IntEnum
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from ...models import Entry, TargetRef


class FocusArea(Enum):
    """Which section of the screen receives navigation keys"""
    TARGET_LIST = "target_list"
    INPUT_SECTION = "input_section"


class InputMode(Enum):
    """Normal = navigation keys, Editing = keys go into the active field"""
    NORMAL = "normal"
    EDITING = "editing"


class Direction(Enum):
    NEXT = 1
    PREV = -1


class InputField(IntEnum):
    """The four input fields, in display order"""
    ERROR = 0
    PROBLEM = 1
    SOLUTION = 2
    CODE = 3

    def step(self, direction: Direction) -> "InputField":
        return InputField((self.value + direction.value) % len(InputField))

    @property
    def label(self) -> str:
        return FIELD_LABELS[self]

    @property
    def required(self) -> bool:
        return self is not InputField.CODE


FIELD_LABELS: Dict[InputField, str] = {
    InputField.ERROR: "Error",
    InputField.PROBLEM: "Problem",
    InputField.SOLUTION: "Solution",
    InputField.CODE: "Code (optional)",
}


class StatusKind(Enum):
    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


STATUS_PREFIXES: Dict[StatusKind, str] = {
    StatusKind.INFO: "",
    StatusKind.SUCCESS: "✓ ",
    StatusKind.ERROR: "✗ ",
}

SUBMITTING_TEXT = "Submitting..."
MISSING_FIELDS_TEXT = "Fill in Error, Problem, and Solution fields first"
NO_TARGET_TEXT = "No page available to submit to"


@dataclass(frozen=True)
class StatusMessage:
    kind: StatusKind
    text: str

    def render(self) -> str:
        """Status line as shown to the user, with the kind prefix."""
        return f"{STATUS_PREFIXES[self.kind]}{self.text}"


@dataclass(frozen=True)
class StateSnapshot:
    """Read-only view of AppState handed to the renderer once per frame"""
    focus: FocusArea
    mode: InputMode
    targets: Tuple[TargetRef, ...]
    selected_index: int
    active_field: InputField
    fields: Tuple[Tuple[InputField, str], ...]
    status: Optional[StatusMessage]
    is_loading: bool

    @property
    def is_editing(self) -> bool:
        return self.mode is InputMode.EDITING

    @property
    def selected_target(self) -> Optional[TargetRef]:
        if 0 <= self.selected_index < len(self.targets):
            return self.targets[self.selected_index]
        return None

    def field_text(self, input_field: InputField) -> str:
        return dict(self.fields)[input_field]


def _empty_fields() -> Dict[InputField, str]:
    return {f: "" for f in InputField}


@dataclass
class AppState:
    """Complete form state"""
    focus: FocusArea = FocusArea.TARGET_LIST
    mode: InputMode = InputMode.NORMAL
    targets: List[TargetRef] = field(default_factory=list)
    selected_index: int = 0
    active_field: InputField = InputField.ERROR
    fields: Dict[InputField, str] = field(default_factory=_empty_fields)
    status: Optional[StatusMessage] = None
    is_loading: bool = False

    # --- Queries ---

    @property
    def is_editing(self) -> bool:
        return self.mode is InputMode.EDITING

    @property
    def is_target_list_focused(self) -> bool:
        return self.focus is FocusArea.TARGET_LIST

    @property
    def is_input_section_focused(self) -> bool:
        return self.focus is FocusArea.INPUT_SECTION

    @property
    def selected_target(self) -> Optional[TargetRef]:
        if not self.targets:
            return None
        return self.targets[self.selected_index]

    @property
    def active_text(self) -> str:
        return self.fields[self.active_field]

    # --- Focus & mode ---

    def toggle_focus(self):
        """Switch between the target list and the input section.

        Leaving the input section always drops back to normal mode.
        """
        if self.focus is FocusArea.TARGET_LIST:
            self.focus = FocusArea.INPUT_SECTION
        else:
            self.focus = FocusArea.TARGET_LIST
            self.mode = InputMode.NORMAL

    def enter_edit(self):
        """Start editing the active field; ignored while the target list has focus."""
        if self.is_input_section_focused:
            self.mode = InputMode.EDITING

    def exit_edit(self):
        self.mode = InputMode.NORMAL

    # --- Navigation ---

    def navigate_target(self, direction: Direction):
        """Move the selection through the target list, wrapping at both ends."""
        if not self.targets:
            return
        self.selected_index = (self.selected_index + direction.value) % len(self.targets)

    def navigate_field(self, direction: Direction):
        self.active_field = self.active_field.step(direction)

    def set_targets(self, targets: Sequence[TargetRef]):
        """Replace the target list (load or reload)."""
        self.targets = list(targets)
        self.selected_index = 0
        self.is_loading = False

    # --- Editing the active field ---

    def insert_char(self, char: str):
        self.fields[self.active_field] += char

    def delete_last_char(self):
        text = self.fields[self.active_field]
        if text:
            self.fields[self.active_field] = text[:-1]

    def insert_newline(self):
        self.insert_char("\n")

    def clear_all_fields(self):
        self.fields = _empty_fields()
        self.active_field = InputField.ERROR

    # --- Submission ---

    def validation_error(self) -> Optional[str]:
        """Reason the form cannot be submitted, or None when it can."""
        missing = [f for f in InputField if f.required and not self.fields[f].strip()]
        if missing:
            return MISSING_FIELDS_TEXT
        if not self.targets:
            return NO_TARGET_TEXT
        return None

    def can_submit(self) -> bool:
        return self.validation_error() is None

    def build_submission(self) -> Optional[Tuple[str, Entry]]:
        """
        Snapshot the form into (target_id, Entry).

        Returns:
            None unless can_submit() holds. Nothing is mutated.
        """
        if not self.can_submit():
            return None
        target = self.selected_target
        if target is None:
            return None

        code = self.fields[InputField.CODE].strip()
        entry = Entry(
            error=self.fields[InputField.ERROR],
            problem=self.fields[InputField.PROBLEM],
            solution=self.fields[InputField.SOLUTION],
            code=code or None,
        )
        return target.id, entry

    # --- Status line ---

    def set_info(self, text: str):
        self.status = StatusMessage(StatusKind.INFO, text)

    def set_success(self, text: str):
        self.status = StatusMessage(StatusKind.SUCCESS, text)
        self.is_loading = False

    def set_error(self, text: str):
        self.status = StatusMessage(StatusKind.ERROR, text)
        self.is_loading = False

    def clear_status(self):
        self.status = None

    def start_loading(self):
        self.is_loading = True
        self.set_info(SUBMITTING_TEXT)

    def snapshot(self) -> StateSnapshot:
        return StateSnapshot(
            focus=self.focus,
            mode=self.mode,
            targets=tuple(self.targets),
            selected_index=self.selected_index,
            active_field=self.active_field,
            fields=tuple((f, self.fields[f]) for f in InputField),
            status=self.status,
            is_loading=self.is_loading,
        )
