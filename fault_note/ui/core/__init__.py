"""Core UI components"""
from .controller import UIController, load_targets
from .state import (
    AppState,
    Direction,
    FocusArea,
    InputField,
    InputMode,
    StateSnapshot,
    StatusKind,
    StatusMessage,
)
from .events import EventDispatcher, Event, EventType

__all__ = [
    'UIController',
    'load_targets',
    'AppState',
    'Direction',
    'FocusArea',
    'InputField',
    'InputMode',
    'StateSnapshot',
    'StatusKind',
    'StatusMessage',
    'EventDispatcher',
    'Event',
    'EventType',
]
