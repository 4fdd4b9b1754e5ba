"""
Keyboard Mapping Configuration
"""
from typing import Set


class KeyMap:
    """Keyboard shortcuts and key codes"""

    # Arrow keys (Windows msvcrt prefix + ANSI sequences)
    UP_KEYS: Set[str] = {"\xe0H", "\x00H", "\x1b[A", "\x1bOA"}
    DOWN_KEYS: Set[str] = {"\xe0P", "\x00P", "\x1b[B", "\x1bOB"}

    # Enter keys
    ENTER_KEYS: Set[str] = {"\r", "\n", "\r\n"}

    # Escape
    ESC_KEY = "\x1b"

    # Windows sends BS, most POSIX terminals send DEL
    BACKSPACE_KEYS: Set[str] = {"\x08", "\x7f"}

    TAB_KEY = "\t"
    INTERRUPT_KEY = "\x03"  # Ctrl-C

    @classmethod
    def is_up(cls, key: str) -> bool:
        return key in cls.UP_KEYS

    @classmethod
    def is_down(cls, key: str) -> bool:
        return key in cls.DOWN_KEYS

    @classmethod
    def is_enter(cls, key: str) -> bool:
        return key in cls.ENTER_KEYS

    @classmethod
    def is_escape(cls, key: str) -> bool:
        return key == cls.ESC_KEY

    @classmethod
    def is_backspace(cls, key: str) -> bool:
        return key in cls.BACKSPACE_KEYS

    @classmethod
    def is_tab(cls, key: str) -> bool:
        return key == cls.TAB_KEY

    # --- Normal mode commands ---

    @staticmethod
    def is_quit(key: str) -> bool:
        return key in ('q', 'Q', KeyMap.INTERRUPT_KEY)

    @staticmethod
    def is_alt_up(key: str) -> bool:
        """Vim-style up"""
        return key == 'k'

    @staticmethod
    def is_alt_down(key: str) -> bool:
        """Vim-style down"""
        return key == 'j'

    @staticmethod
    def is_edit(key: str) -> bool:
        """Check if key is edit command"""
        return key in ('e', 'i')

    @staticmethod
    def is_clear(key: str) -> bool:
        """Check if key is clear-all-fields command"""
        return key == 'c'

    @staticmethod
    def is_reload(key: str) -> bool:
        """Check if key is reload-pages command"""
        return key == 'r'

    @staticmethod
    def is_printable(key: str) -> bool:
        """Check if key is a single printable character (space included)"""
        return len(key) == 1 and key.isprintable()
