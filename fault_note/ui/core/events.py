"""
Event System - Polling keyboard reader

One key is read per call. Windows uses msvcrt; POSIX terminals are switched
to cbreak mode and polled with select so the caller's loop keeps a bounded
wait even when nothing is typed.
"""
from enum import Enum
from dataclasses import dataclass
from typing import Optional
import logging
import os
import sys
import time

logger = logging.getLogger("fault_note.events")

# Time allowed for the rest of an escape sequence to arrive after ESC
ESCAPE_SEQUENCE_TIMEOUT = 0.03


class EventType(Enum):
    """Event types"""
    KEYBOARD = "keyboard"
    NONE = "none"


@dataclass
class Event:
    """Event data structure"""
    type: EventType
    key: Optional[str] = None


class EventDispatcher:
    """Polling event source for keyboard input"""

    def __init__(self, stream=None):
        self._stream = stream if stream is not None else sys.stdin
        self._saved_attrs = None
        self._is_open = False
        self._setup_input()

    def _setup_input(self):
        """Pick the platform key reader"""
        try:
            import msvcrt
            self._msvcrt = msvcrt
            self._has_msvcrt = True
        except ImportError:
            self._msvcrt = None
            self._has_msvcrt = False

    def open(self):
        """Put the terminal into cbreak mode (POSIX only)"""
        if self._is_open:
            return
        if not self._has_msvcrt and self._stream.isatty():
            import termios
            import tty
            fd = self._stream.fileno()
            self._saved_attrs = termios.tcgetattr(fd)
            tty.setcbreak(fd)
            logger.debug("Terminal switched to cbreak mode")
        self._is_open = True

    def close(self):
        """Restore the terminal attributes saved by open()"""
        if self._saved_attrs is not None:
            import termios
            termios.tcsetattr(self._stream.fileno(), termios.TCSADRAIN, self._saved_attrs)
            self._saved_attrs = None
            logger.debug("Terminal attributes restored")
        self._is_open = False

    def __enter__(self) -> "EventDispatcher":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def get_event(self, timeout: float = 0.0) -> Optional[Event]:
        """
        Wait up to ``timeout`` seconds for the next key

        Args:
            timeout: Timeout in seconds (0.0 = immediate return)

        Returns:
            Event or None if no event available

        Raises:
            OSError: the input device can no longer be read
        """
        if self._has_msvcrt:
            key = self._read_key_windows(timeout)
        else:
            key = self._read_key_posix(timeout)

        if key:
            return Event(type=EventType.KEYBOARD, key=key)
        return None

    def _read_key_windows(self, timeout: float) -> Optional[str]:
        """Read a key from keyboard (handles arrow keys)"""
        deadline = time.monotonic() + timeout
        while not self._msvcrt.kbhit():
            if time.monotonic() >= deadline:
                return None
            time.sleep(0.01)

        ch = self._msvcrt.getwch()
        # Handle arrow keys and special keys
        if ch in ("\x00", "\xe0"):
            ch2 = self._msvcrt.getwch()
            return ch + ch2
        return ch

    def _read_key_posix(self, timeout: float) -> Optional[str]:
        """Read a key from a POSIX terminal, assembling escape sequences"""
        import select

        fd = self._stream.fileno()
        ready, _, _ = select.select([fd], [], [], timeout)
        if not ready:
            return None

        ch = self._read_char(fd)
        if ch != "\x1b":
            return ch

        # ESC alone, or the start of an arrow key sequence
        sequence = ch
        while True:
            ready, _, _ = select.select([fd], [], [], ESCAPE_SEQUENCE_TIMEOUT)
            if not ready:
                break
            sequence += self._read_char(fd)
            if len(sequence) >= 3 and (sequence[-1].isalpha() or sequence[-1] == "~"):
                break
        return sequence

    @staticmethod
    def _read_char(fd: int) -> str:
        data = os.read(fd, 1)
        if not data:
            raise OSError("Input stream closed")
        # Multi-byte UTF-8 characters arrive one byte at a time
        while True:
            try:
                return data.decode("utf-8")
            except UnicodeDecodeError:
                if len(data) >= 4:
                    return data.decode("utf-8", errors="replace")
                data += os.read(fd, 1)
