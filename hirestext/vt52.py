"""VT52 escape-sequence interpreter that drives a high-resolution text screen.

Supported sequences (ESC is character 27):

* ``ESC Y <row+32> <col+32>``: direct cursor addressing;
* ``ESC A`` / ``ESC B`` / ``ESC C`` / ``ESC D``: cursor up, down, right, left;
* ``ESC H``: cursor home;
* ``ESC J``: erase to end of screen;
* ``ESC E``: clear screen;
* ``ESC K``: erase to end of line;
* ``ESC p`` / ``ESC q``: inverse video on / off;
* ``ESC S``: the next byte is ignored.

Any other character after ESC is dropped and text mode resumes.
Rows and columns count from 0.
"""

from __future__ import annotations

import contextlib
import enum
from typing import Iterator, Union

from .screen import HiResTextScreen

_ESCAPE = 27
_CARRIAGE_RETURN = 13
_NEWLINE = 10
_COORDINATE_BIAS = 32

Char = Union[int, str]


class Vt52State(enum.Enum):
    """States of the escape-sequence state machine."""

    TEXT = 0
    GOT_ESC = 1
    WANT_LINE = 2
    WANT_COL = 3
    IGNORE_NEXT = 4


def _code_of(ch: Char) -> int:
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError("expected a single character")
        code = ord(ch)
    else:
        code = ch
    if not 0 <= code <= 0xFF:
        raise ValueError(f"character code {code} is outside 0..255")
    return code


class Vt52Interpreter:
    """Feeds characters to a screen, executing the VT52 sequences among them.

    The interpreter is also a writable text stream, so that ``print`` output
    can be sent to the screen with :meth:`redirect`.
    """

    def __init__(self, screen: HiResTextScreen) -> None:
        self.screen = screen
        self.state = Vt52State.TEXT
        self.line = 0
        self.bytes_to_ignore = 0
        self.reset()

    def reset(self) -> None:
        """Return to text mode, forgetting any partial sequence."""
        self.state = Vt52State.TEXT
        self.line = 0
        self.bytes_to_ignore = 0

    def process_char(self, ch: Char) -> None:
        """Handle one character: display it or advance an escape sequence."""
        code = _code_of(ch)

        if self.state is Vt52State.IGNORE_NEXT:
            self.bytes_to_ignore -= 1
            if self.bytes_to_ignore <= 0:
                self.bytes_to_ignore = 0
                self.state = Vt52State.TEXT
            return

        screen = self.screen
        screen.remove_cursor()

        if self.state is Vt52State.TEXT:
            if code == _ESCAPE:
                self.state = Vt52State.GOT_ESC
            else:
                screen.write_char(code)
            return

        if self.state is Vt52State.GOT_ESC:
            self._process_command(code)
            return

        if self.state is Vt52State.WANT_LINE:
            self.line = (code - _COORDINATE_BIAS) & 0xFF
            self.state = Vt52State.WANT_COL
            return

        if self.state is Vt52State.WANT_COL:
            screen.move_cursor((code - _COORDINATE_BIAS) & 0xFF, self.line)
        self.state = Vt52State.TEXT

    def _process_command(self, code: int) -> None:
        screen = self.screen
        state = screen.state
        command = chr(code)
        self.state = Vt52State.TEXT

        if command == "Y":
            self.state = Vt52State.WANT_LINE
        elif command == "K":
            screen.clrtoeol()
        elif command == "D":
            if state.text_pos_x:
                state.text_pos_x -= 1
        elif command == "H":
            screen.home()
        elif command == "J":
            screen.clrtobot()
        elif command == "E":
            screen.home()
            screen.clrtobot()
        elif command == "A":
            if state.text_pos_y:
                state.text_pos_y -= 1
        elif command == "B":
            if state.text_pos_y < 23:
                state.text_pos_y += 1
        elif command == "C":
            if state.text_pos_x < state.hi_res_width - 1:
                state.text_pos_x += 1
        elif command == "S":
            self.state = Vt52State.IGNORE_NEXT
            self.bytes_to_ignore = 1
        elif command == "p":
            screen.inverse_video = True
        elif command == "q":
            screen.inverse_video = False

    def write(self, text: Union[str, bytes]) -> int:
        """Process every character of ``text`` and return how many there were.

        A carriage return is taken as a newline, as console output does.
        """
        data = text.encode("latin-1") if isinstance(text, str) else bytes(text)
        for code in data:
            self.process_char(_NEWLINE if code == _CARRIAGE_RETURN else code)
        return len(text)

    def flush(self) -> None:
        """Nothing is buffered; present for the stream protocol."""

    @contextlib.contextmanager
    def redirect(self) -> Iterator["Vt52Interpreter"]:
        """Send standard output to the screen while the block runs.

        Output is only redirected when the screen was opened with
        ``redirect_printf`` set and has not been closed.
        """
        if self.screen.state.redirect_printf:
            with contextlib.redirect_stdout(self):
                yield self
        else:
            yield self