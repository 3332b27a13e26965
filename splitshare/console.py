"""Line- and token-oriented terminal input and output."""

import re
import sys
from typing import TextIO, Optional

_NON_SPACE = re.compile(r"\S+")


def capitalize(text: str) -> str:
    """Lower-case the text and upper-case its first character."""
    lowered = text.lower()
    return lowered[:1].upper() + lowered[1:]


class Console:
    """Reads whitespace-separated tokens and whole lines, and writes output.

    Tokens leave the rest of their line pending, so a following
    ``read_line`` returns what remains of that line.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._pending = ""

    def write(self, *args) -> None:
        """Write the string form of every argument, then flush."""
        self._stdout.write("".join(str(arg) for arg in args))
        self._stdout.flush()

    def _fill(self) -> None:
        line = self._stdin.readline()
        if not line:
            raise EOFError("end of input")
        self._pending += line

    def read_token(self) -> str:
        """Return the next whitespace-delimited token."""
        while not self._pending.strip():
            self._pending = ""
            self._fill()
        match = _NON_SPACE.search(self._pending)
        self._pending = self._pending[match.end():]
        return match.group()

    def read_line(self) -> str:
        """Return the rest of the current line, or the next line if none is pending."""
        if not self._pending:
            self._fill()
        line, _, self._pending = self._pending.partition("\n")
        return line

    def read_float(self) -> float:
        """Read a token and parse it as a number."""
        word = self.read_token()
        try:
            return float(word)
        except ValueError:
            raise ValueError(f"not a number: {word!r}") from None