"""A secondary console window fed through a temporary file, and text width."""

from __future__ import annotations

import os
import subprocess
import tempfile
from typing import IO

from wcwidth import wcwidth

from gamelib.utils.ids import uuid4_str


class Terminal:
    """Opens an ``xterm`` that follows a temporary file and writes lines to it."""

    def __init__(self, title: str = "Console Window") -> None:
        self.title = title
        self.path = os.path.join(
            tempfile.gettempdir(), f"game_console_output_{uuid4_str()}.txt"
        )
        self._out: IO[str] | None = open(self.path, "w", encoding="utf-8")
        self._process: subprocess.Popen[bytes] | None = None
        try:
            self._process = subprocess.Popen(
                ["xterm", "-T", title, "-hold", "-e", "tail", "-f", self.path],
                stdin=subprocess.DEVNULL,
            )
        except OSError:
            self._process = None
        self.write(f"=== {title} Opened (Unix) ===")

    def write(self, message: str) -> None:
        """Append one line to the window."""
        if self._out is not None:
            self._out.write(message + "\n")
            self._out.flush()

    def close(self) -> None:
        """Stop writing and delete the temporary file."""
        if self._out is not None:
            self._out.close()
            self._out = None
        if self.path and os.path.exists(self.path):
            os.remove(self.path)

    def __enter__(self) -> Terminal:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def display_width(text: str | bytes) -> int:
    """Columns ``text`` takes in a monospace terminal; invalid UTF-8 gives 0."""
    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError:
            return 0
    return sum(w for w in (wcwidth(ch) for ch in text) if w > 0)