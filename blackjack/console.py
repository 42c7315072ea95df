"""Text input and output for the game."""

from __future__ import annotations

import sys
from typing import TextIO


class Console:
    """Reads answers and writes messages on a pair of text streams."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin
        self._stdout = stdout

    @property
    def _in(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def _out(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def ask(self, prompt: str) -> str:
        """Show a prompt and return the next line of input without its newline."""
        self._out.write(prompt)
        self._out.flush()
        line = self._in.readline()
        if not line:
            raise EOFError("no more input")
        return line.rstrip("\r\n")

    def say(self, text: str) -> None:
        self._out.write(f"{text}\n")