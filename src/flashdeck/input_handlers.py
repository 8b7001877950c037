"""Module for pulling user input one line at a time."""
from typing import Iterable, List, Optional, Union

from rich.console import Console
from typing_extensions import Protocol

from .errors import InputExhaustedError


class LineSource(Protocol):
    """Anything the manager can read a line of user input from."""

    def read_line(self) -> str:
        ...


class ScriptedInput:
    """Serves a fixed sequence of lines, e.g. for tests or piped scripts."""

    def __init__(self, lines: Union[str, Iterable[str]]):
        if isinstance(lines, str):
            lines = lines.splitlines()
        self._lines: List[str] = list(lines)
        self._position = 0

    def read_line(self) -> str:
        if self._position >= len(self._lines):
            raise InputExhaustedError("No more input lines")
        line = self._lines[self._position]
        self._position += 1
        return line

    @property
    def remaining(self) -> int:
        return len(self._lines) - self._position


class ConsoleInput:
    """Reads lines typed at the terminal."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(highlight=False)

    def read_line(self) -> str:
        """Read one line; EOF (Ctrl-D) is reported as InputExhaustedError."""
        try:
            return self.console.input()
        except EOFError as e:
            raise InputExhaustedError("End of input") from e
