"""Test doubles shared by the test modules."""
from typing import List, Tuple


class RecordingLog:
    """Log sink that remembers every call in order."""

    def __init__(self):
        self.calls: List[Tuple[str, str]] = []

    def log_and_print(self, message: str) -> None:
        self.calls.append(("log_and_print", message))

    def add_to_log(self, line: str) -> None:
        self.calls.append(("add_to_log", line))

    @property
    def printed(self) -> List[str]:
        return [arg for method, arg in self.calls if method == "log_and_print"]

    @property
    def recorded(self) -> List[str]:
        return [arg for method, arg in self.calls if method == "add_to_log"]
