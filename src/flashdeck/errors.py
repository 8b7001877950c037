"""Exception classes for flashcard operations."""
from typing import Optional


class FlashcardError(Exception):
    """Base exception class for Flashcard-related errors."""
    pass


class CardFileNotFoundError(FlashcardError, FileNotFoundError):
    """Exception raised when a card file to import cannot be opened."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"File not found: {path}")


class CardFileWriteError(FlashcardError, OSError):
    """Exception raised when cards or the transcript cannot be written."""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        message = f"Error writing to {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class InvalidLineFormatError(FlashcardError, ValueError):
    """Exception raised when a line of a card file is not `term:definition:mistakes`."""

    def __init__(self, line: str, line_number: Optional[int] = None,
                 reason: str = "expected term:definition:mistakes"):
        self.line = line
        self.line_number = line_number
        self.reason = reason
        location = f" (line {line_number})" if line_number is not None else ""
        super().__init__(f"Invalid line format{location}: {line!r}, {reason}")


class InvalidNumberFormatError(FlashcardError, ValueError):
    """Exception raised when a quiz repeat count is not an integer."""

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"Invalid number format: {raw}")


class InputExhaustedError(FlashcardError, EOFError):
    """Exception raised when a line source has no more input."""
    pass
