"""Interactive flashcard study tool."""
from .errors import (
    CardFileNotFoundError,
    CardFileWriteError,
    FlashcardError,
    InputExhaustedError,
    InvalidLineFormatError,
    InvalidNumberFormatError,
)
from .flashcard import Flashcard
from .input_handlers import ConsoleInput, LineSource, ScriptedInput
from .log import LogManager, LogSink
from .manager import FlashcardManager

__version__ = "0.1.0"

__all__ = [
    "CardFileNotFoundError",
    "CardFileWriteError",
    "ConsoleInput",
    "Flashcard",
    "FlashcardError",
    "FlashcardManager",
    "InputExhaustedError",
    "InvalidLineFormatError",
    "InvalidNumberFormatError",
    "LineSource",
    "LogManager",
    "LogSink",
    "ScriptedInput",
]
