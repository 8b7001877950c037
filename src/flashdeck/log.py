"""Echo sink that prints prompts and keeps the session transcript."""
import logging
from typing import List, Optional

from rich.console import Console
from typing_extensions import Protocol

from .errors import CardFileWriteError
from .input_handlers import LineSource

logger = logging.getLogger(__name__)


class LogSink(Protocol):
    """Interface the flashcard manager reports through."""

    def log_and_print(self, message: str) -> None:
        """Show a message to the user and append it to the transcript."""
        ...

    def add_to_log(self, line: str) -> None:
        """Append raw user input to the transcript without printing it."""
        ...


class LogManager:
    """
    Prints every message to the console and records it, together with the
    user's answers, so the whole session can be saved with `save_log`.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(highlight=False)
        self.transcript: List[str] = []

    def log_and_print(self, message: str) -> None:
        # Card text is printed literally.
        self.console.print(message, markup=False, highlight=False, emoji=False,
                           soft_wrap=True)
        self.transcript.append(message)
        logger.debug(f"Printed: {message}")

    def add_to_log(self, line: str) -> None:
        self.transcript.append(line)
        logger.debug(f"Recorded input: {line}")

    def clear(self) -> None:
        self.transcript.clear()

    def save_log(self, source: LineSource) -> int:
        """
        Ask for a file name and write the transcript to it.

        Args:
            source (LineSource): Where the file name is read from.

        Returns:
            int: Number of transcript lines written.

        Raises:
            CardFileWriteError: If the file cannot be written.
        """
        self.log_and_print("File name:")
        file_name = source.read_line()
        self.add_to_log(file_name)
        # The confirmation message is not part of the saved file.
        lines = list(self.transcript)
        try:
            with open(file_name, "w", encoding="utf-8", newline="\n") as file:
                for line in lines:
                    file.write(line + "\n")
        except OSError as e:
            logger.error(f"Error saving the log to {file_name}: {str(e)}")
            self.log_and_print("Error writing to the file.")
            raise CardFileWriteError(file_name, str(e)) from e
        self.log_and_print("The log has been saved.")
        logger.info(f"Saved {len(lines)} transcript lines to {file_name}")
        return len(lines)
