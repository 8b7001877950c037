"""Handles storage operations for flashcards."""
import logging
from os import PathLike
from typing import Dict, Optional, Tuple, Union

from .errors import InvalidLineFormatError
from .flashcard import Flashcard

logger = logging.getLogger(__name__)

FIELD_DELIMITER = ":"
FIELD_COUNT = 3

PathType = Union[str, PathLike]


class StorageManager:
    @staticmethod
    def parse_line(line: str, line_number: Optional[int] = None) -> Tuple[str, Flashcard]:
        """
        Parse one `term:definition:mistakes` record.

        The split is strict: a term or definition containing the delimiter
        produces the wrong field count and is rejected.

        Args:
            line (str): The record, without its line break.
            line_number (int, optional): 1-based position, used in error messages.

        Returns:
            Tuple[str, Flashcard]: The term and its flashcard.

        Raises:
            InvalidLineFormatError: If the record is malformed.
        """
        fields = line.split(FIELD_DELIMITER)
        if len(fields) != FIELD_COUNT:
            raise InvalidLineFormatError(
                line, line_number,
                f"expected {FIELD_COUNT} fields, got {len(fields)}")

        term, definition, raw_mistakes = fields
        if not term:
            raise InvalidLineFormatError(line, line_number, "term is empty")
        if not (raw_mistakes.isascii() and raw_mistakes.isdigit()):
            raise InvalidLineFormatError(
                line, line_number, "mistakes must be a non-negative integer")
        return term, Flashcard(definition, int(raw_mistakes))

    @staticmethod
    def format_line(term: str, card: Flashcard) -> str:
        return FIELD_DELIMITER.join((term, card.definition, str(card.mistakes)))

    @staticmethod
    def load_from_text(file_path: PathType) -> Dict[str, Flashcard]:
        """Load flashcards from a flat text file.

        Nothing is returned unless every line parses, so callers never see a
        partial load.

        Raises:
            FileNotFoundError: If the file does not exist
            InvalidLineFormatError: If any line is malformed or not UTF-8
        """
        cards: Dict[str, Flashcard] = {}
        try:
            with open(file_path, "rb") as file:
                content = file.read().decode("utf-8")
            for line_number, line in enumerate(content.splitlines(), start=1):
                term, card = StorageManager.parse_line(line, line_number)
                cards[term] = card
        except FileNotFoundError:
            logger.error(f"File not found: {file_path}")
            raise
        except UnicodeDecodeError as e:
            raw = e.object
            line_start = raw.rfind(b"\n", 0, e.start) + 1
            line_end = raw.find(b"\n", e.start)
            bad_line = raw[line_start:line_end if line_end != -1 else len(raw)]
            error = InvalidLineFormatError(
                bad_line.decode("utf-8", errors="replace").rstrip("\r"),
                raw.count(b"\n", 0, e.start) + 1,
                "line is not valid UTF-8")
            logger.error(f"Invalid card file {file_path}: {error}")
            raise error from e
        except InvalidLineFormatError as e:
            logger.error(f"Invalid card file {file_path}: {e}")
            raise
        logger.info(f"Read {len(cards)} flashcards from {file_path}")
        return cards

    @staticmethod
    def save_to_text(cards: Dict[str, Flashcard], file_path: PathType) -> int:
        """Save flashcards to a flat text file, one record per line.

        Args:
            cards (Dict[str, Flashcard]): Cards to save, written in iteration order
            file_path (PathType): Path of the text file to write

        Returns:
            int: Number of records written

        Raises:
            OSError: If there is an error writing to the file
        """
        try:
            with open(file_path, "w", encoding="utf-8", newline="\n") as file:
                for term, card in cards.items():
                    file.write(StorageManager.format_line(term, card) + "\n")
            logger.info(f"Saved {len(cards)} flashcards to {file_path}")
        except OSError as e:
            logger.error(f"Error saving flashcards to {file_path}: {str(e)}")
            raise
        return len(cards)
