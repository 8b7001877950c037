"""Flashcard class definition."""
from typeguard import typechecked

import logging
logger = logging.getLogger(__name__)


class Flashcard:
    """Represents a flashcard: a definition and how often it was answered wrong."""

    @typechecked
    def __init__(self, definition: str, mistakes: int = 0):
        """
        Initialize a Flashcard instance.

        Args:
            definition (str): The definition the user has to recall.
            mistakes (int, optional): Wrong answers given so far. Defaults to 0.
        """
        self.definition: str = definition
        self.mistakes: int = mistakes

    def record_mistake(self) -> int:
        """Count one more wrong answer and return the new total."""
        self.mistakes += 1
        logger.debug(f"Mistakes for {self.definition!r} now {self.mistakes}")
        return self.mistakes

    def reset(self) -> None:
        self.mistakes = 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Flashcard):
            return NotImplemented
        return (self.definition, self.mistakes) == (other.definition, other.mistakes)

    def __repr__(self) -> str:
        return f"Flashcard(definition={self.definition!r}, mistakes={self.mistakes})"
