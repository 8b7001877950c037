"""Manages flashcard operations."""
import logging
import random
from os import PathLike
from typing import Dict, List, Optional, Sequence, Union

from .errors import (
    CardFileNotFoundError,
    CardFileWriteError,
    FlashcardError,
    InvalidLineFormatError,
    InvalidNumberFormatError,
)
from .flashcard import Flashcard
from .input_handlers import LineSource
from .log import LogSink
from .storage import StorageManager

# Logging setup
logger = logging.getLogger(__name__)

IMPORT_FLAG = "-import"
EXPORT_FLAG = "-export"

PathOrSource = Union[str, PathLike, LineSource]


class FlashcardManager:
    """
    Owns the term -> Flashcard collection and implements every study command.

    All user-facing text goes through the injected log sink; the exact strings
    and their order are what existing transcripts contain.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.flashcards: Dict[str, Flashcard] = {}
        self.rng = rng or random.Random()

    def __len__(self) -> int:
        return len(self.flashcards)

    def __contains__(self, term: object) -> bool:
        return term in self.flashcards

    def get(self, term: str) -> Optional[Flashcard]:
        return self.flashcards.get(term)

    def find_term_by_definition(self, definition: str) -> Optional[str]:
        """Return the first term whose definition is `definition`, if any."""
        for term, card in self.flashcards.items():
            if card.definition == definition:
                return term
        return None

    def add_card(self, source: LineSource, log: LogSink) -> bool:
        """
        Prompt for a term and definition and add them as a new card.

        Empty or duplicate input is reported and rejected without raising.

        Returns:
            bool: True if the card was added.
        """
        log.log_and_print("The card:")
        term = source.read_line()
        log.add_to_log(term)
        if not term:
            log.log_and_print("The term cannot be empty. Please enter a valid term.")
            return False
        if term in self.flashcards:
            log.log_and_print(f'The card "{term}" already exists.')
            return False

        log.log_and_print("The definition of the card:")
        definition = source.read_line()
        log.add_to_log(definition)
        if not definition:
            log.log_and_print("The definition cannot be empty. Please enter a valid term.")
            return False
        if self.find_term_by_definition(definition) is not None:
            log.log_and_print(f'The definition "{definition}" already exists.')
            return False

        self.flashcards[term] = Flashcard(definition)
        log.log_and_print(f'The pair ("{term}":"{definition}") has been added.')
        logger.info(f"Added flashcard {term!r}")
        return True

    def remove_card(self, source: LineSource, log: LogSink) -> bool:
        log.log_and_print("Which card?")
        term = source.read_line()
        log.add_to_log(term)
        if term in self.flashcards:
            del self.flashcards[term]
            log.log_and_print("The card has been removed.")
            logger.info(f"Removed flashcard {term!r}")
            return True
        log.log_and_print(f'Can\'t remove "{term}": there is no such card.')
        return False

    def reset_stats(self, log: LogSink) -> None:
        for card in self.flashcards.values():
            card.reset()
        log.log_and_print("Card statistics have been reset.")
        logger.info(f"Reset statistics of {len(self.flashcards)} flashcards")

    def hardest_terms(self) -> List[str]:
        """Terms tied at the highest non-zero mistake count, in insertion order."""
        max_mistakes = max((card.mistakes for card in self.flashcards.values()), default=0)
        if max_mistakes <= 0:
            return []
        return [term for term, card in self.flashcards.items()
                if card.mistakes == max_mistakes]

    def print_hardest_card(self, log: LogSink) -> None:
        hardest = self.hardest_terms()
        if not hardest:
            log.log_and_print("There are no cards with errors.")
            return

        mistakes = self.flashcards[hardest[0]].mistakes
        if len(hardest) == 1:
            log.log_and_print(
                f'The hardest card is "{hardest[0]}". '
                f"You have {mistakes} errors answering it.")
        else:
            quoted = ", ".join(f'"{term}"' for term in hardest)
            log.log_and_print(
                f"The hardest cards are {quoted}. "
                f"You have {mistakes} errors answering them.")

    @staticmethod
    def parse_count(raw: str) -> int:
        """
        Parse the number of quiz questions.

        Raises:
            InvalidNumberFormatError: If `raw` is not an integer.
        """
        digits = raw[1:] if raw.startswith("-") else raw
        if not (digits.isascii() and digits.isdigit()):
            raise InvalidNumberFormatError(raw)
        return int(raw)

    def ask_definitions(self, source: LineSource, log: LogSink) -> int:
        """
        Quiz the user on randomly chosen cards.

        A count that is not a number is reported and ends the quiz before any
        question is asked.

        Returns:
            int: Number of correct answers.
        """
        log.log_and_print("How many times to ask?")
        raw_count = source.read_line()
        try:
            count = self.parse_count(raw_count)
        except InvalidNumberFormatError as e:
            logger.warning(str(e))
            log.log_and_print(f"Invalid number format: {raw_count}")
            return 0
        log.add_to_log(raw_count)

        if not self.flashcards:
            log.log_and_print("There are no cards.")
            return 0

        correct = 0
        terms = list(self.flashcards)
        for _ in range(count):
            term = self.rng.choice(terms)
            card = self.flashcards[term]
            log.log_and_print(f'Print the definition of "{term}":')
            answer = source.read_line()
            log.add_to_log(answer)

            if answer == card.definition:
                log.log_and_print("Correct!")
                correct += 1
                continue

            other_term = self.find_term_by_definition(answer)
            if other_term is not None:
                log.log_and_print(
                    f'Wrong. The right answer is "{card.definition}", '
                    f'but your definition is correct for "{other_term}".')
            else:
                log.log_and_print(f'Wrong. The right answer is "{card.definition}".')
            card.record_mistake()

        logger.info(f"Quiz finished: {correct}/{count} correct")
        return correct

    def import_cards(self, target: PathOrSource, log: LogSink) -> int:
        """
        Load cards from a `term:definition:mistakes` file.

        Args:
            target (PathOrSource): A path, or a line source to ask the path from.
            log (LogSink): Sink for prompts and results.

        Returns:
            int: Number of cards loaded.

        Raises:
            CardFileNotFoundError: If the file cannot be opened.
            InvalidLineFormatError: If any line is malformed. No card from the
                file is applied in that case.
        """
        if isinstance(target, (str, PathLike)):
            return self._import_from_path(target, log)
        return self._run_prompted(self._import_from_path, target, log)

    def export_cards(self, target: PathOrSource, log: LogSink) -> int:
        """
        Save every card to a `term:definition:mistakes` file in insertion order.

        Raises:
            CardFileWriteError: If the file cannot be written.
        """
        if isinstance(target, (str, PathLike)):
            return self._export_to_path(target, log)
        return self._run_prompted(self._export_to_path, target, log)

    def _run_prompted(self, operation, source: LineSource, log: LogSink) -> int:
        log.log_and_print("File name:")
        file_name = source.read_line()
        log.add_to_log(file_name)
        try:
            return operation(file_name, log)
        except (FlashcardError, OSError):
            log.log_and_print(f"File not found: {file_name}")
            raise

    def _import_from_path(self, file_path: Union[str, PathLike], log: LogSink) -> int:
        log.log_and_print("File name:")
        log.add_to_log(str(file_path))
        try:
            loaded = StorageManager.load_from_text(file_path)
        except InvalidLineFormatError:
            log.log_and_print("Error writing to the file.")
            raise
        except OSError as e:
            log.log_and_print("File not found.")
            raise CardFileNotFoundError(str(file_path)) from e

        self.flashcards.update(loaded)
        log.log_and_print(f"{len(loaded)} cards have been loaded.")
        return len(loaded)

    def _export_to_path(self, file_path: Union[str, PathLike], log: LogSink) -> int:
        log.log_and_print("File name:")
        log.add_to_log(str(file_path))
        try:
            saved = StorageManager.save_to_text(self.flashcards, file_path)
        except OSError as e:
            log.log_and_print("Error writing to the file.")
            raise CardFileWriteError(str(file_path), str(e)) from e

        log.log_and_print(f"{saved} cards have been saved.")
        return saved

    def check_args(self, args: Sequence[str], export: bool, log: LogSink) -> bool:
        """
        Run the import (or export) requested on the command line.

        Scans `args` for `-import <path>`, or `-export <path>` when `export` is
        set, and calls the matching operation with the path.

        Returns:
            bool: True if an operation was run.
        """
        flag = EXPORT_FLAG if export else IMPORT_FLAG
        args = list(args)
        for index, arg in enumerate(args):
            if arg != flag:
                continue
            if index + 1 >= len(args):
                logger.warning(f"{flag} given without a file name, ignoring it")
                return False
            path = args[index + 1]
            if export:
                self.export_cards(path, log)
            else:
                self.import_cards(path, log)
            return True
        return False
