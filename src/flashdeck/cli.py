"""Command-line entry point for the flashcard study tool.

Example usage:
    flashdeck                               # start with an empty deck
    flashdeck -import cards.txt             # load cards before the first action
    flashdeck -import in.txt -export out.txt  # ... and save them again on exit
    flashdeck --seed 7 --log-level DEBUG
"""
import logging
import random
from typing import Callable, Dict, Optional, Sequence

import click
from dotenv import load_dotenv

from .commands import ACTION_PROMPT, Command, CommandType
from .errors import FlashcardError, InputExhaustedError
from .input_handlers import ConsoleInput, LineSource
from .log import LogManager
from .manager import FlashcardManager
from .settings import AppSettings

logger = logging.getLogger(__name__)


class FlashcardApp:
    """Menu loop: reads an action, runs it, repeats until `exit`."""

    def __init__(self, manager: FlashcardManager, source: LineSource, log: LogManager):
        self.manager = manager
        self.source = source
        self.log = log
        self.handlers: Dict[CommandType, Callable[[], object]] = {
            CommandType.ADD: lambda: manager.add_card(source, log),
            CommandType.REMOVE: lambda: manager.remove_card(source, log),
            CommandType.IMPORT: lambda: manager.import_cards(source, log),
            CommandType.EXPORT: lambda: manager.export_cards(source, log),
            CommandType.ASK: lambda: manager.ask_definitions(source, log),
            CommandType.LOG: lambda: log.save_log(source),
            CommandType.HARDEST_CARD: lambda: manager.print_hardest_card(log),
            CommandType.RESET_STATS: lambda: manager.reset_stats(log),
        }

    def handle(self, command: Command) -> bool:
        """
        Run one menu action.

        Returns:
            bool: True if the loop should stop.
        """
        if command.type is CommandType.EXIT:
            self.log.log_and_print("Bye bye!")
            return True
        if not command.is_valid:
            self.log.log_and_print(f'Unknown action "{command.raw}".')
            return False

        logger.debug(f"Running action: {command.type.value}")
        try:
            self.handlers[command.type]()
        except InputExhaustedError:
            raise
        except FlashcardError as e:
            logger.error(f"Action {command.type.value!r} failed: {str(e)}")
        return False

    def run(self) -> None:
        while True:
            try:
                self.log.log_and_print(ACTION_PROMPT)
                raw = self.source.read_line()
                self.log.add_to_log(raw)
                if self.handle(Command(raw)):
                    return
                self.log.log_and_print("")
            except InputExhaustedError:
                logger.info("Input exhausted, leaving the menu")
                self.log.log_and_print("Bye bye!")
                return


def configure_logging(settings: AppSettings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format=settings.log_format,
        force=True)


@click.command(context_settings={"ignore_unknown_options": True})
@click.option('--log-level', default=None,
              help='Diagnostic log level (default: WARNING, or FLASHDECK_LOG_LEVEL).')
@click.option('--seed', type=int, default=None,
              help='Seed for picking quiz questions (or FLASHDECK_SEED).')
@click.argument('args', nargs=-1, type=click.UNPROCESSED)
def main(log_level: Optional[str], seed: Optional[int], args: Sequence[str]) -> None:
    """
    Study flashcards interactively.

    Pass `-import PATH` to load cards at startup and `-export PATH` to save
    them when you exit.
    """
    load_dotenv()
    try:
        settings = AppSettings.from_env(log_level=log_level, seed=seed)
    except ValueError as e:
        raise click.BadParameter(str(e))
    configure_logging(settings)
    logger.info("Starting flashdeck")

    log = LogManager()
    manager = FlashcardManager(rng=random.Random(settings.seed))
    app = FlashcardApp(manager, ConsoleInput(log.console), log)

    try:
        manager.check_args(args, False, log)
    except FlashcardError as e:
        logger.error(f"Failed to import cards: {str(e)}")
        raise SystemExit(1)

    app.run()

    try:
        manager.check_args(args, True, log)
    except FlashcardError as e:
        logger.error(f"Failed to export cards: {str(e)}")
        raise SystemExit(1)
    logger.info("flashdeck closed")


if __name__ == "__main__":
    main()
