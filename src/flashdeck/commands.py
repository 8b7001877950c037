from typing import Optional
from enum import Enum


class CommandType(Enum):
    """Menu actions.

    Values:
        ADD: Add a card
        REMOVE: Remove a card
        IMPORT: Load cards from a file
        EXPORT: Save cards to a file
        ASK: Quiz the user
        EXIT: Leave the application
        LOG: Save the session transcript
        HARDEST_CARD: Report the cards with the most mistakes
        RESET_STATS: Zero every mistake counter
    """

    ADD = 'add'
    REMOVE = 'remove'
    IMPORT = 'import'
    EXPORT = 'export'
    ASK = 'ask'
    EXIT = 'exit'
    LOG = 'log'
    HARDEST_CARD = 'hardest card'
    RESET_STATS = 'reset stats'


ACTION_PROMPT = (
    "Input the action ("
    + ", ".join(command_type.value for command_type in CommandType)
    + "):"
)


class Command:
    """Menu action parser.

    Normalises the raw line typed at the action prompt: case is ignored and
    runs of whitespace collapse, so "Hardest   Card" is HARDEST_CARD.

    Attributes:
        raw: The line as typed
        command: The normalised action name

    Properties:
        is_valid: Whether the action is recognized
        type: Parsed command type
    """

    def __init__(self, raw_input: str):
        self.raw = raw_input
        self.command = ' '.join(raw_input.split()).lower()

    @property
    def is_valid(self) -> bool:
        return self.type is not None

    @property
    def type(self) -> Optional[CommandType]:
        try:
            return CommandType(self.command)
        except ValueError:
            return None
