"""
Classification of interactive input into commands.

Kept free of side effects; the CLI driver decides what a command does.
"""

from dataclasses import dataclass
from typing import Union

QUIT_WORDS = ("q", "quit")
HELP_WORDS = ("h", "help")


@dataclass(frozen=True)
class Quit:
    """End the interactive session."""


@dataclass(frozen=True)
class Help:
    """Show the help text."""


@dataclass(frozen=True)
class AddInterval:
    """Add a break time given as text."""
    text: str


Command = Union[Quit, Help, AddInterval]


def classify_command(text: str) -> Command:
    """
    Map one line of user input to a command.

    Anything that is neither a quit nor a help word is treated as a break
    time candidate and validated later by the engine.
    """
    stripped = text.strip()
    if stripped in QUIT_WORDS:
        return Quit()
    if stripped in HELP_WORDS:
        return Help()
    return AddInterval(stripped)
