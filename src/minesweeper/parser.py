"""
Parsing of player input lines into game commands.

Accepted forms::

    3,4        reveal row 3, column 4
    3 4        same, whitespace separated
    f 3,4      flag (also "flag 3 4")
    -3,-4      flag, using negated coordinates
    q          quit (also "quit" / "exit")

Coordinates are not bounds-checked here; the board rejects them.
"""
import re
from dataclasses import dataclass
from typing import Union

from .errors import CommandError


@dataclass(frozen=True)
class Command:
    """A parsed player action."""

    row: int
    col: int
    is_flag: bool = False


class _Quit:
    def __repr__(self) -> str:
        return "QUIT"


QUIT = _Quit()

QUIT_WORDS = frozenset({"q", "quit", "exit"})
FLAG_WORDS = frozenset({"f", "flag"})

_COORDINATES = re.compile(r"^(-?\d+)\s*[,\s]\s*(-?\d+)$")


def parse_command(text: str) -> Union[Command, _Quit]:
    """
    Parse one line of player input.

    Returns:
        A Command, or QUIT.

    Raises:
        CommandError: If the line is empty or not understood.
    """
    line = text.strip().lower()
    if not line:
        raise CommandError("Empty command")
    if line in QUIT_WORDS:
        return QUIT

    is_flag = False
    word, _, rest = line.partition(" ")
    if word in FLAG_WORDS:
        is_flag = True
        line = rest.strip()

    match = _COORDINATES.match(line)
    if match is None:
        raise CommandError(f"Expected 'row,col', got {text.strip()!r}")
    row, col = int(match.group(1)), int(match.group(2))

    # Old-style flag: both coordinates negated
    if row < 0 or col < 0:
        if is_flag or row > 0 or col > 0:
            raise CommandError(f"Negative coordinates in {text.strip()!r}")
        return Command(-row, -col, is_flag=True)

    return Command(row, col, is_flag=is_flag)
