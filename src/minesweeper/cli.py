"""
Console Minesweeper.

Usage:
    minesweeper [--width W] [--height H] [--mines N] [--seed S]
    minesweeper --preset {beginner,intermediate,expert}

Enter ``row,col`` to reveal, ``f row,col`` (or ``-row,-col``) to toggle a
flag and ``q`` to quit.
"""
import argparse
import logging
import random
import sys
from typing import Callable, Iterable, List, Optional

from .board import BEGINNER, EXPERT, INTERMEDIATE, BoardConfig
from .errors import CommandError, MinesweeperError, OutOfBounds
from .game import Game
from .parser import QUIT, parse_command
from .render import render_game


logger = logging.getLogger(__name__)

PRESETS = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}

PROMPT = "enter: row,col: "

Output = Callable[[str], None]


def play(
    config: BoardConfig,
    lines: Iterable[str],
    rng: Optional[random.Random] = None,
    out: Output = print,
) -> Game:
    """
    Run one game, reading a command per line until quit or game over.

    Bad input and off-board coordinates are reported and the loop keeps
    going.

    Returns:
        The game in whatever state the loop left it.
    """
    game = Game(config, rng=rng, on_change=lambda g: out(render_game(g)))
    out(render_game(game))

    for line in lines:
        try:
            command = parse_command(line)
        except CommandError as exc:
            out(f"{exc}. {PROMPT}")
            continue
        if command is QUIT:
            logger.debug("Player quit")
            break

        try:
            if command.is_flag:
                game.flag(command.row, command.col)
            else:
                game.reveal(command.row, command.col)
        except OutOfBounds as exc:
            out(f"{exc}. {PROMPT}")
            continue

        if game.over:
            break

    if game.is_won:
        out(f"win!   time: {game.solve_time}")
    elif game.is_lost:
        out("loss!")
    return game


def _prompted_lines(prompt: str) -> Iterable[str]:
    while True:
        try:
            yield input(prompt)
        except EOFError:
            return


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play Minesweeper in the terminal"
    )
    parser.add_argument("--width", type=int, default=None, help="Board columns")
    parser.add_argument(
        "--height", type=int, default=None,
        help="Board rows (default: width scaled by the golden ratio)",
    )
    parser.add_argument(
        "--mines", type=int, default=None,
        help="Number of mines (default: 15%% of tiles)",
    )
    parser.add_argument(
        "--preset", choices=sorted(PRESETS), default=None,
        help="Use a preset board instead of --width/--height/--mines",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine layout"
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and run the game loop."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        if args.preset is not None:
            config = PRESETS[args.preset]
        else:
            config = BoardConfig.from_defaults(args.width, args.height, args.mines)
    except MinesweeperError as exc:
        parser.error(str(exc))

    rng = random.Random(args.seed) if args.seed is not None else None
    logger.info(
        "Starting %dx%d game with %d mines",
        config.height, config.width, config.num_mines,
    )
    play(config, _prompted_lines(PROMPT), rng=rng)
    return 0


if __name__ == "__main__":
    sys.exit(main())
