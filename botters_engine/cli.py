"""
Command-line bot.

Usage
-----
    python -m botters_engine --hero HULK --log-level DEBUG

Reads the game description from stdin once, then one turn at a time,
and writes exactly one command line per turn to stdout.  Diagnostics go
to stderr through :mod:`logging`.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from botters_engine.core.protocol import ProtocolError, read_game_setup, read_turn
from botters_engine.core.recorder import DecisionRecorder
from botters_engine.players.hero_controller import HeroController
from botters_engine.strategies.tactics import STRATEGY_ORDER, default_strategies
from botters_engine.utils.constants import DEFAULT_HERO, HERO_TYPES

logger = logging.getLogger("botters_engine.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="botters_engine",
        description="Utility-scored hero bot for a two-team lane game.",
    )
    parser.add_argument(
        "--hero",
        default=DEFAULT_HERO,
        type=str.upper,
        choices=HERO_TYPES,
        help=f"Hero to pick on the first turn (default: {DEFAULT_HERO})",
    )
    parser.add_argument(
        "--strategies",
        default=None,
        help="Comma-separated strategy names, in tie-break order "
        f"(default: all of {', '.join(cls.__name__ for cls in STRATEGY_ORDER)})",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Verbosity of the stderr log (default: INFO)",
    )
    parser.add_argument(
        "--no-messages",
        action="store_true",
        help="Do not append display messages to commands",
    )
    return parser


def run(controller: HeroController, stdin: TextIO, stdout: TextIO) -> int:
    """Play until stdin runs out.  Returns the number of turns played."""
    lines = iter(stdin)
    setup = read_game_setup(lines)
    logger.info("Playing as team %d with %s", setup.my_team, controller.hero_type)

    turns = 0
    while True:
        try:
            snapshot = read_turn(lines, setup)
        except EOFError:
            break
        if snapshot.is_initialisation_round:
            command = controller.spawn()
        else:
            command = controller.tick(snapshot)
        stdout.write(command.render() + "\n")
        stdout.flush()
        turns += 1
    return turns


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    args = build_parser().parse_args(argv)
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    names = None
    if args.strategies:
        names = [n.strip() for n in args.strategies.split(",") if n.strip()]
    try:
        strategies = default_strategies(names)
    except ValueError as e:
        logger.error("%s", e)
        return 2

    recorder = DecisionRecorder()
    controller = HeroController(
        strategies=strategies,
        hero_type=args.hero,
        messages=not args.no_messages,
        recorder=recorder,
    )

    try:
        turns = run(controller, stdin, stdout)
    except ProtocolError as e:
        logger.error("Bad game input: %s", e)
        return 1

    record = recorder.build_record()
    logger.info("Input closed after %d turns; wins per strategy: %s", turns, record.strategy_counts())
    return 0


if __name__ == "__main__":
    sys.exit(main())
