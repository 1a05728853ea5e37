"""
Command-line interface for MENACE training and play.
"""

import argparse
import logging
from typing import List, Optional

from menace.memory import Brain
from menace.players import HumanPlayer
from menace.simulation import play_interactive, self_play
from menace.utils.config import Config, DEFAULT_BRAIN_PATH, DEFAULT_GAMES, GAMES
from menace.utils.factory import create_brain, create_rng, game_factory

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="menace",
        description="Train MENACE by self-play, or play against it",
    )
    parser.add_argument(
        "--brain", "-b",
        default=str(DEFAULT_BRAIN_PATH),
        help=f"Brain file to use (default: {DEFAULT_BRAIN_PATH})",
    )
    parser.add_argument(
        "--interactive", "-i",
        action="store_true",
        help="Play interactively against the AI",
    )
    parser.add_argument(
        "--read-only", "-r",
        action="store_true",
        help="Do not save the brain after playing",
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Random seed (default: current time)",
    )
    parser.add_argument(
        "--games", "-n",
        type=int,
        default=DEFAULT_GAMES,
        help=f"Number of self-play games (default: {DEFAULT_GAMES})",
    )
    parser.add_argument(
        "--game", "-g",
        choices=list(GAMES.keys()),
        default="tic_tac_toe",
        help="Game to play (default: tic_tac_toe)",
    )
    parser.add_argument(
        "--initial-beads",
        type=int,
        default=None,
        help="Beads per option for newly seen states (default: 256 self-play, stored value interactive)",
    )
    parser.add_argument(
        "--clamp",
        action="store_true",
        help="Never let a bead count drop below zero",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log progress and persistence",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> Config:
    return Config(
        game_name=args.game,
        brain_path=args.brain,
        interactive=args.interactive,
        read_only=args.read_only,
        seed=args.seed,
        games=args.games,
        initial_beads=args.initial_beads,
        clamp_at_zero=args.clamp,
    )


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = build_config(args)
    except ValueError as e:
        raise SystemExit(f"error: {e}") from e

    logger.info("Seed %d", config.seed)
    rng = create_rng(config.seed)
    brain = create_brain(config, rng)
    new_game = game_factory(config.game_name)

    if config.interactive:
        def persist(b: Brain) -> None:
            b.persist(config.brain_path)

        try:
            play_interactive(
                brain,
                new_game,
                HumanPlayer(),
                rng,
                persist=None if config.read_only else persist,
            )
        except KeyboardInterrupt:
            print("\nInterrupted")
        return

    tally = self_play(brain, new_game, config.games)
    print(tally.summary(new_game().names))
    if not config.read_only:
        brain.persist(config.brain_path)


if __name__ == "__main__":
    main()
