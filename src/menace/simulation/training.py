"""
Training and play sessions.

- Self-play: the brain plays both seats, learning from each game
- Interactive: the brain plays a person, seat chosen at random per game
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, TYPE_CHECKING

import numpy as np

from menace.players.brain_player import BrainPlayer
from menace.simulation.runner import run
from menace.simulation.tally import Tally

if TYPE_CHECKING:
    from menace.games.game_state import GameState
    from menace.memory.brain import Brain
    from menace.players.base import Player

logger = logging.getLogger(__name__)

PROGRESS_INTERVAL = 10000


def self_play(
    brain: "Brain",
    game_factory: Callable[[], "GameState"],
    games: int,
    on_game: Optional[Callable[[int, int], None]] = None,
) -> Tally:
    """
    Play `games` games of the brain against itself.

    Both seats get a fresh BrainPlayer sharing the same brain, so every
    game updates the brain twice: once per side.

    Args:
        brain: Brain to train
        game_factory: Returns a new initial game state
        games: Number of games to play
        on_game: Optional callback(game_number, result) after each game

    Returns:
        Tally of the results
    """
    tally = Tally()
    for i in range(1, games + 1):
        state = game_factory()
        result = run(state, [BrainPlayer(brain), BrainPlayer(brain)])
        tally.record(result)
        if on_game is not None:
            on_game(i, result)
        if i % PROGRESS_INTERVAL == 0:
            logger.info("%d/%d games, %d states", i, games, len(brain))
    return tally


def play_interactive(
    brain: "Brain",
    game_factory: Callable[[], "GameState"],
    human: "Player",
    rng: np.random.Generator,
    persist: Optional[Callable[["Brain"], None]] = None,
    max_games: Optional[int] = None,
) -> Tally:
    """
    Play the brain against a human until input runs out.

    Each game the brain takes seat 1 or 2 at random. After every game
    `persist` is called (if given) so nothing is lost on termination.

    Returns:
        Tally of the results
    """
    tally = Tally()
    played = 0
    while max_games is None or played < max_games:
        state = game_factory()
        if int(rng.integers(1, 2, endpoint=True)) == 1:
            players = [BrainPlayer(brain), human]
        else:
            players = [human, BrainPlayer(brain)]

        try:
            result = run(state, players)
        except EOFError:
            logger.info("Input closed, ending interactive session")
            break

        tally.record(result)
        played += 1
        if persist is not None:
            persist(brain)
    return tally
