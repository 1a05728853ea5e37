"""
Factory functions for creating games, random generators and brains.
"""

from typing import Callable

import numpy as np

from menace.games.game_state import GameState
from menace.memory import Brain, load_or_create
from menace.utils.config import Config, GAMES


def create_game(game_name: str) -> GameState:
    """
    Create a fresh initial state for a registered game.

    Args:
        game_name: Key from GAMES registry (e.g., "tic_tac_toe")

    Returns:
        New game state
    """
    if game_name not in GAMES:
        available = ", ".join(GAMES.keys())
        raise ValueError(f"Unknown game: {game_name}. Available: {available}")
    return GAMES[game_name]()


def game_factory(game_name: str) -> Callable[[], GameState]:
    """Return a zero-argument callable producing fresh states of a game."""
    create_game(game_name)  # fail fast on unknown names
    return lambda: create_game(game_name)


def create_rng(seed: int) -> np.random.Generator:
    return np.random.default_rng(seed)


def create_brain(config: Config, rng: np.random.Generator) -> Brain:
    """
    Load the configured brain, falling back to a fresh one.

    The session's clamp setting always applies, even when the stored
    initial_beads are kept.
    """
    brain = load_or_create(config.brain_path, config.brain_config(), rng)
    brain.clamp_at_zero = config.clamp_at_zero
    return brain
