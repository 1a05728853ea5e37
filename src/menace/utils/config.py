"""
Configuration and game registry.
"""

import time
from pathlib import Path
from typing import Optional

from menace.games import TicTacToe
from menace.memory.brain import BrainConfig


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------

DEFAULT_BRAIN_PATH = Path("brain.json")


# ---------------------------------------------------------------------------
# Game Registry
# ---------------------------------------------------------------------------

GAMES = {
    "tic_tac_toe": TicTacToe,
}


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

DEFAULT_GAMES = 500000

# Self-play starts unseen states with many beads so early punishment
# does not empty a matchbox within a few games.
SELF_PLAY_BEADS = 256


class Config:
    """Session configuration with sensible defaults. Built once at start-up."""

    def __init__(
        self,
        game_name: str = "tic_tac_toe",
        brain_path: Path = DEFAULT_BRAIN_PATH,
        interactive: bool = False,
        read_only: bool = False,
        seed: Optional[int] = None,
        games: int = DEFAULT_GAMES,
        initial_beads: Optional[int] = None,
        self_play_beads: int = SELF_PLAY_BEADS,
        clamp_at_zero: bool = False,
    ):
        if game_name not in GAMES:
            available = ", ".join(GAMES.keys())
            raise ValueError(f"Unknown game: {game_name}. Available: {available}")
        if games < 0:
            raise ValueError(f"games must be >= 0, got {games}")
        if seed is not None and seed < 0:
            raise ValueError(f"seed must be >= 0, got {seed}")

        self.game_name = game_name
        self.brain_path = Path(brain_path)
        self.interactive = interactive
        self.read_only = read_only
        self.seed = int(time.time()) if seed is None else seed
        self.games = games
        self.initial_beads = initial_beads
        self.self_play_beads = self_play_beads
        self.clamp_at_zero = clamp_at_zero

        # Validate bead counts up front
        self.brain_config()

    def brain_config(self) -> Optional[BrainConfig]:
        """
        Brain settings for this session.

        Self-play uses self_play_beads unless initial_beads is set.
        Interactive play keeps a stored brain's initial_beads unless
        initial_beads is set, so None is returned in that case.
        """
        if self.initial_beads is not None:
            beads = self.initial_beads
        elif self.interactive:
            return None
        else:
            beads = self.self_play_beads
        return BrainConfig(initial_beads=beads, clamp_at_zero=self.clamp_at_zero)
