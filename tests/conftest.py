"""
Shared test fixtures for menace tests.

Design principles:
- Game-agnostic fixtures where possible
- Seeded randomness so every test is reproducible
- Minimal, focused fixtures
"""

import tempfile
from pathlib import Path
from typing import Generator, List, Optional

import numpy as np
import pytest

from menace.games.game_state import GameState, TIE
from menace.games.tic_tac_toe import TicTacToe
from menace.memory.brain import Brain, BrainConfig
from menace.players.base import Player


# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Temporary directory with cleanup."""
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)


@pytest.fixture
def brain_path(temp_dir: Path) -> Path:
    """Path for a brain file that does not exist yet."""
    return temp_dir / "brain.json"


# =============================================================================
# Randomness / Brain Fixtures
# =============================================================================

@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture
def brain(rng: np.random.Generator) -> Brain:
    """Fresh brain with default beads and a seeded generator."""
    return Brain(rng=rng)


@pytest.fixture
def trained_brain() -> Brain:
    """Brain with a handful of TicTacToe states already learned."""
    from menace.simulation.training import self_play

    b = Brain(BrainConfig(initial_beads=8), rng=np.random.default_rng(7))
    self_play(b, TicTacToe, games=25)
    return b


# =============================================================================
# Game Fixtures
# =============================================================================

@pytest.fixture
def game() -> TicTacToe:
    """Fresh TicTacToe game."""
    return TicTacToe()


class CountdownGame(GameState):
    """
    Minimal single-state-chain game for protocol tests.

    Two players alternately take 1 or 2 from a pile; whoever takes the
    last item wins. With `tie_at` set, reaching that pile size ties.
    """

    names = ("first", "second")

    def __init__(self, pile: int = 4, tie_at: Optional[int] = None):
        self.pile = pile
        self.turn = 0
        self.tie_at = tie_at
        self.last = 0

    def options(self) -> List[int]:
        if self.result() is not None:
            return []
        return [n for n in (1, 2) if n <= self.pile]

    def move(self, value: int) -> None:
        self.last = self.who()
        self.pile -= value
        self.turn += 1

    def who(self) -> int:
        return 1 + self.turn % 2

    def result(self) -> Optional[int]:
        if self.tie_at is not None and self.pile == self.tie_at:
            return TIE
        if self.pile == 0:
            return self.last
        return None

    def to_key(self) -> str:
        return f"{self.pile}:{self.who()}"


@pytest.fixture
def countdown() -> CountdownGame:
    return CountdownGame()


# =============================================================================
# Player Fixtures
# =============================================================================

class ScriptedPlayer(Player):
    """Plays a fixed list of moves and records finish() calls."""

    def __init__(self, moves: List):
        self.moves = list(moves)
        self.finished = []

    def getmove(self, state: GameState):
        return self.moves.pop(0)

    def finish(self, state: GameState, result, me: int) -> None:
        self.finished.append((result, me))


@pytest.fixture
def scripted():
    """Factory for ScriptedPlayer."""
    return ScriptedPlayer


@pytest.fixture
def make_countdown():
    """Factory for CountdownGame with custom pile / tie settings."""
    return CountdownGame
