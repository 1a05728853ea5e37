"""
GameState - abstract protocol every game must follow to be learned.

IMPORTANT ARCHITECTURE NOTE:
-----------------------------
- Players are numbered 1..n. who() and result() use these numbers.
- result() is None while the game runs, TIE (0) for a draw, or the
  number of the winning player.
- to_key() is the Brain's memory key. It must contain the entire game
  state: two different live positions must never share a key.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional, Tuple

# Result value for a drawn game
TIE = 0

MoveValue = Any


class GameState(ABC):
    """Abstract base class for all learnable game states."""

    # Display names per player, index 0 is player 1
    names: Tuple[str, ...] = ()

    @abstractmethod
    def options(self) -> List[MoveValue]:
        """
        Return every legal move, in a deterministic order.

        The same state must always produce the same order; the Brain
        stores one bead count per option by position.
        """
        pass

    @abstractmethod
    def move(self, value: MoveValue) -> None:
        """Apply a move returned by options(). Mutates the state."""
        pass

    @abstractmethod
    def who(self) -> int:
        """Return the number (1..n) of the player to act."""
        pass

    @abstractmethod
    def result(self) -> Optional[int]:
        """Return None while unresolved, TIE, or the winning player's number."""
        pass

    @abstractmethod
    def to_key(self) -> str:
        """Return a stable string holding the complete game state."""
        pass

    def pretty(self, query: bool = False) -> str:
        """
        Human-friendly rendering of the state.

        When query is True the rendering must show the player which
        option values are available.
        """
        return self.to_key()

    def name(self, player: int) -> str:
        """Display name for a player number."""
        if 1 <= player <= len(self.names):
            return self.names[player - 1]
        return f"player {player}"

    def __str__(self) -> str:
        return self.to_key()
