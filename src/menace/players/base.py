"""
Player - abstract protocol for anything that can take a seat in run().
"""

from abc import ABC, abstractmethod
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from menace.games.game_state import GameState, MoveValue


class Player(ABC):
    """Abstract base class for game players."""

    @abstractmethod
    def getmove(self, state: "GameState") -> "MoveValue":
        """Return one of state.options(). Must not modify the state."""
        pass

    @abstractmethod
    def finish(self, state: "GameState", result: Optional[int], me: int) -> None:
        """
        Called once the game has completed.

        Args:
            state: Final game state
            result: state.result() (TIE or the winner's number)
            me: This player's number
        """
        pass
