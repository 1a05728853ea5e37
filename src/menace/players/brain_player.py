"""
BrainPlayer - adaptor giving a Brain the player protocol.

Every move made during a game is remembered; when the game is over
the brain is rewarded or punished for all of them alike.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, TYPE_CHECKING

from menace.games.game_state import TIE
from menace.players.base import Player

if TYPE_CHECKING:
    from menace.games.game_state import GameState, MoveValue
    from menace.memory.brain import Brain

TIE_REWARD = 1
LOSS_PENALTY = -1
WIN_REWARD = 3


@dataclass(frozen=True)
class MoveRecord:
    """A move the brain chose, by state key and option index."""
    state_key: str
    move_index: int


def outcome_delta(result: int, me: int) -> int:
    """Bead change for every move of player `me` given the final result."""
    if result == TIE:
        return TIE_REWARD
    if result != me:
        return LOSS_PENALTY
    return WIN_REWARD


class BrainPlayer(Player):
    """Player that gets its moves from a Brain. Use one instance per game."""

    def __init__(self, brain: "Brain"):
        self.brain = brain
        self.moves: List[MoveRecord] = []

    def getmove(self, state: "GameState") -> "MoveValue":
        move_index = self.brain.get_move_index(state)
        options = state.options()
        self.moves.append(MoveRecord(state.to_key(), move_index))
        return options[move_index]

    def finish(self, state: "GameState", result: int, me: int) -> None:
        """Punish or reward the brain according to the result."""
        delta = outcome_delta(result, me)
        for record in self.moves:
            self.brain.update(record.state_key, record.move_index, delta)
