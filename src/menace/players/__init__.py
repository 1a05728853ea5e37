"""
Players module - the player protocol and its implementations.
"""

from menace.players.base import Player
from menace.players.brain_player import (
    BrainPlayer,
    MoveRecord,
    outcome_delta,
    TIE_REWARD,
    LOSS_PENALTY,
    WIN_REWARD,
)
from menace.players.human import HumanPlayer

__all__ = [
    "Player",
    "BrainPlayer",
    "HumanPlayer",
    "MoveRecord",
    "outcome_delta",
    "TIE_REWARD",
    "LOSS_PENALTY",
    "WIN_REWARD",
]
