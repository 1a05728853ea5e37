"""
Games module - implementations of the MENACE game-state protocol.
"""

from menace.games.game_state import GameState, TIE
from menace.games.tic_tac_toe import TicTacToe

__all__ = [
    "GameState",
    "TIE",
    "TicTacToe",
]
