"""
TicTacToe game implementation.

Uses a flat int8 board of nine cells, numbered 1..9 left to right,
top to bottom:
    0 = empty
    1 = player 1 (x)
    2 = player 2 (o)
"""

from __future__ import annotations

from typing import List, Optional

import numpy as np

from menace.games.game_state import GameState, TIE
from menace.utils.colors import colorize

# Key characters: each cell value maps to its character in to_key()
CELL_KEYS = {0: ".", 1: "x", 2: "o"}
KEY_CELLS = {v: k for k, v in CELL_KEYS.items()}

CELL_COLORS = {0: "gray", 1: "green", 2: "yellow"}

# Pre-computed winning lines (indices into the flat board)
_WIN_LINES = np.array([
    [0, 1, 2], [3, 4, 5], [6, 7, 8],  # rows
    [0, 3, 6], [1, 4, 7], [2, 5, 8],  # cols
    [0, 4, 8], [2, 4, 6],             # diagonals
], dtype=np.int8)


class TicTacToe(GameState):
    """TicTacToe state following the MENACE game-state protocol."""

    __slots__ = ('board', 'turn', 'winner')

    names = ("x", "o")

    def __init__(self):
        self.board = np.zeros(9, dtype=np.int8)
        self.turn = 0
        self.winner = 0  # 0=none, 1=player1, 2=player2

    @classmethod
    def from_key(cls, key: str) -> "TicTacToe":
        """Rebuild a state from a to_key() string."""
        if len(key) != 9 or any(ch not in KEY_CELLS for ch in key):
            raise ValueError(f"Invalid TicTacToe key: {key!r}")
        game = cls()
        game.board = np.array([KEY_CELLS[ch] for ch in key], dtype=np.int8)
        game.turn = int(np.count_nonzero(game.board))
        game.winner = game._compute_winner()
        return game

    def copy(self) -> "TicTacToe":
        g = TicTacToe.__new__(TicTacToe)
        g.board = self.board.copy()
        g.turn = self.turn
        g.winner = self.winner
        return g

    def options(self) -> List[int]:
        """Return the empty cell numbers (1..9) in ascending order."""
        return [int(i) + 1 for i in np.flatnonzero(self.board == 0)]

    def move(self, value: int) -> None:
        n = int(value)
        if not 1 <= n <= 9:
            raise ValueError(f"Cell {n} is off the board")
        if self.board[n - 1] != 0:
            raise ValueError(f"Cell {n} is occupied")

        player = self.who()
        self.board[n - 1] = player
        self.turn += 1

        for line in _WIN_LINES:
            if (self.board[line[0]] == player
                    and self.board[line[1]] == player
                    and self.board[line[2]] == player):
                self.winner = player
                break

    def who(self) -> int:
        return 1 + self.turn % 2

    def result(self) -> Optional[int]:
        if self.winner != 0:
            return self.winner
        if not np.any(self.board == 0):
            return TIE
        return None

    def _compute_winner(self) -> int:
        """Recompute winner from current board."""
        for line in _WIN_LINES:
            v = self.board[line[0]]
            if v != 0 and self.board[line[1]] == v and self.board[line[2]] == v:
                return int(v)
        return 0

    def to_key(self) -> str:
        return "".join(CELL_KEYS[int(v)] for v in self.board)

    def pretty(self, query: bool = False) -> str:
        lines = ["-----"]
        for row in range(3):
            cells = []
            for col in range(3):
                i = row * 3 + col
                v = int(self.board[i])
                text = str(i + 1) if (v == 0 and query) else CELL_KEYS[v]
                cells.append(colorize(text, CELL_COLORS[v]))
            lines.append(" ".join(cells))
        return "\n".join(lines) + "\n"
