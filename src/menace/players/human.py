"""
HumanPlayer - interacts with a person over text streams.
"""

from __future__ import annotations

import sys
from typing import Dict, IO, List, Optional, TYPE_CHECKING

from menace.games.game_state import TIE
from menace.players.base import Player

if TYPE_CHECKING:
    from menace.games.game_state import GameState, MoveValue

PROMPT = ">>> "


class HumanPlayer(Player):
    """
    Player that asks a person for each move.

    The board is written with state.pretty(query=True) and input tokens
    are read until one names a legal option. Options are matched by
    their string form, so any game whose options print distinctly works.
    Tokens left on a line after a move are kept for the next move.
    """

    def __init__(
        self,
        input_stream: Optional[IO[str]] = None,
        output_stream: Optional[IO[str]] = None,
    ):
        self.input = input_stream or sys.stdin
        self.output = output_stream or sys.stdout
        self._pending: List[str] = []

    def getmove(self, state: "GameState") -> "MoveValue":
        valid: Dict[str, "MoveValue"] = {str(o): o for o in state.options()}

        self.output.write(state.pretty(query=True))
        self.output.write(PROMPT)
        self.output.flush()

        while True:
            while self._pending:
                token = self._pending.pop(0)
                if token in valid:
                    return valid[token]

            line = self.input.readline()
            if not line:
                raise EOFError("Input closed while waiting for a move")
            self._pending = line.split()
            if any(token in valid for token in self._pending):
                continue
            self._pending = []
            self.output.write(f"Choose one of: {', '.join(valid)}\n{PROMPT}")
            self.output.flush()

    def finish(self, state: "GameState", result: int, me: int) -> None:
        self.output.write(state.pretty())
        if result == TIE:
            self.output.write("Game over: tied\n")
        else:
            self.output.write(f"Game over: {state.name(result)} wins\n")
        self.output.flush()
