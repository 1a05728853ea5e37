"""
Game driver - runs one game between players to completion.
"""

from __future__ import annotations

import logging
from typing import Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from menace.games.game_state import GameState
    from menace.players.base import Player

logger = logging.getLogger(__name__)


def run(state: "GameState", players: Sequence["Player"]) -> int:
    """
    Drive a single game to completion.

    players[0] is player 1, players[1] is player 2, and so on, matching
    the numbers returned by state.who(). Once a result is available every
    player is told, in player order, and the result is returned.

    Raises:
        RuntimeError: the state has no options but no result either
    """
    result = None
    while result is None:
        who = state.who()
        if not state.options():
            raise RuntimeError(
                f"State {state.to_key()!r} has no options and no result"
            )
        move = players[who - 1].getmove(state)
        state.move(move)
        logger.debug("Player %d played %s -> %s", who, move, state.to_key())
        result = state.result()

    for who, player in enumerate(players, start=1):
        player.finish(state, result, who)
    return result
