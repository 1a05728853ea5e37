"""
MENACE - a matchbox reinforcement learner for turn-based games.

A Brain keeps one "matchbox" of beads per game state, one bead count
per legal move. Moves are drawn in proportion to their beads, and
finished games add beads to the moves of the winner and remove them
from the moves of the loser.

Quick Start:
    from menace import Brain, BrainPlayer, TicTacToe, run

    brain = Brain()
    for _ in range(1000):
        run(TicTacToe(), [BrainPlayer(brain), BrainPlayer(brain)])
    brain.persist("brain.json")

Any game works if its state follows the GameState protocol:
options(), move(value), who(), result() and to_key().

Modules:
    games      - GameState protocol and TicTacToe
    memory     - Brain and its JSON persistence
    players    - Player protocol, BrainPlayer, HumanPlayer
    simulation - run() driver, self-play and interactive sessions
"""

from menace.games import GameState, TicTacToe, TIE
from menace.memory import Brain, BrainConfig, BrainError, load_or_create
from menace.players import Player, BrainPlayer, HumanPlayer
from menace.simulation import run, self_play, play_interactive, Tally

__version__ = "1.0.0"

__all__ = [
    # Protocols
    "GameState",
    "Player",
    # Main API
    "Brain",
    "BrainConfig",
    "BrainError",
    "load_or_create",
    "run",
    "self_play",
    "play_interactive",
    # Implementations
    "TicTacToe",
    "BrainPlayer",
    "HumanPlayer",
    # Types
    "Tally",
    "TIE",
]
