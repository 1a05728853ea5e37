"""
Simulation module - game driver and play sessions.
"""

from menace.simulation.runner import run
from menace.simulation.tally import Tally
from menace.simulation.training import self_play, play_interactive

__all__ = [
    "run",
    "Tally",
    "self_play",
    "play_interactive",
]
