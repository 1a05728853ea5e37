"""
Tally - outcome counts over a batch of games.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Sequence

from menace.games.game_state import TIE


@dataclass
class Tally:
    """Counts of ties (result 0) and wins per player number."""
    counts: Counter = field(default_factory=Counter)

    def record(self, result: int) -> None:
        self.counts[result] += 1

    @property
    def games(self) -> int:
        return sum(self.counts.values())

    @property
    def ties(self) -> int:
        return self.counts[TIE]

    def wins(self, player: int) -> int:
        return self.counts[player]

    def summary(self, names: Sequence[str]) -> str:
        """e.g. 'ties=3 x=5 o=2'"""
        parts = [f"ties={self.ties}"]
        parts += [f"{name}={self.wins(i)}" for i, name in enumerate(names, start=1)]
        return " ".join(parts)
