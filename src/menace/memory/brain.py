"""
Brain - a MENACE "brain" is a bunch of matchboxes containing beads.

Each matchbox is one game state (keyed by GameState.to_key()) holding
one bead count per option of that state. A move is drawn with
probability proportional to its bead count; finished games add or
remove beads from the moves that were played.

Bead counts are never floored at zero unless BrainConfig.clamp_at_zero
is set. A punished move can go negative, which skews the weighted draw
for its state; this is a known property of the scheme.
"""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, IO, Optional, TYPE_CHECKING

import numpy as np

from menace.memory.serializers import (
    BEAD_DTYPE,
    JSON_INDENT,
    deserialize_memory,
    read_json,
    serialize_memory,
    write_atomic,
    write_json,
)

if TYPE_CHECKING:
    from menace.games.game_state import GameState

logger = logging.getLogger(__name__)

DEFAULT_INITIAL_BEADS = 2


class BrainError(RuntimeError):
    """A matchbox's beads cannot produce a move."""


@dataclass(frozen=True)
class BrainConfig:
    """
    Brain settings.

    initial_beads : beads given to each option of a newly seen state
    clamp_at_zero : floor bead counts at zero in update()
    """
    initial_beads: int = DEFAULT_INITIAL_BEADS
    clamp_at_zero: bool = False

    def __post_init__(self):
        if (isinstance(self.initial_beads, bool)
                or not isinstance(self.initial_beads, int)
                or self.initial_beads < 1):
            raise ValueError(
                f"initial_beads must be a positive integer, got {self.initial_beads!r}"
            )


class Brain:
    """Bead memory with weighted move selection and outcome updates."""

    def __init__(
        self,
        config: Optional[BrainConfig] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        config = config or BrainConfig()
        self.memory: Dict[str, np.ndarray] = {}
        self.initial_beads = config.initial_beads
        self.clamp_at_zero = config.clamp_at_zero
        self.rng = rng if rng is not None else np.random.default_rng()
        self.resets = 0

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    @classmethod
    def from_dict(
        cls,
        data: Any,
        config: Optional[BrainConfig] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> "Brain":
        """
        Build a brain from its serialized form.

        If config is given, its settings replace the stored initial_beads.
        Existing bead vectors are kept as stored.
        """
        initial_beads, memory = deserialize_memory(data)
        brain = cls(config, rng)
        if config is None:
            brain.initial_beads = initial_beads
        brain.memory = memory
        return brain

    @classmethod
    def load(
        cls,
        path: str | Path,
        config: Optional[BrainConfig] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> Optional["Brain"]:
        """
        Load a brain previously stored with persist().

        Returns None if the file is missing or malformed.
        """
        path = Path(path)
        try:
            data = read_json(path)
            brain = cls.from_dict(data, config, rng)
        except FileNotFoundError:
            logger.warning("No brain at %s", path)
            return None
        except (OSError, ValueError) as e:
            logger.warning("Could not load brain from %s: %s", path, e)
            return None

        logger.info("Loaded brain from %s (%d states)", path, len(brain))
        return brain

    def to_dict(self) -> Dict[str, Any]:
        return serialize_memory(self.initial_beads, self.memory)

    def dumps(self) -> str:
        return json.dumps(self.to_dict(), indent=JSON_INDENT)

    def dump(self, file: Optional[IO[str]] = None) -> None:
        """Dump the entire brain to a file handle, or to standard output."""
        write_json(self.to_dict(), file or sys.stdout)

    def persist(self, path: str | Path) -> None:
        """Write the entire brain to the named file."""
        path = Path(path)
        write_atomic(self.to_dict(), path)
        logger.info("Persisted brain to %s (%d states)", path, len(self))

    # -------------------------------------------------------------------------
    # Learning
    # -------------------------------------------------------------------------

    def get_move_index(self, state: "GameState") -> int:
        """
        Draw a move for state, returning its index into state.options().

        Unseen states get initial_beads for every option. A state whose
        beads sum to zero is refilled with initial_beads (a reset).
        """
        key = state.to_key()
        beads = self.memory.get(key)
        if beads is None:
            count = len(state.options())
            beads = np.full(count, self.initial_beads, dtype=BEAD_DTYPE)
            self.memory[key] = beads

        total = int(beads.sum())
        if total == 0:
            logger.warning("RESET %s", key)
            self.resets += 1
            beads[:] = self.initial_beads
            total = int(beads.sum())

        if total < 1:
            raise BrainError(f"State {key!r} has a non-positive bead total ({total})")

        r = int(self.rng.integers(1, total, endpoint=True))
        for i, b in enumerate(beads):
            r -= int(b)
            if r <= 0:
                return i

        raise BrainError(f"No move drawn for state {key!r} (beads {beads.tolist()})")

    def update(self, state_key: str, move_index: int, delta: int) -> None:
        """Reward (delta > 0) or punish (delta < 0) a move played at state_key."""
        if state_key not in self.memory:
            raise KeyError(f"Unknown state {state_key!r}: update() before get_move_index()")
        beads = self.memory[state_key]
        if not 0 <= move_index < len(beads):
            raise IndexError(
                f"Move index {move_index} out of range for state {state_key!r} "
                f"({len(beads)} options)"
            )

        value = int(beads[move_index]) + delta
        if self.clamp_at_zero and value < 0:
            value = 0
        beads[move_index] = value

    # -------------------------------------------------------------------------
    # Info
    # -------------------------------------------------------------------------

    def beads(self, state_key: str) -> np.ndarray:
        """Return the bead vector for a known state (a view, not a copy)."""
        return self.memory[state_key]

    def get_info(self) -> Dict[str, int]:
        return {
            "states": len(self.memory),
            "beads": int(sum(int(b.sum()) for b in self.memory.values())),
            "initial_beads": self.initial_beads,
            "resets": self.resets,
        }

    def __len__(self) -> int:
        return len(self.memory)

    def __contains__(self, state_key: object) -> bool:
        return state_key in self.memory

    def __repr__(self) -> str:
        return f"Brain(states={len(self.memory)}, initial_beads={self.initial_beads})"
