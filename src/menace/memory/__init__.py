"""
Memory module - the MENACE brain and its persistence.

Use `load_or_create()` to resume a stored brain or start a fresh one.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import numpy as np

from menace.memory.brain import Brain, BrainConfig, BrainError, DEFAULT_INITIAL_BEADS


def load_or_create(
    path: str | Path,
    config: Optional[BrainConfig] = None,
    rng: Optional[np.random.Generator] = None,
) -> Brain:
    """
    Load the brain stored at path, or create a new one if that fails.

    Args:
        path: Brain file written by Brain.persist()
        config: Overrides the stored initial_beads; used as-is for a new brain
        rng: Random generator for move selection

    Returns:
        Loaded or fresh Brain
    """
    brain = Brain.load(path, config, rng)
    if brain is None:
        print("brain could not be loaded, creating a new one")
        brain = Brain(config, rng)
    return brain


__all__ = [
    "Brain",
    "BrainConfig",
    "BrainError",
    "DEFAULT_INITIAL_BEADS",
    "load_or_create",
]
