# serializers.py
"""
JSON encoding of a brain's bead memory.

Format (indented with JSON_INDENT):
    {"initial_beads": 2, "memory": {"<state key>": [2, 2, ...], ...}}
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, IO, Tuple

import numpy as np

BEAD_DTYPE = np.int64
JSON_INDENT = 4


def serialize_memory(initial_beads: int, memory: Dict[str, np.ndarray]) -> Dict[str, Any]:
    """Convert bead arrays → plain JSON-ready dict."""
    return {
        "initial_beads": int(initial_beads),
        "memory": {key: [int(b) for b in beads] for key, beads in memory.items()},
    }


def deserialize_memory(data: Any) -> Tuple[int, Dict[str, np.ndarray]]:
    """Convert a decoded JSON dict → (initial_beads, bead arrays)."""
    if not isinstance(data, dict):
        raise ValueError("Brain data must be a JSON object")
    try:
        initial_beads = data["initial_beads"]
        raw_memory = data["memory"]
    except KeyError as e:
        raise ValueError(f"Brain data is missing {e.args[0]!r}") from e

    if isinstance(initial_beads, bool) or not isinstance(initial_beads, int):
        raise ValueError(f"initial_beads must be an integer, got {initial_beads!r}")
    if initial_beads < 1:
        raise ValueError(f"initial_beads must be positive, got {initial_beads}")
    if not isinstance(raw_memory, dict):
        raise ValueError("memory must be a JSON object")

    memory: Dict[str, np.ndarray] = {}
    for key, beads in raw_memory.items():
        if not isinstance(beads, list) or not all(
            isinstance(b, int) and not isinstance(b, bool) for b in beads
        ):
            raise ValueError(f"Beads for state {key!r} must be a list of integers")
        memory[key] = np.array(beads, dtype=BEAD_DTYPE)
    return initial_beads, memory


def write_json(data: Dict[str, Any], file: IO[str]) -> None:
    json.dump(data, file, indent=JSON_INDENT)
    file.write("\n")


def write_atomic(data: Dict[str, Any], path: Path) -> None:
    """Write brain data to path via a temporary file and rename."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=path.name, suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            write_json(data, f)
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise


def read_json(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)
