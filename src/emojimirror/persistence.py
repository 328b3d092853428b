"""Persistence for calibration baselines.

JSON save/load so a calibration can be reused across sessions.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Mapping, Optional, Union

from emojimirror.baseline import BaselineStore

_APP_VERSION = "0.1.0"


def save_baseline(
    baseline: Union[BaselineStore, Mapping[str, float], None],
    path: Union[str, Path],
) -> None:
    """Save a baseline to JSON.

    Args:
        baseline: BaselineStore or baseline vector. An uncalibrated store
            (or None) is written as ``"baseline": null``.
        path: Output JSON file path.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    if isinstance(baseline, BaselineStore):
        baseline = baseline.get_baseline()

    data = {
        "baseline": (
            {name: float(score) for name, score in baseline.items()}
            if baseline is not None else None
        ),
        "_version": {
            "app": "emojimirror",
            "app_version": _APP_VERSION,
            "created_at": datetime.now(timezone.utc).isoformat(),
        },
    }

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def load_baseline(path: Union[str, Path]) -> BaselineStore:
    """Load a BaselineStore from JSON.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not a baseline object, ``baseline`` is
            neither an object nor null, or a score is not a number.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Baseline file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Invalid baseline in {path}: expected a JSON object at top level")

    raw: Optional[dict] = data.get("baseline")
    if raw is None:
        return BaselineStore()
    if not isinstance(raw, dict):
        raise ValueError(f"Invalid baseline in {path}: expected an object or null")

    try:
        baseline = {name: float(score) for name, score in raw.items()}
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid baseline in {path}: non-numeric score ({e})") from e

    return BaselineStore(baseline)


__all__ = ["save_baseline", "load_baseline"]
