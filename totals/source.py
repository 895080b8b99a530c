#!/usr/bin/env python3
"""
Read the raw season rows (scores.json) from a local path or an http(s) URL.
"""

from __future__ import annotations
import json
from pathlib import Path

import requests

FETCH_TIMEOUT = 10


def _is_url(source: str | Path) -> bool:
    return str(source).lower().startswith(("http://", "https://"))


def load_scores(source: str | Path) -> list[dict]:
    """
    Return the list of season records. Raises FileNotFoundError / OSError,
    requests.RequestException or ValueError (bad JSON or wrong shape).
    """
    if _is_url(source):
        res = requests.get(str(source), timeout=FETCH_TIMEOUT)
        res.raise_for_status()
        data = res.json()
    else:
        path = Path(source)
        if not path.exists():
            raise FileNotFoundError(f"Missing {path}. Put scores.json under ./data or pass --source.")
        data = json.loads(path.read_text(encoding="utf-8"))

    if not isinstance(data, list):
        raise ValueError(f"{source}: expected a JSON list of season rows, got {type(data).__name__}")
    bad = [i for i, row in enumerate(data) if not isinstance(row, dict)]
    if bad:
        raise ValueError(f"{source}: rows {bad[:5]} are not objects")
    return data
