#!/usr/bin/env python3
"""
Ingestion-time normalization of raw season rows.

Every tolerant-parsing rule lives here so the rest of the package can assume
clean numeric columns:
  - parse_number_or_zero(value)    -> int | float (0 for anything unparsable)
  - counts_toward_totals(value)    -> did_not_play rule used by career totals
  - counts_toward_rankings(value)  -> did_not_play rule used by season rankings
  - season_frame(rows)             -> normalized pandas DataFrame
"""

from __future__ import annotations
import math
from typing import Any, Iterable

import numpy as np
import pandas as pd

SEASON_COLUMNS = ["player_id", "playername", "year", "goals", "assists", "points", "did_not_play"]


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, float) and math.isnan(value)


def _to_number(value: Any) -> float:
    """Loose numeric read; NaN when the value has no numeric reading."""
    if _is_missing(value):
        return 0.0
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (list, tuple)):
        # [] reads as 0 and [x] as x; longer lists have no numeric reading
        if not value:
            return 0.0
        return _to_number(value[0]) if len(value) == 1 else math.nan
    if isinstance(value, str) and not value.strip():
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def parse_number_or_zero(value: Any) -> int | float:
    num = _to_number(value)
    if not math.isfinite(num):
        return 0
    return int(num) if num.is_integer() else num


def counts_toward_totals(did_not_play: Any) -> bool:
    # missing field means the player played
    if _is_missing(did_not_play):
        return True
    return _to_number(did_not_play) == 0


def counts_toward_rankings(did_not_play: Any) -> bool:
    # excluded only when the flag is truthy and not numerically zero
    if _is_missing(did_not_play) or not did_not_play:
        return True
    return _to_number(did_not_play) == 0


def _display_name(row: pd.Series) -> str:
    for col in ("playername", "player"):
        val = row.get(col)
        if not _is_missing(val) and val != "":
            return str(val)
    pid = row.get("player_id")
    return "#" + ("" if _is_missing(pid) else str(pid))


def _none_if_missing(series: pd.Series) -> pd.Series:
    # list build keeps None; Series.map would turn int+None columns into floats
    return pd.Series([None if _is_missing(v) else v for v in series], index=series.index, dtype=object)


def _whole(series: pd.Series) -> pd.Series:
    # pretty ints if every value is integral
    if series.empty or (series % 1 == 0).all():
        return series.astype("int64")
    return series.astype(float)


def _empty_frame() -> pd.DataFrame:
    return pd.DataFrame({
        c: pd.Series(dtype="int64" if c in ("goals", "assists", "points") else "object")
        for c in SEASON_COLUMNS
    })


def season_frame(rows: Iterable[dict]) -> pd.DataFrame:
    """
    Build the normalized season frame from raw JSON records.

    goals/assists go through parse_number_or_zero; points becomes the
    effective value (parsed points when non-zero, else goals + assists);
    did_not_play is kept raw for the two view-specific rules above.
    """
    df = pd.DataFrame(list(rows), dtype=object)
    if df.empty:
        return _empty_frame()

    for col in ("player_id", "year", "did_not_play"):
        if col not in df.columns:
            df[col] = None

    names = df.apply(_display_name, axis=1)
    goals = _whole(df["goals"].map(parse_number_or_zero) if "goals" in df.columns else pd.Series(0, index=df.index))
    assists = _whole(df["assists"].map(parse_number_or_zero) if "assists" in df.columns else pd.Series(0, index=df.index))
    raw_points = df["points"].map(parse_number_or_zero) if "points" in df.columns else pd.Series(0, index=df.index)
    points = _whole(pd.Series(np.where(raw_points != 0, raw_points, goals + assists), index=df.index))

    out = pd.DataFrame({
        "player_id": _none_if_missing(df["player_id"]),
        "playername": names.astype(object),
        "year": _none_if_missing(df["year"]),
        "goals": goals,
        "assists": assists,
        "points": points,
        "did_not_play": df["did_not_play"].astype(object),
    })
    # extra source columns ride along untouched
    extra = [c for c in df.columns if c not in out.columns]
    return pd.concat([out, df[extra]], axis=1) if extra else out
