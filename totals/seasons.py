#!/usr/bin/env python3
"""
Individual-season views over the normalized season frame.

API:
  - top_seasons(scores, limit)         -> best single seasons by points
  - parse_years(text)                  -> season list from "2019,2020"
  - filter_by_years(scores, years)     -> rows for the selected seasons
  - player_history(scores, player_id)  -> one player's rows in year order
"""

from __future__ import annotations
from typing import Iterable

import pandas as pd

from totals.normalize import counts_toward_rankings, parse_number_or_zero

TOP_SEASONS_LIMIT = 10


def top_seasons(scores: pd.DataFrame, limit: int = TOP_SEASONS_LIMIT) -> pd.DataFrame:
    # work on a copy; the loaded frame keeps its order for every other view
    played = scores[scores["did_not_play"].map(counts_toward_rankings).astype(bool)].copy()
    played = played.sort_values("points", ascending=False, kind="stable")
    return played.head(max(int(limit), 0))


def parse_years(text: str | None) -> list[int]:
    """Turn "2019, 2020" into [2019, 2020]; non-numeric parts are skipped."""
    if not text:
        return []
    return [int(y) for y in text.replace(" ", "").split(",") if y.isdigit()]


def filter_by_years(scores: pd.DataFrame, years: Iterable | None) -> pd.DataFrame:
    wanted = {parse_number_or_zero(y) for y in (years or [])}
    if not wanted:
        return scores
    return scores[scores["year"].map(parse_number_or_zero).isin(wanted)]


def player_history(scores: pd.DataFrame, player_id) -> pd.DataFrame:
    # ids arrive as text from URLs and CLI flags
    mask = scores["player_id"].astype(str) == str(player_id)
    rows = scores[mask]
    return rows.sort_values("year", kind="stable", key=lambda s: s.map(parse_number_or_zero))
