#!/usr/bin/env python3
"""
Sort and search state for the career totals table.

ViewState is immutable: apply_sort / with_search hand back a new state, so
whoever owns the state (ScoreBoard, one web request) decides when to swap it.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
import unicodedata

import pandas as pd
from pandas.api.types import is_numeric_dtype

SORT_KEYS = ("playername", "goals", "assists", "points", "seasons", "points_per_season")
SORT_DIRS = ("asc", "desc")


def _collate(text: str) -> str:
    # base-letter comparison: ignore case and accents
    # letters without a combining decomposition (Ø, Ł) stay distinct and sort after z
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()


def _sort_values(series: pd.Series) -> pd.Series:
    if is_numeric_dtype(series):
        return series.fillna(0)
    if series.map(lambda v: isinstance(v, str)).any():
        return series.map(lambda v: _collate("" if pd.isna(v) else str(v)))
    return pd.to_numeric(series, errors="coerce").fillna(0)


def apply_search(frame: pd.DataFrame, text: str) -> pd.DataFrame:
    if not text:
        return frame
    needle = text.casefold()
    names = frame["playername"].astype(str).str.casefold()
    return frame[names.str.contains(needle, regex=False, na=False)]


@dataclass(frozen=True)
class ViewState:
    sort_key: str | None = None
    sort_dir: str = "desc"
    search_text: str = ""

    def __post_init__(self):
        if self.sort_key is not None and self.sort_key not in SORT_KEYS:
            raise ValueError(f"Unknown sort key: {self.sort_key}")
        if self.sort_dir not in SORT_DIRS:
            raise ValueError(f"Unknown sort direction: {self.sort_dir}")

    def toggled(self, key: str) -> "ViewState":
        """State after a click on `key`: same column flips, new column starts descending."""
        if key == self.sort_key:
            return replace(self, sort_dir="asc" if self.sort_dir == "desc" else "desc")
        return replace(self, sort_key=key, sort_dir="desc")

    def order(self, frame: pd.DataFrame) -> pd.DataFrame:
        """Sort `frame` by the current key/direction (stable; no key means as-is)."""
        if self.sort_key is None or frame.empty:
            return frame
        return frame.sort_values(
            self.sort_key,
            ascending=self.sort_dir == "asc",
            kind="stable",
            key=_sort_values,
        )

    def apply_sort(self, frame: pd.DataFrame, key: str) -> tuple["ViewState", pd.DataFrame]:
        state = self.toggled(key)
        return state, state.order(frame)

    def with_search(self, text: str) -> "ViewState":
        return replace(self, search_text=(text or "").lower())

    def apply_search(self, frame: pd.DataFrame) -> pd.DataFrame:
        return apply_search(frame, self.search_text)

    def sort_indicator(self, key: str) -> str:
        if key != self.sort_key:
            return ""
        return "▼" if self.sort_dir == "desc" else "▲"
