#!/usr/bin/env python3
"""
ScoreBoard: the one object that owns loaded scores, the main totals list and
the current sort/search state. Everything else in `totals` is a pure function
it calls.
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable

import pandas as pd
import requests

from totals.aggregate import build_player_totals
from totals.normalize import season_frame
from totals.seasons import TOP_SEASONS_LIMIT, filter_by_years, player_history, top_seasons
from totals.source import load_scores
from totals.view import ViewState

logger = logging.getLogger(__name__)


class ScoreBoard:
    def __init__(self, scores: pd.DataFrame | None = None, view: ViewState | None = None,
                 main_list: pd.DataFrame | None = None):
        # header clicks in order; replaying them rebuilds the same tie order
        self.history: tuple[str, ...] = ()
        self.scores = scores if scores is not None else season_frame([])
        self.main_list = main_list if main_list is not None else build_player_totals(self.scores)
        self.view = view or ViewState()

    @classmethod
    def from_rows(cls, rows: Iterable[dict]) -> "ScoreBoard":
        return cls(season_frame(rows))

    @property
    def has_data(self) -> bool:
        return not self.scores.empty

    def load(self, source: str | Path) -> bool:
        """Replace scores/main list from `source`; on failure log and keep empty state."""
        try:
            rows = load_scores(source)
        except (OSError, ValueError, requests.RequestException):
            logger.exception("Failed to load %s", source)
            self.scores = season_frame([])
            self.main_list = build_player_totals(self.scores)
            return False

        self.scores = season_frame(rows)
        self.main_list = build_player_totals(self.scores)
        logger.info("Loaded %d season rows for %d players from %s",
                    len(self.scores), len(self.main_list), source)
        return True

    def restore(self, view: ViewState) -> "ScoreBoard":
        """Board sharing this data, with `view` applied to the main list."""
        return ScoreBoard(self.scores, view, main_list=view.order(self.main_list))

    def visible(self) -> pd.DataFrame:
        return self.view.apply_search(self.main_list)

    def sort_by(self, key: str) -> pd.DataFrame:
        self.view, self.main_list = self.view.apply_sort(self.main_list, key)
        self.history += (key,)
        return self.visible()

    def replay(self, keys: Iterable[str]) -> pd.DataFrame:
        """Apply header clicks in order, as if the user had made them on this board."""
        for key in keys:
            self.sort_by(key)
        return self.visible()

    def search(self, text: str) -> pd.DataFrame:
        self.view = self.view.with_search(text)
        return self.visible()

    def show_top_seasons(self, limit: int = TOP_SEASONS_LIMIT, years: Iterable | None = None) -> pd.DataFrame:
        return top_seasons(filter_by_years(self.scores, years), limit)

    def player_history(self, player_id) -> pd.DataFrame:
        return player_history(self.scores, player_id)
