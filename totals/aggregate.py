#!/usr/bin/env python3
"""
Career totals from normalized season rows.

API:
  - build_player_totals(scores) -> DataFrame with one row per player
"""

from __future__ import annotations
import pandas as pd

from totals.normalize import counts_toward_totals

TOTAL_COLUMNS = ["player_id", "playername", "seasons", "goals", "assists", "points", "points_per_season"]


def build_player_totals(scores: pd.DataFrame) -> pd.DataFrame:
    """
    Group season rows by player_id in first-seen order.

    Only rows whose did_not_play reads as 0 add to seasons/goals/assists/points,
    but every player with at least one row gets a line (zeros if none counted).
    """
    if scores.empty:
        out = pd.DataFrame({c: pd.Series(dtype="int64") for c in TOTAL_COLUMNS})
        out["player_id"] = out["player_id"].astype(object)
        out["playername"] = out["playername"].astype(object)
        out["points_per_season"] = out["points_per_season"].astype(float)
        return out

    played = scores["did_not_play"].map(counts_toward_totals).astype(bool)
    counted = pd.DataFrame({
        "player_id": scores["player_id"],
        "playername": scores["playername"],
        "seasons": played.astype("int64"),
        "goals": scores["goals"].where(played, 0),
        "assists": scores["assists"].where(played, 0),
        "points": scores["points"].where(played, 0),
    })

    totals = (
        counted
        .groupby("player_id", sort=False, dropna=False)
        .agg(
            playername=("playername", "first"),
            seasons=("seasons", "sum"),
            goals=("goals", "sum"),
            assists=("assists", "sum"),
            points=("points", "sum"),
        )
        .reset_index()
    )

    # no division when a player has zero counted seasons
    per = totals["points"] / totals["seasons"].where(totals["seasons"] > 0)
    totals["points_per_season"] = per.fillna(0.0).astype(float)
    return totals[TOTAL_COLUMNS]
