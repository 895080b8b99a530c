from __future__ import annotations

import math

import pytest

from totals.normalize import (
    counts_toward_rankings,
    counts_toward_totals,
    parse_number_or_zero,
    season_frame,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (7, 7),
        ("5", 5),
        (" 12 ", 12),
        ("2.5", 2.5),
        (3.0, 3),
        (True, 1),
        (None, 0),
        ("", 0),
        ("abc", 0),
        (float("nan"), 0),
        ("inf", 0),
        ([1, 2], 0),
    ],
)
def test_parse_number_or_zero(value, expected):
    assert parse_number_or_zero(value) == expected


def test_parse_number_or_zero_keeps_whole_numbers_integral():
    assert isinstance(parse_number_or_zero("4.0"), int)
    assert isinstance(parse_number_or_zero("4.5"), float)


def test_did_not_play_rules():
    for played in (None, math.nan, 0, "0", 0.0, False, ""):
        assert counts_toward_totals(played)
        assert counts_toward_rankings(played)
    for skipped in (1, "1", True, "yes", 2):
        assert not counts_toward_totals(skipped)
        assert not counts_toward_rankings(skipped)


def test_season_frame_normalizes_names_and_points(sample_rows):
    frame = season_frame(sample_rows)

    assert frame["playername"].tolist() == ["Ann", "Bob", "Cara", "Ann", "Bob", "Dan"]
    # Bob 2019 and Cara have no points field: goals + assists stands in
    assert frame["points"].tolist() == [5, 1, 3, 8, 20, 0]
    assert frame["goals"].tolist() == [3, 1, 2, 4, 10, 0]
    assert frame["assists"].tolist() == [2, 0, 1, 4, 10, 0]
    assert str(frame["goals"].dtype) == "int64"


def test_season_frame_falls_back_to_hash_id():
    frame = season_frame([{"player_id": 17, "goals": 1}, {"player_id": 18, "playername": ""}])
    assert frame["playername"].tolist() == ["#17", "#18"]


def test_season_frame_zero_points_uses_goals_and_assists():
    frame = season_frame([{"player_id": 1, "goals": 2, "assists": 1, "points": 0}])
    assert frame["points"].tolist() == [3]


def test_season_frame_missing_year_is_none():
    frame = season_frame([{"player_id": 1, "year": 2019}, {"player_id": 2}])
    assert frame["year"].tolist() == [2019, None]


def test_season_frame_empty():
    frame = season_frame([])
    assert frame.empty
    assert {"player_id", "playername", "goals", "assists", "points", "did_not_play"} <= set(frame.columns)


def test_list_values_read_like_numbers():
    assert parse_number_or_zero([]) == 0
    assert parse_number_or_zero(["7"]) == 7
    assert counts_toward_totals([])
    assert counts_toward_rankings([])
    assert not counts_toward_totals([1])


def test_season_frame_without_player_id_uses_bare_hash():
    frame = season_frame([{"goals": 1}, {"player_id": None, "assists": 2}])
    assert frame["playername"].tolist() == ["#", "#"]
