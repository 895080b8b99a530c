from __future__ import annotations

from totals.normalize import season_frame
from totals.seasons import filter_by_years, parse_years, player_history, top_seasons


def test_top_seasons_ranks_by_effective_points():
    scores = season_frame([
        {"playername": "X", "points": 3},
        {"playername": "Y", "goals": 2, "assists": 4},
        {"playername": "Z", "did_not_play": 1, "points": 99},
    ])
    top = top_seasons(scores, limit=2)
    assert top["playername"].tolist() == ["Y", "X"]
    assert top["points"].tolist() == [6, 3]


def test_top_seasons_does_not_reorder_source(sample_rows):
    scores = season_frame(sample_rows)
    before = scores["playername"].tolist()
    top = top_seasons(scores)
    assert top["points"].tolist() == [8, 5, 3, 1]
    assert scores["playername"].tolist() == before


def test_top_seasons_default_limit_is_ten():
    scores = season_frame([{"player_id": i, "points": i} for i in range(1, 15)])
    top = top_seasons(scores)
    assert len(top) == 10
    assert top["points"].iloc[0] == 14


def test_filter_by_years(sample_rows):
    scores = season_frame(sample_rows)
    assert len(filter_by_years(scores, ["2019"])) == 3
    assert filter_by_years(scores, []) is scores


def test_player_history_in_year_order(sample_rows):
    rows = list(reversed(sample_rows))
    history = player_history(season_frame(rows), "1")
    assert history["year"].tolist() == [2019, 2020]
    assert history["points"].tolist() == [5, 8]


def test_parse_years():
    assert parse_years("2019, 2020,abc") == [2019, 2020]
    assert parse_years("") == []
    assert parse_years(None) == []
