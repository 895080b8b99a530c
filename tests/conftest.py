from __future__ import annotations

import json

import pytest


@pytest.fixture
def sample_rows():
    return [
        {"player_id": 1, "playername": "Ann", "year": 2019, "goals": 3, "assists": 2, "points": 5, "did_not_play": 0},
        {"player_id": 2, "playername": "Bob", "year": 2019, "goals": 1, "assists": 0, "did_not_play": 0},
        {"player_id": 3, "playername": "Cara", "year": 2019, "goals": "2", "assists": 1},
        {"player_id": 1, "playername": "Ann", "year": 2020, "goals": 4, "assists": 4, "points": 8, "did_not_play": 0},
        {"player_id": 2, "playername": "Bob", "year": 2020, "goals": 10, "assists": 10, "points": 20, "did_not_play": 1},
        {"player_id": 4, "player": "Dan", "year": 2020, "goals": "x", "assists": None, "did_not_play": 1},
    ]


@pytest.fixture
def scores_file(tmp_path, sample_rows):
    path = tmp_path / "scores.json"
    path.write_text(json.dumps(sample_rows), encoding="utf-8")
    return path
