from __future__ import annotations

import stats_core


def test_totals_command_sorts(scores_file, capsys):
    stats_core.main(["--source", str(scores_file), "totals", "--sort", "points"])
    out = capsys.readouterr().out
    assert "[OK] Loaded 6 season rows, 4 players" in out
    assert "by points desc" in out
    assert out.index("Ann") < out.index("Cara") < out.index("Bob") < out.index("Dan")


def test_totals_command_ascending_with_search(scores_file, capsys):
    stats_core.main(["--source", str(scores_file), "totals", "--sort", "points", "--asc", "--search", "a"])
    out = capsys.readouterr().out
    assert "Bob" not in out
    assert out.index("Dan") < out.index("Cara") < out.index("Ann")


def test_top_command(scores_file, capsys):
    stats_core.main(["--source", str(scores_file), "top", "--limit", "1"])
    out = capsys.readouterr().out
    assert "Top 1 individual seasons" in out
    assert "2020" in out


def test_player_command_unknown(scores_file, capsys):
    stats_core.main(["--source", str(scores_file), "player", "--id", "42"])
    assert "No seasons for player 42." in capsys.readouterr().out


def test_missing_source_warns(tmp_path, capsys):
    stats_core.main(["--source", str(tmp_path / "missing.json"), "totals"])
    assert "[WARN] Could not load" in capsys.readouterr().out
