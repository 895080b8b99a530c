#!/usr/bin/env python3
import sys
import logging
import argparse
from pathlib import Path

import pandas as pd

from totals.board import ScoreBoard
from totals.seasons import TOP_SEASONS_LIMIT, parse_years
from totals.view import SORT_KEYS


# ---- Constants ----
DATA_DIR = Path("data")
SCORES_FILE = DATA_DIR / "scores.json"

TOTALS_HEADERS = {
    "playername": "PLAYER",
    "goals": "G",
    "assists": "A",
    "points": "PTS",
    "seasons": "SEASONS",
    "points_per_season": "PTS/S",
}

SEASON_HEADERS = {
    "playername": "PLAYER",
    "year": "SEASON",
    "goals": "G",
    "assists": "A",
    "points": "PTS",
}


# ---- Helpers ----
def _fmt(col: str, v) -> str:
    if col == "points_per_season":
        return f"{float(v):.2f}"
    if isinstance(v, float) and abs(v - round(v)) < 1e-9:
        v = int(round(v))
    return "" if pd.isna(v) else str(v)


def _print_table(df: pd.DataFrame, headers: dict[str, str], title: str):
    print(title)
    print("-" * max(len(title), 30))
    if df.empty:
        print("(no rows)")
        return

    cells = [[_fmt(c, v) for c, v in zip(headers, row)] for row in df[list(headers)].itertuples(index=False)]
    widths = [max([len(h)] + [len(r[i]) for r in cells]) for i, h in enumerate(headers.values())]
    print(f"{'RK':>3}  " + "  ".join(
        h.ljust(w) if i == 0 else h.rjust(w) for i, (h, w) in enumerate(zip(headers.values(), widths))
    ))
    for rk, r in enumerate(cells, 1):
        print(f"{rk:>3}  " + "  ".join(
            v.ljust(w) if i == 0 else v.rjust(w) for i, (v, w) in enumerate(zip(r, widths))
        ))


def _open_board(source: str) -> ScoreBoard | None:
    board = ScoreBoard()
    if not board.load(source):
        print(f"[WARN] Could not load {source}. See the log above for details.")
        return None
    print(f"[OK] Loaded {len(board.scores):,} season rows, {len(board.main_list):,} players")
    return board


# ---- Commands ----
def show_totals(source: str, sort: str | None, search: str | None, clicks: int = 1):
    board = _open_board(source)
    if board is None:
        return
    data = board.visible()
    # each click on the same header flips direction, like the table headers
    for _ in range(clicks if sort else 0):
        data = board.sort_by(sort)
    if search:
        data = board.search(search)

    hdr = "\nAll-time player totals"
    if board.view.sort_key:
        hdr += f" — by {board.view.sort_key} {board.view.sort_dir}"
    if board.view.search_text:
        hdr += f" [search: {board.view.search_text}]"
    _print_table(data, TOTALS_HEADERS, hdr)


def show_top(source: str, limit: int, years: str | None):
    board = _open_board(source)
    if board is None:
        return
    data = board.show_top_seasons(limit, parse_years(years))
    hdr = f"\nTop {len(data)} individual seasons"
    if years:
        hdr += f" ({years})"
    _print_table(data, SEASON_HEADERS, hdr)


def show_player(source: str, player_id: str):
    board = _open_board(source)
    if board is None:
        return
    data = board.player_history(player_id)
    if data.empty:
        print(f"No seasons for player {player_id}.")
        return
    _print_table(data, SEASON_HEADERS, f"\nSeasons — {data['playername'].iloc[0]}")


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description="Career totals and season rankings from scores.json.")
    parser.add_argument("--source", type=str, default=str(SCORES_FILE),
                        help=f"Path or http(s) URL of scores.json (default: {SCORES_FILE})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log at DEBUG level")
    sub = parser.add_subparsers(dest="cmd")

    p_tot = sub.add_parser("totals", help="Aggregated one-row-per-player table")
    p_tot.add_argument("--sort", type=str, choices=SORT_KEYS, help="Column to sort by")
    p_tot.add_argument("--asc", action="store_true", help="Ascending (same as clicking the header twice)")
    p_tot.add_argument("--search", type=str, help="Case-insensitive player name filter")

    p_top = sub.add_parser("top", help="Best individual seasons by points")
    p_top.add_argument("--limit", type=int, default=TOP_SEASONS_LIMIT, help=f"Rows to show (default: {TOP_SEASONS_LIMIT})")
    p_top.add_argument("--years", type=str, help="Comma separated seasons, e.g. 2019,2020")

    p_pl = sub.add_parser("player", help="Season-by-season rows for one player")
    p_pl.add_argument("--id", type=str, required=True, help="player_id")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.cmd == "totals":
        show_totals(args.source, args.sort, args.search, clicks=2 if args.asc else 1)
    elif args.cmd == "top":
        show_top(args.source, args.limit, args.years)
    elif args.cmd == "player":
        show_player(args.source, args.id)
    else:
        print("Try:\n"
              "  python stats_core.py totals --sort points\n"
              "  python stats_core.py totals --sort playername --asc --search ann\n"
              "  python stats_core.py top --limit 10 --years 2019,2020\n"
              "  python stats_core.py player --id 17")


if __name__ == "__main__":
    main()
