#!/usr/bin/env python3
import io
import csv
import os
import logging

from flask import Flask, render_template, request, flash, send_file

from stats_core import SCORES_FILE
from totals.board import ScoreBoard
from totals.seasons import TOP_SEASONS_LIMIT, parse_years
from totals.view import SORT_KEYS, ViewState

logger = logging.getLogger(__name__)

COLUMNS = [
    ("playername", "Player"),
    ("goals", "Goals"),
    ("assists", "Assists"),
    ("points", "Points"),
    ("seasons", "Seasons"),
    ("points_per_season", "PTS/S"),
]

app = Flask(__name__)
app.secret_key = os.environ.get("SECRET_KEY", "change-me")  # only used for flash messages
app.config["SCORES_SOURCE"] = os.environ.get("SCORES_SOURCE", str(SCORES_FILE))


# ---- Helpers for the web layer ----
def _loaded_board() -> ScoreBoard:
    """Load scores once per app; later requests share the same read-only frames."""
    board = app.extensions.get("scoreboard")
    if board is None:
        board = ScoreBoard()
        board.load(app.config["SCORES_SOURCE"])
        app.extensions["scoreboard"] = board
    return board


def _request_board() -> ScoreBoard:
    """
    Per-request board rebuilt from the click history (?hist=goals,points) and
    the search text (?q=), then the newly clicked column (?by=) applied.
    """
    board = _loaded_board().restore(ViewState().with_search(request.args.get("q", "")))
    clicks = [k for k in (request.args.get("hist") or "").split(",") if k]
    clicked = request.args.get("by")
    if clicked:
        clicks.append(clicked)
    for key in clicks:
        if key not in SORT_KEYS:
            flash(f"Unknown column '{key}'.", "warning")
            continue
        board.sort_by(key)
    return board


def _parse_limit(raw: str | None) -> int:
    if raw is None or raw == "":
        return TOP_SEASONS_LIMIT
    try:
        limit = int(raw)
    except ValueError:
        flash(f"Limit must be a number; showing top {TOP_SEASONS_LIMIT}.", "warning")
        return TOP_SEASONS_LIMIT
    return max(limit, 0)


# ---- Routes ----
@app.route("/")
def index():
    board = _request_board()
    if not board.has_data:
        flash("No data loaded. Check scores.json and the server log.", "warning")
    return render_template(
        "index.html",
        players=board.visible().to_dict("records"),
        columns=COLUMNS,
        view=board.view,
        hist=",".join(board.history),
    )


@app.route("/top")
def top_view():
    board = _loaded_board()
    years = parse_years(request.args.get("years"))
    limit = _parse_limit(request.args.get("limit"))
    seasons = board.show_top_seasons(limit, years)
    return render_template(
        "top.html",
        seasons=seasons.to_dict("records"),
        limit=limit,
        years=",".join(str(y) for y in years),
    )


@app.route("/player/<player_id>")
def player_view(player_id: str):
    seasons = _loaded_board().player_history(player_id)
    if seasons.empty:
        flash(f"No seasons found for player {player_id}.", "warning")
    name = seasons["playername"].iloc[0] if not seasons.empty else f"#{player_id}"
    return render_template("player.html", seasons=seasons.to_dict("records"), name=name)


@app.route("/export.csv")
def export_csv():
    board = _request_board()
    output = io.StringIO()
    w = csv.writer(output)
    w.writerow([c for c, _ in COLUMNS])
    for p in board.visible().to_dict("records"):
        w.writerow([p[c] for c, _ in COLUMNS])
    mem = io.BytesIO(output.getvalue().encode("utf-8"))
    return send_file(mem, as_attachment=True, download_name="player_totals.csv", mimetype="text/csv")


if __name__ == "__main__":
    # Run: python3 web/app.py
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    app.run(host="127.0.0.1", port=5000, debug=True)
