from dataclasses import replace
from pathlib import Path
import random

from nothanks import SetupPlayer, create_game, take_card, pass_card, to_json


def _game():
    return create_game(
        [
            SetupPlayer(id="p1", name="You", is_human=True),
            SetupPlayer(id="p2", name="Bot", is_human=False, bot_style="easy"),
            SetupPlayer(id="p3", name="Bot 2", is_human=False, bot_style="greedy"),
        ],
        random.Random(8).random,
    )


def test_json_view_of_fresh_game():
    s = to_json(_game())
    assert s["schemaVersion"] == 1
    assert s["chipsOnCard"] == 0
    assert s["deckRemaining"] == 23
    assert s["removedCount"] == 9
    assert s["status"] == "playing"
    assert "scores" not in s
    p0 = s["players"][0]
    assert p0 == {
        "id": "p1",
        "name": "You",
        "isHuman": True,
        "botStyle": None,
        "chips": 11,
        "cards": [],
        "runs": [],
        "cardPoints": 0,
    }


def test_json_view_reports_runs_and_logs():
    game = replace(_game(), active_card=20, deck=(21, 5, 30))
    game = take_card(take_card(game))
    s = to_json(game)
    assert s["players"][0]["cards"] == [20, 21]
    assert s["players"][0]["runs"] == [[20, 21]]
    assert s["players"][0]["cardPoints"] == 20
    assert s["activeCard"] == 5
    assert any(line.startswith("TAKE:") for line in s["logs"])


def test_json_view_of_finished_game():
    game = replace(pass_card(_game()), deck=(), active_card=7)
    s = to_json(take_card(game))
    assert s["status"] == "done"
    assert s["canPass"] is False and s["canTake"] is False
    scores = s["scores"]
    assert {e["playerId"] for e in scores} == {"p1", "p2", "p3"}
    p2 = next(e for e in scores if e["playerId"] == "p2")
    assert p2["cardPoints"] == 7
    assert p2["chipPoints"] == 12
    assert p2["total"] == -5
    assert p2["runs"] == [[7]]


def test_engine_has_no_io_calls():
    bad = []
    pkg = Path(__file__).resolve().parent.parent / "nothanks"
    for path in pkg.rglob("*.py"):
        txt = path.read_text(encoding="utf-8")
        if "print(" in txt or "input(" in txt:
            bad.append(str(path))
    assert not bad, f"I/O found in engine modules: {bad}"
