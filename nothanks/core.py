from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, List, Optional, Sequence, Tuple
import random

from .types import (
    STARTING_CHIPS,
    DEFAULT_BOT_STYLE,
    Action,
    Player,
    RandomSource,
    ScoreEntry,
    SetupPlayer,
    Status,
)
from .deck import prepare_deck
from .scoring import card_points, compute_scores, winners
from .ai import bot_decide


# Transitions never mutate: each effective one returns a new GameState and
# a no-op returns the very same object, so callers can test `after is before`.
# Failed preconditions are no-ops rather than errors; callers pre-check
# can_pass/can_take.


@dataclass(frozen=True)
class GameState:
    players: Tuple[Player, ...]
    deck: Tuple[int, ...]
    removed: Tuple[int, ...]
    active_card: Optional[int]
    chips_on_card: int = 0
    current_idx: int = 0
    status: Status = "playing"
    scores: Optional[Tuple[ScoreEntry, ...]] = None
    logs: Tuple[str, ...] = ()


def _with_log(state: GameState, *msgs: str) -> GameState:
    return replace(state, logs=state.logs + msgs)


def _replace_player(players: Tuple[Player, ...], idx: int, p: Player) -> Tuple[Player, ...]:
    return players[:idx] + (p,) + players[idx + 1:]


def create_game(setups: Sequence[SetupPlayer], rng: RandomSource = random.random) -> GameState:
    assert len(setups) >= 1, "At least one player required"
    pls = tuple(
        Player(
            id=s.id,
            name=s.name,
            is_human=s.is_human,
            bot_style=s.bot_style,
            chips=STARTING_CHIPS,
            cards=(),
        )
        for s in setups
    )
    deck, removed = prepare_deck(rng)
    first = deck[0] if deck else None
    state = GameState(
        players=pls,
        deck=tuple(deck[1:]),
        removed=tuple(removed),
        active_card=first,
        chips_on_card=0,
        current_idx=0,
        status="playing",
    )
    return _with_log(state, f"INIT: {len(pls)} players; FIRST_CARD: {first}")


def get_active_player(state: GameState) -> Player:
    return state.players[state.current_idx]


def can_take(state: GameState) -> bool:
    return state.status == "playing" and state.active_card is not None


def can_pass(state: GameState) -> bool:
    return can_take(state) and get_active_player(state).chips > 0


def is_game_over(state: GameState) -> bool:
    return state.status == "done"


def _next_idx(state: GameState) -> int:
    return (state.current_idx + 1) % len(state.players)


def pass_card(state: GameState) -> GameState:
    if not can_pass(state):
        return state
    p = get_active_player(state)
    paid = replace(p, chips=p.chips - 1)
    after = replace(
        state,
        players=_replace_player(state.players, state.current_idx, paid),
        chips_on_card=state.chips_on_card + 1,
        current_idx=_next_idx(state),
    )
    return _with_log(after, f"PASS: {p.name} on {state.active_card}; CHIPS_ON_CARD: {after.chips_on_card}")


def _finish(state: GameState) -> GameState:
    scores = tuple(compute_scores(state.players))
    done = replace(state, status="done", scores=scores)
    names = ", ".join(e.name for e in winners(scores))
    return _with_log(done, f"GAME_OVER: winner {names} ({scores[0].total})")


def take_card(state: GameState) -> GameState:
    if not can_take(state):
        return state
    card = state.active_card
    assert card is not None
    p = get_active_player(state)
    taker = replace(
        p,
        cards=tuple(sorted(p.cards + (card,))),
        chips=p.chips + state.chips_on_card,
    )
    next_card = state.deck[0] if state.deck else None
    after = replace(
        state,
        players=_replace_player(state.players, state.current_idx, taker),
        deck=state.deck[1:],
        active_card=next_card,
        chips_on_card=0,
    )
    after = _with_log(
        after,
        f"TAKE: {p.name} takes {card} with {state.chips_on_card} chips; NEXT_CARD: {next_card}",
    )
    if next_card is None:
        return _finish(after)
    return after


def apply_action(state: GameState, action: Action) -> GameState:
    if action == "pass":
        return pass_card(state)
    if action == "take":
        return take_card(state)
    raise ValueError(f"Unknown action: {action}")


def play_bot_turn(state: GameState, rng: RandomSource = random.random) -> GameState:
    """
    Let the active bot seat act once.

    The policy may answer "pass" for a seat that cannot pay; that answer is
    downgraded to "take" here. Human seats and finished games are no-ops.
    """
    if is_game_over(state):
        return state
    p = get_active_player(state)
    if p.is_human:
        return state
    style = p.bot_style or DEFAULT_BOT_STYLE
    action, info = bot_decide(state, style, rng)
    if action == "pass" and not can_pass(state):
        action = "take"
    state = _with_log(state, f"BOT_PICK: {p.name} -> {action} ({info.pick_reason})")
    return apply_action(state, action)


# --- JSON view (pure, no I/O) ---

def _player_to_obj(p: Player) -> Dict[str, object]:
    points, runs = card_points(p.cards)
    return {
        "id": p.id,
        "name": p.name,
        "isHuman": bool(p.is_human),
        "botStyle": p.bot_style,
        "chips": int(p.chips),
        "cards": list(p.cards),
        "runs": runs,
        "cardPoints": int(points),
    }


def _score_to_obj(e: ScoreEntry) -> Dict[str, object]:
    return {
        "playerId": e.player_id,
        "name": e.name,
        "total": int(e.total),
        "cardPoints": int(e.card_points),
        "chipPoints": int(e.chip_points),
        "runs": [list(run) for run in e.runs],
    }


def to_json(state: GameState) -> Dict[str, object]:
    # Deck order and the removed pile stay hidden; only counts are exposed.
    players_obj: List[Dict[str, object]] = [_player_to_obj(p) for p in state.players]
    data: Dict[str, object] = {
        "schemaVersion": 1,
        "players": players_obj,
        "activeCard": state.active_card,
        "chipsOnCard": int(state.chips_on_card),
        "deckRemaining": len(state.deck),
        "removedCount": len(state.removed),
        "currentPlayerId": get_active_player(state).id,
        "status": state.status,
        "canPass": can_pass(state),
        "canTake": can_take(state),
        "logs": list(state.logs),
    }
    if state.scores is not None:
        data["scores"] = [_score_to_obj(e) for e in state.scores]
    return data
