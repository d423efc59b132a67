from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Sequence, Tuple
import random

from .types import Action, BotStyle, RandomSource
from .scoring import add_and_score, hand_score

if TYPE_CHECKING:
    from .core import GameState


@dataclass
class BotSignals:
    base_score: int       # score if the game ended now
    projected_score: int  # score after taking the active card
    delta: int            # projected - base; negative means taking helps
    run_link: bool


@dataclass
class ExplainInfo:
    signals: Optional[BotSignals]
    pick_reason: str


def forms_run(card: int, cards: Sequence[int]) -> bool:
    return (card - 1) in cards or (card + 1) in cards


def evaluate_signals(state: "GameState") -> BotSignals:
    p = state.players[state.current_idx]
    card = state.active_card
    assert card is not None, "No active card to evaluate"
    base = hand_score(p)
    projected = add_and_score(p, card, state.chips_on_card)
    return BotSignals(
        base_score=base,
        projected_score=projected,
        delta=projected - base,
        run_link=forms_run(card, p.cards),
    )


def _greedy(state: "GameState", s: BotSignals) -> Tuple[Action, str]:
    if s.run_link:
        return "take", "run link"
    if s.delta <= 2:
        return "take", f"delta={s.delta} <= 2"
    if state.chips_on_card >= 4:
        return "take", f"chips on card={state.chips_on_card} >= 4"
    return "pass", "nothing worth taking"


def _easy(state: "GameState", s: BotSignals, rng: RandomSource) -> Tuple[Action, str]:
    if s.run_link and s.delta <= 3:
        return "take", f"run link, delta={s.delta} <= 3"
    # Chip pile only ever tilts the coin toward taking
    chance = rng()
    if state.chips_on_card >= 3 and chance > 0.3:
        return "take", f"pile bias, roll={chance:.3f}"
    if chance > 0.5:
        return "pass", f"coin flip, roll={chance:.3f}"
    return "take", f"coin flip, roll={chance:.3f}"


def _standard(state: "GameState", s: BotSignals) -> Tuple[Action, str]:
    if s.delta <= 0:
        return "take", f"delta={s.delta} <= 0"
    if s.run_link and s.delta <= 3:
        return "take", f"run link, delta={s.delta} <= 3"
    if len(state.deck) < 6 and s.delta <= 4:
        return "take", f"deck={len(state.deck)} < 6, delta={s.delta} <= 4"
    if state.chips_on_card >= 5 and s.delta <= 5:
        return "take", f"chips on card={state.chips_on_card} >= 5, delta={s.delta} <= 5"
    return "pass", f"delta={s.delta} too costly"


def bot_decide(
    state: "GameState",
    style: BotStyle = "standard",
    rng: RandomSource = random.random,
) -> Tuple[Action, ExplainInfo]:
    """
    Pick pass or take for the active player without touching the state.

    The answer is advisory: a caller applying "pass" must still check
    can_pass, since the chip precondition lives in the engine.
    """
    if state.active_card is None:
        return "take", ExplainInfo(signals=None, pick_reason="forced take: no active card")
    p = state.players[state.current_idx]
    if p.chips <= 0:
        return "take", ExplainInfo(signals=None, pick_reason="forced take: no chips")

    signals = evaluate_signals(state)
    if style == "greedy":
        action, why = _greedy(state, signals)
    elif style == "easy":
        action, why = _easy(state, signals, rng)
    elif style == "standard":
        action, why = _standard(state, signals)
    else:
        raise ValueError(f"Unknown bot style: {style}")
    return action, ExplainInfo(signals=signals, pick_reason=f"{style}: {why}")


def decide_bot_action(
    state: "GameState",
    style: BotStyle = "standard",
    rng: RandomSource = random.random,
) -> Action:
    action, _info = bot_decide(state, style, rng)
    return action
