from .types import (
    MIN_CARD,
    MAX_CARD,
    UNKNOWN_CARDS,
    STARTING_CHIPS,
    BOT_STYLES,
    DEFAULT_BOT_STYLE,
    Action,
    BotStyle,
    Status,
    RandomSource,
    SetupPlayer,
    Player,
    ScoreEntry,
)
from .deck import make_deck, shuffle, prepare_deck
from .scoring import find_runs, card_points, hand_score, add_and_score, compute_scores, winners
from .ai import BotSignals, ExplainInfo, forms_run, evaluate_signals, bot_decide, decide_bot_action
from .core import (
    GameState,
    create_game,
    get_active_player,
    can_pass,
    can_take,
    is_game_over,
    pass_card,
    take_card,
    apply_action,
    play_bot_turn,
    to_json,
)

__all__ = [
    "MIN_CARD",
    "MAX_CARD",
    "UNKNOWN_CARDS",
    "STARTING_CHIPS",
    "BOT_STYLES",
    "DEFAULT_BOT_STYLE",
    "Action",
    "BotStyle",
    "Status",
    "RandomSource",
    "SetupPlayer",
    "Player",
    "ScoreEntry",
    "make_deck",
    "shuffle",
    "prepare_deck",
    "find_runs",
    "card_points",
    "hand_score",
    "add_and_score",
    "compute_scores",
    "winners",
    "BotSignals",
    "ExplainInfo",
    "forms_run",
    "evaluate_signals",
    "bot_decide",
    "decide_bot_action",
    "GameState",
    "create_game",
    "get_active_player",
    "can_pass",
    "can_take",
    "is_game_over",
    "pass_card",
    "take_card",
    "apply_action",
    "play_bot_turn",
    "to_json",
]
