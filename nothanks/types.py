from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Literal, Optional, Tuple, TypeAlias

# Fixed table constants
MIN_CARD: int = 3
MAX_CARD: int = 35
UNKNOWN_CARDS: int = 9
STARTING_CHIPS: int = 11

BotStyle: TypeAlias = Literal["easy", "standard", "greedy"]
BOT_STYLES: Tuple[BotStyle, ...] = ("easy", "standard", "greedy")
DEFAULT_BOT_STYLE: BotStyle = "standard"

Action: TypeAlias = Literal["pass", "take"]
Status: TypeAlias = Literal["playing", "done"]

# Uniform [0, 1) source, e.g. random.random or random.Random(seed).random
RandomSource: TypeAlias = Callable[[], float]


@dataclass(frozen=True)
class SetupPlayer:
    id: str
    name: str
    is_human: bool
    bot_style: Optional[BotStyle] = None


@dataclass(frozen=True)
class Player:
    id: str
    name: str
    is_human: bool
    bot_style: Optional[BotStyle]
    chips: int
    cards: Tuple[int, ...] = ()  # ascending

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class ScoreEntry:
    player_id: str
    name: str
    total: int
    card_points: int
    chip_points: int
    runs: Tuple[Tuple[int, ...], ...]
