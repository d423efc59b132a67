from __future__ import annotations

from typing import List, Sequence, Tuple
import random

from .types import MAX_CARD, MIN_CARD, UNKNOWN_CARDS, RandomSource


def make_deck() -> List[int]:
    return list(range(MIN_CARD, MAX_CARD + 1))


def _pick_index(rng: RandomSource, n: int) -> int:
    # Clamp guards against a source that returns exactly 1.0
    return min(int(rng() * n), n - 1)


def shuffle(cards: Sequence[int], rng: RandomSource = random.random) -> List[int]:
    """Fisher-Yates over a copy; the input sequence is left untouched."""
    deck = list(cards)
    for i in range(len(deck) - 1, 0, -1):
        j = _pick_index(rng, i + 1)
        deck[i], deck[j] = deck[j], deck[i]
    return deck


def prepare_deck(rng: RandomSource = random.random) -> Tuple[List[int], List[int]]:
    """
    Build the full card range, set UNKNOWN_CARDS of them aside face-down and
    shuffle the rest.

    Returns (deck, removed). The removed pile is never revealed during play.
    """
    remaining = make_deck()
    removed: List[int] = []
    for _ in range(UNKNOWN_CARDS):
        idx = _pick_index(rng, len(remaining))
        removed.append(remaining.pop(idx))
    return shuffle(remaining, rng), removed
