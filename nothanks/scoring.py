from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from .types import Player, ScoreEntry


def find_runs(cards: Iterable[int]) -> List[List[int]]:
    sorted_cards = sorted(cards)
    if not sorted_cards:
        return []
    runs: List[List[int]] = []
    current: List[int] = [sorted_cards[0]]
    for prev, card in zip(sorted_cards, sorted_cards[1:]):
        if card == prev + 1:
            current.append(card)
        else:
            runs.append(current)
            current = [card]
    runs.append(current)
    return runs


def card_points(cards: Iterable[int]) -> Tuple[int, List[List[int]]]:
    """
    Points for a hand: only the lowest card of each consecutive run counts.

    Returns (total, runs), runs ascending.
    """
    runs = find_runs(cards)
    total = sum(run[0] for run in runs)
    return total, runs


def hand_score(player: Player) -> int:
    total, _runs = card_points(player.cards)
    return total - player.chips


def add_and_score(player: Player, card: int, chips_on_card: int) -> int:
    # Score the player would have after taking `card` with its chip pile
    total, _runs = card_points(list(player.cards) + [card])
    return total - (player.chips + chips_on_card)


def compute_scores(players: Sequence[Player]) -> List[ScoreEntry]:
    entries: List[ScoreEntry] = []
    for p in players:
        points, runs = card_points(p.cards)
        entries.append(
            ScoreEntry(
                player_id=p.id,
                name=p.name,
                total=points - p.chips,
                card_points=points,
                chip_points=p.chips,
                runs=tuple(tuple(run) for run in runs),
            )
        )
    # sorted() is stable: equal totals keep seat order
    return sorted(entries, key=lambda e: e.total)


def winners(scores: Sequence[ScoreEntry]) -> List[ScoreEntry]:
    if not scores:
        return []
    best = min(e.total for e in scores)
    return [e for e in scores if e.total == best]
