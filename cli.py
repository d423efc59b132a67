from __future__ import annotations

from typing import List, Tuple
import random
import time

from nothanks import (
    SetupPlayer,
    GameState,
    create_game,
    get_active_player,
    can_pass,
    is_game_over,
    pass_card,
    take_card,
    play_bot_turn,
    find_runs,
    winners,
)


# Table configuration
PLAYERS: List[SetupPlayer] = [
    SetupPlayer(id="p1", name="You", is_human=True),
    SetupPlayer(id="p2", name="Bot A", is_human=False, bot_style="standard"),
    SetupPlayer(id="p3", name="Bot B", is_human=False, bot_style="greedy"),
]

# Bot think time in seconds; (0, 0) disables the pause
BOT_DELAY_RANGE: Tuple[float, float] = (0.32, 0.84)


def format_runs(cards: Tuple[int, ...]) -> str:
    if not cards:
        return "(no cards)"
    parts: List[str] = []
    for run in find_runs(cards):
        if len(run) == 1:
            parts.append(str(run[0]))
        else:
            parts.append(f"{run[0]}-{run[-1]}")
    return " ".join(parts)


def print_table(state: GameState) -> None:
    print()
    print(f"Card: {state.active_card}  chips on card: {state.chips_on_card}  deck: {len(state.deck)}")
    for idx, p in enumerate(state.players):
        marker = ">" if idx == state.current_idx else " "
        kind = "H" if p.is_human else f"AI:{p.bot_style}"
        print(f"{marker} {p.name:<10} [{kind}] chips={p.chips:>2}  cards: {format_runs(p.cards)}")


class LogPrinter:
    """Prints the engine's log lines that have not been shown yet."""

    def __init__(self) -> None:
        self.seen = 0

    def drain(self, state: GameState) -> None:
        for line in state.logs[self.seen:]:
            print(line)
        self.seen = len(state.logs)


def human_turn(state: GameState) -> GameState:
    p = get_active_player(state)
    while True:
        a = input(f"{p.name}, pass or take? (p/t): ").strip().lower()
        if a == "t":
            return take_card(state)
        if a == "p":
            if not can_pass(state):
                print("No chips left; you must take.")
                continue
            return pass_card(state)


def bot_turn(state: GameState) -> GameState:
    lo, hi = BOT_DELAY_RANGE
    if hi > 0:
        time.sleep(random.uniform(lo, hi))
    return play_bot_turn(state)


def print_scores(state: GameState) -> None:
    assert state.scores is not None
    print("\n=== Final scores ===")
    for e in state.scores:
        runs = format_runs(tuple(c for run in e.runs for c in run))
        print(f"{e.name:<10} {e.total:>4}  (cards {e.card_points}, chips -{e.chip_points})  {runs}")
    best = winners(state.scores)
    if len(best) == 1:
        print(f"Winner: {best[0].name}")
    else:
        print("Winners (tie): " + ", ".join(e.name for e in best))


def play_match(setups: List[SetupPlayer]) -> GameState:
    state = create_game(setups)
    log = LogPrinter()
    log.drain(state)
    while not is_game_over(state):
        print_table(state)
        if get_active_player(state).is_human:
            state = human_turn(state)
        else:
            state = bot_turn(state)
        log.drain(state)
    print_scores(state)
    return state


def main() -> None:
    print("No Thanks! Console Table")
    while True:
        play_match(PLAYERS)
        again = input("\nRematch? (y/n): ").strip().lower()
        if again != "y":
            break


if __name__ == "__main__":
    main()
