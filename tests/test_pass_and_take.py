from dataclasses import replace
import random

import pytest

from nothanks import (
    STARTING_CHIPS,
    SetupPlayer,
    GameState,
    create_game,
    pass_card,
    take_card,
    apply_action,
    can_pass,
    can_take,
    get_active_player,
    play_bot_turn,
)


def _make_state(seed: int = 1) -> GameState:
    return create_game(
        [
            SetupPlayer(id="p1", name="A", is_human=True),
            SetupPlayer(id="p2", name="B", is_human=False),
            SetupPlayer(id="p3", name="C", is_human=False),
        ],
        random.Random(seed).random,
    )


def _card_count(state: GameState) -> int:
    in_hands = sum(len(p.cards) for p in state.players)
    active = 1 if state.active_card is not None else 0
    return len(state.deck) + len(state.removed) + active + in_hands


def test_pass_spends_a_chip_and_moves_to_next_player():
    game = _make_state()
    after = pass_card(game)
    assert after.players[0].chips == STARTING_CHIPS - 1
    assert after.chips_on_card == 1
    assert after.current_idx == 1
    assert after.active_card == game.active_card
    assert after.deck == game.deck
    assert after.logs[-1].startswith("PASS:")


def test_pass_wraps_around_to_first_player():
    game = _make_state()
    after = pass_card(pass_card(pass_card(game)))
    assert after.current_idx == 0
    assert after.chips_on_card == 3
    assert all(p.chips == STARTING_CHIPS - 1 for p in after.players)


def test_pass_without_chips_is_a_noop():
    game = _make_state()
    broke = get_active_player(game)
    game = replace(game, players=(replace(broke, chips=0),) + game.players[1:])
    assert not can_pass(game)
    assert can_take(game)
    assert pass_card(game) is game


def test_take_collects_chips_and_keeps_same_player():
    game = replace(_make_state(), chips_on_card=2)
    card = game.active_card
    after = take_card(game)
    assert after.players[0].chips == STARTING_CHIPS + 2
    assert after.players[0].cards == (card,)
    assert after.chips_on_card == 0
    assert after.current_idx == 0
    assert after.active_card == game.deck[0]
    assert after.deck == game.deck[1:]


def test_take_keeps_hand_sorted():
    game = _make_state()
    p = replace(get_active_player(game), cards=(4, 20, 30))
    game = replace(game, players=(p,) + game.players[1:], active_card=12, deck=(33,))
    after = take_card(game)
    assert after.players[0].cards == (4, 12, 20, 30)


def test_take_leaves_input_state_untouched():
    game = _make_state()
    take_card(game)
    assert game.players[0].cards == ()
    assert len(game.deck) == 23


def test_taking_last_card_ends_and_scores_the_game():
    game = replace(_make_state(), deck=(), active_card=10, chips_on_card=3)
    done = take_card(game)
    assert done.status == "done"
    assert done.active_card is None
    assert done.scores is not None
    assert len(done.scores) == 3
    totals = [e.total for e in done.scores]
    assert totals == sorted(totals)
    assert done.logs[-1].startswith("GAME_OVER:")


def test_actions_after_game_over_are_noops():
    game = replace(_make_state(), deck=(), active_card=10)
    done = take_card(game)
    assert not can_pass(done) and not can_take(done)
    assert take_card(done) is done
    assert pass_card(done) is done


def test_apply_action_rejects_unknown_action():
    game = _make_state()
    with pytest.raises(ValueError):
        apply_action(game, "fold")  # type: ignore[arg-type]


def test_card_partition_holds_through_a_bot_match():
    state = create_game(
        [
            SetupPlayer(id="b1", name="Easy", is_human=False, bot_style="easy"),
            SetupPlayer(id="b2", name="Std", is_human=False, bot_style="standard"),
            SetupPlayer(id="b3", name="Greedy", is_human=False, bot_style="greedy"),
            SetupPlayer(id="b4", name="Default", is_human=False),
        ],
        random.Random(11).random,
    )
    rng = random.Random(12).random
    steps = 0
    while state.status == "playing":
        assert _card_count(state) == 33
        assert 0 <= state.current_idx < len(state.players)
        assert all(p.chips >= 0 for p in state.players)
        state = play_bot_turn(state, rng)
        steps += 1
        assert steps < 500, "match did not terminate"
    assert state.deck == ()
    assert state.active_card is None
    assert sum(len(p.cards) for p in state.players) == 24
    # Chips are only moved around, never created
    assert sum(p.chips for p in state.players) == 4 * STARTING_CHIPS
    assert state.scores is not None
    assert [e.total for e in state.scores] == sorted(e.total for e in state.scores)
