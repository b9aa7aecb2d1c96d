import pytest

from core.errors import InsufficientFunds, NotFound
from core.ledger import (
    apply_match_outcome,
    charge_scouting_fee,
    matches_until_payday,
    maybe_run_payday,
    payout_for,
    refund_scouting_fee,
    sell_player,
    sign_player,
)
from core.selfcheck import run_three_wins_smoke
from core.state import EconomyState, EventType, MatchEvent, MatchResult, Winner, default_start_state
from core.valuation import sell_value, signing_cost

from conftest import make_player


def _result(home: int, away: int, winner: Winner) -> MatchResult:
    events = [MatchEvent(minute=10 + i, description="GOL!", type=EventType.GOAL) for i in range(home + away)]
    events.append(MatchEvent(minute=85, description="Taktik değişikliği", type=EventType.TACTICAL))
    return MatchResult(home_score=home, away_score=away, opponent_name="Nauru", possession=50,
                       winner=winner, events=events, summary="")


def _play(state: EconomyState, result: MatchResult, spec):
    state = apply_match_outcome(state, result, spec)
    return maybe_run_payday(state, spec.payday_interval)


def test_payouts(spec) -> None:
    assert payout_for(Winner.HOME, spec) == 400
    assert payout_for(Winner.DRAW, spec) == 150
    assert payout_for(Winner.AWAY, spec) == 75


def test_three_wins_with_opening_squad(spec) -> None:
    state = default_start_state()
    trail, paydays = [], []
    for _ in range(3):
        state, payday = _play(state, _result(2, 0, Winner.HOME), spec)
        trail.append(state.credits)
        paydays.append(payday)
    assert trail == [1900, 2300, 2520]
    assert paydays[0] is None and paydays[1] is None
    assert paydays[2].amount == 180 and paydays[2].match_no == 3
    assert state.matches_played == 3


def test_payday_fires_once_per_interval(spec) -> None:
    state = default_start_state()
    fired = 0
    for _ in range(9):
        state, payday = _play(state, _result(0, 0, Winner.DRAW), spec)
        fired += payday is not None
    assert fired == 3


def test_matches_until_payday(spec) -> None:
    state = default_start_state()
    assert matches_until_payday(state, 3) == 3
    state, _ = _play(state, _result(0, 1, Winner.AWAY), spec)
    assert matches_until_payday(state, 3) == 2


def test_payroll_can_push_credits_negative(spec) -> None:
    state = EconomyState(credits=100, matches_played=2, squad=default_start_state().squad)
    state, payday = _play(state, _result(0, 1, Winner.AWAY), spec)
    assert payday is not None
    assert state.credits == 100 + 75 - 180


def test_signing_debits_cost_and_prepends() -> None:
    state = default_start_state()
    candidate = make_player("new", 50)
    after = sign_player(state, candidate)
    assert after.credits == 1500 - 310
    assert after.squad[0] is candidate
    assert len(after.squad) == 4
    assert len(state.squad) == 3


def test_unaffordable_signing_leaves_state_unchanged() -> None:
    state = default_start_state()
    star = make_player("star", 100)
    with pytest.raises(InsufficientFunds) as exc:
        sign_player(state, star)
    assert exc.value.required == 2500
    assert exc.value.available == 1500
    assert state == default_start_state()


def test_signing_twice_is_rejected() -> None:
    state = sign_player(default_start_state(), make_player("dup", 40))
    with pytest.raises(ValueError):
        sign_player(state, make_player("dup", 40))


def test_selling_credits_resale_value() -> None:
    state = default_start_state()
    player = state.find_player("init-1")
    after, value = sell_player(state, "init-1")
    assert value == sell_value(player) == 483
    assert value < signing_cost(player)
    assert after.credits == state.credits + value
    assert len(after.squad) == len(state.squad) - 1
    assert all(p.id != "init-1" for p in after.squad)


def test_selling_unknown_player_raises_not_found() -> None:
    state = default_start_state()
    with pytest.raises(NotFound) as exc:
        sell_player(state, "ghost")
    assert exc.value.player_id == "ghost"
    assert isinstance(exc.value, KeyError)
    assert str(exc.value) == "player not in squad: ghost"


def test_scouting_fee_charge_and_refund() -> None:
    state = default_start_state()
    charged = charge_scouting_fee(state, 50)
    assert charged.credits == 1450
    assert refund_scouting_fee(charged, 50).credits == 1500
    with pytest.raises(InsufficientFunds):
        charge_scouting_fee(EconomyState(credits=49), 50)


def test_selfcheck_smoke() -> None:
    out = run_three_wins_smoke()
    assert out == {"credits": [1900, 2300, 2520], "matches_played": 3, "paydays": 1}
