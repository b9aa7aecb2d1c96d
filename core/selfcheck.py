"""
core.selfcheck
Minimal "it runs" proof for the economy ledger.

Run:
  python -m core.selfcheck
"""

from __future__ import annotations

from typing import Any, Dict, List

from .balance import get_balance_spec
from .ledger import apply_match_outcome, maybe_run_payday
from .state import EventType, MatchEvent, MatchResult, Winner, default_start_state
from .valuation import total_wage_bill


def _home_win() -> MatchResult:
    return MatchResult(
        home_score=1,
        away_score=0,
        opponent_name="Selfcheck FC",
        possession=50,
        winner=Winner.HOME,
        events=[MatchEvent(minute=10, description="GOL! (1-0)", type=EventType.GOAL)],
        summary="selfcheck",
    )


def run_three_wins_smoke() -> Dict[str, Any]:
    spec = get_balance_spec("Normal")
    state = default_start_state()
    bill = total_wage_bill(state.squad)
    assert bill == 180, bill

    trail: List[int] = []
    paydays = 0
    for _ in range(3):
        state = apply_match_outcome(state, _home_win(), spec)
        state, payday = maybe_run_payday(state, spec.payday_interval)
        if payday is not None:
            paydays += 1
            assert payday.amount == bill
        trail.append(int(state.credits))

    # invariants
    assert trail == [1900, 2300, 2520], trail
    assert state.matches_played == 3
    assert paydays == 1
    return {"credits": trail, "matches_played": state.matches_played, "paydays": paydays}


if __name__ == "__main__":
    out = run_three_wins_smoke()
    print("OK: 3-match ledger smoke test passed.")
    print("Credits after each match:", out["credits"])
