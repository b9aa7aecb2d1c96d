"""
core.match
Owned match simulation: tactic resolution + opponent name + event feed.

Two Random streams per match (resolution / narrative) so tweaking the
narrative never shifts a scoreline for the same seed.
"""

from __future__ import annotations

from typing import Sequence

from .balance import BalanceSpec
from .errors import EmptySquad
from .names import opponent_name
from .events import build_summary, generate_events
from .rng import match_rng
from .state import MatchResult, Player, Tactic
from .tactics import resolve_match, star_player


def simulate_match(
    squad: Sequence[Player],
    tactic: Tactic,
    spec: BalanceSpec,
    *,
    base_seed: int,
    match_no: int,
) -> MatchResult:
    if not squad:
        raise EmptySquad("cannot play a match without players")

    res = resolve_match(squad, Tactic(tactic), match_rng(base_seed, match_no, "resolve"), spec)

    story = match_rng(base_seed, match_no, "narrative")
    opponent = opponent_name(story)
    events = generate_events(
        home_score=res.home_score,
        away_score=res.away_score,
        possession=res.possession,
        squad=squad,
        opponent_name=opponent,
        tactic=res.tactic,
        rng=story,
    )
    summary = build_summary(
        home_score=res.home_score,
        away_score=res.away_score,
        winner=res.winner,
        possession=res.possession,
        opponent_name=opponent,
        tactic=res.tactic,
        star_name=star_player(squad).name,
    )
    return MatchResult(
        home_score=res.home_score,
        away_score=res.away_score,
        opponent_name=opponent,
        possession=res.possession,
        winner=res.winner,
        events=events,
        summary=summary,
        tactic=res.tactic,
        opponent_tactic=res.opponent_tactic,
    )
