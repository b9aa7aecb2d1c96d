"""
core.tactics
Tactic resolution:
- fixed, non-transitive advantage cycle between the four tactics
- aggregate squad power (attack = shooting+pace, defense = defense+physical)
- opponent draw
- scoreline + possession from a seeded Random

Expected goals follow a saturating curve of the attack/defense ratio, so
more power always helps but with diminishing returns; the actual count is
a capped Poisson draw around it and is never guaranteed.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Sequence, Tuple

from .balance import BalanceSpec
from .errors import EmptySquad
from .state import Player, Tactic, Winner, clamp, winner_for


class MatchPhase(str, Enum):
    BRIEFING = "briefing"
    RESOLVING = "resolving"
    RESOLVED = "resolved"


# key beats value
BEATS: Dict[Tactic, Tactic] = {
    Tactic.COUNTER_ATTACK: Tactic.ALL_OUT_ATTACK,
    Tactic.ALL_OUT_ATTACK: Tactic.POSSESSION_GAME,
    Tactic.POSSESSION_GAME: Tactic.PARK_THE_BUS,
    Tactic.PARK_THE_BUS: Tactic.COUNTER_ATTACK,
}


def matchup(tactic: Tactic, opponent: Tactic) -> int:
    """+1 if `tactic` beats `opponent`, -1 if it loses, 0 otherwise."""
    if BEATS[tactic] == opponent:
        return 1
    if BEATS[opponent] == tactic:
        return -1
    return 0


def tactic_factor(tactic: Tactic, opponent: Tactic, spec: BalanceSpec) -> float:
    m = matchup(tactic, opponent)
    if m > 0:
        return float(spec.tactic_bonus)
    if m < 0:
        return float(spec.tactic_penalty)
    return 1.0


@dataclass(frozen=True)
class TeamPower:
    attack: float    # 0..200
    defense: float   # 0..200


def squad_power(squad: Sequence[Player]) -> TeamPower:
    if not squad:
        raise EmptySquad("cannot compute squad power for an empty squad")
    n = float(len(squad))
    attack = sum(p.stats.shooting + p.stats.pace for p in squad) / n
    defense = sum(p.stats.defense + p.stats.physical for p in squad) / n
    return TeamPower(attack=float(attack), defense=float(defense))


def star_player(squad: Sequence[Player]) -> Player:
    if not squad:
        raise EmptySquad("empty squad has no key player")
    return max(squad, key=lambda p: p.stats.dribbling)


def draw_opponent(rng: random.Random, spec: BalanceSpec) -> Tuple[TeamPower, Tactic]:
    attack = rng.uniform(*spec.opponent_attack)
    defense = rng.uniform(*spec.opponent_defense)
    return TeamPower(attack=attack, defense=defense), rng.choice(list(Tactic))


def expected_goals(attack: float, defense: float, spec: BalanceSpec) -> float:
    ratio = max(0.0, attack) / max(1.0, defense)
    return float(spec.goal_ceiling) * (1.0 - math.exp(-float(spec.goal_slope) * ratio))


def sample_goals(lam: float, rng: random.Random, cap: int) -> int:
    # Knuth Poisson draw, capped
    if lam <= 0:
        return 0
    limit = math.exp(-lam)
    k = 0
    p = 1.0
    while True:
        p *= rng.random()
        if p <= limit or k >= cap:
            return k
        k += 1


def possession_share(tactic: Tactic, opponent: Tactic, rng: random.Random, spec: BalanceSpec) -> int:
    base = 50.0
    if tactic == Tactic.POSSESSION_GAME:
        base += spec.possession_bias
    if opponent == Tactic.POSSESSION_GAME:
        base -= spec.possession_bias
    share = base + rng.gauss(0.0, spec.possession_noise)
    return int(clamp(round(share), 20, 80))


@dataclass(frozen=True)
class Resolution:
    home_score: int
    away_score: int
    possession: int
    winner: Winner
    tactic: Tactic
    opponent_tactic: Tactic
    home_power: TeamPower
    away_power: TeamPower
    home_xg: float
    away_xg: float


def resolve_match(
    squad: Sequence[Player],
    tactic: Tactic,
    rng: random.Random,
    spec: BalanceSpec,
    *,
    opponent: Optional[Tuple[TeamPower, Tactic]] = None,
) -> Resolution:
    """Turn squad + tactic into a scoreline. `opponent` overrides the random draw."""
    home = squad_power(squad)
    away, opp_tactic = opponent if opponent is not None else draw_opponent(rng, spec)
    tactic = Tactic(tactic)

    home_attack = home.attack * tactic_factor(tactic, opp_tactic, spec)
    away_attack = away.attack * tactic_factor(opp_tactic, tactic, spec)

    home_xg = expected_goals(home_attack, away.defense, spec)
    away_xg = expected_goals(away_attack, home.defense, spec)

    home_score = sample_goals(home_xg, rng, spec.max_goals)
    away_score = sample_goals(away_xg, rng, spec.max_goals)
    possession = possession_share(tactic, opp_tactic, rng, spec)

    return Resolution(
        home_score=home_score,
        away_score=away_score,
        possession=possession,
        winner=winner_for(home_score, away_score),
        tactic=tactic,
        opponent_tactic=opp_tactic,
        home_power=home,
        away_power=away,
        home_xg=home_xg,
        away_xg=away_xg,
    )
