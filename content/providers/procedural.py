"""content.providers.procedural

Owned, deterministic provider (no LLM, no network).

Profiles: a quality level is drawn first (skewed toward the Common band,
with a thin Glitch tail), then each attribute is spread around it with a
position-specific emphasis. Rarity follows from the resulting overall.
Matches are delegated to the owned simulation in core.match.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence

from core.balance import get_balance_spec
from core.match import simulate_match
from core.names import ORIGINS, NameGenerator, backstory
from core.rng import rng_from
from core.state import STAT_KEYS, MatchResult, Player, Position, Tactic, stats_from_mapping
from core.valuation import rarity_for_overall

from ..schemas import PlayerProfile
from .base import ProviderStatus

POSITION_EMPHASIS: Dict[Position, Dict[str, float]] = {
    Position.FORWARD: {"pace": 8, "shooting": 12, "passing": -2, "dribbling": 6, "defense": -18, "physical": -2},
    Position.MIDFIELDER: {"pace": 0, "shooting": -2, "passing": 12, "dribbling": 6, "defense": -6, "physical": -4},
    Position.DEFENDER: {"pace": -4, "shooting": -14, "passing": -2, "dribbling": -8, "defense": 14, "physical": 12},
    Position.GOALKEEPER: {"pace": -10, "shooting": -20, "passing": 0, "dribbling": -14, "defense": 18, "physical": 8},
}


def _quality(rng: random.Random) -> float:
    roll = rng.random()
    if roll < 0.03:
        return rng.uniform(93.0, 99.0)      # glitch tail
    if roll < 0.15:
        return rng.uniform(78.0, 92.0)
    return rng.triangular(42.0, 82.0, 58.0)


@dataclass
class ProceduralProvider:
    base_seed: int = 42
    balance_key: str = "Normal"
    _names: NameGenerator = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._names = NameGenerator(rng_from("names", base_seed=int(self.base_seed)))

    def status(self) -> ProviderStatus:
        return ProviderStatus(True, "procedural", "", note=f"seed={self.base_seed}")

    def reserve_names(self, names) -> None:
        self._names.reserve(names)

    def request_player_profile(self, position: Optional[Position] = None, *, request_no: int = 0) -> PlayerProfile:
        rng = rng_from("scout", int(request_no), base_seed=int(self.base_seed))
        pos = Position(position) if position is not None else rng.choice(list(Position))

        level = _quality(rng)
        emphasis = POSITION_EMPHASIS[pos]
        raw = {k: level + emphasis[k] + rng.gauss(0.0, 5.0) for k in STAT_KEYS}
        # emphasis averages below zero; recentre so overall tracks the drawn level
        shift = level - sum(raw.values()) / len(raw)
        stats = stats_from_mapping({k: v + shift for k, v in raw.items()}, clamp_values=True)

        origin = rng.choice(ORIGINS)
        return PlayerProfile(
            name=self._names.next_name(),
            origin=origin,
            age=rng.randint(17, 34),
            position=pos,
            stats=stats,
            rarity=rarity_for_overall(stats.overall),
            backstory=backstory(rng, origin),
        )

    def request_match_narrative(self, squad: Sequence[Player], tactic: Tactic, *, match_no: int = 0) -> MatchResult:
        return simulate_match(
            squad,
            tactic,
            get_balance_spec(self.balance_key),
            base_seed=int(self.base_seed),
            match_no=int(match_no),
        )
