from __future__ import annotations

from typing import Optional

import pytest

from core.balance import BalanceSpec, get_balance_spec
from core.state import AVATAR_COLORS, Player, PlayerStats, Position, Rarity
from core.valuation import weekly_salary


def flat_stats(level: int) -> PlayerStats:
    return PlayerStats(pace=level, shooting=level, passing=level, dribbling=level, defense=level, physical=level)


def make_player(
    pid: str,
    level: int = 60,
    *,
    position: Position = Position.FORWARD,
    rarity: Rarity = Rarity.COMMON,
    salary: Optional[int] = None,
) -> Player:
    stats = flat_stats(level)
    return Player(
        id=pid,
        name=f"Player {pid}",
        origin="Test Sektör",
        age=24,
        position=position,
        stats=stats,
        rarity=rarity,
        salary=weekly_salary(stats, rarity) if salary is None else salary,
        avatar_color=AVATAR_COLORS[position],
    )


def profile_payload(**overrides):
    data = {
        "name": "Nyx Okafor",
        "origin": "Tuvalu Yüzen Şehri",
        "age": 21,
        "position": "Orta Saha",
        "stats": {"pace": 50, "shooting": 50, "passing": 50, "dribbling": 50, "defense": 50, "physical": 50},
        "backstory": "Bir kargo gemisinin güvertesinde keşfedildi.",
        "rarity": "Sıradan",
    }
    data.update(overrides)
    return data


def match_payload(**overrides):
    data = {
        "homeScore": 2,
        "awayScore": 1,
        "opponentName": "Svalbard Buzkıranları",
        "possession": 55,
        "winner": "home",
        "events": [
            {"minute": 12, "description": "GOL!", "type": "goal"},
            {"minute": 40, "description": "Sarı kart", "type": "card"},
            {"minute": 67, "description": "GOL!", "type": "goal"},
            {"minute": 80, "description": "Rakip golü", "type": "goal"},
        ],
        "summary": "Dramatik bir gece.",
    }
    data.update(overrides)
    return data


@pytest.fixture
def spec() -> BalanceSpec:
    return get_balance_spec("Normal")
