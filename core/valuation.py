"""
core.valuation
Valuation & payroll rules:
- signing cost (cubic in overall)
- sell value (fixed 30% transaction loss)
- weekly salary (quadratic in overall x rarity multiplier)
- wage bill

All functions are pure. Rounding is half-up, done in integer arithmetic so
the curves stay monotone without float drift.
"""

from __future__ import annotations

from typing import Dict, Iterable

from .state import AVATAR_COLORS, Player, PlayerStats, Position, Rarity, overall


COST_DIVISOR = 4000          # overall^3 / 400 / 10
COST_STEP = 10
RESALE_PCT = 70
SALARY_FACTOR_PCT = 150      # x1.5

# multipliers in percent so salary math stays integral
RARITY_MULTIPLIER_PCT: Dict[Rarity, int] = {
    Rarity.COMMON: 100,
    Rarity.RARE: 130,
    Rarity.LEGENDARY: 180,
    Rarity.GLITCH: 250,
}

# upper bounds (exclusive) on overall for each band; anything above is Glitch
RARITY_BANDS = (
    (60, Rarity.COMMON),
    (80, Rarity.RARE),
    (95, Rarity.LEGENDARY),
)


def _div_half_up(num: int, den: int) -> int:
    return (2 * num + den) // (2 * den)


def rarity_multiplier(rarity: Rarity) -> float:
    return RARITY_MULTIPLIER_PCT[Rarity(rarity)] / 100.0


def rarity_for_overall(ovr: int) -> Rarity:
    for upper, rarity in RARITY_BANDS:
        if ovr < upper:
            return rarity
    return Rarity.GLITCH


def avatar_color(position: Position) -> str:
    return AVATAR_COLORS[Position(position)]


def signing_cost(player: Player) -> int:
    return signing_cost_for_stats(player.stats)


def signing_cost_for_stats(stats: PlayerStats) -> int:
    ovr = overall(stats)
    return _div_half_up(ovr ** 3, COST_DIVISOR) * COST_STEP


def resale_value(cost: int) -> int:
    """70% of a signing cost, floored."""
    return (int(cost) * RESALE_PCT) // 100


def sell_value(player: Player) -> int:
    return resale_value(signing_cost(player))


def weekly_salary(stats: PlayerStats, rarity: Rarity) -> int:
    ovr = overall(stats)
    pct = RARITY_MULTIPLIER_PCT[Rarity(rarity)]
    # overall^2 / 100 * 1.5 * multiplier
    return _div_half_up(ovr * ovr * SALARY_FACTOR_PCT * pct, 100 * 100 * 100)


def total_wage_bill(squad: Iterable[Player]) -> int:
    return sum(int(p.salary) for p in squad)
