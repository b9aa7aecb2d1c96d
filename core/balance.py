"""
core.balance
Balance presets for the match/economy domain.

Kept in core so every tunable number lives in one place. The curve
*shapes* are fixed by the engine; presets only move the coefficients.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class BalanceSpec:
    key: str
    desc: str
    win_payout: int
    draw_payout: int
    loss_payout: int
    payday_interval: int
    tactic_bonus: float
    tactic_penalty: float
    opponent_attack: Tuple[float, float]   # sum-of-two-stats scale, 0..200
    opponent_defense: Tuple[float, float]
    goal_ceiling: float                    # expected goals as power ratio -> inf
    goal_slope: float
    max_goals: int
    possession_bias: float
    possession_noise: float


DEFAULT_BALANCES: Dict[str, BalanceSpec] = {
    "Normal": BalanceSpec(
        key="Normal",
        desc="Standart lig. Kadro gücü ve taktik seçimi belirleyici.",
        win_payout=400,
        draw_payout=150,
        loss_payout=75,
        payday_interval=3,
        tactic_bonus=1.15,
        tactic_penalty=0.85,
        opponent_attack=(95.0, 150.0),
        opponent_defense=(95.0, 150.0),
        goal_ceiling=4.0,
        goal_slope=0.45,
        max_goals=9,
        possession_bias=12.0,
        possession_noise=3.0,
    ),
    "Zor": BalanceSpec(
        key="Zor",
        desc="Rakipler daha güçlü, taktik hatası daha pahalı.",
        win_payout=400,
        draw_payout=150,
        loss_payout=75,
        payday_interval=3,
        tactic_bonus=1.10,
        tactic_penalty=0.80,
        opponent_attack=(115.0, 170.0),
        opponent_defense=(115.0, 170.0),
        goal_ceiling=4.0,
        goal_slope=0.45,
        max_goals=9,
        possession_bias=10.0,
        possession_noise=4.0,
    ),
    "Kolay": BalanceSpec(
        key="Kolay",
        desc="Zayıf rakipler; ekonomiyi öğrenmek için.",
        win_payout=400,
        draw_payout=150,
        loss_payout=75,
        payday_interval=3,
        tactic_bonus=1.20,
        tactic_penalty=0.90,
        opponent_attack=(75.0, 125.0),
        opponent_defense=(75.0, 125.0),
        goal_ceiling=4.0,
        goal_slope=0.45,
        max_goals=9,
        possession_bias=12.0,
        possession_noise=3.0,
    ),
}


def get_balance_spec(key: str) -> BalanceSpec:
    return DEFAULT_BALANCES.get(key, DEFAULT_BALANCES["Normal"])
