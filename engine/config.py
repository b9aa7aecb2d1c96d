"""engine.config

Engine configuration passed from the caller (UI, runner, tests).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from core.balance import BalanceSpec, get_balance_spec


@dataclass(frozen=True)
class EngineConfig:
    base_seed: int
    balance_key: str = "Normal"
    starting_credits: int = 1500
    scout_cost: int = 50
    payday_interval: Optional[int] = None   # None -> balance preset

    @property
    def balance(self) -> BalanceSpec:
        return get_balance_spec(self.balance_key)

    @property
    def interval(self) -> int:
        return int(self.payday_interval or self.balance.payday_interval)


def load_api_key() -> str:
    """Key for the remote collaborator; empty string when not configured."""
    return os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY") or ""
