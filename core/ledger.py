"""
core.ledger
Season / economy rules:
- match payouts + match counter
- periodic payday (wage bill debit, no floor on credits)
- signing / selling players
- scouting fee charge + refund

Every operation is a pure state transition: it returns a new EconomyState
or raises, and never touches the state it was given.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional, Tuple

from .balance import BalanceSpec
from .errors import InsufficientFunds
from .state import EconomyState, MatchResult, PaydayEvent, Player, Winner
from .valuation import sell_value, signing_cost, total_wage_bill

logger = logging.getLogger(__name__)


def payout_for(winner: Winner, spec: BalanceSpec) -> int:
    winner = Winner(winner)
    if winner == Winner.HOME:
        return int(spec.win_payout)
    if winner == Winner.DRAW:
        return int(spec.draw_payout)
    return int(spec.loss_payout)


def apply_match_outcome(state: EconomyState, result: MatchResult, spec: BalanceSpec) -> EconomyState:
    """Add the outcome payout and count the match."""
    payout = payout_for(result.winner, spec)
    return replace(state, credits=int(state.credits) + payout, matches_played=int(state.matches_played) + 1)


def is_payday(matches_played: int, interval: int) -> bool:
    return int(matches_played) > 0 and int(matches_played) % int(interval) == 0


def matches_until_payday(state: EconomyState, interval: int) -> int:
    return int(interval) - (int(state.matches_played) % int(interval))


def maybe_run_payday(state: EconomyState, interval: int) -> Tuple[EconomyState, Optional[PaydayEvent]]:
    """Debit the wage bill if the match counter just hit a payday multiple."""
    if not is_payday(state.matches_played, interval):
        return state, None
    bill = total_wage_bill(state.squad)
    new_state = replace(state, credits=int(state.credits) - bill)
    logger.info("payday after match %d: -%d credits (balance %d)", state.matches_played, bill, new_state.credits)
    return new_state, PaydayEvent(amount=bill, match_no=int(state.matches_played))


def sign_player(state: EconomyState, candidate: Player) -> EconomyState:
    cost = signing_cost(candidate)
    if int(state.credits) < cost:
        raise InsufficientFunds(required=cost, available=int(state.credits))
    if any(p.id == candidate.id for p in state.squad):
        raise ValueError(f"player already in squad: {candidate.id}")
    logger.info("signed %s (%s) for %d", candidate.name, candidate.id, cost)
    return replace(state, credits=int(state.credits) - cost, squad=[candidate, *state.squad])


def sell_player(state: EconomyState, player_id: str) -> Tuple[EconomyState, int]:
    """Remove a player and credit 70% of their valuation. Returns (state, credited)."""
    player = state.find_player(player_id)
    value = sell_value(player)
    remaining = [p for p in state.squad if p.id != player.id]
    logger.info("sold %s (%s) for %d", player.name, player.id, value)
    return replace(state, credits=int(state.credits) + value, squad=remaining), value


def charge_scouting_fee(state: EconomyState, fee: int) -> EconomyState:
    if int(state.credits) < int(fee):
        raise InsufficientFunds(required=int(fee), available=int(state.credits))
    return replace(state, credits=int(state.credits) - int(fee))


def refund_scouting_fee(state: EconomyState, fee: int) -> EconomyState:
    return replace(state, credits=int(state.credits) + int(fee))
