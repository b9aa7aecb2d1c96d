"""engine.pipeline

Core scouting / match flow (headless).

Responsibilities:
- Convert a PlayerProfile (collaborator output) -> Player (engine-owned
  id, salary, colour)
- Scouting: charge fee, request, validate, refund on any failure
- Match: resolve (owned simulation or collaborator), self-check, payout,
  payday, run-log record
- LeagueSession: the single owner of an EconomyState; serializes every
  mutating call and rejects overlapping ones

This layer is UI-agnostic.
"""

from __future__ import annotations

import logging
import threading
import uuid
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional, Tuple

from core.errors import EmptySquad, OperationInProgress
from core.ledger import (
    apply_match_outcome,
    charge_scouting_fee,
    maybe_run_payday,
    payout_for,
    refund_scouting_fee,
    sell_player,
    sign_player,
)
from core.match import simulate_match
from core.state import EconomyState, MatchResult, PaydayEvent, Player, Position, Tactic, default_start_state
from core.tactics import MatchPhase
from core.valuation import avatar_color, signing_cost, weekly_salary

from content.providers.base import ContentProvider
from content.providers.procedural import ProceduralProvider
from content.schemas import PlayerProfile, validate_match_result, validate_player_profile

from .config import EngineConfig

logger = logging.getLogger(__name__)


def profile_to_player(profile: PlayerProfile, *, player_id: Optional[str] = None) -> Player:
    """Deterministically turn a validated profile into a rosterable Player."""
    return Player(
        id=player_id or uuid.uuid4().hex,
        name=profile.name,
        origin=profile.origin,
        age=int(profile.age),
        position=profile.position,
        stats=profile.stats,
        rarity=profile.rarity,
        salary=weekly_salary(profile.stats, profile.rarity),
        avatar_color=avatar_color(profile.position),
        backstory=profile.backstory,
    )


def request_candidate(provider: ContentProvider, *, position: Optional[Position] = None, request_no: int = 0) -> Player:
    profile = provider.request_player_profile(position, request_no=int(request_no))
    validate_player_profile(profile, position=position)
    return profile_to_player(profile)


def scout(
    state: EconomyState,
    provider: ContentProvider,
    config: EngineConfig,
    *,
    position: Optional[Position] = None,
    request_no: int = 0,
) -> Tuple[EconomyState, Player]:
    """Pay the scouting fee and fetch a candidate.

    Returns (state_after_fee, candidate). If the collaborator fails or its
    profile is rejected, the fee is refunded and the error re-raised, so
    the caller's state is unchanged.
    """
    charged = charge_scouting_fee(state, config.scout_cost)
    try:
        candidate = request_candidate(provider, position=position, request_no=request_no)
    except Exception as e:
        refunded = refund_scouting_fee(charged, config.scout_cost)
        logger.warning("scouting failed, refunded %d (balance %d): %s", config.scout_cost, refunded.credits, e)
        raise
    logger.info("scouted %s (%s, ovr %d, cost %d)", candidate.name, candidate.position.value, candidate.stats.overall, signing_cost(candidate))
    return charged, candidate


@dataclass(frozen=True)
class MatchReport:
    state: EconomyState
    result: MatchResult
    payout: int
    payday: Optional[PaydayEvent]
    log: Dict[str, Any]


def play_match(
    state: EconomyState,
    tactic: Tactic,
    config: EngineConfig,
    *,
    provider: Optional[ContentProvider] = None,
) -> MatchReport:
    """Play the next match and settle the ledger.

    provider=None uses the owned simulation; otherwise the collaborator's
    MatchResult is validated before it can touch the ledger.
    """
    if not state.squad:
        raise EmptySquad("cannot play a match without players")

    tactic = Tactic(tactic)
    spec = config.balance
    match_no = int(state.matches_played) + 1

    if provider is None:
        result = simulate_match(state.squad, tactic, spec, base_seed=int(config.base_seed), match_no=match_no)
    else:
        result = provider.request_match_narrative(state.squad, tactic, match_no=match_no)
    validate_match_result(result)

    payout = payout_for(result.winner, spec)
    after = apply_match_outcome(state, result, spec)
    after, payday = maybe_run_payday(after, config.interval)

    logger.info(
        "match %d: %d-%d vs %s (%s) payout +%d",
        match_no, result.home_score, result.away_score, result.opponent_name, tactic.value, payout,
    )

    log: Dict[str, Any] = {
        "match": match_no,
        "tactic": tactic.value,
        "credits_before": int(state.credits),
        "credits_after": int(after.credits),
        "payout": int(payout),
        "payday": None if payday is None else int(payday.amount),
        "squad_size": len(state.squad),
        "result": result.to_dict(),
    }
    return MatchReport(state=after, result=result, payout=payout, payday=payday, log=log)


class LeagueSession:
    """Owns one EconomyState and serializes every mutation on it.

    A mutating call that arrives while another is running is rejected with
    OperationInProgress instead of being interleaved.
    """

    def __init__(
        self,
        config: EngineConfig,
        *,
        state: Optional[EconomyState] = None,
        provider: Optional[ContentProvider] = None,
        match_provider: Optional[ContentProvider] = None,
    ) -> None:
        self.config = config
        self._state = state if state is not None else default_start_state(config.starting_credits)
        self.provider: ContentProvider = provider or ProceduralProvider(base_seed=config.base_seed, balance_key=config.balance_key)
        self.match_provider = match_provider
        self.candidate: Optional[Player] = None
        self.phase = MatchPhase.BRIEFING
        self.last_report: Optional[MatchReport] = None
        self.match_logs: list = []
        self._scout_requests = 0
        self._lock = threading.Lock()

    @property
    def state(self) -> EconomyState:
        return self._state

    @contextmanager
    def _exclusive(self, op: str) -> Iterator[None]:
        if not self._lock.acquire(blocking=False):
            logger.warning("rejected %s: another operation is in progress", op)
            raise OperationInProgress(f"{op}: another operation is in progress")
        try:
            yield
        finally:
            self._lock.release()

    def scout(self, position: Optional[Position] = None) -> Player:
        with self._exclusive("scout"):
            self.candidate = None
            self._scout_requests += 1
            # state only advances once the candidate is in hand
            self._state, candidate = scout(
                self._state, self.provider, self.config, position=position, request_no=self._scout_requests
            )
            self.candidate = candidate
            return candidate

    def sign_candidate(self) -> Player:
        with self._exclusive("sign"):
            if self.candidate is None:
                raise ValueError("no scouted candidate to sign")
            self._state = sign_player(self._state, self.candidate)
            signed, self.candidate = self.candidate, None
            return signed

    def reject_candidate(self) -> None:
        with self._exclusive("reject"):
            self.candidate = None

    def sell(self, player_id: str) -> int:
        with self._exclusive("sell"):
            self._state, value = sell_player(self._state, player_id)
            return value

    def play_match(self, tactic: Tactic) -> MatchReport:
        with self._exclusive("play_match"):
            self.phase = MatchPhase.RESOLVING
            try:
                report = play_match(self._state, tactic, self.config, provider=self.match_provider)
            except Exception:
                self.phase = MatchPhase.BRIEFING
                raise
            self._state = report.state
            self.last_report = report
            self.match_logs.append(report.log)
            self.phase = MatchPhase.RESOLVED
            return report

    def new_briefing(self) -> None:
        with self._exclusive("briefing"):
            self.phase = MatchPhase.BRIEFING
