"""content.providers.base

Provider interfaces.

A provider is the generation collaborator: it hands back a player profile
for scouting and, optionally, a narrated match. The engine never trusts
either; profiles and results are validated before the ledger changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

from core.state import MatchResult, Player, Position, Tactic

from ..schemas import PlayerProfile


@dataclass(frozen=True)
class ProviderStatus:
    ok: bool
    backend: str
    model: str
    note: str = ""
    error: str = ""


class ContentProvider(Protocol):
    def status(self) -> ProviderStatus: ...

    def request_player_profile(self, position: Optional[Position] = None, *, request_no: int = 0) -> PlayerProfile:
        """Return one scouted profile; `position` is a request, not a guarantee."""
        ...

    def request_match_narrative(self, squad: Sequence[Player], tactic: Tactic, *, match_no: int = 0) -> MatchResult:
        """Return a full MatchResult for `squad` playing `tactic`."""
        ...
