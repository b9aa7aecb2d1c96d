"""content.providers.replay

Fixture provider: serves recorded generator payloads in order.

Payloads go through the same parsing/validation as live output, which
makes this the easiest way to reproduce a bad generator response.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from core.errors import ProviderError
from core.state import MatchResult, Player, Position, Tactic

from ..schemas import PlayerProfile, match_result_from_llm, profile_from_llm
from .base import ProviderStatus


@dataclass
class ReplayProvider:
    profiles: List[Dict[str, Any]] = field(default_factory=list)
    matches: List[Dict[str, Any]] = field(default_factory=list)
    _profile_ix: int = 0
    _match_ix: int = 0

    @staticmethod
    def from_json_file(path: str) -> "ReplayProvider":
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        return ReplayProvider(profiles=list(data.get("profiles", [])), matches=list(data.get("matches", [])))

    def status(self) -> ProviderStatus:
        left = (len(self.profiles) - self._profile_ix, len(self.matches) - self._match_ix)
        return ProviderStatus(True, "replay", "", note=f"{left[0]} profiles / {left[1]} matches left")

    def request_player_profile(self, position: Optional[Position] = None, *, request_no: int = 0) -> PlayerProfile:
        if self._profile_ix >= len(self.profiles):
            raise ProviderError("replay exhausted: no more profiles")
        payload = self.profiles[self._profile_ix]
        self._profile_ix += 1
        return profile_from_llm(payload)

    def request_match_narrative(self, squad: Sequence[Player], tactic: Tactic, *, match_no: int = 0) -> MatchResult:
        if self._match_ix >= len(self.matches):
            raise ProviderError("replay exhausted: no more matches")
        payload = self.matches[self._match_ix]
        self._match_ix += 1
        return match_result_from_llm(payload, tactic=Tactic(tactic))
