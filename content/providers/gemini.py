"""content.providers.gemini

Gemini provider (remote LLM collaborator, google-genai SDK).

- Tries a short list of models, rotating API keys on failure.
- Always returns a validated PlayerProfile / MatchResult or raises.
- One repair pass when the first reply cannot be parsed or validated.

UI-agnostic: the API key is resolved by engine.config.load_api_key().
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, TypeVar

from google import genai

from core.errors import InconsistentMatchResult, InvalidGeneratedProfile, ProviderError
from core.state import MatchResult, Player, Position, Tactic

from ..parsing import parse_object
from ..prompts import build_json_repair_prompt, build_match_prompt, build_player_prompt
from ..schemas import PlayerProfile, match_result_from_llm, profile_from_llm, validate_player_profile
from .base import ProviderStatus

logger = logging.getLogger(__name__)

T = TypeVar("T")

MODEL_CANDIDATES = ["gemini-2.5-flash", "gemini-2.0-flash", "gemini-2.5-pro"]


@dataclass
class GeminiProvider:
    api_keys: List[str]
    client: Any = None

    # runtime
    model_in_use: str = ""
    last_error: str = ""

    def __post_init__(self) -> None:
        self.api_keys = [k.strip() for k in (self.api_keys or []) if str(k).strip()]
        if self.client is None:
            self._init_client()

    @staticmethod
    def from_api_key_string(raw: str) -> "GeminiProvider":
        keys = [x.strip() for x in str(raw or "").split(",") if x.strip()]
        return GeminiProvider(keys)

    def _init_client(self) -> None:
        self.client = None
        if not self.api_keys:
            self.last_error = "no API key configured"
            return
        self.client = genai.Client(api_key=self.api_keys[0])
        self.last_error = ""

    def status(self) -> ProviderStatus:
        if self.client is None:
            return ProviderStatus(False, "none", "", error=str(self.last_error or ""))
        return ProviderStatus(True, "genai", self.model_in_use or MODEL_CANDIDATES[0])

    def _rotate_key(self) -> None:
        if len(self.api_keys) <= 1:
            return
        self.api_keys = self.api_keys[1:] + self.api_keys[:1]
        self._init_client()

    def _generate_text(self, prompt: str, temperature: float, max_output_tokens: int) -> str:
        if self.client is None:
            raise ProviderError(self.last_error or "Gemini client not initialised")

        config: Dict[str, Any] = {
            "temperature": float(temperature),
            "max_output_tokens": int(max_output_tokens),
            "response_mime_type": "application/json",
        }
        last_err: Optional[Exception] = None
        for _ in range(max(1, len(self.api_keys))):
            for model in MODEL_CANDIDATES:
                try:
                    resp = self.client.models.generate_content(model=model, contents=prompt, config=config)
                except Exception as e:  # SDK raises several unrelated error types
                    logger.warning("gemini %s failed: %s", model, e)
                    last_err = e
                    continue
                text = (getattr(resp, "text", "") or "").strip()
                if text:
                    self.model_in_use = model
                    return text
            self._rotate_key()

        raise ProviderError(f"Gemini error: {last_err}" if last_err else "Gemini returned no text")

    def _with_repair(self, raw: str, build: Callable[[Dict[str, Any]], T], max_output_tokens: int) -> T:
        try:
            return build(parse_object(raw))
        except (ProviderError, InvalidGeneratedProfile, InconsistentMatchResult) as e:
            self.last_error = f"{type(e).__name__}: {e}"
            logger.warning("gemini reply rejected, running repair pass: %s", self.last_error)

        raw2 = self._generate_text(build_json_repair_prompt(raw), temperature=0.1, max_output_tokens=max_output_tokens + 300)
        return build(parse_object(raw2))

    def request_player_profile(self, position: Optional[Position] = None, *, request_no: int = 0) -> PlayerProfile:
        raw = self._generate_text(build_player_prompt(position), temperature=0.9, max_output_tokens=800)

        def build(data: Dict[str, Any]) -> PlayerProfile:
            profile = profile_from_llm(data)
            validate_player_profile(profile, position=position)
            return profile

        return self._with_repair(raw, build, 800)

    def request_match_narrative(self, squad: Sequence[Player], tactic: Tactic, *, match_no: int = 0) -> MatchResult:
        raw = self._generate_text(build_match_prompt(squad, tactic), temperature=0.8, max_output_tokens=1600)
        return self._with_repair(raw, lambda data: match_result_from_llm(data, tactic=Tactic(tactic)), 1600)
