import json
import sys
from types import SimpleNamespace

import pytest

pytest.importorskip("google.genai")

from core.errors import InconsistentMatchResult, ProviderError  # noqa: E402
from core.state import Position, Tactic, default_start_state  # noqa: E402
from content.providers.gemini import MODEL_CANDIDATES, GeminiProvider  # noqa: E402
from engine.sim_runner import main, run_headless_season  # noqa: E402

from conftest import match_payload, profile_payload  # noqa: E402


class FakeModels:
    def __init__(self, replies):
        self.replies = list(replies)
        self.calls = []

    def generate_content(self, *, model, contents, config):
        self.calls.append(model)
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return SimpleNamespace(text=reply)


def _provider(replies):
    models = FakeModels(replies)
    return GeminiProvider(["test-key"], client=SimpleNamespace(models=models)), models


def test_fenced_profile_is_accepted() -> None:
    provider, models = _provider(["```json\n" + json.dumps(profile_payload()) + "\n```"])
    profile = provider.request_player_profile(Position.MIDFIELDER)
    assert profile.name == "Nyx Okafor"
    assert models.calls == [MODEL_CANDIDATES[0]]
    assert provider.status().model == MODEL_CANDIDATES[0]


def test_invalid_profile_gets_one_repair_pass() -> None:
    bad = dict(profile_payload(), stats=dict(profile_payload()["stats"], pace=140))
    provider, models = _provider([json.dumps(bad), json.dumps(profile_payload())])
    assert provider.request_player_profile().stats.pace == 50
    assert len(models.calls) == 2
    assert "InvalidGeneratedProfile" in provider.last_error


def test_inconsistent_match_survives_repair_attempt_as_error() -> None:
    broken = json.dumps(match_payload(winner="draw"))
    provider, _ = _provider([broken, broken])
    with pytest.raises(InconsistentMatchResult):
        provider.request_match_narrative(default_start_state().squad, Tactic.ALL_OUT_ATTACK)


def test_transport_failures_fall_through_models() -> None:
    provider, models = _provider([RuntimeError("quota")] * len(MODEL_CANDIDATES))
    with pytest.raises(ProviderError, match="quota"):
        provider.request_player_profile()
    assert models.calls == MODEL_CANDIDATES


def test_second_model_answers_after_first_fails() -> None:
    provider, models = _provider([RuntimeError("503"), json.dumps(match_payload())])
    result = provider.request_match_narrative(default_start_state().squad, Tactic.COUNTER_ATTACK)
    assert result.tactic == Tactic.COUNTER_ATTACK
    assert provider.model_in_use == MODEL_CANDIDATES[1]


def test_missing_key_reports_unavailable() -> None:
    provider = GeminiProvider([])
    assert not provider.status().ok
    with pytest.raises(ProviderError):
        provider.request_player_profile()
    assert GeminiProvider.from_api_key_string(" , ").api_keys == []


def test_headless_season_runs_on_gemini_client() -> None:
    provider, models = _provider([json.dumps(match_payload())])
    out = run_headless_season(matches=1, seed=3, provider=provider)
    assert out["final"].credits == 1900
    assert len(models.calls) == 1


def test_runner_refuses_gemini_without_key(monkeypatch) -> None:
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    monkeypatch.setattr(sys, "argv", ["nexus-league-sim", "--provider", "gemini", "--matches", "1"])
    with pytest.raises(SystemExit):
        main()
