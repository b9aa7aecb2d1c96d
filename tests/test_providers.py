import json

import pytest

from core.errors import InvalidGeneratedProfile, ProviderError
from core.state import Position, Tactic, default_start_state
from core.valuation import rarity_for_overall
from content.providers import ProceduralProvider, ReplayProvider
from content.schemas import validate_match_result, validate_player_profile

from conftest import match_payload, profile_payload


def test_procedural_profiles_are_valid_and_consistent() -> None:
    provider = ProceduralProvider(base_seed=8)
    names = set()
    for n in range(1, 60):
        p = provider.request_player_profile(request_no=n)
        validate_player_profile(p)
        assert p.rarity == rarity_for_overall(p.stats.overall)
        names.add(p.name)
    assert len(names) == 59


def test_procedural_honours_requested_position() -> None:
    provider = ProceduralProvider(base_seed=8)
    for n, pos in enumerate(Position, start=1):
        p = provider.request_player_profile(pos, request_no=n)
        validate_player_profile(p, position=pos)


def test_procedural_is_reproducible() -> None:
    a = ProceduralProvider(base_seed=21).request_player_profile(request_no=4)
    b = ProceduralProvider(base_seed=21).request_player_profile(request_no=4)
    assert a == b


def test_procedural_skips_reserved_names() -> None:
    first = ProceduralProvider(base_seed=5).request_player_profile(request_no=1).name
    provider = ProceduralProvider(base_seed=5)
    provider.reserve_names([first])
    assert provider.request_player_profile(request_no=1).name != first


def test_procedural_match_narrative_is_consistent() -> None:
    provider = ProceduralProvider(base_seed=2)
    result = provider.request_match_narrative(default_start_state().squad, Tactic.COUNTER_ATTACK, match_no=1)
    validate_match_result(result)
    assert result.tactic == Tactic.COUNTER_ATTACK
    assert provider.status().ok


def test_replay_serves_in_order_then_runs_dry() -> None:
    provider = ReplayProvider(profiles=[profile_payload(name="Ayla Rask"), profile_payload()], matches=[match_payload()])
    assert provider.request_player_profile().name == "Ayla Rask"
    assert provider.request_player_profile().name == "Nyx Okafor"
    with pytest.raises(ProviderError):
        provider.request_player_profile()
    squad = default_start_state().squad
    assert provider.request_match_narrative(squad, Tactic.PARK_THE_BUS).home_score == 2
    with pytest.raises(ProviderError):
        provider.request_match_narrative(squad, Tactic.PARK_THE_BUS)


def test_replay_rejects_bad_payload() -> None:
    stats = dict(profile_payload()["stats"], shooting=-5)
    with pytest.raises(InvalidGeneratedProfile):
        ReplayProvider(profiles=[profile_payload(stats=stats)]).request_player_profile()


def test_replay_from_json_file(tmp_path) -> None:
    path = tmp_path / "replay.json"
    path.write_text(json.dumps({"profiles": [profile_payload()], "matches": []}), encoding="utf-8")
    provider = ReplayProvider.from_json_file(str(path))
    assert provider.request_player_profile().position == Position.MIDFIELDER
    assert "0 profiles" in provider.status().note
