"""content.schemas

Contracts at the boundary with the generation collaborator:
- PlayerProfile: what a scouting request returns (no id / salary / colour;
  the engine assigns those).
- MatchResult parsing + consistency validation for match narratives.

Generator output may use the league's Turkish labels or the English enum
values; both are normalized here. Stats are never clamped at this layer:
an out-of-range attribute makes the whole profile invalid.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from core.errors import InconsistentMatchResult, InvalidGeneratedProfile, InvalidStats
from core.state import (
    POSITION_LABELS,
    RARITY_LABELS,
    TACTIC_LABELS,
    EventType,
    MatchEvent,
    MatchResult,
    PlayerStats,
    Position,
    Rarity,
    Tactic,
    Winner,
    clamp,
    stats_from_mapping,
    stats_to_dict,
    winner_for,
)


def _alias_table(enum_cls, labels: Mapping[Any, str]) -> Dict[str, Any]:
    table: Dict[str, Any] = {}
    for member in enum_cls:
        table[member.value.lower()] = member
        table[member.name.lower()] = member
    for member, label in labels.items():
        table[label.lower()] = member
    return table


_POSITIONS = _alias_table(Position, POSITION_LABELS)
_POSITIONS.update({"striker": Position.FORWARD, "golcü": Position.FORWARD, "stoper": Position.DEFENDER})

_RARITIES = _alias_table(Rarity, RARITY_LABELS)
_RARITIES.update({"efsane": Rarity.LEGENDARY})

_TACTICS = _alias_table(Tactic, TACTIC_LABELS)
_TACTICS.update({"all out attack": Tactic.ALL_OUT_ATTACK, "possession game": Tactic.POSSESSION_GAME,
                 "park the bus": Tactic.PARK_THE_BUS, "counter attack": Tactic.COUNTER_ATTACK})

_EVENT_TYPES = {t.value: t for t in EventType}
_EVENT_TYPES.update({"gol": EventType.GOAL, "pozisyon": EventType.CHANCE, "kart": EventType.CARD,
                     "sakatlık": EventType.INJURY, "taktik": EventType.TACTICAL})


def _lookup(table: Mapping[str, Any], value: Any) -> Optional[Any]:
    if value is None:
        return None
    return table.get(str(value).strip().lower())


def normalize_position(value: Any) -> Optional[Position]:
    return _lookup(_POSITIONS, value)


def normalize_rarity(value: Any) -> Optional[Rarity]:
    return _lookup(_RARITIES, value)


def normalize_tactic(value: Any) -> Optional[Tactic]:
    return _lookup(_TACTICS, value)


def normalize_event_type(value: Any) -> Optional[EventType]:
    return _lookup(_EVENT_TYPES, value)


# =========================
# Player profile
# =========================


@dataclass(frozen=True)
class PlayerProfile:
    name: str
    origin: str
    age: int
    position: Position
    stats: PlayerStats
    rarity: Rarity
    backstory: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "origin": self.origin,
            "age": int(self.age),
            "position": self.position.value,
            "stats": stats_to_dict(self.stats),
            "rarity": self.rarity.value,
            "backstory": self.backstory,
        }


def profile_from_llm(data: Mapping[str, Any]) -> PlayerProfile:
    """Parse raw generator output into a PlayerProfile or raise InvalidGeneratedProfile."""
    if not isinstance(data, Mapping):
        raise InvalidGeneratedProfile("profile must be a JSON object")

    position = normalize_position(data.get("position"))
    if position is None:
        raise InvalidGeneratedProfile(f"unknown position: {data.get('position')!r}")
    rarity = normalize_rarity(data.get("rarity"))
    if rarity is None:
        raise InvalidGeneratedProfile(f"unknown rarity: {data.get('rarity')!r}")

    raw_stats = data.get("stats")
    if not isinstance(raw_stats, Mapping):
        raise InvalidGeneratedProfile("profile.stats must be an object")
    try:
        stats = stats_from_mapping(raw_stats)
    except InvalidStats as e:
        raise InvalidGeneratedProfile(f"invalid stats: {e}") from e

    try:
        age = int(data.get("age", 0))
    except (TypeError, ValueError):
        raise InvalidGeneratedProfile(f"invalid age: {data.get('age')!r}") from None

    return PlayerProfile(
        name=str(data.get("name") or "").strip(),
        origin=str(data.get("origin") or "").strip(),
        age=age,
        position=position,
        stats=stats,
        rarity=rarity,
        backstory=str(data.get("backstory") or "").strip(),
    )


def validate_player_profile(p: PlayerProfile, *, position: Optional[Position] = None) -> None:
    if len((p.name or "").strip()) < 2:
        raise InvalidGeneratedProfile("profile.name too short")
    if not 14 <= int(p.age) <= 50:
        raise InvalidGeneratedProfile(f"profile.age out of range: {p.age}")
    if not isinstance(p.stats, PlayerStats):
        raise InvalidGeneratedProfile("profile.stats must be PlayerStats")
    if not isinstance(p.rarity, Rarity):
        raise InvalidGeneratedProfile("profile.rarity must be one of the four tiers")
    if position is not None and p.position != Position(position):
        raise InvalidGeneratedProfile(f"requested {Position(position).value}, got {p.position.value}")


# =========================
# Match result
# =========================


def _event_from_llm(obj: Mapping[str, Any]) -> MatchEvent:
    kind = normalize_event_type(obj.get("type"))
    if kind is None:
        raise InconsistentMatchResult(f"unknown event type: {obj.get('type')!r}")
    try:
        minute = int(obj.get("minute", 0))
    except (TypeError, ValueError):
        raise InconsistentMatchResult(f"invalid event minute: {obj.get('minute')!r}") from None
    return MatchEvent(minute=int(clamp(minute, 0, 90)), description=str(obj.get("description") or "").strip(), type=kind)


def match_result_from_llm(data: Mapping[str, Any], *, tactic: Optional[Tactic] = None) -> MatchResult:
    """Parse a generator match narrative. Events are ordered by minute; validation runs last."""
    if not isinstance(data, Mapping):
        raise InconsistentMatchResult("match result must be a JSON object")
    try:
        home = int(data["homeScore"] if "homeScore" in data else data["home_score"])
        away = int(data["awayScore"] if "awayScore" in data else data["away_score"])
        possession = int(data.get("possession", 50))
    except (KeyError, TypeError, ValueError) as e:
        raise InconsistentMatchResult(f"missing or invalid score fields: {e}") from e

    raw_winner = str(data.get("winner") or "").strip().lower()
    try:
        winner = Winner(raw_winner)
    except ValueError:
        raise InconsistentMatchResult(f"unknown winner: {raw_winner!r}") from None

    raw_events = data.get("events")
    events: List[MatchEvent] = []
    if isinstance(raw_events, list):
        events = [_event_from_llm(e) for e in raw_events if isinstance(e, Mapping)]
    events.sort(key=lambda e: e.minute)

    result = MatchResult(
        home_score=home,
        away_score=away,
        opponent_name=str(data.get("opponentName") or data.get("opponent_name") or "").strip(),
        possession=possession,
        winner=winner,
        events=events,
        summary=str(data.get("summary") or "").strip(),
        tactic=tactic,
        opponent_tactic=normalize_tactic(data.get("opponentTactic") or data.get("opponent_tactic")),
    )
    validate_match_result(result)
    return result


def validate_match_result(r: MatchResult) -> None:
    if int(r.home_score) < 0 or int(r.away_score) < 0:
        raise InconsistentMatchResult("scores must be non-negative")
    if not 0 <= int(r.possession) <= 100:
        raise InconsistentMatchResult(f"possession out of range: {r.possession}")
    expected = winner_for(int(r.home_score), int(r.away_score))
    if Winner(r.winner) != expected:
        raise InconsistentMatchResult(
            f"winner {Winner(r.winner).value!r} contradicts score {r.home_score}-{r.away_score}"
        )
    if not r.events:
        raise InconsistentMatchResult("event feed is empty")
    goals = sum(1 for e in r.events if e.type == EventType.GOAL)
    if goals != r.total_goals:
        raise InconsistentMatchResult(f"{goals} goal events for {r.total_goals} goals")
    minutes = [int(e.minute) for e in r.events]
    if minutes != sorted(minutes):
        raise InconsistentMatchResult("event feed is not ordered by minute")
    return None
