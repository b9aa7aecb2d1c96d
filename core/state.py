"""
core.state
Core domain data models (UI/LLM independent).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from .errors import InvalidStats, NotFound


STAT_KEYS = ("pace", "shooting", "passing", "dribbling", "defense", "physical")


def clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


class Position(str, Enum):
    FORWARD = "Forward"
    MIDFIELDER = "Midfielder"
    DEFENDER = "Defender"
    GOALKEEPER = "Goalkeeper"


class Rarity(str, Enum):
    """Power bands, declared in ascending tier order."""

    COMMON = "Common"
    RARE = "Rare"
    LEGENDARY = "Legendary"
    GLITCH = "Glitch"

    @property
    def tier(self) -> int:
        return list(Rarity).index(self)


class Tactic(str, Enum):
    ALL_OUT_ATTACK = "AllOutAttack"
    POSSESSION_GAME = "PossessionGame"
    PARK_THE_BUS = "ParkTheBus"
    COUNTER_ATTACK = "CounterAttack"


class EventType(str, Enum):
    GOAL = "goal"
    CHANCE = "chance"
    CARD = "card"
    INJURY = "injury"
    TACTICAL = "tactical"


class Winner(str, Enum):
    HOME = "home"
    AWAY = "away"
    DRAW = "draw"


# Display labels used by the Turkish-language league
POSITION_LABELS: Dict[Position, str] = {
    Position.FORWARD: "Forvet",
    Position.MIDFIELDER: "Orta Saha",
    Position.DEFENDER: "Defans",
    Position.GOALKEEPER: "Kaleci",
}

RARITY_LABELS: Dict[Rarity, str] = {
    Rarity.COMMON: "Sıradan",
    Rarity.RARE: "Nadir",
    Rarity.LEGENDARY: "Efsanevi",
    Rarity.GLITCH: "Glitch",
}

TACTIC_LABELS: Dict[Tactic, str] = {
    Tactic.ALL_OUT_ATTACK: "Tam Saha Baskı",
    Tactic.POSSESSION_GAME: "Topa Sahip Olma",
    Tactic.PARK_THE_BUS: "Otobüsü Çek",
    Tactic.COUNTER_ATTACK: "Kontratak",
}

AVATAR_COLORS: Dict[Position, str] = {
    Position.FORWARD: "#f43f5e",
    Position.DEFENDER: "#06b6d4",
    Position.MIDFIELDER: "#8b5cf6",
    Position.GOALKEEPER: "#8b5cf6",
}


def _check_stat(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidStats(f"{name} must be an integer, got {value!r}")
    if not 0 <= value <= 100:
        raise InvalidStats(f"{name} out of range 0..100: {value}")


@dataclass(frozen=True)
class PlayerStats:
    """Six bounded attributes. Construction validates; it never clamps."""

    pace: int
    shooting: int
    passing: int
    dribbling: int
    defense: int
    physical: int

    def __post_init__(self) -> None:
        for k in STAT_KEYS:
            _check_stat(k, getattr(self, k))

    @property
    def total(self) -> int:
        return sum(int(getattr(self, k)) for k in STAT_KEYS)

    @property
    def overall(self) -> int:
        return overall(self)


def overall(stats: PlayerStats) -> int:
    """Mean of the six attributes, rounded half-up (integer arithmetic)."""
    return (2 * stats.total + len(STAT_KEYS)) // (2 * len(STAT_KEYS))


def stats_from_mapping(d: Mapping[str, Any], *, clamp_values: bool = False) -> PlayerStats:
    """Bridge helper for dict-based stats (generator output, fixtures).

    Missing or non-numeric attributes always raise InvalidStats. With
    `clamp_values` numeric values are rounded and clamped into 0..100
    instead of being rejected.
    """
    missing = [k for k in STAT_KEYS if k not in d or d.get(k) is None]
    if missing:
        raise InvalidStats(f"missing stats: {', '.join(missing)}")

    values: Dict[str, int] = {}
    for k in STAT_KEYS:
        raw = d[k]
        if clamp_values:
            if isinstance(raw, bool):
                raise InvalidStats(f"{k} must be numeric, got {raw!r}")
            try:
                num = float(raw)
            except (TypeError, ValueError):
                raise InvalidStats(f"{k} must be numeric, got {raw!r}") from None
            values[k] = int(clamp(round(num), 0, 100))
        else:
            values[k] = raw
    return PlayerStats(**values)


def stats_to_dict(s: PlayerStats) -> Dict[str, int]:
    return {k: int(getattr(s, k)) for k in STAT_KEYS}


@dataclass(frozen=True)
class Player:
    id: str
    name: str
    origin: str
    age: int
    position: Position
    stats: PlayerStats
    rarity: Rarity
    salary: int
    avatar_color: str
    backstory: str = ""

    def __post_init__(self) -> None:
        if int(self.salary) < 0:
            raise ValueError("salary must be >= 0")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "origin": self.origin,
            "age": int(self.age),
            "position": self.position.value,
            "stats": stats_to_dict(self.stats),
            "rarity": self.rarity.value,
            "salary": int(self.salary),
            "avatar_color": self.avatar_color,
            "backstory": self.backstory,
        }


def player_from_dict(d: Mapping[str, Any]) -> Player:
    return Player(
        id=str(d["id"]),
        name=str(d.get("name", "")),
        origin=str(d.get("origin", "")),
        age=int(d.get("age", 0)),
        position=Position(d["position"]),
        stats=stats_from_mapping(d["stats"]),
        rarity=Rarity(d["rarity"]),
        salary=int(d["salary"]),
        avatar_color=str(d.get("avatar_color") or AVATAR_COLORS[Position(d["position"])]),
        backstory=str(d.get("backstory", "")),
    )


@dataclass(frozen=True)
class MatchEvent:
    minute: int
    description: str
    type: EventType

    def to_dict(self) -> Dict[str, Any]:
        return {"minute": int(self.minute), "description": self.description, "type": self.type.value}


@dataclass(frozen=True)
class MatchResult:
    home_score: int
    away_score: int
    opponent_name: str
    possession: int        # home share, 0..100
    winner: Winner
    events: List[MatchEvent]
    summary: str
    tactic: Optional[Tactic] = None
    opponent_tactic: Optional[Tactic] = None

    @property
    def total_goals(self) -> int:
        return int(self.home_score) + int(self.away_score)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "home_score": int(self.home_score),
            "away_score": int(self.away_score),
            "opponent_name": self.opponent_name,
            "possession": int(self.possession),
            "winner": self.winner.value,
            "events": [e.to_dict() for e in self.events],
            "summary": self.summary,
            "tactic": self.tactic.value if self.tactic else None,
            "opponent_tactic": self.opponent_tactic.value if self.opponent_tactic else None,
        }


def winner_for(home_score: int, away_score: int) -> Winner:
    if home_score > away_score:
        return Winner.HOME
    if home_score < away_score:
        return Winner.AWAY
    return Winner.DRAW


@dataclass(frozen=True)
class PaydayEvent:
    amount: int
    match_no: int


@dataclass(frozen=True)
class EconomyState:
    """Credits, match counter and the roster.

    Squad order is display order: index 0 is the most recently signed.
    Credits have no floor; payroll may push them negative.
    """

    credits: int
    matches_played: int = 0
    squad: List[Player] = field(default_factory=list)

    def find_player(self, player_id: str) -> Player:
        for p in self.squad:
            if p.id == player_id:
                return p
        raise NotFound(player_id)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "credits": int(self.credits),
            "matches_played": int(self.matches_played),
            "squad": [p.to_dict() for p in self.squad],
        }


def state_from_dict(d: Mapping[str, Any]) -> EconomyState:
    return EconomyState(
        credits=int(d["credits"]),
        matches_played=int(d.get("matches_played", 0)),
        squad=[player_from_dict(p) for p in d.get("squad", [])],
    )


def seed_squad() -> List[Player]:
    return [
        Player(
            id="init-1",
            name='Kaelen "Hayalet" Vane',
            origin="Yeraltı Sektör 7",
            age=22,
            position=Position.FORWARD,
            stats=PlayerStats(pace=88, shooting=75, passing=60, dribbling=82, defense=30, physical=55),
            rarity=Rarity.COMMON,
            salary=45,
            avatar_color=AVATAR_COLORS[Position.FORWARD],
            backstory="Gecekondu mahallesinde güvenlik dronlarından kaçarken çalım atmayı öğrendi.",
        ),
        Player(
            id="init-2",
            name="Jaxxon Çelik",
            origin="Neo-Reykjavik",
            age=28,
            position=Position.DEFENDER,
            stats=PlayerStats(pace=60, shooting=40, passing=65, dribbling=50, defense=85, physical=90),
            rarity=Rarity.RARE,
            salary=70,
            avatar_color=AVATAR_COLORS[Position.DEFENDER],
            backstory="Eski çevik kuvvet polisi, şimdi ise geçilmez bir savunma duvarı.",
        ),
        Player(
            id="init-3",
            name="Cipher 09",
            origin="Dijital Boşluk",
            age=19,
            position=Position.MIDFIELDER,
            stats=PlayerStats(pace=70, shooting=65, passing=88, dribbling=75, defense=50, physical=45),
            rarity=Rarity.RARE,
            salary=65,
            avatar_color=AVATAR_COLORS[Position.MIDFIELDER],
            backstory="Biyonik görüş geliştirmelerine sahip olduğu söyleniyor.",
        ),
    ]


def default_start_state(credits: int = 1500) -> EconomyState:
    """Baseline start state shared by headless runs and tests."""
    return EconomyState(credits=int(credits), matches_played=0, squad=seed_squad())
