"""
core.events
Match event feed.

Produces an ordered feed that agrees with an already resolved scoreline:
exactly one goal event per goal, plus 1-4 filler events (chance / card /
tactical), sorted by minute (non-decreasing). Goal descriptions carry the
running score, so the side of every goal is readable from the feed.
"""

from __future__ import annotations

import random
from typing import List, Sequence, Tuple

from .errors import EmptySquad
from .state import EventType, MatchEvent, Player, Position, TACTIC_LABELS, Tactic, Winner

HOME = "home"
AWAY = "away"

CHANCE_HOME = [
    "{player} ceza sahası dışından denedi, top direğe çarptı.",
    "{player} kaleciyle karşı karşıya kaldı ama vuruşu kurtarıldı.",
    "{player} kafa vuruşunda auta gönderdi.",
]
CHANCE_AWAY = [
    "{opponent} kontra atakta tehlikeli geldi, savunma son anda uzaklaştırdı.",
    "{opponent} serbest vuruştan üst direği sıyırdı.",
]
CARD_HOME = [
    "{player} sert müdahale nedeniyle sarı kart gördü.",
    "{player} hakeme itirazdan sarı kart aldı.",
]
CARD_AWAY = [
    "{opponent} oyuncusu taktik faul yaptı: sarı kart.",
]
TACTICAL = [
    "Teknik ekip dizilişi değiştirdi: {tactic} devam ediyor.",
    "Kenardan yeni talimat: {tactic} planına sadık kalın.",
    "{opponent} orta sahayı kalabalıklaştırdı.",
]


def goal_minutes(n: int, rng: random.Random) -> List[int]:
    # power < 1 skews toward the later minutes
    return sorted(1 + min(89, int(90 * (rng.random() ** 0.85))) for _ in range(n))


def pick_scorer(squad: Sequence[Player], rng: random.Random) -> Player:
    outfield = [p for p in squad if p.position != Position.GOALKEEPER] or list(squad)
    if not outfield:
        raise EmptySquad("no players available to credit a goal")
    weights = [max(1.0, float(p.stats.shooting)) ** 1.5 for p in outfield]
    return rng.choices(outfield, weights=weights, k=1)[0]


def _goal_events(
    home_score: int,
    away_score: int,
    squad: Sequence[Player],
    opponent_name: str,
    rng: random.Random,
) -> List[MatchEvent]:
    sides = [HOME] * int(home_score) + [AWAY] * int(away_score)
    rng.shuffle(sides)
    minutes = goal_minutes(len(sides), rng)

    events: List[MatchEvent] = []
    h = a = 0
    for minute, side in zip(minutes, sides):
        if side == HOME:
            h += 1
            scorer = pick_scorer(squad, rng)
            desc = f"GOL! {scorer.name} ağları sarstı. ({h}-{a})"
        else:
            a += 1
            desc = f"GOL! {opponent_name} skoru buldu. ({h}-{a})"
        events.append(MatchEvent(minute=minute, description=desc, type=EventType.GOAL))
    return events


def _filler_events(
    possession: int,
    squad: Sequence[Player],
    opponent_name: str,
    tactic: Tactic,
    rng: random.Random,
) -> List[MatchEvent]:
    out: List[MatchEvent] = []
    for _ in range(rng.randint(1, 4)):
        kind = rng.choices([EventType.CHANCE, EventType.CARD, EventType.TACTICAL], weights=[5, 3, 2], k=1)[0]
        home_side = rng.random() * 100 < possession
        player = rng.choice(list(squad)).name if squad else ""
        if kind == EventType.CHANCE:
            tpl = rng.choice(CHANCE_HOME if home_side else CHANCE_AWAY)
        elif kind == EventType.CARD:
            tpl = rng.choice(CARD_HOME if home_side else CARD_AWAY)
        else:
            tpl = rng.choice(TACTICAL)
        desc = tpl.format(player=player, opponent=opponent_name, tactic=TACTIC_LABELS[tactic])
        out.append(MatchEvent(minute=rng.randint(1, 90), description=desc, type=kind))
    return out


def generate_events(
    *,
    home_score: int,
    away_score: int,
    possession: int,
    squad: Sequence[Player],
    opponent_name: str,
    tactic: Tactic,
    rng: random.Random,
) -> List[MatchEvent]:
    goals = _goal_events(home_score, away_score, squad, opponent_name, rng)
    fillers = _filler_events(possession, squad, opponent_name, tactic, rng)

    # stable sort: goals before fillers on the same minute
    keyed: List[Tuple[int, int, MatchEvent]] = [(e.minute, 0, e) for e in goals] + [(e.minute, 1, e) for e in fillers]
    keyed.sort(key=lambda t: (t[0], t[1]))
    return [e for _, _, e in keyed]


def build_summary(
    *,
    home_score: int,
    away_score: int,
    winner: Winner,
    possession: int,
    opponent_name: str,
    tactic: Tactic,
    star_name: str,
) -> str:
    plan = TACTIC_LABELS[tactic]
    if winner == Winner.HOME:
        head = f"Nexus Ligi'nde {opponent_name} karşısında {home_score}-{away_score} galibiyet."
    elif winner == Winner.AWAY:
        head = f"{opponent_name} deplasmandan {away_score}-{home_score} üstünlükle ayrıldı."
    else:
        head = f"{opponent_name} ile {home_score}-{away_score} berabere."
    return f"{head} Taktik: {plan}, topla oynama %{possession}. Gecenin yıldızı: {star_name}."
