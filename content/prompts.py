"""content.prompts

Prompt builders for the remote generation collaborator.

Economy stays OUT of the model: salary, signing cost, payouts and payday
are always computed by the engine. The model only supplies a profile or a
narrated match, and both are validated before the ledger sees them.
"""

from __future__ import annotations

from typing import Optional, Sequence

from core.state import POSITION_LABELS, RARITY_LABELS, TACTIC_LABELS, Player, Position, Tactic
from core.tactics import squad_power, star_player


def _labels(values) -> str:
    return "|".join(values)


def build_player_prompt(position: Optional[Position] = None) -> str:
    """Scouting prompt: one fictional player profile, JSON only."""
    pos_line = f"- Oyuncu şu mevkide olmalı: {POSITION_LABELS[Position(position)]}." if position else ""
    positions = _labels(POSITION_LABELS.values())
    rarities = _labels(RARITY_LABELS.values())

    return f"""
Alternatif bir cyberpunk ligi için kurgusal bir futbolcu profili oluştur.

Kurallar:
- Oyuncu geleneksel olmayan futbol ülkelerinden gelmeli (küçük ada ülkeleri, uzak bölgeler veya kurgusal fütüristik şehir devletleri).
{pos_line}
- Altı istatistik (pace, shooting, passing, dribbling, defense, physical) 0-100 arası TAM SAYI olmalı.
- Nadirliği istatistik ortalamasına göre belirle (Sıradan: ort < 60, Nadir: ort < 80, Efsanevi: ort < 95, Glitch: ort >= 95).
- Nasıl keşfedildiğine dair kısa, havalı ve gizemli bir hikaye yaz (Türkçe).
- İsimler yabancı/fütüristik olabilir ama hikaye ve köken Türkçe olmalı.

ÇIKTI FORMATIN: SADECE JSON (başka hiçbir metin yok, markdown yok).

JSON ŞEMA:
{{
  "name": "string",
  "origin": "string",
  "age": 16-40 arası tam sayı,
  "position": "{positions}",
  "stats": {{"pace": 0-100, "shooting": 0-100, "passing": 0-100, "dribbling": 0-100, "defense": 0-100, "physical": 0-100}},
  "backstory": "string",
  "rarity": "{rarities}"
}}
""".strip()


def build_match_prompt(squad: Sequence[Player], tactic: Tactic) -> str:
    """Match prompt. Aggregate power and key player are computed here, not by the model."""
    power = squad_power(squad)
    star = star_player(squad)
    tactics = _labels(TACTIC_LABELS.values())

    return f"""
Nexus Ligi'nde yüksek riskli bir maç simüle et.

Bağlam:
- Kullanıcının takım stratejisi: {TACTIC_LABELS[Tactic(tactic)]}
- Kilit oyuncu: {star.name} ({POSITION_LABELS[star.position]})
- Takım ortalama saldırı gücü: {round(power.attack)}
- Takım ortalama savunma gücü: {round(power.defense)}

Görev:
1) Kurgusal, cyberpunk temalı bir rakip takım ismi oluştur (örn. 'Neo-Tokyo Drifters', 'Svalbard Buzkıranları').
2) Rakibin taktiğini seç ({tactics}).
3) Taktik döngüsüne göre skoru belirle: Kontratak Tam Saha Baskı'yı, Tam Saha Baskı Topa Sahip Olma'yı,
   Topa Sahip Olma Otobüsü Çek'i, Otobüsü Çek Kontratak'ı yener.
4) Her gol için TAM OLARAK bir "goal" olayı yaz; ayrıca 1-4 arası başka olay (chance|card|tactical) ekle.
   Olaylar dakikaya göre sıralı olmalı (1-90).
5) winner alanı skorla tutarlı olmalı: home > away ise "home", küçükse "away", eşitse "draw".
6) Maçın atmosferini anlatan kısa, dramatik bir özet yaz (Türkçe).

ÇIKTI FORMATIN: SADECE JSON.

JSON ŞEMA:
{{
  "homeScore": 0,
  "awayScore": 0,
  "opponentName": "string",
  "opponentTactic": "{tactics}",
  "possession": 0-100,
  "winner": "home|away|draw",
  "events": [{{"minute": 1-90, "description": "string", "type": "goal|chance|card|injury|tactical"}}],
  "summary": "string"
}}
""".strip()


def build_json_repair_prompt(broken_text: str) -> str:
    return f"""Aşağıdaki metin bozuk JSON içeriyor. Görevin: SADECE geçerli JSON döndürmek.
- Yorum ekleme, markdown kullanma.
- Alan isimlerini değiştirme, sadece düzelt.
- Skor, kazanan ve gol olayları birbiriyle tutarlı olmalı.

BOZUK METİN:
{str(broken_text or "")}
""".strip()
