"""
core.names
Name and flavour pools for the procedural league (opponents, scouted players).
"""

from __future__ import annotations

import random
from typing import Set

OPPONENT_CITIES = [
    "Neo-Tokyo", "Svalbard", "Lagos Arkoloji", "Yeni Kahire", "Ushuaia", "Tuvalu", "Ulan Bator",
    "Kuzey Kutbu Ağı", "Mars Kolonisi 3", "Neo-İstanbul", "Funafuti", "Reykjavik-2", "Vanuatu",
    "Atlantis Platformu", "Kamçatka", "Yakutsk", "Socotra", "Pitcairn", "Nuuk", "Tristan da Cunha",
]

OPPONENT_CLUBS = [
    "Drifters", "Buzkıranları", "Siber Kurtlar", "Krom Aslanlar", "Neon Şahinler", "Veri Korsanları",
    "Kuantum FC", "Hayalet Protokol", "Plazma Birliği", "Demir Yılanlar", "Sinyal Avcıları", "Glitch United",
]

FIRST_NAMES = [
    "Kaelen", "Jaxxon", "Nyx", "Oren", "Talia", "Zephyr", "Ilya", "Mako", "Sable", "Riven",
    "Kenji", "Amara", "Vesper", "Tomasz", "Kai", "Lior", "Nadia", "Ezra", "Soren", "Yara",
    "Dax", "Mira", "Tane", "Aroha", "Keoni", "Sefa", "Liko", "Anouk", "Rune", "Ayla",
]

LAST_NAMES = [
    "Vane", "Çelik", "Koa", "Draven", "Voss", "Ishikawa", "Okafor", "Mbeki", "Halvorsen", "Tuilagi",
    "Nakamura", "Rask", "Ortega", "Kowalski", "Ferro", "Moana", "Saar", "Lindqvist", "Quill", "Arslan",
]

CALLSIGNS = ["Hayalet", "Voltaj", "Gölge", "Piksel", "Kuzgun", "Nöron", "Titan", "Fısıltı", "Şimşek", "Sıfır"]

ORIGINS = [
    "Yeraltı Sektör 7", "Neo-Reykjavik", "Dijital Boşluk", "Tuvalu Yüzen Şehri", "Kiribati Mercan Ağı",
    "Svalbard Tohum Kasası", "Palau Derin Hattı", "Faroe Rüzgar Çiftliği", "Nauru Veri Adası",
    "Greenland Buz Kubbesi", "Socotra Kum Kulesi", "Tokelau Sinyal Şamandırası",
]

DISCOVERY_HOOKS = [
    "Terk edilmiş bir drone hangarında gece maçlarında keşfedildi",
    "Bir veri sızıntısının içindeki tek saniyelik görüntüden izi sürüldü",
    "Sokak turnuvasında üç yetkili gözlemciyi aynı anda çalımladı",
    "Buz üstünde oynanan kaçak liglerde efsaneye dönüştü",
    "Bir kargo gemisinin güvertesinde antrenman yaparken fark edildi",
    "Simülasyon kayıtlarında fizik motorunu bozan hareketleriyle bilindi",
]

DISCOVERY_TWISTS = [
    "kimse geçmişini doğrulayamıyor.",
    "sözleşmesinde tek bir şart var: maç öncesi sessizlik.",
    "eski takım arkadaşları ondan sadece takma adıyla bahsediyor.",
    "biyometrik verileri her taramada biraz farklı çıkıyor.",
    "lig yönetimi onu iki kez kayıt dışı ilan etti.",
]


def opponent_name(rng: random.Random) -> str:
    return f"{rng.choice(OPPONENT_CITIES)} {rng.choice(OPPONENT_CLUBS)}"


class NameGenerator:
    """Hands out unique player names from the pools."""

    def __init__(self, rng: random.Random) -> None:
        self._rng = rng
        self._used: Set[str] = set()

    def reserve(self, names) -> None:
        self._used.update(names)

    def next_name(self) -> str:
        for _ in range(50):
            first = self._rng.choice(FIRST_NAMES)
            last = self._rng.choice(LAST_NAMES)
            if self._rng.random() < 0.25:
                name = f'{first} "{self._rng.choice(CALLSIGNS)}" {last}'
            else:
                name = f"{first} {last}"
            if name not in self._used:
                self._used.add(name)
                return name
        suffix = 2
        base = f"{self._rng.choice(FIRST_NAMES)} {self._rng.choice(LAST_NAMES)}"
        while f"{base} {suffix}" in self._used:
            suffix += 1
        self._used.add(f"{base} {suffix}")
        return f"{base} {suffix}"


def backstory(rng: random.Random, origin: str) -> str:
    return f"{rng.choice(DISCOVERY_HOOKS)} ({origin}); {rng.choice(DISCOVERY_TWISTS)}"
