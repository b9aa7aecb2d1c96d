"""engine.sim_runner

Headless runner for quick sanity checks.

Deterministic and CI-friendly by default: owned match simulation plus the
procedural scouting provider, no network calls. `--provider gemini` routes
scouting and match narratives through the remote collaborator instead
(key from GEMINI_API_KEY / GOOGLE_API_KEY).

Run:
  python -m engine.sim_runner --matches 12 --seed 123
  python -m engine.sim_runner --matches 3 --provider gemini
"""

from __future__ import annotations

import argparse
import logging
from typing import Any, Dict, List, Optional

from core.errors import InsufficientFunds
from core.state import Tactic, default_start_state
from core.valuation import signing_cost

from content.providers.base import ContentProvider

from .config import EngineConfig, load_api_key
from .pipeline import LeagueSession
from .run_log import dumps_run_export, make_run_export

TACTIC_ROTATION = [Tactic.ALL_OUT_ATTACK, Tactic.POSSESSION_GAME, Tactic.COUNTER_ATTACK, Tactic.PARK_THE_BUS]


def run_headless_season(
    matches: int = 12,
    seed: int = 123,
    balance_key: str = "Normal",
    provider: Optional[ContentProvider] = None,
) -> Dict[str, Any]:
    """Play `matches` matches and return a summary.

    After every payday the runner scouts once and signs the candidate when
    it is affordable with a 500-credit cushion left over.

    `provider` (if given) scouts and narrates every match; otherwise the
    procedural provider scouts and the owned simulation plays.
    """
    cfg = EngineConfig(base_seed=int(seed), balance_key=balance_key)
    initial = default_start_state(cfg.starting_credits)
    if provider is None:
        session = LeagueSession(cfg, state=initial)
        session.provider.reserve_names(p.name for p in initial.squad)
    else:
        session = LeagueSession(cfg, state=initial, provider=provider, match_provider=provider)

    paydays: List[int] = []
    signed: List[str] = []
    for i in range(int(matches)):
        session.new_briefing()
        report = session.play_match(TACTIC_ROTATION[i % len(TACTIC_ROTATION)])
        if report.payday is None:
            continue
        paydays.append(int(report.payday.amount))
        try:
            candidate = session.scout()
        except InsufficientFunds:
            continue
        if session.state.credits - signing_cost(candidate) >= 500:
            signed.append(session.sign_candidate().name)
        else:
            session.reject_candidate()

    return {
        "matches": int(matches),
        "final": session.state,
        "paydays": paydays,
        "signed": signed,
        "logs": list(session.match_logs),
        "export": make_run_export(config=cfg, initial_state=initial, match_logs=session.match_logs),
    }


def main() -> None:
    parser = argparse.ArgumentParser(description="Run a headless league season.")
    parser.add_argument("--matches", type=int, default=12)
    parser.add_argument("--seed", type=int, default=123)
    parser.add_argument("--balance", default="Normal")
    parser.add_argument(
        "--provider",
        choices=["procedural", "gemini"],
        default="procedural",
        help="content collaborator for scouting and match narratives",
    )
    parser.add_argument("--export", action="store_true", help="print the JSON run export")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    provider: Optional[ContentProvider] = None
    if args.provider == "gemini":
        # google-genai is only loaded when the remote collaborator is asked for
        from content.providers.gemini import GeminiProvider

        provider = GeminiProvider.from_api_key_string(load_api_key())
        status = provider.status()
        if not status.ok:
            parser.error(f"gemini provider unavailable: {status.error} (set GEMINI_API_KEY or GOOGLE_API_KEY)")

    out = run_headless_season(matches=args.matches, seed=args.seed, balance_key=args.balance, provider=provider)
    if args.export:
        print(dumps_run_export(out["export"]))
        return
    final = out["final"]
    print(f"matches={out['matches']} credits={final.credits} squad={len(final.squad)} paydays={out['paydays']}")


if __name__ == "__main__":
    main()
