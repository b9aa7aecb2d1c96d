"""engine.run_log

Helpers for storing season run logs.

A run log is JSON-serializable so a season can be exported and replayed
later from its seed.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any, Dict, List

from core import API_VERSION
from core.state import EconomyState

from .config import EngineConfig


def make_run_export(*, config: EngineConfig, initial_state: EconomyState, match_logs: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {
        "version": 1,
        "core_api": API_VERSION,
        "seed": int(config.base_seed),
        "config": asdict(config),
        "initial_state": initial_state.to_dict(),
        "match_logs": list(match_logs),
    }


def dumps_run_export(obj: Dict[str, Any]) -> str:
    return json.dumps(obj, ensure_ascii=False, indent=2, sort_keys=True)
