"""Run record persisted after every run.

The record is informational: steps are idempotent on their own and are
never skipped because a previous run completed them.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)


def _detect_format(path: Path) -> str:
    ext = path.suffix.lower().lstrip(".")
    if ext in {"yaml", "yml"}:
        return "yaml"
    # Default to JSON for unknown extensions.
    return "json"


def load_state(path: str) -> Dict[str, Any]:
    p = Path(path)
    if not p.exists():
        return {}

    text = p.read_text(encoding="utf-8")
    if _detect_format(p) == "yaml":
        data = yaml.safe_load(text) or {}
    else:
        data = json.loads(text)

    if not isinstance(data, dict):
        raise ValueError(f"State file must be an object/dict, got {type(data)}")

    return data


def load_previous_state(path: str) -> Dict[str, Any]:
    """Like load_state, but an unreadable record only costs the run counter."""
    try:
        return load_state(path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.warning("Ignoring unreadable run record %s: %s", path, e)
        return {}


def save_state(path: str, state: Dict[str, Any]) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    if _detect_format(p) == "yaml":
        p.write_text(yaml.safe_dump(state, sort_keys=False), encoding="utf-8")
    else:
        p.write_text(json.dumps(state, indent=2, sort_keys=True) + "\n", encoding="utf-8")


def new_run_state(previous: Dict[str, Any], config: Dict[str, Any]) -> Dict[str, Any]:
    """Start a fresh record for this run, carrying the run counter forward."""

    return {
        "version": 1,
        "runs": int(previous.get("runs") or 0) + 1,
        "config": dict(config),
        "execution": {
            "current_step": None,
            "outcomes": {},
            "errors": [],
        },
    }


def record_outcome(state: Dict[str, Any], step_id: str, status: str, message: str) -> None:
    outcomes = state.setdefault("execution", {}).setdefault("outcomes", {})
    outcomes[step_id] = {"status": status, "message": message}
