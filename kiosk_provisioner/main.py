from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Any, Dict, Optional

from .config import ConfigError, KioskConfig, load_config
from .lib.command import CommandError
from .lib.env import PATHS
from .logging_utils import configure_logging
from .pipeline import PipelineResult, check_window, run_pipeline
from .report import print_summary
from .state_store import load_previous_state, new_run_state, save_state
from .steps import (
    AutologinTty1Step,
    DisableSshStep,
    DnfAutomaticStep,
    EnableFlathubStep,
    EnsureUserStep,
    FlatpakUpdatesStep,
    InstallBaseStep,
    InstallBrowserStep,
    KioskAutostartStep,
)

logger = logging.getLogger(__name__)


DEFAULT_STATE_PATH = PATHS.state_default
DEFAULT_LOG_PATH = PATHS.log_default


def build_steps():
    return [
        DisableSshStep(),
        InstallBaseStep(),
        EnableFlathubStep(),
        InstallBrowserStep(),
        EnsureUserStep(),
        AutologinTty1Step(),
        KioskAutostartStep(),
        FlatpakUpdatesStep(),
        DnfAutomaticStep(),
    ]


def is_root() -> bool:
    return os.geteuid() == 0


def run(
    cfg: KioskConfig,
    *,
    state_path: str = DEFAULT_STATE_PATH,
    start_at: Optional[str] = None,
    stop_after: Optional[str] = None,
) -> PipelineResult:
    """Run the provisioning pipeline and persist a run record."""

    steps = build_steps()
    check_window(steps, start_at, stop_after)

    state: Dict[str, Any] = new_run_state(load_previous_state(state_path), cfg.as_state())

    try:
        return run_pipeline(state=state, steps=steps, start_at=start_at, stop_after=stop_after)
    except Exception as e:
        logger.exception("Provisioning failed")
        state.setdefault("execution", {}).setdefault("errors", []).append(
            {
                "step": (state.get("execution") or {}).get("current_step"),
                "error": str(e),
            }
        )
        raise
    finally:
        if not cfg.dry_run:
            save_state(state_path, state)


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(
        prog="kiosk-provisioner",
        description="Provision a Fedora host as a cage + Zen Browser kiosk. "
        "Set KIOSK_USER and KIOSK_URL to override the defaults.",
    )
    p.add_argument("--config", default=None, help="Optional YAML config (keys: user, url, packages)")
    p.add_argument("--state", default=DEFAULT_STATE_PATH, help="Path to run record (json|yaml)")
    p.add_argument("--log", default=DEFAULT_LOG_PATH, help="Path to provisioner log")
    p.add_argument("--start-at", default=None, help="Start at step_id (e.g. 50_ensure_user)")
    p.add_argument("--stop-after", default=None, help="Stop after step_id")
    p.add_argument("--dry-run", action="store_true", help="Log commands and writes without executing them")

    args = p.parse_args(argv)

    if not is_root():
        print("ERROR: run as root (e.g., sudo kiosk-provisioner)", file=sys.stderr)
        return 1

    try:
        cfg = load_config(args.config, dry_run=bool(args.dry_run))
    except ConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    configure_logging(log_path=args.log)

    try:
        result = run(cfg, state_path=args.state, start_at=args.start_at, stop_after=args.stop_after)
    except ConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2
    except CommandError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return e.exit_status

    if result.completed:
        print_summary(cfg)
    return 0
