from __future__ import annotations

import logging
from typing import Any, Dict

from .config import KioskConfig
from .lib.units import BROWSER_APP_ID
from .state_store import record_outcome

logger = logging.getLogger(__name__)

OK = "OK"
SKIP = "SKIP"


def banner(text: str) -> None:
    print(f"\n==> {text}")
    logger.info("==> %s", text)


def outcome(state: Dict[str, Any], step_id: str, status: str, message: str) -> None:
    """Print an ``[OK]``/``[SKIP]`` line and record it in the run state."""

    print(f"[{status}] {message}")
    logger.info("%s [%s] %s", step_id, status, message)
    record_outcome(state, step_id, status, message)


def print_summary(cfg: KioskConfig) -> None:
    print("\n=== SUMMARY ===")
    print("SSH: disabled (masked if installed)")
    print("Auto-updates: Flatpak timer + dnf-automatic enabled")
    print(f"Installed: {', '.join(cfg.packages)}; Flatpak app {BROWSER_APP_ID}")
    print(f"User: {cfg.user} (autologin on tty1)")
    print(f"Autostart: {cfg.bash_profile} (login shell) -> cage -> zen")
    print(f"Homepage: {cfg.url}")
    print("[DONE] Reboot to test.")
