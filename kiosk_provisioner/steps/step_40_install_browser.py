from __future__ import annotations

import logging
from typing import Any, Dict

from ..config import config_from_state
from ..lib.pkg import FLATHUB_NAME, flatpak_install, flatpak_is_installed
from ..lib.units import BROWSER_APP_ID
from ..report import OK, banner, outcome

logger = logging.getLogger(__name__)


class InstallBrowserStep:
    step_id = "40_install_browser"

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        cfg = config_from_state(state)
        banner(f"Installing Zen Browser (Flatpak: {BROWSER_APP_ID})")

        if flatpak_is_installed(BROWSER_APP_ID, dry_run=cfg.dry_run):
            outcome(state, self.step_id, OK, "Zen already installed.")
            return state

        flatpak_install(FLATHUB_NAME, BROWSER_APP_ID, dry_run=cfg.dry_run)
        outcome(state, self.step_id, OK, "Zen installed.")
        return state
