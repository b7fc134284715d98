from __future__ import annotations

import logging
from typing import Any, Dict

from ..config import config_from_state
from ..lib.pkg import FLATHUB_NAME, FLATHUB_URL, flatpak_has_remote, flatpak_remote_add
from ..report import OK, banner, outcome

logger = logging.getLogger(__name__)


class EnableFlathubStep:
    step_id = "30_enable_flathub"

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        cfg = config_from_state(state)
        banner("Ensuring Flathub remote")

        if flatpak_has_remote(FLATHUB_NAME, dry_run=cfg.dry_run):
            outcome(state, self.step_id, OK, "Flathub already present.")
            return state

        flatpak_remote_add(FLATHUB_NAME, FLATHUB_URL, dry_run=cfg.dry_run)
        outcome(state, self.step_id, OK, "Flathub added.")
        return state
