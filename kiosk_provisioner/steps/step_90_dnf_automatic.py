from __future__ import annotations

import logging
from typing import Any, Dict

from ..config import config_from_state
from ..lib import systemd
from ..lib.files import set_ini_values
from ..lib.pkg import dnf_install
from ..lib.units import DNF_AUTOMATIC_TIMER
from ..report import OK, banner, outcome

logger = logging.getLogger(__name__)

DNF_AUTOMATIC_SETTINGS = {
    "apply_updates": "yes",
    "upgrade_type": "default",
}


class DnfAutomaticStep:
    step_id = "90_dnf_automatic"

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        cfg = config_from_state(state)
        banner("Enabling dnf-automatic for RPM updates")

        dnf_install(["dnf-automatic"], best_effort=True, dry_run=cfg.dry_run)
        try:
            set_ini_values(cfg.paths.dnf_automatic_conf, DNF_AUTOMATIC_SETTINGS, dry_run=cfg.dry_run)
        except (OSError, UnicodeError) as e:
            # Best-effort: the shipped defaults still download updates.
            logger.warning("Could not rewrite %s: %s", cfg.paths.dnf_automatic_conf, e)
        systemd.enable(DNF_AUTOMATIC_TIMER, now=True, dry_run=cfg.dry_run)

        outcome(state, self.step_id, OK, "dnf-automatic timer active.")
        return state
