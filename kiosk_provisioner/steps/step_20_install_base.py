from __future__ import annotations

import logging
from typing import Any, Dict

from ..config import config_from_state
from ..lib.pkg import dnf_install
from ..report import OK, banner, outcome

logger = logging.getLogger(__name__)


class InstallBaseStep:
    step_id = "20_install_base"

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        cfg = config_from_state(state)
        pkgs = list(cfg.packages)
        banner(f"Installing base packages: {', '.join(pkgs)}")

        if not dnf_install(pkgs, best_effort=True, dry_run=cfg.dry_run):
            logger.warning("dnf install failed; assuming packages are already present")
        outcome(state, self.step_id, OK, f"{' + '.join(pkgs)} ensured.")
        return state
