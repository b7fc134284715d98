from __future__ import annotations

import logging
from typing import Any, Dict

from ..config import config_from_state
from ..lib.systemd import disable_and_mask, unit_file_exists
from ..report import OK, SKIP, banner, outcome

logger = logging.getLogger(__name__)

SSH_UNIT = "sshd.service"


class DisableSshStep:
    step_id = "10_disable_ssh"

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        cfg = config_from_state(state)
        banner("Disabling SSH (sshd) if installed")

        if not unit_file_exists(SSH_UNIT, dry_run=cfg.dry_run):
            outcome(state, self.step_id, SKIP, "sshd not installed.")
            return state

        # Best-effort: the unit may already be stopped or masked.
        if not disable_and_mask("sshd", dry_run=cfg.dry_run):
            logger.warning("sshd disable/mask reported a failure; continuing")
        outcome(state, self.step_id, OK, "sshd disabled + masked.")
        return state
