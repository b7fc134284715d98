from __future__ import annotations

import logging
from typing import Any, Dict

from ..config import config_from_state
from ..lib import systemd
from ..lib.files import write_file
from ..lib.units import GETTY_UNIT, render_autologin_dropin
from ..report import OK, banner, outcome

logger = logging.getLogger(__name__)


class AutologinTty1Step:
    step_id = "60_autologin_tty1"

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        cfg = config_from_state(state)
        banner("Configuring autologin on tty1")

        write_file(cfg.paths.autologin_dropin, render_autologin_dropin(cfg.user), dry_run=cfg.dry_run)
        systemd.daemon_reload(dry_run=cfg.dry_run)
        systemd.enable(GETTY_UNIT, dry_run=cfg.dry_run)

        outcome(state, self.step_id, OK, f"Autologin set for {cfg.user} on tty1.")
        return state
