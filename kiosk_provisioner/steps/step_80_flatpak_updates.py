from __future__ import annotations

import logging
from typing import Any, Dict

from ..config import config_from_state
from ..lib import systemd
from ..lib.files import write_file
from ..lib.units import FLATPAK_UPDATE_TIMER, render_flatpak_update_service, render_flatpak_update_timer
from ..report import OK, banner, outcome

logger = logging.getLogger(__name__)


class FlatpakUpdatesStep:
    step_id = "80_flatpak_updates"

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        cfg = config_from_state(state)
        paths = cfg.paths
        banner("Enabling daily Flatpak auto-updates (systemd timer)")

        write_file(paths.flatpak_update_service, render_flatpak_update_service(), dry_run=cfg.dry_run)
        write_file(paths.flatpak_update_timer, render_flatpak_update_timer(), dry_run=cfg.dry_run)
        systemd.daemon_reload(dry_run=cfg.dry_run)
        systemd.enable(FLATPAK_UPDATE_TIMER, now=True, dry_run=cfg.dry_run)

        outcome(state, self.step_id, OK, "Flatpak auto-update timer active.")
        return state
