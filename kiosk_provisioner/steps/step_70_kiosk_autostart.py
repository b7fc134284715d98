from __future__ import annotations

import logging
import os
from typing import Any, Dict

from ..config import config_from_state
from ..lib.accounts import chown_tree
from ..lib.files import replace_managed_block
from ..lib.units import AUTOSTART_END_MARKER, AUTOSTART_START_MARKER, render_autostart_block
from ..report import OK, banner, outcome

logger = logging.getLogger(__name__)


class KioskAutostartStep:
    """Keep one managed launch block in the kiosk user's ~/.bash_profile.

    .bash_profile is what a tty1 login shell reads. Anything the user put
    outside the markers is left alone.
    """

    step_id = "70_kiosk_autostart"

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        cfg = config_from_state(state)
        profile = cfg.bash_profile
        banner(f"Setting kiosk autostart in {profile}")

        if not cfg.dry_run:
            cfg.home.mkdir(parents=True, exist_ok=True)
            os.chmod(cfg.home, 0o755)

        replace_managed_block(
            profile,
            render_autostart_block(cfg.url),
            start_marker=AUTOSTART_START_MARKER,
            end_marker=AUTOSTART_END_MARKER,
            dry_run=cfg.dry_run,
        )
        chown_tree(cfg.user, str(profile), recursive=False, dry_run=cfg.dry_run)
        if not cfg.dry_run:
            os.chmod(profile, 0o644)

        outcome(state, self.step_id, OK, "Autostart configured.")
        return state
