from __future__ import annotations

import logging
from typing import Any, Dict

from ..config import config_from_state
from ..lib.accounts import chown_tree, create_passwordless_user, user_exists
from ..report import OK, banner, outcome

logger = logging.getLogger(__name__)


class EnsureUserStep:
    step_id = "50_ensure_user"

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        cfg = config_from_state(state)
        banner(f"Ensuring kiosk user: {cfg.user}")

        if user_exists(cfg.user, dry_run=cfg.dry_run):
            # Existing accounts keep their password state.
            message = f"User {cfg.user} exists."
            created = False
        else:
            create_passwordless_user(cfg.user, dry_run=cfg.dry_run)
            message = f"Created {cfg.user} (passwordless)."
            created = True

        if not cfg.dry_run:
            cfg.home.mkdir(parents=True, exist_ok=True)
        chown_tree(cfg.user, str(cfg.home), dry_run=cfg.dry_run)

        state.setdefault("execution", {}).setdefault("decisions", {})["user_created"] = created
        outcome(state, self.step_id, OK, message)
        return state
