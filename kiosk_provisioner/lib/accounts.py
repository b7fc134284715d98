from __future__ import annotations

import logging

from .command import run_cmd

logger = logging.getLogger(__name__)


def user_exists(username: str, *, dry_run: bool = False) -> bool:
    if dry_run:
        return False
    r = run_cmd(["id", username], check=False)
    return r.ok


def create_passwordless_user(username: str, *, shell: str = "/bin/bash", dry_run: bool = False) -> None:
    """Create ``username`` with a home directory, then delete its password.

    Only call this for accounts this run created; existing credentials are
    never touched.
    """
    run_cmd(["useradd", "-m", "-s", shell, username], dry_run=dry_run)
    # passwd -d failing leaves a locked account, which is still usable via autologin.
    run_cmd(["passwd", "-d", username], check=False, dry_run=dry_run)


def chown_tree(username: str, path: str, *, recursive: bool = True, dry_run: bool = False) -> None:
    argv = ["chown"]
    if recursive:
        argv.append("-R")
    run_cmd([*argv, f"{username}:{username}", path], dry_run=dry_run)
