from __future__ import annotations

import logging

from .command import run_cmd

logger = logging.getLogger(__name__)


def unit_file_exists(unit: str, *, dry_run: bool = False) -> bool:
    """True if ``systemctl list-unit-files`` lists ``unit`` (e.g. ``sshd.service``)."""
    if dry_run:
        return False
    r = run_cmd(["systemctl", "list-unit-files"], check=False)
    for line in r.stdout.splitlines():
        fields = line.split()
        if fields and fields[0] == unit:
            return True
    return False


def daemon_reload(*, dry_run: bool = False) -> None:
    run_cmd(["systemctl", "daemon-reload"], dry_run=dry_run)


def enable(unit: str, *, now: bool = False, dry_run: bool = False) -> None:
    argv = ["systemctl", "enable"]
    if now:
        argv.append("--now")
    run_cmd([*argv, unit], dry_run=dry_run)


def disable_and_mask(unit: str, *, dry_run: bool = False) -> bool:
    """Best-effort stop, disable and mask. Returns True if both calls succeeded."""
    disabled = run_cmd(["systemctl", "disable", "--now", unit], check=False, dry_run=dry_run)
    masked = run_cmd(["systemctl", "mask", unit], check=False, dry_run=dry_run)
    return disabled.ok and masked.ok
