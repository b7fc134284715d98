from __future__ import annotations

import logging
from typing import Sequence

from .command import run_cmd

logger = logging.getLogger(__name__)

FLATHUB_NAME = "flathub"
FLATHUB_URL = "https://dl.flathub.org/repo/flathub.flatpakrepo"


def dnf_install(packages: Sequence[str], *, best_effort: bool = False, dry_run: bool = False) -> bool:
    """Install RPM packages. Returns True when dnf exited cleanly.

    With best_effort the failure is logged and swallowed: the packages may
    already be present or the mirror may be transiently unavailable.
    """
    if not packages:
        return True
    r = run_cmd(["dnf", "-y", "install", *packages], check=not best_effort, dry_run=dry_run)
    return r.ok


def flatpak_remotes(*, dry_run: bool = False) -> list[str]:
    """Names of configured Flatpak remotes (first column of ``flatpak remotes``)."""
    if dry_run:
        return []
    r = run_cmd(["flatpak", "remotes"], check=False)
    names: list[str] = []
    for line in r.stdout.splitlines():
        fields = line.split()
        if fields:
            names.append(fields[0])
    return names


def flatpak_has_remote(name: str, *, dry_run: bool = False) -> bool:
    return name in flatpak_remotes(dry_run=dry_run)


def flatpak_remote_add(name: str, url: str, *, dry_run: bool = False) -> None:
    run_cmd(["flatpak", "remote-add", "--if-not-exists", name, url], dry_run=dry_run)


def flatpak_is_installed(app_id: str, *, dry_run: bool = False) -> bool:
    if dry_run:
        # Report absent so the plan shows the install.
        return False
    r = run_cmd(["flatpak", "info", app_id], check=False)
    return r.ok


def flatpak_install(remote: str, app_id: str, *, dry_run: bool = False) -> None:
    run_cmd(["flatpak", "install", "-y", remote, app_id], dry_run=dry_run)
