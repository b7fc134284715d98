"""
Pytest configuration and fixtures for kiosk-provisioner tests.
"""

import subprocess
from typing import Dict, List, Tuple

import pytest

from kiosk_provisioner.config import KioskConfig
from kiosk_provisioner.lib import command
from kiosk_provisioner.state_store import new_run_state


class FakeHost:
    """Stands in for subprocess.run: records argv, answers from a script.

    Responses are matched by longest argv prefix. Unscripted commands
    succeed with empty output, except the probes below which describe a
    fresh Fedora host (no kiosk user, no Zen, no sshd unit).
    """

    def __init__(self) -> None:
        self.calls: List[List[str]] = []
        self.responses: Dict[Tuple[str, ...], Tuple[int, str]] = {
            ("id",): (1, ""),
            ("flatpak", "info"): (1, ""),
            ("flatpak", "remotes"): (0, ""),
            ("systemctl", "list-unit-files"): (0, "getty@.service static -\n"),
        }

    def respond(self, *prefix: str, returncode: int = 0, stdout: str = "") -> None:
        self.responses[tuple(prefix)] = (returncode, stdout)

    def __call__(self, argv, **kwargs):
        argv = list(argv)
        self.calls.append(argv)
        best: Tuple[str, ...] = ()
        for prefix in self.responses:
            if tuple(argv[: len(prefix)]) == prefix and len(prefix) > len(best):
                best = prefix
        rc, stdout = self.responses.get(best, (0, ""))
        return subprocess.CompletedProcess(argv, rc, stdout, "boom\n" if rc else "")

    def ran(self, *prefix: str) -> bool:
        return any(tuple(c[: len(prefix)]) == prefix for c in self.calls)


@pytest.fixture
def host(monkeypatch):
    fake = FakeHost()
    monkeypatch.setattr(command.subprocess, "run", fake)
    return fake


@pytest.fixture
def kiosk_cfg(tmp_path):
    return KioskConfig(root=str(tmp_path / "root"))


@pytest.fixture
def state(kiosk_cfg):
    return new_run_state({}, kiosk_cfg.as_state())
