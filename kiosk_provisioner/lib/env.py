from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Paths:
    """Fixed host locations, resolved under ``root``.

    ``root`` is ``/`` on a real host; tests point it at a scratch tree.
    """

    root: str = "/"
    state_default: str = "/var/lib/kiosk-provisioner/state.json"
    log_default: str = "/var/log/kiosk-provisioner.log"

    def resolve(self, abs_path: str) -> Path:
        return Path(self.root) / abs_path.lstrip("/")

    @property
    def getty_dropin_dir(self) -> Path:
        return self.resolve("/etc/systemd/system/getty@tty1.service.d")

    @property
    def autologin_dropin(self) -> Path:
        return self.getty_dropin_dir / "autologin.conf"

    @property
    def flatpak_update_service(self) -> Path:
        return self.resolve("/etc/systemd/system/flatpak-update.service")

    @property
    def flatpak_update_timer(self) -> Path:
        return self.resolve("/etc/systemd/system/flatpak-update.timer")

    @property
    def dnf_automatic_conf(self) -> Path:
        return self.resolve("/etc/dnf/automatic.conf")

    def home(self, user: str) -> Path:
        return self.resolve(f"/home/{user}")

    def bash_profile(self, user: str) -> Path:
        return self.home(user) / ".bash_profile"


PATHS = Paths()
