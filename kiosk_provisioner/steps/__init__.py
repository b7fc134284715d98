from .step_10_disable_ssh import DisableSshStep
from .step_20_install_base import InstallBaseStep
from .step_30_enable_flathub import EnableFlathubStep
from .step_40_install_browser import InstallBrowserStep
from .step_50_ensure_user import EnsureUserStep
from .step_60_autologin_tty1 import AutologinTty1Step
from .step_70_kiosk_autostart import KioskAutostartStep
from .step_80_flatpak_updates import FlatpakUpdatesStep
from .step_90_dnf_automatic import DnfAutomaticStep

__all__ = [
    "DisableSshStep",
    "InstallBaseStep",
    "EnableFlathubStep",
    "InstallBrowserStep",
    "EnsureUserStep",
    "AutologinTty1Step",
    "KioskAutostartStep",
    "FlatpakUpdatesStep",
    "DnfAutomaticStep",
]
