"""Canonical text of the artifacts the provisioner writes.

Every renderer is a pure function of its arguments so re-runs produce
byte-identical files.
"""

from __future__ import annotations

BROWSER_APP_ID = "app.zen_browser.zen"
URL_PLACEHOLDER = "__KIOSK_URL__"

AUTOSTART_START_MARKER = "# >>> zen-kiosk start >>>"
AUTOSTART_END_MARKER = "# <<< zen-kiosk end <<<"

FLATPAK_UPDATE_SERVICE = "flatpak-update.service"
FLATPAK_UPDATE_TIMER = "flatpak-update.timer"
DNF_AUTOMATIC_TIMER = "dnf-automatic.timer"
GETTY_UNIT = "getty@tty1.service"


def render_autologin_dropin(username: str) -> str:
    return "\n".join(
        [
            "[Service]",
            "ExecStart=",
            f"ExecStart=-/usr/bin/agetty --autologin {username} --noclear %I $TERM",
            "Type=simple",
            "",
        ]
    )


def render_autostart_block(url: str, *, app_id: str = BROWSER_APP_ID) -> str:
    """Login-shell hook launching cage + the browser on tty1.

    ``url`` is substituted verbatim. It is trusted operator input: quotes or
    backticks in it end up in the shell line as-is.
    """
    template = "\n".join(
        [
            AUTOSTART_START_MARKER,
            "# Auto-start Cage + Zen Browser when logging into tty1 and no Wayland session is active.",
            'if [ -z "$WAYLAND_DISPLAY" ] && [ "$(tty)" = "/dev/tty1" ]; then',
            f"  exec cage -s -- flatpak run {app_id} --new-window {URL_PLACEHOLDER}",
            "fi",
            AUTOSTART_END_MARKER,
            "",
        ]
    )
    return template.replace(URL_PLACEHOLDER, url)


def render_flatpak_update_service() -> str:
    return "\n".join(
        [
            "[Unit]",
            "Description=Flatpak automatic updates",
            "",
            "[Service]",
            "Type=oneshot",
            "ExecStart=/usr/bin/flatpak update -y --noninteractive",
            "",
        ]
    )


def render_flatpak_update_timer() -> str:
    return "\n".join(
        [
            "[Unit]",
            "Description=Daily Flatpak update",
            "",
            "[Timer]",
            "OnBootSec=5min",
            "OnUnitActiveSec=1d",
            "Persistent=true",
            "",
            "[Install]",
            "WantedBy=timers.target",
            "",
        ]
    )
