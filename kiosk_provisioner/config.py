from __future__ import annotations

import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

from .lib.env import Paths

DEFAULT_USER = "kiosk"
DEFAULT_URL = "https://example.com"
DEFAULT_PACKAGES = ("cage", "flatpak")

ENV_USER = "KIOSK_USER"
ENV_URL = "KIOSK_URL"
ENV_CONFIG = "KIOSK_CONFIG"


class ConfigError(ValueError):
    """Invalid provisioner configuration."""


@dataclass(frozen=True)
class KioskConfig:
    user: str = DEFAULT_USER
    # Trusted input: substituted into the login hook without shell escaping.
    url: str = DEFAULT_URL
    root: str = "/"
    dry_run: bool = False
    packages: tuple[str, ...] = field(default=DEFAULT_PACKAGES)

    @property
    def paths(self) -> Paths:
        return Paths(root=self.root)

    @property
    def home(self) -> Path:
        return self.paths.home(self.user)

    @property
    def bash_profile(self) -> Path:
        return self.paths.bash_profile(self.user)

    def as_state(self) -> Dict[str, Any]:
        d = asdict(self)
        d["packages"] = list(self.packages)
        return d


def _read_config_file(path: str) -> Dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise ConfigError(f"Config file not found: {path}")
    if p.suffix.lower() not in {".yaml", ".yml"}:
        raise ConfigError("config file must be YAML")

    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Malformed config file {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"{path} must contain a mapping/object")
    return raw


def load_config(
    path: str | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    dry_run: bool = False,
    root: str = "/",
) -> KioskConfig:
    """Resolve configuration: defaults, then YAML file, then environment.

    The file comes from ``path`` or $KIOSK_CONFIG. $KIOSK_USER and
    $KIOSK_URL always win over the file.
    """

    env = os.environ if environ is None else environ
    path = path or env.get(ENV_CONFIG) or None
    raw = _read_config_file(path) if path else {}

    user = str(env.get(ENV_USER) or raw.get("user") or DEFAULT_USER).strip()
    # Trusted input, taken verbatim.
    url = str(env.get(ENV_URL) or raw.get("url") or DEFAULT_URL)

    if not user:
        raise ConfigError("kiosk user must not be empty")
    if "/" in user or user.startswith("-"):
        raise ConfigError(f"invalid kiosk user name: {user!r}")
    if not url.strip():
        raise ConfigError("kiosk URL must not be empty")

    packages = raw.get("packages")
    if packages is None:
        packages = list(DEFAULT_PACKAGES)
    if not isinstance(packages, list) or not all(isinstance(p, str) for p in packages):
        raise ConfigError("packages must be a list of strings")

    return KioskConfig(user=user, url=url, root=root, dry_run=dry_run, packages=tuple(packages))


def config_from_state(state: Dict[str, Any]) -> KioskConfig:
    cfg = state.get("config") or {}
    return KioskConfig(
        user=str(cfg.get("user", DEFAULT_USER)),
        url=str(cfg.get("url", DEFAULT_URL)),
        root=str(cfg.get("root", "/")),
        dry_run=bool(cfg.get("dry_run", False)),
        packages=tuple(cfg.get("packages", DEFAULT_PACKAGES)),
    )
