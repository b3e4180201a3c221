"""Layered settings for cargo-switch (cli > env > user config > defaults)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

import tomllib

from .paths import UserDirs

CONFIG_FILE_NAME = "config.toml"

DEFAULT_BIN_MARKER = ".cargo/bin"
DEFAULT_REGISTRY_DIR_NAME = "cargo-switch-registry"
DEFAULT_INSTALL_PROGRAM = "cargo"

_DEFAULTS: dict[str, str] = {
    "bin_marker": DEFAULT_BIN_MARKER,
    "registry_dir_name": DEFAULT_REGISTRY_DIR_NAME,
    "install_program": DEFAULT_INSTALL_PROGRAM,
    "log_level": "WARNING",
}
_ENV_KEY_MAP: dict[str, str] = {
    "bin_marker": "CARGO_SWITCH_BIN_MARKER",
    "registry_dir_name": "CARGO_SWITCH_REGISTRY_DIR",
    "install_program": "CARGO_SWITCH_INSTALL_PROGRAM",
    "log_level": "CARGO_SWITCH_LOG_LEVEL",
}

logger = logging.getLogger(__name__)


def _load_config_from_file(path: Path) -> dict[str, str]:
    if not path.exists():
        return {}
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        logger.warning("ignoring unreadable config %s: %s", path, exc)
        return {}
    return {key: str(value) for key, value in data.items()}


@dataclass(frozen=True)
class SwitchSettings:
    """Resolved view of every cargo-switch setting."""

    bin_marker: str = DEFAULT_BIN_MARKER
    registry_dir_name: str = DEFAULT_REGISTRY_DIR_NAME
    install_program: str = DEFAULT_INSTALL_PROGRAM
    log_level: str = "WARNING"


@dataclass
class SettingsResolver:
    """Resolve settings while honoring layered configuration."""

    user_dirs: UserDirs | None = None
    config_path: Path | None = None
    cli_overrides: Mapping[str, str] | None = None
    env: Mapping[str, str] | None = None
    defaults: Mapping[str, str] | None = None

    def __post_init__(self) -> None:
        self.user_dirs = self.user_dirs or UserDirs()
        self.cli_overrides = dict(self.cli_overrides or {})
        self.env = self.env if self.env is not None else os.environ
        base_defaults = dict(_DEFAULTS)
        if self.defaults:
            base_defaults.update(self.defaults)
        self.defaults = base_defaults
        self._file_layer: dict[str, str] | None = None

    # ---------- Public API ----------

    def resolve_setting(self, key: str) -> str | None:
        """Return the value for `key` using CLI, env, user config, defaults order."""
        if value := self.cli_overrides.get(key):
            return value
        if value := self._env_value(key):
            return value
        if value := self._user_config_layer().get(key):
            return value
        return self.defaults.get(key)

    def settings(self) -> SwitchSettings:
        return SwitchSettings(
            bin_marker=self.resolve_setting("bin_marker") or DEFAULT_BIN_MARKER,
            registry_dir_name=self.resolve_setting("registry_dir_name") or DEFAULT_REGISTRY_DIR_NAME,
            install_program=self.resolve_setting("install_program") or DEFAULT_INSTALL_PROGRAM,
            log_level=self.resolve_setting("log_level") or "WARNING",
        )

    def user_config_path(self) -> Path:
        if self.config_path is not None:
            return Path(self.config_path).expanduser()
        return self.user_dirs.config_dir() / CONFIG_FILE_NAME

    # ---------- Internal helpers ----------

    def _env_value(self, key: str) -> str | None:
        alias = _ENV_KEY_MAP.get(key)
        if alias:
            return self.env.get(alias) or None
        return None

    def _user_config_layer(self) -> dict[str, str]:
        if self._file_layer is None:
            self._file_layer = _load_config_from_file(self.user_config_path())
        return self._file_layer
