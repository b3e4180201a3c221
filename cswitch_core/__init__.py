"""Core registry and switching engine for cargo-switch."""

from .config import SettingsResolver, SwitchSettings
from .engine import LinkResult, PackageSummary, Switcher, format_listing
from .errors import (
    BinDirectoryNotFoundError,
    InstallCommandError,
    NotInstalledError,
    PackageSpecError,
    SwitchError,
)
from .installer import InstallCommand
from .locator import Locator
from .spec import PackageSpec, parse_package_spec, target_path

__all__ = [
    "BinDirectoryNotFoundError",
    "InstallCommand",
    "InstallCommandError",
    "LinkResult",
    "Locator",
    "NotInstalledError",
    "PackageSpec",
    "PackageSpecError",
    "PackageSummary",
    "SettingsResolver",
    "SwitchError",
    "SwitchSettings",
    "Switcher",
    "format_listing",
    "parse_package_spec",
    "target_path",
]
