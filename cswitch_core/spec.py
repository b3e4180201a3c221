"""Parsing for NAME@VERSION package specifiers."""

from __future__ import annotations

import string
from dataclasses import dataclass
from pathlib import Path

from .errors import PackageSpecError

__all__ = ["PackageSpec", "parse_package_spec", "target_path"]


@dataclass(frozen=True)
class PackageSpec:
    name: str
    version: str

    def __str__(self) -> str:
        return f"{self.name}@{self.version}"

    def install_path(self, registry_root: Path) -> Path:
        return target_path(registry_root, self.name, self.version)


def parse_package_spec(raw: str) -> PackageSpec:
    """Split `raw` on the first ``@`` and apply the basic sanity checks.

    The name must be non-empty and the version must contain at least one
    ASCII digit, which rejects bare package names and tags like ``zig@rc``.
    Nothing here checks that the parts are safe path segments; the install
    command rejects package names it does not know.
    """
    name, sep, version = raw.partition("@")
    if not sep or not name:
        raise PackageSpecError(raw)
    if not any(ch in string.digits for ch in version):
        raise PackageSpecError(raw)
    return PackageSpec(name=name, version=version)


def target_path(registry_root: Path, name: str, version: str) -> Path:
    return registry_root / name / version
