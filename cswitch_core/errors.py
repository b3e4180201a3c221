"""Typed errors raised by the cargo-switch core."""

from __future__ import annotations


class SwitchError(RuntimeError):
    """Base cargo-switch error."""


class BinDirectoryNotFoundError(SwitchError):
    """No usable bin directory could be found on PATH."""


class PackageSpecError(SwitchError, ValueError):
    """Input is not a NAME@VERSION specifier."""

    def __init__(self, raw: str) -> None:
        super().__init__(f"expected input in the form NAME@VERSION, got {raw!r}")
        self.raw = raw


class NotInstalledError(SwitchError):
    """The requested version has no usable install under the registry."""


class InstallCommandError(SwitchError):
    """The install program could not be started."""
