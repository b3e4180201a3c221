"""Install, switch and list versioned binaries under the registry."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Sequence

from .errors import NotInstalledError
from .installer import InstallCommand
from .spec import parse_package_spec

__all__ = [
    "LinkResult",
    "PackageSummary",
    "Switcher",
    "format_listing",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PackageSummary:
    name: str
    versions: Sequence[str]


@dataclass(frozen=True)
class LinkResult:
    source: Path
    link: Path


class Switcher:
    """Orchestrates installs into the registry and symlink activation.

    ``echo`` receives the user-facing progress lines and defaults to ``print``.
    ``warn`` receives failure notices and defaults to printing on stderr.
    """

    def __init__(
        self,
        bin_dir: Path | str,
        registry_root: Path | str,
        *,
        installer: InstallCommand | None = None,
        echo: Callable[[str], None] | None = None,
        warn: Callable[[str], None] | None = None,
    ) -> None:
        self.bin_dir = Path(bin_dir)
        self.registry_root = Path(registry_root)
        self.installer = installer or InstallCommand()
        self._echo = echo or print
        self._warn = warn or _print_stderr

    # ----------------------- install ------------------------

    def install(self, package_spec: str) -> list[LinkResult]:
        spec = parse_package_spec(package_spec)
        target = spec.install_path(self.registry_root)

        status = self.installer.run(spec, target)
        if status == 0:
            self._echo(f"Successfully installed {spec}")
        else:
            # The switch below still runs and reports the missing install.
            logger.warning("install command for %s exited with %s", spec, status)
            self._warn(f"Failed to install {spec}")

        return self.switch(package_spec)

    # ------------------------ switch ------------------------

    def switch(self, package_spec: str) -> list[LinkResult]:
        spec = parse_package_spec(package_spec)
        install_root = spec.install_path(self.registry_root)
        if not install_root.exists():
            raise NotInstalledError(f"Project {spec} is not installed! (expected {install_root})")

        project_bin = install_root / "bin"
        try:
            entries = sorted(project_bin.iterdir(), key=lambda path: path.name)
        except OSError as exc:
            raise NotInstalledError(f"Expected {project_bin} to exist") from exc

        results: list[LinkResult] = []
        for entry in entries:
            # Entries are linked by name only; nested directories are not walked.
            source = entry.absolute()
            link = self.bin_dir / entry.name
            if link.is_symlink() or link.exists():
                link.unlink()
            os.symlink(source, link)
            self._echo(f"Linked {source} to {link}")
            results.append(LinkResult(source=source, link=link))
        logger.info("activated %s (%d executables)", spec, len(results))
        return results

    # ------------------------- list -------------------------

    def list_packages(self) -> list[PackageSummary]:
        try:
            package_dirs = list(self.registry_root.iterdir())
        except OSError as exc:
            logger.warning("unable to read registry %s: %s", self.registry_root, exc)
            return []

        summaries: list[PackageSummary] = []
        for package_dir in sorted(package_dirs, key=lambda path: path.name):
            try:
                if not package_dir.is_dir():
                    continue
                versions = sorted(p.name for p in package_dir.iterdir() if p.is_dir())
            except OSError as exc:
                logger.warning("skipping %s: %s", package_dir, exc)
                continue
            summaries.append(PackageSummary(name=package_dir.name, versions=tuple(versions)))
        return summaries


def _print_stderr(message: str) -> None:
    print(message, file=sys.stderr)


def format_listing(summaries: Iterable[PackageSummary]) -> str:
    lines: list[str] = []
    for summary in summaries:
        lines.append(f"{summary.name}:")
        lines.extend(f"  - {version}" for version in summary.versions)
    return "\n".join(lines)

