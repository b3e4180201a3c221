"""Discover the PATH bin directory and the registry nested inside it."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Sequence

from .config import DEFAULT_BIN_MARKER, DEFAULT_REGISTRY_DIR_NAME
from .errors import BinDirectoryNotFoundError

logger = logging.getLogger(__name__)

SearchPathProvider = Callable[[], Sequence[str]]


def environ_search_path() -> list[str]:
    """Return the entries of the process PATH variable."""
    return [entry for entry in os.environ.get("PATH", "").split(os.pathsep) if entry]


class Locator:
    """Find the bin directory holding active executables.

    The search path is injected so tests can hand in a fixed list instead of
    the process environment.
    """

    def __init__(
        self,
        search_path: SearchPathProvider | None = None,
        *,
        marker: str = DEFAULT_BIN_MARKER,
        registry_dir_name: str = DEFAULT_REGISTRY_DIR_NAME,
    ) -> None:
        self._search_path = search_path or environ_search_path
        self.marker = marker
        self.registry_dir_name = registry_dir_name

    def find_bin_directory(self) -> Path:
        match = next((entry for entry in self._search_path() if self.marker in entry), None)
        if match is None:
            raise BinDirectoryNotFoundError(
                f"Failed to find your {self.marker} directory. "
                f"Is it configured in your PATH?"
            )
        bin_dir = Path(match).expanduser().absolute()
        if not bin_dir.is_dir():
            raise BinDirectoryNotFoundError(
                f"{self.marker} directory in $PATH does not exist: {bin_dir}"
            )
        logger.debug("bin directory resolved to %s", bin_dir)
        return bin_dir

    def ensure_registry_root(self, bin_dir: Path) -> Path:
        registry = bin_dir / self.registry_dir_name
        if not registry.exists():
            logger.info("creating registry at %s", registry)
            registry.mkdir(exist_ok=True)
        elif not registry.is_dir():
            raise BinDirectoryNotFoundError(f"registry path {registry} exists but is not a directory")
        return registry

    def resolve(self) -> tuple[Path, Path]:
        """Return ``(bin_dir, registry_root)``, creating the registry if needed."""
        bin_dir = self.find_bin_directory()
        return bin_dir, self.ensure_registry_root(bin_dir)
