"""Wrapper around the external install command (``cargo install`` by default)."""

from __future__ import annotations

import logging
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from .config import DEFAULT_INSTALL_PROGRAM
from .errors import InstallCommandError
from .spec import PackageSpec

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InstallCommand:
    """Run the install program with a private install root.

    The child's stdout is inherited. Its stderr is piped and relayed line by
    line while the child runs, so progress output stays interactive. Bytes
    that do not decode are replaced rather than aborting the relay.
    """

    program: str = DEFAULT_INSTALL_PROGRAM
    subcommand: str = "install"
    root_flag: str = "--root"

    def argv(self, spec: PackageSpec, root: Path) -> list[str]:
        return [self.program, self.subcommand, str(spec), self.root_flag, str(root)]

    def run(self, spec: PackageSpec, root: Path, *, stderr: TextIO | None = None) -> int:
        sink = stderr if stderr is not None else sys.stderr
        command = self.argv(spec, root)
        logger.debug("install command: %s", " ".join(command))
        try:
            process = subprocess.Popen(
                command,
                stdout=None,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
                bufsize=1,
            )
        except FileNotFoundError as exc:
            raise InstallCommandError(
                f"{self.program} not found. Install it and ensure it is available in PATH."
            ) from exc

        assert process.stderr is not None
        with process.stderr:
            for raw in process.stderr:
                sink.write(raw.rstrip("\r\n") + "\n")
                sink.flush()
        returncode = process.wait()
        logger.debug("install command exited with %s", returncode)
        return returncode
