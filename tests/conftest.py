"""Shared fixtures for the cargo-switch test-suite."""

from __future__ import annotations

import logging
import stat
import textwrap
from pathlib import Path
from typing import Iterator

import pytest

_ENV_KEYS = (
    "CARGO_SWITCH_BIN_MARKER",
    "CARGO_SWITCH_REGISTRY_DIR",
    "CARGO_SWITCH_INSTALL_PROGRAM",
    "CARGO_SWITCH_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep the real user config and environment out of every test."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg-config"))
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    yield
    for name in ("cswitch_core", "cswitch_cli"):
        package_logger = logging.getLogger(name)
        package_logger.handlers.clear()
        package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def cargo_bin(tmp_path: Path) -> Path:
    path = tmp_path / "home" / ".cargo" / "bin"
    path.mkdir(parents=True)
    return path


def write_fake_installer(path: Path, *, exit_code: int = 0, executables: tuple[str, ...] = ("demo",)) -> Path:
    """Write a shell script that mimics ``cargo install SPEC --root DIR``."""
    creates = "\n".join(
        f'printf \'#!/bin/sh\\necho {name} %s\\n\' "$2" > "$4/bin/{name}"' for name in executables
    )
    if exit_code == 0:
        body = f'mkdir -p "$4/bin"\n{creates}\necho "    Finished $2" >&2\n'
    else:
        body = f'echo "error: could not find $2" >&2\nexit {exit_code}\n'
    script = textwrap.dedent(
        """\
        #!/bin/sh
        echo "    Installing $2" >&2
        """
    ) + body
    path.write_text(script)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


def make_version(registry: Path, name: str, version: str, executables: tuple[str, ...]) -> Path:
    bin_dir = registry / name / version / "bin"
    bin_dir.mkdir(parents=True)
    for exe in executables:
        (bin_dir / exe).write_text(f"#!/bin/sh\necho {name} {version} {exe}\n")
    return bin_dir
