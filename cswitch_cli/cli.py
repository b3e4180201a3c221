"""Command line surface for cargo-switch."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from cswitch_core import (
    InstallCommand,
    Locator,
    SettingsResolver,
    SwitchError,
    Switcher,
    SwitchSettings,
    format_listing,
)
from cswitch_core.locator import SearchPathProvider
from cswitch_core.logging_config import setup_logging

CLI_VERSION = "0.1.0"
COMMANDS = ("install", "list", "use")
_OPTIONS_WITH_VALUES = ("--config",)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cargo-switch",
        description="Manage multiple versions of Cargo binaries.",
        epilog="A bare NAME@VERSION argument is shorthand for `cargo-switch use NAME@VERSION`.",
    )
    parser.add_argument("--version", action="version", version=f"cargo-switch v{CLI_VERSION}")
    parser.add_argument("-v", "--verbose", action="store_true", help="log progress at INFO level")
    parser.add_argument("--debug", action="store_true", help="log diagnostics at DEBUG level")
    parser.add_argument("--config", help="config.toml to read instead of the user config file")
    subparsers = parser.add_subparsers(dest="command")
    subparsers.required = False

    install_cmd = subparsers.add_parser("install", help="install NAME@VERSION into the registry, then switch to it")
    install_cmd.add_argument("package", metavar="PACKAGE", help="NAME@VERSION passed to the install command")
    install_cmd.set_defaults(func=_handle_install)

    use_cmd = subparsers.add_parser("use", help="activate an installed NAME@VERSION")
    use_cmd.add_argument("spec", metavar="PACKAGE@VERSION", help="installed version to activate")
    use_cmd.set_defaults(func=_handle_use)

    list_cmd = subparsers.add_parser("list", help="list installed packages and their versions")
    list_cmd.set_defaults(func=_handle_list)

    return parser


def main(
    argv: Sequence[str] | None = None,
    *,
    search_path: SearchPathProvider | None = None,
) -> int:
    tokens = list(argv) if argv is not None else list(sys.argv[1:])
    parser = build_parser()
    try:
        args = parser.parse_args(_route_bare_spec(tokens))
    except SystemExit as exc:
        return _exit_code(exc.code)

    func = getattr(args, "func", None)
    if func is None:
        print(
            "No command or package version specified. Use --help for more information.",
            file=sys.stderr,
        )
        return 0

    settings = SettingsResolver(config_path=args.config).settings()
    setup_logging(_log_level(args, settings))

    try:
        switcher = _build_switcher(settings, search_path)
        func(switcher, args)
    except (SwitchError, OSError) as exc:
        logger.debug("command failed", exc_info=True)
        print(f"[cargo-switch] error: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("[cargo-switch] interrupted", file=sys.stderr)
        return 130
    return 0


def _route_bare_spec(tokens: list[str]) -> list[str]:
    """Rewrite ``NAME@VERSION`` into ``use NAME@VERSION``."""
    skip_next = False
    for index, token in enumerate(tokens):
        if skip_next:
            skip_next = False
            continue
        if token in _OPTIONS_WITH_VALUES:
            skip_next = True
            continue
        if token.startswith("-"):
            continue
        if token in COMMANDS:
            return tokens
        return [*tokens[:index], "use", *tokens[index:]]
    return tokens


def _build_switcher(settings: SwitchSettings, search_path: SearchPathProvider | None) -> Switcher:
    locator = Locator(
        search_path,
        marker=settings.bin_marker,
        registry_dir_name=settings.registry_dir_name,
    )
    bin_dir, registry_root = locator.resolve()
    return Switcher(
        bin_dir,
        registry_root,
        installer=InstallCommand(program=settings.install_program),
    )


def _log_level(args: argparse.Namespace, settings: SwitchSettings) -> str:
    if args.debug:
        return "DEBUG"
    if args.verbose:
        return "INFO"
    return settings.log_level


def _exit_code(code: int | str | None) -> int:
    if code is None:
        return 0
    if isinstance(code, int):
        return code
    return 1


def _handle_install(switcher: Switcher, args: argparse.Namespace) -> None:
    switcher.install(args.package)


def _handle_use(switcher: Switcher, args: argparse.Namespace) -> None:
    switcher.switch(args.spec)


def _handle_list(switcher: Switcher, _: argparse.Namespace) -> None:
    listing = format_listing(switcher.list_packages())
    if listing:
        print(listing)
