#!/usr/bin/env python3

import argparse
import os
from pathlib import Path

import argcomplete
import yaml

from .. import __version__
from ..lib._util.ansi import gray as _gray, supports_color as _supports_color, yes_no as _yes_no
from ..lib.core.config import (
    DEFAULT_SHELL_SETTINGS,
    SHELL_SECTION,
    build_settings_stack,
    global_config_path as _global_config_path,
    global_config_search_paths as _global_config_search_paths,
    load_shell_settings,
)
from ..lib.core.paths import log_path as _log_path, state_root as _state_root
from ..lib.shell.repl import run_shell
from ..lib.shell.session import create_session, default_registry


def _load_settings_or_exit(stack=None):
    try:
        return load_shell_settings(stack)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise SystemExit(f"Invalid configuration in {_global_config_path()}: {e}")


def _print_config() -> None:
    """Display config file locations, resolved settings and the log path."""
    color_enabled = _supports_color()

    print("Configuration (read):")
    gcfg = _global_config_path()
    print(
        f"- Global config file: {_gray(str(gcfg), color_enabled)} "
        f"(exists: {_yes_no(gcfg.is_file(), color_enabled)})"
    )
    print("- Global config search order:")
    for p in _global_config_search_paths():
        print(f"  • {_gray(str(p), color_enabled)} (exists: {_yes_no(p.is_file(), color_enabled)})")

    try:
        stack = build_settings_stack()
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise SystemExit(f"Invalid configuration in {gcfg}: {e}")
    settings = _load_settings_or_exit(stack)
    origin = stack.provenance(SHELL_SECTION)
    print("Shell settings (resolved):")
    for key in DEFAULT_SHELL_SETTINGS:
        level = origin.get(key, "defaults")
        print(f"- {key}: {getattr(settings, key)!r} [{_gray(level, color_enabled)}]")

    print("Commands (built-in):")
    for name in default_registry().names():
        print(f"- {name}")

    print("Writable locations (write):")
    sroot = _state_root()
    print(
        f"- State root: {_gray(str(sroot), color_enabled)} "
        f"(exists: {_yes_no(Path(sroot).is_dir(), color_enabled)})"
    )
    print(f"- Debug log: {_gray(str(_log_path()), color_enabled)}")

    print("Environment overrides (if set):")
    for var in (
        "YSHELL_CONFIG_FILE",
        "YSHELL_CONFIG_DIR",
        "YSHELL_STATE_DIR",
        "XDG_CONFIG_HOME",
        "NO_COLOR",
        "FORCE_COLOR",
    ):
        val = os.environ.get(var)
        if val is not None:
            print(f"- {var}={_gray(val, color_enabled)}")


def _cmd_shell() -> int:
    """Start the interactive shell on stdin/stdout."""
    session = create_session(_load_settings_or_exit())
    return run_shell(session)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="yshell",
        description="yshell – a minimal interactive command shell",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Built-in commands (inside the shell):\n"
            "  print <words...>   echo the words separated by single spaces\n"
            "  exit               leave the shell\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"yshell {__version__}")
    sub = parser.add_subparsers(dest="cmd")

    # config overview
    sub.add_parser("config", help="Show config file locations, resolved settings and log path")

    argcomplete.autocomplete(parser)

    args = parser.parse_args(argv)

    if args.cmd is None:
        return _cmd_shell()
    elif args.cmd == "config":
        _print_config()
        return 0
    else:
        parser.error("Unknown command")


if __name__ == "__main__":
    raise SystemExit(main())
