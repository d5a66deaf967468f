"""Global configuration file discovery and shell settings.

The global config is a YAML file whose ``shell:`` section overrides the
built-in defaults::

    shell:
      delimiter: " "
      start_path: /
      max_line_bytes: 255
      color: auto        # auto | true | false
"""

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .._util.config_stack import ConfigScope, ConfigStack, load_yaml_scope
from .paths import config_root

SHELL_SECTION = "shell"

DEFAULT_SHELL_SETTINGS: dict[str, Any] = {
    "delimiter": " ",
    "start_path": "/",
    "max_line_bytes": 255,
    "color": "auto",
}


@dataclass(frozen=True)
class ShellSettings:
    """Resolved settings for one shell session."""

    delimiter: str = " "
    start_path: str = "/"
    max_line_bytes: int = 255
    color: str | bool = "auto"

    def __post_init__(self) -> None:
        if not isinstance(self.delimiter, str) or len(self.delimiter) != 1:
            raise ValueError(f"delimiter must be a single character, got {self.delimiter!r}")
        if not isinstance(self.start_path, str) or not self.start_path:
            raise ValueError("start_path must be a non-empty string")
        if isinstance(self.max_line_bytes, bool) or not isinstance(self.max_line_bytes, int):
            raise ValueError(f"max_line_bytes must be an integer, got {self.max_line_bytes!r}")
        # Room for at least one byte of content plus the terminator.
        if self.max_line_bytes < 2:
            raise ValueError(f"max_line_bytes must be at least 2, got {self.max_line_bytes}")
        if not (isinstance(self.color, bool) or self.color == "auto"):
            raise ValueError(f"color must be 'auto', true or false, got {self.color!r}")

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "ShellSettings":
        """Build settings from a resolved ``shell:`` section.

        Unknown keys are rejected so typos in the config file surface early.
        """
        unknown = sorted(set(data) - set(DEFAULT_SHELL_SETTINGS))
        if unknown:
            raise ValueError(f"Unknown shell setting(s): {', '.join(unknown)}")
        return cls(**data)


# ---------- Config file discovery ----------


def global_config_search_paths() -> list[Path]:
    """Return the ordered list of paths that will be checked for global config.

    - If YSHELL_CONFIG_FILE is set, only that single path is considered.
    - Otherwise, check in order:
        1) config_root()/config.yml (YSHELL_CONFIG_DIR, /etc/yshell for root,
           otherwise the user config dir, e.g. ~/.config/yshell)
        2) sys.prefix/etc/yshell/config.yml
        3) /etc/yshell/config.yml
      Duplicates are listed once.
    """
    env_file = os.environ.get("YSHELL_CONFIG_FILE")
    if env_file:
        return [Path(env_file).expanduser().resolve()]

    user_cfg = config_root() / "config.yml"
    sp_cfg = Path(sys.prefix) / "etc" / "yshell" / "config.yml"
    etc_cfg = Path("/etc/yshell/config.yml")
    return list(dict.fromkeys([user_cfg, sp_cfg, etc_cfg]))


def global_config_path() -> Path:
    """Global config file path (first existing search path wins).

    An explicit YSHELL_CONFIG_FILE is returned even if missing, to make the
    user's intent visible.  If nothing exists, the last candidate is returned.
    """
    candidates = global_config_search_paths()
    if os.environ.get("YSHELL_CONFIG_FILE"):
        return candidates[0]

    for c in candidates:
        if c.is_file():
            return c.resolve()
    return candidates[-1]


# ---------- Settings resolution ----------


def build_settings_stack() -> ConfigStack:
    """Stack the built-in defaults under the global config file."""
    stack = ConfigStack()
    stack.push(ConfigScope("defaults", None, {SHELL_SECTION: dict(DEFAULT_SHELL_SETTINGS)}))
    stack.push(load_yaml_scope("global", global_config_path()))
    return stack


def load_shell_settings(stack: ConfigStack | None = None) -> ShellSettings:
    """Resolve ``ShellSettings`` from the defaults and the global config.

    A ``null`` value in the config file restores the built-in default for
    that key.  Raises ``ValueError`` for malformed files or invalid values.
    """
    if stack is None:
        stack = build_settings_stack()
    section = dict(DEFAULT_SHELL_SETTINGS)
    section.update(stack.resolve_section(SHELL_SECTION))
    return ShellSettings.from_mapping(section)
