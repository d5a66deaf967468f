"""Layered settings resolution.

Domain-agnostic: no yshell service dependencies.

Terminology
-----------
- **Scope**: a single config layer (e.g. "defaults", "global").
- **Stack**: an ordered list of scopes, lowest-priority first.
- **deep_merge**: recursive dict merge where ``None`` deletes a key.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml


def deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base*, returning a **new** dict.

    * Dicts are merged recursively.
    * A ``None`` value in *override* deletes the key, so a lower scope's
      value is dropped as well.
    * Anything else in *override* replaces the base value.
    """
    merged: dict = dict(base)
    for key, ov in override.items():
        if ov is None:
            merged.pop(key, None)
            continue
        bv = base.get(key)
        if isinstance(ov, dict) and isinstance(bv, dict):
            merged[key] = deep_merge(bv, ov)
        else:
            merged[key] = ov
    return merged


@dataclass(frozen=True)
class ConfigScope:
    """A single layer in the config stack."""

    level: str
    source: Path | None
    data: dict


class ConfigStack:
    """Ordered collection of config scopes, lowest-priority first.

    Usage::

        stack = ConfigStack()
        stack.push(ConfigScope("defaults", None, DEFAULTS))
        stack.push(load_yaml_scope("global", config_path))
        resolved = stack.resolve_section("shell")
    """

    def __init__(self) -> None:
        self._scopes: list[ConfigScope] = []

    def push(self, scope: ConfigScope) -> None:
        """Append a scope (higher priority than all previous)."""
        self._scopes.append(scope)

    def resolve_section(self, key: str) -> dict:
        """Resolve only a single top-level section across all scopes."""
        result: dict = {}
        for scope in self._scopes:
            section = scope.data.get(key)
            if isinstance(section, dict):
                result = deep_merge(result, section)
        return result

    def provenance(self, key: str) -> dict[str, str]:
        """Map each key of section *key* to the level that last set it."""
        origin: dict[str, str] = {}
        for scope in self._scopes:
            section = scope.data.get(key)
            if not isinstance(section, dict):
                continue
            for name, value in section.items():
                if value is None:
                    origin.pop(name, None)
                else:
                    origin[name] = scope.level
        return origin


def load_yaml_scope(level: str, path: Path) -> ConfigScope:
    """Load a YAML file into a ConfigScope.  Returns empty data if missing.

    Raises ``ValueError`` if the document is not a mapping.
    """
    data: Any = {}
    if path.is_file():
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
    return ConfigScope(level=level, source=path, data=data)
