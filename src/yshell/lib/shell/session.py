"""Explicit shell state: current path, command registry and settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TextIO

from .._util.ansi import blue
from ..core.config import ShellSettings
from .actions import ExitAction, PrintAction
from .dispatcher import dispatch
from .registry import CommandRegistry
from .tokenizer import ParsedInput, tokenize

PROMPT_SUFFIX = "> "


def default_registry(stream: TextIO | None = None) -> CommandRegistry:
    """Registry with the built-in commands.

    ``exit`` is registered before ``print``, so ``print`` is visited first.
    *stream* is handed to ``PrintAction`` (``None`` means ``sys.stdout``).
    """
    registry = CommandRegistry()
    registry.register("exit", ExitAction())
    registry.register("print", PrintAction(stream))
    return registry


@dataclass
class ShellSession:
    """State carried through one interactive session.

    ``current_path`` starts at ``settings.start_path``.  Nothing changes it
    yet, but the prompt always renders from the session rather than from
    module state.
    """

    registry: CommandRegistry
    settings: ShellSettings = field(default_factory=ShellSettings)
    current_path: str = ""

    def __post_init__(self) -> None:
        if not self.current_path:
            self.current_path = self.settings.start_path

    def parse(self, line: str) -> ParsedInput:
        return tokenize(line, self.settings.delimiter)

    def execute(self, line: str) -> None:
        """Tokenize *line* and dispatch it against the session's registry."""
        dispatch(self.registry, self.parse(line))

    def render_prompt(self, color_enabled: bool = False) -> str:
        """Return ``<current-path>> ``, the path in blue when colour is on."""
        return f"{blue(self.current_path, color_enabled)}{PROMPT_SUFFIX}"


def create_session(
    settings: ShellSettings | None = None, stream: TextIO | None = None
) -> ShellSession:
    """Session with the built-in commands and the given (or default) settings."""
    return ShellSession(
        registry=default_registry(stream),
        settings=settings if settings is not None else ShellSettings(),
    )
