"""Dispatch a parsed line to every matching registry entry."""

from __future__ import annotations

from .._util.logging_utils import _log_debug
from .actions import Status
from .registry import CommandRegistry
from .tokenizer import ParsedInput


def dispatch(registry: CommandRegistry, parsed: ParsedInput) -> None:
    """Invoke every action registered under ``parsed.command_name``.

    All matches fire, in registry order (most recently registered first).
    An empty command name or a name with no entries is a silent no-op.
    Action statuses are not returned; failures only reach the debug log.
    """
    if parsed.is_empty:
        return

    for action in registry.find_all(parsed.command_name):
        status = action.invoke(parsed.arguments)
        if status != Status.SUCCESS:
            _log_debug(
                f"command {parsed.command_name!r} ({parsed.argument_count} args) "
                f"returned status {status!r} from {action!r}"
            )
