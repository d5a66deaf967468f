"""Command actions.

An action is any object with ``invoke(arguments) -> Status``.  The shell
ships two: ``ExitAction`` and ``PrintAction``.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from enum import IntEnum
from typing import Protocol, TextIO

from .._util.logging_utils import _log_debug


class Status(IntEnum):
    """Result code of an action invocation."""

    SUCCESS = 0
    ERROR = 1


class Action(Protocol):
    """Interface for command actions."""

    def invoke(self, arguments: Sequence[str]) -> Status:
        """Run the action with the command's arguments."""
        ...


class ExitAction:
    """Terminate the process with a successful status.

    Raises ``SystemExit(0)``; never returns to the dispatcher.
    """

    def invoke(self, arguments: Sequence[str]) -> Status:
        _log_debug("exit requested")
        raise SystemExit(0)

    def __repr__(self) -> str:
        return "ExitAction()"


class PrintAction:
    """Echo the arguments separated by single spaces, then a newline.

    Args:
        stream: Output stream.  ``None`` means whatever ``sys.stdout`` is at
            invocation time, so redirected stdout is honoured.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def invoke(self, arguments: Sequence[str]) -> Status:
        stream = self._stream if self._stream is not None else sys.stdout
        try:
            stream.write(" ".join(arguments) + "\n")
            stream.flush()
        except (OSError, ValueError) as e:
            # ValueError: write to a closed file
            _log_debug(f"print failed: {e}")
            return Status.ERROR
        return Status.SUCCESS

    def __repr__(self) -> str:
        return f"PrintAction(stream={self._stream!r})"
