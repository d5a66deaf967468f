"""Command registry.

An ordered list of ``CommandEntry`` objects.  Registration *prepends*, so the
most recently registered entry is visited first, and names are never
deduplicated: registering ``print`` twice leaves two live entries, and
``find_all("print")`` yields both (newest first).  The dispatcher relies on
that to fan out to every handler bound to a name.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .._util.logging_utils import _log_debug
from .actions import Action


class RegistryError(Exception):
    """A command could not be registered."""


class AllocationError(RegistryError):
    """The registry entry could not be created."""


@dataclass(frozen=True)
class CommandEntry:
    """Binding of a command name to its action."""

    name: str
    action: Action


class CommandRegistry:
    """Ordered collection of name → action bindings, newest first.

    Usage::

        registry = CommandRegistry()
        registry.register("exit", ExitAction())
        registry.register("print", PrintAction())
        for action in registry.find_all("print"):
            action.invoke(["hello"])
    """

    def __init__(self) -> None:
        self._entries: list[CommandEntry] = []

    def register(self, name: str, action: Action) -> None:
        """Prepend a binding of *name* to *action*.

        Names are matched case-sensitively against lowercased input, so only
        lowercase names are reachable from the prompt.

        Raises:
            RegistryError: *name* is not a string or *action* has no
                callable ``invoke``.
            AllocationError: the entry could not be created.  The registry
                is left unchanged.
        """
        if not isinstance(name, str):
            raise RegistryError(f"Command name must be a string, got {type(name).__name__}")
        if not callable(getattr(action, "invoke", None)):
            raise RegistryError(f"Action for {name!r} has no callable invoke()")
        try:
            entry = CommandEntry(name=name, action=action)
            self._entries.insert(0, entry)
        except MemoryError as e:
            raise AllocationError(f"Could not register command {name!r}") from e
        _log_debug(f"registered command {name!r} -> {action!r}")

    def find_all(self, name: str) -> Iterator[Action]:
        """Yield the action of every entry named *name*, newest first.

        Scans a snapshot of the entries, so a registration made while the
        iterator is live does not affect it.
        """
        for entry in tuple(self._entries):
            if entry.name == name:
                yield entry.action

    def names(self) -> list[str]:
        """Distinct registered names in traversal order."""
        seen: dict[str, None] = {}
        for entry in self._entries:
            seen.setdefault(entry.name, None)
        return list(seen)

    def __iter__(self) -> Iterator[CommandEntry]:
        return iter(tuple(self._entries))

    def __len__(self) -> int:
        return len(self._entries)
