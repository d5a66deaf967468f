"""Command engine.

- ``tokenizer``: raw line → ``ParsedInput`` (lowercased command, arguments)
- ``registry``: ordered name → action bindings, newest first, duplicates kept
- ``dispatcher``: invoke every action bound to the parsed command name
- ``actions``: the ``Action`` interface and the ``exit``/``print`` built-ins
- ``session``: explicit shell state and prompt rendering
- ``repl``: the read loop around all of the above
"""

from .actions import Action, ExitAction, PrintAction, Status
from .dispatcher import dispatch
from .registry import AllocationError, CommandEntry, CommandRegistry, RegistryError
from .session import ShellSession, create_session, default_registry
from .tokenizer import ParsedInput, split_tokens, tokenize

__all__ = [
    "Action",
    "AllocationError",
    "CommandEntry",
    "CommandRegistry",
    "ExitAction",
    "ParsedInput",
    "PrintAction",
    "RegistryError",
    "ShellSession",
    "Status",
    "create_session",
    "default_registry",
    "dispatch",
    "split_tokens",
    "tokenize",
]
