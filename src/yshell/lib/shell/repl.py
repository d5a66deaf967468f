"""Read loop: prompt, read one bounded line, dispatch, repeat."""

from __future__ import annotations

import codecs
import sys
from typing import TextIO

from .._util.ansi import resolve_color
from .._util.logging_utils import _log_debug
from .session import ShellSession

_BYTE_TERMINATORS = (b"\r\n", b"\n", b"\r")


def _readline_bounded(reader, limit: int) -> tuple[bytes, bytes] | tuple[str, str] | None:
    """Read at most *limit* units of one line; drain the rest of a longer one.

    Works on binary and text readers alike.  Returns ``(head, drained)``
    where *drained* is the newline found while discarding the rest of an
    overlong line (empty otherwise), or ``None`` when nothing is left.
    """
    head = reader.readline(limit)
    if not head:
        return None
    newline = "\n" if isinstance(head, str) else b"\n"
    if head.endswith(newline) or len(head) < limit:
        return head, head[:0]

    tail = head[:0]
    while True:
        chunk = reader.readline(limit)
        if not chunk:
            break
        if chunk.endswith(newline):
            tail = newline
            break
    return head, tail


def _to_bytes(text: str) -> bytes:
    try:
        return text.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        return text.encode("utf-8", "replace")


def read_line(stream: TextIO, max_line_bytes: int) -> str | None:
    """Read one line of at most *max_line_bytes* bytes, terminator included.

    Reads from the stream's binary ``buffer`` when it has one, so the bound
    applies to the bytes actually received and no line is ever held in full.
    Bytes that are not valid UTF-8 decode to U+FFFD instead of raising.

    Returns ``None`` at end of input.  Longer lines keep their first
    ``max_line_bytes - 1`` bytes of content (a character split by the cut is
    dropped) and the rest of the line is discarded.
    """
    buffer = getattr(stream, "buffer", None)
    result = _readline_bounded(buffer if buffer is not None else stream, max_line_bytes)
    if result is None:
        return None

    head, tail = result
    raw = head if isinstance(head, bytes) else _to_bytes(head)
    terminator = b"\n" if tail else b""
    for term in _BYTE_TERMINATORS:
        if raw.endswith(term):
            raw, terminator = raw[: -len(term)], term
            break

    limit = max_line_bytes - 1
    truncated = len(raw) > limit or bool(tail)
    if truncated:
        _log_debug(f"input line truncated to {min(len(raw), limit)} bytes")
    decoder = codecs.getincrementaldecoder("utf-8")("replace")
    # final=False holds back a multi-byte character split by the cut
    text = decoder.decode(raw[:limit], final=not truncated)
    return text + terminator.decode("ascii")


def run_shell(
    session: ShellSession,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    color: bool | None = None,
) -> int:
    """Run the interactive loop until end of input and return the exit status.

    The ``exit`` command leaves through ``SystemExit(0)`` instead of
    returning.  Ctrl-C abandons the current line, or the command it is
    running, and re-prompts.

    Args:
        session: Shell state (registry, settings, current path).
        stdin: Input stream (default ``sys.stdin``).
        stdout: Stream the prompt is written to (default ``sys.stdout``).
        color: Force prompt colour on/off; ``None`` follows the settings.
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    color_enabled = resolve_color(session.settings.color, stdout) if color is None else color

    _log_debug(f"session started at {session.current_path!r} with {len(session.registry)} commands")
    try:
        while True:
            stdout.write(session.render_prompt(color_enabled))
            stdout.flush()
            try:
                line = read_line(stdin, session.settings.max_line_bytes)
                if line is None:
                    break
                session.execute(line)
            except KeyboardInterrupt:
                _log_debug("interrupted")
                stdout.write("\n")
    finally:
        _log_debug("session ended")
    return 0
