"""Input tokenizer: raw line → ``ParsedInput``."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_DELIMITER = " "

_LINE_TERMINATORS = ("\r\n", "\n", "\r")


@dataclass(frozen=True)
class ParsedInput:
    """One tokenized input line.

    ``command_name`` is already lowercased; ``arguments`` keep their case.
    An empty ``command_name`` means the line held no tokens.
    """

    command_name: str
    arguments: tuple[str, ...] = ()

    @property
    def argument_count(self) -> int:
        return len(self.arguments)

    @property
    def is_empty(self) -> bool:
        return not self.command_name


def _check_delimiter(delimiter: str) -> None:
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise ValueError(f"delimiter must be a single character, got {delimiter!r}")


def strip_line_terminator(line: str) -> str:
    """Remove one trailing line terminator, if present."""
    for term in _LINE_TERMINATORS:
        if line.endswith(term):
            return line[: -len(term)]
    return line


def split_tokens(text: str, delimiter: str = DEFAULT_DELIMITER) -> list[str]:
    """Split *text* on *delimiter*, dropping the empty segments.

    Runs of consecutive delimiters (and leading or trailing ones) produce no
    tokens, so every returned token is non-empty.
    """
    _check_delimiter(delimiter)
    return [tok for tok in text.split(delimiter) if tok]


def tokenize(line: str, delimiter: str = DEFAULT_DELIMITER) -> ParsedInput:
    """Tokenize one input line.

    >>> tokenize("PrInT a  b\\n")
    ParsedInput(command_name='print', arguments=('a', 'b'))
    >>> tokenize("   ")
    ParsedInput(command_name='', arguments=())
    """
    tokens = split_tokens(strip_line_terminator(line), delimiter)
    if not tokens:
        return ParsedInput("")
    head, *rest = tokens
    return ParsedInput(head.lower(), tuple(rest))
