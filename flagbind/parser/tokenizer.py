# Flagbind Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Splits an argument vector into option and value tokens.

The argument vector is joined into a single buffer with one separator after
every element, then scanned left to right:

- Every `=` not directly preceded by a backslash becomes a separator, so
  `--seed=3` tokenizes exactly like `--seed 3`. The backslash itself is kept.
- A word starting with `"` runs to the next `"`; both quotes are dropped and
  there is no escaping inside the quoted text. Scanning resumes right after
  the closing quote. An unterminated quote runs to the end of the input.
- Any other word runs to the next separator.

Because elements are re-joined, a value containing spaces only survives as a
single token when it is quoted inside the argument text itself, for example
`--name \\"Jory Schossau\\"` from a shell.
"""
from dataclasses import dataclass
from typing import Sequence

from flagbind.logger import logger

SEPARATOR = " "
QUOTE = '"'
ESCAPE = "\\"
EQUALS = "="


@dataclass(frozen=True)
class TokenSpan:
    """Half-open `[start, end)` range of one token inside the joined buffer."""

    start: int
    end: int

    def text(self, buffer: str) -> str:
        return buffer[self.start : self.end]


def build_buffer(argv: Sequence[str]) -> str:
    """
    Join the argument vector into the buffer the scanner works on.

    Args:
        argv (Sequence[str]): Arguments, without the program name.

    Returns:
        str: Every element followed by a separator, with unescaped `=` replaced.
    """
    chars = list("".join(f"{arg}{SEPARATOR}" for arg in argv))
    for index, char in enumerate(chars):
        if char == EQUALS and (index == 0 or chars[index - 1] != ESCAPE):
            chars[index] = SEPARATOR
    return "".join(chars)


def _skip_separators(buffer: str, position: int) -> int:
    while position < len(buffer) and buffer[position] == SEPARATOR:
        position += 1
    return position


def scan_spans(buffer: str) -> list[TokenSpan]:
    """
    Find the token boundaries in a buffer produced by `build_buffer`.

    Returns:
        list[TokenSpan]: Token spans in command-line order.
    """
    spans: list[TokenSpan] = []
    position = _skip_separators(buffer, 0)
    while position < len(buffer):
        if buffer[position] == QUOTE:
            start = position + 1
            end = buffer.find(QUOTE, start)
            if end == -1:
                logger.debug("Unterminated quote starting at offset %d", position)
                end = max(start, len(buffer.rstrip(SEPARATOR)))
                resume = len(buffer)
            else:
                resume = end + 1
        else:
            start = position
            end = buffer.find(SEPARATOR, start)
            if end == -1:
                end = len(buffer)
            resume = end + 1
        spans.append(TokenSpan(start, end))
        position = _skip_separators(buffer, resume)
    return spans


def tokenize(argv: Sequence[str]) -> list[str]:
    """Return the token texts for an argument vector."""
    buffer = build_buffer(argv)
    return [span.text(buffer) for span in scan_spans(buffer)]
