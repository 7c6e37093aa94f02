"""
Line / token / character scanner over a buffer of text lines.

The scanner holds a FIFO of pending lines plus at most one active line that is
being broken into whitespace-delimited tokens and characters. Callers may mix
`next_line`, `next_token`, `next_int`, `next_float` and `next_char` freely:

    >>> s = Scanner(["2 4 6 8", "1 3 5 7"])
    >>> s.next_token()
    '2'
    >>> s.next_line()
    '2 4 6 8'
    >>> s.next_int()
    1

There is no remainder concept: reading a line or token while scanning inside
it returns the whole line or token. Characters are read within tokens, so the
whitespace between tokens is never returned by `next_char`.
"""

from __future__ import annotations

import re
from collections import deque
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Callable, Deque, Iterable, List, Optional, TypeVar, Union

from . import loader
from .errors import Exhausted, ParseError
from .logging import logger

log = logger()

T = TypeVar("T")

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass
class ActiveLine:
    text: str
    tokens: List[str] = field(init=False)
    token_cursor: int = 0
    char_cursor: int = 0

    def __post_init__(self) -> None:
        # The text never changes once active, so split once.
        self.tokens = self.text.split()

    def exhausted(self) -> bool:
        return self.token_cursor >= len(self.tokens)

    def current_token(self) -> str:
        return self.tokens[self.token_cursor]

    def advance_token(self) -> None:
        self.token_cursor += 1
        self.char_cursor = 0


def parse_int(text: str) -> int:
    if not _INT_PATTERN.fullmatch(text):
        raise ValueError("not a decimal integer")
    value = int(text)
    if value < INT64_MIN or value > INT64_MAX:
        raise ValueError("out of 64-bit range")
    return value


def parse_float(text: str) -> float:
    if "_" in text:
        raise ValueError("digit separators are not allowed")
    return float(text)


class Scanner:
    def __init__(self, lines: Iterable[str] = ()):
        self._pending: Deque[str] = deque(loader.normalize(lines))
        # None means no line is being scanned below line granularity.
        self._active: Optional[ActiveLine] = None
        log.debug("scanner buffered %d lines", len(self._pending))

    # --- construction from sources ---
    @classmethod
    def from_text(cls, text: str) -> "Scanner":
        return cls(loader.split_text(text))

    @classmethod
    def from_stream(cls, stream: IO[str], name: str = "<stream>") -> "Scanner":
        return cls(loader.read_stream(stream, name))

    @classmethod
    def from_file(
        cls, path: Union[str, Path], encoding: str = "utf-8"
    ) -> "Scanner":
        return cls(loader.read_file(path, encoding))

    @classmethod
    def from_stdin(cls) -> "Scanner":
        return cls(loader.read_stdin())

    # --- queries ---
    @property
    def pending_count(self) -> int:
        return len(self._pending)

    @property
    def has_active_line(self) -> bool:
        return self._active is not None

    # --- accessors ---
    def next_line(self) -> str:
        """Return the next line. If token or character scanning is in progress,
        the whole active line is returned and the cursors are dropped."""
        if self._active is not None:
            text = self._active.text
            self._active = None
            return text
        if not self._pending:
            raise Exhausted("line")
        return self._pending.popleft()

    def next_token(self) -> str:
        """Return the next whitespace-delimited token, skipping blank lines.

        A token partly read with `next_char` is returned whole. A token whose
        characters were all read with `next_char` counts as consumed and is
        skipped."""
        while True:
            active = self._activate("token")
            if active.exhausted():
                self._release()
                continue
            token = active.current_token()
            if active.char_cursor >= len(token):
                # Already read character by character.
                active.advance_token()
                continue
            active.advance_token()
            return token

    def next_value(
        self, convert: Callable[[str], T], target: Optional[str] = None
    ) -> T:
        """Read the next token and convert it with `convert`. The token is
        consumed even when conversion fails."""
        token = self.next_token()
        name = target or getattr(convert, "__name__", repr(convert))
        try:
            return convert(token)
        except (ValueError, TypeError) as e:
            raise ParseError(token, name, str(e) or None) from e

    def next_int(self) -> int:
        return self.next_value(parse_int, "int64")

    def next_float(self) -> float:
        return self.next_value(parse_float, "float64")

    def next_char(self) -> str:
        while True:
            active = self._activate("char")
            if active.exhausted():
                self._release()
                continue
            token = active.current_token()
            if active.char_cursor >= len(token):
                active.advance_token()
                continue
            ch = token[active.char_cursor]
            active.char_cursor += 1
            return ch

    # --- internals ---
    def _activate(self, what: str) -> ActiveLine:
        if self._active is None:
            if not self._pending:
                log.debug("input exhausted at %s granularity", what)
                raise Exhausted(what)
            self._active = ActiveLine(self._pending.popleft())
            log.debug("activated line with %d tokens", len(self._active.tokens))
        return self._active

    def _release(self) -> None:
        self._active = None


__all__ = [
    "Scanner",
    "ActiveLine",
    "parse_int",
    "parse_float",
    "INT64_MIN",
    "INT64_MAX",
]
