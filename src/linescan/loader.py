r"""
Input loading: turn a stream, file or string into the list of lines a
Scanner buffers.

Every loader applies the same line-end policy: the trailing line terminator
(\n, \r\n or \r) is removed and nothing else, so leading and trailing spaces
survive into the stored line.
"""

from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import IO, Iterable, List, Union

from .errors import SourceUnavailable
from .logging import logger

log = logger()

PathLike = Union[str, Path]

_LINE_END = re.compile(r"\r\n|\r|\n")


def strip_terminator(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n") or line.endswith("\r"):
        return line[:-1]
    return line


def normalize(lines: Iterable[str]) -> List[str]:
    return [strip_terminator(line) for line in lines]


def split_text(text: str) -> List[str]:
    r"""Split on \r\n, \r and \n only. A final terminator does not start an
    extra empty line."""
    lines = _LINE_END.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def read_stream(stream: IO[str], name: str = "<stream>") -> List[str]:
    """Read `stream` until end of input. Nothing is returned on failure, so a
    caller never sees a partially loaded buffer."""
    try:
        lines = split_text(stream.read())
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnavailable(name, str(e)) from e
    log.debug("read %d lines from %s", len(lines), name)
    return lines


def read_file(path: PathLike, encoding: str = "utf-8") -> List[str]:
    path = Path(path)
    try:
        with path.open("r", encoding=encoding, newline="") as fp:
            return read_stream(fp, str(path))
    except OSError as e:
        raise SourceUnavailable(str(path), e.strerror or str(e)) from e


def read_stdin() -> List[str]:
    return read_stream(sys.stdin, "<stdin>")


__all__ = [
    "normalize",
    "read_file",
    "read_stdin",
    "read_stream",
    "split_text",
    "strip_terminator",
]
