"""Exceptions raised by the scanner and its input loader."""

from typing import Optional


class ScanError(Exception):
    pass


class Exhausted(ScanError):
    """No more input at the requested granularity ("line", "token" or "char")."""

    def __init__(self, what: str):
        super().__init__(f"no more input: next {what} requested")
        self.what = what


class ParseError(ScanError):
    def __init__(self, token: str, target: str, reason: Optional[str] = None):
        message = f"cannot parse {token!r} as {target}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.token = token
        self.target = target
        self.reason = reason


class SourceUnavailable(ScanError):
    def __init__(self, source: str, reason: str):
        super().__init__(f"cannot read {source}: {reason}")
        self.source = source


__all__ = ["ScanError", "Exhausted", "ParseError", "SourceUnavailable"]
