from .errors import Exhausted, ParseError, ScanError, SourceUnavailable
from .scanner import Scanner, parse_float, parse_int

__all__ = [
    "Scanner",
    "ScanError",
    "Exhausted",
    "ParseError",
    "SourceUnavailable",
    "parse_int",
    "parse_float",
]
