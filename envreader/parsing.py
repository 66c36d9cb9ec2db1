"""ENVREADER FILE PURPOSE
Purpose: canonical default formatting and strict textual parsing per type.
Hot path: yes (one regex match + conversion per read).
Feature flags: none.
Failure mode: ValueError whose message is the reason ("invalid syntax" / "value out of range").

Parsing is deliberately stricter than the builtins: no surrounding whitespace,
no digit separators outside hex floats, and no silent overflow to infinity.
"""

from __future__ import annotations

import math
import re

from envreader.errors import INVALID_SYNTAX, OUT_OF_RANGE

INT_MIN = -(2**63)
INT_MAX = 2**63 - 1
INT_MAX_DIGITS = len(str(INT_MAX))
FLOAT_PRECISION = 6

_INT_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)
_DEC_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?", re.ASCII)
_HEX_DIGITS = r"[0-9a-fA-F](?:_?[0-9a-fA-F])*"
# Underscores may only separate hex digits or follow the 0x prefix.
_HEX_FLOAT_RE = re.compile(
    rf"[+-]?0[xX](?:_?{_HEX_DIGITS}(?:\.(?:{_HEX_DIGITS})?)?|\.{_HEX_DIGITS})[pP][+-]?[0-9]+",
    re.ASCII,
)
_INF_RE = re.compile(r"[+-]?(?:inf|infinity)", re.ASCII | re.IGNORECASE)
_NAN_RE = re.compile(r"nan", re.ASCII | re.IGNORECASE)

TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
FALSE_LITERALS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def format_int(value: int) -> str:
    return format(value, "d")


def format_float(value: float) -> str:
    """Fixed-point with six fractional digits; infinities and NaN use +Inf/-Inf/NaN."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return f"{value:.{FLOAT_PRECISION}f}"


def format_bool(value: bool) -> str:
    return "true" if value else "false"


def parse_string(s: str) -> str:
    return s


def parse_int(s: str) -> int:
    if not _INT_RE.fullmatch(s):
        raise ValueError(INVALID_SYNTAX)
    digits = s.lstrip("+-").lstrip("0") or "0"
    # Longer digit runs cannot fit int64; int() would also refuse past its digit limit.
    if len(digits) > INT_MAX_DIGITS:
        raise ValueError(OUT_OF_RANGE)
    v = -int(digits) if s.startswith("-") else int(digits)
    if v < INT_MIN or v > INT_MAX:
        raise ValueError(OUT_OF_RANGE)
    return v


def parse_float(s: str) -> float:
    if _INF_RE.fullmatch(s):
        return -math.inf if s.startswith("-") else math.inf
    if _NAN_RE.fullmatch(s):
        return math.nan
    if _HEX_FLOAT_RE.fullmatch(s):
        try:
            return float.fromhex(s.replace("_", ""))
        except OverflowError:
            raise ValueError(OUT_OF_RANGE) from None
    if not _DEC_FLOAT_RE.fullmatch(s):
        raise ValueError(INVALID_SYNTAX)
    v = float(s)
    if math.isinf(v):
        raise ValueError(OUT_OF_RANGE)
    return v


def parse_bool(s: str) -> bool:
    if s in TRUE_LITERALS:
        return True
    if s in FALSE_LITERALS:
        return False
    raise ValueError(INVALID_SYNTAX)
