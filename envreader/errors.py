"""ENVREADER FILE PURPOSE
Purpose: recoverable conversion error raised by the non-exiting reader.
Hot path: no (raised only on malformed values).
Feature flags: none.
Failure mode: n/a.
"""

from __future__ import annotations

INVALID_SYNTAX = "invalid syntax"
OUT_OF_RANGE = "value out of range"


class EnvValueError(ValueError):
    """An environment variable holds text that does not parse as the requested type."""

    def __init__(self, name: str, value: str, kind: str, reason: str = INVALID_SYNTAX) -> None:
        self.name = name
        self.value = value
        self.kind = kind
        self.reason = reason
        super().__init__(f'invalid {kind} value for {name}: "{value}" ({reason})')
