"""ENVREADER FILE PURPOSE
Purpose: lookup primitive (env value or caller default, as a named pair).
Hot path: yes (one os.environ read per call).
Feature flags: none.
Failure mode: never fails; absent or empty variables resolve to the default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class NamedValue:
    name: str
    value: str


def is_set(name: str) -> bool:
    return bool(os.environ.get(name))


def lookup(name: str, default: str) -> NamedValue:
    # Empty string counts as unset so callers can export VAR= to request the default.
    v = os.environ.get(name, "")
    if not v:
        return NamedValue(name=name, value=default)
    return NamedValue(name=name, value=v)
