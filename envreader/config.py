"""ENVREADER FILE PURPOSE
Purpose: the package's own runtime flags (debug gating).
Hot path: yes (read-only env lookups; lightweight).
Feature flags: ENVREADER_DEBUG.
Failure mode: safe defaults when unset.
"""

from __future__ import annotations

import os

DEBUG_ENV = "ENVREADER_DEBUG"


def env_flag(name: str, default: str = "0") -> bool:
    v = (os.getenv(name) or default).strip().lower()
    return v in ("1", "true", "yes", "on")


def is_debug() -> bool:
    return env_flag(DEBUG_ENV, "0")
