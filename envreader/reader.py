"""ENVREADER FILE PURPOSE
Purpose: non-exiting typed reader (string/integer/float64/boolean) over env vars.
Hot path: yes (lookup + parse per call; no caching).
Feature flags: ENVREADER_DEBUG (logs default fallbacks and invalid values).
Failure mode: EnvValueError on malformed values; absent/empty vars use the default.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from envreader.errors import EnvValueError
from envreader.logging import debug_enabled, logger
from envreader.lookup import is_set, lookup
from envreader.parsing import (
    format_bool,
    format_float,
    format_int,
    parse_bool,
    parse_float,
    parse_int,
    parse_string,
)

T = TypeVar("T")


@dataclass
class Ref(Generic[T]):
    """Caller-owned out-parameter; `*_var` methods only write it on success."""

    value: T


def resolve(name: str, default: str, kind: str, parse: Callable[[str], T]) -> T:
    nv = lookup(name, default)
    debug = debug_enabled()
    if debug and not is_set(name):
        logger.info("ENV_DEFAULT name=%s value=%s", nv.name, nv.value)
    try:
        return parse(nv.value)
    except ValueError as e:
        if debug:
            logger.warning("ENV_INVALID name=%s kind=%s reason=%s", nv.name, kind, e)
        raise EnvValueError(nv.name, nv.value, kind, str(e)) from e


class EnvReader:
    """Typed environment accessors that raise EnvValueError on malformed values.

    Stateless: every call re-reads os.environ, so results track the
    environment at call time and repeated calls are idempotent.
    """

    def string(self, name: str, default: str) -> str:
        return resolve(name, default, "string", parse_string)

    def string_var(self, ref: Ref[str], name: str, default: str) -> None:
        ref.value = self.string(name, default)

    def integer(self, name: str, default: int) -> int:
        return resolve(name, format_int(default), "int", parse_int)

    def integer_var(self, ref: Ref[int], name: str, default: int) -> None:
        ref.value = self.integer(name, default)

    def float64(self, name: str, default: float) -> float:
        return resolve(name, format_float(default), "float", parse_float)

    def float64_var(self, ref: Ref[float], name: str, default: float) -> None:
        ref.value = self.float64(name, default)

    def boolean(self, name: str, default: bool) -> bool:
        return resolve(name, format_bool(default), "bool", parse_bool)

    def boolean_var(self, ref: Ref[bool], name: str, default: bool) -> None:
        ref.value = self.boolean(name, default)
