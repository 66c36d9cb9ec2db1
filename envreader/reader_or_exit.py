"""ENVREADER FILE PURPOSE
Purpose: fail-fast typed reader; malformed values terminate the process.
Hot path: yes (same as EnvReader on success).
Feature flags: ENVREADER_DEBUG (inherited from EnvReader logging).
Failure mode: fatal handler logs "Fatal error: invalid usage of <name>. <usage>" and exits 1.
"""

from __future__ import annotations

import os
import sys
from typing import Callable, NoReturn, TypeVar

from envreader.errors import EnvValueError
from envreader.logging import logger
from envreader.reader import EnvReader, Ref

T = TypeVar("T")

FatalHandler = Callable[[str], NoReturn]


def fatal_message(name: str, usage: str) -> str:
    return f"Fatal error: invalid usage of {name}. {usage}"


def terminate(code: int = 1) -> NoReturn:
    # os._exit ends the whole process from any thread and skips caller finally blocks.
    for handler in logger.handlers:
        handler.flush()
    sys.stdout.flush()
    sys.stderr.flush()
    os._exit(code)


def exit_fatal(message: str) -> NoReturn:
    logger.critical(message)
    terminate(1)


class EnvReaderOrExit:
    """Typed environment accessors that never return after a conversion failure.

    `fatal` receives the formatted message and must not return; tests pass a
    handler that raises instead of exiting. A handler that does return is
    followed by terminate(1).
    """

    def __init__(self, fatal: FatalHandler = exit_fatal) -> None:
        self._fatal = fatal
        self._reader = EnvReader()

    def _or_exit(self, name: str, usage: str, read: Callable[[], T]) -> T:
        try:
            return read()
        except EnvValueError:
            self._fatal(fatal_message(name, usage))
            terminate(1)

    def string(self, name: str, default: str, usage: str) -> str:
        return self._or_exit(name, usage, lambda: self._reader.string(name, default))

    def string_var(self, ref: Ref[str], name: str, default: str, usage: str) -> None:
        ref.value = self.string(name, default, usage)

    def integer(self, name: str, default: int, usage: str) -> int:
        return self._or_exit(name, usage, lambda: self._reader.integer(name, default))

    def integer_var(self, ref: Ref[int], name: str, default: int, usage: str) -> None:
        ref.value = self.integer(name, default, usage)

    def float64(self, name: str, default: float, usage: str) -> float:
        return self._or_exit(name, usage, lambda: self._reader.float64(name, default))

    def float64_var(self, ref: Ref[float], name: str, default: float, usage: str) -> None:
        ref.value = self.float64(name, default, usage)

    def boolean(self, name: str, default: bool, usage: str) -> bool:
        return self._or_exit(name, usage, lambda: self._reader.boolean(name, default))

    def boolean_var(self, ref: Ref[bool], name: str, default: bool, usage: str) -> None:
        ref.value = self.boolean(name, default, usage)
