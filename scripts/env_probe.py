#!/usr/bin/env python3
"""Resolve one environment variable through the typed readers.

Prints {"name", "type", "value", "source"} as JSON on stdout.
Exit: 0 on success, 2 on a malformed value, 1 when --exit terminates.

Supported invocation from repo root:
  python scripts/env_probe.py PORT --type int --default 8080
"""

from __future__ import annotations

import argparse
import json
import math
import sys
from pathlib import Path
from typing import Any

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from envreader.errors import EnvValueError  # noqa: E402
from envreader.lookup import is_set  # noqa: E402
from envreader.parsing import format_float, parse_bool, parse_float, parse_int  # noqa: E402
from envreader.reader import EnvReader  # noqa: E402
from envreader.reader_or_exit import EnvReaderOrExit  # noqa: E402

TYPES = ("string", "int", "float", "bool")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Resolve a typed environment variable.")
    parser.add_argument("name", help="Environment variable name")
    parser.add_argument("--type", dest="kind", choices=TYPES, default="string")
    parser.add_argument("--default", default="", help="Default, written as a literal of --type")
    parser.add_argument("--usage", default="", help="Usage hint printed on fatal errors (--exit)")
    parser.add_argument(
        "--exit",
        dest="or_exit",
        action="store_true",
        help="Use the fail-fast reader instead of reporting the error",
    )
    return parser.parse_args(argv)


def typed_default(kind: str, raw: str) -> Any:
    if kind == "int":
        return parse_int(raw or "0")
    if kind == "float":
        return parse_float(raw or "0")
    if kind == "bool":
        return parse_bool(raw or "false")
    return raw


def read(args: argparse.Namespace, default: Any) -> Any:
    if args.or_exit:
        r = EnvReaderOrExit()
        calls = {"string": r.string, "int": r.integer, "float": r.float64, "bool": r.boolean}
        return calls[args.kind](args.name, default, args.usage)
    reader = EnvReader()
    calls = {
        "string": reader.string,
        "int": reader.integer,
        "float": reader.float64,
        "bool": reader.boolean,
    }
    return calls[args.kind](args.name, default)


def json_value(value: Any) -> Any:
    # JSON has no Infinity/NaN; emit the canonical +Inf/-Inf/NaN text instead.
    if isinstance(value, float) and not math.isfinite(value):
        return format_float(value)
    return value


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        default = typed_default(args.kind, args.default)
    except ValueError as e:
        print(f"ENV_PROBE_FAIL: bad --default {args.default!r} for {args.kind} ({e})", file=sys.stderr)
        return 2
    try:
        value = read(args, default)
    except EnvValueError as e:
        print(f"ENV_PROBE_FAIL: {e}", file=sys.stderr)
        return 2
    out = {
        "name": args.name,
        "type": args.kind,
        "value": json_value(value),
        "source": "env" if is_set(args.name) else "default",
    }
    print(json.dumps(out, allow_nan=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
