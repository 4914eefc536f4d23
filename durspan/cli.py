#!/usr/bin/env python3
"""durspan command line: parse, format and normalize duration text."""

from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

from durspan import config
from durspan.duration import Duration
from durspan.errors import DurationError, MalformedSpan, SpanErrorKind
from durspan.formatting import format_duration
from durspan.grammar import parse_duration
from durspan.util.exit_codes import ExitCode
from durspan.util.logging import configure_logging, get_logger

logger = get_logger(__name__)


def _exit_code_for(exc: DurationError) -> int:
    if isinstance(exc, MalformedSpan) and exc.kind is SpanErrorKind.RANGE:
        return ExitCode.OUT_OF_RANGE
    return ExitCode.INVALID_DURATION


def _describe(text: str, value: Duration) -> dict:
    return {
        "input": text,
        "seconds": value.seconds,
        "nanos": value.nanos,
        "text": format_duration(value),
    }


def cmd_parse(args: argparse.Namespace) -> int:
    status = ExitCode.SUCCESS
    for text in args.texts:
        try:
            value = parse_duration(text)
        except DurationError as exc:
            logger.debug("Rejected %r", text, extra={"input_text": text, "error_kind": type(exc).__name__})
            print(f"error: {exc}", file=sys.stderr)
            status = _exit_code_for(exc)
            continue
        if args.json:
            print(json.dumps(_describe(text, value), sort_keys=True))
        else:
            print(f"{value.seconds}.{value.nanos:09d}")
    return status


def cmd_format(args: argparse.Namespace) -> int:
    try:
        value = Duration(args.seconds, args.nanos)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return ExitCode.OUT_OF_RANGE
    print(format_duration(value))
    return ExitCode.SUCCESS


def cmd_normalize(args: argparse.Namespace) -> int:
    status = ExitCode.SUCCESS
    for text in args.texts:
        try:
            print(format_duration(parse_duration(text)))
        except DurationError as exc:
            print(f"error: {exc}", file=sys.stderr)
            status = _exit_code_for(exc)
    return status


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(
        prog="durspan",
        description="Convert between human-friendly duration text and exact seconds + nanoseconds",
    )
    p.add_argument("--log-level", dest="log_level", default=config.LOG_LEVEL, help="Log level (default from DURSPAN_LOG_LEVEL, else WARNING)")
    p.add_argument("--log-json", dest="log_json", default=config.LOG_JSON_FILE, help="Append JSON-lines logs to this path")
    sub = p.add_subparsers(dest="command", required=True)

    sp = sub.add_parser("parse", help="Parse duration text into <seconds>.<nanoseconds>")
    sp.add_argument("texts", nargs="+", metavar="TEXT", help="Duration text, e.g. '2h 15m' (quote it)")
    out = sp.add_mutually_exclusive_group()
    out.add_argument("--json", dest="json", action="store_true", help="Emit one JSON object per input")
    out.add_argument("--plain", dest="json", action="store_false", help="Emit <seconds>.<nanoseconds> per input")
    sp.set_defaults(handler=cmd_parse, json=config.OUTPUT_JSON)

    fp = sub.add_parser("format", help="Render a seconds/nanoseconds value as canonical text")
    fp.add_argument("seconds", type=int, help="Whole seconds")
    fp.add_argument("--nanos", type=int, default=0, help="Nanoseconds remainder, 0-999999999 (default 0)")
    fp.set_defaults(handler=cmd_format)

    norm = sub.add_parser("normalize", help="Parse duration text and print it in canonical form")
    norm.add_argument("texts", nargs="+", metavar="TEXT", help="Duration text, e.g. '90min'")
    norm.set_defaults(handler=cmd_normalize)

    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(level=args.log_level, json_file=args.log_json)
    logger.debug("Running %s", args.command)
    try:
        return args.handler(args)
    except Exception:
        logger.exception("Unexpected failure in %s", args.command)
        return ExitCode.GENERAL_ERROR


if __name__ == "__main__":
    sys.exit(main())
