"""Command line entry point.

    python -m crash_report_sender http://collector/submit minidump.dmp \
        -p prod=MyApp -p ver=1.0
"""
from crash_report_sender.sender import send_crash_report
from crash_report_sender.transport import RequestsTransport
from typing import Dict
from typing import List
from typing import Optional

import argparse
import logging
import os
import sys

LOG_LEVEL_ENV = "CRASH_REPORT_SENDER_LOG_LEVEL"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _parse_parameter(raw: str) -> Dict[str, str]:
    name, sep, value = raw.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected key=value, got {raw!r}")
    return {name: value}


def _parse_log_level(raw: str) -> str:
    level = raw.upper()
    if level not in LOG_LEVELS:
        raise argparse.ArgumentTypeError(
            f"unknown log level {raw!r}, choose from {', '.join(LOG_LEVELS)}"
        )
    return level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="crash_report_sender",
        description="Upload a minidump and its metadata to a crash collector.",
    )
    parser.add_argument("url", help="collector URL (http only)")
    parser.add_argument("dump", help="path of the minidump to upload")
    parser.add_argument(
        "-p",
        "--parameter",
        action="append",
        type=_parse_parameter,
        default=[],
        metavar="KEY=VALUE",
        help="report parameter, may be repeated",
    )
    parser.add_argument("--timeout", type=float, default=None, help="seconds")
    parser.add_argument(
        "--log-level",
        type=_parse_log_level,
        default=os.environ.get(LOG_LEVEL_ENV, "WARNING"),
        help=f"logging level (default: ${LOG_LEVEL_ENV} or WARNING)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    parameters: Dict[str, str] = {}
    for parameter in args.parameter:
        parameters.update(parameter)

    transport = RequestsTransport(timeout=args.timeout)
    if send_crash_report(args.url, parameters, args.dump, transport=transport):
        return 0
    return 1


if __name__ == "__main__":
    sys.exit(main())
