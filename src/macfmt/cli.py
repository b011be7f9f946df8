#!/usr/bin/env python3
# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2025 Maurice Garcia

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from macfmt.config.log_config import LoggerConfigurator
from macfmt.config.settings import MacFmtSettings
from macfmt.input_reader import InputReader, InputReadError
from macfmt.lib.mac_address import CasePolicy, MacAddressFormat
from macfmt.lib.mac_scanner import MacScanner
from macfmt.lib.types import ExitCode
from macfmt.processor import MacAddressProcessor, NoMacAddressesFoundError
from macfmt.version import __version__ as MACFMT_VERSION

LOG = logging.getLogger("macfmt")

EXIT_OK     = ExitCode(0)
EXIT_ERROR  = ExitCode(1)

NOTATIONS = [fmt.value for fmt in MacAddressFormat]

NOTATION_HELP = {
    MacAddressFormat.STANDARD:  "xx:xx:xx:xx:xx:xx [default]",
    MacAddressFormat.CISCO:     "xxxx.xxxx.xxxx",
    MacAddressFormat.WINDOWS:   "xx-xx-xx-xx-xx-xx",
    MacAddressFormat.BARE:      "xxxxxxxxxxxx",
}


def build_parser() -> argparse.ArgumentParser:
    epilog = "notations:\n" + "\n".join(
        f"  {fmt.value:<10} {text}" for fmt, text in NOTATION_HELP.items()
    )

    parser = argparse.ArgumentParser(
        prog="macfmt",
        description=(
            "A tool to format MAC addresses in various formats. Uses standard format "
            "(xx:xx:xx:xx:xx:xx) by default when no notation is specified."
        ),
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"{MACFMT_VERSION}",
        help="Show macfmt version and exit.",
    )

    parser.add_argument(
        "file",
        nargs="?",
        metavar="FILE",
        help="Input file (if not provided, reads from stdin). A notation name may be given here instead.",
    )
    parser.add_argument(
        "notation",
        nargs="?",
        metavar="{" + ",".join(NOTATIONS) + "}",
        help="Output notation (default: standard).",
    )

    case_group = parser.add_mutually_exclusive_group()
    case_group.add_argument("--lower", action="store_true", help="Convert output to lowercase")
    case_group.add_argument("--upper", action="store_true", help="Convert output to uppercase")

    parser.add_argument(
        "--log-level",
        default=None,
        choices=["critical", "error", "warning", "info", "debug"],
        help="Log level (default: from config, else warning).",
    )
    parser.add_argument("--config", default=None, help="Path to a JSON config file")

    return parser


def _resolve_positionals(parser: argparse.ArgumentParser,
                         args: argparse.Namespace) -> tuple[str | None, MacAddressFormat | None]:
    """
    Split the two optional positionals into (file, notation).

    'macfmt cisco' selects a notation, 'macfmt dump.txt cisco' selects both.
    """
    file_arg: str | None = args.file
    notation_arg: str | None = args.notation

    if notation_arg is None:
        if file_arg in NOTATIONS:
            return None, MacAddressFormat(file_arg)
        return file_arg, None

    if notation_arg not in NOTATIONS:
        parser.error(f"argument notation: invalid choice: {notation_arg!r} (choose from {', '.join(NOTATIONS)})")

    return file_arg, MacAddressFormat(notation_arg)


def _case_policy(args: argparse.Namespace) -> CasePolicy:
    if args.upper:
        return CasePolicy.UPPER
    if args.lower:
        return CasePolicy.LOWER
    return MacFmtSettings.default_case()


def _log_scan_summary(text: str) -> None:
    LOG.debug("Searching for MAC addresses in %d characters of text", len(text))
    found = MacScanner.scan_by_family(text)
    for family, matches in found.items():
        LOG.debug("Pattern %s found %d matches", family.value, len(matches))
    LOG.info("Found %d MAC addresses total", sum(len(m) for m in found.values()))


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    file_path, notation = _resolve_positionals(parser, args)

    try:
        if args.config:
            MacFmtSettings.use_config(args.config)

        LoggerConfigurator(
            level=args.log_level or MacFmtSettings.log_level(),
            log_dir=MacFmtSettings.log_dir(),
            log_filename=MacFmtSettings.log_filename(),
            rotate=MacFmtSettings.log_rotate(),
        )

        fmt = notation or MacFmtSettings.default_format()
        case = _case_policy(args)
        editor = MacFmtSettings.editor()
    except (OSError, ValueError) as exc:
        print(f"Error: Failed to load configuration: {exc}", file=sys.stderr)
        return EXIT_ERROR

    LOG.info("Starting macfmt with arguments: %s", list(sys.argv if argv is None else argv))
    LOG.debug("Using config file: %s", MacFmtSettings.config_file())

    try:
        text = InputReader(editor=editor).read(file_path)
    except InputReadError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    if LOG.isEnabledFor(logging.DEBUG):
        _log_scan_summary(text)

    try:
        result = MacAddressProcessor(fmt, case).run(text)
    except NoMacAddressesFoundError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    for entry in result.entries:
        if entry.diagnostic is not None:
            print(f"Error parsing '{entry.candidate}': {entry.diagnostic.message}", file=sys.stderr)
            continue
        LOG.debug("Formatted '%s' as '%s'", entry.candidate, entry.line)
        print(entry.line)

    LOG.info("Processing completed successfully")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
