# *******************************************************************************
# Copyright (c) 2025 Contributors to the Eclipse Foundation
#
# See the NOTICE file(s) distributed with this work for additional
# information regarding copyright ownership.
#
# This program and the accompanying materials are made available under the
# terms of the Apache License Version 2.0 which is available at
# https://www.apache.org/licenses/LICENSE-2.0
#
# SPDX-License-Identifier: Apache-2.0
# *******************************************************************************


import argparse
import os
import sys
from pathlib import Path

from . import bundle
from .gh_logging import Logger
from .version import Version, compare

log = Logger(__name__)

INFO_PLIST_ENV = "APP_INFO_PLIST"
DEFAULT_INFO_PLIST = Path("Info.plist")

_SYMBOLS = {-1: "<", 0: "=", 1: ">"}


def parse_args(args: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="app-version",
        description="Compare dot-separated versions and check the app version.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    compare_parser = commands.add_parser(
        "compare", help="Print <, = or > for two versions."
    )
    compare_parser.add_argument("lhs")
    compare_parser.add_argument("rhs")

    plist_help = (
        "Path to the bundle Info.plist; "
        f"defaults to ${INFO_PLIST_ENV} or ./{DEFAULT_INFO_PLIST}."
    )
    current_parser = commands.add_parser(
        "current", help="Print the bundle short version."
    )
    current_parser.add_argument(
        "--info-plist", type=Path, default=None, help=plist_help
    )

    check_parser = commands.add_parser(
        "check", help="Fail unless the bundle version is at least MINIMUM."
    )
    check_parser.add_argument("minimum")
    check_parser.add_argument(
        "--info-plist", type=Path, default=None, help=plist_help
    )

    return parser.parse_args(args)


def get_info_plist(args: argparse.Namespace) -> Path:
    """Get the Info.plist path from CLI, environment, or the working directory.

    Tries sources in order:
    1. --info-plist CLI argument
    2. APP_INFO_PLIST environment variable
    3. ./Info.plist
    """
    if args.info_plist:
        log.debug("Using Info.plist from command-line argument.")
        return args.info_plist
    elif path := os.getenv(INFO_PLIST_ENV):
        log.debug("Using Info.plist from environment variable.")
        return Path(path)
    else:
        log.debug("Using Info.plist from the working directory.")
        return DEFAULT_INFO_PLIST


def run_compare(args: argparse.Namespace) -> None:
    print(_SYMBOLS[compare(Version(args.lhs), Version(args.rhs))])


def run_current(args: argparse.Namespace) -> None:
    current = bundle.bundle_short_version(get_info_plist(args))
    if current.raw:
        print(current)


def run_check(args: argparse.Namespace) -> None:
    current = bundle.bundle_short_version(get_info_plist(args))
    minimum = Version(args.minimum)
    if current < minimum:
        log.fatal(f"Version {current} is older than required {minimum}.")
    log.ok(f"Version {current} satisfies minimum {minimum}.")


def main(args: list[str]) -> None:
    """Main entry point for app-version."""
    p = parse_args(args)
    # Loggers are module level; only count warnings from this run
    log.warnings.clear()
    bundle.log.warnings.clear()
    {
        "compare": run_compare,
        "current": run_current,
        "check": run_check,
    }[p.command](p)

    warnings = log.warnings + bundle.log.warnings
    if warnings:
        # If any warnings were issued, exit with non-zero code
        log.fatal(f"Completed with {len(warnings)} warnings.")


def cli() -> None:
    main(args=sys.argv[1:])


if __name__ == "__main__":
    cli()
