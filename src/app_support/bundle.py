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


import plistlib
from importlib import metadata
from pathlib import Path
from typing import Any
from xml.parsers.expat import ExpatError

from .gh_logging import Logger
from .version import Version

log = Logger(__name__)

SHORT_VERSION_KEY = "CFBundleShortVersionString"
IDENTIFIER_KEY = "CFBundleIdentifier"


def read_info_plist(info_plist: Path) -> dict[str, Any] | None:
    """Load a bundle Info.plist (XML or binary).

    Returns None if the file is missing or cannot be parsed.
    """
    if not info_plist.exists():
        log.warning(f"{info_plist} does not exist", file=info_plist)
        return None

    try:
        with info_plist.open("rb") as f:
            content = plistlib.load(f)
    except OSError as e:
        log.warning(f"Error reading {info_plist}: {e}", file=info_plist)
        return None
    except (ExpatError, ValueError) as e:
        log.warning(f"Error parsing {info_plist}: {e}", file=info_plist)
        return None

    if not isinstance(content, dict):
        log.warning(f"{info_plist} is not a dictionary plist", file=info_plist)
        return None
    return content


def _read_string(info_plist: Path, key: str) -> str | None:
    content = read_info_plist(info_plist)
    if content is None:
        return None

    value = content.get(key)
    if value is None:
        log.warning(f"{info_plist} has no {key}", file=info_plist)
        return None
    if not isinstance(value, str):
        log.warning(
            f"{info_plist} has invalid {key}; expected a string", file=info_plist
        )
        return None
    return value


def bundle_short_version(info_plist: Path) -> Version:
    """The current app version, i.e. CFBundleShortVersionString.

    Falls back to an empty version (equal to "0") when it is not available.
    """
    return Version(_read_string(info_plist, SHORT_VERSION_KEY) or "")


def bundle_identifier(info_plist: Path) -> str | None:
    return _read_string(info_plist, IDENTIFIER_KEY)


def installed_version(distribution: str) -> Version:
    """Version of an installed Python distribution, empty if not installed."""
    try:
        return Version(metadata.version(distribution))
    except metadata.PackageNotFoundError:
        log.warning(f"Distribution {distribution} is not installed")
        return Version("")
