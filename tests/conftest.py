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
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest

from app_support.gh_logging import Logger


class MockLogger(Logger):
    """Logger that captures messages for testing."""

    def __init__(self):
        super().__init__("test")
        self.debug_messages: list[str] = []
        self.info_messages: list[str] = []
        self.warning_messages: list[str] = []
        self.error_messages: list[str] = []

    def _print(
        self, prefix: str, msg: str, file: Path | None = None, line: int | None = None
    ) -> None:
        if prefix == "debug":
            self.debug_messages.append(msg)
        elif prefix in ("info", "success"):
            self.info_messages.append(msg)
        elif prefix == "warning":
            self.warning_messages.append(msg)
        elif prefix == "error":
            self.error_messages.append(msg)


@pytest.fixture
def bundle_logger():
    """Replace the bundle module logger with a capturing one."""
    logger = MockLogger()
    with patch("app_support.bundle.log", logger):
        yield logger


@pytest.fixture
def main_logger():
    """Replace the main module logger with a capturing one."""
    logger = MockLogger()
    with patch("app_support.main.log", logger):
        yield logger


@pytest.fixture
def build_fake_filesystem(fs: Any):
    """Convenience helper to build a fake filesystem from a nested dict."""

    def _build(structure: dict[str, object], base_path: str = "") -> None:
        base = base_path or "/"
        for name, value in structure.items():
            path = f"{base.rstrip('/')}/{name}"
            if isinstance(value, dict):
                fs.makedirs(path, exist_ok=True)
                _build(value, path)
            else:
                fs.create_file(path, contents=value)

    return _build


def make_info_plist(
    short_version: object = "1.0.0",
    identifier: str | None = "com.example.app",
    fmt: plistlib.PlistFormat = plistlib.FMT_XML,
) -> bytes:
    """Factory for Info.plist file contents. None leaves a key out."""
    content: dict[str, object] = {"CFBundleName": "Example"}
    if short_version is not None:
        content["CFBundleShortVersionString"] = short_version
    if identifier is not None:
        content["CFBundleIdentifier"] = identifier
    return plistlib.dumps(content, fmt=fmt)
