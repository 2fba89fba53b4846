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


import os
import sys
from pathlib import Path
from typing import NoReturn

GIT_ROOT = Path(__file__).parent.parent.parent.resolve()

# level -> (workflow command, local prefix)
_LEVELS = {
    "debug": ("debug", "DEBUG"),
    "info": ("notice", "INFO"),
    "success": ("notice", "SUCCESS"),
    "warning": ("warning", "WARNING"),
    "error": ("error", "ERROR"),
}


def is_running_in_github_actions() -> bool:
    return "GITHUB_ACTIONS" in os.environ


class Logger:
    """Minimal logger that prints locally and emits annotations on GitHub Actions.

    Warnings are remembered so that a command can fail at the end of a run
    once everything has been reported.
    """

    def __init__(self, name: str):
        self.name = name
        self.warnings: list[str] = []

    def _loc(self, file: Path | None, line: int | None) -> str:
        if file and file.is_absolute() and file.is_relative_to(GIT_ROOT):
            file = file.relative_to(GIT_ROOT)

        parts: list[str] = []
        if is_running_in_github_actions():
            if file:
                parts.append(f"file={file}")
                if line:
                    parts.append(f"line={line}")
            return " " + ",".join(parts) if parts else ""

        if file:
            return f" {file}:{line}" if line else f" {file}"
        return ""

    def _print(
        self, prefix: str, msg: str, file: Path | None = None, line: int | None = None
    ) -> None:
        command, pretty = _LEVELS.get(prefix, (prefix, prefix.upper()))
        location = self._loc(file, line)
        if is_running_in_github_actions():
            print(f"::{command}{location}::{self.name} {msg}")
        else:
            # stdout is reserved for command output
            print(f"{pretty}:{location} {self.name} {msg}", file=sys.stderr)

    def debug(self, msg: str) -> None:
        self._print("debug", msg)

    def info(self, msg: str) -> None:
        self._print("info", msg)

    def ok(self, msg: str) -> None:
        self._print("success", msg)

    def warning(
        self, msg: str, file: Path | None = None, line: int | None = None
    ) -> None:
        self.warnings.append(msg)
        self._print("warning", msg, file, line)

    def fatal(
        self, msg: str, file: Path | None = None, line: int | None = None
    ) -> NoReturn:
        self._print("error", msg, file, line)
        raise SystemExit(1)
