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


import re
from collections.abc import Iterable
from functools import total_ordering

import semver

_NUMERIC_SEGMENT = re.compile(r"[0-9]+")

# Below the interpreter's int/str conversion limit (4300 digits by default).
_DIGIT_CHUNK = 1000


def _to_int(digits: str) -> int:
    value = 0
    for start in range(0, len(digits), _DIGIT_CHUNK):
        chunk = digits[start : start + _DIGIT_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def parse_components(raw: str) -> tuple[int, ...]:
    """Split a version string on dots into integer components.

    Segments that are not plain decimal digits (empty, signed, "x", ...)
    are read as 0. Parsing never fails, whatever the segment length.
    """
    return tuple(
        _to_int(segment) if _NUMERIC_SEGMENT.fullmatch(segment) else 0
        for segment in raw.split(".")
    )


def pad(components: tuple[int, ...], count: int) -> tuple[int, ...]:
    return components + (0,) * (count - len(components))


def compare(lhs: "Version", rhs: "Version") -> int:
    """Three-way compare of two versions in ascending numeric order.

    Returns -1 if lhs is older, 0 if equal and 1 if lhs is newer.
    The shorter component sequence is padded with zeros first,
    so "1.2" and "1.2.0" compare equal.
    """
    lhs_components = lhs.components
    rhs_components = rhs.components

    count = max(len(lhs_components), len(rhs_components))
    lhs_components = pad(lhs_components, count)
    rhs_components = pad(rhs_components, count)

    for lhs_component, rhs_component in zip(lhs_components, rhs_components):
        if lhs_component < rhs_component:
            return -1
        if lhs_component > rhs_component:
            return 1
    return 0


@total_ordering
class Version:
    def __init__(self, s: str) -> None:
        if not isinstance(s, str):
            raise TypeError("Version must be a string")

        self._raw = s

    @property
    def raw(self) -> str:
        return self._raw

    @property
    def components(self) -> tuple[int, ...]:
        return parse_components(self._raw)

    @property
    def semver(self) -> semver.Version:
        """The first three components as a semantic version.

        Components beyond patch level are ignored, e.g. "1.2.3.4" -> 1.2.3.
        """
        major, minor, patch = pad(self.components, 3)[:3]
        return semver.Version(major=major, minor=minor, patch=patch)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) < 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        # Note: this compares the padded components, not the raw strings.
        # "1.2", "1.2.0" and "01.2" are all the same version here.
        return compare(self, other) == 0

    def __hash__(self) -> int:
        components = list(self.components)
        while components and components[-1] == 0:
            components.pop()
        return hash(tuple(components))

    def __str__(self) -> str:
        return self._raw

    def __repr__(self) -> str:
        return f"Version({self._raw!r})"


def newest_first(versions: Iterable[Version]) -> list[Version]:
    """Sort versions in descending order (highest version first)."""
    return sorted(versions, reverse=True)
