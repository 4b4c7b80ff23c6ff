#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Final

DataRecord = Mapping[str, object]


class _Missing:
    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()


def resolve_field(record: object, field_path: str) -> object:
    """Walk a dotted field path over a nested record.

    Numeric segments index into sequences (``signatories.0.name``); every other
    segment is a mapping key. Returns ``MISSING`` as soon as a segment cannot be
    followed, never raises.
    """
    if not isinstance(field_path, str) or not field_path:
        return MISSING
    current: object = record
    for segment in field_path.split("."):
        if current is None or current is MISSING:
            return MISSING
        if segment.isascii() and segment.isdigit():
            if not isinstance(current, Sequence) or isinstance(current, (str, bytes, bytearray)):
                return MISSING
            index = int(segment)
            if index >= len(current):
                return MISSING
            current = current[index]
            continue
        if not isinstance(current, Mapping):
            return MISSING
        if segment not in current:
            return MISSING
        current = current[segment]
    return current


def is_absent(value: object) -> bool:
    """Absent means missing, ``None`` or the empty string."""
    return value is MISSING or value is None or (isinstance(value, str) and value == "")


__all__ = ["DataRecord", "MISSING", "is_absent", "resolve_field"]
