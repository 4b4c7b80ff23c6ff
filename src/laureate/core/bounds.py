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

# Smallest width/height an element may be resized to (document units).
MIN_ELEMENT_WIDTH = 5.0
MIN_ELEMENT_HEIGHT = 5.0

# Default page geometry for new documents.
DEFAULT_PAGE_WIDTH = 800.0
DEFAULT_PAGE_HEIGHT = 600.0
DEFAULT_PAGE_MARGIN = 20.0
DEFAULT_PAGE_BACKGROUND = "#ffffff"

# Offset applied to duplicated elements.
DUPLICATE_OFFSET = 20.0

# Default spacing of the snap grid.
DEFAULT_GRID_SIZE = 20.0

# Default pattern for date bindings (LDML tokens).
DEFAULT_DATE_PATTERN = "dd MMMM yyyy"

# Maximum records accepted by a single batch issuance.
MAX_BATCH_RECORDS = 10_000


__all__ = [
    "DEFAULT_DATE_PATTERN",
    "DEFAULT_GRID_SIZE",
    "DEFAULT_PAGE_BACKGROUND",
    "DEFAULT_PAGE_HEIGHT",
    "DEFAULT_PAGE_MARGIN",
    "DEFAULT_PAGE_WIDTH",
    "DUPLICATE_OFFSET",
    "MAX_BATCH_RECORDS",
    "MIN_ELEMENT_HEIGHT",
    "MIN_ELEMENT_WIDTH",
]
