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

"""Resize and move geometry for absolutely positioned elements.

Every handle pins the point opposite to it (the anchor). Results are always
derived from the bounds captured at drag start plus the total pointer delta,
so repeated frames of a long drag cannot drift.
"""

from __future__ import annotations

import math
from enum import Enum

from ..core.bounds import MIN_ELEMENT_HEIGHT, MIN_ELEMENT_WIDTH
from ..core.models import Bounds


class ResizeHandle(str, Enum):
    NW = "nw"
    N = "n"
    NE = "ne"
    E = "e"
    SE = "se"
    S = "s"
    SW = "sw"
    W = "w"


# (horizontal, vertical) direction of the edge each handle drags:
# -1 moves the left/top edge, +1 the right/bottom edge, 0 leaves the axis alone.
_HANDLE_DIRECTIONS: dict[ResizeHandle, tuple[int, int]] = {
    ResizeHandle.NW: (-1, -1),
    ResizeHandle.N: (0, -1),
    ResizeHandle.NE: (1, -1),
    ResizeHandle.E: (1, 0),
    ResizeHandle.SE: (1, 1),
    ResizeHandle.S: (0, 1),
    ResizeHandle.SW: (-1, 1),
    ResizeHandle.W: (-1, 0),
}

_ANCHOR_NUDGES = 8


def parse_handle(value: ResizeHandle | str) -> ResizeHandle:
    if isinstance(value, ResizeHandle):
        return value
    try:
        return ResizeHandle(str(value).strip().lower())
    except ValueError as exc:
        raise ValueError(f"unknown resize handle: {value}") from exc


def handle_directions(handle: ResizeHandle | str) -> tuple[int, int]:
    return _HANDLE_DIRECTIONS[parse_handle(handle)]


def anchor_point(handle: ResizeHandle | str, bounds: Bounds) -> tuple[float, float]:
    """The point that stays fixed while ``handle`` is dragged."""
    hx, hy = handle_directions(handle)
    return _anchor_1d(hx, bounds.x, bounds.width), _anchor_1d(hy, bounds.y, bounds.height)


def compute_resize(
    handle: ResizeHandle | str,
    start: Bounds,
    dx: float,
    dy: float,
    min_width: float = MIN_ELEMENT_WIDTH,
    min_height: float = MIN_ELEMENT_HEIGHT,
    previous: Bounds | None = None,
) -> Bounds:
    """New bounds for dragging ``handle`` by the total delta ``(dx, dy)``.

    ``start`` is the element's bounds when the drag began, ``previous`` the
    bounds returned for the last frame (defaults to ``start``). An axis whose
    candidate size would drop below its minimum, or turn non-finite, keeps the
    previous size; its origin is still recomputed from the anchor.
    """
    hx, hy = handle_directions(handle)
    prior = previous or start
    if not _all_finite(start.x, start.y, start.width, start.height, min_width, min_height):
        return prior
    x, width = _resize_axis(hx, start.x, start.width, dx, min_width, prior.width)
    y, height = _resize_axis(hy, start.y, start.height, dy, min_height, prior.height)
    return Bounds(x=x, y=y, width=width, height=height)


def compute_move(
    start: Bounds,
    dx: float,
    dy: float,
    *,
    grid_size: float | None = None,
) -> Bounds:
    if not _all_finite(dx, dy):
        return start
    x = start.x + dx
    y = start.y + dy
    if grid_size:
        x = snap_to_grid(x, grid_size)
        y = snap_to_grid(y, grid_size)
    return Bounds(x=x, y=y, width=start.width, height=start.height)


def snap_to_grid(value: float, grid_size: float) -> float:
    if grid_size <= 0 or not math.isfinite(grid_size):
        return value
    return round(value / grid_size) * grid_size


def _resize_axis(
    direction: int,
    origin: float,
    size: float,
    delta: float,
    minimum: float,
    prior_size: float,
) -> tuple[float, float]:
    if direction == 0:
        return origin, size
    anchor = _anchor_1d(direction, origin, size)
    candidate = size + direction * delta
    if not math.isfinite(candidate) or candidate < minimum:
        candidate = max(prior_size, minimum)
    if direction > 0:
        return anchor, candidate
    return _pin_to_anchor(anchor, candidate, minimum)


def _pin_to_anchor(anchor: float, size: float, minimum: float) -> tuple[float, float]:
    """Origin and size whose float sum is exactly ``anchor``.

    ``anchor - size`` alone can round so that ``origin + size`` lands one ulp
    off the anchor. Either the size is kept or it is re-derived from the origin
    and nudged by an ulp; if neither fits the origin steps left, which only
    grows the size.
    """
    origin = anchor - size
    for _ in range(_ANCHOR_NUDGES):
        derived = anchor - origin
        up = math.nextafter(derived, math.inf)
        down = math.nextafter(derived, -math.inf)
        for width in (size, derived, up, down):
            if width >= minimum and origin + width == anchor:
                return origin, width
        origin = math.nextafter(origin, -math.inf)
    return anchor - size, size


def _anchor_1d(direction: int, origin: float, size: float) -> float:
    if direction > 0:
        return origin
    if direction < 0:
        return origin + size
    return origin + size / 2


def _all_finite(*values: float) -> bool:
    return all(math.isfinite(value) for value in values)


__all__ = [
    "ResizeHandle",
    "anchor_point",
    "compute_move",
    "compute_resize",
    "handle_directions",
    "parse_handle",
    "snap_to_grid",
]
