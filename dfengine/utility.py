"""Geometry helpers for positions and bounding boxes."""

from __future__ import annotations

import math
from typing import Any, Optional

from .box import Box
from .vector import Vector


def positions_intersect(p1: Vector, p2: Vector) -> bool:
    """Return True if the positions are within 1 unit of each other on both axes."""
    return abs(p1.x - p2.x) <= 1 and abs(p1.y - p2.y) <= 1


def box_intersects_box(a: Box, b: Box) -> bool:
    """Return True if the boxes overlap; touching edges count as overlap."""
    ax1, ay1 = a.corner.x, a.corner.y
    ax2, ay2 = ax1 + a.horizontal, ay1 + a.vertical
    bx1, by1 = b.corner.x, b.corner.y
    bx2, by2 = bx1 + b.horizontal, by1 + b.vertical
    x_overlap = bx1 <= ax2 and ax1 <= bx2
    y_overlap = by1 <= ay2 and ay1 <= by2
    return x_overlap and y_overlap


def value_in_range(value: float, minimum: float, maximum: float) -> bool:
    """Return True if ``value`` lies in [minimum, maximum]."""
    return minimum <= value <= maximum


def world_box(obj: Any, where: Optional[Vector] = None) -> Box:
    """Return the object's bounding box translated to world coordinates.

    The box is placed at ``where``, or at the object's position if omitted.
    """
    if where is None:
        where = obj.position
    box = obj.box
    return Box(box.corner + where, box.horizontal, box.vertical)


def box_contains_position(box: Box, position: Vector) -> bool:
    """Return True if ``position`` lies inside or on the edge of ``box``."""
    x1, y1 = box.corner.x, box.corner.y
    return value_in_range(position.x, x1, x1 + box.horizontal) and value_in_range(
        position.y, y1, y1 + box.vertical
    )


def box_contains_box(outer: Box, inner: Box) -> bool:
    """Return True if ``outer`` completely contains ``inner``."""
    c = inner.corner
    corners = (
        c,
        Vector(c.x + inner.horizontal, c.y),
        Vector(c.x, c.y + inner.vertical),
        Vector(c.x + inner.horizontal, c.y + inner.vertical),
    )
    return all(box_contains_position(outer, corner) for corner in corners)


def distance(p1: Vector, p2: Vector) -> float:
    """Return the Euclidean distance between two positions."""
    return math.hypot(p2.x - p1.x, p2.y - p1.y)