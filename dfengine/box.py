"""Axis-aligned 2-d bounding boxes."""

from __future__ import annotations

from dataclasses import dataclass, field

from .vector import Vector


@dataclass
class Box:
    """A box given by its upper-left corner and its horizontal and vertical sizes."""

    corner: Vector = field(default_factory=Vector)
    horizontal: float = 0.0
    vertical: float = 0.0