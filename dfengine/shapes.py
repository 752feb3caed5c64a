"""Simple geometric shapes: line segments and circles."""

from __future__ import annotations

from dataclasses import dataclass, field

from .vector import Vector


def _num(value: float) -> str:
    return f"{value:g}"


@dataclass
class Line:
    """A line segment from ``p1`` to ``p2``."""

    p1: Vector = field(default_factory=Vector)
    p2: Vector = field(default_factory=Vector)

    def __str__(self) -> str:
        return (
            f"Line: P1({_num(self.p1.x)}, {_num(self.p1.y)}) - "
            f"P2({_num(self.p2.x)}, {_num(self.p2.y)})"
        )


@dataclass
class Circle:
    """A circle with a center and a radius."""

    center: Vector = field(default_factory=Vector)
    radius: float = 0.0

    def __str__(self) -> str:
        return (
            f"Circle: Center({_num(self.center.x)}, {_num(self.center.y)}), "
            f"Radius: {_num(self.radius)}"
        )