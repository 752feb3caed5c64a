"""Game objects: positioned, moving, drawable things in the game world."""

from __future__ import annotations

import contextlib
import itertools
from enum import Enum
from typing import Any, ClassVar, Iterator, Optional

from .animation import Animation
from .box import Box
from .events import Event
from .sprite import Sprite
from .vector import Vector

MAX_ALTITUDE = 4
DEFAULT_ALTITUDE = 2


class Solidness(Enum):
    """How an object takes part in collisions."""

    HARD = "hard"
    SOFT = "soft"
    SPECTRAL = "spectral"


class GameObject:
    """Base class for everything in the game world.

    If ``world`` is given, the object inserts itself into it on creation and
    removes itself on :meth:`destroy`. ``world`` needs ``insert_object`` and
    ``remove_object`` methods.
    """

    _ids: ClassVar[Iterator[int]] = itertools.count()

    def __init__(self, world: Optional[Any] = None, *, type_name: str = "Object") -> None:
        self.id: int = next(GameObject._ids)
        self.type = type_name
        self.position = Vector(0, 0)
        self._altitude = DEFAULT_ALTITUDE
        self.direction = Vector(0, 0)
        self.speed = 0.0
        self._solidness = Solidness.HARD
        self.acceleration = Vector(0, 0)
        self._mass = 1.0
        self.animation = Animation()
        self.box = Box()
        self.world = world
        if world is not None:
            world.insert_object(self)

    def event_handler(self, event: Event) -> bool:
        """Handle ``event``; return True if handled. The base ignores everything."""
        return False

    def draw(self) -> None:
        """Draw the current animation frame at the object's position.

        Objects without a sprite draw nothing.
        """
        if self.animation.sprite is None:
            return
        self.animation.draw(self.position)

    @property
    def altitude(self) -> int:
        """Drawing layer in [0, MAX_ALTITUDE]; out-of-range values raise ValueError."""
        return self._altitude

    @altitude.setter
    def altitude(self, new_altitude: int) -> None:
        if not 0 <= new_altitude <= MAX_ALTITUDE:
            raise ValueError(f"altitude must be in [0, {MAX_ALTITUDE}], got {new_altitude}")
        self._altitude = new_altitude

    @property
    def velocity(self) -> Vector:
        """Direction scaled by speed; setting it splits into speed and unit direction."""
        return self.direction.scale(self.speed)

    @velocity.setter
    def velocity(self, new_velocity: Vector) -> None:
        self.speed = new_velocity.magnitude()
        self.direction = new_velocity.normalized()

    def predict_position(self) -> Vector:
        """Return the position after one step at the current velocity."""
        return self.position + self.velocity

    @property
    def solidness(self) -> Solidness:
        """Collision behaviour; values that are not a Solidness raise ValueError."""
        return self._solidness

    @solidness.setter
    def solidness(self, new_solidness: Solidness) -> None:
        self._solidness = Solidness(new_solidness)

    def is_solid(self) -> bool:
        """Return True for HARD or SOFT objects."""
        return self._solidness in (Solidness.HARD, Solidness.SOFT)

    @property
    def mass(self) -> float:
        """Mass of the object; non-positive values are ignored."""
        return self._mass

    @mass.setter
    def mass(self, new_mass: float) -> None:
        if new_mass > 0:
            self._mass = new_mass

    def update_velocity(self) -> None:
        """Add the acceleration to the velocity."""
        self.velocity = self.velocity + self.acceleration

    def apply_force(self, force: Vector) -> None:
        """Set the acceleration to ``force`` divided by mass."""
        if self._mass > 0:
            self.acceleration = force.scale(1 / self._mass)

    def set_sprite(self, sprite: Sprite) -> None:
        """Animate ``sprite`` and size the bounding box to it."""
        self.animation.sprite = sprite
        self.animation.name = sprite.label
        self.box = self.animation.bounding_box()

    def destroy(self) -> None:
        """Remove the object from its world, if it is in one."""
        if self.world is not None:
            with contextlib.suppress(ValueError):
                self.world.remove_object(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id}, type={self.type!r}, position={self.position!r})"