"""The game world: the objects in it, their movement and collisions."""

from __future__ import annotations

from typing import Any, Optional

from .box import Box
from .events import EventCollision, EventOut
from .game_object import MAX_ALTITUDE, Solidness
from .log_manager import LM
from .manager import Manager
from .object_list import ObjectList
from .utility import box_intersects_box, world_box
from .vector import Vector


class WorldManager(Manager):
    """Holds every game object, moves them each step and detects collisions."""

    def __init__(self) -> None:
        super().__init__("WorldManager", event_targets=lambda: self._updates)
        self._updates = ObjectList()
        self._deletions = ObjectList()
        self.boundary = Box(Vector(0, 0), 0, 0)
        self.view = Box(Vector(0, 0), 0, 0)
        self._view_following: Optional[Any] = None

    @property
    def all_objects(self) -> ObjectList:
        """A copy of the list of all objects in the world."""
        return ObjectList(self._updates)

    @property
    def view_following(self) -> Optional[Any]:
        """The object the view is centred on, or None."""
        return self._view_following

    def start_up(self) -> None:
        """Start the world empty."""
        self._updates.clear()
        self._deletions.clear()
        self._view_following = None
        super().start_up()
        LM.write_log("WorldManager::start_up(): started\n")

    def shut_down(self) -> None:
        """Destroy every object in the world."""
        LM.write_log("WorldManager::shut_down(): shutting down\n")
        for obj in self._updates:
            self._delete(obj)
        self._updates.clear()
        self._deletions.clear()
        self._view_following = None
        LM.write_log("WorldManager::shut_down(): deleted all objects\n")
        super().shut_down()

    def insert_object(self, obj: Any) -> None:
        """Add ``obj`` to the world; raise ObjectListFullError if the world is full."""
        self._updates.insert(obj)

    def remove_object(self, obj: Any) -> None:
        """Remove ``obj`` from the world; raise ValueError if it is not there."""
        self._updates.remove(obj)
        if self._view_following is obj:
            self._view_following = None

    def objects_of_type(self, type_name: str) -> ObjectList:
        """Return the objects whose type is ``type_name``."""
        return ObjectList(obj for obj in self._updates if obj.type == type_name)

    def mark_for_delete(self, obj: Any) -> None:
        """Have ``obj`` deleted at the end of the current game loop.

        Marking an object more than once has no further effect.
        """
        if obj in self._deletions:
            return
        LM.write_log(
            "WorldManager::mark_for_delete(): Marking object %s (ID %d) for deletion.\n",
            obj.type,
            obj.id,
        )
        self._deletions.insert(obj)

    def _delete(self, obj: Any) -> None:
        obj.destroy()
        if obj in self._updates:
            self._updates.remove(obj)
        if self._view_following is obj:
            self._view_following = None

    def update(self) -> None:
        """Delete marked objects, then move every object by its velocity."""
        LM.write_log("WorldManager::update(): Updating world\n")
        for obj in self._deletions:
            LM.write_log("WorldManager::update(): Deleting object of type %s\n", obj.type)
            self._delete(obj)
        self._deletions.clear()

        for obj in self._updates:
            if obj not in self._updates:
                continue
            obj.update_velocity()
            new_pos = obj.predict_position()
            if new_pos != obj.position:
                self.move_object(obj, new_pos)

    def draw(self) -> None:
        """Draw the visible objects, lowest altitude first."""
        from .view_object import ViewObject

        for altitude in range(MAX_ALTITUDE + 1):
            for obj in self._updates:
                if obj.altitude != altitude:
                    continue
                if isinstance(obj, ViewObject) or box_intersects_box(world_box(obj), self.view):
                    obj.draw()

    def get_collisions(self, obj: Any, where: Vector) -> ObjectList:
        """Return the solid objects that ``obj`` would overlap at ``where``.

        Whether ``obj`` itself is solid is not considered.
        """
        moving_box = world_box(obj, where)
        return ObjectList(
            other
            for other in self._updates
            if other is not obj
            and box_intersects_box(moving_box, world_box(other))
            and other.is_solid()
        )

    def move_object(self, obj: Any, where: Vector) -> bool:
        """Move ``obj`` to ``where``, sending collision and out events.

        Returns False, leaving ``obj`` in place, if it would collide while
        both it and the other object are HARD; otherwise moves and returns True.
        """
        orig_box = world_box(obj)

        if obj.is_solid():
            do_move = True
            for other in self.get_collisions(obj, where):
                event = EventCollision(object1=obj, object2=other, position=where)
                obj.event_handler(event)
                other.event_handler(event)
                if obj.solidness is Solidness.HARD and other.solidness is Solidness.HARD:
                    do_move = False
            if not do_move:
                return False

        obj.position = where
        new_box = world_box(obj)

        if box_intersects_box(orig_box, self.boundary) and not box_intersects_box(
            new_box, self.boundary
        ):
            obj.event_handler(EventOut())

        if self._view_following is obj:
            self.set_view_position(obj.position)
        return True

    def set_view_position(self, view_pos: Vector) -> None:
        """Centre the view on ``view_pos`` without going past the world boundary."""
        x = view_pos.x - self.view.horizontal / 2
        y = view_pos.y - self.view.vertical / 2

        if x + self.view.horizontal > self.boundary.horizontal:
            x = self.boundary.horizontal - self.view.horizontal
        if x < 0:
            x = 0
        if y + self.view.vertical > self.boundary.vertical:
            y = self.boundary.vertical - self.view.vertical
        if y < 0:
            y = 0
        self.view = Box(Vector(x, y), self.view.horizontal, self.view.vertical)

    def set_view_following(self, obj: Optional[Any]) -> None:
        """Keep the view centred on ``obj``; None stops following.

        Raises ValueError if ``obj`` is not in the world.
        """
        if obj is None:
            self._view_following = None
            return
        if obj not in self._updates:
            raise ValueError("object to follow is not in the world")
        self._view_following = obj
        self.set_view_position(obj.position)

    def world_to_view(self, world_pos: Vector) -> Vector:
        """Convert a world position to a position relative to the view."""
        return world_pos - self.view.corner

    def view_to_world(self, view_pos: Vector) -> Vector:
        """Convert a position relative to the view to a world position."""
        return view_pos + self.view.corner


WM = WorldManager()