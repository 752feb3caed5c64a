"""Heads-up display objects that show a labelled value on screen."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Any, Optional

from .color import COLOR_DEFAULT, Color
from .display_manager import DM, Justification
from .events import VIEW_EVENT, Event
from .game_object import MAX_ALTITUDE, GameObject, Solidness
from .vector import Vector
from .world_manager import WM


class ViewLocation(IntEnum):
    """General location of a view object on the screen."""

    UNDEFINED = -1
    TOP_LEFT = 0
    TOP_CENTER = 1
    TOP_RIGHT = 2
    CENTER_LEFT = 3
    CENTER_CENTER = 4
    CENTER_RIGHT = 5
    BOTTOM_LEFT = 6
    BOTTOM_CENTER = 7
    BOTTOM_RIGHT = 8


class _Row(Enum):
    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


# Horizontal position in sixths of the view width, and the row.
_PLACEMENT = {
    ViewLocation.TOP_LEFT: (1, _Row.TOP),
    ViewLocation.TOP_CENTER: (3, _Row.TOP),
    ViewLocation.TOP_RIGHT: (5, _Row.TOP),
    ViewLocation.CENTER_LEFT: (1, _Row.CENTER),
    ViewLocation.CENTER_CENTER: (3, _Row.CENTER),
    ViewLocation.CENTER_RIGHT: (5, _Row.CENTER),
    ViewLocation.BOTTOM_LEFT: (1, _Row.BOTTOM),
    ViewLocation.BOTTOM_CENTER: (3, _Row.BOTTOM),
    ViewLocation.BOTTOM_RIGHT: (5, _Row.BOTTOM),
}


class ViewObject(GameObject):
    """Shows ``view_string`` and ``value`` at a fixed place in the view.

    Defaults: SPECTRAL, maximum altitude, border on, top centre, default
    color, value drawn. The view box comes from ``world`` (or the global
    world manager) and drawing goes to ``display`` (or the global display).
    """

    def __init__(self, world: Optional[Any] = None, *, display: Optional[Any] = None) -> None:
        super().__init__(world, type_name="ViewObject")
        self._view_world = world if world is not None else WM
        self._display = display if display is not None else DM
        self.solidness = Solidness.SPECTRAL
        self.altitude = MAX_ALTITUDE
        self.view_string = ""
        self.value = 0
        self.draw_value = True
        self.color: Color = COLOR_DEFAULT
        self._border = True
        self._location = ViewLocation.TOP_CENTER
        self.location = ViewLocation.TOP_CENTER

    @property
    def location(self) -> ViewLocation:
        """Screen location; setting it moves the object. UNDEFINED is ignored."""
        return self._location

    @location.setter
    def location(self, new_location: ViewLocation) -> None:
        placement = _PLACEMENT.get(new_location)
        if placement is None:
            return
        sixths, row = placement
        view = self._view_world.view
        x = view.horizontal * (sixths / 6.0)
        if row is _Row.TOP:
            y = 1.0
        elif row is _Row.CENTER:
            y = view.vertical / 2
        else:
            y = view.vertical - 1
        if not self._border:
            if row is _Row.TOP:
                y -= 1
            elif row is _Row.BOTTOM:
                y += 1
        self.position = Vector(x, y)
        self._location = ViewLocation(new_location)

    @property
    def border(self) -> bool:
        """Whether a border surrounds the display; changing it re-places the object."""
        return self._border

    @border.setter
    def border(self, new_border: bool) -> None:
        if self._border != new_border:
            self._border = new_border
            self.location = self._location

    @property
    def text(self) -> str:
        """The string drawn on screen."""
        parts = [self.view_string]
        if self.draw_value:
            parts.append(str(self.value))
        body = " ".join(parts)
        return f" {body} " if self._border else body

    def draw(self) -> None:
        """Draw the text centred at the object's position in the view."""
        pos = self._view_world.view_to_world(self.position)
        self._display.draw_string(pos, self.text, Justification.CENTER_JUSTIFIED, self.color)

    def event_handler(self, event: Event) -> bool:
        """Apply a view event whose tag matches the view string; ignore others."""
        if event.type == VIEW_EVENT and getattr(event, "tag", None) == self.view_string:
            if event.delta:
                self.value += event.value
            else:
                self.value = event.value
            return True
        return super().event_handler(event)