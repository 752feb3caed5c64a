"""Keyboard and mouse input, turned into engine events."""

from __future__ import annotations

import contextlib
import os
from typing import Any, Callable, Iterable, Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from .display_manager import DM  # noqa: E402
from .events import (  # noqa: E402
    Event,
    EventKeyboard,
    EventMouse,
    KeyboardAction,
    MouseAction,
    MouseButton,
    key_from_pygame,
)
from .log_manager import LM  # noqa: E402
from .manager import Manager, ManagerError  # noqa: E402
from .vector import Vector  # noqa: E402
from .world_manager import WM  # noqa: E402

_MOUSE_BUTTONS = {
    1: MouseButton.LEFT,
    2: MouseButton.MIDDLE,
    3: MouseButton.RIGHT,
}


class InputManager(Manager):
    """Reads window events and passes them to every object in the world.

    ``event_source`` returns the pending window events; it defaults to
    pygame's event queue.
    """

    def __init__(
        self,
        display: Optional[Any] = None,
        world: Optional[Any] = None,
        event_source: Optional[Callable[[], Iterable[Any]]] = None,
    ) -> None:
        super().__init__("InputManager")
        self._display = display if display is not None else DM
        self._world = world if world is not None else WM
        self._event_source = event_source if event_source is not None else pygame.event.get
        self._saved_repeat: Optional[tuple[int, int]] = None

    def start_up(self) -> None:
        """Prepare the window for input; raise ManagerError without a started display."""
        if not self._display.is_started:
            LM.write_log("InputManager::start_up(): DisplayManager not started\n")
            raise ManagerError("display manager is not started")
        if self._display.window is None:
            LM.write_log("InputManager::start_up(): No window found\n")
            raise ManagerError("display manager has no window")
        with contextlib.suppress(pygame.error):
            self._saved_repeat = pygame.key.get_repeat()
            pygame.key.set_repeat()
        super().start_up()
        LM.write_log("InputManager::start_up(): InputManager started\n")

    def shut_down(self) -> None:
        """Restore the window's key repeat setting."""
        if self._display.window is not None and self._saved_repeat is not None:
            with contextlib.suppress(pygame.error):
                pygame.key.set_repeat(*self._saved_repeat)
        self._saved_repeat = None
        LM.write_log("InputManager::shut_down(): Shutting down InputManager\n")
        super().shut_down()

    def _translate(self, raw: Any) -> Optional[Event]:
        if raw.type == pygame.KEYDOWN:
            LM.write_log("InputManager::get_input(): Key Pressed - %d\n", raw.key)
            return EventKeyboard(
                key=key_from_pygame(raw.key), keyboard_action=KeyboardAction.KEY_PRESSED
            )
        if raw.type == pygame.KEYUP:
            LM.write_log("InputManager::get_input(): Key Released - %d\n", raw.key)
            return EventKeyboard(
                key=key_from_pygame(raw.key), keyboard_action=KeyboardAction.KEY_RELEASED
            )
        if raw.type == pygame.MOUSEMOTION:
            x, y = raw.pos
            return EventMouse(
                mouse_action=MouseAction.MOVED,
                mouse_position=self._display.pixels_to_spaces(Vector(float(x), float(y))),
            )
        if raw.type == pygame.MOUSEBUTTONDOWN:
            x, y = raw.pos
            return EventMouse(
                mouse_action=MouseAction.CLICKED,
                mouse_button=_MOUSE_BUTTONS.get(raw.button, MouseButton.UNDEFINED_MOUSE_BUTTON),
                mouse_position=self._display.pixels_to_spaces(Vector(float(x), float(y))),
            )
        return None

    def get_input(self) -> list[Event]:
        """Send pending keyboard and mouse input to all objects; return the events sent."""
        if self._display.window is None:
            LM.write_log("InputManager::get_input(): No valid window found.\n")
            return []
        sent: list[Event] = []
        for raw in self._event_source():
            event = self._translate(raw)
            if event is None:
                continue
            self._world.on_event(event)
            sent.append(event)
        return sent


IM = InputManager()