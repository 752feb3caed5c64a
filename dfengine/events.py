"""Events passed from the engine to game objects."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import IntEnum, auto
from functools import lru_cache
from typing import Any, Optional

from .vector import Vector

UNDEFINED_EVENT = "df::undefined"
COLLISION_EVENT = "df::collision"
KEYBOARD_EVENT = "df::keyboard"
MSE_EVENT = "df::mouse"
OUT_EVENT = "df::out"
STEP_EVENT = "df::step"
VIEW_EVENT = "df-view"


@dataclass
class Event:
    """Base event, identified by its type string."""

    type: str = UNDEFINED_EVENT


@dataclass
class EventCollision(Event):
    """Collision between ``object1`` (the mover) and ``object2`` at ``position``."""

    type: str = field(default=COLLISION_EVENT, init=False)
    object1: Optional[Any] = None
    object2: Optional[Any] = None
    position: Vector = field(default_factory=Vector)


class Key(IntEnum):
    """Keys the engine recognizes."""

    UNDEFINED_KEY = -1
    SPACE = auto()
    RETURN = auto()
    ESCAPE = auto()
    TAB = auto()
    LEFTARROW = auto()
    RIGHTARROW = auto()
    UPARROW = auto()
    DOWNARROW = auto()
    PAUSE = auto()
    MINUS = auto()
    PLUS = auto()
    TILDE = auto()
    PERIOD = auto()
    COMMA = auto()
    SLASH = auto()
    EQUAL = auto()
    BACKSLASH = auto()
    MULTIPLY = auto()
    QUOTE = auto()
    SEMICOLON = auto()
    LEFTCONTROL = auto()
    RIGHTCONTROL = auto()
    LEFTSHIFT = auto()
    RIGHTSHIFT = auto()
    F1 = auto()
    F2 = auto()
    F3 = auto()
    F4 = auto()
    F5 = auto()
    F6 = auto()
    F7 = auto()
    F8 = auto()
    F9 = auto()
    F10 = auto()
    F11 = auto()
    F12 = auto()
    A = auto()
    B = auto()
    C = auto()
    D = auto()
    E = auto()
    F = auto()
    G = auto()
    H = auto()
    I = auto()  # noqa: E741
    J = auto()
    K = auto()
    L = auto()
    M = auto()
    N = auto()
    O = auto()  # noqa: E741
    P = auto()
    Q = auto()
    R = auto()
    S = auto()
    T = auto()
    U = auto()
    V = auto()
    W = auto()
    X = auto()
    Y = auto()
    Z = auto()
    NUM1 = auto()
    NUM2 = auto()
    NUM3 = auto()
    NUM4 = auto()
    NUM5 = auto()
    NUM6 = auto()
    NUM7 = auto()
    NUM8 = auto()
    NUM9 = auto()
    NUM0 = auto()


class KeyboardAction(IntEnum):
    """Kinds of keyboard action."""

    UNDEFINED_KEYBOARD_ACTION = -1
    KEY_PRESSED = 0
    KEY_RELEASED = 1


@dataclass
class EventKeyboard(Event):
    """A key was pressed or released."""

    type: str = field(default=KEYBOARD_EVENT, init=False)
    key: Key = Key.UNDEFINED_KEY
    keyboard_action: KeyboardAction = KeyboardAction.UNDEFINED_KEYBOARD_ACTION


class MouseAction(IntEnum):
    """Kinds of mouse action."""

    UNDEFINED_MOUSE_ACTION = -1
    CLICKED = 0
    MOVED = 1


class MouseButton(IntEnum):
    """Mouse buttons the engine recognizes."""

    UNDEFINED_MOUSE_BUTTON = -1
    LEFT = 0
    RIGHT = 1
    MIDDLE = 2


@dataclass
class EventMouse(Event):
    """The mouse moved or a button was clicked."""

    type: str = field(default=MSE_EVENT, init=False)
    mouse_action: MouseAction = MouseAction.UNDEFINED_MOUSE_ACTION
    mouse_button: MouseButton = MouseButton.UNDEFINED_MOUSE_BUTTON
    mouse_position: Vector = field(default_factory=Vector)


@dataclass
class EventOut(Event):
    """An object moved out of the world boundary."""

    type: str = field(default=OUT_EVENT, init=False)


@dataclass
class EventStep(Event):
    """One iteration of the game loop."""

    type: str = field(default=STEP_EVENT, init=False)
    step_count: int = 0


@dataclass
class EventView(Event):
    """Update for view objects whose view string matches ``tag``.

    With ``delta`` the value is added, otherwise it replaces the current one.
    """

    type: str = field(default=VIEW_EVENT, init=False)
    tag: str = ""
    value: int = 0
    delta: bool = False


@lru_cache(maxsize=1)
def _pygame_key_map() -> dict[int, Key]:
    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    import pygame

    mapping: dict[int, Key] = {}
    for letter in "abcdefghijklmnopqrstuvwxyz":
        mapping[getattr(pygame, f"K_{letter}")] = Key[letter.upper()]
    for digit in range(10):
        mapping[getattr(pygame, f"K_{digit}")] = Key[f"NUM{digit}"]
    for number in range(1, 13):
        mapping[getattr(pygame, f"K_F{number}")] = Key[f"F{number}"]
    mapping.update(
        {
            pygame.K_ESCAPE: Key.ESCAPE,
            pygame.K_LCTRL: Key.LEFTCONTROL,
            pygame.K_LSHIFT: Key.LEFTSHIFT,
            pygame.K_RCTRL: Key.RIGHTCONTROL,
            pygame.K_RSHIFT: Key.RIGHTSHIFT,
            pygame.K_SPACE: Key.SPACE,
            pygame.K_RETURN: Key.RETURN,
            pygame.K_TAB: Key.TAB,
            pygame.K_LEFT: Key.LEFTARROW,
            pygame.K_RIGHT: Key.RIGHTARROW,
            pygame.K_UP: Key.UPARROW,
            pygame.K_DOWN: Key.DOWNARROW,
            pygame.K_PAUSE: Key.PAUSE,
            pygame.K_KP_MINUS: Key.MINUS,
            pygame.K_KP_PLUS: Key.PLUS,
            pygame.K_BACKQUOTE: Key.TILDE,
            pygame.K_PERIOD: Key.PERIOD,
            pygame.K_COMMA: Key.COMMA,
            pygame.K_SLASH: Key.SLASH,
            pygame.K_EQUALS: Key.EQUAL,
            pygame.K_BACKSLASH: Key.BACKSLASH,
            pygame.K_KP_MULTIPLY: Key.MULTIPLY,
            pygame.K_QUOTE: Key.QUOTE,
            pygame.K_SEMICOLON: Key.SEMICOLON,
        }
    )
    return mapping


def key_from_pygame(pygame_key: int) -> Key:
    """Convert a pygame key code to a Key; unknown codes give UNDEFINED_KEY."""
    return _pygame_key_map().get(pygame_key, Key.UNDEFINED_KEY)