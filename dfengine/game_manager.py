"""The game loop and the start-up and shut-down of every manager."""

from __future__ import annotations

import time
from typing import Any, Callable, Optional

from .box import Box
from .clock import Clock
from .display_manager import DM
from .events import EventStep
from .input_manager import IM
from .log_manager import LM
from .manager import Manager
from .vector import Vector
from .world_manager import WM

FRAME_TIME_DEFAULT = 33


class GameManager(Manager):
    """Starts the other managers and runs the game loop.

    ``frame_time`` is the target time per loop in milliseconds.
    """

    def __init__(
        self,
        *,
        log: Optional[Any] = None,
        world: Optional[Any] = None,
        display: Optional[Any] = None,
        input_manager: Optional[Any] = None,
        frame_time: int = FRAME_TIME_DEFAULT,
        sleep: Callable[[float], None] = time.sleep,
        clock_factory: Callable[[], Clock] = Clock,
    ) -> None:
        super().__init__("GameManager")
        self._log = log if log is not None else LM
        self._world = world if world is not None else WM
        self._display = display if display is not None else DM
        self._input = input_manager if input_manager is not None else IM
        self._frame_time = frame_time
        self._sleep = sleep
        self._clock_factory = clock_factory
        self._game_over = False

    @property
    def frame_time(self) -> int:
        """Target time per game loop in milliseconds."""
        return self._frame_time

    @property
    def game_over(self) -> bool:
        """True once the game loop should stop."""
        return self._game_over

    def set_game_over(self, game_over: bool = True) -> None:
        """Stop (or allow) the game loop."""
        self._game_over = game_over

    def start_up(self) -> None:
        """Start the log, world, display and input managers, in that order.

        Any failure is raised as the starting manager raised it.
        """
        self._log.start_up()
        self._world.start_up()
        self._display.start_up()
        self._input.start_up()
        horizontal, vertical = self._display.horizontal, self._display.vertical
        self._world.boundary = Box(Vector(0, 0), horizontal, vertical)
        self._world.view = Box(Vector(0, 0), horizontal, vertical)
        self._game_over = False
        super().start_up()
        self._log.write_log(
            "GameManager, LogManager, WorldManager, DisplayManager, and InputManager started up\n"
        )

    def shut_down(self) -> None:
        """End the game and shut every manager down in reverse order."""
        self._log.write_log("GameManager shutting down...\n")
        self.set_game_over(True)
        self._input.shut_down()
        self._display.shut_down()
        self._world.shut_down()
        self._log.shut_down()
        super().shut_down()

    def run(self) -> int:
        """Run the game loop until the game is over; return the number of steps run."""
        clock = self._clock_factory()
        step_count = 0
        while not self._game_over:
            clock.delta()
            self._world.on_event(EventStep(step_count=step_count))
            self._log.write_log("Step count: %d\n", step_count)
            self._input.get_input()
            self._world.update()
            self._world.draw()
            self._display.swap_buffers()
            loop_time = clock.split()
            sleep_time = self._frame_time * 1000 - loop_time
            if sleep_time > 0:
                self._sleep(sleep_time / 1_000_000)
            step_count += 1
        return step_count


GM = GameManager()