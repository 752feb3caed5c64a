"""Base class for the engine's managers."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional


class ManagerError(Exception):
    """Raised when a manager cannot start up or do its work."""


class Manager:
    """A service with a start-up / shut-down life cycle.

    ``event_targets`` is a callable returning the objects that
    :meth:`on_event` delivers events to; without it, no objects receive events.
    """

    def __init__(
        self,
        type_name: str = "Manager",
        event_targets: Optional[Callable[[], Iterable[Any]]] = None,
    ) -> None:
        self._type = type_name
        self._started = False
        self._event_targets = event_targets

    @property
    def type(self) -> str:
        """Type identifier of the manager."""
        return self._type

    @property
    def is_started(self) -> bool:
        """True once start_up() succeeded and until shut_down()."""
        return self._started

    def start_up(self) -> None:
        """Start the manager; raise ManagerError on failure."""
        self._started = True

    def shut_down(self) -> None:
        """Stop the manager."""
        self._started = False

    def event_targets(self) -> Iterable[Any]:
        """Return the objects that on_event() sends events to."""
        if self._event_targets is None:
            return ()
        return self._event_targets()

    def on_event(self, event: Any) -> int:
        """Send ``event`` to every target object; return how many received it."""
        count = 0
        for obj in list(self.event_targets()):
            obj.event_handler(event)
            count += 1
        return count

    def __enter__(self) -> "Manager":
        self.start_up()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shut_down()