"""The engine's log file."""

from __future__ import annotations

from typing import IO, Any, Optional

from .manager import Manager, ManagerError

LOGFILE_DEFAULT = "dragonfly.log"


class LogManager(Manager):
    """Writes printf-style formatted messages to a log file."""

    def __init__(self, filename: str = LOGFILE_DEFAULT, log_level: int = 0) -> None:
        super().__init__("LogManager")
        self.filename = filename
        self.log_level = log_level
        self._do_flush = False
        self._file: Optional[IO[str]] = None

    def start_up(self) -> None:
        """Open the log file for writing; raise ManagerError if it cannot be opened."""
        if self._file is not None:
            return
        try:
            self._file = open(self.filename, "w", encoding="utf-8")
        except OSError as exc:
            raise ManagerError(f"unable to open log file {self.filename!r}: {exc}") from exc
        super().start_up()
        self.write_log("LogManager started\n")

    def shut_down(self) -> None:
        """Close the log file."""
        if self._file is not None:
            self.write_log("LogManager shutting down\n")
            self._file.close()
            self._file = None
        super().shut_down()

    def set_flush(self, do_flush: bool = True) -> None:
        """Flush the file to disk after every write when ``do_flush`` is set."""
        self._do_flush = do_flush

    def _write(self, fmt: str, args: tuple[Any, ...]) -> int:
        if self._file is None:
            return 0
        text = fmt % args if args else fmt
        self._file.write(text)
        if self._do_flush:
            self._file.flush()
        return len(text.encode("utf-8"))

    def write_log(self, fmt: str, *args: Any) -> int:
        """Write a %-formatted message; return bytes written (0 if the log is not open)."""
        return self._write(fmt, args)

    def write_log_level(self, level: int, fmt: str, *args: Any) -> int:
        """Write only if ``level`` is at most this manager's log level."""
        if level > self.log_level:
            return 0
        return self._write(fmt, args)


LM = LogManager()