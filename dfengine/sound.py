"""Sound effects and music."""

from __future__ import annotations

import os
from typing import ClassVar, Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402


def _ensure_mixer() -> None:
    if not pygame.mixer.get_init():
        try:
            pygame.mixer.init()
        except pygame.error as exc:
            raise OSError(f"unable to open audio device: {exc}") from exc


def _check_file(filename: str) -> None:
    if not os.path.isfile(filename):
        raise FileNotFoundError(f"no such sound file: {filename!r}")


class Sound:
    """A labelled sound effect held in memory."""

    def __init__(self, label: str = "") -> None:
        self.label = label
        self._sound: Optional[pygame.mixer.Sound] = None
        self._channel: Optional[pygame.mixer.Channel] = None

    @property
    def is_loaded(self) -> bool:
        return self._sound is not None

    @property
    def sound(self) -> Optional[pygame.mixer.Sound]:
        """The underlying pygame sound, or None if not loaded."""
        return self._sound

    def load(self, filename: str) -> None:
        """Load the sound from ``filename``; raise OSError on failure."""
        _check_file(filename)
        _ensure_mixer()
        try:
            self._sound = pygame.mixer.Sound(filename)
        except pygame.error as exc:
            raise OSError(f"unable to load sound {filename!r}: {exc}") from exc
        self._channel = None

    def play(self, loop: bool = False) -> None:
        """Play the sound, repeating it when ``loop`` is set."""
        if self._sound is not None:
            self._channel = self._sound.play(loops=-1 if loop else 0)

    def stop(self) -> None:
        """Stop the sound."""
        if self._sound is not None:
            self._sound.stop()
            self._channel = None

    def pause(self) -> None:
        """Pause the sound."""
        if self._channel is not None:
            self._channel.pause()


class Music:
    """A labelled piece of music streamed from a file."""

    _current: ClassVar[Optional["Music"]] = None

    def __init__(self, label: str = "") -> None:
        self.label = label
        self._filename: Optional[str] = None
        self._paused = False

    @property
    def is_loaded(self) -> bool:
        return self._filename is not None

    @property
    def filename(self) -> Optional[str]:
        """The associated music file, or None."""
        return self._filename

    def load(self, filename: str) -> None:
        """Associate the music with ``filename``; raise FileNotFoundError if absent."""
        _check_file(filename)
        self._filename = filename
        self._paused = False

    def _is_current(self) -> bool:
        return Music._current is self and bool(pygame.mixer.get_init())

    def play(self, loop: bool = True) -> None:
        """Play the music, repeating it when ``loop`` is set; resume if paused."""
        if self._filename is None:
            return
        if self._is_current() and self._paused:
            pygame.mixer.music.unpause()
            self._paused = False
            return
        _ensure_mixer()
        try:
            pygame.mixer.music.load(self._filename)
        except pygame.error as exc:
            raise OSError(f"unable to load music {self._filename!r}: {exc}") from exc
        pygame.mixer.music.play(loops=-1 if loop else 0)
        Music._current = self
        self._paused = False

    def stop(self) -> None:
        """Stop the music."""
        if self._is_current():
            pygame.mixer.music.stop()
        self._paused = False

    def pause(self) -> None:
        """Pause the music."""
        if self._is_current():
            pygame.mixer.music.pause()
            self._paused = True