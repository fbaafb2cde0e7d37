"""Audio samples played through the pygame mixer."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pygame

from katana import mathutil
from katana.resource import Resource, ResourceLoadError

__all__ = ["AudioSample"]


def _ensure_mixer() -> None:
    if not pygame.mixer.get_init():
        pygame.mixer.init()


class AudioSample(Resource):
    """A sound sample with a volume and a loop setting."""

    def __init__(self) -> None:
        super().__init__()
        self._sound: pygame.mixer.Sound | None = None
        self._looping = False
        self._volume = 1.0

    @staticmethod
    def reserve_samples(count: int) -> None:
        """Reserve count channels on the mixer."""
        _ensure_mixer()
        pygame.mixer.set_num_channels(count)

    def load(self, path: str, manager: Any) -> None:
        """Load a sound file into the sample."""
        if not Path(path).is_file():
            raise ResourceLoadError(f"cannot load sample {path!r}: no such file")
        try:
            _ensure_mixer()
            sound = pygame.mixer.Sound(str(path))
        except pygame.error as exc:
            raise ResourceLoadError(f"cannot load sample {path!r}: {exc}") from exc
        self._sound = sound

    def is_cloneable(self) -> bool:
        """Audio samples may be cloned."""
        return True

    @property
    def is_loaded(self) -> bool:
        """Whether a sound has been loaded."""
        return self._sound is not None

    @property
    def looping(self) -> bool:
        """Whether the sample loops when played."""
        return self._looping

    @property
    def volume(self) -> float:
        """Playback volume; 1.0 is normal volume."""
        return self._volume

    def play(self) -> bool:
        """Start the sample; return False when no channel was free."""
        if self._sound is None:
            raise RuntimeError("no sample has been loaded")
        self._sound.set_volume(self._volume)
        channel = self._sound.play(loops=-1 if self._looping else 0)
        return channel is not None

    def set_looping(self, loop: bool = True) -> None:
        """Set whether the sample loops."""
        self._looping = bool(loop)

    def set_volume(self, volume: float) -> None:
        """Set the volume, held to [0, 1]."""
        self._volume = mathutil.clamp(0.0, 1.0, float(volume))