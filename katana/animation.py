"""Frame-based texture animations loaded from simple text files."""

from __future__ import annotations

import re
from typing import Any

import pygame

from katana.resource import Resource, ResourceLoadError, split_line, strip_comment, trim_line
from katana.texture import Texture

__all__ = ["Animation", "DEFAULT_SECONDS_PER_FRAME"]

DEFAULT_SECONDS_PER_FRAME = 0.6

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _leading_int(text: str) -> int:
    """Read the integer at the start of text, or 0 when there is none."""
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _leading_float(text: str) -> float:
    """Read the number at the start of text, or 0.0 when there is none."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


class Animation(Resource):
    """Timing and framing values for an animation on a sprite sheet.

    The file format is one value per line, with '//' comments allowed:
    the sprite sheet path, the seconds each frame lasts, and then one
    'x, y, width, height' line per frame.
    """

    def __init__(self) -> None:
        super().__init__()
        self._frames: list[pygame.Rect] = []
        self.texture: Any = None
        self._seconds_per_frame = DEFAULT_SECONDS_PER_FRAME
        self._current_frame_time = self._seconds_per_frame
        self._current_index = 0
        self._loop_counter = -1
        self._is_playing = True

    def update(self, game_time: Any) -> None:
        """Advance the animation by the time elapsed since the last frame."""
        if not self._is_playing:
            return
        self._current_frame_time -= game_time.elapsed_time
        if self._current_frame_time > 0:
            return
        self._current_index += 1
        self._current_frame_time = self._seconds_per_frame
        if self._current_index == len(self._frames):
            if self._loop_counter > 0:
                self._loop_counter -= 1
                self._current_index = 0
            elif self._loop_counter == 0:
                self.stop()
            else:
                self._current_index = 0

    def load(self, path: str, manager: Any) -> None:
        """Read an animation file; the sprite sheet is loaded through manager."""
        try:
            with open(path, encoding="utf-8") as handle:
                lines = handle.read().splitlines()
        except OSError as exc:
            raise ResourceLoadError(f"cannot load animation {path!r}: {exc}") from exc

        loading_sheet = True
        loading_frame_time = True
        frames: list[pygame.Rect] = []

        for number, raw in enumerate(lines, start=1):
            line = trim_line(strip_comment(raw))
            if not line:
                continue
            if loading_sheet:
                self.texture = manager.load(Texture, line)
                loading_sheet = False
            elif loading_frame_time:
                self._seconds_per_frame = _leading_float(line)
                self._current_frame_time = self._seconds_per_frame
                loading_frame_time = False
            else:
                fields = split_line(line, ",")
                if len(fields) < 4:
                    raise ResourceLoadError(
                        f"{path}:{number}: a frame needs x, y, width and height"
                    )
                x, y, width, height = (_leading_int(field) for field in fields[:4])
                frames.append(pygame.Rect(x, y, width, height))

        self._frames.extend(frames)

    def is_cloneable(self) -> bool:
        """Animations are cloned so that each user has its own playback state."""
        return True

    def clone(self) -> Animation:
        """Return a new animation sharing the texture and frames but not the state."""
        copy = Animation()
        copy.texture = self.texture
        copy._frames = list(self._frames)
        copy._seconds_per_frame = self._seconds_per_frame
        copy._is_playing = self._is_playing
        copy._current_frame_time = self._current_frame_time
        copy._current_index = self._current_index
        return copy

    @property
    def frames(self) -> tuple[pygame.Rect, ...]:
        """All frames, in playing order."""
        return tuple(self._frames)

    @property
    def seconds_per_frame(self) -> float:
        """How long each frame is shown."""
        return self._seconds_per_frame

    @property
    def current_frame(self) -> pygame.Rect:
        """The region of the sprite sheet for the current frame."""
        return self._frames[self._current_index]

    @property
    def current_index(self) -> int:
        """Index of the current frame."""
        return self._current_index

    def frame(self, index: int) -> pygame.Rect:
        """The region of the sprite sheet for the frame at index."""
        return self._frames[index]

    def set_current_frame(self, index: int) -> None:
        """Jump to the frame at index; an index out of range is ignored."""
        if 0 <= index < len(self._frames):
            self._current_index = index
            self._current_frame_time = self._seconds_per_frame

    def is_playing(self) -> bool:
        """Whether the animation is advancing."""
        return self._is_playing

    def play(self) -> None:
        """Start or resume the animation."""
        self._is_playing = True

    def pause(self) -> None:
        """Pause the animation on its current frame."""
        self._is_playing = False

    def stop(self) -> None:
        """Pause the animation and rewind it to the first frame."""
        self.pause()
        self.set_current_frame(0)

    def set_loop_count(self, loops: int = -1) -> None:
        """Set how many more times the animation loops; -1 loops forever."""
        self._loop_counter = loops