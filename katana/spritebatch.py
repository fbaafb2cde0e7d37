"""Batched drawing of sprites and text onto the current render target."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Sequence

import pygame

from katana.color import Color
from katana.rendertarget import RenderTarget

__all__ = ["TextAlign", "SpriteSortMode", "BlendState", "SpriteBatch"]

Transformation = Callable[[pygame.math.Vector2], Sequence[float]]


class TextAlign(Enum):
    """How text lines up against its position."""

    LEFT = 0
    CENTER = 1
    RIGHT = 2


class SpriteSortMode(Enum):
    """How sprites are ordered before they are drawn."""

    BACK_TO_FRONT = "back_to_front"
    DEFERRED = "deferred"
    FRONT_TO_BACK = "front_to_back"
    IMMEDIATE = "immediate"
    TEXTURE = "texture"


class BlendState(Enum):
    """How drawn pixels combine with what is already there."""

    ALPHA = "alpha"
    ADDITIVE = "additive"


@dataclass
class _Sprite:
    surface: pygame.Surface
    region: pygame.Rect
    color: Color
    x: int
    y: int
    origin_x: int
    origin_y: int
    scale_x: float
    scale_y: float
    rotation: float
    depth: float


@dataclass
class _Text:
    font: Any
    text: str
    align: TextAlign
    color: Color
    x: int
    y: int
    depth: float


class SpriteBatch:
    """Collects sprites and text drawn between begin() and end()."""

    def __init__(self) -> None:
        self._drawables: list[_Sprite | _Text] = []
        self._sort_mode = SpriteSortMode.DEFERRED
        self._blend_state = BlendState.ALPHA
        self._transformation: Transformation | None = None
        self._is_started = False

    @property
    def is_started(self) -> bool:
        """Whether begin() has been called without a matching end()."""
        return self._is_started

    def begin(
        self,
        sort_mode: SpriteSortMode = SpriteSortMode.DEFERRED,
        blend_state: BlendState = BlendState.ALPHA,
        transformation: Transformation | None = None,
    ) -> None:
        """Start a batch; transformation maps draw positions to screen positions."""
        self._is_started = True
        self._drawables.clear()
        self._sort_mode = sort_mode
        self._blend_state = blend_state
        self._transformation = transformation

    def end(self) -> None:
        """Draw everything batched since begin() and close the batch."""
        if self._sort_mode is not SpriteSortMode.IMMEDIATE:
            items = self._drawables
            if self._sort_mode is SpriteSortMode.BACK_TO_FRONT:
                items = sorted(items, key=lambda item: item.depth)
            elif self._sort_mode is SpriteSortMode.FRONT_TO_BACK:
                items = sorted(items, key=lambda item: item.depth, reverse=True)
            for item in items:
                self._render(item)
        self._drawables.clear()
        self._transformation = None
        self._is_started = False

    def draw_string(
        self,
        font: Any,
        text: str,
        position: Sequence[float],
        color: Color | None = None,
        alignment: TextAlign = TextAlign.LEFT,
        draw_depth: float = 0,
    ) -> None:
        """Add text to the batch; font must offer render(text, color) -> Surface."""
        self._require_started()
        item = _Text(
            font=font,
            text=str(text),
            align=alignment,
            color=color if color is not None else Color.WHITE,
            x=int(position[0]),
            y=int(position[1]),
            depth=draw_depth,
        )
        self._submit(item)

    def draw(
        self,
        texture: Any,
        position: Sequence[float],
        region: Any = None,
        color: Color | None = None,
        origin: Sequence[float] | None = None,
        scale: Sequence[float] | None = None,
        rotation: float = 0,
        draw_depth: float = 0,
    ) -> None:
        """Add a texture, or the region of it given, to the batch.

        The origin is the point of the region placed at position, and the
        point that rotation (in radians, clockwise) turns about.
        """
        self._require_started()
        surface = texture.surface
        if surface is None:
            raise ValueError("the texture has no surface to draw")
        rect = surface.get_rect() if region is None else pygame.Rect(region)
        origin = origin if origin is not None else (0, 0)
        scale = scale if scale is not None else (1, 1)
        item = _Sprite(
            surface=surface,
            region=rect,
            color=color if color is not None else Color.WHITE,
            x=int(position[0]),
            y=int(position[1]),
            origin_x=int(origin[0]),
            origin_y=int(origin[1]),
            scale_x=float(scale[0]),
            scale_y=float(scale[1]),
            rotation=float(rotation),
            depth=draw_depth,
        )
        self._submit(item)

    def draw_animation(
        self,
        animation: Any,
        position: Sequence[float],
        color: Color | None = None,
        origin: Sequence[float] | None = None,
        scale: Sequence[float] | None = None,
        rotation: float = 0,
        draw_depth: float = 0,
    ) -> None:
        """Add the current frame of an animation to the batch."""
        self.draw(
            animation.texture,
            position,
            animation.current_frame,
            color,
            origin,
            scale,
            rotation,
            draw_depth,
        )

    def batch_settings(self) -> tuple[SpriteSortMode, BlendState, Transformation | None]:
        """The sort mode, blend state and transformation of the open batch."""
        if not self._is_started:
            raise RuntimeError("begin must be called before the settings can be retrieved")
        return self._sort_mode, self._blend_state, self._transformation

    def _require_started(self) -> None:
        if not self._is_started:
            raise RuntimeError("begin must be called before a draw function can be run")

    def _submit(self, item: _Sprite | _Text) -> None:
        if self._sort_mode is SpriteSortMode.IMMEDIATE:
            self._render(item)
        else:
            self._drawables.append(item)

    def _render(self, item: _Sprite | _Text) -> None:
        target = RenderTarget.current()
        if target is None:
            raise RuntimeError("there is no render target or display to draw to")
        if isinstance(item, _Sprite):
            self._render_sprite(target, item)
        else:
            self._render_text(target, item)

    def _place(self, x: float, y: float) -> pygame.math.Vector2:
        if self._transformation is None:
            return pygame.math.Vector2(x, y)
        moved = self._transformation(pygame.math.Vector2(x, y))
        return pygame.math.Vector2(moved[0], moved[1])

    def _blit(self, target: pygame.Surface, image: pygame.Surface, dest: tuple[int, int]) -> None:
        flags = pygame.BLEND_ADD if self._blend_state is BlendState.ADDITIVE else 0
        target.blit(image, dest, special_flags=flags)

    def _render_sprite(self, target: pygame.Surface, item: _Sprite) -> None:
        region = item.region.clip(item.surface.get_rect())
        if region.width <= 0 or region.height <= 0:
            return
        image = item.surface.subsurface(region).copy()
        if item.color != Color.WHITE:
            image.fill(item.color.to_rgba(), special_flags=pygame.BLEND_RGBA_MULT)

        width = round(abs(region.width * item.scale_x))
        height = round(abs(region.height * item.scale_y))
        if width == 0 or height == 0:
            return
        if (width, height) != image.get_size():
            image = pygame.transform.scale(image, (width, height))
        if item.scale_x < 0 or item.scale_y < 0:
            image = pygame.transform.flip(image, item.scale_x < 0, item.scale_y < 0)

        offset = pygame.math.Vector2(
            (item.origin_x - region.width / 2) * item.scale_x,
            (item.origin_y - region.height / 2) * item.scale_y,
        )
        if item.rotation:
            degrees = math.degrees(item.rotation)
            image = pygame.transform.rotate(image, -degrees)
            offset = offset.rotate(degrees)

        center = self._place(item.x, item.y) - offset
        top_left = center - pygame.math.Vector2(image.get_size()) / 2
        self._blit(target, image, (round(top_left.x), round(top_left.y)))

    def _render_text(self, target: pygame.Surface, item: _Text) -> None:
        lines = _wrap(item.font, item.text, item.color, target.get_width())
        position = self._place(item.x, item.y)
        y = position.y
        for line in lines:
            image = item.font.render(line, item.color)
            left = position.x
            if item.align is TextAlign.CENTER:
                left -= image.get_width() / 2
            elif item.align is TextAlign.RIGHT:
                left -= image.get_width()
            self._blit(target, image, (math.floor(left), round(y)))
            y += image.get_height()


def _wrap(font: Any, text: str, color: Color, max_width: int) -> list[str]:
    """Break text at newlines, and between words where a line grows too wide."""
    lines: list[str] = []
    for paragraph in text.split("\n"):
        current = ""
        for word in paragraph.split(" "):
            candidate = word if not current else f"{current} {word}"
            if current and font.render(candidate, color).get_width() > max_width:
                lines.append(current)
                current = word
            else:
                current = candidate
        lines.append(current)
    return lines