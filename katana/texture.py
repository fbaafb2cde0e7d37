"""Textures backed by pygame surfaces."""

from __future__ import annotations

from typing import Any

import pygame

from katana.resource import Resource, ResourceLoadError

__all__ = ["Texture"]


class Texture(Resource):
    """A 2D grid of texels."""

    def __init__(self) -> None:
        super().__init__()
        self._surface: pygame.Surface | None = None
        self._width = 0
        self._height = 0
        self._size = pygame.math.Vector2(0, 0)
        self._center = pygame.math.Vector2(0, 0)

    def load(self, path: str, manager: Any) -> None:
        """Load an image file into the texture."""
        try:
            surface = pygame.image.load(str(path))
        except (pygame.error, OSError) as exc:
            raise ResourceLoadError(f"cannot load texture {path!r}: {exc}") from exc
        self.set_surface(surface)

    def set_surface(self, surface: pygame.Surface | None) -> None:
        """Use surface as the texture; None leaves the texture as it was."""
        if surface is None:
            return
        self._surface = surface
        self._width, self._height = surface.get_size()
        self._size = pygame.math.Vector2(self._width, self._height)
        self._center = self._size / 2

    @property
    def surface(self) -> pygame.Surface | None:
        """The underlying surface, or None before one is set."""
        return self._surface

    @property
    def width(self) -> int:
        """Width in pixels."""
        return self._width

    @property
    def height(self) -> int:
        """Height in pixels."""
        return self._height

    @property
    def size(self) -> pygame.math.Vector2:
        """Width and height as a vector."""
        return pygame.math.Vector2(self._size)

    @property
    def center(self) -> pygame.math.Vector2:
        """Centre of the texture."""
        return pygame.math.Vector2(self._center)

    def is_cloneable(self) -> bool:
        """Textures hold no state worth cloning."""
        return False