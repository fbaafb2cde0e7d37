"""Textures that drawing can be redirected to."""

from __future__ import annotations

from typing import Any

import pygame

from katana.texture import Texture

__all__ = ["RenderTarget"]


class RenderTarget(Texture):
    """A texture that can stand in for the display as the drawing target."""

    _display: pygame.Surface | None = None
    _target: RenderTarget | None = None

    def __init__(self, width: int, height: int) -> None:
        super().__init__()
        self.set_surface(pygame.Surface((width, height), pygame.SRCALPHA))

    @staticmethod
    def set(target: RenderTarget | None) -> None:
        """Draw to target from now on; None draws to the display again."""
        RenderTarget._target = target

    @staticmethod
    def set_display(display: pygame.Surface | None) -> None:
        """Set the display surface used when no render target is set."""
        RenderTarget._display = display

    @staticmethod
    def current() -> pygame.Surface | None:
        """The surface drawing currently goes to."""
        if RenderTarget._target is not None:
            return RenderTarget._target.surface
        return RenderTarget._display

    def load(self, path: str, manager: Any) -> None:
        """Render targets have nothing to load."""