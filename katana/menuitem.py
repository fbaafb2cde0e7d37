"""Items shown on a menu screen."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

import pygame

from katana.color import Color
from katana.spritebatch import TextAlign

__all__ = ["MenuItem"]


@dataclass(eq=False)
class MenuItem:
    """A line of text on a menu that runs on_select when picked."""

    text: str = "Menu Item"
    on_select: Callable[[], None] | None = None
    index: int = 0
    is_selected: bool = False
    is_displayed: bool = True
    font: Any = None
    color: Color = field(default_factory=lambda: Color.BLACK)
    alpha: float = 1.0
    position: pygame.math.Vector2 = field(default_factory=pygame.math.Vector2)
    text_offset: pygame.math.Vector2 = field(default_factory=pygame.math.Vector2)
    text_align: TextAlign = TextAlign.LEFT
    menu_screen: Any = None

    def update(self, game_time: Any) -> None:
        """Run the item's logic for one frame."""

    def draw(self, sprite_batch: Any) -> None:
        """Draw the item's text when it has a font and some text."""
        if self.font is not None and self.text:
            sprite_batch.draw_string(
                self.font,
                self.text,
                pygame.math.Vector2(self.position) + self.text_offset,
                self.color * self.alpha,
                self.text_align,
            )

    def select(self, menu_screen: Any) -> None:
        """Run the selection callback, if there is one."""
        if self.on_select is not None:
            self.on_select()