"""Fonts loaded from font files or from bitmap glyph sheets."""

from __future__ import annotations

from typing import Any, Sequence

import pygame

from katana.color import Color
from katana.resource import Resource, ResourceLoadError
from katana.texture import Texture

__all__ = ["Font", "DEFAULT_LOAD_SIZE", "DEFAULT_CHARACTER_RANGES"]

DEFAULT_LOAD_SIZE = 16
DEFAULT_CHARACTER_RANGES: tuple[tuple[int, int], ...] = ((32, 126),)


class _SystemFace:
    """A face rendered by the pygame font engine."""

    def __init__(self, path: str, size: int) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        self._font = pygame.font.Font(path, size)

    @property
    def line_height(self) -> int:
        return self._font.get_linesize()

    def text_width(self, text: str) -> int:
        return self._font.size(text)[0]

    def render(self, text: str, color: Color) -> pygame.Surface:
        red, green, blue, alpha = color.to_rgba()
        image = self._font.render(text, True, (red, green, blue))
        if alpha < 255:
            image.set_alpha(alpha)
        return image


class _BitmapFace:
    """A face made of glyphs cut from a bitmap."""

    def __init__(self, glyphs: dict[str, pygame.Surface]) -> None:
        self._glyphs = glyphs
        self._line_height = max((g.get_height() for g in glyphs.values()), default=0)

    @property
    def line_height(self) -> int:
        return self._line_height

    def text_width(self, text: str) -> int:
        return sum(self._glyphs[c].get_width() for c in text if c in self._glyphs)

    def render(self, text: str, color: Color) -> pygame.Surface:
        image = pygame.Surface((self.text_width(text), self._line_height), pygame.SRCALPHA)
        x = 0
        for character in text:
            glyph = self._glyphs.get(character)
            if glyph is None:
                continue
            image.blit(glyph, (x, 0))
            x += glyph.get_width()
        if color != Color.WHITE:
            image.fill(color.to_rgba(), special_flags=pygame.BLEND_RGBA_MULT)
        return image


def _grab_glyphs(surface: pygame.Surface) -> list[pygame.Rect]:
    """Find glyph boxes separated by the colour of the top-left pixel, row by row."""
    border = surface.get_at((0, 0))
    width, height = surface.get_size()

    def filled(x: int, y: int) -> bool:
        return surface.get_at((x, y)) != border

    boxes: list[pygame.Rect] = []
    y = 0
    while y < height:
        if not any(filled(x, y) for x in range(width)):
            y += 1
            continue
        row_height = 1
        x = 0
        while x < width:
            if not filled(x, y):
                x += 1
                continue
            left = x
            while x < width and filled(x, y):
                x += 1
            bottom = y
            while bottom < height and filled(left, bottom):
                bottom += 1
            boxes.append(pygame.Rect(left, y, x - left, bottom - y))
            row_height = max(row_height, bottom - y)
        y += row_height
    return boxes


class Font(Resource):
    """A font read from a font file, or from a bitmap sheet of glyphs."""

    _load_size: int = DEFAULT_LOAD_SIZE
    _restore_size: int = 0
    _ranges: list[tuple[int, int]] | None = None

    def __init__(self) -> None:
        super().__init__()
        self._face: _SystemFace | _BitmapFace | None = None

    @staticmethod
    def set_load_size(size: int, restore: bool = False) -> None:
        """Set the size of fonts loaded next; restore reverts it after the next load."""
        if restore:
            Font._restore_size = Font._load_size
        Font._load_size = size

    @staticmethod
    def set_character_range(ranges: Sequence[tuple[int, int]]) -> None:
        """Set the inclusive code point ranges of the next bitmap font's glyphs."""
        pairs = [(int(first), int(last)) for first, last in ranges]
        for first, last in pairs:
            if last < first:
                raise ValueError(f"range ({first}, {last}) ends before it starts")
        Font._ranges = pairs

    def load(self, path: str, manager: Any) -> None:
        """Load a font file, or a '.png' glyph sheet through manager."""
        path = str(path)
        is_bitmap = ".ttf" not in path and ".png" in path
        try:
            if is_bitmap:
                self._face = self._load_bitmap(path, manager)
            else:
                try:
                    self._face = _SystemFace(path, Font._load_size)
                except (pygame.error, OSError) as exc:
                    raise ResourceLoadError(f"cannot load font {path!r}: {exc}") from exc
        finally:
            if is_bitmap:
                Font._ranges = None
            if Font._restore_size > 0:
                Font._load_size = Font._restore_size
                Font._restore_size = 0

    @staticmethod
    def _load_bitmap(path: str, manager: Any) -> _BitmapFace:
        texture = manager.load(Texture, path)
        surface = getattr(texture, "surface", None)
        if surface is None:
            raise ResourceLoadError(f"cannot load font {path!r}: no bitmap")
        ranges = Font._ranges if Font._ranges is not None else DEFAULT_CHARACTER_RANGES
        characters = [chr(code) for first, last in ranges for code in range(first, last + 1)]
        boxes = _grab_glyphs(surface)
        if len(boxes) < len(characters):
            raise ResourceLoadError(
                f"cannot load font {path!r}: {len(boxes)} glyphs for "
                f"{len(characters)} characters"
            )
        glyphs: dict[str, pygame.Surface] = {}
        for character, box in zip(characters, boxes):
            glyph = pygame.Surface(box.size, pygame.SRCALPHA)
            glyph.blit(surface, (0, 0), box)
            glyphs[character] = glyph
        return _BitmapFace(glyphs)

    def _loaded_face(self) -> _SystemFace | _BitmapFace:
        if self._face is None:
            raise RuntimeError("no font has been loaded")
        return self._face

    @property
    def line_height(self) -> int:
        """Height of a line of text in pixels."""
        return self._loaded_face().line_height

    def text_width(self, text: str) -> int:
        """Width of text in pixels."""
        return self._loaded_face().text_width(text)

    def render(self, text: str, color: Color) -> pygame.Surface:
        """Render one line of text in color."""
        return self._loaded_face().render(text, color)

    def is_cloneable(self) -> bool:
        """Fonts hold no state worth cloning."""
        return False