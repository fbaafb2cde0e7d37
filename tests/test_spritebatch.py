import math

import pygame
import pytest

from katana.animation import Animation
from katana.color import Color
from katana.rendertarget import RenderTarget
from katana.spritebatch import BlendState, SpriteBatch, SpriteSortMode, TextAlign
from katana.texture import Texture

BLACK = (0, 0, 0)
RED = (255, 0, 0)
BLUE = (0, 0, 255)
GREEN = (0, 255, 0)


class FakeFont:
    def render(self, text, color):
        surface = pygame.Surface((len(text) * 4, 6), pygame.SRCALPHA)
        surface.fill((0, 255, 0, 255))
        return surface


def make_texture(width, height, rgb):
    surface = pygame.Surface((width, height), pygame.SRCALPHA)
    surface.fill((*rgb, 255))
    texture = Texture()
    texture.set_surface(surface)
    return texture


def pixel(surface, x, y):
    return tuple(surface.get_at((x, y)))[:3]


@pytest.fixture
def target():
    surface = pygame.Surface((20, 20), pygame.SRCALPHA)
    surface.fill((0, 0, 0, 255))
    RenderTarget.set(None)
    RenderTarget.set_display(surface)
    yield surface
    RenderTarget.set_display(None)


def test_draw_outside_batch_raises(target):
    batch = SpriteBatch()
    with pytest.raises(RuntimeError):
        batch.draw(make_texture(4, 4, RED), (0, 0))


def test_batch_settings(target):
    batch = SpriteBatch()
    with pytest.raises(RuntimeError):
        batch.batch_settings()
    batch.begin(SpriteSortMode.BACK_TO_FRONT, BlendState.ADDITIVE)
    assert batch.batch_settings() == (SpriteSortMode.BACK_TO_FRONT, BlendState.ADDITIVE, None)
    batch.end()
    assert batch.is_started is False


def test_deferred_draws_on_end(target):
    batch = SpriteBatch()
    batch.begin()
    batch.draw(make_texture(4, 4, RED), (2, 2))
    assert pixel(target, 3, 3) == BLACK
    batch.end()
    assert pixel(target, 3, 3) == RED
    assert pixel(target, 2, 2) == RED
    assert pixel(target, 6, 6) == BLACK
    assert pixel(target, 1, 1) == BLACK


def test_immediate_draws_at_once(target):
    batch = SpriteBatch()
    batch.begin(SpriteSortMode.IMMEDIATE)
    batch.draw(make_texture(4, 4, RED), (2, 2))
    assert pixel(target, 3, 3) == RED
    batch.end()


@pytest.mark.parametrize(
    "mode, expected",
    [
        (SpriteSortMode.BACK_TO_FRONT, RED),
        (SpriteSortMode.FRONT_TO_BACK, BLUE),
        (SpriteSortMode.DEFERRED, BLUE),
        (SpriteSortMode.TEXTURE, BLUE),
    ],
)
def test_sort_modes(target, mode, expected):
    batch = SpriteBatch()
    batch.begin(mode)
    batch.draw(make_texture(4, 4, RED), (0, 0), draw_depth=1)
    batch.draw(make_texture(4, 4, BLUE), (0, 0), draw_depth=0)
    batch.end()
    assert pixel(target, 1, 1) == expected


def test_region(target):
    surface = pygame.Surface((8, 4), pygame.SRCALPHA)
    surface.fill((255, 0, 0, 255), pygame.Rect(0, 0, 4, 4))
    surface.fill((0, 0, 255, 255), pygame.Rect(4, 0, 4, 4))
    texture = Texture()
    texture.set_surface(surface)
    batch = SpriteBatch()
    batch.begin()
    batch.draw(texture, (0, 0), (4, 0, 4, 4))
    batch.end()
    assert pixel(target, 1, 1) == BLUE
    assert pixel(target, 4, 1) == BLACK


def test_origin_is_placed_at_position(target):
    batch = SpriteBatch()
    batch.begin()
    batch.draw(make_texture(4, 4, RED), (10, 10), origin=(2, 2))
    batch.end()
    assert pixel(target, 8, 8) == RED
    assert pixel(target, 11, 11) == RED
    assert pixel(target, 7, 7) == BLACK
    assert pixel(target, 12, 12) == BLACK


def test_scale(target):
    batch = SpriteBatch()
    batch.begin()
    batch.draw(make_texture(4, 4, RED), (0, 0), scale=(2, 2))
    batch.end()
    assert pixel(target, 7, 7) == RED
    assert pixel(target, 8, 8) == BLACK


def test_rotation_is_clockwise(target):
    batch = SpriteBatch()
    batch.begin()
    batch.draw(make_texture(4, 2, RED), (10, 10), rotation=math.pi / 2)
    batch.end()
    assert pixel(target, 9, 12) == RED
    assert pixel(target, 12, 11) == BLACK


def test_tint(target):
    batch = SpriteBatch()
    batch.begin()
    batch.draw(make_texture(4, 4, (255, 255, 255)), (0, 0), color=Color.RED)
    batch.end()
    assert pixel(target, 1, 1) == RED


def test_additive_blend(target):
    target.fill((100, 0, 0, 255))
    batch = SpriteBatch()
    batch.begin(blend_state=BlendState.ADDITIVE)
    batch.draw(make_texture(4, 4, (100, 0, 0)), (0, 0))
    batch.end()
    assert pixel(target, 1, 1) == (200, 0, 0)
    assert pixel(target, 6, 6) == (100, 0, 0)


def test_transformation_moves_positions(target):
    batch = SpriteBatch()
    batch.begin(transformation=lambda p: p + pygame.math.Vector2(5, 5))
    batch.draw(make_texture(2, 2, RED), (0, 0))
    batch.end()
    assert pixel(target, 5, 5) == RED
    assert pixel(target, 0, 0) == BLACK


def test_draw_without_target_raises():
    RenderTarget.set(None)
    RenderTarget.set_display(None)
    batch = SpriteBatch()
    batch.begin(SpriteSortMode.IMMEDIATE)
    with pytest.raises(RuntimeError):
        batch.draw(make_texture(2, 2, RED), (0, 0))


def test_draw_string_alignment(target):
    batch = SpriteBatch()
    batch.begin()
    batch.draw_string(FakeFont(), "ab", (10, 0), alignment=TextAlign.CENTER)
    batch.draw_string(FakeFont(), "ab", (10, 10), alignment=TextAlign.RIGHT)
    batch.end()
    assert pixel(target, 7, 2) == GREEN
    assert pixel(target, 5, 2) == BLACK
    assert pixel(target, 3, 12) == GREEN
    assert pixel(target, 11, 12) == BLACK


def test_draw_string_newlines_and_wrapping(target):
    batch = SpriteBatch()
    batch.begin()
    batch.draw_string(FakeFont(), "a\nb", (0, 0))
    batch.draw_string(FakeFont(), "aaaa bbbb", (0, 12))
    batch.end()
    assert pixel(target, 1, 8) == GREEN
    assert pixel(target, 2, 19) == GREEN
    assert pixel(target, 18, 14) == BLACK


def test_draw_animation_uses_current_frame(target, tmp_path):
    surface = pygame.Surface((8, 4), pygame.SRCALPHA)
    surface.fill((255, 0, 0, 255), pygame.Rect(0, 0, 4, 4))
    surface.fill((0, 0, 255, 255), pygame.Rect(4, 0, 4, 4))
    texture = Texture()
    texture.set_surface(surface)

    class Manager:
        def load(self, resource_type, path):
            return texture

    path = tmp_path / "anim.txt"
    path.write_text("sheet.png\n0.1\n0,0,4,4\n4,0,4,4\n", encoding="utf-8")
    animation = Animation()
    animation.load(str(path), Manager())
    animation.set_current_frame(1)

    batch = SpriteBatch()
    batch.begin()
    batch.draw_animation(animation, (0, 0))
    batch.end()
    assert pixel(target, 1, 1) == BLUE