# katana

Building blocks for two-dimensional games on pygame: a sprite batch with
depth sorting and render targets, frame animations read from text files,
fonts from font files or bitmap glyph sheets, keyboard, mouse and game pad
input, audio samples, a particle pool, menu items, and maths and colour
helpers.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Drawing sprites

`SpriteBatch` collects what you draw between `begin()` and `end()` and
draws it to the current target: the display set with
`RenderTarget.set_display`, or a `RenderTarget` chosen with
`RenderTarget.set`.

```python
import pygame

from katana.color import Color
from katana.rendertarget import RenderTarget
from katana.spritebatch import SpriteBatch, SpriteSortMode
from katana.texture import Texture

pygame.init()
display = pygame.display.set_mode((800, 600))
RenderTarget.set_display(display)

hero = Texture()
hero.load("hero.png", None)

batch = SpriteBatch()
batch.begin(SpriteSortMode.BACK_TO_FRONT)
batch.draw(hero, (100, 100), color=Color.RED, draw_depth=1)
batch.draw(hero, (120, 100), origin=hero.center, rotation=0.5)
batch.end()
pygame.display.flip()
```

- Sort modes: `DEFERRED` draws in call order, `BACK_TO_FRONT` by rising
  depth, `FRONT_TO_BACK` by falling depth, `IMMEDIATE` draws at once.
- `BlendState.ADDITIVE` adds pixels instead of alpha blending.
- `begin()` takes an optional transformation: a function from a draw
  position to a screen position.
- `draw_string()` draws text with any font offering `render(text, color)`,
  breaking it at newlines and between words that would run past the
  target's width, aligned by `TextAlign`.
- Drawing before `begin()` raises `RuntimeError`.

## Resources

`Texture`, `RenderTarget`, `Font`, `AudioSample` and `Animation` derive
from `katana.resource.Resource`. Each has `load(path, manager)`, which
raises `ResourceLoadError` when the file cannot be read. Animations and
bitmap fonts load their sprite sheet through `manager.load(Texture, path)`,
so the manager is any object with that method, for example:

```python
class Resources:
    def load(self, kind, path):
        resource = kind()
        resource.load(path, self)
        return resource
```

### Animation files

The first line names the sprite sheet, the second gives the seconds per
frame, and each further line is a frame as `x,y,width,height`. Text after
`//` is a comment.

```
hero.png        // sprite sheet
0.1             // seconds per frame
0,0,32,32
32,0,32,32
64,0,32,32
```

```python
from katana.animation import Animation
from katana.gametime import GameTime

walk = Animation()
walk.load("walk.txt", Resources())
walk.set_loop_count(2)          # -1 loops forever

clock = GameTime()
clock.update()
walk.update(clock)              # advances by clock.elapsed_time
batch.begin()
batch.draw_animation(walk, (200, 200))
batch.end()
```

`clone()` gives an animation that shares the frames and texture but plays
on its own. `stop()` pauses and rewinds to the first frame.

### Fonts

`Font.set_load_size(size, restore=False)` sets the size of the next font
loaded. A path containing `.png` (and not `.ttf`) is read as a glyph sheet:
glyph boxes are found row by row against the colour of the top-left pixel
and given the characters of `Font.set_character_range(ranges)`, printable
ASCII by default. Other paths are loaded as font files.

### Audio

`AudioSample` plays through the pygame mixer with `set_volume` (held to
0–1) and `set_looping`. `AudioSample.reserve_samples(count)` sets the
number of mixer channels.

## Input

Feed every pygame event to `InputState.handle_event`, read the state, then
call `update()` once per frame so that "new press" questions compare with
the frame before.

```python
import pygame
from katana.inputstate import Button, InputState, MouseButton

state = InputState()
for event in pygame.event.get():
    state.handle_event(event)

if state.is_new_key_press(pygame.K_SPACE):
    ...
if state.is_new_mouse_button_press(MouseButton.LEFT):
    print(state.mouse_position)
pad = state.new_button_press_index(Button.A)   # first pad, or None
state.update()
```

Up to four game pads are tracked; `game_pad_state(index)` returns a copy of
a pad's buttons, thumbsticks and triggers.

## Other modules

- `katana.mathutil`: `lerp`, `clamp`, `is_in_range`, `to_radians`,
  `to_degrees`, `get_random_int`, `get_random_float`.
- `katana.color`: frozen `Color` with named colours such as `Color.WHITE`,
  `Color.lerp`, scaling by a number and `to_rgba()`.
- `katana.point`: mutable integer `Point` with `+`, `-`, `+=`, `-=`.
- `katana.gametime`: `GameTime`, taking an optional clock function; frame
  gaps over 0.2 seconds keep the previous elapsed time.
- `katana.resource`: `split_line`, `strip_comment` and `trim_line`.
- `katana.particlepool`: `ParticlePool`, which runs an updater and a
  renderer over its active particles and hands out inactive ones for reuse.
- `katana.menuitem`: `MenuItem`, a line of text that draws itself through a
  sprite batch and calls `on_select` when selected.

## What the package does not do

There is no game loop, window setup or frame-rate counter, no stack of
screens with transitions, no menu screen that moves a selection between
menu items, and no resource manager: your program opens the display, pumps
events, keeps time, and loads and caches resources itself.