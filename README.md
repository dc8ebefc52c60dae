# grassinvaders

A small arcade game. A blue ship stands on a strip of green grass at the
bottom of the window. A coloured alien moves side to side across the screen,
and each time it would pass an edge it turns round and drops one row closer.
The game ends when the alien touches the grass, or when you close the window.

## Installing

```
pip install .
```

This installs `pygame`, which the game uses for its window, drawing and
keyboard input.

## Playing

```
grassinvaders
grassinvaders --fps 60
```

Controls:

- `A`: move the ship left
- `D`: move the ship right

The window is 480 × 270 pixels. `--fps` sets the frame rate (default 100;
it must be positive). Each tick moves the ship one pixel while a key is held
and the alien one pixel sideways. Once every second of play, the number of
seconds gone by is printed to standard output, and the code of every key
pressed or released is printed there too.

## What the game does not have

There is one alien and one ship and nothing else: the ship cannot shoot,
there is no score, no lives, no levels, no images and no sound. The game
simply runs until the alien lands.

## Using it as a library

The game logic in `grassinvaders.model` does not depend on pygame:

```python
import random

from grassinvaders.model import Key, World, random_alien

world = World(alien=random_alien(random.Random(1)))
world.press(Key.RIGHT)
while world.step():
    pass
print("the alien reached the grass at", world.alien.y, "after", world.ticks, "ticks")
```

- `Ship` and `Alien` are dataclasses with an `update()` method; `Alien` also
  has `touches_ground()`.
- `World.press(key)` / `World.release(key)` take `Key.LEFT` or `Key.RIGHT`;
  `World.step()` advances one tick and returns whether play goes on.

`grassinvaders.game` holds the pygame side: `render(surface, world)` draws
one frame of a `World` onto any pygame surface (also `draw_scenario`,
`draw_ship`, `draw_alien`), `key_from_pygame(keycode)` maps `pygame.K_a` and
`pygame.K_d` to game keys, and `run(fps)` opens the window and returns the
number of ticks played.

## Supporting modules

- `grassinvaders.fixed`: 16.16 fixed-point arithmetic on 32-bit values
  (`ftofix`, `fixtof`, `fixadd`, `fixsub`, `fixmul`, `fixdiv`, `fixfloor`,
  `fixceil`, `itofix`, `fixtoi`). Results out of range raise
  `OverflowError`; `fixdiv` by zero raises `ZeroDivisionError`.
- `grassinvaders.registry`: `FileTypeRegistry` keeps loaders, savers and
  content identifiers per file extension (registering `None` removes one).
  `load` uses the extension an identifier accepts, else the file's own
  extension; `save` goes by extension. A missing handler raises
  `UnknownFileType`. `LoaderFlag` holds the flags passed to loaders.
- `grassinvaders.audio`: sample formats (`AudioDepth`, `ChannelConf`,
  `PlayMode`, `MixerQuality`), `channel_count`, `depth_size`, `is_unsigned`,
  `fill_silence` (little-endian silent bytes), and `Sample`,
  `SampleInstance` and `Mixer` objects. The mixer keeps track of attached
  and reserved instances and their play state, gain, pan and speed; it does
  not combine sample data or send anything to a sound device.
- `grassinvaders.display`: `DisplayFlag`, `DisplayOption`, `Importance`,
  `Orientation`, `DisplaySettings` (requested options, flags, refresh rate,
  adapter and a window title cut to 255 bytes) and `MonitorInfo`
  rectangles with `width()`, `height()` and `contains(x, y)`.
- `grassinvaders.inputs`: snapshots of input state: `MouseState` with
  `button_down` and `axis`, `KeyboardState` with `press`, `release` and
  `key_down`, and `TouchInputState`, sixteen touch slots with `begin`,
  `move`, `end` and `active`.

## Running the tests

```
pip install .[test]
pytest
```