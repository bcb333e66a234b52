# partyframe

partyframe is a small 2D game framework built on pygame and Pillow. It provides:

- `partyframe.geometry`: the `Coord2D` and `Bounds2D` dataclasses. `Bounds2D.center()` returns the centre of a box and `Bounds2D.dimensions()` returns its width and height.
- `partyframe.rng`: `rand_float(low, high)`, `rand_int(low, high)` (half-open; an empty range raises `ValueError`) and `seed(value)` for repeatable runs.
- `partyframe.gameobject`: `GameObject`, a base class with a position and a velocity. `enable_registration` and `disable_registration` control whether new and destroyed objects are reported to a registrar.
- `partyframe.objmgr`: `ObjectManager`, which has a fixed number of slots and registers itself to track every object created while it is active. It draws and updates those objects in slot order. It raises `ObjectManagerError` when it is full, when it is asked to remove an unknown object, or when objects are still registered at `shutdown()`.
- `partyframe.inputstate`: `InputSystem`, which holds keyboard state (by virtual-key code), mouse position and mouse buttons (`InputButton`). You can bind a callback to each `GameKey`. `update()` runs a key's callback once on the frame the key goes down.
- `partyframe.inputcontext`: `ContextStack`, which holds at most five `InputContext` objects and runs their `on_enter` and `on_exit` hooks.
- `partyframe.shape`: `draw_circle`, `draw_line` and `draw_rect` for a pygame surface, and `unpack_rgb` for 0xRRGGBB colours.
- `partyframe.application`: `Application`, a dataclass with the title, window size, colour depth, sound count and the draw and update hooks.
- `partyframe.rendertools`: `WindowTracker`, which records the application's window size and whether it changed.
- Demo objects:
  - `Ball` (`partyframe.ball`) bounces inside its bounds and takes a new random colour on every hit. `set_collide_callback` sets a function that is called on each hit.
  - `Rect` (`partyframe.rect`) behaves the same way and fills its bounds.
  - `Field` (`partyframe.field`) draws a border.
  - `Face` (`partyframe.face`) shows one character from a sprite sheet that has 8 characters and 4 `Mood` rows. Its mood changes every 0.5 to 2 seconds. Call `init_textures(path)` to load the sheet.
- `partyframe.sound`: `parse_wave`, `load_wave` and `find_chunk` read RIFF/WAVE files into a `WaveClip`. Unreadable files raise `WaveError`. `SoundManager` keeps clips in numbered slots and plays them through `pygame.mixer`. If no mixer is available, `play()` does nothing.
- `partyframe.framework`: `Window` and `init_window`, a pygame window that passes key and mouse events to an `InputSystem`. Each `update()` advances the application by the elapsed milliseconds and draws one frame.
- `partyframe.texture`: `PngLoader`, which turns PNG files into texture-ready pixel data.
  - `load_raw()` returns a `RawImage` in the file's own colour layout.
  - `load()` returns a `Texture` with RGB or RGBA levels. It applies gamma correction, resizes to powers of two (see `safe_size` and `resize_pixels`), builds optional mipmap chains (`MipmapMode`, `build_mipmaps`, `half_size`) and derives alpha from colour with `Transparency` (stencil colour, several blend formulas or a callback).
- `partyframe.levelmgr` and `partyframe.game`: `LevelDef`, `Level`, `LevelManager` and `Game` combine these parts into the demo.

## Installation

```
pip install .
```

To run the tests, install the test extra:

```
pip install ".[test]"
pytest
```

## Running the demo

```
partyframe --assets DIR
```

This command opens a 1024x768 window, loads the default level and runs the loop until the window is closed. `--assets` names the directory that holds `snoods_default.png` (the face sprite sheet) and `beep.wav`. It defaults to `asset`. The sprite sheet must be present, or loading raises `OSError`. If the sound cannot be loaded, the demo runs without it.

In the demo:
- Press `Z` to turn the ball blue.
- Press `X` to turn it red.
- The ball beeps each time it hits the edge of the window.

Only `Z` and `X` have bindings. Pressing another game key (the arrows or Escape) makes `InputSystem.update()` raise `RuntimeError`, which stops the program.

## Using the pieces

```python
from partyframe.geometry import Bounds2D, Coord2D
from partyframe.objmgr import ObjectManager
from partyframe.ball import Ball

manager = ObjectManager(500)
ball = Ball(Bounds2D(Coord2D(0, 0), Coord2D(640, 480)))
manager.update(16)  # move every tracked object one step
ball.destroy()
manager.shutdown()
```

Input bindings:

```python
from partyframe.inputstate import InputSystem, GameKey

inputs = InputSystem()
inputs.set_callback(GameKey.Z, lambda ctx: print("pressed", ctx), "hello")
inputs.key_update(0x5A, True)
inputs.update()  # runs the callback once, on the press edge
```

Loading a texture:

```python
from partyframe.texture import PngLoader, MipmapMode, Transparency

loader = PngLoader(max_texture_size=1024)
loader.set_stencil(255, 0, 255)
texture = loader.load("sprite.png", MipmapMode.BUILD, Transparency.STENCIL)
for level, width, height, pixels in texture.levels:
    ...
```

## What it does not do

- `PngLoader` returns pixel data only. It does not create or upload GPU textures. Use the levels it returns with whatever renderer you choose.
- Drawing uses pygame surfaces only. There is no OpenGL rendering.
- The window has no full-screen toggle. `Window.change_resolution()` switches to a full-screen mode only when you call it.
- `LevelManager` builds levels only from `LevelDef` values in code. It has no level files and does not save anything.