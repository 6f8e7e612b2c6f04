# celestegame

A small 2D game skeleton built on pyglet. It opens a window that asks for
an OpenGL 4.3 core debug context, compiles a quad shader, loads a texture
atlas, and each frame draws the queued sprites with one instanced draw
call.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

The game reads its assets relative to the current working directory:

```
assets/shaders/quad.vert
assets/shaders/quad.frag
assets/textures/TEXTURE_ATLAS.png
```

From the directory that holds `assets/`, start it with:

```
celestegame
```

A 1200×720 window titled "Celeste" opens and shows a 10×10 grid of dice
sprites, each 100×100 pixels. Closing the window ends the loop; the
window is then closed and the command exits with status 0. If the
window cannot be created the command exits with status 1. A missing
shader file raises `FileNotFoundError`; an unreadable texture or a
shader that fails to compile raises `AssertionFailedError`.

The same start-up is available from Python as
`celestegame.application.main()`, and the pieces it uses as
`Application.get()`, `Application.init(width, height, title)`,
`Application.run()` and `Application.shutdown()`.

## Using the pieces

The parts that do not need a window can be used on their own.

Sprites are queued into a `RenderData` batch (at most 1000 per frame;
one more raises `IndexError`), which the renderer uploads to a shader
storage buffer:

```python
from celestegame.assets import SpriteID, get_sprite
from celestegame.render_interface import RenderData
from celestegame.vectors import Vec2

batch = RenderData()
batch.draw_sprite(SpriteID.DICE, Vec2(0.0, 0.0), Vec2(100.0, 100.0))
payload = batch.to_bytes()   # packed transforms, 32 bytes each
batch.clear()
```

`get_sprite(SpriteID.DICE)` gives the sprite's offset and size in the
texture atlas and raises `AssertionFailedError` for an id without a
sprite; `sprite_id_to_string` gives an id's name. `Transform.pack()`
gives one transform's binary layout.

`Vec2` and `IVec2` in `celestegame.vectors` are small immutable vectors;
`IVec2` division truncates toward zero.

A `BumpAllocator` hands out 8-byte-aligned regions of one fixed,
zero-filled block as memory views and raises `AllocatorFullError` when
a request does not fit:

```python
from celestegame.bump_allocator import BumpAllocator
from celestegame.utils import mb

storage = BumpAllocator(mb(50))
region = storage.alloc(100)
print(storage.used, storage.capacity)
storage.reset()
```

`celestegame.files` has `get_timestamp`, `file_exists`, `get_file_size`,
`read_file` (reads a whole file into a buffer, followed by a zero byte,
and returns a view of it or `None`), `write_file` and `copy_file`.
`celestegame.logger` prints coloured `trace`, `warn` and `error`
messages, and `check` logs and raises `AssertionFailedError` when its
condition is false. `celestegame.utils` has `bit`, `kb`, `mb` and `gb`.

## What it does not do

There is no gameplay yet: no keyboard or mouse input, no player, no
levels, no sound. The only window event the game reacts to besides
closing is resizing, which updates the viewport size. Every frame draws
the same fixed grid of dice.