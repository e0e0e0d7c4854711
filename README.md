# blockcraft

blockcraft opens an 800x600 window and draws one textured block on a blue
background. You look at it through a first-person camera that you move with
the keyboard and mouse.

## Installing

```
pip install .
```

Use `pip install .[test]` to get the test dependencies as well.

## Running

```
blockcraft
```

The program reads its shaders and its texture from paths relative to the
working directory:

- `Assets/shaders/block.vert`
- `Assets/shaders/block.frag`
- `Assets/textures/uv_test.png`

Start it from a directory that holds these files. If the window cannot be
opened or an asset is missing, empty or does not compile, the command prints
`error: ...` to standard error and exits with a non-zero status.

The cursor is captured by the window while it runs.

Controls:

| Input         | Action                           |
|---------------|----------------------------------|
| `W` / `S`     | move forward / backward          |
| `A` / `D`     | strafe left / right              |
| mouse         | look around (pitch clamped ±89°) |
| `Escape`      | quit                             |

Closing the window also ends the program.

## Using the pieces

The modules can also be used on their own.

- `blockcraft.input.Input` tracks key, mouse-button and cursor state. Its
  `key_callback`, `mouse_button_callback` and `mouse_position_callback`
  methods feed it, with `Action.PRESS` / `Action.RELEASE`. `update()` ends
  a frame so that `mouse_delta()` starts again from zero.
- `blockcraft.camera.Camera` reads that state in `update(input, delta_time)`.
  `view_proj_matrix()` returns the combined projection-times-view matrix as
  a row-major 4x4 numpy array. `look_at` and `perspective` build the two
  matrices on their own.
- `blockcraft.resources.load_shader` returns the text of a shader file.
  `blockcraft.resources.load_texture` decodes an image into a `TextureData`
  (width, height, channels, pixel bytes), optionally flipped vertically.
- `blockcraft.mesh.Mesh`, `blockcraft.shader.Shader`,
  `blockcraft.texture.Texture` and `blockcraft.renderer.Renderer` wrap the
  GPU-side objects and need a current OpenGL context. Each has a `delete()`
  or `shutdown()` method, and the first three work as context managers.
  `blockcraft.mesh.pack_vertices` and `blockcraft.renderer.cube_geometry()`
  need no context.
- `blockcraft.window.Window` and `blockcraft.game.Game` tie everything
  together into the main loop. `blockcraft.game.main()` is what the
  `blockcraft` command runs.

A short example that uses the input and camera modules:

```python
from blockcraft.camera import Camera
from blockcraft.input import Action, Input

inp = Input()
cam = Camera(45.0, 800 / 600, 0.1, 100.0)
inp.key_callback(87, 0, Action.PRESS, 0)  # W
cam.update(inp, 0.016)
matrix = cam.view_proj_matrix()
```

## What it does not do

blockcraft draws a single fixed block. It has no world or terrain, no
chunks, no placing or breaking of blocks, no collision or gravity, and
nothing is saved. The window size and the asset paths are fixed, and there
are no command-line options.

## Tests

```
pip install .[test]
pytest
```