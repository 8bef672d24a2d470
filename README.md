# gearsengine

The engine-side core of a small 3D game engine and its level editor, kept
free of any windowing or graphics API. It holds the parts that carry the
logic: the fly camera and its matrices, directional, point and spot
lighting, a particle emitter, generated primitive meshes, models with their
binary `.modelbin` format, scenes of placed objects, saved level files, the
editor console and the input handling that drives the camera.

Vectors and matrices are `numpy` arrays. The transform helpers follow the
column-vector convention: a matrix is applied as `matrix @ point`.

## Modules

| Module | What it holds |
| --- | --- |
| `gearsengine.logger` | `Logger`, `LogLevel`, `LogEntry`. Keeps the last 100 entries, prints each one and appends it to `log.txt` by default. |
| `gearsengine.memory` | `MemoryPool`, `MemoryBlock` and `align`: a size-bucketed pool with a hard maximum; `allocate` returns `None` once it is exhausted. |
| `gearsengine.timer` | `Timer`: seconds elapsed since creation or the last `reset()`. |
| `gearsengine.animation` | `Animation`, `AnimationFrame`, `AnimationPlayer`, which drops an animation once time runs past its end. |
| `gearsengine.transforms` | `normalize`, `look_at`, `translate`, `rotate`, `scale`, `perspective`. |
| `gearsengine.camera` | `Camera` and `CameraMovement`: yaw, pitch, roll, zoom and walking or flying movement. |
| `gearsengine.state` | `EngineState` (camera, logger, editor mode, game console, drag step) and `Viewport`, the editor's render panel. |
| `gearsengine.lighting` | `Lighting`: light and material parameters, `uniforms()` and `apply_lighting(shader)`. |
| `gearsengine.particles` | `Particle`, `ParticleEmitter` with `update` and `vertex_data`. |
| `gearsengine.primitives` | `cube_vertices`, `quad_vertices`, `sphere_mesh` and `SphereMesh`. |
| `gearsengine.console` | `Console` and `is_number`: the editor console's commands. |
| `gearsengine.model` | `Vertex`, `Texture`, `Mesh`, `Model` and the `.modelbin` format. |
| `gearsengine.scene` | `SceneObject`, `Scene`, `ObjectList`. |
| `gearsengine.level` | `ContentBrowser`, `ObjectInfo`, `convert_to_relative_path`, `load_level`. |
| `gearsengine.header` | `HeaderPanel`, `SelectedTab`, `FileType`, `save_objects`, `load_objects`. |
| `gearsengine.input` | `Input`, `Key`, `KeyAction`, `lerp`. |

## A short tour

Logging:

```python
from gearsengine.logger import Logger, LogLevel

log = Logger()
log.log(LogLevel.INFO, "Load", 0)
for entry in log.logs():
    print(entry.level, entry.message)
```

Pass `log_file=None` to keep the log in memory and on the console only.

Moving the camera:

```python
from gearsengine.camera import Camera, CameraMovement

camera = Camera()
camera.process_keyboard(CameraMovement.FORWARD, 0.016)
camera.process_mouse_movement(12.0, -4.0, True)
view = camera.view_matrix()
```

Pitch is held within ±89 degrees when `constrain_pitch` is true, and the
zoom set by `process_mouse_scroll` stays between 1 and 45. With
`camera.camera_mode` set, forward and backward movement stay in the ground
plane.

Editor console commands:

```python
from gearsengine.console import Console, is_number
from gearsengine.state import EngineState

is_number("-3.5")   # True
is_number("abc")    # False

console = Console(EngineState())
console.execute("EditorModeOff")
```

`Console.execute` understands `EditorMode`, `EditorModeOn` and
`EditorModeOff`. It logs any other input, as a number where the input is
made only of digits, dots and minus signs; such input that holds no number
raises `ValueError`.

Lighting uniforms go to any object with `set_float(name, value)` and
`set_vec3(name, value)` methods:

```python
from gearsengine.lighting import Lighting

lighting = Lighting()
lighting.initialize()
values = lighting.uniforms()   # e.g. values["dirLightDiffuse"]
```

Saving and loading placed objects:

```python
from gearsengine.header import save_objects, load_objects
from gearsengine.scene import Scene

scene = Scene()
save_objects(scene.objects, "level.lvl")
restored = load_objects("level.lvl")
```

Timing a frame:

```python
from gearsengine.timer import Timer

timer = Timer()
seconds = timer.elapsed()
timer.reset()
```

## File formats

`.modelbin` (`Model.serialize` / `Model.deserialize`), little-endian: a
64-bit mesh count; per mesh a 64-bit vertex count and 14 float32 per vertex
(position, normal, texture coordinate, tangent, bitangent), a 64-bit index
count and 32-bit indices, a 64-bit texture count and each texture path as a
64-bit length followed by UTF-8 bytes. A truncated file raises `ValueError`.

Level files (`save_objects` / `load_objects`): a 32-bit object count, then
per object a NUL-terminated name followed by position, rotation and scale as
three float32 each.

## What it does not do

There is no window, no rendering, no audio, no physics and no command to
run. Models are read only from `.modelbin` files; other model formats
cannot be imported. Texture images are not decoded: the default texture
loader only checks that `directory/path` exists and hands out an integer
handle, or 0 when the file is missing. A different loader can be passed to
`Model` as `texture_loader`.

## Running the tests

The tests use pytest, listed in the `test` extra.