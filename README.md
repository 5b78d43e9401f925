# voxelworld

The parts of a block-based voxel world that do not need a graphics window:
terrain chunks, greedy meshing of their visible faces, a first-person camera
and the matrices it produces, and view-frustum planes.

## Modules

- `voxelworld.camera`: `Camera` with mouse look (`mouse_move`), keyboard
  movement (`keyboard_input` with a set of `Movement` values, scaled by the
  frame time recorded with `update`), `perspective_matrix(aspect)` and
  `view_matrix()`. The helpers `perspective`, `look_at` and `normalize` are
  available on their own. `normalize` raises `ValueError` for a zero vector.
- `voxelworld.frustum`: `Plane`, `AABB` and `Frustum` dataclasses,
  `ndc_to_world` and `frustum_from_camera(camera, aspect)`.
  `Frustum.describe()` returns a text listing of each plane's point.
- `voxelworld.layout`: `VertexBufferLayout` built from `push(element_type,
  count)` calls. It records `elements` and `stride` and gives byte offsets
  through `offsets()`. `ElementType` covers float, unsigned int and unsigned
  byte components.
- `voxelworld.shader`: `parse_shader(path)` and `parse_shader_text(text)`.
  They split a combined file with `#shader vertex` / `#shader fragment`
  marker lines into a `ShaderProgramSource`. Lines before the first marker
  are dropped.
- `voxelworld.blocks`: `BlockGrid`, a `size × height × size` array of
  `BlockFlag` bits indexed `[x, y, z]`. The bits are active, the six visible
  faces and two visit marks. `generate_faces()` recomputes the exposed faces
  and `clear_visited()` resets the visit marks. Positions outside the grid
  raise `IndexError`.
- `voxelworld.mesher`: the greedy meshers `mesh_bottom_top`,
  `mesh_back_front` and `mesh_left_right`, plus `build_mesh`, which runs all
  three. Each merges neighbouring faces into rectangles and returns a flat
  list of `x, y, z, u, v` floats, six vertices to a quad, translated by the
  chunk origin `(x, z)`.
- `voxelworld.chunk`: `Chunk`, a 16×64×16 column of blocks filled up to the
  terrain height given by `height_map`. `vertex_layout()` (also
  `Chunk.layout`) describes its vertices: three position floats followed by
  two texture floats.
- `voxelworld.chunk_manager`: `ChunkManager`. It creates chunks on demand and
  keeps loaded those within a radius of a position. Chunk coordinates are
  snapped with `round_up`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from voxelworld.camera import Camera, Movement
from voxelworld.frustum import frustum_from_camera

camera = Camera()
camera.update(0.0)
camera.update(0.1)
camera.mouse_move(960.0, 540.0)
camera.keyboard_input({Movement.FORWARD})

view = camera.view_matrix()
proj = camera.perspective_matrix(16 / 9)
print(frustum_from_camera(camera, 16 / 9).describe())
```

Terrain comes from a noise function that you supply. It is called as
`noise(x, z)` and should return values in `[-1, 1]`:

```python
import math

from voxelworld.chunk import Chunk


def noise(x, z):
    return math.sin(x * 0.05) * math.cos(z * 0.05)


chunk = Chunk(0, 0, noise)
chunk.generate_mesh()
print(chunk.num_floats())    # five floats per vertex
chunk.update_block(3, 10, 4, False)
chunk.generate_mesh()        # meshes are rebuilt only on request
```

To keep chunks loaded around a position:

```python
from voxelworld.chunk_manager import ChunkManager

manager = ChunkManager(noise, radius=64)
manager.update_loaded_chunks((0.0, 64.0, 0.0))
print(sorted(manager.loaded_positions()))
```

## What it does not do

The package opens no window and does not draw anything. It does not compile
shaders, upload buffers or load textures. It has no built-in noise generator,
so you pass one in. It provides no command to run. Its output is plain data
(vertex lists, matrices, shader source text) for a renderer of your choice.