# bwxsdk

Building blocks for a small real-time 3D renderer, in plain Python with numpy
for the vector, matrix and quaternion math. It offers an entity/component node
model with transform, camera, light and movement components, materials,
meshes with interleaved vertex data, a scene container and a GLSL shader
source generator. A set of string helpers is included as well.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `bwxsdk.strings` – `simple_explode`, `simple_join`, `trim`, `replace_all`,
  `remove_chars`, `reverse`, `to_lower_case`, `to_upper_case`, `starts_with`,
  `ends_with`, `format_string` (printf-style `%` formatting) and
  `string_to_wstring` (decodes UTF-8 bytes).
- `bwxsdk.shader_generator` – vertex and fragment shader generation with a
  cache (`get_vertex_shader`, `get_fragment_shader`, `clear_cache`,
  `generate_vertex_shader`, `generate_fragment_shader`), built-in skybox and
  text shaders, and the lighting snippets `get_light_struct_block` (a
  `Light` struct and a std140 `LightBlock` of up to 64 lights at binding 2)
  and `get_light_calculation_function`.
- `bwxsdk.vecmath` – `normalize`, `perspective`, `ortho`, `look_at`,
  `angle_axis`, `quat_multiply`, `quat_rotate`, `quat_from_euler`,
  `quat_to_euler`, `quat_from_matrix`. Matrices are 4x4 numpy arrays applied
  to column vectors; quaternions are `(w, x, y, z)`; angles are radians.
- `bwxsdk.node` – `Node` (at most one component per type), `Component` and
  `TransformComponent` (position, quaternion rotation, scale, Euler angles).
- `bwxsdk.camera` – `CameraComponent`, `CameraType`, `LensType`. The view
  matrix follows the node's transform on `update`; the field of view is in
  degrees.
- `bwxsdk.light` – `LightComponent`, `LightType`. The diffuse colour is scaled
  by the power; `set_range` derives the attenuation terms.
- `bwxsdk.movement` – `MovementComponent`, `MovementType`, `MovementMode`,
  `MovementStrategy`. A request goes to a strategy if set, else to a callback
  registered for its type, else to built-in translate/rotate/zoom handling.
- `bwxsdk.material` – `Material`, `TextureType`. `apply_to_shader` sends every
  property as a `material.*` uniform to any object with `set_uniform(name, value)`.
- `bwxsdk.mesh` – `Mesh`, `Vertex`, `MeshFormat`: read vertices from a flat
  table, build a float32 interleaved buffer, get its `stride()` and
  `attribute_layout()`.
- `bwxsdk.scene` – `Scene` and `Model`.

## Examples

```python
from bwxsdk.node import Node, TransformComponent
from bwxsdk.light import LightComponent, LightType
from bwxsdk.camera import CameraComponent, CameraType

lamp = Node("lamp")
lamp.add_component(TransformComponent())
light = lamp.add_component(LightComponent(LightType.POINT))
light.set_range(20.0)            # linear = 4.5 / 20, quadratic = 75 / 400

eye = Node("eye")
eye.add_component(TransformComponent())
camera = eye.add_component(CameraComponent(CameraType.FPP))
camera.set_projection_perspective(60.0, 16 / 9, 0.1, 100.0)
camera.update(0.0)
view, projection = camera.view_matrix, camera.projection_matrix
```

```python
from bwxsdk.mesh import Mesh, MeshFormat

mesh = Mesh(MeshFormat.NORMAL | MeshFormat.INDICES)
mesh.vertices_from_table([0, 0, 0, 0, 0, 1,
                          1, 0, 0, 0, 0, 1,
                          0, 1, 0, 0, 0, 1])
mesh.indices_from_table([0, 1, 2])
mesh.stride()                    # 6
data = mesh.interleaved_data()   # float32 array of 18 values
```

```python
from bwxsdk.shader_generator import get_fragment_shader
from bwxsdk.strings import simple_explode, simple_join

source = get_fragment_shader(use_textures=True, use_lighting=True)

parts = simple_explode("a,b,c", ",")   # ['a', 'b', 'c']
simple_join(parts, " | ")              # 'a | b | c'
```

## What this package does not do

It produces data and shader source only. It does not open windows, create
graphics contexts, upload buffers, compile shaders or draw anything; pair it
with an OpenGL binding of your choice for that. It does not load model or
texture files, and it has no registry that collects materials by name or packs
lights from several nodes into the `LightBlock` layout — that packing is left
to your code.