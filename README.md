# scenekit

scenekit is a small entity-component scene engine. It keeps a world of
entities and components, works out world transforms down a parent/child
hierarchy, fills in default materials, colours and texture coordinates for
geometry, derives flat vertex normals, and generates GLSL vertex and fragment
shader source for a given number of point and directional lights.

It needs nothing beyond the Python standard library and supports Python 3.10
and later.

## Maths

`Vector3f` (in `scenekit.vector3f`) and `Matrix4f` (in `scenekit.matrix4f`)
are the building blocks. Matrices are row-major, 4×4, and chain from left to
right:

```python
from scenekit.matrix4f import Matrix4f
from scenekit.vector3f import Vector3f

transform = Matrix4f.translation(1.0, 2.0, 3.0).scale(2.0, 2.0, 2.0)
transform.position()            # Vector3f(x=1.0, y=2.0, z=3.0)

inverse = transform.inverse()   # ValueError if the matrix is singular
transform.multiply(inverse)     # the identity, within rounding

a = Vector3f(1.0, 2.0, 3.0)
b = Vector3f(3.0, 0.0, 1.0)
a * b                           # cross product: Vector3f(x=2.0, y=8.0, z=-6.0)
a * 2.0                         # scaling
a.dot(b)                        # 6.0
Vector3f(2.0, 3.0, 6.0).normalize()
```

`Matrix4f` also builds rotations (`x_rotation`, `y_rotation`, `z_rotation`,
and the chaining `x_rotate`, `y_rotate`, `z_rotate`), projections
(`orthographic`, `perspective`) and camera matrices (`look_at`). `*=` updates
a matrix or vector in place. `Vector3f.normalize()` returns the zero vector
for vectors of (nearly) zero length.

`Triangle` (in `scenekit.triangle`) gives a triangle's `area()` and its
unnormalised `surface_normal()`, with anticlockwise winding facing outwards.

## Shaders

`Shader.generate_pair` (in `scenekit.shader`) writes a vertex and a fragment
shader for a `ShaderConfig`, which counts point and directional lights:

```python
from scenekit.shader import Shader
from scenekit.shader_config import ShaderConfig

vertex, fragment = Shader.generate_pair(ShaderConfig.one_of_each_light())
print(vertex.source())
```

`ShaderConfig` has the presets `no_lights`, `one_of_each_light`,
`a_few_lights` (the default: 3 point, 2 directional) and `lots_of_lights`.
`combinations()` lists every configuration with up to as many lights of each
kind.

## The world

`World` in `scenekit.world` holds entities, one `Storage` per component type,
and resources keyed by type. Storages report insertions, modifications and
removals to readers registered with `register_reader()`. A component changed
in place must be reported with `storage.modified(entity)` so that systems
see the change.

```python
from scenekit.components import LocalTransform, SceneParent, WorldTransform
from scenekit.hierarchy import Hierarchy
from scenekit.matrix4f import Matrix4f
from scenekit.scene_graph import SceneGraph
from scenekit.world import World

world = World()
hierarchy = Hierarchy(world)        # must exist before SceneGraph.setup
scene_graph = SceneGraph()
scene_graph.setup(world)

parent = world.create_entity(LocalTransform(Matrix4f.translation(1.0, 2.0, 3.0)))
child = world.create_entity(
    LocalTransform(Matrix4f.translation(4.0, 5.0, 6.0)), SceneParent(parent)
)

hierarchy.run_now(world)
scene_graph.run(world)
world.storage(WorldTransform).get(child).matrix.position()  # Vector3f(x=5.0, y=7.0, z=9.0)
```

Component types live in `scenekit.components`; the resources `GameTiming`,
`Key`, `Keyboard`, `NameIndex` and `ModelGroups` live in
`scenekit.resources`.

## Systems

Each system has a `run(world)` method (`Hierarchy` has `run_now(world)`);
those that track changes also need `setup(world)` first.

- `Hierarchy` (`scenekit.hierarchy`) keeps the `SceneHierarchy` resource in
  step with `SceneParent` components. `SceneGraph` and `InverseWorld`
  (`scenekit.scene_graph`) keep `WorldTransform` and `InverseWorldTransform`
  up to date.
- `VertexNormals` (`scenekit.vertex_normals`) and `MaterialDefault`,
  `ColoringDefault` and `TexcoordsDefault` (`scenekit.defaults`) give
  geometry the normals, material, colouring and texture coordinates it lacks,
  shared between the model and its instances.
- `ModelPreloader`, `GroupExpander` and `NameIndexer` (`scenekit.loading`)
  create a `FileToLoad` entity for each file a `ModelsToLoad` names and mark
  it preloaded once those are gone, expand a `GeometryGroup` into one child
  per model in the named `ModelGroups` entry, and index entities by `Name`.
- `SceneLoader` (`scenekit.scene_loader`) requests the demonstration scene's
  model files and, once loaded, lays out its skulls, cubes, camera and
  lights.
- `Animation` (`scenekit.animation`) spins every non-camera transform about
  its z axis; `UseProgram` picks the `ShaderConfig` for the placed lights,
  calling an optional `on_switch` callback when it changes.
- `KeyboardInput` (`scenekit.keyboard_input`) queues `key_down` / `key_up`
  key codes and applies them to the `Keyboard` resource's `pressing`,
  `just_pressed` and `just_released` sets on each run.

`GameLoop` (`scenekit.game_loop`) drives the world with fixed-rate updates
and one render per frame, catching up on missed updates but never by more
than `GameTiming.pause_updates_after` seconds:

```python
from scenekit.game_loop import GameLoop

loop = GameLoop()
loop.run(update=lambda world: None, render=lambda world: None, frames=100)
```

## What it does not do

scenekit draws nothing: it has no graphics context, compiles no shaders and
uploads no buffers or textures. It does not fetch files or parse OBJ or MTL
models, so `FileToLoad` entities stay until something else replaces them
with `FileContent` and fills `ModelGroups` and names; until then
`SceneLoader` waits. There is no window, and key events reach
`KeyboardInput` only when your code calls `key_down` and `key_up`.