"""The system that loads the demo scene's models and lays out its entities."""

from __future__ import annotations

import math

from scenekit.components import (
    Camera,
    ClearColor,
    DirectionalLight,
    Geometry,
    GeometryGroup,
    LocalTransform,
    Material,
    ModelsToLoad,
    PointLight,
    ProjectionTransform,
    SceneParent,
    Texture,
    Viewport,
)
from scenekit.matrix4f import Matrix4f
from scenekit.resources import NameIndex
from scenekit.vector3f import Vector3f
from scenekit.world import World

PI = math.pi

OBJECT_FILES = ("assets/objects/skull.obj", "assets/objects/cube.obj")
MATERIAL_FILES = ("assets/materials/skull.mtl", "assets/materials/default.mtl")
SKULL_GROUP = "assets/objects/skull.obj"
CUBE_TEXTURE = "assets/textures/tuzz.jpg"

_MINI_SKULLS = 20
_CUBES_PER_SKULL = 5


class SceneLoader:
    """Requests the scene's models, then builds the scene once they have loaded."""

    def __init__(self, canvas_width: int = 1280, canvas_height: int = 720) -> None:
        self.canvas_width = canvas_width
        self.canvas_height = canvas_height
        self.loading = False
        self.loaded = False

    def run(self, world: World) -> None:
        if self.loaded:
            return

        if not self.loading:
            world.create_entity(ModelsToLoad.create(OBJECT_FILES, MATERIAL_FILES))
            self.loading = True
            return

        if len(world.storage(ModelsToLoad)):
            return

        self._build(world)
        self.loading = False
        self.loaded = True

    def _build(self, world: World) -> None:
        index = world.default_resource(NameIndex)

        skull = world.create_entity(
            GeometryGroup(SKULL_GROUP),
            LocalTransform(Matrix4f.translation(0.0, -10.0, -30.0).x_rotate(-PI / 2.0)),
        )

        world.create_entity(
            Geometry.find(index, "cube"),
            Material.find(index, "gold"),
            LocalTransform(Matrix4f.translation(-37.0, 17.0, -30.0).scale(5.0, 5.0, 5.0)),
        )

        world.create_entity(
            Geometry.find(index, "cube"),
            Texture.find(index, CUBE_TEXTURE),
            LocalTransform(Matrix4f.translation(37.0, 17.0, -30.0).scale(5.0, 5.0, 5.0)),
        )

        for i in range(_MINI_SKULLS):
            ratio = i / _MINI_SKULLS
            mini_skull = world.create_entity(
                GeometryGroup(SKULL_GROUP),
                SceneParent(skull),
                LocalTransform(
                    Matrix4f.translation(0.0, 0.0, 5.0)
                    .z_rotate(2.0 * PI * ratio)
                    .translate(20.0, 0.0, 0.0)
                    .z_rotate(PI / 2.0)
                    .scale(0.1, 0.1, 0.1)
                ),
            )

            center = world.create_entity(
                SceneParent(mini_skull),
                LocalTransform(Matrix4f.translation(0.0, 0.0, 8.0).scale(4.0, 4.0, 4.0)),
            )

            for j in range(_CUBES_PER_SKULL):
                jratio = j / _CUBES_PER_SKULL
                # The first cube's angle is 2π/0, which is undefined, so its
                # transform is left as NaN.
                angle = 2.0 * PI / jratio if jratio else math.nan
                world.create_entity(
                    Geometry.find(index, "cube"),
                    SceneParent(center),
                    LocalTransform(
                        Matrix4f.translation(8.0, 8.0, 0.0)
                        .y_rotate(angle)
                        .translate(5.0, 0.0, 5.0)
                    ),
                )

        world.create_entity(
            Camera(),
            Viewport(0, 0, self.canvas_width, self.canvas_height),
            ClearColor.black(),
            ProjectionTransform(Matrix4f.perspective(PI / 2.0, 16.0 / 9.0, 0.1, 100.0)),
            LocalTransform(
                Matrix4f.look_at(
                    Vector3f(0.0, 0.0, 0.0),
                    Vector3f(0.0, 0.0, -1.0),
                    Vector3f(0.0, 1.0, 0.0),
                )
            ),
        )

        world.create_entity(
            DirectionalLight(), LocalTransform(Matrix4f.translation(0.0, 1.0, 0.0))
        )
        world.create_entity(
            PointLight(), LocalTransform(Matrix4f.translation(0.0, 1.0, -50.0))
        )