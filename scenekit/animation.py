"""Per-frame scene updates: spinning objects and choosing the shader program."""

from __future__ import annotations

from typing import Callable, Optional

from scenekit.components import Camera, DirectionalLight, LocalTransform, PointLight, WorldTransform
from scenekit.matrix4f import Matrix4f
from scenekit.shader_config import ActiveConfig, ShaderConfig
from scenekit.world import World

SPIN_PER_UPDATE = 0.007


class Animation:
    """Spins every transform that is not a camera around its z axis."""

    def run(self, world: World) -> None:
        cameras = world.storage(Camera)
        transforms = world.storage(LocalTransform)
        for entity, transform in transforms.items():
            if entity in cameras:
                continue
            transform.matrix *= Matrix4f.z_rotation(SPIN_PER_UPDATE)
            transforms.modified(entity)


class UseProgram:
    """Switches to the shader program that matches the number of placed lights."""

    def __init__(self, on_switch: Optional[Callable[[ShaderConfig], None]] = None) -> None:
        self._on_switch = on_switch

    def shader_config_for_number_of_lights(self, world: World) -> ShaderConfig:
        placed = world.storage(WorldTransform)
        point_lights = sum(1 for e in world.storage(PointLight) if e in placed)
        directional_lights = sum(1 for e in world.storage(DirectionalLight) if e in placed)
        return ShaderConfig(point_lights=point_lights, directional_lights=directional_lights)

    def run(self, world: World) -> None:
        config = self.shader_config_for_number_of_lights(world)
        active = world.default_resource(ActiveConfig)
        if config == active.config:
            return

        supported = world.default_resource(ShaderConfig)
        if config not in supported.combinations():
            raise KeyError(
                f"no shader program for {config.point_lights} point and "
                f"{config.directional_lights} directional lights"
            )

        if self._on_switch is not None:
            self._on_switch(config)
        world.insert_resource(ActiveConfig(config))