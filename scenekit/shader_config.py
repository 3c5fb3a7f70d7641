"""Shader configurations keyed by the number of lights they support."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ShaderConfig:
    """How many point and directional lights a shader program handles."""

    point_lights: int = 3
    directional_lights: int = 2

    def combinations(self) -> list[ShaderConfig]:
        """Every configuration with at most this many of each kind of light."""
        return [
            ShaderConfig(point_lights=p, directional_lights=d)
            for p in range(self.point_lights + 1)
            for d in range(self.directional_lights + 1)
        ]

    def total_lights(self) -> int:
        return self.point_lights + self.directional_lights

    @classmethod
    def no_lights(cls) -> ShaderConfig:
        return cls(point_lights=0, directional_lights=0)

    @classmethod
    def one_of_each_light(cls) -> ShaderConfig:
        return cls(point_lights=1, directional_lights=1)

    @classmethod
    def a_few_lights(cls) -> ShaderConfig:
        return cls(point_lights=3, directional_lights=2)

    @classmethod
    def lots_of_lights(cls) -> ShaderConfig:
        return cls(point_lights=8, directional_lights=3)


@dataclass
class ActiveConfig:
    """The shader configuration currently in use."""

    config: ShaderConfig = field(default_factory=ShaderConfig)