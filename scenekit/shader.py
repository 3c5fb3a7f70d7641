"""Generation of GLSL vertex and fragment shader source."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from scenekit.shader_config import ShaderConfig


class _Stage(Enum):
    VERTEX = "vertex"
    FRAGMENT = "fragment"


@dataclass
class Variable:
    """A typed shader variable such as an attribute, uniform or varying."""

    kind: str
    name: str


@dataclass
class Shader:
    """A shader built up from declarations and main-body statements."""

    headers: list[str] = field(default_factory=list)
    attributes: list[Variable] = field(default_factory=list)
    uniforms: list[Variable] = field(default_factory=list)
    varyings: list[Variable] = field(default_factory=list)
    statements: list[str] = field(default_factory=list)

    def header(self, header: str) -> None:
        self.headers.append(header)

    def attribute(self, kind: str, name: str) -> None:
        self.attributes.append(Variable(kind, name))

    def uniform(self, kind: str, name: str) -> None:
        self.uniforms.append(Variable(kind, name))

    def varying(self, kind: str, name: str) -> None:
        self.varyings.append(Variable(kind, name))

    def statement(self, statement: str) -> None:
        self.statements.append(statement)

    def source(self) -> str:
        """The full shader source, one line per declaration or statement."""
        return "\n".join(self.lines())

    def lines(self) -> list[str]:
        lines = [f"{header};" for header in self.headers]
        lines.extend(f"attribute {v.kind} {v.name};" for v in self.attributes)
        lines.extend(f"uniform {v.kind} {v.name};" for v in self.uniforms)
        lines.extend(f"varying {v.kind} {v.name};" for v in self.varyings)
        lines.append("void main() {")
        lines.extend(f"    {statement};" for statement in self.statements)
        lines.append("}")
        return lines

    @classmethod
    def generate_pair(cls, config: ShaderConfig) -> tuple[Shader, Shader]:
        """The vertex and fragment shaders for a lighting configuration."""
        return (
            cls.generate_vertex_shader(config),
            cls.generate_fragment_shader(config),
        )

    @classmethod
    def generate_vertex_shader(cls, config: ShaderConfig) -> Shader:
        shader = cls()

        shader.attribute("vec4", "a_position")
        shader.attribute("vec3", "a_color")
        shader.attribute("vec2", "a_texcoord")

        shader.varying("vec3", "v_color")
        shader.varying("vec2", "v_texcoord")

        shader.uniform("mat4", "u_world_view_projection")

        _add_lighting(config, shader, _Stage.VERTEX)

        # Matrices are row-major, so positions are post-multiplied.
        shader.statement("gl_Position = a_position * u_world_view_projection")
        shader.statement("v_color = a_color")
        shader.statement("v_texcoord = a_texcoord")

        return shader

    @classmethod
    def generate_fragment_shader(cls, config: ShaderConfig) -> Shader:
        shader = cls()

        shader.header("precision mediump float")
        shader.varying("vec3", "v_color")
        shader.varying("vec2", "v_texcoord")

        shader.uniform("vec3", "u_material_ambient")
        shader.uniform("vec3", "u_material_diffuse")
        shader.uniform("vec3", "u_material_specular")
        shader.uniform("float", "u_material_shininess")

        shader.uniform("sampler2D", "u_texture")

        shader.statement("vec3 diffuse = vec3(0.0, 0.0, 0.0)")
        shader.statement("vec3 specular = vec3(0.0, 0.0, 0.0)")

        _add_lighting(config, shader, _Stage.FRAGMENT)

        shader.statement("vec3 color = v_color * texture2D(u_texture, v_texcoord).xyz")

        shader.statement("gl_FragColor = vec4(u_material_ambient * color, 1.0)")
        shader.statement("gl_FragColor.xyz += diffuse * u_material_diffuse * color")
        shader.statement(
            "gl_FragColor.xyz += specular * u_material_specular + (u_material_shininess * 0.0)"
        )

        return shader


def _add_lighting(config: ShaderConfig, shader: Shader, stage: _Stage) -> None:
    _vertex_normals(config, shader, stage)
    _camera_vector(config, shader, stage)
    _directional_lights(config, shader, stage)
    _point_lights(config, shader, stage)


def _vertex_normals(config: ShaderConfig, shader: Shader, stage: _Stage) -> None:
    if config.total_lights() == 0:
        return

    if stage is _Stage.VERTEX:
        shader.attribute("vec3", "a_normal")
        shader.uniform("mat4", "u_inverse_world")
        shader.varying("vec3", "v_normal")
        # Pre-multiplied because the transpose of the inverse is wanted.
        shader.statement("v_normal = mat3(u_inverse_world) * a_normal")
    else:
        shader.varying("vec3", "v_normal")
        shader.statement("vec3 normal = normalize(v_normal)")


def _camera_vector(config: ShaderConfig, shader: Shader, stage: _Stage) -> None:
    if config.total_lights() == 0:
        return

    if stage is _Stage.VERTEX:
        shader.uniform("mat4", "u_world")
        shader.statement("vec3 world_position = (a_position * u_world).xyz")

        shader.uniform("vec3", "u_camera_position")
        shader.varying("vec3", "v_surface_to_camera")
        shader.statement("v_surface_to_camera = u_camera_position - world_position")
    else:
        shader.varying("vec3", "v_surface_to_camera")
        shader.statement("vec3 to_camera = normalize(v_surface_to_camera)")


def _specular_term(shader: Shader, diffuse: str, half_vec: str) -> None:
    shader.statement(f"if ({diffuse} > 0.0) {{")
    shader.statement(f"specular += pow(dot(normal, {half_vec}), u_material_shininess)")
    shader.statement("}")


def _directional_lights(config: ShaderConfig, shader: Shader, stage: _Stage) -> None:
    if stage is _Stage.VERTEX:
        return

    for i in range(config.directional_lights):
        to_light = f"u_directional_light_vector_{i}"
        half_vec = f"directional_half_vec_{i}"
        diffuse = f"directional_diffuse_{i}"

        shader.uniform("vec3", to_light)

        shader.statement(f"float {diffuse} = dot(normal, {to_light})")
        shader.statement(f"diffuse += max({diffuse}, 0.0)")
        shader.statement(f"vec3 {half_vec} = normalize({to_light} + to_camera)")
        _specular_term(shader, diffuse, half_vec)


def _point_lights(config: ShaderConfig, shader: Shader, stage: _Stage) -> None:
    for i in range(config.point_lights):
        varying = f"v_surface_to_point_light_{i}"

        if stage is _Stage.VERTEX:
            uniform = f"u_point_light_position_{i}"
            shader.uniform("vec3", uniform)
            shader.varying("vec3", varying)
            shader.statement(f"{varying} = {uniform} - world_position")
            continue

        to_light = f"to_point_light_{i}"
        half_vec = f"point_half_vec_{i}"
        diffuse = f"point_diffuse_{i}"

        shader.varying("vec3", varying)
        shader.statement(f"vec3 {to_light} = normalize({varying})")
        shader.statement(f"float {diffuse} = dot(normal, {to_light})")
        shader.statement(f"diffuse += max({diffuse}, 0.0)")
        shader.statement(f"vec3 {half_vec} = normalize({to_light} + to_camera)")
        _specular_term(shader, diffuse, half_vec)