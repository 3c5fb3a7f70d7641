[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scenekit"
version = "0.1.0"
description = "An entity-component scene engine with matrix maths, a transform hierarchy and generated lighting shaders"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "3d",
    "scene-graph",
    "entity-component-system",
    "ecs",
    "matrix",
    "vector",
    "shader",
    "glsl",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["scenekit"]

[tool.hatch.build.targets.sdist]
include = ["scenekit", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
