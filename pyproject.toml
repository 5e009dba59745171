[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tyraengine"
version = "0.1.0"
description = "Core 3D engine models: vector math, frustum culling, mesh animation and OBJ/DFF/BMP/PNG asset loading"
requires-python = ">=3.10"
keywords = ["3d", "engine", "mesh", "obj", "dff", "renderware", "frustum", "animation", "texture"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["tyraengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
