[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glframe"
version = "0.1.0"
description = "Vector and matrix maths, meshes, scene graphs, debug drawing and mouse input state for real-time 3D rendering"
requires-python = ">=3.10"
dependencies = []
keywords = ["3d", "graphics", "matrix", "quaternion", "mesh", "scene-graph", "input"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["glframe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
