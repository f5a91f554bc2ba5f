[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bwxsdk"
version = "1.0.0"
description = "Scene, component, material, mesh and GLSL source utilities for real-time 3D rendering, plus string helpers"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["3d", "rendering", "ecs", "shaders", "glsl", "scene-graph", "camera", "quaternion"]
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
packages = ["bwxsdk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
