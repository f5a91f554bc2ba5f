"""Scene, component, material, mesh and shader-source utilities for 3D rendering."""

__version__ = "1.0.0"

__all__ = [
    "camera",
    "light",
    "material",
    "mesh",
    "movement",
    "node",
    "scene",
    "shader_generator",
    "strings",
    "vecmath",
]