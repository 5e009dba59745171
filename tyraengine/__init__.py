"""3D engine models, math, animated meshes, textures and OBJ/DFF/BMP/PNG loaders."""

__version__ = "0.1.0"