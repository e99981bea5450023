"""Entity-component registry, vector and matrix math, transforms, cameras, culling and mesh primitives."""

__version__ = "0.1.0"