"""Vector and rectangle math, overlay geometry, clipping, readback helpers and shader header generation."""

__version__ = "0.1.0"

__all__ = [
    "vector",
    "geometry",
    "shadergen",
    "overlay",
    "clipping",
    "readback",
]