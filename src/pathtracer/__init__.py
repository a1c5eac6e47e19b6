"""
CPU Monte Carlo path tracer: spheres, a BVH, diffuse/metal/glass materials
and a thin-lens camera, rendered into a flat RGB byte buffer.
"""
from pathtracer.camera.camera import Camera
from pathtracer.config import RenderSettings
from pathtracer.core.pcg import PCG32
from pathtracer.core.vector import Vector3
from pathtracer.errors import ConfigurationError, PathTracerError
from pathtracer.renderer.raytracer import Renderer

__version__ = "0.1.0"

__all__ = [
    "Camera",
    "ConfigurationError",
    "PCG32",
    "PathTracerError",
    "RenderSettings",
    "Renderer",
    "Vector3",
]
