# config.py
# Render settings: image size, sampling budget, seeds, camera pose.
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Mapping

from pathtracer.core.pcg import DEFAULT_SEED_SEQUENCE, DEFAULT_SEED_STATE
from pathtracer.core.vector import Vector3
from pathtracer.errors import ConfigurationError

_CAMERA_FIELDS = ("look_from", "look_at", "vup", "vfov", "aperture", "focus_distance")


@dataclass
class RenderSettings:
    """
    Everything a render needs besides the scene itself.

    ``image_height`` is derived from the width and aspect ratio. Call
    ``validate()`` (the renderer does) before using the settings.
    """
    image_width: int = 400
    aspect_ratio: float = 16.0 / 9.0
    samples_per_pixel: int = 100
    max_depth: int = 50
    seed_state: int = DEFAULT_SEED_STATE
    seed_sequence: int = DEFAULT_SEED_SEQUENCE
    workers: int = 1
    use_bvh: bool = True

    look_from: Vector3 = field(default_factory=lambda: Vector3(0.0, 0.0, 0.0))
    look_at: Vector3 = field(default_factory=lambda: Vector3(0.0, 0.0, -1.0))
    vup: Vector3 = field(default_factory=lambda: Vector3(0.0, 1.0, 0.0))
    vfov: float = 90.0
    aperture: float = 0.0
    focus_distance: float = 1.0

    @property
    def image_height(self) -> int:
        if self.aspect_ratio <= 0:
            return 0
        return int(self.image_width / self.aspect_ratio)

    def validate(self) -> "RenderSettings":
        if self.image_width <= 0:
            raise ConfigurationError(f"image_width must be positive, got {self.image_width}")
        if self.aspect_ratio <= 0:
            raise ConfigurationError(f"aspect_ratio must be positive, got {self.aspect_ratio}")
        if self.image_height <= 0:
            raise ConfigurationError(
                f"image of width {self.image_width} at aspect ratio {self.aspect_ratio} has no rows")
        if self.samples_per_pixel <= 0:
            raise ConfigurationError(
                f"samples_per_pixel must be positive, got {self.samples_per_pixel}")
        if self.max_depth <= 0:
            raise ConfigurationError(f"max_depth must be positive, got {self.max_depth}")
        if self.seed_state < 0 or self.seed_sequence < 0:
            raise ConfigurationError("random seeds must be non-negative integers")
        if self.workers < 1:
            raise ConfigurationError(f"workers must be at least 1, got {self.workers}")
        if not 0.0 < self.vfov < 180.0:
            raise ConfigurationError(f"vfov must be between 0 and 180 degrees, got {self.vfov}")
        if self.aperture < 0:
            raise ConfigurationError(f"aperture must be non-negative, got {self.aperture}")
        if self.focus_distance <= 0:
            raise ConfigurationError(
                f"focus_distance must be positive, got {self.focus_distance}")
        view = self.look_from - self.look_at
        if view.near_zero():
            raise ConfigurationError("look_from and look_at must be distinct points")
        if view.cross(self.vup).near_zero():
            raise ConfigurationError("vup must not be parallel to the view direction")
        return self

    def with_camera(self, camera: Mapping[str, Any]) -> "RenderSettings":
        """Copy with camera pose fields replaced; other keys are rejected."""
        unknown = set(camera) - set(_CAMERA_FIELDS)
        if unknown:
            raise ConfigurationError(f"unknown camera settings: {sorted(unknown)}")
        return dataclasses.replace(self, **camera)

    def replace(self, **changes: Any) -> "RenderSettings":
        return dataclasses.replace(self, **changes)
