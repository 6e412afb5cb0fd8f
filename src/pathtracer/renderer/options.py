# renderer/options.py
# Flat render configuration shared by the camera, the renderer and the CLI.
from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Union, Tuple

from pathtracer.core.vector import Vector3
from pathtracer.errors import ConfigurationError

VectorLike = Union[Vector3, Tuple[float, float, float]]

_VECTOR_FIELDS = ("lookfrom", "lookat", "vup", "sky_color")

# Sample/bounce/resolution overrides, from fast previews to final images.
QUALITY_LEVELS: Dict[str, Dict[str, int]] = {
    "preview": {"samples_per_pixel": 4, "max_depth": 8, "image_width": 200},
    "balanced": {"samples_per_pixel": 32, "max_depth": 50, "image_width": 400},
    "final": {"samples_per_pixel": 100, "max_depth": 250, "image_width": 400},
}


def _as_vector(value: VectorLike, name: str) -> Vector3:
    if not isinstance(value, Vector3):
        try:
            x, y, z = value
            value = Vector3(float(x), float(y), float(z))
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"{name} must be a 3-component vector, got {value!r}") from exc
    if not all(math.isfinite(c) for c in value):
        raise ConfigurationError(f"{name} must have finite components, got {value!r}")
    return value


def _require_int(value: Any, name: str, minimum: int) -> None:
    # bool is an int subclass but never a meaningful count
    if not isinstance(value, int) or isinstance(value, bool):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise ConfigurationError(f"{name} must be at least {minimum}, got {value}")


@dataclass
class RenderOptions:
    aspect_ratio: float = 16.0 / 9.0
    image_width: int = 400
    samples_per_pixel: int = 100
    max_depth: int = 50
    vfov: float = 90.0
    lookfrom: Vector3 = field(default_factory=lambda: Vector3(0.0, 0.0, 0.0))
    lookat: Vector3 = field(default_factory=lambda: Vector3(0.0, 0.0, -1.0))
    vup: Vector3 = field(default_factory=lambda: Vector3(0.0, 1.0, 0.0))
    sky_color: Vector3 = field(default_factory=lambda: Vector3(0.5, 0.7, 1.0))
    defocus_angle: float = 0.0
    focus_dist: float = 10.0

    def __post_init__(self) -> None:
        for name in _VECTOR_FIELDS:
            setattr(self, name, _as_vector(getattr(self, name), name))

    @property
    def image_height(self) -> int:
        """Image height in pixels, truncated from width / aspect_ratio."""
        return int(self.image_width / self.aspect_ratio)

    def validate(self) -> "RenderOptions":
        """
        Check that the options describe a usable camera.

        Raises:
            ConfigurationError: on the first invalid field
        """
        if not (math.isfinite(self.aspect_ratio) and self.aspect_ratio > 0):
            raise ConfigurationError(f"aspect_ratio must be positive, got {self.aspect_ratio}")
        _require_int(self.image_width, "image_width", 1)
        _require_int(self.samples_per_pixel, "samples_per_pixel", 1)
        _require_int(self.max_depth, "max_depth", 0)
        if self.image_height < 1:
            raise ConfigurationError(
                f"image_width {self.image_width} at aspect_ratio {self.aspect_ratio} "
                f"leaves no rows")
        if not 0 < self.vfov < 180:
            raise ConfigurationError(f"vfov must be in (0, 180) degrees, got {self.vfov}")
        if not (self.defocus_angle >= 0 and math.isfinite(self.defocus_angle)):
            raise ConfigurationError(
                f"defocus_angle must be non-negative, got {self.defocus_angle}")
        if not (self.focus_dist > 0 and math.isfinite(self.focus_dist)):
            raise ConfigurationError(f"focus_dist must be positive, got {self.focus_dist}")
        for name in _VECTOR_FIELDS:
            setattr(self, name, _as_vector(getattr(self, name), name))

        view = self.lookfrom - self.lookat
        if view.near_zero():
            raise ConfigurationError("lookfrom and lookat must be distinct points")
        if self.vup.cross(view).near_zero():
            raise ConfigurationError("vup must not be parallel to the viewing direction")
        return self

    def with_quality(self, level: str) -> "RenderOptions":
        """Return a copy with the overrides of a QUALITY_LEVELS entry applied."""
        try:
            overrides = QUALITY_LEVELS[level]
        except KeyError:
            known = ", ".join(sorted(QUALITY_LEVELS))
            raise ConfigurationError(f"Unknown quality level '{level}'. Expected one of: {known}") from None
        return dataclasses.replace(self, **overrides)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "RenderOptions":
        """
        Build options from a plain mapping; vector fields may be given as
        3-tuples or lists.
        """
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(mapping) - known)
        if unknown:
            raise ConfigurationError(f"Unknown render option(s): {', '.join(unknown)}")
        return cls(**dict(mapping))
