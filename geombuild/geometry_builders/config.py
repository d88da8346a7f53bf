"""
Configuration records for the plane geometry builder.

PlaneGeometryConfig is what callers fill in. sanitize_plane_config turns it
into a SanitizedPlaneConfig the builder can use directly, together with the
notices about every value it had to correct.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence


class PlaneGeometryError(ValueError):
    """Raised for a malformed center point, or negative input in strict mode."""


@dataclass(frozen=True)
class PlaneGeometryConfig:
    """Configuration of a tessellated plane in the X-Z plane."""

    center: Optional[Sequence[float]] = None
    """Center point of the plane. Origin when absent."""

    x_size: Optional[float] = None
    """Extent along X. 1 when absent."""

    z_size: Optional[float] = None
    """Extent along Z. 1 when absent."""

    x_segments: Optional[float] = None
    """Number of segments along X. 1 when absent."""

    z_segments: Optional[float] = None
    """Number of segments along Z. Accepted but not used, see sanitize_plane_config()."""

    strict: bool = False
    """Reject negative sizes and segment counts instead of inverting them."""

    _KEYS = {
        "center": "center",
        "xSize": "x_size",
        "zSize": "z_size",
        "xSegments": "x_segments",
        "zSegments": "z_segments",
    }

    def to_dict(self) -> dict:
        """Serialize to dictionary with camelCase keys."""
        data = {}
        for key, attr in self._KEYS.items():
            value = getattr(self, attr)
            if value is not None:
                data[key] = list(value) if attr == "center" else value
        return data

    @staticmethod
    def from_dict(data: Optional[dict]) -> "PlaneGeometryConfig":
        """Deserialize from dictionary. Accepts camelCase and snake_case keys."""
        if not data:
            return PlaneGeometryConfig()
        kwargs = {}
        for key, attr in PlaneGeometryConfig._KEYS.items():
            if key in data:
                kwargs[attr] = data[key]
            elif attr in data:
                kwargs[attr] = data[attr]
        if "strict" in data:
            kwargs["strict"] = bool(data["strict"])
        return PlaneGeometryConfig(**kwargs)


@dataclass(frozen=True)
class SanitizedPlaneConfig:
    """Plane parameters after defaults and corrections were applied."""

    center: tuple[float, float, float]
    x_size: float
    z_size: float
    x_segments: int
    z_segments: int


def _or_default(value, default):
    # None, zero and NaN all count as "not given".
    if value is None or value == 0:
        return default
    if value != value:
        return default
    return value


def _non_negative(value, name: str, strict: bool, diagnostics: list):
    if value >= 0:
        return value
    if strict:
        raise PlaneGeometryError(f"negative {name} not allowed: {value}")
    diagnostics.append(f"negative {name} not allowed - will invert")
    return -value


def _segment_count(value, name: str, strict: bool, diagnostics: list) -> int:
    value = _non_negative(_or_default(value, 1), name, strict, diagnostics)
    if value < 1:
        value = 1
    return int(math.floor(value)) or 1


def _center(center) -> tuple[float, float, float]:
    if center is None:
        return (0.0, 0.0, 0.0)
    # Only the first three components are read.
    try:
        point = tuple(float(c) for c in list(center)[:3])
    except (TypeError, ValueError) as e:
        raise PlaneGeometryError(f"center must be a 3D point, got {center!r}") from e
    if len(point) < 3:
        raise PlaneGeometryError(f"center must have 3 components, got {len(point)}")
    return point


def sanitize_plane_config(
    config: PlaneGeometryConfig,
) -> tuple[SanitizedPlaneConfig, tuple[str, ...]]:
    """
    Apply defaults and correct invalid values.

    Negative sizes and segment counts are inverted and reported in the
    returned diagnostics (or rejected when config.strict is set). Segment
    counts are floored and clamped to at least 1.

    The Z segment count is taken from config.x_segments, so the grid always
    has the same density along both axes and config.z_segments has no effect.
    """
    diagnostics: list[str] = []

    x_size = _non_negative(_or_default(config.x_size, 1), "xSize", config.strict, diagnostics)
    z_size = _non_negative(_or_default(config.z_size, 1), "zSize", config.strict, diagnostics)
    x_segments = _segment_count(config.x_segments, "xSegments", config.strict, diagnostics)
    z_segments = _segment_count(config.x_segments, "zSegments", config.strict, diagnostics)

    sanitized = SanitizedPlaneConfig(
        center=_center(config.center),
        x_size=float(x_size),
        z_size=float(z_size),
        x_segments=x_segments,
        z_segments=z_segments,
    )
    return sanitized, tuple(diagnostics)
