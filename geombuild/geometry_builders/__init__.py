"""Procedural geometry builders."""

from geombuild.geometry_builders.config import (
    PlaneGeometryConfig,
    PlaneGeometryError,
    SanitizedPlaneConfig,
    sanitize_plane_config,
)
from geombuild.geometry_builders.plane import build_plane_geometry, build_sanitized_plane

__all__ = [
    "PlaneGeometryConfig",
    "PlaneGeometryError",
    "SanitizedPlaneConfig",
    "sanitize_plane_config",
    "build_plane_geometry",
    "build_sanitized_plane",
]
