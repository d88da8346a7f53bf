"""Primitive geometries with content-derived ids."""

import hashlib

from geombuild.geometry_builders import (
    PlaneGeometryConfig,
    build_sanitized_plane,
    sanitize_plane_config,
)


def geometry_id(name: str, *args) -> str:
    """Compute geometry id from name and parameters."""
    key = f"{name}:{':'.join(str(a) for a in args)}"
    return hashlib.sha256(key.encode()).hexdigest()[:16]


class PlaneGeometry:
    """
    Plane geometry together with an id suitable for createGeometry-style APIs.

    The id is derived from the sanitized parameters, so two planes that end
    up with the same arrays share it and a consumer can register them once.
    """

    def __init__(
        self,
        center=None,
        x_size: float = None,
        z_size: float = None,
        x_segments: float = None,
        z_segments: float = None,
        strict: bool = False,
    ):
        self.config = PlaneGeometryConfig(
            center=center,
            x_size=x_size,
            z_size=z_size,
            x_segments=x_segments,
            z_segments=z_segments,
            strict=strict,
        )
        self.plane, diagnostics = sanitize_plane_config(self.config)
        self.geometry_id = geometry_id(
            "PlaneGeometry",
            self.plane.center,
            self.plane.x_size,
            self.plane.z_size,
            self.plane.x_segments,
            self.plane.z_segments,
        )
        self.geometry = build_sanitized_plane(self.plane, diagnostics)

    @property
    def primitive_type(self) -> str:
        return self.geometry.primitive_type

    def to_dict(self) -> dict:
        data = self.geometry.to_dict()
        data["geometryId"] = self.geometry_id
        return data
