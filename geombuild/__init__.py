"""geombuild - procedural geometry arrays for scene-graph toolkits."""

from geombuild.geometry import Geometry, VertexAttribType, VertexAttribute, VertexLayout
from geombuild.geometry_builders import (
    PlaneGeometryConfig,
    PlaneGeometryError,
    build_plane_geometry,
    sanitize_plane_config,
)
from geombuild.primitives import PlaneGeometry, geometry_id

__all__ = [
    "Geometry",
    "VertexAttribType",
    "VertexAttribute",
    "VertexLayout",
    "PlaneGeometryConfig",
    "PlaneGeometryError",
    "build_plane_geometry",
    "sanitize_plane_config",
    "PlaneGeometry",
    "geometry_id",
]
