"""Plane-shaped geometry arrays."""

from __future__ import annotations

from typing import Optional, Union

import numpy as np

from geombuild import log
from geombuild.geometry import Geometry, index_dtype_for
from geombuild.geometry_builders.config import (
    PlaneGeometryConfig,
    SanitizedPlaneConfig,
    sanitize_plane_config,
)


def build_plane_geometry(
    cfg: Optional[Union[PlaneGeometryConfig, dict]] = None,
) -> Geometry:
    """
    Create plane-shaped geometry arrays.

    The plane lies in the X-Z plane at height center[1], faces -Z and is
    split into a grid of quads, two triangles each.

    Example:
        plane = build_plane_geometry({
            "center": [0, 0, 0],
            "xSize": 2,
            "zSize": 2,
            "xSegments": 10,
            "zSegments": 10,
        })
        model.create_geometry(
            geometry_id="planeGeometry",
            primitive_type=plane.primitive_type,  # "triangles"
            positions=plane.positions,
            normals=plane.normals,
            indices=plane.indices,
        )

    cfg may be a PlaneGeometryConfig or a dict with the same fields
    (camelCase or snake_case keys). Negative sizes and segment counts are
    inverted with a warning unless the config is strict.
    """
    if not isinstance(cfg, PlaneGeometryConfig):
        cfg = PlaneGeometryConfig.from_dict(cfg)

    plane, diagnostics = sanitize_plane_config(cfg)
    return build_sanitized_plane(plane, diagnostics)


def build_sanitized_plane(
    plane: SanitizedPlaneConfig,
    diagnostics: tuple[str, ...] = (),
) -> Geometry:
    """Build geometry from parameters sanitize_plane_config() already produced."""
    for notice in diagnostics:
        log.warn(notice)

    positions, normals, uvs = _grid_vertices(plane)
    indices = _grid_indices(plane)

    return Geometry(
        primitive_type="triangles",
        positions=positions,
        normals=normals,
        uv=uvs,
        indices=indices,
        diagnostics=diagnostics,
    )


def _grid_vertices(plane: SanitizedPlaneConfig):
    center_x, center_y, center_z = plane.center
    plane_x = plane.x_segments
    plane_z = plane.z_segments

    half_width = plane.x_size / 2
    half_height = plane.z_size / 2
    segment_width = plane.x_size / plane_x
    segment_height = plane.z_size / plane_z

    ix = np.arange(plane_x + 1, dtype=np.float64)
    iz = np.arange(plane_z + 1, dtype=np.float64)
    x = ix * segment_width - half_width
    z = iz * segment_height - half_height

    # Rows run along Z, columns along X.
    shape = (plane_z + 1, plane_x + 1)

    positions = np.empty(shape + (3,), dtype=np.float32)
    positions[..., 0] = x[np.newaxis, :] + center_x
    positions[..., 1] = center_y
    positions[..., 2] = -z[:, np.newaxis] + center_z

    normals = np.zeros(shape + (3,), dtype=np.float32)
    normals[..., 2] = -1

    uvs = np.empty(shape + (2,), dtype=np.float32)
    uvs[..., 0] = (ix / plane_x)[np.newaxis, :]
    uvs[..., 1] = ((plane_z - iz) / plane_z)[:, np.newaxis]

    return positions.reshape(-1), normals.reshape(-1), uvs.reshape(-1)


def _grid_indices(plane: SanitizedPlaneConfig) -> np.ndarray:
    plane_x = plane.x_segments
    plane_z = plane.z_segments
    plane_x1 = plane_x + 1

    ix = np.arange(plane_x, dtype=np.int64)
    iz = np.arange(plane_z, dtype=np.int64)

    # Corners of every cell, row-major.
    a = ix[np.newaxis, :] + plane_x1 * iz[:, np.newaxis]
    b = a + plane_x1
    c = b + 1
    d = a + 1

    triangles = np.stack([d, b, a, d, c, b], axis=-1)

    vertex_count = plane_x1 * (plane_z + 1)
    return triangles.reshape(-1).astype(index_dtype_for(vertex_count))
