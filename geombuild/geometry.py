"""Geometry arrays produced by the builders and their vertex layout."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np

# GPU COMPATIBILITY

class VertexAttribType(Enum):
    FLOAT32 = "float32"

class VertexAttribute:
    def __init__(self, name, size, vtype: VertexAttribType, offset):
        self.name = name
        self.size = size
        self.vtype = vtype
        self.offset = offset


class VertexLayout:
    def __init__(self, stride, attributes):
        self.stride = stride    # bytes per vertex
        self.attributes = attributes  # list of VertexAttribute


# Largest vertex count addressable by 16-bit indices.
MAX_UINT16_VERTICES = 65535


def index_dtype_for(vertex_count: int):
    """Narrowest unsigned index type able to address vertex_count vertices."""
    return np.uint32 if vertex_count > MAX_UINT16_VERTICES else np.uint16


@dataclass(frozen=True, eq=False)
class Geometry:
    """
    Flat geometry arrays ready for upload to a rendering pipeline.

    positions and normals hold 3 floats per vertex, uv holds 2.
    indices are grouped in triples, one triple per triangle.
    """

    primitive_type: str
    positions: np.ndarray
    normals: np.ndarray
    uv: np.ndarray
    indices: np.ndarray
    diagnostics: tuple[str, ...] = ()
    """Notices about input values that were corrected while building."""

    @property
    def vertex_count(self) -> int:
        return len(self.positions) // 3

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3

    @property
    def index_dtype(self):
        return self.indices.dtype

    def triangles(self) -> np.ndarray:
        """Indices as an (M, 3) view."""
        return self.indices.reshape(-1, 3)

    def interleaved_buffer(self) -> np.ndarray:
        """Per-vertex pos(3) + normal(3) + uv(2) rows, float32."""
        return np.hstack(
            (
                self.positions.reshape(-1, 3),
                self.normals.reshape(-1, 3),
                self.uv.reshape(-1, 2),
            )
        ).astype(np.float32)

    def get_vertex_layout(self) -> VertexLayout:
        """Get vertex layout for interleaved_buffer(): pos(3) + normal(3) + uv(2)."""
        return VertexLayout(
            stride=8 * 4,
            attributes=[
                VertexAttribute("position", 3, VertexAttribType.FLOAT32, 0),
                VertexAttribute("normal",   3, VertexAttribType.FLOAT32, 12),
                VertexAttribute("uv",       2, VertexAttribType.FLOAT32, 24),
            ]
        )

    def to_dict(self) -> dict:
        """Geometry record keyed the way createGeometry-style consumers expect."""
        return {
            "primitiveType": self.primitive_type,
            "positions": self.positions,
            "normals": self.normals,
            "uv": self.uv,
            "indices": self.indices,
        }
