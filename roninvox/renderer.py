"""Index generation and vertex layout for drawing voxel quads as triangles."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from roninvox.voxel import FLOATS_PER_VERTEX

FLOAT_SIZE = 4
"""Bytes in one vertex float."""

_QUAD_PATTERN = np.array((0, 1, 3, 2, 1, 3), dtype=np.int64)


@dataclass(frozen=True)
class VertexAttribute:
    """One interleaved attribute: shader location, component count, stride and byte offset."""

    location: int
    components: int
    stride: int
    offset: int


def vertex_attributes() -> tuple[VertexAttribute, ...]:
    """Layout of position (3), colour (4) and normal (3) within each vertex."""
    stride = FLOATS_PER_VERTEX * FLOAT_SIZE
    return (
        VertexAttribute(0, 3, stride, 0),
        VertexAttribute(1, 4, stride, 3 * FLOAT_SIZE),
        VertexAttribute(2, 3, stride, 7 * FLOAT_SIZE),
    )


def quad_indices(float_count: int) -> np.ndarray:
    """Triangle indices for the quads held in `float_count` interleaved vertex floats."""
    if float_count < 0:
        raise ValueError(f"float_count must not be negative, got {float_count}")
    vertices = float_count // FLOATS_PER_VERTEX
    index_budget = vertices + 2 * (vertices // 4) + 1
    quads = len(range(0, index_budget, 6))
    bases = 4 * np.arange(quads, dtype=np.int64)[:, None]
    return (bases + _QUAD_PATTERN).ravel().astype(np.uint32)


class Mesh:
    """Interleaved vertex floats together with the triangle indices that draw them."""

    def __init__(self, vertices: Sequence[float] | np.ndarray) -> None:
        self.vertices = np.asarray(vertices, dtype=np.float32).ravel()
        self.indices = quad_indices(self.vertices.size)
        self.attributes = vertex_attributes()

    @property
    def vertex_count(self) -> int:
        """Number of whole vertices held."""
        return self.vertices.size // FLOATS_PER_VERTEX

    def triangle_count(self) -> int:
        """Number of triangles the indices describe."""
        return self.indices.size // 3