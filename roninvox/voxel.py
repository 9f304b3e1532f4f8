"""A single unit cube whose visible faces become coloured quads."""

from __future__ import annotations

import enum
from collections.abc import Sequence

import numpy as np

FLOATS_PER_VERTEX = 10
"""Position (3), colour (4) and normal (3) for each vertex."""

VERTICES_PER_QUAD = 4


class Side(enum.IntFlag):
    """Bit flags selecting which faces of a voxel are shown."""

    NONE = 0
    BACK = 1
    LEFT = 2
    BOTTOM = 4
    RIGHT = 8
    TOP = 16
    FRONT = 32
    ALL = 63


def _face(corners, normal):
    return (
        np.array(corners, dtype=np.float32),
        np.array(normal, dtype=np.float32),
    )


# Faces in emission order, each with its corner offsets and outward normal.
_FACES = (
    (Side.BACK, *_face(((0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)), (0, 0, -1))),
    (Side.LEFT, *_face(((0, 0, 0), (0, 0, 1), (0, 1, 1), (0, 1, 0)), (-1, 0, 0))),
    (Side.BOTTOM, *_face(((0, 0, 0), (0, 0, 1), (1, 0, 1), (1, 0, 0)), (0, -1, 0))),
    (Side.RIGHT, *_face(((1, 0, 1), (1, 0, 0), (1, 1, 0), (1, 1, 1)), (1, 0, 0))),
    (Side.TOP, *_face(((0, 1, 1), (1, 1, 1), (1, 1, 0), (0, 1, 0)), (0, 1, 0))),
    (Side.FRONT, *_face(((0, 0, 1), (1, 0, 1), (1, 1, 1), (0, 1, 1)), (0, 0, 1))),
)


def _vector(values: Sequence[float], size: int, name: str) -> np.ndarray:
    array = np.array(values, dtype=np.float32)
    if array.shape != (size,):
        raise ValueError(f"{name} must have {size} components, got shape {array.shape}")
    return array


class Voxel:
    """A unit cube anchored at its back-bottom-left corner."""

    def __init__(
        self,
        origin: Sequence[float] = (0.0, 0.0, 0.0),
        color: Sequence[float] = (1.0, 1.0, 1.0, 1.0),
        sides: int = Side.ALL,
    ) -> None:
        self.origin = _vector(origin, 3, "origin")
        self.color = _vector(color, 4, "color")
        sides = int(sides)
        if not 0 <= sides <= 0xFF:
            raise ValueError(f"sides must fit in one byte, got {sides}")
        self.sides = sides
        self.active = True
        # Counts every quad emitted so far; held in a single byte.
        self.quad_count = 0

    def vertex_data(self) -> np.ndarray:
        """Interleaved vertex floats for every shown face; empty if inactive."""
        if not self.active:
            return np.empty(0, dtype=np.float32)

        quads = []
        for side, corners, normal in _FACES:
            if not self.sides & side:
                continue
            positions = self.origin + corners
            colors = np.broadcast_to(self.color, (VERTICES_PER_QUAD, 4))
            normals = np.broadcast_to(normal, (VERTICES_PER_QUAD, 3))
            quads.append(np.hstack((positions, colors, normals)).ravel())
            self.quad_count = (self.quad_count + 1) % 256

        if not quads:
            return np.empty(0, dtype=np.float32)
        return np.concatenate(quads).astype(np.float32, copy=False)

    def __str__(self) -> str:
        x, y, z = (float(v) for v in self.origin)
        r, g, b, a = (float(v) for v in self.color)
        return (
            "Voxel: \n"
            "\tOrigin: \n"
            f"\t\tx:{x:f} y:{y:f} z:{z:f}"
            "\n\tColor: \n"
            f"\t\tr:{r:f} g:{g:f} b:{b:f} a:{a:f}"
            f"\n\tQuad Count: {self.quad_count}"
        )