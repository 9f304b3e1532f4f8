"""A hollow sphere of voxels."""

from __future__ import annotations

import itertools
import math
import random

import numpy as np

from roninvox.voxel import Side, Voxel


class Chunk:
    """A cube of `side_count` voxels per side, filled as a spherical shell."""

    def __init__(self, side_count: int = 10, rng: random.Random | None = None) -> None:
        if side_count < 0:
            raise ValueError(f"side_count must not be negative, got {side_count}")
        self.side_count = side_count
        self._rng = rng if rng is not None else random.Random()
        self.voxels: list[Voxel] = []
        self.voxel_count = 0
        self.quad_count = 0
        self.triangle_count = 0

    def _random_color(self) -> tuple[float, float, float, float]:
        r, g, b = (self._rng.randrange(255) / 255.0 for _ in range(3))
        return (r, g, b, 1.0)

    def generate(self) -> None:
        """Fill the chunk with randomly coloured voxels on a one-unit thick shell."""
        self.voxels.clear()
        half = self.side_count // 2
        span = range(-half, half)
        for x, y, z in itertools.product(span, repeat=3):
            distance = math.sqrt(x * x + y * y + z * z)
            if half - 1 <= distance <= half:
                self.voxels.append(Voxel((x, y, z), self._random_color(), Side.ALL))
                self.voxel_count += 1

    def vertex_data(self) -> np.ndarray:
        """All voxels' vertex floats, concatenated; updates the quad and triangle tallies."""
        parts = []
        for voxel in self.voxels:
            data = voxel.vertex_data()
            self.quad_count += voxel.quad_count
            self.triangle_count += voxel.quad_count * 2
            parts.append(data)
        if not parts:
            return np.empty(0, dtype=np.float32)
        return np.concatenate(parts)

    def describe(self, show_each_voxel: bool = False) -> str:
        """A summary of the chunk's counts, optionally followed by every voxel."""
        text = (
            "\tChunk: \n"
            f"\t\tVoxels count: {self.voxel_count}\n"
            f"\t\tQuads count: {self.quad_count}\n"
            f"\t\tTriangles count: {self.triangle_count}"
        )
        if show_each_voxel:
            text += "Voxels data:\n" + "".join(f"{voxel}\n" for voxel in self.voxels)
        return text

    def __str__(self) -> str:
        return self.describe()