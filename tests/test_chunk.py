import math
import random

import numpy as np
import pytest

from roninvox.chunk import Chunk
from roninvox.voxel import FLOATS_PER_VERTEX, Side


def _chunk(side_count=10, seed=7):
    chunk = Chunk(side_count, random.Random(seed))
    chunk.generate()
    return chunk


def test_default_side_count():
    chunk = Chunk()
    assert chunk.side_count == 10
    assert chunk.voxels == []


def test_voxels_lie_on_shell():
    chunk = _chunk(10)
    half = 10 // 2
    assert chunk.voxels
    for voxel in chunk.voxels:
        distance = math.sqrt(float(np.sum(voxel.origin.astype(float) ** 2)))
        assert half - 1 <= distance <= half
        assert all(-half <= c < half for c in voxel.origin)


def test_voxels_show_every_side_and_are_opaque():
    chunk = _chunk(8)
    for voxel in chunk.voxels:
        assert voxel.sides == Side.ALL
        assert voxel.color[3] == 1.0
        assert all(0.0 <= c <= 1.0 for c in voxel.color[:3])


def test_smallest_shell():
    chunk = _chunk(2)
    assert len(chunk.voxels) == 4
    assert chunk.voxel_count == 4


def test_empty_chunk():
    chunk = _chunk(0)
    assert chunk.voxels == []
    assert chunk.vertex_data().size == 0


def test_negative_side_count_rejected():
    with pytest.raises(ValueError):
        Chunk(-1)


def test_same_seed_same_data():
    a = _chunk(10, seed=3).vertex_data()
    b = _chunk(10, seed=3).vertex_data()
    np.testing.assert_array_equal(a, b)


def test_voxel_count_accumulates_over_regeneration():
    chunk = _chunk(10)
    first = len(chunk.voxels)
    chunk.generate()
    assert len(chunk.voxels) == first
    assert chunk.voxel_count == 2 * first


def test_vertex_data_tallies():
    chunk = _chunk(6)
    data = chunk.vertex_data()
    voxels = len(chunk.voxels)
    assert chunk.quad_count == 6 * voxels
    assert chunk.triangle_count == 2 * chunk.quad_count
    assert data.reshape(-1, FLOATS_PER_VERTEX).shape[0] == 4 * chunk.quad_count


def test_vertex_data_is_concatenation_of_voxels():
    chunk = _chunk(6, seed=1)
    twin = _chunk(6, seed=1)
    expected = np.concatenate([v.vertex_data() for v in twin.voxels])
    np.testing.assert_array_equal(chunk.vertex_data(), expected)


def test_describe_summary():
    chunk = _chunk(6)
    chunk.vertex_data()
    text = chunk.describe()
    assert text == (
        "\tChunk: \n"
        f"\t\tVoxels count: {chunk.voxel_count}\n"
        f"\t\tQuads count: {chunk.quad_count}\n"
        f"\t\tTriangles count: {chunk.triangle_count}"
    )
    assert str(chunk) == text


def test_describe_with_each_voxel():
    chunk = _chunk(4)
    text = chunk.describe(show_each_voxel=True)
    assert "Voxels data:\n" in text
    assert text.count("Voxel: \n") == len(chunk.voxels)
    assert text.endswith("\n")