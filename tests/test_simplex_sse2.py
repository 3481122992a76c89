import numpy as np
import pytest

from vxnoise.simplex import SimplexNormal, simplex_get2d, simplex_get3d
from vxnoise.simplex_sse2 import SimplexSSE2, sse2_simplex_get2d, sse2_simplex_get3d

POINTS_2D = [
    (0.3, 0.7),
    (-1.25, 2.5),
    (10.1, -3.3),
    (-0.5, -0.5),
    (123.456, 78.9),
    (0.999, 0.001),
]

POINTS_3D = [
    (0.3, 0.7, 0.1),
    (-1.25, 2.5, 0.75),
    (10.1, -3.3, 5.5),
    (-0.5, -0.5, -0.5),
    (0.9, 0.2, 0.5),
    (0.1, 0.9, 0.4),
    (0.4, 0.1, 0.9),
    (7.77, 1.11, -2.22),
]


@pytest.mark.parametrize("seed", [0, 1337, -42])
def test_lanes_2d_match_scalar(seed):
    xs = np.array([p[0] for p in POINTS_2D], dtype=np.float32)
    ys = np.array([p[1] for p in POINTS_2D], dtype=np.float32)
    lanes = sse2_simplex_get2d(seed, xs, ys)
    assert lanes.shape == (len(POINTS_2D),)
    for value, (x, y) in zip(lanes, POINTS_2D):
        assert float(value) == pytest.approx(simplex_get2d(seed, x, y), rel=1e-5, abs=1e-6)


@pytest.mark.parametrize("seed", [0, 1337, -42])
def test_lanes_3d_match_scalar(seed):
    xs, ys, zs = (np.array(c, dtype=np.float32) for c in zip(*POINTS_3D))
    lanes = sse2_simplex_get3d(seed, xs, ys, zs)
    for value, (x, y, z) in zip(lanes, POINTS_3D):
        assert float(value) == pytest.approx(simplex_get3d(seed, x, y, z), rel=1e-5, abs=1e-6)


def test_origin_is_zero():
    assert float(sse2_simplex_get2d(7, 0.0, 0.0)) == 0.0
    assert float(sse2_simplex_get3d(7, 0.0, 0.0, 0.0)) == 0.0


def test_lane_shape_is_preserved():
    x = np.linspace(-2, 2, 6, dtype=np.float32).reshape(2, 3)
    out = sse2_simplex_get2d(3, x, 0.5)
    assert out.shape == (2, 3)
    assert out.dtype == np.float32
    assert float(out[1, 2]) == pytest.approx(simplex_get2d(3, float(x[1, 2]), 0.5), abs=1e-6)


def test_float_seed_rejected():
    with pytest.raises(TypeError):
        sse2_simplex_get2d(1.5, 0.1, 0.2)


def test_get2d_matches_normal_generator():
    lanes = SimplexSSE2(99, 16.0)
    normal = SimplexNormal(99, 16.0)
    for x, y in POINTS_2D:
        assert lanes.get2d(x * 10, y * 10) == pytest.approx(normal.get2d(x * 10, y * 10), abs=1e-6)


def test_get3d_matches_normal_generator():
    lanes = SimplexSSE2(5, 2.0)
    normal = SimplexNormal(5, 2.0)
    for x, y, z in POINTS_3D:
        assert lanes.get3d(x, y, z) == pytest.approx(normal.get3d(x, y, z), abs=1e-6)


def test_explicit_scale_equals_prescaled_coordinates():
    gen = SimplexSSE2(11, 1.0)
    assert gen.get2d(8.0, 4.0, 4.0) == gen.get2d(2.0, 1.0)
    assert gen.get3d(8.0, 4.0, 12.0, 4.0) == gen.get3d(2.0, 1.0, 3.0)


def test_seed_wraps_to_32_bits():
    assert SimplexSSE2(2**32 + 5, 1.0).get2d(0.3, 0.8) == SimplexSSE2(5, 1.0).get2d(0.3, 0.8)


def test_seed_changes_output_deterministically():
    xs = np.linspace(0.1, 9.7, 32, dtype=np.float32)
    a = SimplexSSE2(1, 1.0).lanes_get2d(xs, xs * 0.5)
    again = SimplexSSE2(1, 1.0).lanes_get2d(xs, xs * 0.5)
    b = SimplexSSE2(2, 1.0).lanes_get2d(xs, xs * 0.5)
    assert np.array_equal(a, again)
    assert not np.array_equal(a, b)


@pytest.mark.parametrize("size", [(3, 5), (2, 2), (1, 3), (4, 1)])
def test_noise2d_matches_point_samples(size):
    gen = SimplexSSE2(21, 3.0)
    grid = gen.noise2d(-1.0, 2.0, size[0], size[1], 0.5)
    assert grid.size(0) == size[0] and grid.size(1) == size[1]
    for ix in range(size[0]):
        for iy in range(size[1]):
            expected = gen.get2d(-1.0 + ix * 0.5, 2.0 + iy * 0.5)
            assert grid[ix, iy] == pytest.approx(expected, abs=1e-6)


def test_noise3d_full_blocks_match_point_samples():
    gen = SimplexSSE2(8, 2.0)
    grid = gen.noise3d(0.25, -0.5, 1.0, 2, 2, 3, 0.75)
    for ix in range(2):
        for iy in range(2):
            for iz in range(3):
                expected = gen.get3d(0.25 + ix * 0.75, -0.5 + iy * 0.75, 1.0 + iz * 0.75)
                assert grid[ix, iy, iz] == pytest.approx(expected, abs=1e-6)


def test_noise3d_partial_block_restarts_at_origin():
    gen = SimplexSSE2(8, 2.0)
    grid = gen.noise3d(0.25, -0.5, 1.0, 3, 1, 5, 0.75)
    flat = grid.values()
    assert flat.size == 15
    assert np.array_equal(flat[-3:], flat[:3])
    assert grid[0, 0, 4] == pytest.approx(gen.get3d(0.25, -0.5, 1.0 + 4 * 0.75), abs=1e-6)


def test_noise3d_small_grid_matches_points():
    gen = SimplexSSE2(4, 1.5)
    grid = gen.noise3d(0.1, 0.2, 0.3, 1, 1, 3, 0.4)
    for iz in range(3):
        assert grid[0, 0, iz] == pytest.approx(gen.get3d(0.1, 0.2, 0.3 + iz * 0.4), abs=1e-6)


def test_empty_grids():
    gen = SimplexSSE2(1, 1.0)
    assert gen.noise2d(0.0, 0.0, 0, 4, 1.0).is_empty()
    assert gen.noise3d(0.0, 0.0, 0.0, 2, 0, 2, 1.0).is_empty()


def test_lanes_use_default_scale():
    gen = SimplexSSE2(17, 8.0)
    xs = np.array([1.0, 2.0, 3.0, 4.0], dtype=np.float32)
    assert np.array_equal(gen.lanes_get2d(xs, xs), gen.lanes_get2d(xs, xs, 8.0))
    assert np.array_equal(gen.lanes_get3d(xs, xs, xs), gen.lanes_get3d(xs / 8, xs / 8, xs / 8, 1.0))