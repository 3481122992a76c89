import numpy as np
import pytest

from vxnoise.simplex_fractal_lanes import SimplexFractalSSE2, SimplexFractalSSE42
from vxnoise.simplex_sse2 import SimplexSSE2
from vxnoise.simplex_sse42 import SimplexSSE42


def _points():
    rng = np.random.default_rng(7)
    xs = rng.uniform(-20.0, 20.0, 32).astype(np.float32)
    ys = rng.uniform(-20.0, 20.0, 32).astype(np.float32)
    zs = rng.uniform(-20.0, 20.0, 32).astype(np.float32)
    return xs, ys, zs


def test_one_octave_matches_single_noise():
    xs, ys, zs = _points()
    pairs = [
        (SimplexFractalSSE2(42, 3.0, 1, 0.5, 2.0), SimplexSSE2(42, 3.0)),
        (SimplexFractalSSE42(42, 3.0, 1, 0.5, 2.0), SimplexSSE42(42, 3.0)),
    ]
    for fractal, single in pairs:
        assert fractal.lanes_get2d(xs, ys).tolist() == single.lanes_get2d(xs, ys).tolist()
        assert (
            fractal.lanes_get3d(xs, ys, zs).tolist() == single.lanes_get3d(xs, ys, zs).tolist()
        )


def test_zero_persistence_keeps_only_first_octave():
    xs, ys, zs = _points()
    pairs = [
        (SimplexFractalSSE2(5, 2.0, 6, 0.0, 2.0), SimplexFractalSSE2(5, 2.0, 1, 0.0, 2.0)),
        (SimplexFractalSSE42(5, 2.0, 6, 0.0, 2.0), SimplexFractalSSE42(5, 2.0, 1, 0.0, 2.0)),
    ]
    for many, one in pairs:
        assert many.lanes_get2d(xs, ys).tolist() == one.lanes_get2d(xs, ys).tolist()
        assert many.lanes_get3d(xs, ys, zs).tolist() == one.lanes_get3d(xs, ys, zs).tolist()


def test_zero_octaves_gives_zero():
    xs, ys, zs = _points()
    for gen in (SimplexFractalSSE2(1, 1.0, 0, 0.5, 2.0), SimplexFractalSSE42(1, 1.0, 0, 0.5, 2.0)):
        assert gen.lanes_get2d(xs, ys).tolist() == [0.0] * 32
        assert gen.lanes_get3d(xs, ys, zs).tolist() == [0.0] * 32
        assert gen.get2d(1.5, 2.5) == 0.0


def test_origin_is_zero():
    assert SimplexFractalSSE2(123, 1.0, 4, 0.5, 2.0).get2d(0.0, 0.0) == 0.0
    assert SimplexFractalSSE42(123, 1.0, 4, 0.5, 2.0).get2d(0.0, 0.0) == 0.0


def test_default_scale_used_when_missing():
    for gen in (SimplexFractalSSE2(9, 4.0, 3, 0.5, 2.0), SimplexFractalSSE42(9, 4.0, 3, 0.5, 2.0)):
        assert gen.get2d(1.3, 2.7) == gen.get2d(1.3, 2.7, 4.0)
        assert gen.get3d(1.3, 2.7, 0.4) == gen.get3d(1.3, 2.7, 0.4, 4.0)


def test_seed_changes_output():
    xs, ys, _ = _points()
    a2 = SimplexFractalSSE2(1, 2.0, 3, 0.5, 2.0).lanes_get2d(xs, ys)
    b2 = SimplexFractalSSE2(2, 2.0, 3, 0.5, 2.0).lanes_get2d(xs, ys)
    assert a2.tolist() != b2.tolist()
    assert a2.tolist() == SimplexFractalSSE2(1, 2.0, 3, 0.5, 2.0).lanes_get2d(xs, ys).tolist()

    a42 = SimplexFractalSSE42(1, 2.0, 3, 0.5, 2.0).lanes_get2d(xs, ys)
    b42 = SimplexFractalSSE42(2, 2.0, 3, 0.5, 2.0).lanes_get2d(xs, ys)
    assert a42.tolist() != b42.tolist()
    assert a42.tolist() == SimplexFractalSSE42(1, 2.0, 3, 0.5, 2.0).lanes_get2d(xs, ys).tolist()


def test_noise2d_matches_point_samples():
    for gen in (SimplexFractalSSE2(17, 2.0, 3, 0.5, 2.0), SimplexFractalSSE42(17, 2.0, 3, 0.5, 2.0)):
        grid = gen.noise2d(1.0, 2.0, 3, 3, 0.5)
        assert (grid.size(0), grid.size(1)) == (3, 3)
        for x in range(3):
            for y in range(3):
                assert grid[x, y] == gen.get2d(1.0 + x * 0.5, 2.0 + y * 0.5)


def test_sse42_noise3d_matches_point_samples():
    gen = SimplexFractalSSE42(17, 2.0, 2, 0.5, 2.0)
    grid = gen.noise3d(1.0, 2.0, 3.0, 1, 1, 5, 0.5)
    for z in range(5):
        assert grid[0, 0, z] == gen.get3d(1.0, 2.0, 3.0 + z * 0.5)


def test_sse2_noise3d_tail_restarts_at_origin():
    gen = SimplexFractalSSE2(17, 2.0, 2, 0.5, 2.0)
    grid = gen.noise3d(1.0, 2.0, 3.0, 1, 1, 5, 0.5)
    for z in range(4):
        assert grid[0, 0, z] == gen.get3d(1.0, 2.0, 3.0 + z * 0.5)
    assert grid[0, 0, 4] == grid[0, 0, 0]


def test_empty_grids():
    for gen in (SimplexFractalSSE2(3, 1.0, 2, 0.5, 2.0), SimplexFractalSSE42(3, 1.0, 2, 0.5, 2.0)):
        assert gen.noise2d(0.0, 0.0, 0, 4, 1.0).is_empty()
        assert gen.noise3d(0.0, 0.0, 0.0, 2, 0, 2, 1.0).is_empty()


def test_variants_agree_for_positive_inputs():
    rng = np.random.default_rng(3)
    xs = rng.uniform(0.1, 9.0, 64).astype(np.float32)
    ys = rng.uniform(0.1, 9.0, 64).astype(np.float32)
    a = SimplexFractalSSE2(8, 1.0, 3, 0.5, 2.0).lanes_get2d(xs, ys)
    b = SimplexFractalSSE42(8, 1.0, 3, 0.5, 2.0).lanes_get2d(xs, ys)
    np.testing.assert_array_equal(a, b)


def test_invalid_octaves():
    with pytest.raises(ValueError):
        SimplexFractalSSE2(1, 1.0, -1, 0.5, 2.0)
    with pytest.raises(TypeError):
        SimplexFractalSSE2(1, 1.0, 2.5, 0.5, 2.0)
    with pytest.raises(ValueError):
        SimplexFractalSSE42(1, 1.0, -1, 0.5, 2.0)
    with pytest.raises(TypeError):
        SimplexFractalSSE42(1, 1.0, 2.5, 0.5, 2.0)