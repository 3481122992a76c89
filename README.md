# vxnoise

Seeded simplex noise in two and three dimensions, for procedural textures and
terrain. There are plain and fractal (multi-octave) generators. Some evaluate
one point at a time. Others evaluate whole numpy arrays of points at once as
32-bit float lanes. All arithmetic is done in 32-bit floats and 32-bit
wrapping integers.

The only runtime dependency is numpy.

## Generators

| Class | Module | Kind |
|---|---|---|
| `SimplexNormal` | `vxnoise.simplex` | point-at-a-time simplex noise |
| `SimplexFractalNormal` | `vxnoise.simplex` | point-at-a-time fractal simplex noise |
| `SimplexSSE2` | `vxnoise.simplex_sse2` | lane-batched simplex noise |
| `SimplexSSE42` | `vxnoise.simplex_sse42` | lane-batched simplex noise |
| `SimplexFractalSSE2` | `vxnoise.simplex_fractal_lanes` | lane-batched fractal noise |
| `SimplexFractalSSE42` | `vxnoise.simplex_fractal_lanes` | lane-batched fractal noise |

Every generator takes an integer seed, wrapped to signed 32 bits, and a
default scale. Coordinates are divided by the scale before sampling. Every
`scale` argument may be left out, and the default scale is then used.

Fractal generators also take:

- `octaves`, the number of layers, a non-negative integer below 2**32.
- `persistence`, the factor that multiplies the amplitude at each octave.
- `lacunarity`, the factor that multiplies the frequency at each octave.

The generators derive from the abstract classes `Noise` and `NoiseFractal` in
`vxnoise.noise`. The lane-batched ones also derive from `LaneNoise`.

The `SSE2` variants use a floor that steps down by one at every value that is
zero or below, including whole numbers. The `SSE42` variants use a true floor.
The two families can therefore give different values at the same point.

## Sampling single points

```python
from vxnoise.simplex import SimplexNormal, SimplexFractalNormal

plain = SimplexNormal(1337, 64.0)
value = plain.get2d(10.0, 20.0)          # uses the default scale
value3 = plain.get3d(10.0, 20.0, 30.0, 32.0)

fractal = SimplexFractalNormal(1337, 64.0, 4, 0.5, 2.0)
height = fractal.get2d(10.0, 20.0)
```

The free functions `simplex_get2d(seed, x, y)` and
`simplex_get3d(seed, x, y, z)` in `vxnoise.simplex` sample without a
generator object and without scaling. Their lane counterparts are
`sse2_simplex_get2d` and `sse2_simplex_get3d` in `vxnoise.simplex_sse2`, and
`sse42_simplex_get2d` and `sse42_simplex_get3d` in `vxnoise.simplex_sse42`.

## Filling grids

`noise2d` and `noise3d` fill a grid. They start at an offset and advance by
`step` along each axis:

```python
grid = plain.noise2d(0.0, 0.0, 128, 128, 1.0)
grid.size(0), grid.size(1)   # (128, 128)
grid[3, 7]                   # value at x=3, y=7
grid[3][7]                   # same value

volume = plain.noise3d(0.0, 0.0, 0.0, 16, 16, 16, 1.0)
volume[1, 2, 3]
```

With `SimplexSSE2` and `SimplexFractalSSE2`, when the number of points in a
3D grid is at least four and not a multiple of four, the last few points are
sampled at the coordinates of the first few points of the grid.

## Grid containers

`noise2d` returns an `AlignedArray2D` and `noise3d` returns an
`AlignedArray3D`, both in `vxnoise.arrays`. They hold 32-bit floats in
row-major order and can also be built directly, e.g.
`AlignedArray2D(4, 3, 16)` or `AlignedArray3D(4, 4, 4, 16)`.

- `size(axis)` gives the length of an axis: 0 or 1 for the 2D array, 0, 1 or
  2 for the 3D array. Any other axis raises `ValueError`.
- Indexing with a full tuple, or with a chain of `[]`, checks bounds and
  raises `IndexError` when out of range or when the array is empty.
  Assignment works with a full tuple (`grid[1, 2] = 0.5`) or through the last
  link of a chain (`grid[1][2] = 0.5`).
- `values()` gives the flat storage as a numpy array; writes to it change the
  grid.
- `is_empty()` is true when any dimension is zero.

## Lane evaluators

The lane-batched generators also have `lanes_get2d(x, y, scale)` and
`lanes_get3d(x, y, z, scale)`. They take numbers or numpy-compatible arrays of
any shape that broadcast together, and return a float32 array of that shape.

`vxnoise.simd` holds the helpers they are built on:

- `partial_jenkins_hash` and `lane_jenkins_hash`, a partial Jenkins hash on
  signed 32-bit integers.
- `fast_floor` and `lane_floor`, the floors that step down at zero and below.
- `dot2`, `dot3`, `lane_dot2`, `lane_dot3`, `lane_abs` and `lane_blend`.
- `SimdLevel`, an enumeration of instruction levels: `AUTO`, `FALLBACK`,
  `NEON`, `SSE2`, `SSE42` and `AVX2`.

## What it does not do

The package does not inspect the processor or pick a generator for you:
`SimdLevel` is only an enumeration, and you choose the generator class
yourself. There is no `AVX2` or `NEON` generator. There is no command-line
tool and no image output; results are numpy-backed grids.

## Running the tests

From a checkout of the package:

```
pip install .[test]
pytest
```