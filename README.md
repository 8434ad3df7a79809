# linmath3d

Pure-Python linear algebra for 3D graphics. It has no dependencies. Values are plain
tuples. Any iterable of numbers of the right length is accepted as input. Functions return
new tuples and never modify their arguments. An input with the wrong number of components
raises `ValueError`.

## Modules

- `linmath3d.vec3`: 3-component vectors.
  - Arithmetic: `add`, `sub`, `mul`, `div`, and scalar forms (`adds`, `subs`, `scale`,
    `divs`).
  - Accumulating forms: `addadd`, `muladd`, `maxadd` and others. These return
    `dest + (...)`.
  - Norms: `norm`, `norm2`, `norm_one`, `norm_inf`.
  - Geometry: `normalize`, `cross`, `crossn`, `angle`, `proj`, `center`, `distance`,
    `ortho`.
  - Rotation: `rotate` uses Rodrigues' formula. `rotate_m4` and `rotate_m3` apply the
    rotation part of a column-major matrix.
  - Interpolation: `lerp`, `mix`, `smoothinterp`, and their clamped `c` variants.
  - Thresholds: `step` and `smoothstep`.
  - Reordering: `swizzle` with masks from `shuffle3`. `XXX`, `YYY`, `ZZZ` and `ZYX` are
    ready-made masks.
  - Constants: `ZERO`, `ONE`, `XUP`, `YUP` and `ZUP`.
- `linmath3d.vec4`: 4-component vectors.
  - Arithmetic, the accumulating forms, and norms, as for `vec3`.
  - `normalize`, `scale_as`, `distance`, `distance2`, `maxv`, `minv` and `clamp`.
  - `vec4(v3, last)` builds a 4-component vector, and `copy3` returns the first three
    components.
  - Constants: `ZERO`, `ONE` and `BLACK`.
- `linmath3d.vec4_interp`: operations on 4-component vectors.
  - Interpolation: `lerp`, `lerpc`, `mix`, `mixc`, `smoothinterp` and `smoothinterpc`.
  - Thresholds: `step`, `step_uni`, `smoothstep` and `smoothstep_uni`.
  - `cubic(s)` returns `(s³, s², s, 1)`.
  - Reordering: `swizzle` with masks from `shuffle4`. `XXXX`, `YYYY`, `ZZZZ`, `WWWW` and
    `WZYX` are ready-made masks.
- `linmath3d.quat`: `mul(p, q)` returns the Hamilton product. Quaternions are laid out as
  `(x, y, z, w)`, and `IDENTITY` is `(0, 0, 0, 1)`.
- `linmath3d.affine`: 4x4 affine transforms.
  - Building transforms: `translate`, `translate_x`, `translate_y`, `translate_z`,
    `translate_make`, `scale`, `scale_make`, `scale_uni`, `rotate_x`, `rotate_y`,
    `rotate_z`, `rotate_make`, `rotate`, `rotate_at` and `rotate_atm`.
  - Products:
    - `mul(m1, m2)` treats the last row of `m2` as `(0, 0, 0, 1)`.
    - `mul_rot(m1, m2)` uses only the rotation part of `m2` and keeps the translation of
      `m1`.
  - `inv_tr` inverts a rotation-plus-translation matrix.
  - Decomposition:
    - `decompose_scalev` returns the scale factors.
    - `decompose_rs` returns `(rotation, scale)`. If the determinant is negative, both the
      rotation columns and the scale factors are negated.
    - `decompose` returns `(translation, rotation, scale)`.
    - `uniscaled` tells whether all three scale factors are equal, within single-precision
      epsilon.

## Conventions

Matrices are column-major. A 4x4 matrix is a sequence of four columns, each holding four
floats, so `m[3]` is the translation column. Angles are in radians.

## Installation

```
pip install .
```

## Example

```python
import math
from linmath3d import affine, quat, vec3, vec4_interp

model = affine.rotate(affine.translate_make((1.0, 2.0, 3.0)), math.pi / 2, (0.0, 1.0, 0.0))
model = affine.scale_uni(model, 2.0)

translation, rotation, scale = affine.decompose(model)
print(translation)                # (1.0, 2.0, 3.0, 1.0)
print(scale)                      # approximately (2.0, 2.0, 2.0)
print(affine.uniscaled(model))    # True

print(vec3.rotate_m4(model, vec3.XUP))    # approximately (0.0, 0.0, -1.0)

print(vec4_interp.lerp((0, 0, 0, 0), (2, 4, 6, 8), 0.5))    # (1.0, 2.0, 3.0, 4.0)
print(quat.mul(quat.IDENTITY, (0.0, 0.0, 0.0, 1.0)))         # (0.0, 0.0, 0.0, 1.0)
```

## What it does not do

The package builds and takes apart model transforms only. It has no general 4x4 operations:
no full matrix product, inverse, determinant or transpose. It also provides none of the
following:

- projection matrices: perspective, orthographic or frustum;
- view matrices: look-at;
- mapping points between object space and window coordinates.

## Running the tests

```
pip install .[test]
pytest
```