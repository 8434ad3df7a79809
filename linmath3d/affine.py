"""Affine transforms on 4x4 matrices.

A matrix is a sequence of four columns, each holding four floats
(column-major, so ``m[3]`` is the translation column). Every function
returns a new matrix as a tuple of column tuples; arguments are never
modified.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import Tuple

from linmath3d import vec3 as _v3
from linmath3d import vec4 as _v4
from linmath3d.vec4 import Vec3, Vec4

Mat4 = Tuple[Vec4, Vec4, Vec4, Vec4]

__all__ = [
    "Mat4",
    "IDENTITY",
    "identity",
    "mul",
    "mul_rot",
    "inv_tr",
    "translate",
    "translate_x",
    "translate_y",
    "translate_z",
    "translate_make",
    "scale",
    "scale_make",
    "scale_uni",
    "rotate_x",
    "rotate_y",
    "rotate_z",
    "rotate_make",
    "rotate",
    "rotate_at",
    "rotate_atm",
    "decompose_scalev",
    "uniscaled",
    "decompose_rs",
    "decompose",
]

IDENTITY: Mat4 = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)

_FLT_EPSILON = 1.1920928955078125e-07


def _as_mat4(m: Iterable[Iterable[float]]) -> Mat4:
    columns = tuple(tuple(float(c) for c in col) for col in m)
    if len(columns) != 4 or any(len(col) != 4 for col in columns):
        raise ValueError("expected a 4x4 matrix given as four columns of four values")
    return columns  # type: ignore[return-value]


def _combine(columns: Sequence[Vec4], weights: Sequence[float]) -> Vec4:
    """Linear combination of columns with the given weights."""
    return tuple(  # type: ignore[return-value]
        sum(x * w for x, w in zip(row, weights)) for row in zip(*columns)
    )


def identity() -> Mat4:
    """Return the 4x4 identity matrix."""
    return IDENTITY


def mul(m1: Iterable[Iterable[float]], m2: Iterable[Iterable[float]]) -> Mat4:
    """Multiply two affine matrices (m1 * m2), treating m2's last row as (0, 0, 0, 1)."""
    left = _as_mat4(m1)
    right = _as_mat4(m2)
    rotation = tuple(_combine(left[:3], col[:3]) for col in right[:3])
    return (*rotation, _combine(left, right[3]))  # type: ignore[return-value]


def mul_rot(m1: Iterable[Iterable[float]], m2: Iterable[Iterable[float]]) -> Mat4:
    """Multiply m1 by the rotation part of m2; m1's translation is kept."""
    left = _as_mat4(m1)
    right = _as_mat4(m2)
    rotation = tuple(_combine(left[:3], col[:3]) for col in right[:3])
    return (*rotation, left[3])  # type: ignore[return-value]


def inv_tr(m: Iterable[Iterable[float]]) -> Mat4:
    """Invert a rotation-plus-translation matrix by transposing the rotation."""
    c0, c1, c2, t = _as_mat4(m)
    r0, r1, r2, last = zip(c0, c1, c2, (0.0, 0.0, 0.0, 1.0))
    moved = _v4.negate(_combine((r0, r1, r2), t[:3]))
    return (r0, r1, r2, _v4.add(moved, last))  # type: ignore[return-value]


def translate(m: Iterable[Iterable[float]], v: Iterable[float]) -> Mat4:
    """Translate a transform by v = (x, y, z)."""
    c0, c1, c2, c3 = _as_mat4(m)
    x, y, z = _v3.vec3(_v4.vec4(v, 0.0))
    return (c0, c1, c2, _v4.add(_combine((c0, c1, c2), (x, y, z)), c3))


def _translate_axis(m: Iterable[Iterable[float]], axis: int, amount: float) -> Mat4:
    columns = _as_mat4(m)
    moved = _v4.add(_v4.scale(columns[axis], amount), columns[3])
    return (*columns[:3], moved)  # type: ignore[return-value]


def translate_x(m: Iterable[Iterable[float]], x: float) -> Mat4:
    """Translate a transform along its X axis."""
    return _translate_axis(m, 0, x)


def translate_y(m: Iterable[Iterable[float]], y: float) -> Mat4:
    """Translate a transform along its Y axis."""
    return _translate_axis(m, 1, y)


def translate_z(m: Iterable[Iterable[float]], z: float) -> Mat4:
    """Translate a transform along its Z axis."""
    return _translate_axis(m, 2, z)


def translate_make(v: Iterable[float]) -> Mat4:
    """Create a translation matrix."""
    return (*IDENTITY[:3], _v4.vec4(v, 1.0))  # type: ignore[return-value]


def scale(m: Iterable[Iterable[float]], v: Iterable[float]) -> Mat4:
    """Scale a transform's first three columns by v = (sx, sy, sz)."""
    columns = _as_mat4(m)
    factors = _v4.copy3(_v4.vec4(v, 0.0))
    scaled = tuple(_v4.scale(col, f) for col, f in zip(columns[:3], factors))
    return (*scaled, columns[3])  # type: ignore[return-value]


def scale_make(v: Iterable[float]) -> Mat4:
    """Create a scale matrix."""
    return scale(IDENTITY, v)


def scale_uni(m: Iterable[Iterable[float]], s: float) -> Mat4:
    """Scale a transform uniformly by s."""
    return scale(m, (s, s, s))


def _axis_rotation(first: int, second: int, angle: float) -> Mat4:
    c = math.cos(angle)
    s = math.sin(angle)
    columns = [list(col) for col in IDENTITY]
    columns[first][first] = c
    columns[first][second] = s
    columns[second][first] = -s
    columns[second][second] = c
    return tuple(tuple(col) for col in columns)  # type: ignore[return-value]


def rotate_x(m: Iterable[Iterable[float]], angle: float) -> Mat4:
    """Rotate a transform around the X axis by angle (radians)."""
    return mul_rot(m, _axis_rotation(1, 2, angle))


def rotate_y(m: Iterable[Iterable[float]], angle: float) -> Mat4:
    """Rotate a transform around the Y axis by angle (radians)."""
    return mul_rot(m, _axis_rotation(2, 0, angle))


def rotate_z(m: Iterable[Iterable[float]], angle: float) -> Mat4:
    """Rotate a transform around the Z axis by angle (radians)."""
    return mul_rot(m, _axis_rotation(0, 1, angle))


def rotate_make(angle: float, axis: Iterable[float]) -> Mat4:
    """Create a rotation matrix around axis (normalized here) by angle."""
    c = math.cos(angle)
    axisn = _v3.normalize(axis)
    v = _v3.scale(axisn, 1.0 - c)
    vs = _v3.scale(axisn, math.sin(angle))
    m0 = _v3.scale(axisn, v[0])
    m1 = _v3.scale(axisn, v[1])
    m2 = _v3.scale(axisn, v[2])
    return (
        (m0[0] + c, m0[1] + vs[2], m0[2] - vs[1], 0.0),
        (m1[0] - vs[2], m1[1] + c, m1[2] + vs[0], 0.0),
        (m2[0] + vs[1], m2[1] - vs[0], m2[2] + c, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )


def rotate(m: Iterable[Iterable[float]], angle: float, axis: Iterable[float]) -> Mat4:
    """Rotate a transform around axis by angle."""
    return mul_rot(m, rotate_make(angle, axis))


def rotate_at(
    m: Iterable[Iterable[float]],
    pivot: Iterable[float],
    angle: float,
    axis: Iterable[float],
) -> Mat4:
    """Rotate a transform around axis by angle about a pivot point."""
    pivot = _v3.vec3(_v4.vec4(pivot, 0.0))
    result = translate(m, pivot)
    result = rotate(result, angle, axis)
    return translate(result, _v3.negate(pivot))


def rotate_atm(pivot: Iterable[float], angle: float, axis: Iterable[float]) -> Mat4:
    """Create a rotation matrix around axis by angle about a pivot point."""
    pivot = _v3.vec3(_v4.vec4(pivot, 0.0))
    result = rotate(translate_make(pivot), angle, axis)
    return translate(result, _v3.negate(pivot))


def decompose_scalev(m: Iterable[Iterable[float]]) -> Vec3:
    """Return the scale factors (sx, sy, sz) of an affine transform."""
    columns = _as_mat4(m)
    return tuple(_v3.norm(_v4.copy3(col)) for col in columns[:3])  # type: ignore[return-value]


def uniscaled(m: Iterable[Iterable[float]]) -> bool:
    """True if the transform scales equally along all three axes."""
    sx, sy, sz = decompose_scalev(m)
    return abs(sx - sy) <= _FLT_EPSILON and abs(sx - sz) <= _FLT_EPSILON


def decompose_rs(m: Iterable[Iterable[float]]) -> tuple[Mat4, Vec3]:
    """Split an affine transform into a rotation matrix and scale vector.

    A coordinate-system flip (negative determinant) negates both the
    rotation columns and the scale factors.
    """
    columns = _as_mat4(m)
    s = decompose_scalev(columns)
    rot = [_v4.scale(col, 1.0 / f) for col, f in zip(columns[:3], s)]
    a, b, c = (_v4.copy3(col) for col in columns[:3])
    if _v3.dot(_v3.cross(a, b), c) < 0.0:
        rot = [_v4.negate(col) for col in rot]
        s = _v3.negate(s)
    return (*rot, (0.0, 0.0, 0.0, 1.0)), s  # type: ignore[return-value]


def decompose(m: Iterable[Iterable[float]]) -> tuple[Vec4, Mat4, Vec3]:
    """Split an affine transform into translation, rotation and scale."""
    columns = _as_mat4(m)
    r, s = decompose_rs(columns)
    return columns[3], r, s