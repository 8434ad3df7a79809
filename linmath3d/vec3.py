"""Three-component vector operations.

Vectors are plain tuples of three floats. Every function accepts any
iterable of three numbers and returns a new tuple; nothing is modified
in place. Matrices are sequences of columns.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from linmath3d.vec4 import Vec3, copy3
from linmath3d.vec4 import normalize as _normalize4

__all__ = [
    "Vec3",
    "ZERO",
    "ONE",
    "XUP",
    "YUP",
    "ZUP",
    "XXX",
    "YYY",
    "ZZZ",
    "ZYX",
    "vec3",
    "zero",
    "one",
    "dot",
    "norm2",
    "norm",
    "norm_one",
    "norm_inf",
    "add",
    "adds",
    "sub",
    "subs",
    "mul",
    "scale",
    "scale_as",
    "div",
    "divs",
    "addadd",
    "subadd",
    "muladd",
    "muladds",
    "maxadd",
    "minadd",
    "negate",
    "normalize",
    "cross",
    "crossn",
    "angle",
    "rotate",
    "rotate_m4",
    "rotate_m3",
    "proj",
    "center",
    "distance",
    "distance2",
    "maxv",
    "minv",
    "ortho",
    "clamp",
    "lerp",
    "lerpc",
    "mix",
    "mixc",
    "step_uni",
    "step",
    "smoothstep_uni",
    "smoothstep",
    "smoothinterp",
    "smoothinterpc",
    "shuffle3",
    "swizzle",
]

ZERO: Vec3 = (0.0, 0.0, 0.0)
ONE: Vec3 = (1.0, 1.0, 1.0)
XUP: Vec3 = (1.0, 0.0, 0.0)
YUP: Vec3 = (0.0, 1.0, 0.0)
ZUP: Vec3 = (0.0, 0.0, 1.0)


def _as3(v: Iterable[float]) -> Vec3:
    values = tuple(float(c) for c in v)
    if len(values) != 3:
        raise ValueError(f"expected 3 components, got {len(values)}")
    return values  # type: ignore[return-value]


def _pairwise(a: Iterable[float], b: Iterable[float]):
    return zip(_as3(a), _as3(b))


def _max(a: float, b: float) -> float:
    return a if a > b else b


def _min(a: float, b: float) -> float:
    return a if a < b else b


def _clamp(value: float, min_val: float, max_val: float) -> float:
    return float(_min(_max(value, min_val), max_val))


def _clamp_zo(t: float) -> float:
    return _clamp(t, 0.0, 1.0)


def _step(edge: float, x: float) -> float:
    return 0.0 if x < edge else 1.0


def _smooth(t: float) -> float:
    return t * t * (3.0 - 2.0 * t)


def _smoothstep(edge0: float, edge1: float, x: float) -> float:
    return _smooth(_clamp_zo((x - edge0) / (edge1 - edge0)))


def shuffle3(z: int, y: int, x: int) -> int:
    """Build a swizzle mask; ``x`` selects the first output component."""
    for index in (z, y, x):
        if not 0 <= index <= 2:
            raise ValueError(f"component index out of range: {index}")
    return (z << 4) | (y << 2) | x


XXX = shuffle3(0, 0, 0)
YYY = shuffle3(1, 1, 1)
ZZZ = shuffle3(2, 2, 2)
ZYX = shuffle3(0, 1, 2)


def vec3(v4: Iterable[float]) -> Vec3:
    """Build a vec3 from the first three components of a vec4."""
    return copy3(v4)


def zero() -> Vec3:
    """Return the zero vector."""
    return ZERO


def one() -> Vec3:
    """Return the vector with all components set to one."""
    return ONE


def dot(a: Iterable[float], b: Iterable[float]) -> float:
    """Dot product of two vectors."""
    return sum(x * y for x, y in _pairwise(a, b))


def norm2(v: Iterable[float]) -> float:
    """Squared Euclidean length."""
    return dot(v, v)


def norm(v: Iterable[float]) -> float:
    """Euclidean (L2) length."""
    return math.sqrt(norm2(v))


def norm_one(v: Iterable[float]) -> float:
    """L1 norm: sum of absolute components."""
    return sum(abs(c) for c in _as3(v))


def norm_inf(v: Iterable[float]) -> float:
    """Infinity norm: largest absolute component."""
    return max(abs(c) for c in _as3(v))


def add(a: Iterable[float], b: Iterable[float]) -> Vec3:
    """Component-wise a + b."""
    return tuple(x + y for x, y in _pairwise(a, b))  # type: ignore[return-value]


def adds(a: Iterable[float], s: float) -> Vec3:
    """Add scalar s to every component."""
    return tuple(c + s for c in _as3(a))  # type: ignore[return-value]


def sub(a: Iterable[float], b: Iterable[float]) -> Vec3:
    """Component-wise a - b."""
    return tuple(x - y for x, y in _pairwise(a, b))  # type: ignore[return-value]


def subs(a: Iterable[float], s: float) -> Vec3:
    """Subtract scalar s from every component."""
    return tuple(c - s for c in _as3(a))  # type: ignore[return-value]


def mul(a: Iterable[float], b: Iterable[float]) -> Vec3:
    """Component-wise product."""
    return tuple(x * y for x, y in _pairwise(a, b))  # type: ignore[return-value]


def scale(v: Iterable[float], s: float) -> Vec3:
    """Multiply every component by s."""
    return tuple(c * s for c in _as3(v))  # type: ignore[return-value]


def scale_as(v: Iterable[float], s: float) -> Vec3:
    """Return v rescaled to length s; the zero vector stays zero."""
    v = _as3(v)
    length = norm(v)
    if length == 0.0:
        return ZERO
    return scale(v, s / length)


def div(a: Iterable[float], b: Iterable[float]) -> Vec3:
    """Component-wise a / b."""
    return tuple(x / y for x, y in _pairwise(a, b))  # type: ignore[return-value]


def divs(a: Iterable[float], s: float) -> Vec3:
    """Divide every component by s."""
    return tuple(c / s for c in _as3(a))  # type: ignore[return-value]


def addadd(a: Iterable[float], b: Iterable[float], dest: Iterable[float]) -> Vec3:
    """Return dest + (a + b)."""
    return add(dest, add(a, b))


def subadd(a: Iterable[float], b: Iterable[float], dest: Iterable[float]) -> Vec3:
    """Return dest + (a - b)."""
    return add(dest, sub(a, b))


def muladd(a: Iterable[float], b: Iterable[float], dest: Iterable[float]) -> Vec3:
    """Return dest + (a * b)."""
    return add(dest, mul(a, b))


def muladds(a: Iterable[float], s: float, dest: Iterable[float]) -> Vec3:
    """Return dest + a * s."""
    return add(dest, scale(a, s))


def maxadd(a: Iterable[float], b: Iterable[float], dest: Iterable[float]) -> Vec3:
    """Return dest + max(a, b), component-wise."""
    return add(dest, maxv(a, b))


def minadd(a: Iterable[float], b: Iterable[float], dest: Iterable[float]) -> Vec3:
    """Return dest + min(a, b), component-wise."""
    return add(dest, minv(a, b))


def negate(v: Iterable[float]) -> Vec3:
    """Flip the sign of every component."""
    return tuple(-c for c in _as3(v))  # type: ignore[return-value]


def normalize(v: Iterable[float]) -> Vec3:
    """Return the unit vector along v; the zero vector stays zero."""
    v = _as3(v)
    length = norm(v)
    if length == 0.0:
        return ZERO
    return scale(v, 1.0 / length)


def cross(a: Iterable[float], b: Iterable[float]) -> Vec3:
    """Right-handed cross product."""
    ax, ay, az = _as3(a)
    bx, by, bz = _as3(b)
    return (ay * bz - az * by, az * bx - ax * bz, ax * by - ay * bx)


def crossn(a: Iterable[float], b: Iterable[float]) -> Vec3:
    """Normalized cross product."""
    return normalize(cross(a, b))


def angle(a: Iterable[float], b: Iterable[float]) -> float:
    """Angle between two vectors in radians."""
    a = _as3(a)
    b = _as3(b)
    cosine = dot(a, b) / math.sqrt(norm2(a) * norm2(b))
    if cosine > 1.0:
        return 0.0
    if cosine < -1.0:
        return math.pi
    return math.acos(cosine)


def rotate(v: Iterable[float], angle: float, axis: Iterable[float]) -> Vec3:
    """Rotate v around axis by angle (radians) with Rodrigues' formula."""
    v = _as3(v)
    c = math.cos(angle)
    s = math.sin(angle)
    k = normalize(axis)
    v1 = add(scale(v, c), scale(cross(k, v), s))
    v2 = scale(k, dot(k, v) * (1.0 - c))
    return add(v1, v2)


def _combine_columns(columns: Sequence[Sequence[float]], v: Vec3) -> Vec3:
    x, y, z = v
    return tuple(  # type: ignore[return-value]
        cx * x + cy * y + cz * z for cx, cy, cz in zip(*columns)
    )


def rotate_m4(m: Sequence[Iterable[float]], v: Iterable[float]) -> Vec3:
    """Apply the rotation part of a 4x4 column-major matrix to v."""
    if len(m) != 4:
        raise ValueError(f"expected 4 columns, got {len(m)}")
    columns = [copy3(_normalize4(col)) for col in m[:3]]
    return _combine_columns(columns, _as3(v))


def rotate_m3(m: Sequence[Iterable[float]], v: Iterable[float]) -> Vec3:
    """Apply a 3x3 column-major rotation matrix to v."""
    if len(m) != 3:
        raise ValueError(f"expected 3 columns, got {len(m)}")
    columns = [normalize(col) for col in m]
    return _combine_columns(columns, _as3(v))


def proj(a: Iterable[float], b: Iterable[float]) -> Vec3:
    """Project a onto b."""
    b = _as3(b)
    return scale(b, dot(a, b) / norm2(b))


def center(a: Iterable[float], b: Iterable[float]) -> Vec3:
    """Midpoint of two points."""
    return scale(add(a, b), 0.5)


def distance(a: Iterable[float], b: Iterable[float]) -> float:
    """Euclidean distance between two points."""
    return math.sqrt(distance2(a, b))


def distance2(a: Iterable[float], b: Iterable[float]) -> float:
    """Squared Euclidean distance between two points."""
    return sum((x - y) ** 2 for x, y in _pairwise(a, b))


def maxv(a: Iterable[float], b: Iterable[float]) -> Vec3:
    """Component-wise maximum."""
    return tuple(_max(x, y) for x, y in _pairwise(a, b))  # type: ignore[return-value]


def minv(a: Iterable[float], b: Iterable[float]) -> Vec3:
    """Component-wise minimum."""
    return tuple(_min(x, y) for x, y in _pairwise(a, b))  # type: ignore[return-value]


def ortho(v: Iterable[float]) -> Vec3:
    """Return a vector perpendicular to v."""
    x, y, z = _as3(v)
    f = math.modf(abs(x) + 0.5)[0]
    return (-y, x - f * z, f * y)


def clamp(v: Iterable[float], min_val: float, max_val: float) -> Vec3:
    """Clamp every component to the range [min_val, max_val]."""
    return tuple(  # type: ignore[return-value]
        _clamp(c, min_val, max_val) for c in _as3(v)
    )


def lerp(start: Iterable[float], end: Iterable[float], t: float) -> Vec3:
    """Linear interpolation: start + t * (end - start)."""
    start = _as3(start)
    return add(start, scale(sub(end, start), t))


def lerpc(start: Iterable[float], end: Iterable[float], t: float) -> Vec3:
    """Linear interpolation with t clamped to [0, 1]."""
    return lerp(start, end, _clamp_zo(t))


def mix(start: Iterable[float], end: Iterable[float], t: float) -> Vec3:
    """Alias of :func:`lerp`."""
    return lerp(start, end, t)


def mixc(start: Iterable[float], end: Iterable[float], t: float) -> Vec3:
    """Alias of :func:`lerpc`."""
    return lerpc(start, end, t)


def step_uni(edge: float, x: Iterable[float]) -> Vec3:
    """0.0 where a component is below ``edge``, 1.0 elsewhere."""
    return tuple(_step(edge, c) for c in _as3(x))  # type: ignore[return-value]


def step(edge: Iterable[float], x: Iterable[float]) -> Vec3:
    """Component-wise threshold against a vector of edges."""
    return tuple(_step(e, c) for e, c in _pairwise(edge, x))  # type: ignore[return-value]


def smoothstep_uni(edge0: float, edge1: float, x: Iterable[float]) -> Vec3:
    """Smooth Hermite threshold with scalar edges."""
    return tuple(  # type: ignore[return-value]
        _smoothstep(edge0, edge1, c) for c in _as3(x)
    )


def smoothstep(
    edge0: Iterable[float], edge1: Iterable[float], x: Iterable[float]
) -> Vec3:
    """Smooth Hermite threshold with per-component edges."""
    return tuple(  # type: ignore[return-value]
        _smoothstep(e0, e1, c) for e0, e1, c in zip(_as3(edge0), _as3(edge1), _as3(x))
    )


def smoothinterp(start: Iterable[float], end: Iterable[float], t: float) -> Vec3:
    """Interpolate with the eased factor t^2 * (3 - 2t)."""
    start = _as3(start)
    return add(start, scale(sub(end, start), _smooth(t)))


def smoothinterpc(start: Iterable[float], end: Iterable[float], t: float) -> Vec3:
    """Smooth interpolation with t clamped to [0, 1]."""
    return smoothinterp(start, end, _clamp_zo(t))


def swizzle(v: Iterable[float], mask: int) -> Vec3:
    """Reorder components according to a mask from :func:`shuffle3`."""
    v = _as3(v)
    indices = (mask & 3, (mask >> 2) & 3, (mask >> 4) & 3)
    if any(i > 2 for i in indices):
        raise ValueError(f"invalid swizzle mask: {mask}")
    return tuple(v[i] for i in indices)  # type: ignore[return-value]