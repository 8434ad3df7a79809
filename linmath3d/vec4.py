"""Four-component vector operations.

Vectors are plain tuples of four floats. Every function accepts any
iterable of four numbers and returns a new tuple; nothing is modified
in place.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Tuple

Vec3 = Tuple[float, float, float]
Vec4 = Tuple[float, float, float, float]

__all__ = [
    "Vec3",
    "Vec4",
    "ZERO",
    "ONE",
    "BLACK",
    "vec4",
    "copy3",
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
    "distance",
    "distance2",
    "maxv",
    "minv",
    "clamp",
]

ZERO: Vec4 = (0.0, 0.0, 0.0, 0.0)
ONE: Vec4 = (1.0, 1.0, 1.0, 1.0)
BLACK: Vec4 = (0.0, 0.0, 0.0, 1.0)


def _components(v: Iterable[float], size: int) -> tuple[float, ...]:
    values = tuple(float(c) for c in v)
    if len(values) != size:
        raise ValueError(f"expected {size} components, got {len(values)}")
    return values


def _as4(v: Iterable[float]) -> Vec4:
    return _components(v, 4)  # type: ignore[return-value]


def _pairwise(a: Iterable[float], b: Iterable[float]):
    return zip(_as4(a), _as4(b))


def vec4(v3: Iterable[float], last: float) -> Vec4:
    """Build a vec4 from a vec3 and a fourth component."""
    x, y, z = _components(v3, 3)
    return (x, y, z, float(last))


def copy3(a: Iterable[float]) -> Vec3:
    """Return the first three components of a vec4."""
    x, y, z, _ = _as4(a)
    return (x, y, z)


def zero() -> Vec4:
    """Return the zero vector."""
    return ZERO


def one() -> Vec4:
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
    return sum(abs(c) for c in _as4(v))


def norm_inf(v: Iterable[float]) -> float:
    """Infinity norm: largest absolute component."""
    return max(abs(c) for c in _as4(v))


def add(a: Iterable[float], b: Iterable[float]) -> Vec4:
    """Component-wise a + b."""
    return tuple(x + y for x, y in _pairwise(a, b))  # type: ignore[return-value]


def adds(v: Iterable[float], s: float) -> Vec4:
    """Add scalar s to every component."""
    return tuple(c + s for c in _as4(v))  # type: ignore[return-value]


def sub(a: Iterable[float], b: Iterable[float]) -> Vec4:
    """Component-wise a - b."""
    return tuple(x - y for x, y in _pairwise(a, b))  # type: ignore[return-value]


def subs(v: Iterable[float], s: float) -> Vec4:
    """Subtract scalar s from every component."""
    return tuple(c - s for c in _as4(v))  # type: ignore[return-value]


def mul(a: Iterable[float], b: Iterable[float]) -> Vec4:
    """Component-wise product."""
    return tuple(x * y for x, y in _pairwise(a, b))  # type: ignore[return-value]


def scale(v: Iterable[float], s: float) -> Vec4:
    """Multiply every component by s."""
    return tuple(c * s for c in _as4(v))  # type: ignore[return-value]


def scale_as(v: Iterable[float], s: float) -> Vec4:
    """Return v rescaled to length s; the zero vector stays zero."""
    v = _as4(v)
    length = norm(v)
    if length == 0.0:
        return ZERO
    return scale(v, s / length)


def div(a: Iterable[float], b: Iterable[float]) -> Vec4:
    """Component-wise a / b."""
    return tuple(x / y for x, y in _pairwise(a, b))  # type: ignore[return-value]


def divs(v: Iterable[float], s: float) -> Vec4:
    """Divide every component by s."""
    return tuple(c / s for c in _as4(v))  # type: ignore[return-value]


def addadd(a: Iterable[float], b: Iterable[float], dest: Iterable[float]) -> Vec4:
    """Return dest + (a + b)."""
    return add(dest, add(a, b))


def subadd(a: Iterable[float], b: Iterable[float], dest: Iterable[float]) -> Vec4:
    """Return dest + (a - b)."""
    return add(dest, sub(a, b))


def muladd(a: Iterable[float], b: Iterable[float], dest: Iterable[float]) -> Vec4:
    """Return dest + (a * b)."""
    return add(dest, mul(a, b))


def muladds(a: Iterable[float], s: float, dest: Iterable[float]) -> Vec4:
    """Return dest + a * s."""
    return add(dest, scale(a, s))


def maxadd(a: Iterable[float], b: Iterable[float], dest: Iterable[float]) -> Vec4:
    """Return dest + max(a, b), component-wise."""
    return add(dest, maxv(a, b))


def minadd(a: Iterable[float], b: Iterable[float], dest: Iterable[float]) -> Vec4:
    """Return dest + min(a, b), component-wise."""
    return add(dest, minv(a, b))


def negate(v: Iterable[float]) -> Vec4:
    """Flip the sign of every component."""
    return tuple(-c for c in _as4(v))  # type: ignore[return-value]


def normalize(v: Iterable[float]) -> Vec4:
    """Return the unit vector along v; the zero vector stays zero."""
    v = _as4(v)
    length = norm(v)
    if length == 0.0:
        return ZERO
    return scale(v, 1.0 / length)


def distance(a: Iterable[float], b: Iterable[float]) -> float:
    """Euclidean distance between two points."""
    return math.sqrt(distance2(a, b))


def distance2(a: Iterable[float], b: Iterable[float]) -> float:
    """Squared Euclidean distance between two points."""
    return sum((x - y) ** 2 for x, y in _pairwise(a, b))


def maxv(a: Iterable[float], b: Iterable[float]) -> Vec4:
    """Component-wise maximum."""
    return tuple(x if x > y else y for x, y in _pairwise(a, b))  # type: ignore[return-value]


def minv(a: Iterable[float], b: Iterable[float]) -> Vec4:
    """Component-wise minimum."""
    return tuple(x if x < y else y for x, y in _pairwise(a, b))  # type: ignore[return-value]


def clamp(v: Iterable[float], min_val: float, max_val: float) -> Vec4:
    """Clamp every component to the range [min_val, max_val]."""
    result = []
    for c in _as4(v):
        c = c if c > min_val else min_val
        c = c if c < max_val else max_val
        result.append(float(c))
    return tuple(result)  # type: ignore[return-value]