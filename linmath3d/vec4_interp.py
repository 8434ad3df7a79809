"""Interpolation, thresholding and swizzling for four-component vectors.

Vectors are plain tuples of four floats. Every function returns a new
tuple and leaves its arguments untouched.
"""

from __future__ import annotations

from collections.abc import Iterable

from linmath3d.vec4 import Vec4, add, mul, scale, sub

__all__ = [
    "XXXX",
    "YYYY",
    "ZZZZ",
    "WWWW",
    "WZYX",
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
    "cubic",
    "shuffle4",
    "swizzle",
]


def _as4(v: Iterable[float]) -> Vec4:
    values = tuple(float(c) for c in v)
    if len(values) != 4:
        raise ValueError(f"expected 4 components, got {len(values)}")
    return values  # type: ignore[return-value]


def _clamp_zo(t: float) -> float:
    if t < 0.0:
        return 0.0
    if t > 1.0:
        return 1.0
    return float(t)


def _step(edge: float, x: float) -> float:
    return 0.0 if x < edge else 1.0


def _smooth(t: float) -> float:
    return t * t * (3.0 - 2.0 * t)


def _smoothstep(edge0: float, edge1: float, x: float) -> float:
    return _smooth(_clamp_zo((x - edge0) / (edge1 - edge0)))


def shuffle4(z: int, y: int, x: int, w: int) -> int:
    """Build a swizzle mask; ``w`` selects the first output component."""
    for index in (z, y, x, w):
        if not 0 <= index <= 3:
            raise ValueError(f"component index out of range: {index}")
    return (z << 6) | (y << 4) | (x << 2) | w


XXXX = shuffle4(0, 0, 0, 0)
YYYY = shuffle4(1, 1, 1, 1)
ZZZZ = shuffle4(2, 2, 2, 2)
WWWW = shuffle4(3, 3, 3, 3)
WZYX = shuffle4(0, 1, 2, 3)


def lerp(start: Iterable[float], end: Iterable[float], t: float) -> Vec4:
    """Linear interpolation: start + t * (end - start)."""
    start = _as4(start)
    return add(start, mul((t, t, t, t), sub(end, start)))


def lerpc(start: Iterable[float], end: Iterable[float], t: float) -> Vec4:
    """Linear interpolation with t clamped to [0, 1]."""
    return lerp(start, end, _clamp_zo(t))


def mix(start: Iterable[float], end: Iterable[float], t: float) -> Vec4:
    """Alias of :func:`lerp`."""
    return lerp(start, end, t)


def mixc(start: Iterable[float], end: Iterable[float], t: float) -> Vec4:
    """Alias of :func:`lerpc`."""
    return lerpc(start, end, t)


def step_uni(edge: float, x: Iterable[float]) -> Vec4:
    """0.0 where a component is below ``edge``, 1.0 elsewhere."""
    return tuple(_step(edge, c) for c in _as4(x))  # type: ignore[return-value]


def step(edge: Iterable[float], x: Iterable[float]) -> Vec4:
    """Component-wise threshold against a vector of edges."""
    return tuple(  # type: ignore[return-value]
        _step(e, c) for e, c in zip(_as4(edge), _as4(x))
    )


def smoothstep_uni(edge0: float, edge1: float, x: Iterable[float]) -> Vec4:
    """Smooth Hermite threshold with scalar edges."""
    return tuple(  # type: ignore[return-value]
        _smoothstep(edge0, edge1, c) for c in _as4(x)
    )


def smoothstep(
    edge0: Iterable[float], edge1: Iterable[float], x: Iterable[float]
) -> Vec4:
    """Smooth Hermite threshold with per-component edges."""
    return tuple(  # type: ignore[return-value]
        _smoothstep(e0, e1, c) for e0, e1, c in zip(_as4(edge0), _as4(edge1), _as4(x))
    )


def smoothinterp(start: Iterable[float], end: Iterable[float], t: float) -> Vec4:
    """Interpolate with the eased factor t^2 * (3 - 2t)."""
    start = _as4(start)
    return add(start, scale(sub(end, start), _smooth(t)))


def smoothinterpc(start: Iterable[float], end: Iterable[float], t: float) -> Vec4:
    """Smooth interpolation with t clamped to [0, 1]."""
    return smoothinterp(start, end, _clamp_zo(t))


def cubic(s: float) -> Vec4:
    """Return (s^3, s^2, s, 1)."""
    s = float(s)
    ss = s * s
    return (ss * s, ss, s, 1.0)


def swizzle(v: Iterable[float], mask: int) -> Vec4:
    """Reorder components according to a mask from :func:`shuffle4`."""
    v = _as4(v)
    return (
        v[mask & 3],
        v[(mask >> 2) & 3],
        v[(mask >> 4) & 3],
        v[(mask >> 6) & 3],
    )