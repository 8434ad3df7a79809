"""Quaternion products.

Quaternions are tuples laid out as (x, y, z, w), with w the real part.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Tuple

Quat = Tuple[float, float, float, float]

__all__ = ["Quat", "IDENTITY", "mul"]

IDENTITY: Quat = (0.0, 0.0, 0.0, 1.0)


def _as_quat(q: Iterable[float]) -> Quat:
    values = tuple(float(c) for c in q)
    if len(values) != 4:
        raise ValueError(f"expected 4 components, got {len(values)}")
    return values  # type: ignore[return-value]


def mul(p: Iterable[float], q: Iterable[float]) -> Quat:
    """Hamilton product p * q."""
    px, py, pz, pw = _as_quat(p)
    qx, qy, qz, qw = _as_quat(q)
    return (
        pw * qx + px * qw + py * qz - pz * qy,
        pw * qy - px * qz + py * qw + pz * qx,
        pw * qz + px * qy - py * qx + pz * qw,
        pw * qw - px * qx - py * qy - pz * qz,
    )