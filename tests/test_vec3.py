import math

import pytest

from linmath3d import vec3 as v3

A = (1.5, -2.0, 3.25)
B = (-0.5, 4.0, 2.0)


def approx(v):
    return pytest.approx(v, abs=1e-9)


def test_vec3_drops_last_component():
    assert v3.vec3((1.0, 2.0, 3.0, 4.0)) == (1.0, 2.0, 3.0)


def test_zero_and_one():
    assert v3.zero() == v3.ZERO
    assert v3.one() == v3.ONE
    assert v3.norm2(v3.one()) == len(v3.one())
    assert v3.norm(v3.zero()) == 0.0


def test_wrong_length_raises():
    with pytest.raises(ValueError):
        v3.add((1.0, 2.0), (1.0, 2.0))
    with pytest.raises(ValueError):
        v3.norm((1.0, 2.0, 3.0, 4.0))


def test_norms_relations():
    v = (-5.0, 2.0, 1.0)
    assert v3.norm_inf(v) == 5.0
    assert v3.norm_one(v) == 8.0
    assert v3.norm(v) ** 2 == pytest.approx(v3.norm2(v))
    assert v3.norm_inf(v) <= v3.norm(v) <= v3.norm_one(v)
    assert v3.norm2(A) == pytest.approx(v3.dot(A, A))


def test_add_sub_round_trip():
    assert v3.sub(v3.add(A, B), B) == approx(A)
    assert v3.subs(v3.adds(A, 2.5), 2.5) == approx(A)


def test_mul_div_round_trip():
    assert v3.div(v3.mul(A, B), B) == approx(A)
    assert v3.divs(v3.scale(A, 3.0), 3.0) == approx(A)


def test_divs_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        v3.divs(A, 0.0)


def test_scale_as():
    assert v3.norm(v3.scale_as(A, 7.0)) == pytest.approx(7.0)
    assert v3.scale_as(v3.ZERO, 7.0) == v3.ZERO
    assert v3.crossn(v3.scale_as(A, 2.0), A) == approx(v3.ZERO)


def test_accumulating_operations():
    dest = (1.0, 1.0, 1.0)
    assert v3.addadd(A, B, dest) == approx(v3.add(dest, v3.add(A, B)))
    assert v3.subadd(A, B, dest) == approx(v3.add(dest, v3.sub(A, B)))
    assert v3.muladd(A, B, dest) == approx(v3.add(dest, v3.mul(A, B)))
    assert v3.muladds(A, 2.0, dest) == approx(v3.add(dest, v3.scale(A, 2.0)))
    assert v3.maxadd(A, B, dest) == approx(v3.add(dest, v3.maxv(A, B)))
    assert v3.minadd(A, B, dest) == approx(v3.add(dest, v3.minv(A, B)))


def test_negate():
    assert v3.negate(v3.negate(A)) == A
    assert v3.add(A, v3.negate(A)) == v3.ZERO


def test_normalize():
    assert v3.norm(v3.normalize(A)) == pytest.approx(1.0)
    assert v3.normalize(v3.ZERO) == v3.ZERO
    assert v3.normalize((0.0, 0.0, 5.0)) == v3.ZUP


def test_cross():
    assert v3.cross(v3.XUP, v3.YUP) == v3.ZUP
    assert v3.cross(v3.YUP, v3.ZUP) == v3.XUP
    c = v3.cross(A, B)
    assert v3.dot(c, A) == pytest.approx(0.0, abs=1e-9)
    assert v3.dot(c, B) == pytest.approx(0.0, abs=1e-9)
    assert v3.cross(B, A) == approx(v3.negate(c))


def test_crossn_is_unit():
    n = v3.crossn(A, B)
    assert v3.norm(n) == pytest.approx(1.0)
    assert v3.crossn(v3.scale(v3.XUP, 3.0), v3.scale(v3.YUP, 2.0)) == approx(v3.ZUP)


def test_angle():
    assert v3.angle(v3.XUP, v3.YUP) == pytest.approx(math.pi / 2)
    assert v3.angle(A, A) == pytest.approx(0.0, abs=1e-6)
    assert v3.angle(A, v3.negate(A)) == pytest.approx(math.pi, abs=1e-6)


def test_rotate():
    assert v3.rotate(v3.XUP, math.pi / 2, v3.ZUP) == approx(v3.YUP)
    r = v3.rotate(A, 0.7, B)
    assert v3.norm(r) == pytest.approx(v3.norm(A))
    assert v3.rotate(A, 0.7, v3.scale(B, 5.0)) == approx(r)
    assert v3.rotate(r, -0.7, B) == approx(A)


def test_rotate_m4():
    identity = ((1, 0, 0, 0), (0, 1, 0, 0), (0, 0, 1, 0), (0, 0, 0, 1))
    assert v3.rotate_m4(identity, A) == approx(A)
    rot_z = ((0, 1, 0, 0), (-1, 0, 0, 0), (0, 0, 1, 0), (5, 6, 7, 1))
    assert v3.rotate_m4(rot_z, v3.XUP) == approx(v3.YUP)
    with pytest.raises(ValueError):
        v3.rotate_m4(rot_z[:3], A)


def test_rotate_m3():
    identity = ((1, 0, 0), (0, 1, 0), (0, 0, 1))
    assert v3.rotate_m3(identity, A) == approx(A)
    rot_z = ((0, 1, 0), (-1, 0, 0), (0, 0, 1))
    assert v3.rotate_m3(rot_z, v3.XUP) == approx(v3.YUP)


def test_proj():
    p = v3.proj(A, B)
    assert v3.cross(p, B) == approx(v3.ZERO)
    assert v3.dot(v3.sub(A, p), B) == pytest.approx(0.0, abs=1e-9)


def test_center_and_distance():
    c = v3.center(A, B)
    assert v3.distance(A, c) == pytest.approx(v3.distance(B, c))
    assert v3.distance(A, c) == pytest.approx(v3.distance(A, B) / 2)
    assert v3.distance2(A, B) == pytest.approx(v3.distance(A, B) ** 2)
    assert v3.distance(A, A) == 0.0


def test_maxv_minv():
    hi = v3.maxv(A, B)
    lo = v3.minv(A, B)
    assert all(h >= a and h >= b for h, a, b in zip(hi, A, B))
    assert all(m <= a and m <= b for m, a, b in zip(lo, A, B))
    assert v3.add(hi, lo) == approx(v3.add(A, B))


@pytest.mark.parametrize(
    "v", [A, B, (1.0, 1.0, 1.0), (0.0, 0.0, 1.0), (1.0, 0.0, 0.0), (0.0, 3.0, 0.0)]
)
def test_ortho_is_perpendicular(v):
    o = v3.ortho(v)
    assert v3.dot(v, o) == pytest.approx(0.0, abs=1e-9)
    assert v3.norm(o) > 0.0


def test_clamp():
    c = v3.clamp((-3.0, 0.5, 9.0), -1.0, 1.0)
    assert c == (-1.0, 0.5, 1.0)
    assert all(-1.0 <= x <= 1.0 for x in v3.clamp(A, -1.0, 1.0))


def test_lerp_family():
    assert v3.lerp(A, B, 0.0) == approx(A)
    assert v3.lerp(A, B, 1.0) == approx(B)
    assert v3.lerp(A, B, 0.5) == approx(v3.center(A, B))
    assert v3.lerpc(A, B, 2.0) == approx(B)
    assert v3.lerpc(A, B, -1.0) == approx(A)
    assert v3.mix(A, B, 0.3) == v3.lerp(A, B, 0.3)
    assert v3.mixc(A, B, 1.7) == v3.lerpc(A, B, 1.7)
    assert v3.lerp(A, B, 2.0) != approx(B)


def test_step():
    assert v3.step_uni(0.5, (0.0, 0.5, 1.0)) == (0.0, 1.0, 1.0)
    assert v3.step((1.0, 1.0, 1.0), (0.0, 1.0, 2.0)) == (0.0, 1.0, 1.0)


def test_smoothstep():
    assert v3.smoothstep_uni(0.0, 1.0, (-1.0, 0.5, 2.0)) == approx((0.0, 0.5, 1.0))
    r = v3.smoothstep((0.0, 0.0, 0.0), (1.0, 2.0, 4.0), (0.5, 1.0, 2.0))
    assert r == approx((0.5, 0.5, 0.5))


def test_smoothinterp():
    assert v3.smoothinterp(A, B, 0.0) == approx(A)
    assert v3.smoothinterp(A, B, 1.0) == approx(B)
    assert v3.smoothinterp(A, B, 0.5) == approx(v3.center(A, B))
    assert v3.smoothinterpc(A, B, 3.0) == approx(B)
    assert v3.smoothinterpc(A, B, -3.0) == approx(A)


def test_swizzle():
    assert v3.swizzle(A, v3.XXX) == (A[0], A[0], A[0])
    assert v3.swizzle(A, v3.YYY) == (A[1], A[1], A[1])
    assert v3.swizzle(A, v3.ZZZ) == (A[2], A[2], A[2])
    assert v3.swizzle(A, v3.ZYX) == (A[2], A[1], A[0])
    assert v3.swizzle(A, v3.shuffle3(2, 1, 0)) == A


def test_swizzle_invalid():
    with pytest.raises(ValueError):
        v3.shuffle3(3, 0, 0)
    with pytest.raises(ValueError):
        v3.swizzle(A, 3)