"""Builders for common 4x4 homogeneous transforms and small vector helpers."""

from __future__ import annotations

import math
from typing import Sequence

from tracekit.matrix import Mat3, Mat4


def make_diagonal(k: float) -> Mat4:
    """A matrix with `k` on the whole diagonal, zero elsewhere."""
    return Mat4(k if row == col else 0.0 for row in range(4) for col in range(4))


def make_h_scale(sx: float, sy: float, sz: float) -> Mat4:
    """Homogeneous scale along the three axes."""
    return Mat4(
        sx, 0.0, 0.0, 0.0,
        0.0, sy, 0.0, 0.0,
        0.0, 0.0, sz, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )


def make_h_trans(tx: float, ty: float, tz: float) -> Mat4:
    """Homogeneous translation by (tx, ty, tz)."""
    return Mat4(
        1.0, 0.0, 0.0, tx,
        0.0, 1.0, 0.0, ty,
        0.0, 0.0, 1.0, tz,
        0.0, 0.0, 0.0, 1.0,
    )


def make_h_rot_x(theta: float) -> Mat4:
    """Rotation by `theta` radians about the x axis."""
    c, s = math.cos(theta), math.sin(theta)
    return Mat4(
        1.0, 0.0, 0.0, 0.0,
        0.0, c, -s, 0.0,
        0.0, s, c, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )


def make_h_rot_y(theta: float) -> Mat4:
    """Rotation by `theta` radians about the y axis."""
    c, s = math.cos(theta), math.sin(theta)
    return Mat4(
        c, 0.0, s, 0.0,
        0.0, 1.0, 0.0, 0.0,
        -s, 0.0, c, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )


def make_h_rot_z(theta: float) -> Mat4:
    """Rotation by `theta` radians about the z axis."""
    c, s = math.cos(theta), math.sin(theta)
    return Mat4(
        c, -s, 0.0, 0.0,
        s, c, 0.0, 0.0,
        0.0, 0.0, 1.0, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )


def make_h_rot(theta: float, axis: Sequence[float]) -> Mat4:
    """Rotation by `theta` radians about an arbitrary axis (Rodrigues' formula)."""
    ax, ay, az = (float(c) for c in axis)
    length = math.sqrt(ax * ax + ay * ay + az * az)
    if length == 0.0:
        raise ValueError("rotation axis has zero length")
    x, y, z = ax / length, ay / length, az / length

    skew = Mat4(
        0.0, -z, y, 0.0,
        z, 0.0, -x, 0.0,
        -y, x, 0.0, 0.0,
        0.0, 0.0, 0.0, 0.0,
    )
    outer = Mat4(
        x * x, x * y, x * z, 0.0,
        x * y, y * y, y * z, 0.0,
        x * z, y * z, z * z, 0.0,
        0.0, 0.0, 0.0, 0.0,
    )
    m = outer + math.cos(theta) * (Mat4() - outer) + math.sin(theta) * skew
    m[3, 3] = 1.0
    return m


def clamp(v: Sequence[float]) -> tuple[float, ...]:
    """Clamp every component of a vector into the range [0, 1]."""
    return tuple(max(0.0, min(float(c), 1.0)) for c in v)


__all__ = [
    "Mat3",
    "Mat4",
    "clamp",
    "make_diagonal",
    "make_h_rot",
    "make_h_rot_x",
    "make_h_rot_y",
    "make_h_rot_z",
    "make_h_scale",
    "make_h_trans",
]