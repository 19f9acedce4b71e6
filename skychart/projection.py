"""Projection of the celestial sphere onto the screen."""

from __future__ import annotations

import math

from .vector import Vec3, cross, dot, normalize, rotate_rodrigues

NORTH = Vec3(0.0, 0.0, 1.0)

_MIN_AXIS = 1e-9
_MIN_DENOMINATOR = 1e-6


def stereographic(
    v: Vec3,
    center: Vec3,
    scale: float,
    screen_center: tuple[float, float],
) -> tuple[float, float] | None:
    """Project the unit vector ``v`` to screen coordinates.

    The sphere is first rotated so that ``center`` points to the north pole.
    Returns ``None`` for stars on or behind the horizon of that view.
    """
    rv = v
    axis = cross(center, NORTH)
    if axis.length() > _MIN_AXIS:
        cos_angle = max(-1.0, min(1.0, dot(center, NORTH)))
        rv = rotate_rodrigues(v, normalize(axis), math.acos(cos_angle))

    if rv.z <= 0.0:
        return None

    denom = max(1.0 - rv.z, _MIN_DENOMINATOR)
    x = rv.x / denom
    y = rv.y / denom

    cx, cy = screen_center
    return (cx + x * scale, cy - y * scale)