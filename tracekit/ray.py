"""Rays and the records of where they hit a surface."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Sequence

RAY_EPSILON = 0.00001
NORMAL_EPSILON = 0.00001


class RayType(Enum):
    """What a ray is traced for."""

    VISIBILITY = 0
    REFLECTION = 1
    REFRACTION = 2
    SHADOW = 3


def _vec3(v: Sequence[float]) -> tuple[float, float, float]:
    x, y, z = (float(c) for c in v)
    return (x, y, z)


@dataclass(frozen=True)
class Ray:
    """A ray from `position` along `direction` (which should be normalised)."""

    position: tuple[float, float, float]
    direction: tuple[float, float, float]
    type: RayType = RayType.VISIBILITY

    def __post_init__(self):
        object.__setattr__(self, "position", _vec3(self.position))
        object.__setattr__(self, "direction", _vec3(self.direction))

    def at(self, t: float) -> tuple[float, float, float]:
        """The point at parameter `t` along the ray."""
        return tuple(p + t * d for p, d in zip(self.position, self.direction))


@dataclass
class Intersection:
    """Where a ray met an object, and the surface data found there.

    `material` is set only when the hit point has a material of its own,
    for instance one interpolated across a mesh; otherwise the object's
    material applies.
    """

    obj: Any = None
    t: float = 0.0
    normal: tuple[float, float, float] = (0.0, 0.0, 0.0)
    uv: tuple[float, float] = (0.0, 0.0)
    material: Optional[Any] = None

    def copy(self) -> "Intersection":
        """A copy sharing the object but owning its own material."""
        return Intersection(
            obj=self.obj,
            t=self.t,
            normal=self.normal,
            uv=self.uv,
            material=copy.copy(self.material) if self.material is not None else None,
        )


__all__ = ["NORMAL_EPSILON", "RAY_EPSILON", "Intersection", "Ray", "RayType"]