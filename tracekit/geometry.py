"""Bounding boxes, the transform hierarchy and the geometry base class."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from itertools import product
from typing import Any, List, Optional, Sequence, Tuple

from tracekit.matrix import Mat4
from tracekit.ray import RAY_EPSILON, Intersection, Ray

Vec3 = Tuple[float, float, float]


def _vec3(v: Sequence[float]) -> Vec3:
    x, y, z = (float(c) for c in v)
    return (x, y, z)


@dataclass
class BoundingBox:
    """An axis-aligned box from `min` to `max`."""

    min: Vec3 = (0.0, 0.0, 0.0)
    max: Vec3 = (0.0, 0.0, 0.0)

    def __post_init__(self):
        self.min = _vec3(self.min)
        self.max = _vec3(self.max)

    def intersects(self, other: "BoundingBox") -> bool:
        """Whether this box overlaps another."""
        return all(
            omin - RAY_EPSILON <= smax and omax + RAY_EPSILON >= smin
            for smin, smax, omin, omax in zip(self.min, self.max, other.min, other.max)
        )

    def contains(self, point: Sequence[float]) -> bool:
        """Whether the point lies in the box."""
        return all(
            p + RAY_EPSILON >= lo and p - RAY_EPSILON <= hi
            for p, lo, hi in zip(_vec3(point), self.min, self.max)
        )

    def intersect_ray(self, ray: Ray) -> Optional[Tuple[float, float]]:
        """The near and far ray parameters where the ray crosses the box, or None."""
        t_min = -math.inf
        t_max = math.inf
        for p, d, lo, hi in zip(ray.position, ray.direction, self.min, self.max):
            if abs(d) < RAY_EPSILON:
                if p < lo - RAY_EPSILON or p > hi + RAY_EPSILON:
                    return None
                continue
            t1 = (lo - p) / d
            t2 = (hi - p) / d
            if t1 > t2:
                t1, t2 = t2, t1
            t_min = max(t_min, t1)
            t_max = min(t_max, t2)
            if t_min > t_max or t_max < RAY_EPSILON:
                return None
        return (t_min, t_max)


class TransformNode:
    """A node of the transform hierarchy; its transform includes its parent's."""

    def __init__(self, xform: Optional[Mat4] = None, parent: Optional["TransformNode"] = None):
        local = Mat4() if xform is None else xform
        self.parent = parent
        self.children: List[TransformNode] = []
        self.xform = local if parent is None else parent.xform * local
        self.inverse = self.xform.inverse()
        self.normal_matrix = self.xform.upper33().inverse().transpose()

    def create_child(self, xform: Mat4) -> "TransformNode":
        child = TransformNode(xform, self)
        self.children.append(child)
        return child

    def global_to_local(self, v: Sequence[float]) -> Vec3:
        return self.inverse.transform_point(v)

    def local_to_global(self, v: Sequence[float]) -> Tuple[float, ...]:
        """Transform a point; a 4-vector is multiplied as it stands."""
        if len(v) == 4:
            return self.xform * tuple(v)
        return self.xform.transform_point(v)

    def local_to_global_normal(self, v: Sequence[float]) -> Vec3:
        n = self.normal_matrix * _vec3(v)
        length = math.sqrt(sum(c * c for c in n))
        if length == 0.0:
            return _vec3(n)
        return _vec3(c / length for c in n)


class Geometry(ABC):
    """Anything with extent in three dimensions."""

    def __init__(self, scene: Any = None, transform: Optional[TransformNode] = None):
        self.scene = scene
        self.transform = transform if transform is not None else TransformNode()
        self.bounds = BoundingBox()

    @abstractmethod
    def intersect_local(self, ray: Ray) -> Optional[Intersection]:
        """Intersect a ray given in the object's own coordinates."""

    def has_bounding_box_capability(self) -> bool:
        return False

    def intersect(self, ray: Ray) -> Optional[Intersection]:
        """Intersect a ray given in world coordinates."""
        pos = self.transform.global_to_local(ray.position)
        tip = self.transform.global_to_local(
            tuple(p + d for p, d in zip(ray.position, ray.direction))
        )
        direction = tuple(b - a for a, b in zip(pos, tip))
        length = math.sqrt(sum(c * c for c in direction))
        if length == 0.0:
            return None
        local = Ray(pos, tuple(c / length for c in direction), ray.type)
        hit = self.intersect_local(local)
        if hit is None:
            return None
        return replace(
            hit,
            normal=self.transform.local_to_global_normal(hit.normal),
            t=hit.t / length,
        )

    def compute_local_bounding_box(self) -> BoundingBox:
        return BoundingBox()

    def compute_bounding_box(self) -> BoundingBox:
        """Bound the eight transformed corners of the local box."""
        local = self.compute_local_bounding_box()
        corners = [
            self.transform.local_to_global(corner)
            for corner in product(*zip(local.min, local.max))
        ]
        self.bounds = BoundingBox(
            tuple(min(c[i] for c in corners) for i in range(3)),
            tuple(max(c[i] for c in corners) for i in range(3)),
        )
        return self.bounds


__all__ = ["BoundingBox", "Geometry", "TransformNode"]