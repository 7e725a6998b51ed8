"""Binary space partitioning to cut down the intersection tests per ray."""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from tracekit.geometry import BoundingBox, Geometry
from tracekit.ray import RAY_EPSILON, Intersection, Ray


class BSPNode:
    """A box of space holding the objects that overlap it, and maybe two halves."""

    def __init__(self, bounds: BoundingBox, parent_members: Iterable[Geometry], axis: int):
        self.bounds = bounds
        self.members: List[Geometry] = [
            obj
            for obj in parent_members
            if obj.has_bounding_box_capability() and obj.bounds.intersects(bounds)
        ]
        self.axis = axis
        self.children: Optional[Tuple[BSPNode, BSPNode]] = None

    def is_leaf(self) -> bool:
        return self.children is None

    def subdivide(self, depth: int, max_depth: int, max_list_length: int) -> None:
        """Split recursively while the node is too full and the tree not too deep."""
        if depth >= max_depth or len(self.members) <= max_list_length:
            return
        axis = self.axis
        next_axis = (axis + 1) % 3
        lo = self.bounds.min[axis]
        width = self.bounds.max[axis] - lo
        middle = lo + 0.5 * width

        def with_axis(v, value):
            return tuple(value if i == axis else c for i, c in enumerate(v))

        near_bounds = BoundingBox(self.bounds.min, with_axis(self.bounds.max, middle))
        far_bounds = BoundingBox(with_axis(self.bounds.min, middle), with_axis(self.bounds.max, lo + width))

        near = BSPNode(near_bounds, self.members, next_axis)
        near.subdivide(depth + 1, max_depth, max_list_length)
        far = BSPNode(far_bounds, self.members, next_axis)
        far.subdivide(depth + 1, max_depth, max_list_length)
        self.children = (near, far)

    def _t_to_plane(self, point_in_plane, ray: Ray) -> float:
        d = ray.direction[self.axis]
        # A ray parallel to the plane gets a negative t: only the near side is searched.
        if d == 0.0:
            return -1.0
        return (point_in_plane[self.axis] - ray.position[self.axis]) / d

    def intersect(self, ray: Ray, t_min: float, t_max: float) -> Optional[Intersection]:
        """The nearest hit within this node's part of [t_min, t_max], or None."""
        if self.children is None:
            best: Optional[Intersection] = None
            for obj in self.members:
                hit = obj.intersect(ray)
                if hit is not None and (best is None or hit.t < best.t):
                    best = hit
            if best is not None and best.t <= t_max + RAY_EPSILON:
                return best
            return None

        low_child, high_child = self.children
        t_plane = self._t_to_plane(low_child.bounds.max, ray)
        plane = low_child.bounds.max[self.axis]
        origin = ray.position[self.axis]

        if origin < plane:
            near, far = low_child, high_child
        elif origin == plane:
            if ray.direction[self.axis] > 0:
                return high_child.intersect(ray, t_min, t_max)
            return low_child.intersect(ray, t_min, t_max)
        else:
            near, far = high_child, low_child

        if t_plane > t_max or t_plane < 0.0:
            return near.intersect(ray, t_min, t_max)
        if t_plane < t_min:
            return far.intersect(ray, t_min, t_max)
        hit = near.intersect(ray, t_min, t_plane)
        if hit is not None:
            return hit
        return far.intersect(ray, t_plane, t_max)


class BSPTree:
    """A BSP tree over a scene's bounded objects."""

    def __init__(self, objects: Iterable[Geometry], max_depth: int, max_children: int, bounds: BoundingBox):
        self.objects = list(objects)
        self.max_depth = max_depth
        self.max_children = max_children
        self.bounds = bounds
        self.root = BSPNode(bounds, self.objects, 0)
        self.root.subdivide(0, max_depth, max_children)

    def intersect(self, ray: Ray) -> Optional[Intersection]:
        """The nearest hit of the ray with any object in the tree, or None."""
        span = self.bounds.intersect_ray(ray)
        if span is None:
            return None
        t_min, t_max = span
        return self.root.intersect(ray, t_min, t_max)


__all__ = ["BSPNode", "BSPTree"]