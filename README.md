# tracekit

Small pieces for writing a ray tracer or a keyframe modeler in plain
Python. The package has no dependencies outside the standard library.

## What is inside

- `tracekit.matrix`: `Mat3` and `Mat4`, row-major matrices with arithmetic
  (`+`, `-`, `*` by a matrix, a number or a vector, `/` by a number),
  `transpose`, `trace`, Gauss-Jordan `inverse` (raising
  `SingularMatrixError` for a singular matrix), column-major export
  (`gl_matrix`) and `parse` from whitespace-separated text. `Mat4` also has
  `from_rows`, `is_zero`, `upper33`, `transform_point` and the builders
  `rotation`, `translation` and `scale`.
- `tracekit.transforms`: homogeneous transform builders (`make_h_trans`,
  `make_h_scale`, `make_h_rot_x`, `make_h_rot_y`, `make_h_rot_z`,
  `make_h_rot`, `make_diagonal`), and `clamp`, which clamps each component
  of a colour into [0, 1].
- `tracekit.ray`: `Ray` (with `at(t)`), `RayType` and `Intersection`.
- `tracekit.material`: `MaterialParameter` (a constant colour or a
  texture callable taking `(u, v)`) and `Material`, with emissive, ambient,
  specular, diffuse, reflective and transmissive terms, shininess and index
  of refraction. Materials can be added with `+=` and scaled with
  `factor * material`.
- `tracekit.geometry`: `BoundingBox`, the `TransformNode` hierarchy and the
  abstract `Geometry` base class for scene objects.
- `tracekit.bsp`: `BSPNode` and `BSPTree`, a binary space partition that
  cuts down the number of intersection tests per ray.
- `tracekit.camera`: `OrbitCamera`, a mouse-driven orbit camera (rotate,
  translate, zoom) with `MouseAction`, `CameraCurve` and
  `ViewingParameters`.
- `tracekit.controls`: slider definitions (`Controller`, `SliderControl`,
  `default_controls`), `CurveType` and `CurveDomain` for animation curves.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Matrices and rays:

```python
from tracekit.matrix import Mat4
from tracekit.ray import Ray

move = Mat4.translation(1.0, 2.0, 3.0)
print(move.transform_point((0.0, 0.0, 0.0)))   # (1.0, 2.0, 3.0)

ray = Ray((0.0, 0.0, 0.0), (0.0, 0.0, 1.0))
print(ray.at(2.5))                             # (0.0, 0.0, 2.5)
```

A scene object is a subclass of `Geometry` that intersects rays in its own
coordinates; `Geometry.intersect` handles the transform. A BSP tree then
finds the nearest hit among many objects:

```python
import math

from tracekit.bsp import BSPTree
from tracekit.geometry import BoundingBox, Geometry, TransformNode
from tracekit.matrix import Mat4
from tracekit.ray import RAY_EPSILON, Intersection, Ray


class UnitSphere(Geometry):
    def has_bounding_box_capability(self):
        return True

    def compute_local_bounding_box(self):
        return BoundingBox((-1.0, -1.0, -1.0), (1.0, 1.0, 1.0))

    def intersect_local(self, ray):
        p, d = ray.position, ray.direction
        b = sum(pc * dc for pc, dc in zip(p, d))
        c = sum(pc * pc for pc in p) - 1.0
        disc = b * b - c
        if disc < 0:
            return None
        t = -b - math.sqrt(disc)
        if t <= RAY_EPSILON:
            t = -b + math.sqrt(disc)
        if t <= RAY_EPSILON:
            return None
        return Intersection(obj=self, t=t, normal=ray.at(t))


root = TransformNode()
spheres = []
for x in (-3.0, 0.0, 3.0):
    sphere = UnitSphere(transform=root.create_child(Mat4.translation(x, 0.0, 0.0)))
    sphere.compute_bounding_box()
    spheres.append(sphere)

tree = BSPTree(spheres, 8, 1, BoundingBox((-5.0, -5.0, -5.0), (5.0, 5.0, 5.0)))
hit = tree.intersect(Ray((3.0, 0.0, -4.0), (0.0, 0.0, 1.0)))
print(hit.t)   # about 3.0
```

An orbit camera follows mouse drags:

```python
from tracekit.camera import MouseAction, OrbitCamera

camera = OrbitCamera()
camera.click_mouse(MouseAction.ROTATE, 100, 100)
camera.drag_mouse(130, 90)
camera.release_mouse(130, 90)
eye, center, up = camera.viewing_parameters()
```

## What it does not do

tracekit is a library of building blocks, not a renderer. It has no
command-line program, no window or drawing code, no scene-file reader and
no image output. It ships no concrete shapes (spheres, boxes, meshes) and
no lights; `Material` stores surface terms but does not shade. Those are
left to the code that uses the package.