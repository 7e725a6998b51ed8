"""An orbiting camera steered by mouse drags."""

from __future__ import annotations

import math
from enum import Enum, IntEnum
from typing import NamedTuple, Sequence, Tuple

from tracekit.transforms import make_h_rot_x, make_h_rot_y, make_h_trans

Vec3 = Tuple[float, float, float]

MOUSE_ROTATION_SENSITIVITY = 1.0 / 90.0
MOUSE_TRANSLATION_X_SENSITIVITY = 0.03
MOUSE_TRANSLATION_Y_SENSITIVITY = 0.03
MOUSE_ZOOM_SENSITIVITY = 0.08

_TWO_PI = 6.28318530717


class MouseAction(Enum):
    NONE = 0
    TRANSLATE = 1
    ROTATE = 2
    ZOOM = 3
    TWIST = 4


class CameraCurve(IntEnum):
    """The animatable camera parameters, in curve order."""

    AZIMUTH = 0
    ELEVATION = 1
    DOLLY = 2
    TWIST = 3
    LOOKAT_X = 4
    LOOKAT_Y = 5
    LOOKAT_Z = 6
    FOV = 7
    NEARCP = 8
    FARCP = 9


class ViewingParameters(NamedTuple):
    """Eye position, point looked at and up direction."""

    eye: Vec3
    center: Vec3
    up: Vec3


def _cross(a: Sequence[float], b: Sequence[float]) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _normalized(v: Sequence[float]) -> Vec3:
    length = math.sqrt(sum(c * c for c in v))
    return tuple(c / length for c in v)


class OrbitCamera:
    """A camera orbiting a look-at point by azimuth, elevation and dolly."""

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        """Return to the default view."""
        self._twist = 0.0
        self._dolly = -20.0
        self._elevation = 0.2
        self._azimuth = math.pi
        self._look_at: Vec3 = (0.0, 0.0, 0.0)
        self._action = MouseAction.NONE
        self._last_mouse: Vec3 = (0.0, 0.0, 0.0)
        self._calculate()

    # ----- parameters ------------------------------------------------------

    @property
    def elevation(self) -> float:
        return self._elevation

    @elevation.setter
    def elevation(self, value: float) -> None:
        if value < 0:
            value += _TWO_PI
        self._elevation = float(value)
        self._dirty = True

    @property
    def azimuth(self) -> float:
        return self._azimuth

    @azimuth.setter
    def azimuth(self, value: float) -> None:
        self._azimuth = float(value)
        self._dirty = True

    @property
    def dolly(self) -> float:
        return self._dolly

    @dolly.setter
    def dolly(self, value: float) -> None:
        self._dolly = float(value)
        self._dirty = True

    @property
    def twist(self) -> float:
        return self._twist

    @twist.setter
    def twist(self, value: float) -> None:
        self._twist = float(value)
        self._dirty = True

    @property
    def look_at(self) -> Vec3:
        return self._look_at

    @look_at.setter
    def look_at(self, value: Sequence[float]) -> None:
        x, y, z = (float(c) for c in value)
        self._look_at = (x, y, z)
        self._dirty = True

    @property
    def current_action(self) -> MouseAction:
        return self._action

    # ----- viewing transform -----------------------------------------------

    def _calculate(self) -> None:
        point = (0.0, 0.0, 0.0)
        point = make_h_trans(0.0, 0.0, self._dolly) * point
        point = make_h_rot_x(self._elevation) * point
        point = make_h_rot_y(self._azimuth) * point
        point = make_h_trans(*self._look_at) * point
        self._position: Vec3 = tuple(point)

        wrapped = math.fmod(self._elevation, 2.0 * math.pi)
        if math.pi / 2 < wrapped < 3 * math.pi / 2:
            self._up: Vec3 = (0.0, -1.0, 0.0)
        else:
            self._up = (0.0, 1.0, 0.0)
        self._dirty = False

    def viewing_parameters(self) -> ViewingParameters:
        """Where the camera is, what it looks at and which way is up."""
        if self._dirty:
            self._calculate()
        return ViewingParameters(self._position, self._look_at, self._up)

    # ----- mouse -----------------------------------------------------------

    def click_mouse(self, action: MouseAction, x: int, y: int) -> None:
        self._action = action
        self._last_mouse = (float(x), float(y), self._last_mouse[2])

    def drag_mouse(self, x: int, y: int) -> None:
        current = (float(x), float(y), 0.0)
        dx, dy = current[0] - self._last_mouse[0], current[1] - self._last_mouse[1]
        self._last_mouse = current

        if self._action is MouseAction.TRANSLATE:
            self._calculate()
            x_track = -dx * MOUSE_TRANSLATION_X_SENSITIVITY
            y_track = dy * MOUSE_TRANSLATION_Y_SENSITIVITY
            offset = tuple(p - c for p, c in zip(self._position, self._look_at))
            x_axis = _normalized(_cross(self._up, offset))
            y_axis = _normalized(_cross(offset, x_axis))
            self.look_at = tuple(
                c + xa * x_track + ya * y_track
                for c, xa, ya in zip(self._look_at, x_axis, y_axis)
            )
        elif self._action is MouseAction.ROTATE:
            self.azimuth = self._azimuth - dx * MOUSE_ROTATION_SENSITIVITY
            self.elevation = self._elevation + dy * MOUSE_ROTATION_SENSITIVITY
        elif self._action is MouseAction.ZOOM:
            self.dolly = self._dolly - dy * MOUSE_ZOOM_SENSITIVITY

    def release_mouse(self, x: int, y: int) -> None:
        self._action = MouseAction.NONE


__all__ = ["CameraCurve", "MouseAction", "OrbitCamera", "ViewingParameters"]