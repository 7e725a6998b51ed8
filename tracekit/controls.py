"""Slider controls of the animated model and the value domains of its curves."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import List

CURVE_COLOR_COUNT = 6


class Controller(IntEnum):
    """The sliders of the model, in the order they are shown.

    The frame slider always comes first.
    """

    FRAME_CONTROLS = 0
    L_ARM_Z_ANGLE = 1
    L_ARM_X_ANGLE = 2
    R_ARM_Z_ANGLE = 3
    R_ARM_X_ANGLE = 4
    L_HEAR_ANGLE = 5
    R_HEAR_ANGLE = 6
    NECK_X_ANGLE = 7
    NECK_Y_ANGLE = 8


NUM_CONTROLS = len(Controller)


class CurveType(IntEnum):
    """The ways an animation curve can interpolate its control points."""

    LINEAR = 0
    BSPLINE = 1
    BEZIER = 2
    CATMULLROM = 3
    C2INTERPOLATING = 4


@dataclass(frozen=True)
class SliderControl:
    """A named slider with its range, step and starting value."""

    name: str
    minimum: float
    maximum: float
    step: float
    value: float


def default_controls(max_frame_count: int) -> List[SliderControl]:
    """The model's sliders, one per Controller member, indexed by it."""
    specs = {
        Controller.FRAME_CONTROLS: ("Frame Number", 0.0, float(max_frame_count), 1.0, 0.0),
        Controller.L_ARM_Z_ANGLE: ("Left Arm-Z Angle", -180.0, 180.0, 1.0, 140.0),
        Controller.L_ARM_X_ANGLE: ("Left Arm-X Angle", -180.0, 180.0, 1.0, 0.0),
        Controller.R_ARM_Z_ANGLE: ("Right Arm-Z Angle", -180.0, 180.0, 1.0, -120.0),
        Controller.R_ARM_X_ANGLE: ("Right Arm-X Angle", -180.0, 180.0, 1.0, 0.0),
        Controller.L_HEAR_ANGLE: ("Left Hear Angle", -180.0, 180.0, 1.0, 0.0),
        Controller.R_HEAR_ANGLE: ("Right Hear Angle", -180.0, 180.0, 1.0, 0.0),
        Controller.NECK_X_ANGLE: ("Neck-X Angle", -90.0, 90.0, 1.0, 0.0),
        Controller.NECK_Y_ANGLE: ("Neck-Y Angle", -90.0, 90.0, 1.0, 0.0),
    }
    return [SliderControl(*specs[c]) for c in Controller]


class CurveDomain:
    """The value range a curve is drawn over; minimum stays below maximum."""

    __slots__ = ("_min", "_max")

    def __init__(self, minimum: float, maximum: float):
        self._min = 0.0
        self._max = 0.0
        self.set_range(minimum, maximum)

    @property
    def minimum(self) -> float:
        return self._min

    @minimum.setter
    def minimum(self, value: float) -> None:
        if not value < self._max:
            raise ValueError(f"minimum {value} must be below maximum {self._max}")
        self._min = float(value)

    @property
    def maximum(self) -> float:
        return self._max

    @maximum.setter
    def maximum(self, value: float) -> None:
        if not value > self._min:
            raise ValueError(f"maximum {value} must be above minimum {self._min}")
        self._max = float(value)

    def mag(self) -> float:
        """The width of the range."""
        return self._max - self._min

    def set_range(self, minimum: float, maximum: float) -> None:
        """Set both ends at once."""
        if not minimum < maximum:
            raise ValueError(f"minimum {minimum} must be below maximum {maximum}")
        self._min = float(minimum)
        self._max = float(maximum)

    def __repr__(self) -> str:
        return f"CurveDomain({self._min!r}, {self._max!r})"


__all__ = [
    "CURVE_COLOR_COUNT",
    "NUM_CONTROLS",
    "Controller",
    "CurveDomain",
    "CurveType",
    "SliderControl",
    "default_controls",
]