"""Surface descriptions: per-channel material parameters and materials."""

from __future__ import annotations

from numbers import Real
from typing import Any, Callable, Optional, Sequence, Tuple

Vec3 = Tuple[float, float, float]
Texture = Callable[[Tuple[float, float]], Sequence[float]]

_LUMINANCE = (0.299, 0.587, 0.114)


def _vec3(v: Sequence[float]) -> Vec3:
    x, y, z = (float(c) for c in v)
    return (x, y, z)


class MaterialParameter:
    """A constant colour or a texture lookup.

    `value` may be a number (used for all three channels), a 3-vector, or a
    callable that maps (u, v) coordinates to a colour.
    """

    __slots__ = ("_value", "_texture")

    def __init__(self, value: Any = 0.0):
        self._texture: Optional[Texture] = None
        if isinstance(value, MaterialParameter):
            self._value = value._value
            self._texture = value._texture
        elif isinstance(value, Real):
            v = float(value)
            self._value = (v, v, v)
        elif callable(value):
            self._value = (0.0, 0.0, 0.0)
            self._texture = value
        else:
            self._value = _vec3(value)

    @property
    def mapped(self) -> bool:
        """True when the parameter is looked up in a texture."""
        return self._texture is not None

    @property
    def constant(self) -> Vec3:
        """The stored constant colour, ignoring any texture."""
        return self._value

    def value(self, isect: Any = None) -> Vec3:
        """The colour at an intersection."""
        if self._texture is None:
            return self._value
        uv = getattr(isect, "uv", (0.0, 0.0)) if isect is not None else (0.0, 0.0)
        return _vec3(self._texture(uv))

    def intensity_value(self, isect: Any = None) -> float:
        """The luminance of the colour at an intersection."""
        return sum(w * c for w, c in zip(_LUMINANCE, self.value(isect)))

    def copy(self) -> "MaterialParameter":
        return MaterialParameter(self)

    __copy__ = copy

    def __imul__(self, other):
        if isinstance(other, MaterialParameter):
            factors = other._value
        elif isinstance(other, Real):
            f = float(other)
            factors = (f, f, f)
        else:
            try:
                factors = _vec3(other)
            except (TypeError, ValueError):
                return NotImplemented
        self._value = tuple(a * b for a, b in zip(self._value, factors))
        return self

    def __iadd__(self, other):
        if isinstance(other, MaterialParameter):
            addend = other._value
        else:
            try:
                addend = _vec3(other)
            except (TypeError, ValueError):
                return NotImplemented
        self._value = tuple(a + b for a, b in zip(self._value, addend))
        return self

    def __repr__(self) -> str:
        if self._texture is not None:
            return f"MaterialParameter(texture={self._texture!r})"
        return f"MaterialParameter({self._value!r})"


class _ParameterSlot:
    """Attribute that always holds a MaterialParameter."""

    def __set_name__(self, owner, name):
        self._attr = "_" + name

    def __get__(self, obj, owner=None):
        if obj is None:
            return self
        return getattr(obj, self._attr)

    def __set__(self, obj, value):
        if not isinstance(value, MaterialParameter):
            value = MaterialParameter(value)
        setattr(obj, self._attr, value)


_FIELDS = (
    "emissive",
    "ambient",
    "specular",
    "diffuse",
    "reflective",
    "transmissive",
    "shininess",
    "index",
)


class Material:
    """The physical surface properties that govern how light interacts with it."""

    emissive = _ParameterSlot()
    ambient = _ParameterSlot()
    specular = _ParameterSlot()
    diffuse = _ParameterSlot()
    reflective = _ParameterSlot()
    transmissive = _ParameterSlot()
    shininess = _ParameterSlot()
    index = _ParameterSlot()

    def __init__(self):
        for name in _FIELDS:
            setattr(self, name, 0.0)
        self.index = 1.0

    @classmethod
    def from_values(
        cls, emissive, ambient, specular, diffuse, reflective, transmissive, shininess, index
    ) -> "Material":
        m = cls()
        m.emissive = emissive
        m.ambient = ambient
        m.specular = specular
        m.diffuse = diffuse
        m.reflective = reflective
        m.transmissive = transmissive
        m.shininess = float(shininess)
        m.index = float(index)
        return m

    # ----- lookups at an intersection ------------------------------------

    def ke(self, isect: Any = None) -> Vec3:
        return self.emissive.value(isect)

    def ka(self, isect: Any = None) -> Vec3:
        return self.ambient.value(isect)

    def ks(self, isect: Any = None) -> Vec3:
        return self.specular.value(isect)

    def kd(self, isect: Any = None) -> Vec3:
        return self.diffuse.value(isect)

    def kr(self, isect: Any = None) -> Vec3:
        return self.reflective.value(isect)

    def kt(self, isect: Any = None) -> Vec3:
        return self.transmissive.value(isect)

    def shininess_value(self, isect: Any = None) -> float:
        """Shininess; a texture-mapped one is rescaled into 0..128."""
        intensity = self.shininess.intensity_value(isect)
        return 128.0 * intensity if self.shininess.mapped else intensity

    def index_value(self, isect: Any = None) -> float:
        """Index of refraction."""
        return self.index.intensity_value(isect)

    # ----- arithmetic ------------------------------------------------------

    def copy(self) -> "Material":
        m = Material()
        for name in _FIELDS:
            setattr(m, name, getattr(self, name).copy())
        return m

    __copy__ = copy

    def __iadd__(self, other):
        if not isinstance(other, Material):
            return NotImplemented
        for name in _FIELDS:
            param = getattr(self, name)
            param += getattr(other, name)
        return self

    def __rmul__(self, factor):
        if not isinstance(factor, Real):
            return NotImplemented
        result = self.copy()
        for name in _FIELDS:
            param = getattr(result, name)
            param *= factor
        return result

    def __repr__(self) -> str:
        inner = ", ".join(f"{name}={getattr(self, name)!r}" for name in _FIELDS)
        return f"Material({inner})"


__all__ = ["Material", "MaterialParameter"]