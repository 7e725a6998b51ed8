"""Row-major 3x3 and 4x4 matrices for modelling and ray-tracing transforms."""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterable, Iterator, Sequence


class SingularMatrixError(ArithmeticError):
    """Raised when a matrix without an inverse is inverted."""


class _SquareMatrix:
    """Shared behaviour of the fixed-size square matrices."""

    _size = 0
    __slots__ = ("_n",)
    __hash__ = None  # mutable

    def _init_elements(self, args) -> None:
        count = self._size * self._size
        if not args:
            values: Iterable = (
                1.0 if row == col else 0.0
                for row in range(self._size)
                for col in range(self._size)
            )
        elif len(args) == 1:
            source = args[0]
            if isinstance(source, _SquareMatrix):
                if source._size != self._size:
                    raise ValueError(
                        f"cannot build a {self._size}x{self._size} matrix "
                        f"from a {source._size}x{source._size} one"
                    )
                values = source._n
            else:
                values = source
        else:
            values = args
        elements = [float(v) for v in values]
        if len(elements) != count:
            raise ValueError(f"expected {count} elements, got {len(elements)}")
        self._n = elements

    # ----- access -------------------------------------------------------

    def _check_index(self, i: int) -> int:
        if i < 0:
            i += self._size
        if not 0 <= i < self._size:
            raise IndexError("matrix index out of range")
        return i

    def _rows(self) -> list[tuple[float, ...]]:
        s = self._size
        return [tuple(self._n[r * s:(r + 1) * s]) for r in range(s)]

    def _get(self, index):
        if isinstance(index, tuple):
            row, col = index
            return self._n[self._check_index(row) * self._size + self._check_index(col)]
        row = self._check_index(index)
        s = self._size
        return tuple(self._n[row * s:(row + 1) * s])

    def _set(self, index, value) -> None:
        s = self._size
        if isinstance(index, tuple):
            row, col = index
            self._n[self._check_index(row) * s + self._check_index(col)] = float(value)
            return
        row = self._check_index(index)
        values = [float(v) for v in value]
        if len(values) != s:
            raise ValueError(f"a row holds {s} elements, got {len(values)}")
        self._n[row * s:(row + 1) * s] = values

    # ----- arithmetic ---------------------------------------------------

    def _negated(self):
        return type(self)(-x for x in self._n)

    def _sum(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(a + b for a, b in zip(self._n, other._n))

    def _difference(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(a - b for a, b in zip(self._n, other._n))

    def _product(self, other):
        rows = self._rows()
        cols = list(zip(*other._rows()))
        return type(self)(
            sum(a * b for a, b in zip(row, col)) for row in rows for col in cols
        )

    def _apply(self, vector: Sequence[float]) -> tuple[float, ...]:
        return tuple(sum(a * b for a, b in zip(row, vector)) for row in self._rows())

    def _multiply_vector(self, vector: tuple[float, ...]) -> tuple[float, ...]:
        if len(vector) != self._size:
            raise ValueError(
                f"cannot multiply a {self._size}x{self._size} matrix "
                f"by a vector of length {len(vector)}"
            )
        return self._apply(vector)

    def _multiply(self, other):
        if isinstance(other, _SquareMatrix):
            if type(other) is not type(self):
                return NotImplemented
            return self._product(other)
        if isinstance(other, Real):
            return type(self)(x * other for x in self._n)
        try:
            vector = tuple(float(v) for v in other)
        except TypeError:
            return NotImplemented
        return self._multiply_vector(vector)

    def _scaled(self, other):
        if isinstance(other, Real):
            return type(self)(x * other for x in self._n)
        return NotImplemented

    def _divided(self, other):
        if isinstance(other, Real):
            return type(self)(x / other for x in self._n)
        return NotImplemented

    def _equals(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._n == other._n

    # ----- text ---------------------------------------------------------

    def _text(self) -> str:
        return "".join(
            " ".join(format(x, "g") for x in row) + "\n" for row in self._rows()
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(x) for x in self._n)})"

    @classmethod
    def _parse(cls, text: str):
        count = cls._size * cls._size
        tokens = text.split()
        if len(tokens) < count:
            raise ValueError(f"expected {count} numbers, found {len(tokens)}")
        return cls(float(tok) for tok in tokens[:count])

    # ----- ordering -----------------------------------------------------

    def _transposed(self):
        return type(self)(x for col in zip(*self._rows()) for x in col)

    def _trace(self) -> float:
        return sum(self._n[i * self._size + i] for i in range(self._size))

    def _column_major(self) -> tuple[float, ...]:
        return tuple(x for col in zip(*self._rows()) for x in col)

    def _inverted(self):
        n = self._size
        a = [list(row) for row in self._rows()]
        b = [list(row) for row in type(self)()._rows()]
        for j in range(n):
            pivot = max(range(j, n), key=lambda i: abs(a[i][j]))
            a[pivot], a[j] = a[j], a[pivot]
            b[pivot], b[j] = b[j], b[pivot]

            scale = a[j][j]
            if scale == 0.0:
                raise SingularMatrixError("matrix is singular")
            a[j] = [x / scale for x in a[j]]
            b[j] = [x / scale for x in b[j]]

            for i in range(n):
                if i != j:
                    factor = a[i][j]
                    a[i] = [x - factor * y for x, y in zip(a[i], a[j])]
                    b[i] = [x - factor * y for x, y in zip(b[i], b[j])]
        return type(self)(x for row in b for x in row)


class Mat3(_SquareMatrix):
    """A 3x3 matrix; with no arguments it is the identity."""

    _size = 3
    __slots__ = ()

    def __init__(self, *args):
        self._init_elements(args)

    def __getitem__(self, index):
        return self._get(index)

    def __setitem__(self, index, value):
        self._set(index, value)

    def __iter__(self) -> Iterator[tuple[float, ...]]:
        """Iterate over the rows."""
        return iter(self._rows())

    def __neg__(self):
        return self._negated()

    def __add__(self, other):
        return self._sum(other)

    def __sub__(self, other):
        return self._difference(other)

    def __mul__(self, other):
        return self._multiply(other)

    def __rmul__(self, other):
        return self._scaled(other)

    def __truediv__(self, other):
        return self._divided(other)

    def __eq__(self, other):
        return self._equals(other)

    __hash__ = None

    def __str__(self) -> str:
        return self._text()

    def transpose(self) -> "Mat3":
        return self._transposed()

    def trace(self) -> float:
        return self._trace()

    def gl_matrix(self) -> tuple[float, ...]:
        """The elements in column-major order, as OpenGL expects them."""
        return self._column_major()

    def inverse(self) -> "Mat3":
        """Invert by Gauss-Jordan elimination with partial pivoting."""
        return self._inverted()

    @classmethod
    def parse(cls, text: str) -> "Mat3":
        """Read the elements, row by row, from whitespace-separated text."""
        return cls._parse(text)


class Mat4(_SquareMatrix):
    """A 4x4 homogeneous transform; with no arguments it is the identity."""

    _size = 4
    __slots__ = ()

    def __init__(self, *args):
        self._init_elements(args)

    def __getitem__(self, index):
        return self._get(index)

    def __setitem__(self, index, value):
        self._set(index, value)

    def __iter__(self) -> Iterator[tuple[float, ...]]:
        """Iterate over the rows."""
        return iter(self._rows())

    def __neg__(self):
        return self._negated()

    def __add__(self, other):
        return self._sum(other)

    def __sub__(self, other):
        return self._difference(other)

    def __mul__(self, other):
        return self._multiply(other)

    def __rmul__(self, other):
        return self._scaled(other)

    def __truediv__(self, other):
        return self._divided(other)

    def __eq__(self, other):
        return self._equals(other)

    __hash__ = None

    def __str__(self) -> str:
        return self._text()

    @classmethod
    def from_rows(cls, r0, r1, r2, r3) -> "Mat4":
        rows = [tuple(r) for r in (r0, r1, r2, r3)]
        if any(len(r) != 4 for r in rows):
            raise ValueError("each row needs 4 elements")
        return cls(x for row in rows for x in row)

    def is_zero(self) -> bool:
        return all(x == 0 for x in self._n)

    def transpose(self) -> "Mat4":
        return self._transposed()

    def trace(self) -> float:
        return self._trace()

    def gl_matrix(self) -> tuple[float, ...]:
        """The elements in column-major order, as OpenGL expects them."""
        return self._column_major()

    def upper33(self) -> Mat3:
        return Mat3(x for row in self._rows()[:3] for x in row[:3])

    def inverse(self) -> "Mat4":
        """Invert by Gauss-Jordan elimination with partial pivoting."""
        return self._inverted()

    def transform_point(self, v) -> tuple[float, float, float]:
        """Transform a 3D point as (x, y, z, 1) and divide by the resulting w."""
        x, y, z = (float(c) for c in v)
        hx, hy, hz, hw = self._apply((x, y, z, 1.0))
        return (hx / hw, hy / hw, hz / hw)

    def _multiply_vector(self, vector):
        if len(vector) == 3:
            return self.transform_point(vector)
        return super()._multiply_vector(vector)

    @staticmethod
    def rotation(angle, x, y, z) -> "Mat4":
        """Rotation by `angle` radians about the axis (x, y, z)."""
        length = math.sqrt(x * x + y * y + z * z)
        if length == 0.0:
            raise ValueError("rotation axis has zero length")
        x, y, z = x / length, y / length, z / length
        c = math.cos(angle)
        s = math.sin(angle)
        t = 1.0 - c
        return Mat4(
            t * x * x + c, t * x * y - s * z, t * x * z + s * y, 0.0,
            t * x * y + s * z, t * y * y + c, t * y * z - s * x, 0.0,
            t * x * z - s * y, t * y * z + s * x, t * z * z + c, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )

    @staticmethod
    def translation(x, y, z) -> "Mat4":
        m = Mat4()
        m[0, 3] = x
        m[1, 3] = y
        m[2, 3] = z
        return m

    @staticmethod
    def scale(sx, sy, sz) -> "Mat4":
        m = Mat4()
        m[0, 0] = sx
        m[1, 1] = sy
        m[2, 2] = sz
        return m

    @classmethod
    def parse(cls, text: str) -> "Mat4":
        """Read the elements, row by row, from whitespace-separated text."""
        return cls._parse(text)