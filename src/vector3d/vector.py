# vector3d/vector.py
from numbers import Integral, Real

import numpy as np

from vector3d.fast_math import fast_inv_sqrt

# Degenerate arithmetic (x / 0, 0 / 0, overflow) yields inf/NaN quietly.
_IEEE = {"divide": "ignore", "invalid": "ignore", "over": "ignore"}

_FIELDS = ("x", "y", "z")


def _component(name: str) -> property:
    slot = "_" + name

    def fget(self) -> np.float32:
        return getattr(self, slot)

    def fset(self, value: float) -> None:
        with np.errstate(**_IEEE):
            setattr(self, slot, np.float32(value))

    return property(fget, fset, doc=f"The {name} component as a 32-bit float.")


class Vector3D:
    """
    A 3D vector of single-precision floats with value semantics.

    Arithmetic operators never modify their operands; the augmented forms
    (+=, -=, *=, /=) mutate only the left-hand vector. Equality is exact
    componentwise comparison. Degenerate inputs such as dividing by zero or
    normalizing the zero vector produce inf/NaN components rather than
    raising.
    """
    __slots__ = ("_x", "_y", "_z")

    # Make numpy scalars on the left defer to __rmul__ instead of broadcasting.
    __array_ufunc__ = None

    x = _component("x")
    y = _component("y")
    z = _component("z")

    def __init__(self, x: float, y: float, z: float):
        self.x = x
        self.y = y
        self.z = z

    @classmethod
    def new(cls, x: float, y: float, z: float) -> "Vector3D":
        return cls(x, y, z)

    def copy(self) -> "Vector3D":
        return Vector3D(self.x, self.y, self.z)

    def __copy__(self) -> "Vector3D":
        return self.copy()

    def __deepcopy__(self, memo) -> "Vector3D":
        return self.copy()

    # Indexed access: 0, 1, 2 -> x, y, z. Anything else is a caller bug.
    def _field(self, index) -> str:
        if isinstance(index, Integral) and not isinstance(index, bool) and 0 <= index <= 2:
            return _FIELDS[index]
        raise IndexError("out of bounds!")

    def __getitem__(self, index: int) -> np.float32:
        return getattr(self, self._field(index))

    def __setitem__(self, index: int, value: float) -> None:
        setattr(self, self._field(index), value)

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    # Scalar scaling
    def __imul__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        with np.errstate(**_IEEE):
            s = np.float32(scalar)
            self.x *= s
            self.y *= s
            self.z *= s
        return self

    def __itruediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        with np.errstate(**_IEEE):
            s = np.float32(scalar)
            self.x /= s
            self.y /= s
            self.z /= s
        return self

    def __mul__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        with np.errstate(**_IEEE):
            s = np.float32(scalar)
            return Vector3D(self.x * s, self.y * s, self.z * s)

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __truediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        with np.errstate(**_IEEE):
            s = np.float32(scalar)
            return Vector3D(self.x / s, self.y / s, self.z / s)

    def __neg__(self) -> "Vector3D":
        return Vector3D(-self.x, -self.y, -self.z)

    # Vector addition/subtraction
    def __iadd__(self, other):
        if not isinstance(other, Vector3D):
            return NotImplemented
        with np.errstate(**_IEEE):
            self.x += other.x
            self.y += other.y
            self.z += other.z
        return self

    def __isub__(self, other):
        if not isinstance(other, Vector3D):
            return NotImplemented
        with np.errstate(**_IEEE):
            self.x -= other.x
            self.y -= other.y
            self.z -= other.z
        return self

    def __add__(self, other):
        if not isinstance(other, Vector3D):
            return NotImplemented
        with np.errstate(**_IEEE):
            return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        if not isinstance(other, Vector3D):
            return NotImplemented
        with np.errstate(**_IEEE):
            return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def _length_squared(self) -> np.float32:
        with np.errstate(**_IEEE):
            return self.x * self.x + self.y * self.y + self.z * self.z

    def magnitude(self) -> np.float32:
        """
        Euclidean length, sqrt(x^2 + y^2 + z^2), in single precision.
        """
        return np.sqrt(self._length_squared())

    def normalize_precise(self) -> "Vector3D":
        """
        Unit vector in the same direction, dividing by the exact magnitude.
        The zero vector yields NaN components.
        """
        return self / self.magnitude()

    def normalize(self) -> "Vector3D":
        """
        Unit vector using the fast inverse square root approximation.

        Each component differs from normalize_precise() by at most about
        0.1751% relative error. The zero vector comes back as the zero vector.
        """
        return self * fast_inv_sqrt(self._length_squared())

    def __eq__(self, other):
        if not isinstance(other, Vector3D):
            return NotImplemented
        return bool(self.x == other.x and self.y == other.y and self.z == other.z)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Vector3D({self.x}, {self.y}, {self.z})"
