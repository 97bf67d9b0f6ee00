"""3D Vector Mathematics.

`Vector3` is a frozen three-component value type for geometric and physics
computations. Components are stored as numpy floating-point scalars so that
degenerate operations follow IEEE-754 (Inf/NaN results) instead of raising
`ZeroDivisionError` the way Python floats do.

Two concrete scalar types are provided:
    - Vector3: components are `numpy.float64`
    - Vector3f: components are `numpy.float32`

Every operation returns a new instance of the left-hand operand's class.

Typical Usage:
    ```python
    from py_vec3 import Vector3

    incident = Vector3(1.0, -1.0, 0.0)
    normal = Vector3(0.0, 1.0, 0.0)

    bounced = Vector3.reflect(incident, normal)  # (1.0, 1.0, 0.0)
    bent = Vector3.refract(incident.normalize(), normal, 1 / 1.33)
    degrees = Vector3.angle(incident, normal)  # 135.0

    screen = Vector3(1.0, 2.0, 1.0).project2D(640, 480, 256.0, 4.0)
    ```

Error Handling:
    `normalize` and `angle` raise `ZeroLengthError` on zero-length input.
    `refract` returns the zero vector on total internal reflection.
    Division by zero (`/`, `project2D` on the viewer plane) yields Inf/NaN.
"""
import functools
import math
import numbers
from dataclasses import dataclass
from typing import Callable, ClassVar, Iterator, Optional, Type, TypeVar, Union

import numpy as np
from typing_extensions import Self

from py_vec3.exceptions import ZeroLengthError

__all__ = ('Vector3', 'Vector3f')

Scalar = Union[int, float, np.floating]

# computed in double precision, narrowed to the scalar type on use
_RAD_TO_DEG: float = 180 / math.pi

_F = TypeVar('_F', bound=Callable)


def _ieee754(method: _F) -> _F:
    """Silence numpy floating-point warnings; Inf/NaN are valid results."""

    @functools.wraps(method)
    def wrapper(*args, **kwargs):
        with np.errstate(all='ignore'):
            return method(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


@dataclass(frozen=True, init=False, repr=False)
class Vector3:
    """Immutable 3D vector with `numpy.float64` components.

    Attributes:
        x: First component.
        y: Second component (flipped by `project2D` for screen space).
        z: Third component (depth for `project2D`).

    Args:
        x: First component, or the value of every component when `y` and
            `z` are omitted. Defaults to zero.
        y: Second component.
        z: Third component.

    Raises:
        TypeError: If exactly one of `y` and `z` is given, or a component
            is not a real number.

    Examples:
        ```python
        Vector3()           # (0.0, 0.0, 0.0)
        Vector3(2.5)        # (2.5, 2.5, 2.5)
        Vector3(1, 2, 3)    # (1.0, 2.0, 3.0)
        ```
    """

    scalar: ClassVar[Type[np.floating]] = np.float64

    # let numpy scalars on the left hand side defer to __rmul__
    __array_ufunc__ = None

    x: float
    y: float
    z: float

    @_ieee754
    def __init__(self, x: Scalar = 0, y: Optional[Scalar] = None, z: Optional[Scalar] = None) -> None:
        if y is None and z is None:
            y = z = x
        elif y is None or z is None:
            raise TypeError(f"{type(self).__name__} takes 0, 1 or 3 components")
        for component in (x, y, z):
            if not isinstance(component, numbers.Real):
                raise TypeError(f"{type(self).__name__} component must be a real number, got {component!r}")
        cast = self.scalar
        object.__setattr__(self, 'x', cast(x))
        object.__setattr__(self, 'y', cast(y))
        object.__setattr__(self, 'z', cast(z))

    def _new(self, x: Scalar, y: Scalar, z: Scalar) -> Self:
        return type(self)(x, y, z)

    @_ieee754
    def add(self, b: 'Vector3') -> Self:
        """Component-wise sum of two vectors."""
        return self._new(self.x + b.x, self.y + b.y, self.z + b.z)

    @_ieee754
    def sub(self, b: 'Vector3') -> Self:
        """Component-wise difference `self - b`."""
        return self._new(self.x - b.x, self.y - b.y, self.z - b.z)

    @_ieee754
    def scale(self, k: Scalar) -> Self:
        """Multiply every component by the scalar `k`."""
        k = self.scalar(k)
        return self._new(self.x * k, self.y * k, self.z * k)

    @_ieee754
    def divide(self, k: Scalar) -> Self:
        """Divide every component by the scalar `k`.

        `k` is not validated: dividing by zero produces Inf (or NaN for
        zero components) rather than raising.
        """
        k = self.scalar(k)
        return self._new(self.x / k, self.y / k, self.z / k)

    def negate(self) -> Self:
        return self._new(-self.x, -self.y, -self.z)

    @_ieee754
    def cross(self, other: 'Vector3') -> Self:
        """Cross product `self × other`.

        Anti-commutative: `a.cross(b) == -b.cross(a)`.
        """
        return self._new(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    @_ieee754
    def dot(self, other: 'Vector3') -> np.floating:
        """Dot product of two vectors."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    @_ieee754
    def magnitude(self) -> np.floating:
        """Euclidean length of the vector, never negative."""
        return np.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    @_ieee754
    def normalize(self) -> Self:
        """Return the unit vector pointing in the same direction.

        Raises:
            ZeroLengthError: If the magnitude is not greater than zero. This
                includes the zero vector and vectors with NaN components.
        """
        length = self.magnitude()
        if length > 0:
            inv_length = self.scalar(1) / length
            return self._new(self.x * inv_length, self.y * inv_length, self.z * inv_length)
        raise ZeroLengthError(ZeroLengthError.NORMALIZE, length)

    @staticmethod
    @_ieee754
    def angle(v1: 'Vector3', v2: 'Vector3') -> np.floating:
        """Angle between two vectors, in degrees.

        The cosine is not clamped to [-1, 1], so rounding error on nearly
        parallel vectors can produce NaN.

        Raises:
            ZeroLengthError: If the product of the magnitudes is not greater
                than zero.
        """
        dot_product = v1.dot(v2)
        lengths = v1.magnitude() * v2.magnitude()
        if lengths > 0:
            cos_angle = dot_product / lengths
            return np.arccos(cos_angle) * v1.scalar(_RAD_TO_DEG)
        raise ZeroLengthError(ZeroLengthError.ANGLE, lengths)

    @staticmethod
    @_ieee754
    def refract(incident: 'Vector3', normal: 'Vector3', eta: Scalar) -> 'Vector3':
        """Refraction of `incident` through a surface with unit `normal`.

        Args:
            incident: Direction of the incoming ray.
            normal: Surface normal.
            eta: Ratio of refractive indices n2 / n1.

        Returns:
            The refracted direction, or the zero vector on total internal
            reflection.
        """
        eta = incident.scalar(eta)
        cos_i = incident.dot(normal)
        k = 1 - eta * eta * (1 - cos_i ** 2)
        if k < 0:
            return type(incident)()
        return incident.scale(eta).sub(normal.scale(eta * cos_i + np.sqrt(k)))

    @staticmethod
    @_ieee754
    def reflect(incident: 'Vector3', normal: 'Vector3') -> 'Vector3':
        """Mirror `incident` about `normal`: I - N * 2 * dot(I, N).

        `normal` must already be unit length; it is not normalized here.
        """
        return incident.sub(normal.scale(2 * incident.dot(normal)))

    @_ieee754
    def project_2d(self, width: int, height: int, fov: Scalar, viewer_distance: Scalar) -> Self:
        """Perspective-project this point onto a `width` x `height` screen.

        Returns:
            Vector whose x and y are screen coordinates (origin top-left,
            y growing downwards) and whose z is the unchanged input z.
            A point with `viewer_distance + z == 0` projects to Inf/NaN.
        """
        cast = self.scalar
        factor = cast(fov) / (cast(viewer_distance) + self.z)
        # screen offsets are added in double precision, then narrowed by _new
        x2d = np.float64(self.x * factor) + width / 2.0
        y2d = np.float64(-self.y * factor) + height / 2.0
        return self._new(x2d, y2d, self.z)

    project2D = project_2d

    def __add__(self, other: 'Vector3') -> Self:
        if isinstance(other, Vector3):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other: 'Vector3') -> Self:
        if isinstance(other, Vector3):
            return self.sub(other)
        return NotImplemented

    def __mul__(self, other: Scalar) -> Self:
        if isinstance(other, numbers.Real):
            return self.scale(other)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other: Scalar) -> Self:
        if isinstance(other, numbers.Real):
            return self.divide(other)
        return NotImplemented

    __neg__ = negate

    def __iter__(self) -> Iterator[np.floating]:
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return f"({self.x!s}, {self.y!s}, {self.z!s})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.x!s}, {self.y!s}, {self.z!s})"


class Vector3f(Vector3):
    """`Vector3` with single-precision (`numpy.float32`) components."""

    scalar: ClassVar[Type[np.floating]] = np.float32
