"""Shared implementation of the immutable 3D vector.

`Vector3` implements `Vec3Contract` once, generically over a numpy floating
scalar type. Concrete precisions only pick that type:

    - `Vec3f` stores `numpy.float32` components
    - `Vec3d` stores `numpy.float64` components

All component arithmetic is done on numpy scalars of the vector's own type,
so results are rounded exactly as native single/double precision arithmetic
would round them. Degenerate operations (normalizing a zero vector, overflow)
return NaN/inf components instead of raising or warning: every computation
runs under `numpy.errstate(all='ignore')`.

Named operations and their operator forms accept only a vector of the same
precision; mixing `Vec3f` and `Vec3d` raises `TypeError`. Convert explicitly
with `Vec3f.from_vec3d` or `Vec3d.from_vec3f`.

Typical Usage:
    ```python
    from py_vec3 import Vec3d

    velocity = Vec3d(800.0, 100.0, 0.0)
    direction = velocity.unit()
    speed = velocity.length
    lift = velocity.cross_product(Vec3d(0, 0, 1))
    ```
"""
from __future__ import annotations

import logging
import numbers
from typing import Any, Callable, ClassVar, Iterator, Type, Union

import numpy as np
from typing_extensions import Self

from py_vec3.config import get_config
from py_vec3.contract import Vec3Contract, T
from py_vec3.exceptions import VectorIndexError
from py_vec3.logger import logger

__all__ = ('Vector3',)

_AXES = ('_x', '_y', '_z')


def _fp_state() -> np.errstate:
    return np.errstate(all='ignore')


def _checked_index(index: Any) -> int:
    if isinstance(index, (int, np.integer)) and not isinstance(index, bool) and 0 <= index < 3:
        return int(index)
    raise VectorIndexError(index)


def _format_component(value: np.floating) -> str:
    # shortest round-trip form without a redundant ".0"
    text = str(value)
    if text.endswith('.0'):
        return text[:-2]
    return text


class Vector3(Vec3Contract[T]):
    """Immutable 3D vector over the numpy scalar type `component_type`.

    Not instantiated directly; use `Vec3f` or `Vec3d`.

    Attributes:
        x: First component.
        y: Second component.
        z: Third component.

    Args:
        x: First component, cast to `component_type`.
        y: Second component, cast to `component_type`.
        z: Third component, cast to `component_type`.
    """

    __slots__ = _AXES
    # keep numpy scalars on the left of an operator from broadcasting over us
    __array_ufunc__ = None

    component_type: ClassVar[Type[np.floating]]

    def __init__(self, x: Union[float, T], y: Union[float, T], z: Union[float, T]):
        cast = getattr(type(self), 'component_type', None)
        if cast is None:
            raise TypeError(f"{type(self).__name__} has no component_type, use Vec3f or Vec3d")
        with _fp_state():
            object.__setattr__(self, '_x', cast(x))
            object.__setattr__(self, '_y', cast(y))
            object.__setattr__(self, '_z', cast(z))

    @classmethod
    def from_vector(cls, vector: Vector3[Any]) -> Self:
        """Copy `vector` into this precision, casting every component."""
        return cls(vector.x, vector.y, vector.z)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def x(self) -> T:
        return self._x

    @property
    def y(self) -> T:
        return self._y

    @property
    def z(self) -> T:
        return self._z

    @property
    def length(self) -> T:
        """Euclidean norm, computed as `sqrt(x*x + y*y + z*z)` on every access."""
        with _fp_state():
            return np.sqrt(self.dot_product(self))

    def get_value(self, index: int) -> T:
        """Component by index.

        Raises:
            VectorIndexError: If `index` is not 0, 1 or 2.
        """
        return (self._x, self._y, self._z)[_checked_index(index)]

    def set_value(self, index: int, value: Union[float, T]) -> Self:
        """Return a new vector with the component at `index` replaced.

        Raises:
            VectorIndexError: If `index` is not 0, 1 or 2.
        """
        components = [self._x, self._y, self._z]
        components[_checked_index(index)] = value
        return type(self)(*components)

    def _require_same_type(self, other: Any) -> None:
        if type(other) is not type(self):
            raise TypeError(f"Expected {type(self).__name__}, got {type(other).__name__}")

    def add(self, other: Self) -> Self:
        """Component-wise sum.

        Raises:
            TypeError: If other is not a vector of this precision.
        """
        self._require_same_type(other)
        with _fp_state():
            return type(self)(self._x + other.x, self._y + other.y, self._z + other.z)

    def subtract(self, other: Self) -> Self:
        self._require_same_type(other)
        with _fp_state():
            return type(self)(self._x - other.x, self._y - other.y, self._z - other.z)

    def scale(self, scalar: Union[float, T]) -> Self:
        with _fp_state():
            s = self.component_type(scalar)
            return type(self)(s * self._x, s * self._y, s * self._z)

    def negate(self) -> Self:
        """Same as unary minus, `scale(-1)`."""
        return self.scale(-1)

    def dot_product(self, other: Self) -> T:
        self._require_same_type(other)
        with _fp_state():
            return (self._x * other.x) + (self._y * other.y) + (self._z * other.z)

    def cross_product(self, other: Self) -> Self:
        """Right-handed cross product.

        Anti-commutative: `a.cross_product(b) == -b.cross_product(a)`. Zero for
        parallel or anti-parallel inputs.

        Examples:
            ```python
            Vec3d(1, 2, 3).cross_product(Vec3d(1, 5, 7))  # Vec3d(x=-1.0, y=-4.0, z=3.0)
            ```
        """
        self._require_same_type(other)
        with _fp_state():
            return type(self)(
                (self._y * other.z) - (self._z * other.y),
                (self._z * other.x) - (self._x * other.z),
                (self._x * other.y) - (self._y * other.x),
            )

    def resize(self, length: Union[float, T]) -> Self:
        """Vector with the same direction and the given length.

        Note:
            Resizing a zero vector goes through `unit()` and yields NaN components.
        """
        return self.unit().scale(length)

    def unit(self) -> Self:
        """Vector with the same direction and length 1.

        Note:
            A zero vector is not special-cased: the reciprocal of its length is
            inf and every component of the result is NaN.
        """
        length = self.length
        if length == 0:
            level = logging.getLevelName(get_config().degenerate_log_level)
            logger.log(level, f"Normalizing zero-length {self!r}, result has NaN components")
        with _fp_state():
            return self.scale(self.component_type(1) / length)

    def copy(self) -> Self:
        return type(self)(self._x, self._y, self._z)

    def apply(self, selector: Callable[[T], Union[float, T]]) -> Self:
        """Return a new vector built from `selector(x)`, `selector(y)`, `selector(z)`.

        The selector is called exactly once per component, in x, y, z order.
        """
        x = selector(self._x)
        y = selector(self._y)
        z = selector(self._z)
        return type(self)(x, y, z)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(self._x == other.x and self._y == other.y and self._z == other.z)

    def __hash__(self) -> int:
        return hash((self._x, self._y, self._z))

    def __add__(self, other: Self) -> Self:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Self) -> Self:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> Self:
        return self.negate()

    def __mul__(self, other: Union[float, Self]) -> Union[T, Self]:
        """Scale by a number, or dot product with a vector of the same precision.

        Raises:
            TypeError: If other is neither a real number nor a vector of this type.
        """
        if isinstance(other, type(self)):
            return self.dot_product(other)
        if isinstance(other, numbers.Real):
            return self.scale(other)
        raise TypeError(other)

    def __rmul__(self, other: float) -> Self:
        if isinstance(other, numbers.Real):
            return self.scale(other)
        raise TypeError(other)

    def __getitem__(self, index: int) -> T:
        return self.get_value(index)

    def __iter__(self) -> Iterator[T]:
        yield self._x
        yield self._y
        yield self._z

    def __reduce__(self):
        return type(self), (self._x, self._y, self._z)

    def __copy__(self) -> Self:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Self:
        return self.copy()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(x={self._x}, y={self._y}, z={self._z})"

    def __str__(self) -> str:
        return f"<{_format_component(self._x)}, {_format_component(self._y)}, {_format_component(self._z)}>"
