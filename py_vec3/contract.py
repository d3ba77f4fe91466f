"""Precision-independent operation set of a 3D vector value type.

Generic code written against `Vec3Contract` works unchanged for both `Vec3f`
and `Vec3d`. Every operation is total except `get_value` and `set_value`,
which raise `VectorIndexError` for an index outside {0, 1, 2}.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Generic

from typing_extensions import Self, TypeVar

__all__ = ('Vec3Contract', 'T')

T = TypeVar('T')


class Vec3Contract(ABC, Generic[T]):
    """Abstract immutable 3D vector over component type `T`."""

    __slots__ = ()

    @property
    @abstractmethod
    def x(self) -> T:
        """First component."""

    @property
    @abstractmethod
    def y(self) -> T:
        """Second component."""

    @property
    @abstractmethod
    def z(self) -> T:
        """Third component."""

    @property
    @abstractmethod
    def length(self) -> T:
        """Euclidean norm, `sqrt(dot_product(self))`. Not cached."""

    @abstractmethod
    def get_value(self, index: int) -> T:
        """Component by index: 0 -> x, 1 -> y, 2 -> z."""

    @abstractmethod
    def set_value(self, index: int, value: T) -> Self:
        """New vector with the component at `index` replaced by `value`."""

    @abstractmethod
    def add(self, other: Self) -> Self:
        """Component-wise sum."""

    @abstractmethod
    def subtract(self, other: Self) -> Self:
        """Component-wise difference `self - other`."""

    @abstractmethod
    def scale(self, scalar: T) -> Self:
        """Every component multiplied by `scalar`."""

    @abstractmethod
    def dot_product(self, other: Self) -> T:
        """`x1*x2 + y1*y2 + z1*z2`."""

    @abstractmethod
    def cross_product(self, other: Self) -> Self:
        """Right-handed cross product `self x other`."""

    @abstractmethod
    def resize(self, length: T) -> Self:
        """Same direction, given length. Non-finite result for a zero vector."""

    @abstractmethod
    def unit(self) -> Self:
        """Same direction, length 1. Non-finite result for a zero vector."""

    @abstractmethod
    def copy(self) -> Self:
        """Equal, independent instance."""

    @abstractmethod
    def apply(self, selector: Callable[[T], T]) -> Self:
        """New vector with `selector` applied to x, then y, then z."""
