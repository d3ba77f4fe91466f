"""Double-precision 3D vector."""
from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from py_vec3.vector import Vector3

if TYPE_CHECKING:
    from py_vec3.vec3f import Vec3f

__all__ = ('Vec3d',)


class Vec3d(Vector3[np.float64]):
    """Immutable 3D vector with `numpy.float64` components."""

    __slots__ = ()

    component_type = np.float64

    @classmethod
    def from_vec3f(cls, vector: Vec3f) -> Vec3d:
        """Widen a single-precision vector. Always exact."""
        return cls.from_vector(vector)
