"""Single-precision 3D vector."""
from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from py_vec3.vector import Vector3

if TYPE_CHECKING:
    from py_vec3.vec3d import Vec3d

__all__ = ('Vec3f',)


class Vec3f(Vector3[np.float32]):
    """Immutable 3D vector with `numpy.float32` components.

    Examples:
        ```python
        v = Vec3f(1, 1, 1)
        v + v         # Vec3f(x=2.0, y=2.0, z=2.0)
        v * 3         # Vec3f(x=3.0, y=3.0, z=3.0)
        v * v         # 3.0, dot product
        str(v)        # '<1, 1, 1>'
        ```
    """

    __slots__ = ()

    component_type = np.float32

    @classmethod
    def from_vec3d(cls, vector: Vec3d) -> Vec3f:
        """Narrow a double-precision vector.

        Each component is cast with native float64 -> float32 rounding. Never
        raises: values outside the float32 range become +/-inf.
        """
        return cls.from_vector(vector)
