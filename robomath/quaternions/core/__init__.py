"""
This module contains the fundamental numpy routines that back the quaternion value types.

Quaternions are stored as arrays whose first axis has length 4 in the scalar-last order ``[x, y, z, w]``.  Every
routine is vectorized over additional axes and preserves the floating precision of its inputs.  Nothing here depends
on the :class:`.Quaternion` or :class:`.UnitQuaternion` classes, so they can be used as building blocks without
circular imports.
"""

import robomath.quaternions.core.quaternion_math

from robomath.quaternions.core.quaternion_math import (quaternion_multiplication, quaternion_conjugate,
                                                       quaternion_inverse, quaternion_norm, quaternion_normalize)

__all__ = ["quaternion_multiplication", "quaternion_conjugate", "quaternion_inverse", "quaternion_norm",
           "quaternion_normalize"]
