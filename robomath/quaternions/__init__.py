r"""
This package provides quaternion value types for representing orientations and rotations.

Two types are provided:

* :class:`Quaternion`, a generic quaternion :math:`q = w + xi + yj + zk` (Hamiltonian convention,
  :math:`i^2=j^2=k^2=ijk=-1`) with no constraint on its norm.  The default value is all zeros.
* :class:`UnitQuaternion`, a quaternion constrained to unit length, as used for orientations.  The default value is
  the identity.  The constraint is checked at every construction and assignment, see :mod:`.invariants`.

The two types can be multiplied (Hamilton product) and compared with each other in any combination.  The product of
two unit quaternions is a unit quaternion; every other product is a generic quaternion.  Conversions between the two
types and between single and double precision are always explicit::

    >>> import numpy as np
    >>> from robomath.quaternions import Quaternion, UnitQuaternion
    >>> q = Quaternion(1, 2, 3, 4)
    >>> u = q.to_unit_quaternion()
    >>> u32 = u.astype(np.float32)
    >>> back = UnitQuaternion.from_quaternion(u32, np.float64)

The numpy routines backing the types are available in :mod:`robomath.quaternions.core`.
"""

import robomath.quaternions.core
import robomath.quaternions.invariants
import robomath.quaternions.quaternion_base
import robomath.quaternions.quaternion
import robomath.quaternions.unit_quaternion

from robomath.quaternions.core import *
from robomath.quaternions.invariants import (InvariantViolationError, DegenerateQuaternionError, UnitNormCheckOptions,
                                             UnitNormChecker, UNIT_NORM_CHECKER, unit_norm_checking)
from robomath.quaternions.quaternion_base import QuaternionBase, QuaternionKind
from robomath.quaternions.quaternion import Quaternion
from robomath.quaternions.unit_quaternion import UnitQuaternion

__all__ = ["quaternion_multiplication", "quaternion_conjugate", "quaternion_inverse", "quaternion_norm",
           "quaternion_normalize",
           "InvariantViolationError", "DegenerateQuaternionError", "UnitNormCheckOptions", "UnitNormChecker",
           "UNIT_NORM_CHECKER", "unit_norm_checking",
           "QuaternionBase", "QuaternionKind", "Quaternion", "UnitQuaternion"]
