# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
robomath: quaternion value types and angle utilities for orientation math.

* :mod:`robomath.quaternions` provides :class:`.Quaternion` and :class:`.UnitQuaternion`
* :mod:`robomath.common` provides the angle wrapping routines
"""

from robomath.common import mod, wrap_angle, wrap_pos_neg_pi, wrap_two_pi
from robomath.quaternions import Quaternion, UnitQuaternion, InvariantViolationError, DegenerateQuaternionError

__all__ = ['mod', 'wrap_angle', 'wrap_pos_neg_pi', 'wrap_two_pi',
           'Quaternion', 'UnitQuaternion', 'InvariantViolationError', 'DegenerateQuaternionError']
