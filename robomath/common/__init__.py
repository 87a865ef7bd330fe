"""
This package contains small numeric utilities shared by the orientation representations, such as wrapping angles into
a fixed range.  None of it depends on the quaternion types.
"""

import robomath.common.angles

from robomath.common.angles import mod, wrap_angle, wrap_pos_neg_pi, wrap_two_pi

__all__ = ['mod', 'wrap_angle', 'wrap_pos_neg_pi', 'wrap_two_pi']
