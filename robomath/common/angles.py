# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Angle wrapping routines

This module contains a floating point modulo that is robust to round off at the edges of its range, and the routines
built on it that wrap angles into a half open interval.  Everything here is vectorized: scalars give numpy scalars back
and arrays give arrays of the same shape back, in the floating precision of the input.
"""

import numpy as np

from robomath._typing import SCALAR_OR_ARRAY, F_SCALAR_OR_ARRAY


__all__ = ['mod', 'wrap_angle', 'wrap_pos_neg_pi', 'wrap_two_pi']


def _as_operand(value: SCALAR_OR_ARRAY) -> SCALAR_OR_ARRAY:
    return value if np.isscalar(value) else np.asanyarray(value)


def mod(x: SCALAR_OR_ARRAY, y: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    r"""
    Computes the floating point modulo of ``x`` by ``y``.

    The result lies in :math:`[0, y)` when :math:`y>0` and in :math:`(y, 0]` when :math:`y<0`.  A period of exactly
    zero does not wrap at all and gives ``x`` back.

    The raw modulo :math:`m = x - y\lfloor x/y\rfloor` can land on or fractionally past the open edge of the range
    because of round off.  This is corrected for:

    * a result reaching or passing ``y`` becomes ``0``
    * a result with the wrong sign is moved into range by adding ``y``, unless ``y + m == y`` in floating point, in
      which case it becomes ``0``

    For example::

        >>> from robomath.common import mod
        >>> mod(370.0, 360.0)
        np.float64(10.0)
        >>> mod(-1e-16, 360.0)
        np.float64(0.0)

    Integer inputs are computed in double precision.

    :param x: the dividend(s)
    :param y: the period(s)
    :return: ``x`` modulo ``y``
    """

    x_operand = _as_operand(x)
    y_operand = _as_operand(y)

    # python floats don't force a float32 input up to double precision
    dtype = np.result_type(x_operand, y_operand)
    if not np.issubdtype(dtype, np.floating):
        dtype = np.dtype(np.float64)

    x_array = np.asanyarray(x_operand, dtype=dtype)
    y_array = np.asanyarray(y_operand, dtype=dtype)

    zero = np.zeros((), dtype=dtype)

    # the zero period case is thrown away below, so don't warn about it
    with np.errstate(divide='ignore', invalid='ignore'):
        m = x_array - y_array * np.floor(x_array / y_array)

    shifted = np.where(y_array + m == y_array, zero, y_array + m)

    positive = np.where(m >= y_array, zero, np.where(m < 0, shifted, m))
    negative = np.where(m <= y_array, zero, np.where(m > 0, shifted, m))

    out = np.where(y_array == 0, x_array, np.where(y_array > 0, positive, negative)).astype(dtype, copy=False)

    if out.ndim == 0:
        return out[()]

    return out


def wrap_angle(angle: SCALAR_OR_ARRAY, lower: SCALAR_OR_ARRAY, upper: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    Wraps ``angle`` into the half open interval ``[lower, upper)``.

    :param angle: the angle(s) to wrap
    :param lower: the included lower bound
    :param upper: the excluded upper bound
    :return: the wrapped angle(s)
    """

    return mod(_as_operand(angle) - _as_operand(lower), _as_operand(upper) - _as_operand(lower)) + lower


def wrap_pos_neg_pi(angle: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    Wraps ``angle`` (in radians) into ``[-pi, pi)``.

        >>> import numpy as np
        >>> from robomath.common import wrap_pos_neg_pi
        >>> wrap_pos_neg_pi(3.5*np.pi)/np.pi
        np.float64(-0.5)

    :param angle: the angle(s) to wrap
    :return: the wrapped angle(s)
    """

    return mod(np.add(angle, np.pi), 2 * np.pi) - np.pi


def wrap_two_pi(angle: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    Wraps ``angle`` (in radians) into ``[0, 2*pi)``.

    :param angle: the angle(s) to wrap
    :return: the wrapped angle(s)
    """

    return mod(angle, 2 * np.pi)
