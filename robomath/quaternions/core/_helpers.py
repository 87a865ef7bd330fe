import copy

import numpy as np

from robomath._typing import ARRAY_LIKE, FLOAT_ARRAY, FLOAT_DTYPE


def _floating_dtype(dtype: FLOAT_DTYPE) -> np.dtype:
    """
    Returns ``dtype`` as a numpy dtype, making sure it is a floating point type.

    :raises TypeError: if the dtype is not a floating point type
    """

    out = np.dtype(dtype)

    if not np.issubdtype(out, np.floating):
        raise TypeError(f'A floating point scalar type is expected, not {out}')

    return out


def _promote_to_floating(input: ARRAY_LIKE) -> FLOAT_ARRAY:
    # integers and booleans become doubles, floats keep their precision
    array = np.asanyarray(input)

    if not np.issubdtype(array.dtype, np.floating):
        array = array.astype(np.float64)

    return array


def _check_array_and_shape(input: ARRAY_LIKE,
                           return_copy: bool = False,
                           first_axis_length: int | None = None) -> FLOAT_ARRAY:
    in_shape = np.shape(input)

    if not in_shape:
        raise ValueError('The input must be shaped')

    if first_axis_length is not None and in_shape[0] != first_axis_length:
        raise ValueError(f'The length of the first axis must be {first_axis_length}')

    if return_copy:
        input = copy.deepcopy(input)

    return _promote_to_floating(input)


def _check_quaternion_array_and_shape(quaternion: ARRAY_LIKE, return_copy: bool = False) -> FLOAT_ARRAY:
    return _check_array_and_shape(quaternion, return_copy, first_axis_length=4)
