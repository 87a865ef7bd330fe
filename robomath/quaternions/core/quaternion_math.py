import numpy as np

from robomath._typing import ARRAY_LIKE, FLOAT_ARRAY, F_SCALAR_OR_ARRAY

from robomath.quaternions.core._helpers import _check_quaternion_array_and_shape

__all__ = ["quaternion_multiplication", "quaternion_conjugate", "quaternion_inverse", "quaternion_norm",
           "quaternion_normalize"]


def quaternion_norm(quaternion: ARRAY_LIKE) -> F_SCALAR_OR_ARRAY:
    r"""
    Computes the Euclidean norm of the quaternion(s)

    .. math::
        \left\|\mathbf{q}\right\| = \sqrt{q_x^2+q_y^2+q_z^2+q_s^2}

    The quaternions should be stored down the first axis.  A 1D input gives a scalar back while a 4xn input gives n
    norms back.

    :param quaternion: the quaternion(s) to compute the norm of
    :return: the norm(s) in the precision of the input
    """

    work_quaternion = _check_quaternion_array_and_shape(quaternion)

    return np.linalg.norm(work_quaternion, axis=0)


def quaternion_normalize(quaternion: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    Normalizes the quaternion(s) so that the length is 1.

    The sign of the quaternion is left alone.  Normalizing a quaternion of zero length gives NaN components; it is up
    to the caller to avoid that.

    :param quaternion: the quaternion(s) to normalize

    :returns: The normalized quaternions as a new array
    """

    work_quaternion = _check_quaternion_array_and_shape(quaternion)

    return work_quaternion / np.linalg.norm(work_quaternion, axis=0, keepdims=True)


def quaternion_conjugate(quaternion: ARRAY_LIKE) -> FLOAT_ARRAY:
    r"""
    This function provides the conjugate of a quaternion stored as ``[x, y, z, w]``.

    The conjugate negates the vector portion of the quaternion and leaves the scalar portion unchanged:

    .. math::
        \mathbf{q}^*=\left[\begin{array}{c}-\mathbf{q}_v\\ q_s\end{array}\right]

    For a unit quaternion the conjugate is also the inverse.

    This function is vectorized, meaning that you can specify multiple quaternions to be conjugated by
    specifying each quaternion as a column.

    :param quaternion: The quaternion(s) to be conjugated
    :return: a numpy array containing the conjugate quaternion(s)
    """

    # ensure the value is an array and break mutability
    quaternion = _check_quaternion_array_and_shape(quaternion, return_copy=True)

    # negate the vector portion
    quaternion[:3] *= -1

    return quaternion


def quaternion_inverse(quaternion: ARRAY_LIKE) -> FLOAT_ARRAY:
    r"""
    This function provides the multiplicative inverse of a general (not necessarily unit) quaternion.

    The inverse is defined such that :math:`\mathbf{q}\otimes\mathbf{q}^{-1}=\mathbf{q}_I` where
    :math:`\mathbf{q}_I` is the identity quaternion.  Mathematically this is

    .. math::
        \mathbf{q}^{-1}=\frac{\mathbf{q}^*}{\left\|\mathbf{q}\right\|^2}

    Nothing protects against quaternions with a norm near zero.

    :param quaternion: The quaternion(s) to be inverted
    :return: a numpy array representing the inverse quaternion(s)
    """

    conjugate = quaternion_conjugate(quaternion)

    return conjugate / (conjugate * conjugate).sum(axis=0, keepdims=True)


def quaternion_multiplication(quaternion_1_in: ARRAY_LIKE,
                              quaternion_2_in: ARRAY_LIKE) -> FLOAT_ARRAY:
    r"""
    This function performs the hamiltonian quaternion multiplication operation.

    The quaternions are stored as ``[x, y, z, w]`` and the Hamiltonian convention
    :math:`i^2=j^2=k^2=ijk=-1` is used.  Mathematically this is given by:

    .. math::
        \mathbf{q}_1\otimes\mathbf{q}_2=\left[\begin{array}{c}q_{s1}\mathbf{q}_{v2} + q_{s2}\mathbf{q}_{v1} +
        \mathbf{q}_{v1}\times\mathbf{q}_{v2}\\
        q_{s1}q_{s2}-\mathbf{q}_{v1}^T\mathbf{q}_{v2}\end{array}\right]

    This function is vectorized, therefore you can input multiple quaternions as a 4xn array where each column is an
    independent quaternion.  The output precision follows numpy's promotion rules for the two inputs.

    :param quaternion_1_in: The first quaternion to multiply
    :param quaternion_2_in: The second quaternion to multiply
    :return: The hamiltonian product of quaternion_1 and quaternion_2
    """

    quaternion_1 = _check_quaternion_array_and_shape(quaternion_1_in)
    quaternion_2 = _check_quaternion_array_and_shape(quaternion_2_in)

    qs1 = quaternion_1[-1]
    qv1 = quaternion_1[0:3]

    qs2 = quaternion_2[-1]
    qv2 = quaternion_2[0:3]

    qout = np.concatenate([qs1 * qv2 + qs2 * qv1 + np.cross(qv1, qv2, axis=0),
                           [qs1 * qs2 - (qv1 * qv2).sum(axis=0)]], axis=0)

    return qout
