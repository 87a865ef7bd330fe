# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module provides the :class:`UnitQuaternion` value type, a quaternion constrained to unit length.
"""

from typing import Self

import numpy as np

from robomath._typing import ARRAY_LIKE, FLOAT_ARRAY, FLOAT_DTYPE
from robomath.quaternions.invariants import UNIT_NORM_CHECKER
from robomath.quaternions.quaternion import Quaternion
from robomath.quaternions.quaternion_base import QuaternionBase, QuaternionKind


class UnitQuaternion(QuaternionBase, kind=QuaternionKind.UNIT):
    r"""
    A quaternion :math:`q = w + xi + yj + zk` with :math:`w^2+x^2+y^2+z^2=1`.

    Unit quaternions represent orientations.  The class owns a private :class:`.Quaternion` and exposes only the
    operations that keep the unit length: the components are read-only, :meth:`conjugate` returns another unit
    quaternion, and there is no ``inverse`` since the conjugate already is the inverse of a unit quaternion.  When an
    unconstrained value is needed (for instance for an intermediate result) use :meth:`to_quaternion` and come back
    with :meth:`.Quaternion.to_unit_quaternion` or :meth:`from_quaternion`.

    Every way of making or assigning a unit quaternion goes through the same check, which raises an
    :class:`.InvariantViolationError` when the norm differs from 1 by more than the configured tolerance (``1e-6`` by
    default)::

        >>> from robomath.quaternions import UnitQuaternion
        >>> UnitQuaternion(1, 1, 0, 0)
        Traceback (most recent call last):
        ...
        robomath.quaternions.invariants.InvariantViolationError: Input quaternion has not unit length. ...

    The check only runs while :data:`.UNIT_NORM_CHECKER` is enabled, which by default is the case unless Python runs
    with ``-O``.  See :mod:`robomath.quaternions.invariants`.

    .. warning::
        The array returned by ``to_implementation()`` is the storage of this quaternion.  Writing to it bypasses the
        unit-norm check.  Ask for ``to_implementation(writeable=False)`` unless you really need to write.
    """

    def __init__(self, w: float = 1.0, x: float = 0.0, y: float = 0.0, z: float = 0.0,
                 dtype: FLOAT_DTYPE = np.float64):
        """
        With no arguments the identity quaternion is made.

        :param w: the scalar component
        :param x: the :math:`i` component
        :param y: the :math:`j` component
        :param z: the :math:`k` component
        :param dtype: the floating precision of the components
        :raises InvariantViolationError: if the components do not have unit length
        """

        self._quaternion: Quaternion = Quaternion(w, x, y, z, dtype=dtype)

        self._check()

    @classmethod
    def _checked(cls, quaternion: Quaternion) -> Self:
        # the single entry point used by every alternate constructor
        out = cls.__new__(cls)
        out._quaternion = quaternion
        out._check()

        return out

    def _check(self) -> None:
        if UNIT_NORM_CHECKER.enabled:
            UNIT_NORM_CHECKER.check(self.norm())

    @classmethod
    def from_implementation(cls, implementation: ARRAY_LIKE) -> Self:
        """
        Creates a unit quaternion from a copy of a backend array stored as ``[x, y, z, w]``.

        :param implementation: the length 4 array to copy
        :raises InvariantViolationError: if the array does not have unit length
        """

        return cls._checked(Quaternion.from_implementation(implementation))

    @classmethod
    def from_quaternion(cls, other: QuaternionBase, dtype: FLOAT_DTYPE | None = None) -> Self:
        """
        Creates a unit quaternion from a :class:`.Quaternion` or :class:`UnitQuaternion` of any precision.

        The components are cast to ``dtype`` first and the result is checked afterwards, also when ``other`` already
        is a unit quaternion.

        :param other: the quaternion to copy
        :param dtype: the precision of the new quaternion.  ``None`` keeps the precision of ``other``
        :raises InvariantViolationError: if the converted value does not have unit length
        """

        return cls._checked(Quaternion.from_quaternion(other, dtype))

    def to_implementation(self, writeable: bool = True) -> FLOAT_ARRAY:
        """
        Returns the backend array ``[x, y, z, w]`` holding the components.

        :param writeable: whether the returned array may be modified.  See the class warning.
        """

        return self._quaternion.to_implementation(writeable)

    def to_quaternion(self) -> Quaternion:
        """
        Returns an unconstrained copy of this unit quaternion.
        """

        return self._quaternion.copy()

    @property
    def w(self) -> np.floating:
        """
        The scalar component.
        """
        return self._quaternion.w

    @property
    def x(self) -> np.floating:
        """
        The :math:`i` component.
        """
        return self._quaternion.x

    @property
    def y(self) -> np.floating:
        """
        The :math:`j` component.
        """
        return self._quaternion.y

    @property
    def z(self) -> np.floating:
        """
        The :math:`k` component.
        """
        return self._quaternion.z

    def norm(self) -> np.floating:
        """
        Returns the Euclidean norm, which is close to (but not necessarily exactly) 1.
        """

        return self._quaternion.norm()

    def conjugate(self) -> Self:
        """
        Returns the conjugate, which for a unit quaternion is also the inverse.
        """

        return self._checked(self._quaternion.conjugate())

    def assign(self, other: QuaternionBase) -> Self:
        """
        Overwrites self with ``other`` cast to the precision of self.

        The candidate value is checked before self is modified, so a failed assignment leaves self unchanged.

        :param other: a :class:`.Quaternion` or :class:`UnitQuaternion` of any precision
        :raises InvariantViolationError: if the converted value does not have unit length
        :return: self
        """

        candidate = self._checked(Quaternion(dtype=self.dtype).assign(other))

        self._quaternion.assign(candidate._quaternion)

        return self

    def astype(self, dtype: FLOAT_DTYPE) -> 'UnitQuaternion':
        """
        Returns a copy converted to the floating precision ``dtype``, checked after the conversion.
        """

        return UnitQuaternion.from_quaternion(self, dtype)

    def copy(self) -> Self:
        """
        Returns an independent copy of self.
        """

        return self._checked(self._quaternion.copy())
