# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module provides the unconstrained :class:`Quaternion` value type.
"""

from typing import Self, TYPE_CHECKING

import numpy as np

from robomath._typing import ARRAY_LIKE, FLOAT_ARRAY, FLOAT_DTYPE
from robomath.quaternions.core import (quaternion_conjugate, quaternion_inverse, quaternion_norm,
                                       quaternion_normalize)
from robomath.quaternions.core._helpers import _check_quaternion_array_and_shape, _floating_dtype
from robomath.quaternions.invariants import DegenerateQuaternionError
from robomath.quaternions.quaternion_base import QuaternionBase, QuaternionKind, cast_implementation

if TYPE_CHECKING:
    from robomath.quaternions.unit_quaternion import UnitQuaternion


class Quaternion(QuaternionBase, kind=QuaternionKind.GENERIC):
    r"""
    A generic quaternion :math:`q = w + xi + yj + zk` following the Hamiltonian convention :math:`i^2=j^2=k^2=ijk=-1`.

    No constraint is placed on the norm and every component can be set independently::

        >>> from robomath.quaternions import Quaternion
        >>> q = Quaternion(1, 2, 3, 4)
        >>> q.w = 0
        >>> q.conjugate()
        Quaternion(w=0.0, x=-2.0, y=-3.0, z=-4.0, dtype=float64)

    The components are stored in a numpy array in the scalar-last order ``[x, y, z, w]`` which is available through
    :meth:`to_implementation`.  The precision of the components is chosen at construction with the ``dtype`` argument
    (double precision by default) and can only be changed through an explicit conversion (:meth:`astype`,
    :meth:`from_quaternion` or :meth:`assign`).

    Multiplying two quaternions with ``*`` performs the Hamilton product and ``==`` compares the components exactly.
    Both operators also accept :class:`.UnitQuaternion` operands.
    """

    def __init__(self, w: float = 0.0, x: float = 0.0, y: float = 0.0, z: float = 0.0,
                 dtype: FLOAT_DTYPE = np.float64):
        """
        The components are stored as given, without normalization.  With no arguments the all zero quaternion is made.

        :param w: the scalar component
        :param x: the :math:`i` component
        :param y: the :math:`j` component
        :param z: the :math:`k` component
        :param dtype: the floating precision of the components
        """

        self._implementation: FLOAT_ARRAY = np.array([x, y, z, w], dtype=_floating_dtype(dtype))

    @classmethod
    def from_implementation(cls, implementation: ARRAY_LIKE) -> Self:
        """
        Creates a quaternion from a copy of a backend array stored as ``[x, y, z, w]``.

        Floating point arrays keep their precision; anything else becomes double precision.

        :param implementation: the length 4 array to copy
        :raises ValueError: if the input is not a single quaternion
        """

        implementation = _check_quaternion_array_and_shape(implementation)

        if implementation.shape != (4,):
            raise ValueError('A single quaternion of shape (4,) is expected')

        out = cls.__new__(cls)
        out._implementation = np.array(implementation)

        return out

    @classmethod
    def from_quaternion(cls, other: QuaternionBase, dtype: FLOAT_DTYPE | None = None) -> Self:
        """
        Creates a quaternion from a :class:`Quaternion` or :class:`.UnitQuaternion` of any precision.

        Each component is converted with a numeric cast.  Narrowing to a lower precision is accepted silently.

        :param other: the quaternion to copy
        :param dtype: the precision of the new quaternion.  ``None`` keeps the precision of ``other``
        """

        return cls.from_implementation(cast_implementation(other, dtype))

    def to_implementation(self, writeable: bool = True) -> FLOAT_ARRAY:
        """
        Returns the backend array ``[x, y, z, w]`` holding the components.

        When ``writeable`` is true the array itself is returned and changing it changes this quaternion.  Otherwise a
        read-only view is returned.

        :param writeable: whether the returned array may be modified
        """

        if writeable:
            return self._implementation

        view = self._implementation.view()
        view.flags.writeable = False

        return view

    @property
    def w(self) -> np.floating:
        """
        The scalar component.
        """
        return self._implementation[3]

    @w.setter
    def w(self, value: float):
        self._implementation[3] = value

    @property
    def x(self) -> np.floating:
        """
        The :math:`i` component.
        """
        return self._implementation[0]

    @x.setter
    def x(self, value: float):
        self._implementation[0] = value

    @property
    def y(self) -> np.floating:
        """
        The :math:`j` component.
        """
        return self._implementation[1]

    @y.setter
    def y(self, value: float):
        self._implementation[1] = value

    @property
    def z(self) -> np.floating:
        """
        The :math:`k` component.
        """
        return self._implementation[2]

    @z.setter
    def z(self, value: float):
        self._implementation[2] = value

    def norm(self) -> np.floating:
        r"""
        Returns the Euclidean norm :math:`\sqrt{w^2+x^2+y^2+z^2}`.
        """

        return quaternion_norm(self._implementation)

    def conjugate(self) -> Self:
        """
        Returns a new quaternion with the vector part negated.
        """

        return self.from_implementation(quaternion_conjugate(self._implementation))

    def inverse(self) -> Self:
        """
        Returns the multiplicative inverse, the conjugate divided by the squared norm.

        The inverse is not defined for a quaternion of zero norm.  No check is made; numpy gives back non-finite
        components with a ``RuntimeWarning`` in that case.
        """

        return self.from_implementation(quaternion_inverse(self._implementation))

    def normalize(self) -> Self:
        """
        Scales this quaternion in place to unit norm.

        :return: self, to allow chaining
        """

        self._implementation[:] = quaternion_normalize(self._implementation)

        return self

    def normalized(self) -> Self:
        """
        Returns a new quaternion with unit norm, leaving self unchanged.
        """

        return self.from_implementation(quaternion_normalize(self._implementation))

    def to_unit_quaternion(self) -> 'UnitQuaternion':
        """
        Returns the normalized value of this quaternion as a :class:`.UnitQuaternion`.

        :raises DegenerateQuaternionError: if the norm is zero or not finite, so no direction can be recovered
        """

        from robomath.quaternions.unit_quaternion import UnitQuaternion

        norm = self.norm()

        if not np.isfinite(norm) or norm == 0:
            raise DegenerateQuaternionError(f'Cannot make a unit quaternion from a quaternion with norm {norm!r}')

        return UnitQuaternion.from_implementation(quaternion_normalize(self._implementation))

    def assign(self, other: QuaternionBase) -> Self:
        """
        Overwrites the components of self with those of ``other``, cast to the precision of self.

        :param other: a :class:`Quaternion` or :class:`.UnitQuaternion` of any precision
        :return: self
        """

        self._implementation[:] = cast_implementation(other, self.dtype)

        return self

    def astype(self, dtype: FLOAT_DTYPE) -> 'Quaternion':
        """
        Returns a copy converted to the floating precision ``dtype``.
        """

        return Quaternion.from_quaternion(self, dtype)

    def copy(self) -> Self:
        """
        Returns an independent copy of self.
        """

        return self.from_implementation(self._implementation)
