# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module defines the abstract base shared by :class:`.Quaternion` and :class:`.UnitQuaternion`.

The base implements quaternion multiplication (``*``) and equality (``==``) once for every combination of the two
concrete types.  Each concrete class declares its :class:`QuaternionKind` when it is defined::

    class Quaternion(QuaternionBase, kind=QuaternionKind.GENERIC):
        ...

and the operators look the pair of operand kinds up in a small dispatch table to decide what type the result has.
"""

import logging

from abc import ABCMeta, abstractmethod

from enum import Enum

from typing import Any, ClassVar

import numpy as np

from robomath._typing import FLOAT_ARRAY, FLOAT_DTYPE
from robomath.quaternions.core import quaternion_multiplication
from robomath.quaternions.core._helpers import _floating_dtype


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting precision changes between quaternions.
"""


class QuaternionKind(Enum):
    """
    The closed set of quaternion flavours.
    """

    GENERIC = "generic"
    """
    An unconstrained quaternion.
    """

    UNIT = "unit"
    """
    A quaternion constrained to unit length.
    """


_KIND_TYPES: dict[QuaternionKind, type['QuaternionBase']] = {}
"""
The concrete class registered for each kind.
"""

_MULTIPLICATION_KINDS: dict[tuple[QuaternionKind, QuaternionKind], QuaternionKind] = {
    (QuaternionKind.GENERIC, QuaternionKind.GENERIC): QuaternionKind.GENERIC,
    (QuaternionKind.GENERIC, QuaternionKind.UNIT): QuaternionKind.GENERIC,
    (QuaternionKind.UNIT, QuaternionKind.GENERIC): QuaternionKind.GENERIC,
    (QuaternionKind.UNIT, QuaternionKind.UNIT): QuaternionKind.UNIT,
}
"""
The kind of the product for each (left, right) pair of operand kinds.
"""


class QuaternionBase(metaclass=ABCMeta):
    """
    Abstract base of the quaternion value types.

    Subclasses must provide the backend view (:meth:`to_implementation`) and an alternate constructor from a backend
    array (:meth:`from_implementation`).  In exchange they get Hamilton multiplication and exact component-wise
    equality with any other registered quaternion type.
    """

    kind: ClassVar[QuaternionKind]
    """
    The kind of this quaternion type.
    """

    __hash__ = None  # mutable value type

    def __init_subclass__(cls, kind: QuaternionKind | None = None, **kwargs):
        super().__init_subclass__(**kwargs)

        if kind is not None:
            cls.kind = kind
            _KIND_TYPES[kind] = cls

    @classmethod
    @abstractmethod
    def from_implementation(cls, implementation: FLOAT_ARRAY) -> 'QuaternionBase':
        """
        Creates a new instance from a backend array stored as ``[x, y, z, w]``.
        """

    @abstractmethod
    def to_implementation(self, writeable: bool = True) -> FLOAT_ARRAY:
        """
        Returns the backend array stored as ``[x, y, z, w]``.
        """

    @property
    def dtype(self) -> np.dtype:
        """
        The floating point precision of the components.
        """

        return self.to_implementation(writeable=False).dtype

    def __mul__(self, other: Any) -> 'QuaternionBase':

        if not isinstance(other, QuaternionBase):
            return NotImplemented

        result_type = _KIND_TYPES[_MULTIPLICATION_KINDS[self.kind, other.kind]]

        return result_type.from_implementation(quaternion_multiplication(self.to_implementation(writeable=False),
                                                                         other.to_implementation(writeable=False)))

    def __eq__(self, other: Any) -> bool:

        if not isinstance(other, QuaternionBase):
            return NotImplemented

        return bool((self.to_implementation(writeable=False) == other.to_implementation(writeable=False)).all())

    def isclose(self, other: 'QuaternionBase', tolerance: float = 1e-6) -> bool:
        """
        Returns whether every component of ``other`` is within ``tolerance`` of the matching component of self.

        Unlike ``==`` this does not require exact equality.  ``q`` and ``-q`` are not considered close.

        :param other: The quaternion to compare with
        :param tolerance: The absolute tolerance on each component
        """

        return bool(np.allclose(self.to_implementation(writeable=False), other.to_implementation(writeable=False),
                                rtol=0, atol=tolerance))

    def __repr__(self) -> str:
        return '{0}(w={1!r}, x={2!r}, y={3!r}, z={4!r}, dtype={5})'.format(type(self).__name__,
                                                                         *self._components(), self.dtype.name)

    def __str__(self) -> str:
        return '{0} + {1}i + {2}j + {3}k'.format(*self._components())

    def _components(self) -> tuple[float, float, float, float]:
        x, y, z, w = self.to_implementation(writeable=False).tolist()
        return w, x, y, z


def cast_implementation(source: QuaternionBase, dtype: FLOAT_DTYPE | None = None) -> FLOAT_ARRAY:
    """
    Returns a copy of the backend array of ``source`` converted to ``dtype``.

    The conversion is a plain numeric cast.  Narrowing (for instance double to single precision) loses precision
    silently; no rounding mode, range check or clamping is applied.

    :param source: The quaternion to copy the components from
    :param dtype: The floating precision of the copy.  ``None`` keeps the precision of ``source``
    :return: the converted copy
    """

    implementation = source.to_implementation(writeable=False)

    if dtype is None:
        return implementation.copy()

    target = _floating_dtype(dtype)

    if target.itemsize < implementation.dtype.itemsize:
        _LOGGER.debug("narrowing %s from %s to %s", type(source).__name__, implementation.dtype.name, target.name)

    return implementation.astype(target)
