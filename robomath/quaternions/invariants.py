# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module provides the gate that enforces the unit-norm invariant of :class:`.UnitQuaternion`.

Every path that creates or assigns a unit quaternion ends in :meth:`UnitNormChecker.check` on the process-wide
:data:`UNIT_NORM_CHECKER`.  The check is meant for development: by default it is enabled exactly when Python's
``__debug__`` is true, so running under ``python -O`` turns it into a no-op and the caller is trusted.  A failed
check raises an :class:`InvariantViolationError`, which derives from :class:`AssertionError` because a violation is
a programming error and not a condition to recover from.

The checker is configured the usual way, with a :class:`UnitNormCheckOptions` dataclass.  Its configuration is
global to the process and is seen by every thread.  To change the configuration temporarily, for instance in a test,
use the :func:`unit_norm_checking` context manager::

    >>> from robomath.quaternions import UnitQuaternion, unit_norm_checking
    >>> with unit_norm_checking(enabled=False):
    ...     q = UnitQuaternion(1, 1, 0, 0)  # accepted without a check
"""

import logging

from contextlib import contextmanager

from dataclasses import dataclass

from typing import Iterator

import numpy as np

from robomath.utilities.options import UserOptions
from robomath.utilities.mixin_classes import UserOptionConfigured


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting configuration changes of the invariant checks.
"""

UNIT_NORM_MESSAGE: str = "Input quaternion has not unit length."
"""
The message carried by every unit-norm violation.
"""


class InvariantViolationError(AssertionError):
    """
    Raised when a quaternion that must have unit length does not.
    """


class DegenerateQuaternionError(ValueError):
    """
    Raised when a quaternion of zero (or non-finite) length is turned into a unit quaternion.
    """


@dataclass
class UnitNormCheckOptions(UserOptions):
    """
    The options that configure the :class:`UnitNormChecker`.
    """

    enabled: bool = __debug__
    """
    Whether the unit-norm check is performed at all.

    Defaults to ``__debug__`` so that optimized runs (``python -O``) skip the check.
    """

    tolerance: float = 1e-6
    """
    The largest accepted absolute difference between the norm and 1.
    """


class UnitNormChecker(UserOptionConfigured[UnitNormCheckOptions], UnitNormCheckOptions):
    """
    Checks that the norm of a quaternion lies within :attr:`tolerance` of 1.

    Non-finite norms are always rejected when the check is enabled.
    """

    def __init__(self, options: UnitNormCheckOptions | None = None):
        """
        :param options: The options to configure the checker with.  If ``None`` the defaults are used.
        """

        super().__init__(UnitNormCheckOptions, options=options)

    def is_unit(self, norm: float) -> bool:
        """
        Returns whether ``norm`` is within :attr:`tolerance` of 1, ignoring :attr:`enabled`.

        :param norm: the norm to test
        """

        return bool(np.isfinite(norm) and abs(float(norm) - 1) <= self.tolerance)

    def check(self, norm: float) -> None:
        """
        Raises an :class:`InvariantViolationError` if the check is enabled and ``norm`` is not within tolerance of 1.

        :param norm: the norm of the quaternion being checked
        :raises InvariantViolationError: when the norm deviates from 1 by more than the tolerance
        """

        if self.enabled and not self.is_unit(norm):
            raise InvariantViolationError(f"{UNIT_NORM_MESSAGE} (norm = {norm!r}, tolerance = {self.tolerance!r})")


UNIT_NORM_CHECKER: UnitNormChecker = UnitNormChecker()
"""
The checker used by every :class:`.UnitQuaternion` construction and assignment.
"""


@contextmanager
def unit_norm_checking(enabled: bool | None = None, tolerance: float | None = None) -> Iterator[UnitNormChecker]:
    """
    Temporarily changes the configuration of :data:`UNIT_NORM_CHECKER`.

    Settings left as ``None`` are not changed.  The previous settings are restored on exit, even when the block
    raises.

    .. warning::
        :data:`UNIT_NORM_CHECKER` is shared by the whole process and is not protected by a lock.  The settings made
        here apply to every thread while the block runs, not only to the thread that entered it, and two threads
        entering overlapping blocks can restore each other's settings in the wrong order.  Only change the checker
        from one thread at a time.

    :param enabled: whether the check should be performed inside the block
    :param tolerance: the tolerance to use inside the block
    :return: the configured checker
    """

    previous = UnitNormCheckOptions(enabled=UNIT_NORM_CHECKER.enabled, tolerance=UNIT_NORM_CHECKER.tolerance)

    if enabled is not None:
        UNIT_NORM_CHECKER.enabled = enabled
    if tolerance is not None:
        UNIT_NORM_CHECKER.tolerance = tolerance

    _LOGGER.debug("unit norm checking set to enabled=%s, tolerance=%g",
                  UNIT_NORM_CHECKER.enabled, UNIT_NORM_CHECKER.tolerance)

    try:
        yield UNIT_NORM_CHECKER
    finally:
        previous.apply_options(UNIT_NORM_CHECKER)
        _LOGGER.debug("unit norm checking restored to enabled=%s, tolerance=%g",
                      previous.enabled, previous.tolerance)
