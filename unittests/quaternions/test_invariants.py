import threading

from unittest import TestCase

import numpy as np

from robomath import quaternions as qt
from robomath.quaternions import invariants


class TestUnitNormChecker(TestCase):

    def test_defaults(self):

        checker = qt.UnitNormChecker()

        self.assertEqual(checker.enabled, __debug__)
        self.assertEqual(checker.tolerance, 1e-6)

    def test_options(self):

        checker = qt.UnitNormChecker(qt.UnitNormCheckOptions(enabled=True, tolerance=1e-3))

        self.assertTrue(checker.enabled)
        self.assertEqual(checker.tolerance, 1e-3)

        checker.check(1.0005)

        with self.assertRaises(qt.InvariantViolationError):
            checker.check(1.002)

        checker.tolerance = 1e-2
        checker.check(1.002)

        checker.reset_settings()

        self.assertEqual(checker.tolerance, 1e-3)

    def test_is_unit(self):

        checker = qt.UnitNormChecker(qt.UnitNormCheckOptions(enabled=False))

        self.assertTrue(checker.is_unit(1.0))
        self.assertTrue(checker.is_unit(np.float32(1 - 1e-7)))
        self.assertFalse(checker.is_unit(np.sqrt(2)))
        self.assertFalse(checker.is_unit(np.nan))
        self.assertFalse(checker.is_unit(np.inf))

    def test_disabled(self):

        checker = qt.UnitNormChecker(qt.UnitNormCheckOptions(enabled=False))

        checker.check(2.0)
        checker.check(np.nan)

    def test_message(self):

        checker = qt.UnitNormChecker(qt.UnitNormCheckOptions(enabled=True))

        with self.assertRaises(AssertionError) as context:
            checker.check(np.sqrt(2))

        self.assertTrue(str(context.exception).startswith(invariants.UNIT_NORM_MESSAGE))


class TestUnitNormChecking(TestCase):

    def test_disable_checks(self):

        with qt.unit_norm_checking(enabled=False) as checker:

            self.assertIs(checker, qt.UNIT_NORM_CHECKER)

            u = qt.UnitQuaternion(1, 1, 0, 0)

            self.assertAlmostEqual(u.norm(), np.sqrt(2))

            u.assign(qt.Quaternion(3, 0, 0, 0))
            u = qt.Quaternion(2, 0, 0, 0).to_unit_quaternion()

    def test_enable_checks(self):

        with qt.unit_norm_checking(enabled=True):

            with self.assertRaises(qt.InvariantViolationError):
                qt.UnitQuaternion(1, 1, 0, 0)

    def test_restore(self):

        enabled = qt.UNIT_NORM_CHECKER.enabled
        tolerance = qt.UNIT_NORM_CHECKER.tolerance

        with qt.unit_norm_checking(enabled=not enabled, tolerance=0.5):

            self.assertEqual(qt.UNIT_NORM_CHECKER.enabled, not enabled)
            self.assertEqual(qt.UNIT_NORM_CHECKER.tolerance, 0.5)

            with qt.unit_norm_checking(tolerance=0.25):

                self.assertEqual(qt.UNIT_NORM_CHECKER.enabled, not enabled)
                self.assertEqual(qt.UNIT_NORM_CHECKER.tolerance, 0.25)

            self.assertEqual(qt.UNIT_NORM_CHECKER.tolerance, 0.5)

        self.assertEqual(qt.UNIT_NORM_CHECKER.enabled, enabled)
        self.assertEqual(qt.UNIT_NORM_CHECKER.tolerance, tolerance)

    def test_restore_on_error(self):

        enabled = qt.UNIT_NORM_CHECKER.enabled

        with self.assertRaises(RuntimeError):
            with qt.unit_norm_checking(enabled=not enabled):
                raise RuntimeError('boom')

        self.assertEqual(qt.UNIT_NORM_CHECKER.enabled, enabled)

    def test_loose_tolerance(self):

        with qt.unit_norm_checking(enabled=True, tolerance=0.5):

            u = qt.UnitQuaternion(1.2, 0, 0, 0)

            self.assertAlmostEqual(u.w, 1.2)

    def test_logging(self):

        with self.assertLogs('robomath.quaternions.invariants', level='DEBUG') as logs:
            with qt.unit_norm_checking(enabled=True):
                pass

        self.assertEqual(len(logs.output), 2)

    def test_shared_between_threads(self):

        seen = []

        def worker():
            seen.append(qt.UNIT_NORM_CHECKER.enabled)
            seen.append(qt.UnitQuaternion(1, 1, 0, 0).norm())

        with qt.unit_norm_checking(enabled=False):
            thread = threading.Thread(target=worker)
            thread.start()
            thread.join()

        self.assertEqual(len(seen), 2)
        self.assertFalse(seen[0])
        self.assertAlmostEqual(seen[1], np.sqrt(2))
