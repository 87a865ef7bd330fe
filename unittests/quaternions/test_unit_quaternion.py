from unittest import TestCase

import numpy as np

from robomath import quaternions as qt


class TestUnitQuaternion(TestCase):

    def setUp(self):

        self._checking = qt.unit_norm_checking(enabled=True, tolerance=1e-6)
        self._checking.__enter__()

    def tearDown(self):

        self._checking.__exit__(None, None, None)

    def check_quaternion(self, quaternion, w, x, y, z):

        self.assertAlmostEqual(quaternion.w, w)
        self.assertAlmostEqual(quaternion.x, x)
        self.assertAlmostEqual(quaternion.y, y)
        self.assertAlmostEqual(quaternion.z, z)

    def test_init(self):

        u = qt.UnitQuaternion()

        self.check_quaternion(u, 1, 0, 0, 0)
        self.assertEqual(u.dtype, np.float64)

        half = np.sqrt(2) / 2
        u = qt.UnitQuaternion(half, 0, half, 0)

        self.check_quaternion(u, half, 0, half, 0)

        u = qt.UnitQuaternion(0.5, 0.5, 0.5, 0.5, dtype=np.float32)

        self.assertEqual(u.dtype, np.float32)

    def test_init_not_unit(self):

        with self.assertRaises(qt.InvariantViolationError) as context:
            qt.UnitQuaternion(1, 1, 0, 0)

        self.assertIn("Input quaternion has not unit length.", str(context.exception))

        # the error is a failed assertion
        with self.assertRaises(AssertionError):
            qt.UnitQuaternion(0, 0, 0, 0)

        with self.assertRaises(qt.InvariantViolationError):
            qt.UnitQuaternion(np.nan, 0, 0, 0)

    def test_tolerance(self):

        qt.UnitQuaternion(1 + 5e-7, 0, 0, 0)

        with self.assertRaises(qt.InvariantViolationError):
            qt.UnitQuaternion(1 + 5e-6, 0, 0, 0)

    def test_from_implementation(self):

        u = qt.UnitQuaternion.from_implementation([0, 0, 0, 1])

        self.check_quaternion(u, 1, 0, 0, 0)

        with self.assertRaises(qt.InvariantViolationError):
            qt.UnitQuaternion.from_implementation([0, 0, 1, 1])

    def test_from_quaternion(self):

        u = qt.UnitQuaternion.from_quaternion(qt.Quaternion(0, 0.6, 0.8, 0))

        self.assertIsInstance(u, qt.UnitQuaternion)
        self.check_quaternion(u, 0, 0.6, 0.8, 0)

        with self.assertRaises(qt.InvariantViolationError):
            qt.UnitQuaternion.from_quaternion(qt.Quaternion(1, 2, 3, 4))

    def test_components_read_only(self):

        u = qt.UnitQuaternion()

        with self.assertRaises(AttributeError):
            u.w = 2

        with self.assertRaises(AttributeError):
            u.x = 1

    def test_no_inverse(self):

        self.assertFalse(hasattr(qt.UnitQuaternion(), 'inverse'))

    def test_conjugate(self):

        u = qt.UnitQuaternion(0.5, 0.5, -0.5, 0.5)

        conj = u.conjugate()

        self.assertIsInstance(conj, qt.UnitQuaternion)
        self.check_quaternion(conj, 0.5, -0.5, 0.5, -0.5)
        self.check_quaternion(u, 0.5, 0.5, -0.5, 0.5)
        self.assertLess(abs(conj.norm() - 1), 1e-6)

        # the conjugate is the inverse
        self.assertTrue((u * conj).isclose(qt.UnitQuaternion()))

    def test_unit_round_trip(self):

        rng = np.random.default_rng(7)

        for values in rng.normal(size=(20, 4)):

            u = qt.Quaternion(*values).to_unit_quaternion()

            again = qt.UnitQuaternion(u.w, u.x, u.y, u.z)

            self.assertEqual(again, u)
            self.assertLess(abs(qt.UnitQuaternion.from_quaternion(u).conjugate().norm() - 1), 1e-6)

    def test_to_quaternion(self):

        u = qt.UnitQuaternion(0, 1, 0, 0)

        q = u.to_quaternion()

        self.assertIsInstance(q, qt.Quaternion)
        self.assertEqual(q, u)

        # the generic copy can leave the unit sphere without touching u
        q.w = 4
        self.check_quaternion(u, 0, 1, 0, 0)

    def test_to_implementation(self):

        u = qt.UnitQuaternion(0, 0, 0, 1)

        np.testing.assert_array_equal(u.to_implementation(), [0, 0, 1, 0])

        view = u.to_implementation(writeable=False)

        with self.assertRaises(ValueError):
            view[0] = 1

    def test_assign(self):

        u = qt.UnitQuaternion()

        res = u.assign(qt.Quaternion(0, 0, 1, 0))

        self.assertIs(res, u)
        self.check_quaternion(u, 0, 0, 1, 0)

        impl = u.to_implementation(writeable=False)

        with self.assertRaises(qt.InvariantViolationError):
            u.assign(qt.Quaternion(2, 0, 0, 0))

        # a failed assignment leaves the value alone
        self.check_quaternion(u, 0, 0, 1, 0)

        u.assign(qt.UnitQuaternion(0, 0, 0, 1, dtype=np.float32))

        self.assertEqual(u.dtype, np.float64)
        self.check_quaternion(u, 0, 0, 0, 1)

        # assignment writes into the existing storage
        np.testing.assert_array_equal(impl, [0, 0, 1, 0])

    def test_copy(self):

        u = qt.UnitQuaternion(0, 1, 0, 0)

        cp = u.copy()

        self.assertEqual(cp, u)
        self.assertIsNot(cp.to_implementation(), u.to_implementation())

    def test_mul(self):

        half = np.sqrt(2) / 2

        u1 = qt.UnitQuaternion(half, half, 0, 0)
        u2 = qt.UnitQuaternion(half, 0, half, 0)

        res = u1 * u2

        self.assertIsInstance(res, qt.UnitQuaternion)
        self.check_quaternion(res, 0.5, 0.5, 0.5, 0.5)

    def test_repr(self):

        self.assertEqual(repr(qt.UnitQuaternion()), 'UnitQuaternion(w=1.0, x=0.0, y=0.0, z=0.0, dtype=float64)')

        with self.assertRaises(TypeError):
            hash(qt.UnitQuaternion())
