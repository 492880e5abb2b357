import unittest
import math
import numpy as np
from Vector3 import Vector3


class TestVector3(unittest.TestCase):
	def setUp(self):
		self.a = Vector3(1.0, 2.0, 3.0)
		self.b = Vector3(2.0, 3.0, 4.0)

	def test_length(self):
		self.assertAlmostEqual(self.a.length(), math.sqrt(14.0))

	def test_dot(self):
		self.assertAlmostEqual(self.a.dot(self.b), 20.0)

	def test_cross(self):
		self.assertEqual(self.a.cross(self.b), Vector3(-1.0, 2.0, -1.0))

	def test_dist_to(self):
		self.assertAlmostEqual(self.a.dist_to(self.b), math.sqrt(3.0))

	def test_add_and_subtract(self):
		self.assertEqual(self.a + self.b, Vector3(3.0, 5.0, 7.0))
		self.assertEqual(self.b - self.a, Vector3(1.0, 1.0, 1.0))
		self.assertEqual(-self.a, Vector3(-1.0, -2.0, -3.0))

	def test_in_place_add_does_not_touch_other(self):
		c = self.a.copy()
		c += self.b
		self.assertEqual(c, Vector3(3.0, 5.0, 7.0))
		self.assertEqual(self.a, Vector3(1.0, 2.0, 3.0))

	def test_scale(self):
		self.assertEqual(self.a.scaled(2.0), Vector3(2.0, 4.0, 6.0))
		c = self.a.copy()
		c.scale_in_place(0.5)
		self.assertEqual(c, Vector3(0.5, 1.0, 1.5))

	def test_normalize(self):
		n = self.a.normalized()
		self.assertAlmostEqual(n.length(), 1.0)
		# original untouched
		self.assertAlmostEqual(self.a.length(), math.sqrt(14.0))
		c = Vector3(3.0, 0.0, 4.0)
		c.normalize_in_place()
		self.assertEqual(c, Vector3(0.6, 0.0, 0.8))

	def test_normalize_zero_vector(self):
		with self.assertRaises(ZeroDivisionError):
			Vector3().normalized()

	def test_from_list_fills_missing_components(self):
		self.assertEqual(Vector3.from_list([1.0, 2.0]), Vector3(1.0, 2.0, 0.0))
		with self.assertRaises(ValueError):
			Vector3.from_list([])
		with self.assertRaises(ValueError):
			Vector3.from_list([1.0, 2.0, 3.0, 4.0])

	def test_to_array(self):
		np.testing.assert_allclose(self.a.to_array(), np.array([1.0, 2.0, 3.0]))


if __name__ == '__main__':
	unittest.main()
