import math
import unittest

from linal.errors import ZeroDivisorError
from linal.vec3 import Vec3, triple_product


class Vec3MathOpsTests(unittest.TestCase):
    def test_add_sub(self) -> None:
        a = Vec3(1, 2, 3)
        b = Vec3(-3, 6, 4)
        self.assertEqual(a + b, Vec3(-2, 8, 7))
        self.assertEqual(a - b, Vec3(4, -4, -1))

    def test_scale_and_divide(self) -> None:
        a = Vec3(1, 2, 3)
        self.assertEqual(a * 3, Vec3(3, 6, 9))
        self.assertEqual(3 * a, Vec3(3, 6, 9))
        self.assertEqual(Vec3(10, 20, 30) / 10, Vec3(1, 2, 3))
        self.assertEqual((a * 8) / 8, a)

    def test_divide_by_zero(self) -> None:
        with self.assertRaises(ZeroDivisorError):
            Vec3(1, 2, 3) / 0

    def test_hadamard_product(self) -> None:
        self.assertEqual(Vec3(1, 2, 3) * Vec3(2, 0.5, -1), Vec3(2, 1, -3))

    def test_dot(self) -> None:
        a = Vec3(1, 2, 3)
        b = Vec3(-3, 6, 4)
        self.assertEqual(a.dot(b), 21.0)
        self.assertEqual(b.dot(a), 21.0)

    def test_neg(self) -> None:
        self.assertEqual(-Vec3(1, 2, 3), Vec3(-1, -2, -3))

    def test_length_and_ort(self) -> None:
        a = Vec3(2, 3, 6)
        self.assertEqual(a.length(), 7.0)
        self.assertEqual(a.length(), (-a).length())
        self.assertEqual(Vec3.zero().length(), 0.0)
        self.assertAlmostEqual(a.ort().length(), 1.0)
        with self.assertRaises(ZeroDivisorError):
            Vec3.zero().ort()

    def test_sqr_and_sqrt(self) -> None:
        self.assertEqual(Vec3(2, 3, 4).sqr(), Vec3(4, 9, 16))
        self.assertEqual(Vec3(4, 9, 16).sqrt(), Vec3(2, 3, 4))
        self.assertTrue(math.isnan(Vec3(1, -1, 1).sqrt().y))


class Vec3CrossTests(unittest.TestCase):
    def test_cross(self) -> None:
        a = Vec3(4, 0, 0)
        b = Vec3(3, 5, 0)
        self.assertEqual(a.cross(b), Vec3(0, 0, 20))
        self.assertEqual(b.cross(a), -Vec3(0, 0, 20))

    def test_cross_is_orthogonal_to_operands(self) -> None:
        a = Vec3(1, 2, 3)
        b = Vec3(-3, 6, 4)
        c = a.cross(b)
        self.assertEqual(c.dot(a), 0.0)
        self.assertEqual(c.dot(b), 0.0)
        self.assertEqual(a.cross(b), -b.cross(a))

    def test_cross_preserves_length_for_unit_axis(self) -> None:
        a = Vec3(4, 0, 0)
        b = a.cross(Vec3(0, 0, 1))
        self.assertNotEqual(a, b)
        self.assertEqual(a.length(), b.length())
        self.assertEqual(a.length(), 4.0)

    def test_cross_rejects_scalar(self) -> None:
        with self.assertRaises(TypeError):
            Vec3(1, 2, 3).cross(2.0)

    def test_triple_product(self) -> None:
        a = Vec3(2, 0, 0)
        b = Vec3(3, 4, 0)
        c = Vec3(3, 4, 5)
        self.assertEqual(triple_product(a, b, c), 40.0)
        self.assertEqual(triple_product(b, a, c), -40.0)


class Vec3CoordinateTests(unittest.TestCase):
    def test_from_spherical(self) -> None:
        v = Vec3.from_spherical(5.0, math.pi / 2.0, math.atan2(3.0, 4.0))
        self.assertLess((v - Vec3(4, 3, 0)).length(), 1e-10)

    def test_from_spherical_on_y_axis(self) -> None:
        v = Vec3.from_spherical(2.0, math.pi / 2.0, math.pi / 2.0)
        self.assertAlmostEqual(v.x, 0.0)
        self.assertAlmostEqual(v.y, 2.0)
        self.assertAlmostEqual(v.z, 0.0)

    def test_to_spherical(self) -> None:
        r, theta, phi = Vec3(0.0, 0.0, 3.0).to_spherical()
        self.assertEqual((r, theta, phi), (3.0, 0.0, 0.0))
        r, theta, phi = Vec3(4.0, 3.0, 0.0).to_spherical()
        self.assertEqual(r, 5.0)
        self.assertAlmostEqual(theta, math.pi / 2.0)
        self.assertAlmostEqual(phi, math.atan2(3.0, 4.0))
        self.assertEqual(Vec3.zero().to_spherical(), (0.0, 0.0, 0.0))

    def test_index_access(self) -> None:
        v = Vec3(1, 2, 3)
        self.assertEqual((v[0], v[1], v[2]), (1.0, 2.0, 3.0))
        self.assertEqual(v.with_component(2, -1), Vec3(1, 2, -1))
        with self.assertRaises(IndexError):
            v[3]

    def test_mixed_dimensions_rejected(self) -> None:
        from linal.vec2 import Vec2

        with self.assertRaises(TypeError):
            Vec3(1, 2, 3) + Vec2(1, 2)
        self.assertNotEqual(Vec3(1, 2, 0), Vec2(1, 2))


if __name__ == "__main__":
    unittest.main()
