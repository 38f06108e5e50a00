import unittest
import warnings

import pymatrix
from pymatrix import ElementType, Matrix, PyMatrixDTypeWarning

try:
    import numpy as np
except ImportError:  # pragma: no cover
    np = None


@unittest.skipIf(np is None, "NumPy is not installed")
class TestNumpyInterop(unittest.TestCase):
    def test_to_numpy_matrix(self):
        m = pymatrix.matrix([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
        arr = m.to_numpy()
        self.assertEqual(arr.shape, (2, 3))
        self.assertEqual(arr.dtype, np.float64)
        np.testing.assert_array_equal(arr, np.array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]))

    def test_asarray_protocol(self):
        m = Matrix(3, 3, dtype=int).identity()
        np.testing.assert_array_equal(np.asarray(m), np.eye(3, dtype=np.int64))
        self.assertEqual(np.asarray(m, dtype=np.float32).dtype, np.float32)

    def test_to_numpy_empty(self):
        self.assertEqual(Matrix(0, 3).to_numpy().shape, (0, 3))
        self.assertEqual(Matrix(2, 0).to_numpy().shape, (2, 0))

    def test_to_numpy_custom_type_is_object(self):
        from fractions import Fraction

        fraction = ElementType("fraction", Fraction(0), Fraction(1), Fraction)
        arr = Matrix(2, 2, dtype=fraction).identity().to_numpy()
        self.assertEqual(arr.dtype, object)
        self.assertEqual(arr[1, 1], Fraction(1))

    def test_matrix_from_ndarray(self):
        arr = np.arange(6, dtype=np.int64).reshape(2, 3)
        m = pymatrix.matrix(arr)
        self.assertIs(m.dtype, pymatrix.int64)
        self.assertEqual(m.shape, (2, 3))
        self.assertEqual(m[1, 2], 5)
        self.assertIs(type(m[1, 2]), int)

    def test_matrix_from_bool_ndarray(self):
        m = pymatrix.matrix(np.array([[True, False], [False, True]]))
        self.assertIs(m.dtype, pymatrix.bool_)
        self.assertEqual(m, Matrix(2, 2, dtype=bool).identity())

    def test_matrix_rejects_non_2d_ndarray(self):
        with self.assertRaises(TypeError):
            pymatrix.matrix(np.zeros(3))
        with self.assertRaises(TypeError):
            pymatrix.matrix(np.zeros((2, 2, 2)))
        with self.assertRaises(TypeError):
            pymatrix.matrix(np.float64(1.0))

    def test_narrow_numpy_dtype_warns(self):
        with self.assertWarns(PyMatrixDTypeWarning):
            m = pymatrix.matrix(np.ones((2, 2), dtype=np.float32))
        self.assertIs(m.dtype, pymatrix.float64)
        with self.assertWarns(PyMatrixDTypeWarning):
            self.assertIs(pymatrix.dtype(np.uint8), pymatrix.int64)

    def test_exact_numpy_dtype_does_not_warn(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error", PyMatrixDTypeWarning)
            self.assertIs(pymatrix.dtype(np.float64), pymatrix.float64)
            self.assertIs(pymatrix.dtype(np.dtype("int64")), pymatrix.int64)
            self.assertIs(pymatrix.dtype(np.bool_), pymatrix.bool_)

    def test_numpy_scalars_are_accepted(self):
        m = Matrix(1, 3, dtype=int)
        m.set(0, 0, np.int32(7))
        m.set(0, 1, np.float64(2.0))
        m.set(0, 2, np.True_)
        self.assertEqual(m.elements, (7, 2, 1))
        self.assertTrue(all(type(v) is int for v in m.elements))


if __name__ == "__main__":
    unittest.main()
