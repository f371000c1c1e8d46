import sys
import unittest
from pathlib import Path

_REPO_ROOT = Path(__file__).resolve().parents[2]
_PYTHON_DIR = _REPO_ROOT / "python"
for _path in (_REPO_ROOT, _PYTHON_DIR):
    path_str = str(_path)
    if path_str not in sys.path:
        sys.path.insert(0, path_str)

import pydense


class TestConstruction(unittest.TestCase):
    def test_new_matrix_is_zero_filled(self):
        for rows, cols in [(1, 1), (2, 3), (4, 1), (1, 5), (7, 7)]:
            m = pydense.Matrix(rows, cols)
            self.assertEqual(m.shape, (rows, cols))
            self.assertEqual(m.rows(), rows)
            self.assertEqual(m.cols(), cols)
            for i in range(rows):
                for j in range(cols):
                    self.assertEqual(m.get(i, j), 0.0)
                    self.assertIs(type(m.get(i, j)), float)

    def test_zero_dimension_rejected(self):
        for rows, cols in [(0, 3), (3, 0), (0, 0)]:
            with self.assertRaises(pydense.InvalidShapeError):
                pydense.Matrix(rows, cols)

    def test_negative_dimension_rejected(self):
        for rows, cols in [(-1, 3), (3, -1), (-2, -2)]:
            with self.assertRaises(pydense.InvalidShapeError):
                pydense.Matrix(rows, cols)

    def test_invalid_shape_is_an_invalid_argument(self):
        with self.assertRaises(pydense.InvalidArgumentError):
            pydense.Matrix(0, 1)
        with self.assertRaises(ValueError):
            pydense.Matrix(1, 0)

    def test_non_integer_dimensions_rejected(self):
        for bad in (2.0, "2", None, True):
            with self.assertRaises(TypeError):
                pydense.Matrix(bad, 2)
            with self.assertRaises(TypeError):
                pydense.Matrix(2, bad)


class TestElementAccess(unittest.TestCase):
    def setUp(self):
        self.m = pydense.Matrix(3, 4)

    def test_set_then_get_leaves_other_cells_untouched(self):
        self.m.set(1, 2, 3.5)
        self.assertEqual(self.m.get(1, 2), 3.5)
        for i in range(3):
            for j in range(4):
                if (i, j) != (1, 2):
                    self.assertEqual(self.m.get(i, j), 0.0)

    def test_set_overwrites(self):
        self.m.set(0, 0, 1.0)
        self.m.set(0, 0, -2.25)
        self.assertEqual(self.m.get(0, 0), -2.25)

    def test_set_stores_floats(self):
        self.m.set(2, 3, 7)
        value = self.m.get(2, 3)
        self.assertEqual(value, 7.0)
        self.assertIs(type(value), float)

    def test_set_accepts_special_values(self):
        self.m.set(0, 0, float("inf"))
        self.m.set(0, 1, float("nan"))
        self.assertEqual(self.m.get(0, 0), float("inf"))
        self.assertNotEqual(self.m.get(0, 1), self.m.get(0, 1))

    def test_set_rejects_non_numbers(self):
        with self.assertRaises(TypeError):
            self.m.set(0, 0, "1.0")
        with self.assertRaises(TypeError):
            self.m.set(0, 0, 1 + 2j)

    def test_bounds_on_get_and_set(self):
        bad = [(3, 0), (-1, 0), (0, 4), (0, -1), (3, 4), (-1, -1)]
        for row, col in bad:
            with self.assertRaises(pydense.OutOfRangeError):
                self.m.get(row, col)
            with self.assertRaises(pydense.OutOfRangeError):
                self.m.set(row, col, 1.0)

    def test_failed_set_does_not_mutate(self):
        with self.assertRaises(pydense.OutOfRangeError):
            self.m.set(3, 0, 9.0)
        self.assertEqual(self.m.tolist(), [[0.0] * 4 for _ in range(3)])

    def test_out_of_range_is_index_error_not_value_error(self):
        with self.assertRaises(IndexError) as ctx:
            self.m.get(5, 0)
        self.assertNotIsInstance(ctx.exception, ValueError)
        self.assertEqual(ctx.exception.index, (5, 0))
        self.assertEqual(ctx.exception.shape, (3, 4))

    def test_non_integer_index_rejected(self):
        with self.assertRaises(TypeError):
            self.m.get(0.0, 0)
        with self.assertRaises(TypeError):
            self.m.set(0, "1", 1.0)

    def test_item_syntax(self):
        self.m[2, 1] = 4.5
        self.assertEqual(self.m[2, 1], 4.5)
        self.assertEqual(self.m.get(2, 1), 4.5)
        with self.assertRaises(pydense.OutOfRangeError):
            self.m[3, 0]
        with self.assertRaises(TypeError):
            self.m[0]

    def test_tolist_and_iteration_return_copies(self):
        self.m.set(0, 0, 1.0)
        rows = self.m.tolist()
        rows[0][0] = 99.0
        for row in self.m:
            row[0] = 42.0
        self.assertEqual(self.m.get(0, 0), 1.0)
        self.assertEqual(len(self.m), 3)

    def test_copy_is_independent(self):
        self.m.set(1, 1, 2.0)
        dup = self.m.copy()
        self.assertEqual(dup, self.m)
        dup.set(1, 1, 5.0)
        self.assertEqual(self.m.get(1, 1), 2.0)


if __name__ == "__main__":
    unittest.main()
