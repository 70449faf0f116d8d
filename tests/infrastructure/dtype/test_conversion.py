import os
import unittest
from unittest import TestCase, mock

import numpy as np

from tensorlayout.domain._errors import (
    ComputationProducedNaNError,
    InvalidConversionError,
    UnknownDtypeError,
    UnsupportedConversionError,
)
from tensorlayout.infrastructure._config import DEBUG_ENV_VAR
from tensorlayout.infrastructure.dtype import (
    check_computation_for_nan,
    check_conversion_for_nan,
    convert,
)


class TestConvert(TestCase):
    def test_string_target_unsupported(self):
        with self.assertRaises(UnsupportedConversionError):
            convert([1, 2], "string")

    def test_unknown_dtype(self):
        with self.assertRaises(UnknownDtypeError):
            convert([1, 2], "float64")

    def test_float32_from_nested(self):
        out = convert([[1, 2], [3, [4, 5]]], "float32")
        self.assertEqual(out.dtype, np.float32)
        np.testing.assert_array_equal(out, [1, 2, 3, 4, 5])

    def test_default_dtype_is_float32(self):
        self.assertEqual(convert([1.5], None).dtype, np.float32)

    def test_complex64_uses_float32_storage(self):
        out = convert([1.5, 2.5], "complex64")
        self.assertEqual(out.dtype, np.float32)
        np.testing.assert_array_equal(out, [1.5, 2.5])

    def test_scalar_becomes_single_element(self):
        np.testing.assert_array_equal(convert(7, "int32", False), [7])

    def test_ndarray_input_is_flattened_and_copied(self):
        src = np.arange(6, dtype=np.float32).reshape(2, 3)
        out = convert(src, "float32")
        self.assertEqual(out.shape, (6,))
        out[0] = 99
        self.assertEqual(src[0, 0], 0)

    def test_identity_shortcut(self):
        for dtype, storage in (("float32", np.float32), ("int32", np.int32), ("bool", np.uint8)):
            buf = np.zeros(3, dtype=storage)
            self.assertIs(convert(buf, dtype), buf)

    def test_no_identity_for_mismatched_storage(self):
        buf = np.zeros(3, dtype=np.float64)
        out = convert(buf, "float32")
        self.assertIsNot(out, buf)
        self.assertEqual(out.dtype, np.float32)

    def test_no_identity_for_complex64(self):
        buf = np.zeros(3, dtype=np.float32)
        self.assertIsNot(convert(buf, "complex64"), buf)

    def test_int32_round_trip_is_idempotent(self):
        first = convert([1.7, -2.7, 3], "int32", False)
        second = convert(first, "int32", False)
        self.assertIs(second, first)
        np.testing.assert_array_equal(second, [1, -2, 3])

    def test_int32_truncates_toward_zero(self):
        np.testing.assert_array_equal(convert([2.9, -2.9, 0.5], "int32", False), [2, -2, 0])

    def test_int32_non_finite_become_zero(self):
        out = convert([float("nan"), float("inf"), -float("inf")], "int32", False)
        np.testing.assert_array_equal(out, [0, 0, 0])

    def test_int32_wraps(self):
        out = convert([2**31, 2**32 + 5, -(2**31) - 1], "int32", False)
        np.testing.assert_array_equal(out, [-(2**31), 5, 2**31 - 1])

    def test_int32_strict_rejects_nan(self):
        with self.assertRaises(InvalidConversionError) as cm:
            convert([float("nan")], "int32", True)
        self.assertIn("int32", str(cm.exception))

    def test_float32_strict_accepts_nan(self):
        out = convert([float("nan")], "float32", True)
        self.assertTrue(np.isnan(out[0]))

    def test_strict_defaults_to_debug_env(self):
        with mock.patch.dict(os.environ, {DEBUG_ENV_VAR: "1"}):
            with self.assertRaises(InvalidConversionError):
                convert([float("nan")], "int32")
        with mock.patch.dict(os.environ, {DEBUG_ENV_VAR: "0"}):
            np.testing.assert_array_equal(convert([float("nan")], "int32"), [0])

    def test_bool_rounding(self):
        out = convert([0, 0.4, 0.5, -0.5, -0.6, 2, float("nan")], "bool")
        self.assertEqual(out.dtype, np.uint8)
        np.testing.assert_array_equal(out, [0, 0, 1, 0, 1, 1, 1])

    def test_bool_from_python_bools(self):
        np.testing.assert_array_equal(convert([True, False], "bool"), [1, 0])


class TestNaNChecks(TestCase):
    def test_computation_check_only_for_float32(self):
        check_computation_for_nan([1.0, 2.0], "float32", "add")
        check_computation_for_nan([float("nan")], "int32", "add")
        with self.assertRaises(ComputationProducedNaNError) as cm:
            check_computation_for_nan([1.0, float("nan")], "float32", "matMul")
        self.assertEqual(cm.exception.name, "matMul")
        self.assertEqual(cm.exception.index, 1)
        self.assertIn("matMul", str(cm.exception))

    def test_computation_check_on_ndarray(self):
        vals = np.array([0.0, np.nan], dtype=np.float32)
        with self.assertRaises(ComputationProducedNaNError):
            check_computation_for_nan(vals, "float32", "div")

    def test_conversion_check(self):
        check_conversion_for_nan([float("nan")], "float32")
        check_conversion_for_nan(["a", "b"], "string")
        check_conversion_for_nan([1, 2, 3], "int32")
        for dtype in ("int32", "bool", "complex64"):
            with self.assertRaises(InvalidConversionError) as cm:
                check_conversion_for_nan([0.0, float("nan")], dtype)
            self.assertIn(dtype, str(cm.exception))
            self.assertEqual(cm.exception.index, 1)

    def test_conversion_check_mixed_objects(self):
        with self.assertRaises(InvalidConversionError):
            check_conversion_for_nan([None, float("nan")], "int32")


if __name__ == "__main__":
    unittest.main()
