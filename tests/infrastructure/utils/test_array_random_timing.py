import unittest
from unittest import TestCase

import numpy as np

from tensorlayout.domain._errors import RetryLimitExceededError
from tensorlayout.infrastructure.utils import (
    create_shuffled_indices,
    first_element,
    flatten,
    now,
    rand_uniform,
    repeated_try,
    shuffle,
)


class TestFlatten(TestCase):
    def test_depth_first_order(self):
        self.assertEqual(flatten([1, [2, [3, 4]], 5, [[6]]]), [1, 2, 3, 4, 5, 6])

    def test_ragged_and_tuples(self):
        self.assertEqual(flatten(((1,), [2, 3], [])), [1, 2, 3])

    def test_strings_are_leaves(self):
        self.assertEqual(flatten([["ab", "c"], "d"]), ["ab", "c", "d"])

    def test_ndarray_members(self):
        self.assertEqual(flatten([np.array([[1, 2], [3, 4]]), 5]), [1, 2, 3, 4, 5])

    def test_scalar(self):
        self.assertEqual(flatten(3), [3])

    def test_accumulator(self):
        out = [0]
        self.assertIs(flatten([1, 2], out), out)
        self.assertEqual(out, [0, 1, 2])

    def test_first_element(self):
        self.assertEqual(first_element([[[7, 8]], 9]), 7)
        self.assertIsNone(first_element([[], 1]))
        self.assertEqual(first_element(np.array(4.0)), 4.0)
        self.assertEqual(first_element("abc"), "abc")


class TestRandom(TestCase):
    def test_shuffle_is_permutation(self):
        arr = list(range(20))
        shuffle(arr, np.random.default_rng(0))
        self.assertEqual(sorted(arr), list(range(20)))

    def test_shuffle_reproducible_with_seed(self):
        a = list(range(10))
        b = list(range(10))
        shuffle(a, np.random.default_rng(42))
        shuffle(b, np.random.default_rng(42))
        self.assertEqual(a, b)

    def test_create_shuffled_indices(self):
        idx = create_shuffled_indices(16, np.random.default_rng(1))
        self.assertEqual(idx.dtype, np.uint32)
        np.testing.assert_array_equal(np.sort(idx), np.arange(16, dtype=np.uint32))

    def test_rand_uniform_range(self):
        rng = np.random.default_rng(3)
        for _ in range(100):
            x = rand_uniform(-2.0, 5.0, rng)
            self.assertGreaterEqual(x, -2.0)
            self.assertLess(x, 5.0)


class TestTiming(TestCase):
    def test_now_is_monotonic(self):
        t0 = now()
        t1 = now()
        self.assertGreaterEqual(t1, t0)

    def test_repeated_try_succeeds_after_retries(self):
        results = iter([False, False, True])
        sleeps = []
        repeated_try(lambda: next(results), lambda c: c * 10, sleep=sleeps.append)
        self.assertEqual(sleeps, [0.01, 0.02])

    def test_repeated_try_immediate_success(self):
        sleeps = []
        repeated_try(lambda: True, sleep=sleeps.append)
        self.assertEqual(sleeps, [])

    def test_repeated_try_gives_up(self):
        sleeps = []
        with self.assertRaises(RetryLimitExceededError) as cm:
            repeated_try(lambda: False, max_counter=3, sleep=sleeps.append)
        self.assertEqual(cm.exception.attempts, 3)
        self.assertEqual(len(sleeps), 2)


if __name__ == "__main__":
    unittest.main()
