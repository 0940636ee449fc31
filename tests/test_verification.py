import unittest

from random_sort.core import first_descending_violation, is_descending, is_permutation


class TestVerification(unittest.TestCase):
    def test_is_descending(self):
        self.assertTrue(is_descending([]))
        self.assertTrue(is_descending([1]))
        self.assertTrue(is_descending([9, 9, 4, 0]))
        self.assertFalse(is_descending([3, 5, 8, 1]))

    def test_first_violation_index(self):
        self.assertIsNone(first_descending_violation([5, 4, 4, 1]))
        self.assertEqual(first_descending_violation([3, 5, 8, 1]), 0)
        self.assertEqual(first_descending_violation([9, 7, 8]), 1)

    def test_is_permutation(self):
        self.assertTrue(is_permutation([4, 4, 2, 7], [7, 4, 4, 2]))
        self.assertTrue(is_permutation([], []))
        self.assertFalse(is_permutation([4, 4, 2], [4, 2, 2]))
        self.assertFalse(is_permutation([1, 2], [1, 2, 2]))


if __name__ == "__main__":
    unittest.main()
