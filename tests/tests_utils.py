import unittest

from amm_harness.utils import canonical_pair, check_u64, consecutive_pairs, salt_from_index

from .constants import *


class TestUtils(unittest.TestCase):

    def test_canonical_pair(self):
        self.assertEqual(canonical_pair(5, 2), (2, 5))
        self.assertEqual(canonical_pair(2, 5), (2, 5))

    def test_consecutive_pairs(self):
        self.assertEqual(consecutive_pairs([1, 2, 3, 4]), [(1, 2), (2, 3), (3, 4)])
        self.assertEqual(consecutive_pairs([1]), [])
        self.assertEqual(consecutive_pairs([]), [])

    def test_salt_from_index(self):
        self.assertEqual(len(salt_from_index(0)), SALT_LENGTH)
        self.assertEqual(salt_from_index(1)[-1], 1)
        self.assertNotEqual(salt_from_index(1), salt_from_index(256))

    def test_check_u64(self):
        self.assertEqual(check_u64('amount', MAX_UINT64), MAX_UINT64)
        with self.assertRaises(ValueError):
            check_u64('amount', MAX_UINT64 + 1)
        with self.assertRaises(ValueError):
            check_u64('amount', 1.5)
        with self.assertRaises(ValueError):
            check_u64('amount', True)

