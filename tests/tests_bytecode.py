import unittest

from amm_harness.bytecode import compute_bytecode_root, compute_contract_id, compute_storage_root
from amm_harness.exceptions import MalformedBytecode
from amm_harness.utils import salt_from_index

from .constants import *


class TestBytecodeRoot(unittest.TestCase):

    def test_root_is_deterministic(self):
        self.assertEqual(compute_bytecode_root(EXCHANGE_BYTECODE), compute_bytecode_root(bytes(EXCHANGE_BYTECODE)))
        self.assertEqual(len(compute_bytecode_root(EXCHANGE_BYTECODE)), 32)

    def test_legitimate_and_malicious_roots_differ(self):
        self.assertNotEqual(compute_bytecode_root(EXCHANGE_BYTECODE), compute_bytecode_root(MALICIOUS_EXCHANGE_BYTECODE))
        self.assertNotEqual(compute_bytecode_root(EXCHANGE_BYTECODE), compute_bytecode_root(AMM_BYTECODE))

    def test_malformed_bytecode(self):
        test_cases = [
            dict(msg="Empty program.", bytecode=b''),
            dict(msg="Version zero.", bytecode=b'\x00\x81\x01\x43'),
            dict(msg="Version above the supported maximum.", bytecode=bytes([MAX_PROGRAM_VERSION + 1]) + b'\x81\x01\x43'),
        ]

        for test_case in test_cases:
            with self.subTest(**test_case):
                with self.assertRaises(MalformedBytecode):
                    compute_bytecode_root(test_case["bytecode"])


class TestContractId(unittest.TestCase):

    def test_same_salt_same_id(self):
        salt = salt_from_index(7)
        self.assertEqual(
            compute_contract_id(EXCHANGE_BYTECODE, EXCHANGE_STORAGE, salt),
            compute_contract_id(EXCHANGE_BYTECODE, EXCHANGE_STORAGE, salt),
        )

    def test_distinct_salts_distinct_ids(self):
        contract_ids = {compute_contract_id(EXCHANGE_BYTECODE, EXCHANGE_STORAGE, salt_from_index(i)) for i in range(50)}
        self.assertEqual(len(contract_ids), 50)

    def test_id_depends_on_code_and_storage(self):
        salt = salt_from_index(0)
        contract_id = compute_contract_id(EXCHANGE_BYTECODE, EXCHANGE_STORAGE, salt)
        self.assertNotEqual(contract_id, compute_contract_id(MALICIOUS_EXCHANGE_BYTECODE, EXCHANGE_STORAGE, salt))
        self.assertNotEqual(contract_id, compute_contract_id(EXCHANGE_BYTECODE, AMM_STORAGE, salt))

    def test_storage_root_ignores_slot_order(self):
        self.assertEqual(compute_storage_root(EXCHANGE_STORAGE), compute_storage_root(tuple(reversed(EXCHANGE_STORAGE))))

    def test_salt_length(self):
        with self.assertRaises(ValueError):
            compute_contract_id(EXCHANGE_BYTECODE, EXCHANGE_STORAGE, b'\x00' * 31)

    def test_id_fits_uint64(self):
        contract_id = compute_contract_id(AMM_BYTECODE, AMM_STORAGE, salt_from_index(1))
        self.assertTrue(0 <= contract_id <= MAX_UINT64)
