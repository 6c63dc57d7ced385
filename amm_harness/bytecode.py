"""Content-derived identities for contract code.

The bytecode root is the program hash of the raw bytecode and ignores storage and salt.
A contract id is derived from the bytecode root, the storage root and the salt, so the
same triple always lands on the same id.
"""
from algosdk import error, transaction
from algosdk.encoding import checksum, decode_address

from .constants import CONTRACT_ID_PREFIX, MAX_PROGRAM_VERSION, STORAGE_ROOT_PREFIX
from .exceptions import MalformedBytecode
from .utils import btoi, check_salt


def compute_bytecode_root(bytecode):
    bytecode = bytes(bytecode)
    if not bytecode:
        raise MalformedBytecode('malformed bytecode: empty program')

    # Programs open with their version byte
    version = bytecode[0]
    if not 1 <= version <= MAX_PROGRAM_VERSION:
        raise MalformedBytecode(f'malformed bytecode: unsupported program version {version}')

    try:
        lsig = transaction.LogicSigAccount(bytecode)
    except error.InvalidProgram as e:
        raise MalformedBytecode(f'malformed bytecode: {e}') from e
    return decode_address(lsig.address())


def compute_storage_root(storage_slots):
    ordered = sorted(storage_slots, key=lambda slot: slot.key)
    return checksum(STORAGE_ROOT_PREFIX + b''.join(slot.key + slot.value for slot in ordered))


def compute_contract_id(bytecode, storage_slots, salt):
    digest = checksum(
        CONTRACT_ID_PREFIX
        + check_salt(salt)
        + compute_bytecode_root(bytecode)
        + compute_storage_root(storage_slots)
    )
    return btoi(digest[:8])
