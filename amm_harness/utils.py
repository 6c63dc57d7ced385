from itertools import pairwise

from .constants import MAX_UINT64, SALT_LENGTH


def btoi(value):
    return int.from_bytes(value, 'big')


def check_u64(name, value):
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= MAX_UINT64:
        raise ValueError(f'{name} must be an unsigned 64-bit integer, got {value!r}')
    return value


def salt_from_index(index):
    return index.to_bytes(SALT_LENGTH, 'big')


def check_salt(salt):
    if len(salt) != SALT_LENGTH:
        raise ValueError(f'salt must be {SALT_LENGTH} bytes, got {len(salt)}')
    return bytes(salt)


def canonical_pair(asset_1_id, asset_2_id):
    """Ascending asset id order, used for every registry key."""
    if asset_1_id <= asset_2_id:
        return (asset_1_id, asset_2_id)
    return (asset_2_id, asset_1_id)


def consecutive_pairs(asset_ids):
    # (asset 1, asset 2), (asset 2, asset 3), (asset 3, asset 4) and so on
    return list(pairwise(asset_ids))
