__all__ = (
    "ADDRESS_LENGTH",
    "MAX_UINT256",
    "MIN_UINT256",
    "PROBE_CALLDATA_LENGTH",
    "RATIO_SCALE",
    "WORD_LENGTH",
)

import typing


def _min_uint(_: int) -> int:
    return 0


def _max_uint(bits: int) -> int:
    return typing.cast("int", 2**bits - 1)


MIN_UINT256 = _min_uint(256)
MAX_UINT256 = _max_uint(256)

ADDRESS_LENGTH = 20
WORD_LENGTH = 32

# token, source, amount
PROBE_CALLDATA_LENGTH = 3 * WORD_LENGTH

# A received ratio equal to this value means the full amount arrived
RATIO_SCALE = 10**18
