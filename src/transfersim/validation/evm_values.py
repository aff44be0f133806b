import functools
from typing import Annotated

from cchecksum import to_checksum_address
from eth_typing import ChecksumAddress
from eth_utils.address import is_hex_address
from eth_utils.hexadecimal import remove_0x_prefix
from pydantic import Field, TypeAdapter, ValidationError

from transfersim.constants import ADDRESS_LENGTH, MAX_UINT256, MIN_UINT256
from transfersim.exceptions import InvalidAddress, InvalidUint256, TransferSimTypeError

ValidatedUint256 = Annotated[int, Field(strict=True, ge=MIN_UINT256, le=MAX_UINT256)]

_uint256_adapter: TypeAdapter[int] = TypeAdapter(ValidatedUint256)


def validate_uint256(value: int) -> int:
    """
    Return the value if it is an integer in the uint256 range, otherwise raise `InvalidUint256`.
    Booleans are rejected.
    """

    try:
        return _uint256_adapter.validate_python(value)
    except ValidationError:
        raise InvalidUint256(value) from None


@functools.lru_cache(maxsize=512)
def get_checksum_address(address: bytes) -> ChecksumAddress:
    """
    EIP-55 checksum for a raw 20-byte address. Text input is converted to bytes by
    `validate_address` first, so each address has a single cache entry regardless of its casing.
    """

    return to_checksum_address(address)


def validate_address(address: str | bytes) -> ChecksumAddress:
    """
    Return the checksummed form of a 20-byte address given as hex text (with or without the 0x
    prefix) or raw bytes. The checksum of mixed-case input is not enforced.

    Values that are neither text nor bytes raise `TransferSimTypeError`.
    """

    match address:
        case bytes():
            if len(address) != ADDRESS_LENGTH:
                raise InvalidAddress(address)
            return get_checksum_address(bytes(address))
        case str():
            if not is_hex_address(address):
                raise InvalidAddress(address)
            return get_checksum_address(bytes.fromhex(remove_0x_prefix(address)))
        case _:
            raise TransferSimTypeError(
                message=f"Address must be str or bytes, not {type(address).__name__}"
            )
