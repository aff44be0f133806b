import eth_abi.abi
from eth_abi.exceptions import DecodingError

from transfersim.constants import WORD_LENGTH
from transfersim.exceptions import ResultDecodingError
from transfersim.validation.evm_values import validate_address, validate_uint256

PROBE_ARGUMENT_TYPES = ["address", "address", "uint256"]
PROBE_RETURN_TYPES = ["uint256"]


def encode_probe_calldata(
    token: str | bytes,
    source: str | bytes,
    amount: int,
) -> bytes:
    """
    Pack the probe contract input: three 32-byte words holding the token address, the source
    address, and the amount. There is no function selector; the probe reads each word by position.
    """

    return eth_abi.abi.encode(
        types=PROBE_ARGUMENT_TYPES,
        args=(
            validate_address(token),
            validate_address(source),
            validate_uint256(amount),
        ),
    )


def decode_probe_result(data: bytes) -> int:
    """
    Decode the probe return value, a single 32-byte big-endian unsigned integer.
    """

    if len(data) != WORD_LENGTH:
        raise ResultDecodingError(data=bytes(data))

    try:
        (received,) = eth_abi.abi.decode(types=PROBE_RETURN_TYPES, data=data)
    except DecodingError as exc:
        raise ResultDecodingError(data=bytes(data), cause=exc) from exc

    return int(received)
