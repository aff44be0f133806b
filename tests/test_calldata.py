import pytest
from hexbytes import HexBytes

from transfersim.calldata import decode_probe_result, encode_probe_calldata
from transfersim.constants import MAX_UINT256, PROBE_CALLDATA_LENGTH
from transfersim.exceptions import (
    InvalidAddress,
    InvalidUint256,
    ResultDecodingError,
    TransferSimTypeError,
)
from transfersim.validation.evm_values import get_checksum_address, validate_address

from .conftest import SOURCE_ADDRESS, TOKEN_ADDRESS


def test_encode_probe_calldata():
    calldata = encode_probe_calldata(token=TOKEN_ADDRESS, source=SOURCE_ADDRESS, amount=0x1234)
    assert len(calldata) == PROBE_CALLDATA_LENGTH
    assert calldata == HexBytes(
        "0x"
        "0000000000000000000000001111111111111111111111111111111111111111"
        "0000000000000000000000002222222222222222222222222222222222222222"
        "0000000000000000000000000000000000000000000000000000000000001234"
    )


def test_encode_probe_calldata_word_layout():
    token = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"
    source = "0x0000000000000000000000000000000000000001"
    amount = 10**18

    calldata = encode_probe_calldata(token=token, source=source, amount=amount)

    assert calldata[:12] == bytes(12)
    assert calldata[12:32] == HexBytes(token)
    assert calldata[32:44] == bytes(12)
    assert calldata[44:64] == HexBytes(source)
    assert int.from_bytes(calldata[64:96], byteorder="big") == amount


def test_encode_probe_calldata_accepts_bytes_and_lowercase_addresses():
    from_text = encode_probe_calldata(
        token="0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2",
        source=SOURCE_ADDRESS,
        amount=1,
    )
    from_bytes = encode_probe_calldata(
        token=HexBytes("0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"),
        source=bytes.fromhex("22" * 20),
        amount=1,
    )
    assert from_text == from_bytes


def test_encode_probe_calldata_amount_bounds():
    assert encode_probe_calldata(token=TOKEN_ADDRESS, source=SOURCE_ADDRESS, amount=0)[64:] == bytes(
        32
    )
    assert (
        encode_probe_calldata(token=TOKEN_ADDRESS, source=SOURCE_ADDRESS, amount=MAX_UINT256)[64:]
        == b"\xff" * 32
    )

    with pytest.raises(InvalidUint256):
        encode_probe_calldata(token=TOKEN_ADDRESS, source=SOURCE_ADDRESS, amount=MAX_UINT256 + 1)
    with pytest.raises(InvalidUint256):
        encode_probe_calldata(token=TOKEN_ADDRESS, source=SOURCE_ADDRESS, amount=-1)
    with pytest.raises(InvalidUint256):
        encode_probe_calldata(token=TOKEN_ADDRESS, source=SOURCE_ADDRESS, amount=True)
    with pytest.raises(InvalidUint256):
        encode_probe_calldata(token=TOKEN_ADDRESS, source=SOURCE_ADDRESS, amount=1.0)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "address",
    [
        "0x1234",
        "0x" + "11" * 21,
        "0x" + "zz" * 20,
        b"\x11" * 19,
    ],
)
def test_encode_probe_calldata_rejects_invalid_address(address):
    with pytest.raises(InvalidAddress):
        encode_probe_calldata(token=address, source=SOURCE_ADDRESS, amount=1)


@pytest.mark.parametrize("address", [1234, None, 0x11 * 20, ["0x" + "11" * 20]])
def test_encode_probe_calldata_rejects_non_text_address(address):
    with pytest.raises(TransferSimTypeError, match="Address must be str or bytes"):
        encode_probe_calldata(token=address, source=SOURCE_ADDRESS, amount=1)


def test_validate_address_checksums_once_per_address():
    get_checksum_address.cache_clear()
    checksummed = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"

    assert validate_address(checksummed.lower()) == checksummed
    assert validate_address(checksummed.upper().replace("0X", "0x")) == checksummed
    assert validate_address(checksummed.removeprefix("0x")) == checksummed
    assert validate_address(HexBytes(checksummed)) == checksummed

    cache_info = get_checksum_address.cache_info()
    assert cache_info.currsize == 1
    assert cache_info.hits == 3


def test_decode_probe_result():
    assert decode_probe_result((0).to_bytes(32, byteorder="big")) == 0
    assert decode_probe_result((990).to_bytes(32, byteorder="big")) == 990
    assert decode_probe_result(b"\xff" * 32) == MAX_UINT256


@pytest.mark.parametrize("data", [b"", b"\x00" * 31, b"\x00" * 33, b"\x00" * 64])
def test_decode_probe_result_rejects_malformed_data(data: bytes):
    with pytest.raises(ResultDecodingError) as exc_info:
        decode_probe_result(data)
    assert exc_info.value.data == data
