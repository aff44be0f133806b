from typing import Any

from transfersim.exceptions.base import TransferSimValueError


class InvalidAddress(TransferSimValueError):
    """
    Raised when a value cannot be interpreted as a 20-byte address.
    """

    def __init__(self, address: object) -> None:
        self.address = address
        super().__init__(message=f"Invalid address {address!r}")

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.address,)


class InvalidUint256(TransferSimValueError):
    """
    Raised when an amount is not an integer in the range [0, 2**256 - 1].
    """

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(message=f"Not a valid uint256: {value!r}")

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.value,)
