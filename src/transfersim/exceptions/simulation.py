"""
Exceptions describing why a transfer simulation could not produce a measured amount.

These are not raised by `simulate_transfer`. They are attached to the returned result alongside the
fallback amount, so callers can inspect the failure kind without losing the fallback behavior.
"""

from typing import Any

from transfersim.exceptions.base import TransferSimError


class SimulationError(TransferSimError):
    """
    Base class for failures during a simulated transfer. The underlying exception, if any, is
    available at `.cause`.
    """

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        self.cause = cause
        super().__init__(message=message)

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.message, self.cause)


class SimulationCallFailed(SimulationError):
    """
    Raised when the node could not be reached or answered the call with an error, including nodes
    that do not support state overrides.
    """

    def __init__(self, cause: BaseException) -> None:
        super().__init__(message=f"Simulation call failed: {cause}", cause=cause)

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.cause,)


class SimulationReverted(SimulationError):
    """
    Raised when the node executed the call and it reverted, e.g. a missing allowance, insufficient
    balance, or a token that blocks the transfer.
    """

    def __init__(self, cause: BaseException, revert_data: str | None = None) -> None:
        self.revert_data = revert_data
        super().__init__(message=f"Simulation reverted: {cause}", cause=cause)

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.cause, self.revert_data)


class ResultDecodingError(SimulationError):
    """
    Raised when the call result is not a single 32-byte unsigned integer.
    """

    def __init__(self, data: bytes, cause: BaseException | None = None) -> None:
        self.data = data
        super().__init__(
            message=f"Could not decode {len(data)}-byte call result as uint256.", cause=cause
        )

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.data, self.cause)
