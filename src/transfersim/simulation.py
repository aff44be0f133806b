"""
Fee-on-transfer detection by simulated `transferFrom` calls.

The destination account's code is replaced, for a single `eth_call`, with a probe contract that
pulls `amount` of the token from the source and returns the change in its own balance. A token that
takes a fee on transfer delivers less than `amount`, and the difference shows up directly in the
returned value. Nothing is broadcast and no chain state is modified.

The source must already have approved the destination to spend `amount`; this is not checked. A
zero amount needs neither balance nor allowance on standard tokens.

Example:

```
w3 = Web3(HTTPProvider("http://localhost:8545"))
received, error = simulate_transfer(
    token=token_address,
    source=holder_address,
    destination=spender_address,
    amount=10**18,
    w3=w3,
)
if error is None and has_transfer_fee(amount=10**18, received=received):
    ...
```
"""

from typing import NamedTuple

from web3 import AsyncBaseProvider, AsyncWeb3, Web3
from web3.exceptions import ContractLogicError
from web3.types import BlockIdentifier, StateOverride, TxParams

from transfersim.calldata import decode_probe_result, encode_probe_calldata
from transfersim.constants import RATIO_SCALE
from transfersim.exceptions import (
    ResultDecodingError,
    SimulationCallFailed,
    SimulationError,
    SimulationReverted,
    TransferSimValueError,
)
from transfersim.invokers import (
    AsyncSimulationInvoker,
    AsyncWeb3Invoker,
    SimulationInvoker,
    Web3Invoker,
)
from transfersim.logging import logger
from transfersim.overrides import build_state_override
from transfersim.validation.evm_values import validate_address, validate_uint256


class SimulationResult(NamedTuple):
    """
    The amount received by the destination during the simulated transfer, and the error that
    prevented the measurement, if any. When `error` is set, `received` is the requested amount.
    """

    received: int
    error: SimulationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> int:
        """
        Return the received amount, raising the attached error if the simulation failed.
        """

        if self.error is not None:
            raise self.error
        return self.received


def received_ratio(amount: int, received: int) -> int:
    """
    The fraction of `amount` that was received, scaled by 1e18. A value of 1e18 means no fee, e.g.
    0.99e18 indicates a 1% fee. A zero amount is reported as no fee.
    """

    if amount == 0:
        return RATIO_SCALE
    return received * RATIO_SCALE // amount


def fee_amount(amount: int, received: int) -> int:
    return max(amount - received, 0)


def has_transfer_fee(amount: int, received: int) -> bool:
    return received < amount


def _prepare_call(
    token: str | bytes,
    source: str | bytes,
    destination: str | bytes,
    amount: int,
) -> tuple[TxParams, StateOverride]:
    destination_address = validate_address(destination)
    call = TxParams(
        to=destination_address,
        data=encode_probe_calldata(token=token, source=source, amount=amount),
    )
    return call, build_state_override(destination=destination_address)


def _classify_call_error(exc: Exception) -> SimulationError:
    if isinstance(exc, ContractLogicError):
        return SimulationReverted(
            cause=exc,
            revert_data=exc.data if isinstance(exc.data, str) else None,
        )
    return SimulationCallFailed(cause=exc)


def _fallback(amount: int, error: SimulationError) -> SimulationResult:
    logger.warning(f"Transfer simulation failed, reporting requested amount {amount}: {error}")
    return SimulationResult(received=amount, error=error)


def _decode_result(amount: int, raw_result: bytes) -> SimulationResult:
    try:
        received = decode_probe_result(raw_result)
    except ResultDecodingError as exc:
        return _fallback(amount=amount, error=exc)

    logger.debug(f"Simulated transfer of {amount} delivered {received}")
    return SimulationResult(received=received)


def _check_invoker_arguments(
    w3: Web3 | AsyncWeb3[AsyncBaseProvider] | None,
    invoker: SimulationInvoker | AsyncSimulationInvoker | None,
    block_identifier: BlockIdentifier | None,
) -> None:
    if (w3 is None) == (invoker is None):
        raise TransferSimValueError(message="Provide exactly one of w3 or invoker.")
    if invoker is not None and block_identifier is not None:
        raise TransferSimValueError(
            message="block_identifier is only used with w3; configure the invoker instead."
        )


def simulate_transfer(
    token: str | bytes,
    source: str | bytes,
    destination: str | bytes,
    amount: int,
    *,
    w3: Web3 | None = None,
    invoker: SimulationInvoker | None = None,
    block_identifier: BlockIdentifier | None = None,
) -> SimulationResult:
    """
    Simulate `token.transferFrom(source, destination, amount)` and measure the amount that
    `destination` receives.

    The call is executed with `w3`, at `block_identifier` (default "latest"), or with a custom
    `invoker`. Exactly one of the two must be given.

    Invalid addresses or amounts raise `InvalidAddress` / `InvalidUint256`, and an address that is
    neither text nor bytes raises `TransferSimTypeError`. Any failure to execute the call or decode
    its result is not raised: the result holds the requested `amount` and the error, so a caller
    that only compares amounts sees no fee.
    """

    _check_invoker_arguments(w3=w3, invoker=invoker, block_identifier=block_identifier)
    if invoker is None:
        assert w3 is not None
        invoker = Web3Invoker(w3=w3, block_identifier=block_identifier)

    amount = validate_uint256(amount)
    call, state_override = _prepare_call(
        token=token,
        source=source,
        destination=destination,
        amount=amount,
    )

    logger.debug(f"Simulating transfer of {amount} {token=} from {source=} to {call['to']}")
    try:
        raw_result = invoker.invoke(call, state_override)
    except Exception as exc:  # noqa: BLE001
        return _fallback(amount=amount, error=_classify_call_error(exc))

    return _decode_result(amount=amount, raw_result=raw_result)


async def simulate_transfer_async(
    token: str | bytes,
    source: str | bytes,
    destination: str | bytes,
    amount: int,
    *,
    w3: AsyncWeb3[AsyncBaseProvider] | None = None,
    invoker: AsyncSimulationInvoker | None = None,
    block_identifier: BlockIdentifier | None = None,
) -> SimulationResult:
    """
    Async version of `simulate_transfer`.
    """

    _check_invoker_arguments(w3=w3, invoker=invoker, block_identifier=block_identifier)
    if invoker is None:
        assert w3 is not None
        invoker = AsyncWeb3Invoker(w3=w3, block_identifier=block_identifier)

    amount = validate_uint256(amount)
    call, state_override = _prepare_call(
        token=token,
        source=source,
        destination=destination,
        amount=amount,
    )

    logger.debug(f"Simulating transfer of {amount} {token=} from {source=} to {call['to']}")
    try:
        raw_result = await invoker.invoke(call, state_override)
    except Exception as exc:  # noqa: BLE001
        return _fallback(amount=amount, error=_classify_call_error(exc))

    return _decode_result(amount=amount, raw_result=raw_result)
