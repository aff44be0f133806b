import dataclasses
from collections.abc import Mapping
from typing import cast

from eth_typing import HexStr
from hexbytes import HexBytes
from web3.types import StateOverride, StateOverrideParams

from transfersim.exceptions import TransferSimValueError
from transfersim.probe import PROBE_BYTECODE
from transfersim.validation.evm_values import validate_address


def _slot_to_hex(value: int) -> HexStr:
    return HexStr(f"0x{value:064x}")


@dataclasses.dataclass(slots=True, frozen=True, kw_only=True)
class AccountOverride:
    """
    Replacement state for a single account during one `eth_call`. Fields left as `None` are not
    sent and the node keeps the account's real value.

    `state` replaces the whole storage of the account, `state_diff` patches individual slots. The
    two are mutually exclusive.
    """

    nonce: int | None = None
    code: bytes | None = None
    balance: int | None = None
    state: Mapping[int, int] | None = None
    state_diff: Mapping[int, int] | None = None

    def __post_init__(self) -> None:
        if self.state is not None and self.state_diff is not None:
            raise TransferSimValueError(
                message="An account override cannot set both state and state_diff."
            )

    def to_rpc(self) -> StateOverrideParams:
        """
        Render the override in the JSON-RPC shape expected by `eth_call`.
        """

        params: dict[str, object] = {}
        if self.nonce is not None:
            params["nonce"] = hex(self.nonce)
        if self.code is not None:
            params["code"] = HexBytes(self.code).to_0x_hex()
        if self.balance is not None:
            params["balance"] = hex(self.balance)
        if self.state is not None:
            params["state"] = {
                _slot_to_hex(slot): _slot_to_hex(value) for slot, value in self.state.items()
            }
        if self.state_diff is not None:
            params["stateDiff"] = {
                _slot_to_hex(slot): _slot_to_hex(value) for slot, value in self.state_diff.items()
            }
        return cast("StateOverrideParams", params)


def build_state_override(
    destination: str | bytes,
    code: bytes = PROBE_BYTECODE,
) -> StateOverride:
    """
    Build a state override that swaps the code at `destination` for `code`, leaving its nonce,
    balance and storage untouched.
    """

    return {
        validate_address(destination): AccountOverride(code=code).to_rpc(),
    }
