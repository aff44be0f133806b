"""
Strategies for executing the probe call against a node.

`simulate_transfer` only depends on the `invoke` method, so tests and alternate transports can
supply their own invoker instead of a `Web3` instance.
"""

from typing import Protocol

from web3 import AsyncBaseProvider, AsyncWeb3, Web3
from web3.types import BlockIdentifier, StateOverride, TxParams


class SimulationInvoker(Protocol):
    def invoke(self, call: TxParams, state_override: StateOverride) -> bytes:
        """
        Execute `call` read-only with `state_override` applied and return the raw result bytes.
        Any failure is raised to the caller.
        """
        ...


class AsyncSimulationInvoker(Protocol):
    async def invoke(self, call: TxParams, state_override: StateOverride) -> bytes: ...


class Web3Invoker:
    """
    Execute the call with `eth_call` through a `Web3` instance, at the given block (default
    "latest").
    """

    def __init__(
        self,
        w3: Web3,
        block_identifier: BlockIdentifier | None = None,
    ) -> None:
        self.w3 = w3
        self.block_identifier: BlockIdentifier = (
            block_identifier if block_identifier is not None else "latest"
        )

    def __repr__(self) -> str:  # pragma: no cover
        return f"{self.__class__.__name__}(block_identifier={self.block_identifier!r})"

    def invoke(self, call: TxParams, state_override: StateOverride) -> bytes:
        return bytes(
            self.w3.eth.call(
                transaction=call,
                block_identifier=self.block_identifier,
                state_override=state_override,
            )
        )


class AsyncWeb3Invoker:
    """
    Async version of `Web3Invoker`.
    """

    def __init__(
        self,
        w3: AsyncWeb3[AsyncBaseProvider],
        block_identifier: BlockIdentifier | None = None,
    ) -> None:
        self.w3 = w3
        self.block_identifier: BlockIdentifier = (
            block_identifier if block_identifier is not None else "latest"
        )

    def __repr__(self) -> str:  # pragma: no cover
        return f"{self.__class__.__name__}(block_identifier={self.block_identifier!r})"

    async def invoke(self, call: TxParams, state_override: StateOverride) -> bytes:
        return bytes(
            await self.w3.eth.call(
                transaction=call,
                block_identifier=self.block_identifier,
                state_override=state_override,
            )
        )
