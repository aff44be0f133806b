import logging
from typing import Any

import dotenv
import pytest
from web3.providers.base import BaseProvider
from web3.types import RPCEndpoint, RPCResponse, StateOverride, TxParams

from transfersim.logging import logger

env_file = dotenv.find_dotenv("tests.env")
env_values = dotenv.dotenv_values(env_file)

ETHEREUM_FULL_NODE_HTTP_URI = env_values.get(
    "ETHEREUM_FULL_NODE_HTTP_URI", "https://ethereum-rpc.publicnode.com"
)

TOKEN_ADDRESS = "0x" + "11" * 20
SOURCE_ADDRESS = "0x" + "22" * 20
DESTINATION_ADDRESS = "0x" + "33" * 20


@pytest.fixture(scope="session", autouse=True)
def _set_transfersim_logging():
    """
    Set the logging level to DEBUG for the test run
    """
    logger.setLevel(logging.DEBUG)


class FakeInvoker:
    """
    An invoker that records each call and returns a canned result, or raises it if the result is an
    exception.
    """

    def __init__(self, result: bytes | Exception) -> None:
        self.result = result
        self.calls: list[dict[str, Any]] = []

    def invoke(self, call: TxParams, state_override: StateOverride) -> bytes:
        self.calls.append({"call": call, "state_override": state_override})
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


class FakeAsyncInvoker(FakeInvoker):
    async def invoke(self, call: TxParams, state_override: StateOverride) -> bytes:  # type: ignore[override]
        return super().invoke(call, state_override)


class FakeEth:
    """
    Stands in for `Web3.eth`, recording the arguments passed to `call`.
    """

    def __init__(self, result: bytes | Exception) -> None:
        self.result = result
        self.calls: list[dict[str, Any]] = []

    def call(
        self,
        transaction: TxParams,
        block_identifier: Any = None,
        state_override: StateOverride | None = None,
    ) -> bytes:
        self.calls.append(
            {
                "transaction": transaction,
                "block_identifier": block_identifier,
                "state_override": state_override,
            }
        )
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


class FakeAsyncEth(FakeEth):
    async def call(self, *args: Any, **kwargs: Any) -> bytes:  # type: ignore[override]
        return super().call(*args, **kwargs)


class FakeWeb3:
    def __init__(self, result: bytes | Exception) -> None:
        self.eth = FakeEth(result)


class FakeAsyncWeb3:
    def __init__(self, result: bytes | Exception) -> None:
        self.eth = FakeAsyncEth(result)


def uint256_word(value: int) -> bytes:
    return value.to_bytes(32, byteorder="big")


class RecordingProvider(BaseProvider):
    """
    A provider that records every JSON-RPC request and answers `eth_call` with a canned response
    body, either a result or an error object.
    """

    def __init__(self, eth_call_response: dict[str, Any], chain_id: int = 1) -> None:
        super().__init__()
        self.eth_call_response = eth_call_response
        self.chain_id = chain_id
        self.requests: list[tuple[str, Any]] = []

    def make_request(self, method: RPCEndpoint, params: Any) -> RPCResponse:
        self.requests.append((method, params))
        match method:
            case "eth_chainId":
                return {"jsonrpc": "2.0", "id": len(self.requests), "result": hex(self.chain_id)}
            case "eth_call":
                return {"jsonrpc": "2.0", "id": len(self.requests), **self.eth_call_response}  # type: ignore[typeddict-item]
            case _:
                raise NotImplementedError(method)

    def eth_call_params(self) -> list[Any]:
        return [params for method, params in self.requests if method == "eth_call"]
