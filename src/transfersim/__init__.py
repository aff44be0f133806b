from .config import settings
from .logging import logger
from .version import __version__

# isort: split

from . import exceptions
from .calldata import decode_probe_result, encode_probe_calldata
from .invokers import AsyncSimulationInvoker, AsyncWeb3Invoker, SimulationInvoker, Web3Invoker
from .overrides import AccountOverride, build_state_override
from .probe import PROBE_BYTECODE
from .simulation import (
    SimulationResult,
    fee_amount,
    has_transfer_fee,
    received_ratio,
    simulate_transfer,
    simulate_transfer_async,
)
from .validation.evm_values import get_checksum_address, validate_address, validate_uint256

__all__ = (
    "PROBE_BYTECODE",
    "AccountOverride",
    "AsyncSimulationInvoker",
    "AsyncWeb3Invoker",
    "SimulationInvoker",
    "SimulationResult",
    "Web3Invoker",
    "__version__",
    "build_state_override",
    "decode_probe_result",
    "encode_probe_calldata",
    "exceptions",
    "fee_amount",
    "get_checksum_address",
    "has_transfer_fee",
    "logger",
    "received_ratio",
    "settings",
    "simulate_transfer",
    "simulate_transfer_async",
    "validate_address",
    "validate_uint256",
)
