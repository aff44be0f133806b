from transfersim.exceptions.base import TransferSimError, TransferSimTypeError, TransferSimValueError
from transfersim.exceptions.simulation import (
    ResultDecodingError,
    SimulationCallFailed,
    SimulationError,
    SimulationReverted,
)
from transfersim.exceptions.validation import InvalidAddress, InvalidUint256

from . import simulation, validation

__all__ = (
    "InvalidAddress",
    "InvalidUint256",
    "ResultDecodingError",
    "SimulationCallFailed",
    "SimulationError",
    "SimulationReverted",
    "TransferSimError",
    "TransferSimTypeError",
    "TransferSimValueError",
    "simulation",
    "validation",
)
