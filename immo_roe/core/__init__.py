"""Core financial helpers and cross-cutting concerns."""

from .exceptions import (
    ConfigurationError,
    ImmoRoeError,
    InvalidParameterError,
    SimulationError,
)
from .financial import calculate_annuity, split_payment

__all__ = [
    "calculate_annuity",
    "split_payment",
    # Exceptions
    "ImmoRoeError",
    "SimulationError",
    "InvalidParameterError",
    "ConfigurationError",
]
