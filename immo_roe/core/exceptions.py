"""Custom exceptions for immo_roe.

Domain-specific exception types for better error handling and debugging.
"""

from __future__ import annotations

from typing import Any


class ImmoRoeError(Exception):
    """Base exception for all immo_roe errors."""
    pass


# --- Calculation Errors ---

class SimulationError(ImmoRoeError):
    """Error during financial simulation."""
    pass


class InvalidParameterError(ImmoRoeError):
    """Invalid parameter value provided."""

    def __init__(self, param_name: str, value: Any, reason: str = ""):
        self.param_name = param_name
        self.value = value
        self.reason = reason
        msg = f"Invalid parameter '{param_name}': {value}"
        if reason:
            msg += f" - {reason}"
        super().__init__(msg)


# --- Configuration Errors ---

class ConfigurationError(ImmoRoeError):
    """Error in application configuration."""
    pass
