"""Domain exceptions for macro calculation."""

from .domain_errors import (
    InvalidProfileInputError,
    MacroCalculationError,
    RatioUnavailableError,
)

__all__ = [
    "MacroCalculationError",
    "InvalidProfileInputError",
    "RatioUnavailableError",
]
