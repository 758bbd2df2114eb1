"""Domain exceptions for macro calculation.

The calculation itself never raises: these errors belong to the edges
where raw input is parsed or where a caller insists on a ratio.
"""


class MacroCalculationError(Exception):
    """Base exception for macro calculation errors."""

    pass


class InvalidProfileInputError(MacroCalculationError):
    """Raised when raw profile fields cannot be turned into numbers."""

    pass


class RatioUnavailableError(MacroCalculationError):
    """Raised when a ratio is required but carries no energy."""

    def __init__(self, level: str):
        super().__init__(f"No macronutrient ratio for {level} level")
        self.level = level
