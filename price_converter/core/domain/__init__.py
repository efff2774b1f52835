"""
Domain models and value objects.

Contains the conversion constants and the conversion result.
"""

from price_converter.core.domain.constants import (
    DEFAULT_CARD_DIVISOR,
    DEFAULT_MARKET_RATE,
    DEFAULT_RATE,
    ConversionConstants,
)
from price_converter.core.domain.result import (
    RESULT_TITLES,
    RESULT_UNITS,
    ConversionResult,
    ResultKind,
)

__all__ = [
    # Constants model
    "DEFAULT_RATE",
    "DEFAULT_CARD_DIVISOR",
    "DEFAULT_MARKET_RATE",
    "ConversionConstants",
    # Result model
    "ConversionResult",
    "ResultKind",
    "RESULT_TITLES",
    "RESULT_UNITS",
]
