"""
Conversion engine.

Pure functions over the domain models: input parsing, conversion,
settings editing and display formatting.
"""

from price_converter.engine.conversion import DISCOUNT_FACTOR, convert
from price_converter.engine.formatting import (
    DEFAULT_DISPLAY_FORMAT,
    DisplayFormat,
    format_decimal,
)
from price_converter.engine.parsing import (
    GROUPING_SEPARATOR,
    ParseResult,
    parse_amount,
    try_parse_decimal,
)
from price_converter.engine.settings import (
    SettingsForm,
    constants_to_form,
    update_constants,
)

__all__ = [
    # Parsing
    "GROUPING_SEPARATOR",
    "ParseResult",
    "parse_amount",
    "try_parse_decimal",
    # Conversion
    "DISCOUNT_FACTOR",
    "convert",
    # Settings
    "SettingsForm",
    "constants_to_form",
    "update_constants",
    # Formatting
    "DEFAULT_DISPLAY_FORMAT",
    "DisplayFormat",
    "format_decimal",
]
