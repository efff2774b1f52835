"""
Core math modules для price_converter

Десятичные математические примитивы с гарантией точности.
"""

from price_converter.core.math.decimal_safeguards import (
    # Precision constants
    DIVISION_SCALE,
    ZERO,
    # Exact arithmetic
    divide_half_up,
    exact_context,
    multiply_exact,
    safe_divide,
    # Checks
    is_valid_decimal,
    is_zero,
)

__all__ = [
    # Decimal Safeguards — Precision constants
    "DIVISION_SCALE",
    "ZERO",
    # Decimal Safeguards — Exact arithmetic
    "divide_half_up",
    "exact_context",
    "multiply_exact",
    "safe_divide",
    # Decimal Safeguards — Checks
    "is_valid_decimal",
    "is_zero",
]
