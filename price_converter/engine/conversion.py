"""
Conversion — вычисление четырёх производных цен

ФОРМУЛЫ (A: сумма в IQD):
    usd            = round10(A / rate)
    iqd_card       = round10((A * rate) / card_divisor)
    iqd_market     = round10(A / rate) * market_rate
    after_discount = round10(A / rate) * 0.85

round10: округление half-up до 10 дробных знаков. Умножения не округляются.

ЗАЩИТА ОТ ДЕЛЕНИЯ НА НОЛЬ:
- rate == 0          → usd, iqd_market, after_discount = 0
- card_divisor == 0  → iqd_card = 0

Функция чистая и идемпотентна: одинаковые аргументы дают одинаковые Decimal.
"""

import logging
from decimal import Decimal
from typing import Final

from price_converter.core.domain.constants import ConversionConstants
from price_converter.core.domain.result import ConversionResult
from price_converter.core.math.decimal_safeguards import (
    DIVISION_SCALE,
    ZERO,
    is_zero,
    multiply_exact,
    safe_divide,
)

logger = logging.getLogger(__name__)

# Множитель цены после скидки 15%
DISCOUNT_FACTOR: Final[Decimal] = Decimal("0.85")


def convert(amount: Decimal, constants: ConversionConstants) -> ConversionResult:
    """
    Конвертация суммы в четыре производных значения.

    Args:
        amount: Сумма в IQD (результат parse_amount)
        constants: Текущие константы конвертации

    Returns:
        ConversionResult с полной точностью

    Examples:
        >>> convert(Decimal(372), ConversionConstants()).usd
        Decimal('1.0000000000')
    """
    if is_zero(constants.rate):
        logger.debug("rate is zero, usd/iqd_market/after_discount fall back to zero")
        usd = iqd_market = after_discount = ZERO
    else:
        usd = safe_divide(amount, constants.rate, DIVISION_SCALE)
        iqd_market = multiply_exact(usd, constants.market_rate)
        after_discount = multiply_exact(usd, DISCOUNT_FACTOR)

    if is_zero(constants.card_divisor):
        logger.debug("card_divisor is zero, iqd_card falls back to zero")
    iqd_card = safe_divide(
        multiply_exact(amount, constants.rate),
        constants.card_divisor,
        DIVISION_SCALE,
    )

    return ConversionResult(
        usd=usd,
        iqd_card=iqd_card,
        iqd_market=iqd_market,
        after_discount=after_discount,
    )
