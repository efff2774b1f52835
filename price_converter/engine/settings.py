"""
Settings — редактирование констант конвертации

Редактор настроек передаёт три сырые строки. Каждое поле разбирается
независимо: валидное значение заменяет константу, невалидное (или
отрицательное) оставляет предыдущее. Частично невалидная правка сохраняет
валидные поля и не отклоняется целиком.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal

from price_converter.core.domain.constants import ConversionConstants
from price_converter.engine.parsing import try_parse_decimal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SettingsForm:
    """Сырые строки полей редактора настроек."""

    rate: str
    card_divisor: str
    market_rate: str


def _parse_constant(raw_text: str, current: Decimal, name: str) -> Decimal:
    result = try_parse_decimal(raw_text)

    if result.value is None or result.value < 0:
        logger.debug(f"Invalid {name} {raw_text!r}, keeping {current}")
        return current

    return result.value


def update_constants(
    current: ConversionConstants,
    raw_rate: str,
    raw_card_divisor: str,
    raw_market_rate: str,
) -> ConversionConstants:
    """
    Применение правки настроек.

    Args:
        current: Текущие константы
        raw_rate: Сырая строка поля rate
        raw_card_divisor: Сырая строка поля card_divisor
        raw_market_rate: Сырая строка поля market_rate

    Returns:
        Новый экземпляр ConversionConstants (current не меняется)

    Examples:
        >>> update_constants(ConversionConstants(), "bad", "100", "1500").rate
        Decimal('372')
    """
    return ConversionConstants(
        rate=_parse_constant(raw_rate, current.rate, "rate"),
        card_divisor=_parse_constant(
            raw_card_divisor, current.card_divisor, "card_divisor"
        ),
        market_rate=_parse_constant(raw_market_rate, current.market_rate, "market_rate"),
    )


def constants_to_form(constants: ConversionConstants) -> SettingsForm:
    """
    Предзаполнение редактора настроек текущими константами.

    Значения выводятся в обычной записи без экспоненты ("1000", не "1E+3").
    """
    return SettingsForm(
        rate=format(constants.rate, "f"),
        card_divisor=format(constants.card_divisor, "f"),
        market_rate=format(constants.market_rate, "f"),
    )
