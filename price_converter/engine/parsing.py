"""
Parsing — разбор пользовательского ввода в Decimal

Политика "тихого отката": невалидный ввод никогда не вызывает ошибку.
Результат разбора: явный ParseResult (value=None при неудаче), который
сворачивается в значение по умолчанию на границе:
- поле суммы: ноль
- поле настроек: предыдущее значение константы

Допустимая грамматика числа:
    [+-] (digits [. [digits]] | . digits) [(e|E) [+-] digits]

NaN, Infinity, подчёркивания и любые посторонние символы считаются
невалидным вводом, хотя конструктор Decimal часть из них принимает.
Числа вне диапазона экспонент контекста decimal по умолчанию (скорректированная
экспонента за пределами ±999999) тоже невалидны: результат деления на
константу содержал бы больше миллиона цифр.
"""

import logging
import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Final, Optional

from price_converter.core.math.decimal_safeguards import ZERO

logger = logging.getLogger(__name__)

# Разделитель тысяч, удаляемый из суммы (независимо от локали)
GROUPING_SEPARATOR: Final[str] = ","

_DECIMAL_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?"
)

# Предел |adjusted()| допустимого числа (Emax контекста decimal по умолчанию)
MAX_ADJUSTED_EXPONENT: Final[int] = 999_999


@dataclass(frozen=True)
class ParseResult:
    """Результат разбора строки в Decimal."""

    raw: str
    cleaned: str
    value: Optional[Decimal]

    @property
    def ok(self) -> bool:
        return self.value is not None

    def or_default(self, default: Decimal) -> Decimal:
        """Значение разбора или default при неудаче."""
        if self.value is None:
            return default
        return self.value


def try_parse_decimal(raw_text: str, strip_grouping: bool = False) -> ParseResult:
    """
    Разбор строки в Decimal произвольной точности.

    Args:
        raw_text: Исходная строка
        strip_grouping: Удалить все разделители тысяч перед разбором

    Returns:
        ParseResult; value=None если строка пустая или невалидная
    """
    cleaned = raw_text
    if strip_grouping:
        cleaned = cleaned.replace(GROUPING_SEPARATOR, "")
    cleaned = cleaned.strip()

    failed = ParseResult(raw=raw_text, cleaned=cleaned, value=None)

    if not _DECIMAL_PATTERN.fullmatch(cleaned):
        return failed

    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        # экспонента не помещается в decimal
        return failed

    if not value.is_finite() or abs(value.adjusted()) > MAX_ADJUSTED_EXPONENT:
        return failed

    return ParseResult(raw=raw_text, cleaned=cleaned, value=value)


def parse_amount(raw_text: str) -> Decimal:
    """
    Разбор суммы, введённой пользователем.

    Запятые удаляются, пробелы по краям обрезаются. Пустая или невалидная
    строка даёт ровно ноль.

    Examples:
        >>> parse_amount("1,234.5")
        Decimal('1234.5')
        >>> parse_amount("abc")
        Decimal('0')
    """
    result = try_parse_decimal(raw_text, strip_grouping=True)

    if not result.ok and result.cleaned:
        logger.debug(f"Malformed amount {raw_text!r}, using zero")

    return result.or_default(ZERO)
