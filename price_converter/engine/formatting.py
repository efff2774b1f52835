"""
Formatting — текст результатов для отображения и буфера обмена

Формат эквивалентен шаблону "#,##0.######":
- группировка тысяч фиксированным разделителем (не зависит от локали)
- не более 6 дробных знаков, округление half-even
- хвостовые нули дробной части отбрасываются, целое выводится без точки
- минимум одна цифра целой части ("0.5")

Форматирование чисто презентационное и не участвует в вычислениях.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal, localcontext

from price_converter.core.math.decimal_safeguards import exact_context


@dataclass(frozen=True)
class DisplayFormat:
    """Конфигурация отображения чисел."""

    grouping_separator: str = ","
    decimal_separator: str = "."
    max_fraction_digits: int = 6
    rounding: str = ROUND_HALF_EVEN


DEFAULT_DISPLAY_FORMAT = DisplayFormat()


def format_decimal(value: Decimal, display: DisplayFormat = DEFAULT_DISPLAY_FORMAT) -> str:
    """
    Форматирование Decimal для отображения.

    Args:
        value: Конечное значение
        display: Конфигурация отображения

    Returns:
        Сгруппированный текст без хвостовых нулей

    Examples:
        >>> format_decimal(Decimal(1000))
        '1,000'
        >>> format_decimal(Decimal("1000.500000"))
        '1,000.5'
        >>> format_decimal(Decimal("1025.0666666667"))
        '1,025.066667'
    """
    quantum = Decimal(f"1E-{display.max_fraction_digits}")

    prec = max(value.adjusted(), 0) + display.max_fraction_digits + 2

    with localcontext(exact_context(prec)):
        rounded = value.quantize(quantum, rounding=display.rounding).normalize()
        text = format(rounded, ",f")

    if (display.grouping_separator, display.decimal_separator) != (",", "."):
        text = text.translate(
            str.maketrans({",": display.grouping_separator, ".": display.decimal_separator})
        )

    return text
