"""
Decimal Safeguards — Safe Decimal Math Primitives

Модуль обеспечивает точную десятичную арифметику для всех формул конвертера:
- Точное умножение (без усечения по точности контекста decimal)
- Деление с однократным округлением half-up до фиксированного числа знаков
- Безопасное деление с защитой от деления на ноль (возвращается fallback)
- Проверки конечности и нуля

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Двоичный float никогда не участвует в вычислениях
2. Каждое деление округляется ровно один раз (half-up, от нуля)
3. Умножение не округляется вообще
4. Деление на ноль в safe_divide никогда не происходит (возвращается fallback)
5. Все операции детерминированы: одинаковые входы дают одинаковые Decimal
   (включая экспоненту)
"""

from decimal import (
    MAX_EMAX,
    MIN_EMIN,
    ROUND_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    Context,
    Decimal,
    localcontext,
)
from typing import Final

# =============================================================================
# ПАРАМЕТРЫ ТОЧНОСТИ
# =============================================================================

# Количество дробных знаков для результата каждого деления
DIVISION_SCALE: Final[int] = 10

ZERO: Final[Decimal] = Decimal(0)


# =============================================================================
# ПРОВЕРКИ ЗНАЧЕНИЙ
# =============================================================================


def is_valid_decimal(value: Decimal) -> bool:
    """
    Проверка, является ли Decimal конечным числом (не NaN, не Infinity).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное
    """
    return value.is_finite()


def is_zero(value: Decimal) -> bool:
    """Точная проверка на ноль (без толерантности, scale не важен)."""
    return value.is_zero()


# =============================================================================
# ТОЧНАЯ АРИФМЕТИКА
# =============================================================================


def exact_context(prec: int, rounding: str = ROUND_HALF_EVEN) -> Context:
    """
    Контекст decimal с заданной точностью и максимальным диапазоном экспонент.

    Emax/Emin контекста по умолчанию (±999999) не ограничивают промежуточные
    значения: произведение двух допустимых сумм может выйти за Emax.
    """
    return Context(prec=max(prec, 1), rounding=rounding, Emax=MAX_EMAX, Emin=MIN_EMIN)


def multiply_exact(a: Decimal, b: Decimal) -> Decimal:
    """
    Точное умножение двух Decimal.

    Точность локального контекста равна сумме количества цифр операндов,
    поэтому произведение никогда не округляется. Экспонента результата
    равна сумме экспонент операндов.

    Examples:
        >>> multiply_exact(Decimal("1.0000000000"), Decimal("1410"))
        Decimal('1410.0000000000')
        >>> multiply_exact(Decimal("0.5"), Decimal("0.85"))
        Decimal('0.425')
    """
    digits = len(a.as_tuple().digits) + len(b.as_tuple().digits)
    with localcontext(exact_context(digits)):
        return a * b


def divide_half_up(
    numerator: Decimal,
    denominator: Decimal,
    scale: int = DIVISION_SCALE,
) -> Decimal:
    """
    Деление с округлением half-up (от нуля) до `scale` дробных знаков.

    Частное вычисляется с усечением (ROUND_DOWN) минимум на один знак
    ниже 10**-scale и затем округляется half-up один раз. Усечение не
    меняет исход half-up: половина ulp представима на более мелкой
    позиции. Частное по модулю меньше 10**-(scale + 1) сразу даёт ноль,
    без вычислений. Результат всегда имеет ровно `scale` дробных знаков.

    Args:
        numerator: Числитель
        denominator: Знаменатель (не ноль)
        scale: Количество дробных знаков результата (>= 0)

    Returns:
        Частное с экспонентой -scale

    Raises:
        ZeroDivisionError: Если denominator == 0
        ValueError: Если scale < 0 или операнды не конечны

    Examples:
        >>> divide_half_up(Decimal(372), Decimal(372))
        Decimal('1.0000000000')
        >>> divide_half_up(Decimal(138384), Decimal(135))
        Decimal('1025.0666666667')
        >>> divide_half_up(Decimal(-1), Decimal(8), scale=2)
        Decimal('-0.13')
    """
    if scale < 0:
        raise ValueError(f"scale must be non-negative, got {scale}")

    if not (is_valid_decimal(numerator) and is_valid_decimal(denominator)):
        raise ValueError(f"cannot divide non-finite decimals: {numerator} / {denominator}")

    if is_zero(denominator):
        raise ZeroDivisionError(f"division of {numerator} by zero")

    zero = Decimal(f"0E-{scale}")
    if is_zero(numerator):
        return zero

    # |numerator / denominator| < 10 ** (magnitude + 1)
    magnitude = numerator.adjusted() - denominator.adjusted()
    if magnitude + 1 <= -(scale + 1):
        return zero

    # Цифры от 10**magnitude до 10**-(scale + 1) плюс запасная
    with localcontext(exact_context(magnitude + scale + 3, rounding=ROUND_DOWN)):
        truncated = numerator / denominator
        result = truncated.quantize(Decimal(f"1E-{scale}"), rounding=ROUND_HALF_UP)

    if result.is_zero():
        return zero

    return result


def safe_divide(
    numerator: Decimal,
    denominator: Decimal,
    scale: int = DIVISION_SCALE,
    fallback: Decimal = ZERO,
) -> Decimal:
    """
    Безопасное деление: при нулевом знаменателе возвращается fallback.

    Args:
        numerator: Числитель
        denominator: Знаменатель
        scale: Количество дробных знаков результата
        fallback: Значение при делении на ноль (default: 0)

    Returns:
        divide_half_up(numerator, denominator, scale) или fallback

    Examples:
        >>> safe_divide(Decimal(10), Decimal(4), scale=1)
        Decimal('2.5')
        >>> safe_divide(Decimal(10), Decimal(0))
        Decimal('0')
    """
    if is_zero(denominator):
        return fallback

    return divide_half_up(numerator, denominator, scale)
