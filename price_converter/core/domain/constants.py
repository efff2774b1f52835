"""
ConversionConstants — Модель констант конвертации

Immutable Pydantic модель трёх пользовательских констант:
- rate: сколько IQD стоит одна единица USD (делитель)
- card_divisor: делитель для цены "по карте"
- market_rate: множитель рыночной цены IQD

Экземпляр создаётся с дефолтами при старте и заменяется целиком при
сохранении настроек (никогда не мутируется). Не персистится.
"""

from decimal import Decimal
from typing import Final

from pydantic import BaseModel, Field

# =============================================================================
# ДЕФОЛТНЫЕ ЗНАЧЕНИЯ
# =============================================================================

DEFAULT_RATE: Final[Decimal] = Decimal("372")

DEFAULT_CARD_DIVISOR: Final[Decimal] = Decimal("135")

DEFAULT_MARKET_RATE: Final[Decimal] = Decimal("1410")


# =============================================================================
# CONVERSION CONSTANTS MODEL
# =============================================================================


class ConversionConstants(BaseModel):
    """
    Константы конвертации.

    Все значения: конечные неотрицательные Decimal без верхней границы.
    NaN/Infinity и отрицательные значения отклоняются pydantic-валидацией.
    """

    rate: Decimal = Field(
        default=DEFAULT_RATE, ge=0, description="Единиц IQD за одну единицу USD"
    )
    card_divisor: Decimal = Field(
        default=DEFAULT_CARD_DIVISOR, ge=0, description="Делитель для цены по карте"
    )
    market_rate: Decimal = Field(
        default=DEFAULT_MARKET_RATE, ge=0, description="Множитель рыночной цены IQD"
    )

    model_config = {"frozen": True}
