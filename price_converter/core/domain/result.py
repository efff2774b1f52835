"""
ConversionResult — Модель результата конвертации

Четыре производных значения, пересчитываемые целиком при каждом изменении
суммы или констант. Не кэшируются и не обновляются инкрементально.
"""

from decimal import Decimal
from enum import Enum
from typing import Final

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class ResultKind(str, Enum):
    """
    Вид результата конвертации.

    Порядок членов совпадает с порядком отображения карточек результатов.
    """

    USD = "usd"
    IQD_CARD = "iqd_card"
    IQD_MARKET = "iqd_market"
    AFTER_DISCOUNT = "after_discount"


# Суффикс единицы измерения для отображаемого текста (None: без суффикса)
RESULT_UNITS: Final[dict[ResultKind, str | None]] = {
    ResultKind.USD: "USD",
    ResultKind.IQD_CARD: "IQD",
    ResultKind.IQD_MARKET: "IQD",
    ResultKind.AFTER_DISCOUNT: None,
}

# Заголовки карточек результатов
RESULT_TITLES: Final[dict[ResultKind, str]] = {
    ResultKind.USD: "هذا هو السعر بالدولار",
    ResultKind.IQD_CARD: "القيمة بالدينار (بالبطاقة)",
    ResultKind.IQD_MARKET: "الدينار بحسب سعر السوق",
    ResultKind.AFTER_DISCOUNT: "بعد القسمة على 372 وخصم 15٪",
}


# =============================================================================
# CONVERSION RESULT MODEL
# =============================================================================


class ConversionResult(BaseModel):
    """
    Результат конвертации (immutable).

    Значения хранятся с полной точностью: деления округлены до 10 знаков,
    умножения не округляются. Форматирование для отображения выполняется отдельно.
    """

    usd: Decimal = Field(..., description="Цена в USD (amount / rate)")
    iqd_card: Decimal = Field(
        ..., description="Цена в IQD по карте (amount * rate / card_divisor)"
    )
    iqd_market: Decimal = Field(
        ..., description="Цена в IQD по рыночному курсу (usd * market_rate)"
    )
    after_discount: Decimal = Field(
        ..., description="Цена в USD после скидки 15% (usd * 0.85)"
    )

    model_config = {"frozen": True}

    def value_of(self, kind: ResultKind) -> Decimal:
        """Значение результата по его виду."""
        return getattr(self, kind.value)
