"""ConverterSession — состояние экрана конвертера без привязки к UI-тулкиту.

Сессия владеет двумя значениями, которые редактирует пользователь:
- текущими константами (заменяются целиком при сохранении настроек)
- сырой строкой суммы (заменяется при каждом нажатии клавиши)

Все производные значения (сумма, результат, карточки, тексты для буфера
обмена) пересчитываются при каждом обращении и не кэшируются. Слой
отображения только передаёт ввод и рисует то, что возвращает сессия.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from price_converter.contracts import Contract, validate_payload
from price_converter.core.domain.constants import ConversionConstants
from price_converter.core.domain.result import (
    RESULT_TITLES,
    RESULT_UNITS,
    ConversionResult,
    ResultKind,
)
from price_converter.engine.conversion import convert
from price_converter.engine.formatting import (
    DEFAULT_DISPLAY_FORMAT,
    DisplayFormat,
    format_decimal,
)
from price_converter.engine.parsing import parse_amount
from price_converter.engine.settings import (
    SettingsForm,
    constants_to_form,
    update_constants,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResultCard:
    """Карточка одного результата.

    display_text: значение с единицей измерения ("1 USD"),
    copy_payload: только отформатированное значение для буфера обмена.
    """

    kind: ResultKind
    title: str
    display_text: str
    copy_payload: str


class ConverterSnapshot(BaseModel):
    """Снапшот состояния сессии (immutable, сериализуется в JSON)."""

    constants: ConversionConstants = Field(..., description="Текущие константы")
    raw_input: str = Field(..., description="Сырая строка суммы")
    amount: Decimal = Field(..., description="Разобранная сумма в IQD")
    result: ConversionResult = Field(..., description="Результат конвертации")
    formatted: dict[ResultKind, str] = Field(
        ..., description="Отформатированные значения по видам результата"
    )

    model_config = {"frozen": True}


class ConverterSession:
    """Headless-состояние экрана конвертера."""

    def __init__(
        self,
        constants: Optional[ConversionConstants] = None,
        raw_input: str = "",
        display: DisplayFormat = DEFAULT_DISPLAY_FORMAT,
    ):
        """
        Args:
            constants: начальные константы (default: 372 / 135 / 1410)
            raw_input: начальная строка суммы
            display: конфигурация форматирования чисел
        """
        self.constants = constants or ConversionConstants()
        self.raw_input = raw_input
        self.display = display

    def set_input(self, raw_text: str) -> None:
        self.raw_input = raw_text

    def settings_form(self) -> SettingsForm:
        """Предзаполнение редактора настроек."""
        return constants_to_form(self.constants)

    def apply_settings(
        self,
        raw_rate: str,
        raw_card_divisor: str,
        raw_market_rate: str,
    ) -> ConversionConstants:
        """Сохранение настроек; невалидные поля сохраняют прежние значения.

        Returns:
            Новые константы сессии
        """
        previous = self.constants
        self.constants = update_constants(
            previous, raw_rate, raw_card_divisor, raw_market_rate
        )

        if self.constants != previous:
            logger.info(
                f"Constants updated: {self._summarize(previous)} -> "
                f"{self.constants_summary()}"
            )

        return self.constants

    @property
    def amount(self) -> Decimal:
        return parse_amount(self.raw_input)

    @property
    def result(self) -> ConversionResult:
        return convert(self.amount, self.constants)

    def format_value(self, value: Decimal) -> str:
        return format_decimal(value, self.display)

    def cards(self) -> List[ResultCard]:
        """Четыре карточки результатов в порядке отображения."""
        result = self.result
        cards = []

        for kind in ResultKind:
            text = self.format_value(result.value_of(kind))
            unit = RESULT_UNITS[kind]
            cards.append(
                ResultCard(
                    kind=kind,
                    title=RESULT_TITLES[kind],
                    display_text=f"{text} {unit}" if unit else text,
                    copy_payload=text,
                )
            )

        return cards

    def copy_payload(self, kind: ResultKind) -> str:
        """Текст одного результата для буфера обмена."""
        return self.format_value(self.result.value_of(kind))

    def constants_summary(self) -> str:
        """Сводка текущих констант для подсказки под результатами."""
        return self._summarize(self.constants)

    def snapshot(self) -> ConverterSnapshot:
        amount = self.amount
        result = convert(amount, self.constants)

        return ConverterSnapshot(
            constants=self.constants,
            raw_input=self.raw_input,
            amount=amount,
            result=result,
            formatted={kind: self.format_value(result.value_of(kind)) for kind in ResultKind},
        )

    def snapshot_payload(self) -> Dict[str, Any]:
        """JSON-представление снапшота, проверенное контрактом converter_snapshot.

        Raises:
            jsonschema.ValidationError: Если снапшот нарушает контракт
        """
        payload = self.snapshot().model_dump(mode="json")
        validate_payload(Contract.CONVERTER_SNAPSHOT, payload)
        return payload

    def _summarize(self, constants: ConversionConstants) -> str:
        form = constants_to_form(constants)
        return f"{form.rate} / {form.card_divisor} / {form.market_rate}"
