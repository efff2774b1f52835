"""
Tests for JSON Schema Contract Validators

Покрывает:
- Загрузку схем и кэширование валидаторов
- Валидацию сериализованных моделей против контрактов
- Отклонение невалидных payload
- Экспорт проверенного снапшота из сессии
"""

import pytest
from jsonschema import ValidationError

from price_converter.contracts import (
    SCHEMA_DIR,
    Contract,
    contract_errors,
    contract_validator,
    validate_payload,
)
from price_converter.core.domain import ConversionConstants
from price_converter.engine.formatting import DisplayFormat
from price_converter.session import ConverterSession

# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def snapshot_data() -> dict:
    """Сериализованный снапшот для суммы 372 с дефолтными константами."""
    session = ConverterSession(raw_input="372")
    return session.snapshot().model_dump(mode="json")


# =============================================================================
# SCHEMA LOADING
# =============================================================================


class TestContractValidator:
    """Тесты загрузки схем"""

    @pytest.mark.parametrize("contract", list(Contract))
    def test_every_contract_has_schema(self, contract: Contract) -> None:
        assert (SCHEMA_DIR / f"{contract.value}.json").is_file()
        assert contract_validator(contract).schema["$id"] == f"{contract.value}.json"

    def test_validator_is_cached(self) -> None:
        first = contract_validator(Contract.CONVERTER_SNAPSHOT)
        second = contract_validator(Contract.CONVERTER_SNAPSHOT)

        assert first is second
        assert first.schema["title"] == "ConverterSnapshot"


# =============================================================================
# CONVERSION CONSTANTS CONTRACT
# =============================================================================


class TestConversionConstantsContract:
    """Тесты контракта conversion_constants"""

    def test_defaults_valid(self) -> None:
        validate_payload(
            Contract.CONVERSION_CONSTANTS, ConversionConstants().model_dump(mode="json")
        )

    def test_exponent_notation_valid(self) -> None:
        data = ConversionConstants(rate="1E+3").model_dump(mode="json")
        assert contract_errors(Contract.CONVERSION_CONSTANTS, data) == []

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValidationError):
            validate_payload(
                Contract.CONVERSION_CONSTANTS,
                {"rate": "-1", "card_divisor": "135", "market_rate": "1410"},
            )

    def test_number_instead_of_string_rejected(self) -> None:
        errors = contract_errors(
            Contract.CONVERSION_CONSTANTS,
            {"rate": 372, "card_divisor": "135", "market_rate": "1410"},
        )
        assert len(errors) == 1
        assert errors[0].startswith("$.rate:")

    def test_missing_field_rejected(self) -> None:
        errors = contract_errors(
            Contract.CONVERSION_CONSTANTS, {"rate": "372", "card_divisor": "135"}
        )
        assert len(errors) == 1
        assert "market_rate" in errors[0]


# =============================================================================
# CONVERTER SNAPSHOT CONTRACT
# =============================================================================


class TestConverterSnapshotContract:
    """Тесты контракта converter_snapshot"""

    def test_snapshot_valid(self, snapshot_data: dict) -> None:
        validate_payload(Contract.CONVERTER_SNAPSHOT, snapshot_data)

    @pytest.mark.parametrize("raw", ["", "abc", "1,000,000", "-5", "1e30", "1e-30"])
    def test_snapshot_valid_for_any_input(self, raw: str) -> None:
        data = ConverterSession(raw_input=raw).snapshot().model_dump(mode="json")
        assert contract_errors(Contract.CONVERTER_SNAPSHOT, data) == []

    def test_zero_constants_snapshot_valid(self) -> None:
        session = ConverterSession(raw_input="5000")
        session.apply_settings("0", "0", "0")
        validate_payload(Contract.CONVERTER_SNAPSHOT, session.snapshot().model_dump(mode="json"))

    @pytest.mark.parametrize(
        "display",
        [
            DisplayFormat(grouping_separator=" "),
            DisplayFormat(grouping_separator=".", decimal_separator=","),
            DisplayFormat(grouping_separator=" ", decimal_separator="٫"),
        ],
    )
    def test_custom_display_format_valid(self, display: DisplayFormat) -> None:
        session = ConverterSession(raw_input="1,000,000", display=display)
        data = session.snapshot().model_dump(mode="json")
        assert contract_errors(Contract.CONVERTER_SNAPSHOT, data) == []

    def test_unknown_result_kind_rejected(self, snapshot_data: dict) -> None:
        snapshot_data["formatted"]["eur"] = "1"
        with pytest.raises(ValidationError):
            validate_payload(Contract.CONVERTER_SNAPSHOT, snapshot_data)

    @pytest.mark.parametrize("text", ["", "1 USD", "abc", ".5", "1,000."])
    def test_malformed_display_text_rejected(self, snapshot_data: dict, text: str) -> None:
        snapshot_data["formatted"]["usd"] = text
        errors = contract_errors(Contract.CONVERTER_SNAPSHOT, snapshot_data)
        assert len(errors) == 1
        assert errors[0].startswith("$.formatted.usd:")

    def test_float_result_rejected(self, snapshot_data: dict) -> None:
        snapshot_data["result"]["usd"] = 1.0
        assert contract_errors(Contract.CONVERTER_SNAPSHOT, snapshot_data) != []


# =============================================================================
# SESSION EXPORT
# =============================================================================


class TestSnapshotPayload:
    """Тесты ConverterSession.snapshot_payload"""

    def test_payload_matches_snapshot(self) -> None:
        session = ConverterSession(raw_input="372")
        assert session.snapshot_payload() == session.snapshot().model_dump(mode="json")

    def test_payload_with_custom_separators(self) -> None:
        session = ConverterSession(
            raw_input="1,000,000",
            display=DisplayFormat(grouping_separator=" ", decimal_separator=","),
        )
        assert session.snapshot_payload()["formatted"]["iqd_market"] == "3 790 322,580645"
