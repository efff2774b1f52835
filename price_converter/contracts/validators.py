"""
JSON Schema контракты конвертера

Сериализованные модели (model_dump(mode="json")) проверяются против схем,
поставляемых вместе с пакетом (Draft 2020-12):
- conversion_constants: константы, Decimal как строки
- converter_snapshot: снапшот сессии, включая тексты отображения

Схемы загружаются и проходят meta-validation один раз на процесс.
"""

import json
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final, List

from jsonschema import Draft202012Validator, SchemaError

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"


class Contract(str, Enum):
    """Известные контракты; значение совпадает с именем файла схемы."""

    CONVERSION_CONSTANTS = "conversion_constants"
    CONVERTER_SNAPSHOT = "converter_snapshot"


@lru_cache(maxsize=None)
def contract_validator(contract: Contract) -> Draft202012Validator:
    """
    Валидатор контракта (кэшируется).

    Raises:
        ValueError: Если файл не является валидной JSON Schema
    """
    schema_path = SCHEMA_DIR / f"{contract.value}.json"
    schema = json.loads(schema_path.read_text(encoding="utf-8"))

    try:
        Draft202012Validator.check_schema(schema)
    except SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e.message}") from e

    return Draft202012Validator(schema)


def validate_payload(contract: Contract, data: Dict[str, Any]) -> None:
    """
    Проверка JSON payload против контракта.

    Raises:
        jsonschema.ValidationError: Первое найденное несоответствие
    """
    contract_validator(contract).validate(data)


def contract_errors(contract: Contract, data: Dict[str, Any]) -> List[str]:
    """Все несоответствия payload контракту в виде "путь: сообщение"."""
    errors = sorted(
        contract_validator(contract).iter_errors(data),
        key=lambda error: error.json_path,
    )
    return [f"{error.json_path}: {error.message}" for error in errors]
