"""
Contract Validation Module

JSON Schema контракты для сериализованных констант и снапшотов сессии.
"""

from .validators import (
    SCHEMA_DIR,
    Contract,
    contract_errors,
    contract_validator,
    validate_payload,
)

__all__ = [
    "SCHEMA_DIR",
    "Contract",
    "contract_errors",
    "contract_validator",
    "validate_payload",
]
