"""Converter session — headless screen state bound by a UI layer.

- Holds the current constants and the raw amount string
- Produces result cards, clipboard payloads and settings-form prefill
- Exports JSON-serializable snapshots
"""

from .converter_session import (
    ConverterSession,
    ConverterSnapshot,
    ResultCard,
)

__all__ = [
    "ConverterSession",
    "ConverterSnapshot",
    "ResultCard",
]
