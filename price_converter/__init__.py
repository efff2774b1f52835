"""
price_converter — headless merchandise price converter.

Converts a price entered in IQD into four derived values (USD, IQD by card,
IQD by market rate, USD after discount) using three user-editable constants.
"""

__version__ = "1.0.0"
