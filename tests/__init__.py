"""
Test suite for price_converter

Contains:
- tests/unit/          : Unit tests for individual modules
"""
