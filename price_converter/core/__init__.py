"""
Core domain models and decimal math primitives.

This module contains the foundational building blocks that are independent
of any UI toolkit (screens, dialogs, clipboard, etc.).
"""
