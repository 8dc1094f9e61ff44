"""
utils package – small, pure‑function helpers.
"""

from .formatting import format_weather, colourize   # noqa: F401

__all__ = [
    "format_weather",
    "colourize",
]
