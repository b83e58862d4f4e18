"""
Models for the widont app.

- base: TimeStampedModel
- option: generic key-value Option store and the WidontSettings proxy
"""

from .base import TimeStampedModel
from .option import Option, WidontSettings, WidontSettingsManager

__all__ = [
    "TimeStampedModel",
    "Option",
    "WidontSettings",
    "WidontSettingsManager",
]
