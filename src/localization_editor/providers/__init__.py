"""Localization providers.

A provider discovers localization groups under a root folder and persists
edits. The data source depends only on the LocalizationProvider protocol.
"""

from .base import LocalizationProvider, PathLike
from .memory import InMemoryLocalizationProvider, PersistedEdit

__all__ = [
    "InMemoryLocalizationProvider",
    "LocalizationProvider",
    "PathLike",
    "PersistedEdit",
]
