"""Aligned, searchable view over per-language localization files.

Loads localization groups through a provider, aligns every language against
the master language's keys and serves filtered rows to a display list.
"""

from .core import (
    LoadResult,
    Localization,
    LocalizationGroup,
    LocalizationString,
    LocalizationsDataSource,
    RowOutOfRangeError,
    UnknownGroupError,
)
from .providers import InMemoryLocalizationProvider, LocalizationProvider

__version__ = "1.0.0"

__all__ = [
    "InMemoryLocalizationProvider",
    "LoadResult",
    "Localization",
    "LocalizationGroup",
    "LocalizationProvider",
    "LocalizationString",
    "LocalizationsDataSource",
    "RowOutOfRangeError",
    "UnknownGroupError",
    "__version__",
]
