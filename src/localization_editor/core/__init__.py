"""Core models and engine for aligning, filtering and querying translations.

Exports:
    LocalizationString, Localization, LocalizationGroup: Loaded translation data.
    AlignedIndex, IndexCell, CellState: Master keys aligned across languages.
    LoadResult: Languages, selected group name and groups from a load.
    LocalizationsDataSource: Row-addressable engine used by display lists.
    normalize: Case and diacritic folding used by search.
"""

from .models import (
    AlignedIndex,
    CellState,
    IndexCell,
    LoadResult,
    Localization,
    LocalizationGroup,
    LocalizationString,
)
from .errors import (
    LocalizationEditorError,
    NoSelectionError,
    RowOutOfRangeError,
    UnknownGroupError,
)
from .normalize import normalize, normalized_contains
from .alignment import build_index, order_languages, select_master
from .filtering import filter_keys
from .data_source import LocalizationsDataSource

__all__ = [
    "AlignedIndex",
    "CellState",
    "IndexCell",
    "LoadResult",
    "Localization",
    "LocalizationEditorError",
    "LocalizationGroup",
    "LocalizationString",
    "LocalizationsDataSource",
    "NoSelectionError",
    "RowOutOfRangeError",
    "UnknownGroupError",
    "build_index",
    "filter_keys",
    "normalize",
    "normalized_contains",
    "order_languages",
    "select_master",
]
