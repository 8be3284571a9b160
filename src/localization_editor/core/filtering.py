"""Free-text filtering over an aligned index."""

from __future__ import annotations

from typing import List, Optional

from .models import AlignedIndex
from .normalize import normalize


def filter_keys(index: AlignedIndex, search_string: Optional[str]) -> List[str]:
    """Return the sorted keys matching a search string.

    A key matches when its name or any present translation contains the
    search string, ignoring case and diacritics. An empty or missing search
    string matches every key.

    Args:
        index: Index to filter.
        search_string: Text typed by the user; None or "" resets the filter.

    Returns:
        Matching keys in ascending order of the raw key.
    """
    if not search_string:
        return sorted(index.keys())

    needle = normalize(search_string)
    keys: List[str] = []
    for key in index:
        # key match, no need to check the translations
        if needle in normalize(key):
            keys.append(key)
            continue
        for cell in index.cells(key).values():
            if cell.is_present and needle in normalize(cell.record.value):
                keys.append(key)
                break

    return sorted(keys)


__all__ = ["filter_keys"]
