"""Helpers for building localization groups in tests."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from localization_editor.core import (  # noqa: E402
    Localization,
    LocalizationGroup,
    LocalizationString,
)

Entry = Union[str, Tuple[str, str], Tuple[str, str, Optional[str]]]


def make_localization(language: str, *entries: Entry) -> Localization:
    """Build a Localization from keys, (key, value) or (key, value, message)."""
    records = []
    for entry in entries:
        if isinstance(entry, str):
            records.append(LocalizationString(entry, f"{language}:{entry}", None))
        elif len(entry) == 2:
            records.append(LocalizationString(entry[0], entry[1], None))
        else:
            records.append(LocalizationString(*entry))
    return Localization(language, records)


def make_group(name: str, languages: Dict[str, list]) -> LocalizationGroup:
    """Build a group from an ordered mapping of language -> entries."""
    return LocalizationGroup(
        name,
        [make_localization(language, *entries) for language, entries in languages.items()],
    )


def scenario_a_group() -> LocalizationGroup:
    """English has a, b, c; French has a, b."""
    return make_group(
        "Localizable.strings",
        {
            "English": [("a", "Hello", "greeting"), ("b", "Bye", "farewell"), ("c", "Thanks", None)],
            "French": [("a", "Salut", "salutation"), ("b", "Au revoir", None)],
        },
    )
