"""Data models for localization groups and the aligned key index.

A LocalizationGroup is one logical catalog (e.g. ``Localizable.strings``)
holding one Localization per language. The AlignedIndex maps every key of the
group's master language to one IndexCell per language, so a missing
translation is represented explicitly rather than by a nested ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, NamedTuple, Optional, Tuple


@dataclass(frozen=True)
class LocalizationString:
    """A single translated string for one language.

    Attributes:
        key: Stable identifier shared across languages.
        value: Translated text.
        message: Optional comment attached to the string.
    """

    key: str
    value: str
    message: Optional[str] = None

    @classmethod
    def placeholder(cls, key: str) -> "LocalizationString":
        """Return an empty record used when a language lacks a key."""
        return cls(key=key, value="", message="")


@dataclass
class Localization:
    """All strings of one language within a localization group.

    Attributes:
        language: Language identifier (e.g., "en", "French").
        translations: Key/value records in source order.
    """

    language: str
    translations: List[LocalizationString] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.translations)

    def find(self, key: str) -> Optional[LocalizationString]:
        """Return the record for key, the last one when duplicated."""
        found: Optional[LocalizationString] = None
        for record in self.translations:
            if record.key == key:
                found = record
        return found

    def by_key(self) -> Dict[str, LocalizationString]:
        """Map keys to records; later duplicates replace earlier ones."""
        return {record.key: record for record in self.translations}


@dataclass
class LocalizationGroup:
    """Translation files sharing one logical name across languages.

    Attributes:
        name: Display name of the catalog (e.g., "Localizable.strings").
        localizations: One entry per language, in discovery order.
    """

    name: str
    localizations: List[Localization] = field(default_factory=list)

    @property
    def languages(self) -> List[str]:
        return [localization.language for localization in self.localizations]

    @property
    def is_empty(self) -> bool:
        return all(localization.count == 0 for localization in self.localizations)

    def localization_for(self, language: str) -> Optional[Localization]:
        for localization in self.localizations:
            if localization.language == language:
                return localization
        return None


class CellState(Enum):
    """Presence of a translation for one (key, language) pair."""

    PRESENT = "present"
    MISSING = "missing"


@dataclass(frozen=True)
class IndexCell:
    """One (key, language) slot of the aligned index."""

    state: CellState
    record: Optional[LocalizationString] = None

    @classmethod
    def present(cls, record: LocalizationString) -> "IndexCell":
        return cls(CellState.PRESENT, record)

    @classmethod
    def missing(cls) -> "IndexCell":
        return cls(CellState.MISSING, None)

    @property
    def is_present(self) -> bool:
        return self.state is CellState.PRESENT


@dataclass(frozen=True)
class AlignedIndex:
    """Master keys aligned against every language of a group.

    Attributes:
        master_language: Language whose keys define the index, if any.
        languages: Language ids with the master first.
        rows: Mapping of key to per-language cells, in ``languages`` order.
    """

    master_language: Optional[str] = None
    languages: Tuple[str, ...] = ()
    rows: Dict[str, Dict[str, IndexCell]] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.rows)

    def __contains__(self, key: object) -> bool:
        return key in self.rows

    def __iter__(self) -> Iterator[str]:
        return iter(self.rows)

    def keys(self) -> List[str]:
        return list(self.rows)

    def has_language(self, language: str) -> bool:
        return language in self.languages

    def cells(self, key: str) -> Dict[str, IndexCell]:
        return self.rows.get(key, {})

    def cell(self, key: str, language: str) -> Optional[IndexCell]:
        """Return the cell for key and language.

        Returns:
            The IndexCell, or None when the key is not indexed or the language
            is not part of the group.
        """
        return self.rows.get(key, {}).get(language)

    def record(self, key: str, language: str) -> Optional[LocalizationString]:
        cell = self.cell(key, language)
        if cell is None or not cell.is_present:
            return None
        return cell.record


class LoadResult(NamedTuple):
    """Outcome of loading a folder: languages, selected group, all groups."""

    languages: Tuple[str, ...]
    group_name: Optional[str]
    groups: Tuple[LocalizationGroup, ...]

    @classmethod
    def empty(cls) -> "LoadResult":
        return cls((), None, ())

    @property
    def is_empty(self) -> bool:
        return self.group_name is None


__all__ = [
    "AlignedIndex",
    "CellState",
    "IndexCell",
    "LoadResult",
    "Localization",
    "LocalizationGroup",
    "LocalizationString",
]
