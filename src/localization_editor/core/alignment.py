"""Builds the aligned key index for a localization group.

The master localization is the one with the most strings; its keys define the
rows of the index. Every other language is looked up per key and recorded as
present or missing.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from .models import (
    AlignedIndex,
    IndexCell,
    Localization,
    LocalizationGroup,
    LocalizationString,
)


def select_master(group: LocalizationGroup) -> Optional[Localization]:
    """Return the localization with the most strings.

    Ties go to the localization encountered first in the group.

    Args:
        group: Group to inspect.

    Returns:
        The master localization, or None if the group has no languages.
    """
    master: Optional[Localization] = None
    for localization in group.localizations:
        if master is None or localization.count > master.count:
            master = localization
    return master


def order_languages(
    group: LocalizationGroup, master: Optional[Localization]
) -> List[str]:
    """Return the group's language ids with the master language first.

    The remaining languages keep the order they have in the group.
    """
    if master is None:
        return group.languages
    others = [
        localization.language
        for localization in group.localizations
        if localization is not master
    ]
    return [master.language, *others]


def build_index(group: LocalizationGroup) -> AlignedIndex:
    """Align every master key against all languages of the group.

    Args:
        group: Group to index.

    Returns:
        A new AlignedIndex. Empty when the group has no languages or the
        master language has no strings.
    """
    master = select_master(group)
    languages = order_languages(group, master)
    if master is None or master.count == 0:
        return AlignedIndex(
            master_language=master.language if master else None,
            languages=tuple(languages),
        )

    lookups: Dict[str, Dict[str, LocalizationString]] = {}
    for language in languages:
        localization = group.localization_for(language)
        lookups[language] = localization.by_key() if localization else {}

    rows: Dict[str, Dict[str, IndexCell]] = {}
    for record in master.translations:
        cells: Dict[str, IndexCell] = {}
        for language in languages:
            found = lookups[language].get(record.key)
            cells[language] = (
                IndexCell.present(found) if found is not None else IndexCell.missing()
            )
        rows[record.key] = cells

    return AlignedIndex(
        master_language=master.language,
        languages=tuple(languages),
        rows=rows,
    )


__all__ = ["build_index", "order_languages", "select_master"]
