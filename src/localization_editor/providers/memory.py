"""Localization provider backed by in-memory groups.

Useful for embedding the editor core where groups are produced elsewhere,
and for tests. Persisted edits are recorded and applied to the provider's own
copies of the groups, so they appear on the next ``load_groups`` call.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Tuple, Union

from ..core.models import Localization, LocalizationGroup, LocalizationString
from .base import PathLike

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PersistedEdit:
    """One edit received through ``persist``.

    Attributes:
        language: Language of the edited localization.
        key: Key of the edited string.
        value: New value.
        message: New comment, or None to keep the existing one.
    """

    language: str
    key: str
    value: str
    message: Optional[str]


class InMemoryLocalizationProvider:
    """Serves fixed localization groups and records edits.

    Attributes:
        edits: Every edit received, in call order.
    """

    def __init__(
        self,
        groups: Union[
            Iterable[LocalizationGroup], Mapping[str, Iterable[LocalizationGroup]]
        ] = (),
    ) -> None:
        """Initialize the provider.

        Args:
            groups: Either groups served for every root, or a mapping from
                root path to the groups found under it.
        """
        self._by_root: Optional[Dict[str, List[LocalizationGroup]]] = None
        self._groups: List[LocalizationGroup] = []
        if isinstance(groups, Mapping):
            self._by_root = {
                self._root_key(root): copy.deepcopy(list(found))
                for root, found in groups.items()
            }
        else:
            self._groups = copy.deepcopy(list(groups))
        self.edits: List[PersistedEdit] = []
        # id of a stored localization -> (newest served copy, stored original)
        self._origins: Dict[int, Tuple[Localization, Localization]] = {}

    @staticmethod
    def _root_key(root: PathLike) -> str:
        return Path(root).as_posix()

    def _stored_groups(self, root: Optional[PathLike] = None) -> List[LocalizationGroup]:
        if self._by_root is None:
            return self._groups
        if root is None:
            return [group for found in self._by_root.values() for group in found]
        return self._by_root.get(self._root_key(root), [])

    def load_groups(self, root: PathLike) -> List[LocalizationGroup]:
        """Return copies of the groups stored for root."""
        stored_groups = self._stored_groups(root)
        groups = copy.deepcopy(stored_groups)
        for served, stored in zip(groups, stored_groups):
            for served_loc, stored_loc in zip(served.localizations, stored.localizations):
                self._origins[id(stored_loc)] = (served_loc, stored_loc)
        logger.debug("Serving %d localization group(s) for %s", len(groups), root)
        return groups

    def persist(
        self,
        localization: Localization,
        key: str,
        value: str,
        message: Optional[str],
    ) -> None:
        """Record an edit and apply it to the stored localization.

        The stored localization is the original of the newest copy served
        by ``load_groups``, or else the first stored localization equal to the
        one given. When the key is missing from it a new record is appended.
        """
        self.edits.append(PersistedEdit(localization.language, key, value, message))
        target = self._find_stored(localization)
        if target is None:
            logger.warning(
                "Edit for %s/%s does not match any stored localization",
                localization.language,
                key,
            )
            return

        # last duplicate is the one the index shows
        for position in reversed(range(len(target.translations))):
            record = target.translations[position]
            if record.key == key:
                target.translations[position] = LocalizationString(
                    key=key,
                    value=value,
                    message=record.message if message is None else message,
                )
                return
        target.translations.append(LocalizationString(key, value, message))

    def _find_stored(self, localization: Localization) -> Optional[Localization]:
        for served, stored in self._origins.values():
            if served is localization:
                return stored
        for group in self._stored_groups():
            for stored in group.localizations:
                if stored.language != localization.language:
                    continue
                if stored is localization or stored == localization:
                    return stored
        return None


__all__ = ["InMemoryLocalizationProvider", "PersistedEdit"]
