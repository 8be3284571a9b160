"""Row-addressable data source over a selected localization group.

LocalizationsDataSource owns the aligned index, the filtered key list and the
selection state for one editor window. A display list reads it through
``row_count`` and the ``*_at`` queries; edits go through ``update``, which
relays them to the provider without touching the index.

Usage::

    source = LocalizationsDataSource(provider)
    result = source.load("path/to/project")
    source.filter("hello")
    for row in range(source.row_count()):
        print(source.key_at(row), source.localization_at(result.languages[0], row).value)
"""

from __future__ import annotations

import bisect
import logging
import threading
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from PySide6.QtCore import QThreadPool

from ..providers.base import LocalizationProvider, PathLike
from ..utils.background_tasks import BackgroundTaskWorker, CallbackRelay
from ..utils.preferences import (
    DEFAULT_GROUP_NAME,
    get_preferred_group,
    load_preferences,
    remember_folder,
    save_preferences,
)
from .alignment import build_index
from .errors import NoSelectionError, RowOutOfRangeError, UnknownGroupError
from .filtering import filter_keys
from .models import AlignedIndex, LoadResult, LocalizationGroup, LocalizationString

logger = logging.getLogger(__name__)


class LocalizationsDataSource:
    """Aligned, filterable view of one localization group.

    All state changes (``select`` and ``filter``) and all reads happen under
    one lock, so readers never see a filtered key list computed from a
    different index than the current one.

    Attributes:
        provider: Service that loads groups and persists edits.
        preferred_group: Group name selected after a load when present.
        preferences: Optional preferences dict updated with the last folder.
    """

    def __init__(
        self,
        provider: LocalizationProvider,
        *,
        preferred_group: str = DEFAULT_GROUP_NAME,
        preferences: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialize an empty data source.

        Args:
            provider: Localization provider to load from and persist to.
            preferred_group: Name of the group to select after loading.
            preferences: Preferences dict to record the loaded folder in.
        """
        self.provider = provider
        self.preferred_group = preferred_group
        self.preferences = preferences

        self._lock = threading.RLock()
        self._folder: Optional[Path] = None
        self._groups: Tuple[LocalizationGroup, ...] = ()
        self._selected_group: Optional[LocalizationGroup] = None
        self._index = AlignedIndex()
        self._search_string: Optional[str] = None
        self._filtered_keys: List[str] = []
        # worker/relay pairs kept alive until their load completes
        self._pending: List[Tuple[BackgroundTaskWorker, CallbackRelay]] = []

    @classmethod
    def from_preferences(
        cls,
        provider: LocalizationProvider,
        preferences: Optional[Dict[str, Any]] = None,
    ) -> "LocalizationsDataSource":
        """Create a data source configured from user preferences.

        Args:
            provider: Localization provider to use.
            preferences: Preferences dict; read from disk when omitted.

        Returns:
            A data source selecting the preferred group after each load.
        """
        prefs = preferences if preferences is not None else load_preferences()
        return cls(
            provider,
            preferred_group=get_preferred_group(prefs),
            preferences=prefs,
        )

    # ------------------------------------------------------------------
    # Loading and selection
    # ------------------------------------------------------------------

    def load(self, folder: PathLike) -> LoadResult:
        """Load all groups under folder and select the preferred one.

        Blocks while the provider discovers and parses files. When nothing is
        found the current selection is left untouched.

        Args:
            folder: Directory to start the search in.

        Returns:
            The ordered languages of the selected group, its name and all
            discovered groups, or an empty result when there is no data.
        """
        groups = list(self.provider.load_groups(folder))
        if not groups or all(group.is_empty for group in groups):
            logger.error("No localization data found in %s", folder)
            return LoadResult.empty()

        logger.info("Found %d localization group(s) in %s", len(groups), folder)
        group = next(
            (g for g in groups if g.name == self.preferred_group),
            groups[0],
        )
        with self._lock:
            self._folder = Path(folder)
            self._groups = tuple(groups)
            languages = self.select(group)
        if self.preferences is not None:
            remember_folder(self.preferences, folder)
            save_preferences(self.preferences)
        return LoadResult(tuple(languages), group.name, tuple(groups))

    def load_in_background(
        self,
        folder: PathLike,
        on_completion: Callable[[LoadResult], None],
        thread_pool: Optional[QThreadPool] = None,
    ) -> BackgroundTaskWorker:
        """Run ``load`` on a thread pool and report the result once.

        ``on_completion`` runs on the thread that called this method, which
        must run a Qt event loop. If the provider raises, the error is logged
        and ``on_completion`` receives an empty result. Callers must not start
        another load before the callback fires.

        Args:
            folder: Directory to start the search in.
            on_completion: Receives the LoadResult.
            thread_pool: Pool to run on; the global instance when omitted.

        Returns:
            The started worker.
        """
        worker = BackgroundTaskWorker(self.load, folder)

        def finish(result: LoadResult) -> None:
            self._release(worker)
            on_completion(result)

        def fail(details: str) -> None:
            # the worker has already logged the traceback
            finish(LoadResult.empty())

        relay = CallbackRelay(finish, fail)
        relay.attach(worker)
        self._pending.append((worker, relay))
        (thread_pool or QThreadPool.globalInstance()).start(worker)
        return worker

    def _release(self, worker: BackgroundTaskWorker) -> None:
        self._pending = [entry for entry in self._pending if entry[0] is not worker]

    def select(self, group: LocalizationGroup) -> List[str]:
        """Select a group, rebuilding the index and resetting the filter.

        Args:
            group: Group to select.

        Returns:
            Language ids of the group with the master language first.
        """
        index = build_index(group)
        logger.debug(
            "Selected %s: master=%s, %d key(s)",
            group.name,
            index.master_language,
            len(index),
        )
        with self._lock:
            self._selected_group = group
            self._index = index
            self._apply_filter(None)
        return list(index.languages)

    def select_group(self, name: str) -> List[str]:
        """Select a previously discovered group by name.

        Args:
            name: Exact name of the group.

        Returns:
            Language ids of the group with the master language first.

        Raises:
            UnknownGroupError: If no discovered group has that name.
        """
        with self._lock:
            group = next((g for g in self._groups if g.name == name), None)
            if group is None:
                raise UnknownGroupError(name)
            return self.select(group)

    def refresh(self) -> List[str]:
        """Reload the selected group from the provider and select it again.

        Picks up edits persisted since the last selection.

        Returns:
            Language ids of the reloaded group with the master language first.

        Raises:
            NoSelectionError: If nothing has been loaded and selected yet.
            UnknownGroupError: If the group no longer exists.
        """
        with self._lock:
            folder = self._folder
            selected = self._selected_group
        if folder is None or selected is None:
            raise NoSelectionError("Nothing is selected; load a folder first")

        groups = list(self.provider.load_groups(folder))
        group = next((g for g in groups if g.name == selected.name), None)
        if group is None:
            raise UnknownGroupError(selected.name)
        with self._lock:
            self._groups = tuple(groups)
            return self.select(group)

    # ------------------------------------------------------------------
    # Filtering
    # ------------------------------------------------------------------

    def filter(self, search_string: Optional[str]) -> None:
        """Filter rows by search string; None or "" shows every key.

        A key stays visible when its name or any of its translations
        contains the search string, ignoring case and diacritics.
        """
        with self._lock:
            self._apply_filter(search_string)

    def _apply_filter(self, search_string: Optional[str]) -> None:
        self._search_string = search_string
        self._filtered_keys = filter_keys(self._index, search_string)

    # ------------------------------------------------------------------
    # Row queries
    # ------------------------------------------------------------------

    def row_count(self) -> int:
        with self._lock:
            return len(self._filtered_keys)

    def key_at(self, row: int) -> Optional[str]:
        """Return the key shown at row, or None if the row does not exist."""
        with self._lock:
            return self._key_at(row)

    def _key_at(self, row: int) -> Optional[str]:
        if 0 <= row < len(self._filtered_keys):
            return self._filtered_keys[row]
        return None

    def row_of(self, key: str) -> Optional[int]:
        """Return the row showing key, or None if it is filtered out."""
        with self._lock:
            position = bisect.bisect_left(self._filtered_keys, key)
            if position < len(self._filtered_keys) and self._filtered_keys[position] == key:
                return position
            return None

    def message_at(self, row: int) -> Optional[str]:
        """Return the comment for the key at row.

        The comment comes from the first language, in index order, that has a
        translation for the key.

        Returns:
            The comment, or None for an invalid row or when no language has
            a translation.
        """
        with self._lock:
            key = self._key_at(row)
            if key is None:
                return None
            for cell in self._index.cells(key).values():
                if cell.is_present:
                    return cell.record.message
            return None

    def localization_at(self, language: str, row: int) -> LocalizationString:
        """Return the translation of the key at row for language.

        A missing translation is returned as an empty record with the row's
        key, so the result can always be displayed.

        Args:
            language: Language id, one of the selected group's languages.
            row: Row number validated against ``row_count()``.

        Returns:
            The stored record, or an empty placeholder.

        Raises:
            RowOutOfRangeError: If row is not a valid row. This is a caller
                error: rows must come from the current filtered list.
        """
        with self._lock:
            key = self._key_at(row)
            if key is None:
                raise RowOutOfRangeError(row, len(self._filtered_keys))
            record = self._index.record(key, language)
        return record if record is not None else LocalizationString.placeholder(key)

    # ------------------------------------------------------------------
    # Updates
    # ------------------------------------------------------------------

    def update(
        self,
        language: str,
        key: str,
        value: str,
        message: Optional[str] = None,
    ) -> bool:
        """Relay an edit to the provider.

        The index is not patched: ``localization_at`` keeps returning the old
        record until the group is selected again (see ``refresh``).

        Args:
            language: Language of the edited translation.
            key: Key of the edited translation.
            value: New value.
            message: New comment, or None to leave it unchanged.

        Returns:
            True if the edit was relayed, False when the selected group has no
            such language (or nothing is selected).
        """
        with self._lock:
            group = self._selected_group
            localization = group.localization_for(language) if group else None
        if localization is None:
            logger.debug("Ignoring edit of %r for unknown language %r", key, language)
            return False
        self.provider.persist(localization, key, value, message)
        return True

    # ------------------------------------------------------------------
    # State accessors
    # ------------------------------------------------------------------

    @property
    def groups(self) -> Tuple[LocalizationGroup, ...]:
        with self._lock:
            return self._groups

    @property
    def selected_group(self) -> Optional[LocalizationGroup]:
        with self._lock:
            return self._selected_group

    @property
    def master_language(self) -> Optional[str]:
        with self._lock:
            return self._index.master_language

    @property
    def languages(self) -> Sequence[str]:
        with self._lock:
            return self._index.languages

    @property
    def search_string(self) -> Optional[str]:
        with self._lock:
            return self._search_string

    @property
    def filtered_keys(self) -> Tuple[str, ...]:
        with self._lock:
            return tuple(self._filtered_keys)

    @property
    def index(self) -> AlignedIndex:
        with self._lock:
            return self._index


__all__ = ["LocalizationsDataSource"]
