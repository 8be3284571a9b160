"""Interface for services that discover and persist localization files."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Protocol, Union, runtime_checkable

from ..core.models import Localization, LocalizationGroup

PathLike = Union[str, Path]


@runtime_checkable
class LocalizationProvider(Protocol):
    """Source of localization groups and sink for edits.

    Implementations own the file format and on-disk layout. The data source
    only calls the two methods below.
    """

    def load_groups(self, root: PathLike) -> List[LocalizationGroup]:
        """Discover and parse every localization group under root.

        May be slow; the data source calls it off the UI thread when loading
        in the background.
        """
        ...

    def persist(
        self,
        localization: Localization,
        key: str,
        value: str,
        message: Optional[str],
    ) -> None:
        """Write a new value (and optional comment) for key in localization."""
        ...


__all__ = ["LocalizationProvider", "PathLike"]
