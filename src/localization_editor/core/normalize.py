"""Case- and diacritic-insensitive text comparison used by search."""

from __future__ import annotations

import unicodedata


def normalize(text: str) -> str:
    """Fold text so that case and accent differences compare equal.

    Decomposes with NFKD, drops combining marks and casefolds the rest, so
    "Élan", "elan" and "ÉLAN" all normalize to "elan".

    Args:
        text: Raw text to fold.

    Returns:
        The folded text.
    """
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


def normalized_contains(haystack: str, needle: str) -> bool:
    """Return True if needle occurs in haystack after normalization."""
    return normalize(needle) in normalize(haystack)


__all__ = ["normalize", "normalized_contains"]
