"""Utility modules for background tasks and user preferences.

Provides thread pool workers for long-running operations and persistent
storage for user settings like the preferred group and last folder.
"""

from .background_tasks import (
    BackgroundTaskSignals,
    BackgroundTaskWorker,
    CallbackRelay,
)

__all__ = [
    "BackgroundTaskWorker",
    "BackgroundTaskSignals",
    "CallbackRelay",
]
