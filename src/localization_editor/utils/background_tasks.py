"""Thread pool workers for long-running operations.

A BackgroundTaskWorker runs a callable on a QThreadPool thread and reports
the outcome through Qt signals. Slots connected from the UI thread are
invoked on the UI thread, since Qt queues cross-thread signal delivery to the
receiver's thread.
"""

from __future__ import annotations

import logging
import traceback
from typing import Any, Callable

from PySide6.QtCore import QObject, QRunnable, Signal, Slot

logger = logging.getLogger(__name__)


class BackgroundTaskSignals(QObject):
    """Signals emitted by a BackgroundTaskWorker.

    Attributes:
        completed: Emitted with the callable's return value.
        failed: Emitted with a formatted traceback when the callable raises.
    """

    completed = Signal(object)
    failed = Signal(str)


class BackgroundTaskWorker(QRunnable):
    """Runs a callable in a thread pool and emits its result.

    Exactly one of ``completed`` or ``failed`` is emitted per run.

    Attributes:
        fn: The callable to execute.
        args: Positional arguments for fn.
        kwargs: Keyword arguments for fn.
        signals: Signal holder; connect before starting the worker.
    """

    def __init__(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> None:
        """Initialize the worker.

        Args:
            fn: The function to run in the thread pool.
            *args: Arguments to pass to fn.
            **kwargs: Keyword arguments to pass to fn.
        """
        super().__init__()
        self.fn = fn
        self.args = args
        self.kwargs = kwargs
        self.signals = BackgroundTaskSignals()
        # The caller keeps a Python reference; Qt must not delete the runnable.
        self.setAutoDelete(False)

    def run(self) -> None:
        """Execute the callable and emit completed or failed."""
        try:
            result = self.fn(*self.args, **self.kwargs)
        except Exception:
            logger.exception("Background task %r failed", self.fn)
            details = traceback.format_exc()
            self.signals.failed.emit(details)
            return
        self.signals.completed.emit(result)


class CallbackRelay(QObject):
    """Delivers worker signals to plain callbacks on the relay's thread.

    Create the relay on the thread that should run the callbacks (normally
    the UI thread); signals emitted from pool threads are queued to it.
    """

    def __init__(
        self,
        on_completed: Callable[[Any], None],
        on_failed: Callable[[str], None],
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._on_completed = on_completed
        self._on_failed = on_failed

    def attach(self, worker: BackgroundTaskWorker) -> None:
        """Connect the worker's signals to this relay."""
        worker.signals.completed.connect(self.handle_completed)
        worker.signals.failed.connect(self.handle_failed)

    @Slot(object)
    def handle_completed(self, result: Any) -> None:
        self._on_completed(result)

    @Slot(str)
    def handle_failed(self, details: str) -> None:
        self._on_failed(details)


__all__ = ["BackgroundTaskSignals", "BackgroundTaskWorker", "CallbackRelay"]
