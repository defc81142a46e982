"""Run API coroutines off the GUI thread and hand the result back to it.

Qt slots are synchronous, so each submission gets a daemon thread with its
own event loop. Only the most recent submission's result is delivered; older
ones finish in the background and are dropped.
"""

import asyncio
import logging
import threading
from typing import Awaitable, Callable, Optional

from PyQt5.QtCore import QObject, pyqtSignal, pyqtSlot # type: ignore

from .api_client import GENERIC_ERROR_MESSAGE, Outcome


logger = logging.getLogger(__name__)


class OutcomeRunner(QObject):
    # (generation, outcome); emitted from the worker thread, queued to ours
    _completed = pyqtSignal(int, object)

    def __init__(self, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._generation = 0
        self._callback: Optional[Callable[[Outcome], None]] = None
        self._completed.connect(self._deliver)

    @property
    def busy(self) -> bool:
        return self._callback is not None

    def submit(self, factory: Callable[[], Awaitable[Outcome]], callback: Callable[[Outcome], None]) -> int:
        """Start `factory()` in the background; `callback` gets its Outcome.

        Supersedes any earlier submission that has not been delivered yet.
        """
        self._generation += 1
        generation = self._generation
        self._callback = callback
        worker = threading.Thread(target=self._run, args=(generation, factory), daemon=True)
        worker.start()
        return generation

    def discard(self) -> None:
        """Forget the pending submission; its result will be ignored."""
        self._generation += 1
        self._callback = None

    def _run(self, generation: int, factory: Callable[[], Awaitable[Outcome]]) -> None:
        try:
            outcome = asyncio.run(factory())
        except Exception as exc:
            # callbacks always receive an Outcome
            logger.exception(f"[OutcomeRunner] submission #{generation} failed")
            outcome = Outcome(
                success=False,
                message=GENERIC_ERROR_MESSAGE,
                http_status=0,
                transport_ok=False,
                transport_error=str(exc) or exc.__class__.__name__,
            )
        self._completed.emit(generation, outcome)

    @pyqtSlot(int, object)
    def _deliver(self, generation: int, outcome: Outcome) -> None:
        if generation != self._generation or self._callback is None:
            logger.debug(f"[OutcomeRunner] dropping stale result #{generation}")
            return
        callback, self._callback = self._callback, None
        callback(outcome)
