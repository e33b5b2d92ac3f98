"""
Main Thread Dispatcher

Hands callbacks from background workers back to the thread that owns the UI
(or the CLI loop).

Why a queue?
- Workers never touch caller state directly
- Callbacks run in posting order on one thread
- The owner decides when to drain (e.g. once per event-loop tick)
"""

import logging
import queue
from typing import Any, Callable, Optional, Tuple


class MainThreadDispatcher:
    """
    Thread-safe FIFO of pending callbacks.

    Usage:
        dispatcher = MainThreadDispatcher()
        async_api = AsyncRemoteApi(api, dispatcher=dispatcher)
        async_api.get_tasks(callback=show_tasks)

        # in the main loop
        dispatcher.process_pending()
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)
        self._callbacks: "queue.Queue[Tuple[Callable[..., Any], tuple]]" = queue.Queue()

    def post(self, callback: Callable[..., Any], *args: Any) -> None:
        """Queue `callback(*args)` for the main thread (callable from any thread)"""
        self._callbacks.put((callback, args))

    def process_pending(self, timeout: Optional[float] = None) -> int:
        """
        Run queued callbacks on the calling thread.

        Args:
            timeout: Seconds to wait for the first callback (None = don't wait)

        Returns:
            Number of callbacks run
        """
        processed = 0

        if timeout is not None:
            try:
                callback, args = self._callbacks.get(timeout=timeout)
            except queue.Empty:
                return 0
            self._invoke(callback, args)
            processed += 1

        while True:
            try:
                callback, args = self._callbacks.get_nowait()
            except queue.Empty:
                break
            self._invoke(callback, args)
            processed += 1

        return processed

    @property
    def pending_count(self) -> int:
        """Approximate number of queued callbacks"""
        return self._callbacks.qsize()

    def _invoke(self, callback: Callable[..., Any], args: tuple) -> None:
        try:
            callback(*args)
        finally:
            self._callbacks.task_done()
