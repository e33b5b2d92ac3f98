"""
Async Remote API

Runs RemoteApi calls on a background thread pool so the caller's thread
never blocks on the network.

Each method returns a Future[Result]. If a callback is given it receives the
Result, on the dispatcher's thread when a dispatcher is set, otherwise on the
worker thread.

There is no cancellation and no ordering between separate calls: sequence
them yourself (wait on the first future) when order matters.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, List, Optional

from config.settings import DEFAULT_MAX_WORKERS
from networking.dispatcher import MainThreadDispatcher
from networking.models import AddTaskRequest, Task, UserDataRequest, UserProfile
from networking.remote_api import RemoteApi
from networking.result import Result

ResultCallback = Callable[[Result], None]


class AsyncRemoteApi:
    """
    Background wrapper around RemoteApi.

    Usage:
        with AsyncRemoteApi(api, dispatcher=dispatcher) as async_api:
            future = async_api.get_tasks(callback=render)
            ...
            dispatcher.process_pending(timeout=1.0)
    """

    def __init__(
        self,
        remote_api: RemoteApi,
        max_workers: int = DEFAULT_MAX_WORKERS,
        dispatcher: Optional[MainThreadDispatcher] = None,
    ):
        """
        Initialize async API.

        Args:
            remote_api: Synchronous client doing the real work
            max_workers: Background thread count
            dispatcher: Where callbacks are delivered (None = worker thread)
        """
        self.logger = logging.getLogger(__name__)
        self.remote_api = remote_api
        self.dispatcher = dispatcher
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix="RemoteApi-Worker",
        )

        self.logger.info(f"Async Remote API initialized ({max_workers} workers)")

    # =========================================================================
    # OPERATIONS
    # =========================================================================

    def login_user(
        self, request: UserDataRequest, callback: Optional[ResultCallback] = None
    ) -> "Future[Result[str]]":
        return self._submit(callback, self.remote_api.login_user, request)

    def register_user(
        self, request: UserDataRequest, callback: Optional[ResultCallback] = None
    ) -> "Future[Result[str]]":
        return self._submit(callback, self.remote_api.register_user, request)

    def get_tasks(
        self, callback: Optional[ResultCallback] = None
    ) -> "Future[Result[List[Task]]]":
        return self._submit(callback, self.remote_api.get_tasks)

    def add_task(
        self, request: AddTaskRequest, callback: Optional[ResultCallback] = None
    ) -> "Future[Result[Task]]":
        return self._submit(callback, self.remote_api.add_task, request)

    def complete_task(
        self, task_id: str, callback: Optional[ResultCallback] = None
    ) -> "Future[Result[None]]":
        return self._submit(callback, self.remote_api.complete_task, task_id)

    def delete_task(
        self, task_id: str, callback: Optional[ResultCallback] = None
    ) -> "Future[Result[None]]":
        return self._submit(callback, self.remote_api.delete_task, task_id)

    def get_user_profile(
        self, callback: Optional[ResultCallback] = None
    ) -> "Future[Result[UserProfile]]":
        return self._submit(callback, self.remote_api.get_user_profile)

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting calls; optionally wait for running ones"""
        self._executor.shutdown(wait=wait)
        self.logger.debug("Async Remote API shut down")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.shutdown()

    # =========================================================================
    # INTERNALS
    # =========================================================================

    def _submit(self, callback: Optional[ResultCallback], fn, *args) -> Future:
        future = self._executor.submit(fn, *args)
        if callback is not None:
            future.add_done_callback(lambda done: self._deliver(callback, done))
        return future

    def _deliver(self, callback: ResultCallback, future: Future) -> None:
        # RemoteApi never raises, so result() is always a Result
        result = future.result()
        if self.dispatcher is not None:
            self.dispatcher.post(callback, result)
        else:
            callback(result)
