"""
Mock API Service Implementation

In-memory Taskie backend for testing without a server.
Similar to MockConnectivityManager in core.network.
"""

import logging
import threading
import time
from typing import Dict, List
from uuid import uuid4

from networking.constants import (
    DEMO_EMAIL,
    DEMO_NAME,
    DEMO_PASSWORD,
    DEMO_TASK_ID,
    DEMO_TOKEN,
)
from networking.errors import ApiError, HttpStatusError
from networking.interfaces.api_service_interface import RemoteApiServiceInterface
from networking.models import (
    AddTaskRequest,
    CompleteNoteResponse,
    GetTasksResponse,
    LoginResponse,
    RegisterResponse,
    Task,
    UserDataRequest,
    UserProfileResponse,
)


class MockRemoteApiService(RemoteApiServiceInterface):
    """
    Mock Taskie backend.

    This keeps users, tokens and notes in memory and answers like the
    real server would. Useful for:
    - Unit tests
    - Development without network access
    - CI/CD pipelines
    """

    def __init__(self, simulate_latency: float = 0.0):
        """
        Initialize mock service.

        Args:
            simulate_latency: Seconds to sleep per call (0 = instant)

        Example:
            # Fast mock for unit tests
            service = MockRemoteApiService()

            # Exercise async code paths
            service = MockRemoteApiService(simulate_latency=0.2)
        """
        self.logger = logging.getLogger(__name__)
        self.simulate_latency = simulate_latency

        self._lock = threading.Lock()
        self._users: Dict[str, UserDataRequest] = {}  # email -> credentials
        self._tokens: Dict[str, str] = {}  # token -> email
        self._notes: Dict[str, List[Task]] = {}  # email -> tasks
        self._pending_failures: List[ApiError] = []

        # Track requests for testing
        self.request_history: list[dict] = []

        self.logger.info(f"Mock API service initialized (latency: {simulate_latency}s)")

    # =========================================================================
    # ENDPOINTS
    # =========================================================================

    def register_user(self, request: UserDataRequest) -> RegisterResponse:
        self._begin("register_user", email=request.email)

        with self._lock:
            if request.email in self._users:
                raise HttpStatusError(f"User {request.email} already exists", 409)
            self._users[request.email] = request
            self._notes[request.email] = []

        self.logger.info(f"[MOCK] Registered {request.email}")
        return RegisterResponse(message=f"User {request.name} created")

    def login_user(self, request: UserDataRequest) -> LoginResponse:
        self._begin("login_user", email=request.email)

        with self._lock:
            user = self._users.get(request.email)
            if user is None or user.password != request.password:
                raise HttpStatusError("Invalid credentials", 401)

            token = uuid4().hex
            self._tokens[token] = request.email

        self.logger.info(f"[MOCK] Logged in {request.email}")
        return LoginResponse(token=token)

    def get_notes(self, token: str) -> GetTasksResponse:
        self._begin("get_notes")

        with self._lock:
            email = self._authorize(token)
            notes = list(self._notes[email])

        return GetTasksResponse(notes=notes)

    def add_task(self, token: str, request: AddTaskRequest) -> Task:
        self._begin("add_task", title=request.title)

        task = Task(
            id=uuid4().hex,
            title=request.title,
            content=request.content,
            is_completed=False,
            priority=request.task_priority,
        )

        with self._lock:
            email = self._authorize(token)
            self._notes[email].append(task)

        self.logger.info(f"[MOCK] Added task {task.id}")
        return task

    def complete_task(self, token: str, task_id: str) -> CompleteNoteResponse:
        self._begin("complete_task", task_id=task_id)

        with self._lock:
            email = self._authorize(token)
            notes = self._notes[email]
            for index, task in enumerate(notes):
                if task.id == task_id:
                    notes[index] = task.model_copy(update={"is_completed": True})
                    break
            else:
                raise HttpStatusError(f"Task {task_id} not found", 404)

        return CompleteNoteResponse(message="Task completed")

    def get_user_profile(self, token: str) -> UserProfileResponse:
        self._begin("get_user_profile")

        with self._lock:
            email = self._authorize(token)
            user = self._users[email]

        return UserProfileResponse(email=user.email, name=user.name)

    # =========================================================================
    # INTERNALS
    # =========================================================================

    def _begin(self, operation: str, **details) -> None:
        """Record the call, apply latency, and raise any injected failure"""
        self.request_history.append(
            {"operation": operation, "timestamp": time.time(), **details}
        )

        if self.simulate_latency:
            time.sleep(self.simulate_latency)

        with self._lock:
            failure = self._pending_failures.pop(0) if self._pending_failures else None

        if failure is not None:
            self.logger.warning(f"[MOCK] Injected failure for {operation}: {failure}")
            raise failure

    def _authorize(self, token: str) -> str:
        """Resolve token to user email (caller holds the lock)"""
        email = self._tokens.get(token)
        if email is None:
            raise HttpStatusError("Unauthorized", 401)
        return email

    # =========================================================================
    # TESTING HELPER METHODS
    # =========================================================================

    def fail_next(self, error: ApiError) -> None:
        """
        Make the next call raise `error` instead of answering.

        Failures queue up: calling this twice fails the next two calls.
        """
        with self._lock:
            self._pending_failures.append(error)

    def seed_task(self, email: str, task: Task) -> None:
        """Store a task directly, bypassing add_task (e.g. pre-completed ones)"""
        with self._lock:
            self._notes.setdefault(email, []).append(task)

    def seed_demo_account(self) -> None:
        """
        Add the demo user, its fixed token and one open task.

        Safe to call more than once. Lets a short-lived mock (one CLI
        command per process) answer authenticated calls:
            taskie --mock --token demo-token tasks
        """
        with self._lock:
            if DEMO_EMAIL not in self._users:
                self._users[DEMO_EMAIL] = UserDataRequest(
                    name=DEMO_NAME, email=DEMO_EMAIL, password=DEMO_PASSWORD
                )
                self._notes[DEMO_EMAIL] = [
                    Task(id=DEMO_TASK_ID, title="Try Taskie", content="Complete me")
                ]
            self._tokens[DEMO_TOKEN] = DEMO_EMAIL

        self.logger.debug(f"[MOCK] Demo account {DEMO_EMAIL} ready")

    def get_request_history(self) -> list[dict]:
        """
        Get list of all calls received.

        Returns:
            List of request records
        """
        return self.request_history.copy()

    def clear_history(self) -> None:
        """Clear request history"""
        self.request_history.clear()
        self.logger.debug("[MOCK] Request history cleared")

    def was_called(self, operation: str) -> bool:
        """Check whether an endpoint was hit at least once"""
        return any(record["operation"] == operation for record in self.request_history)
