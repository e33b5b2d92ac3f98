"""
Remote API

High-level Taskie client: one method per backend operation.

Every method returns a Result (Success or Failure) and never raises.
Service-level exceptions are caught here, at the boundary, and logged once.
"""

import logging
from typing import Callable, List, TypeVar

from networking.auth.session import Session
from networking.constants import ErrorKind
from networking.errors import (
    ApiError,
    EmptyResultError,
    NotAuthenticatedError,
    ValidationError,
)
from networking.interfaces.api_service_interface import RemoteApiServiceInterface
from networking.models import AddTaskRequest, Task, UserDataRequest, UserProfile
from networking.result import Failure, Result, Success

T = TypeVar("T")


class RemoteApi:
    """
    Taskie API client.

    This class:
    - Validates and filters what the service returns
    - Stores the login token in the Session
    - Converts every failure into a Failure result

    Usage:
        session = Session()
        api = RemoteApi(HttpRemoteApiService(base_url), session)

        result = api.login_user(UserDataRequest(name="A", email="a@a.com", password="p"))
        if result.is_success:
            tasks = api.get_tasks()
    """

    def __init__(self, service: RemoteApiServiceInterface, session: Session):
        """
        Initialize remote API.

        Args:
            service: Backend transport (HTTP or mock)
            session: Token holder read by authenticated calls
        """
        self.logger = logging.getLogger(__name__)
        self.service = service
        self.session = session

    # =========================================================================
    # ACCOUNT
    # =========================================================================

    def login_user(self, request: UserDataRequest) -> Result[str]:
        """
        Log in and remember the token.

        Returns:
            Success(token) or Failure (blank token -> ValidationError)
        """

        def call() -> str:
            response = self.service.login_user(request)
            if response.token is None or not response.token.strip():
                raise ValidationError("Unable to authenticate user")
            self.session.set_token(response.token)
            return response.token

        return self._run("login", call)

    def register_user(self, request: UserDataRequest) -> Result[str]:
        """
        Create an account.

        Returns:
            Success(server message) or Failure
        """
        return self._run("register", lambda: self.service.register_user(request).message)

    def get_user_profile(self) -> Result[UserProfile]:
        """
        Fetch the profile, counting incomplete tasks first.

        An empty task list is not fatal here: the profile gets task_count=0.
        Any other task-list failure aborts the call.
        """
        tasks_result = self.get_tasks()

        if isinstance(tasks_result, Failure):
            if not isinstance(tasks_result.error, EmptyResultError):
                return tasks_result
            task_count = 0
        else:
            task_count = len(tasks_result.value)

        def call() -> UserProfile:
            response = self.service.get_user_profile(self._require_token())
            if not response.email or not response.name:
                raise ValidationError("No data available")
            return UserProfile(
                email=response.email,
                name=response.name,
                task_count=task_count,
            )

        return self._run("get_user_profile", call)

    # =========================================================================
    # TASKS
    # =========================================================================

    def get_tasks(self) -> Result[List[Task]]:
        """
        Fetch incomplete tasks, in server order.

        Returns:
            Success(tasks) or Failure. A response with no notes at all is
            Failure(EmptyResultError); notes that are all completed give Success([]).
        """

        def call() -> List[Task]:
            response = self.service.get_notes(self._require_token())
            if not response.notes:
                raise EmptyResultError("No data available")
            return [task for task in response.notes if not task.is_completed]

        return self._run("get_tasks", call)

    def add_task(self, request: AddTaskRequest) -> Result[Task]:
        """
        Create a task.

        Returns:
            Success(task with server-assigned id) or Failure
        """

        def call() -> Task:
            task = self.service.add_task(self._require_token(), request)
            if not task.id.strip():
                raise ValidationError("Server returned a task without an id")
            return task

        return self._run("add_task", call)

    def complete_task(self, task_id: str) -> Result[None]:
        """
        Mark a task completed. There is no way back.

        Returns:
            Success(None) or Failure (no confirmation message -> ValidationError)
        """

        def call() -> None:
            response = self.service.complete_task(self._require_token(), task_id)
            if response.message is None:
                raise ValidationError("No response!")

        return self._run("complete_task", call)

    def delete_task(self, task_id: str) -> Result[None]:
        """
        Report a task as deleted.

        The backend has no delete endpoint, so nothing is sent and the
        server still holds the task. Always succeeds.
        """
        self.logger.warning(
            f"delete_task({task_id}): deletion is not supported by the backend, "
            f"nothing sent, the server keeps the task",
        )
        return Success(None)

    # =========================================================================
    # INTERNALS
    # =========================================================================

    def _require_token(self) -> str:
        token = self.session.get_token()
        if not token.strip():
            raise NotAuthenticatedError("Not logged in")
        return token

    def _run(self, operation: str, call: Callable[[], T]) -> Result[T]:
        """Run `call` and wrap its outcome"""
        try:
            value = call()
        except EmptyResultError as e:
            self.logger.warning(f"{operation} returned no data: {e}")
            return Failure(e)
        except ApiError as e:
            self.logger.error(f"{operation} failed ({e.kind.value}): {e}")
            return Failure(e)
        except Exception as e:
            self.logger.error(f"{operation} failed unexpectedly: {e}", exc_info=True)
            return Failure(ApiError(f"Unexpected error: {e}", ErrorKind.UNEXPECTED))

        self.logger.info(f"{operation} succeeded")
        return Success(value)
