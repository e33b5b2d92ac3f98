"""
Remote API Service Interface

Abstract interface for Taskie backend transports.
Follows Dependency Inversion Principle - RemoteApi depends on this abstraction,
not on a concrete HTTP library.

Implementations return decoded response models and raise ApiError subclasses.
They do no business validation (blank tokens, empty lists): that is RemoteApi's job.
"""

from abc import ABC, abstractmethod

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


class RemoteApiServiceInterface(ABC):
    """
    One method per backend endpoint.

    Any backend implementation (HTTP, in-memory mock, etc.)
    must implement these methods.
    """

    @abstractmethod
    def register_user(self, request: UserDataRequest) -> RegisterResponse:
        """
        POST /api/register

        Args:
            request: New user's credentials

        Returns:
            RegisterResponse with a human-readable message

        Raises:
            TransportError: Network failure or non-2xx status
            DecodeError: Body empty or not a RegisterResponse
        """

    @abstractmethod
    def login_user(self, request: UserDataRequest) -> LoginResponse:
        """
        POST /api/login

        Returns:
            LoginResponse (token may be missing or blank)
        """

    @abstractmethod
    def get_notes(self, token: str) -> GetTasksResponse:
        """
        GET /api/note

        Args:
            token: Session token, sent verbatim in Authorization

        Returns:
            GetTasksResponse with every task, completed ones included
        """

    @abstractmethod
    def add_task(self, token: str, request: AddTaskRequest) -> Task:
        """
        POST /api/note/add

        Returns:
            The created task with its server-assigned id
        """

    @abstractmethod
    def complete_task(self, token: str, task_id: str) -> CompleteNoteResponse:
        """
        POST /api/note/complete?id=<task_id>

        Returns:
            CompleteNoteResponse (message missing = not confirmed)
        """

    @abstractmethod
    def get_user_profile(self, token: str) -> UserProfileResponse:
        """
        GET /api/user/profile

        Returns:
            UserProfileResponse (email/name may be missing)
        """

    def close(self) -> None:
        """Release any held resources (connections, pools)"""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
