"""
HTTP API Service Implementation

Concrete implementation of RemoteApiServiceInterface over HTTPS using httpx.
Every request is JSON in, JSON out, with a fixed 10 second connect/read timeout.
"""

import logging
from typing import Any, Dict, Optional, Type, TypeVar

import httpx
import pydantic

from config.settings import DEFAULT_ADD_TASK_PATH, DEFAULT_BASE_URL
from networking.constants import (
    AUTHORIZATION_HEADER,
    COMPLETE_TASK_PATH,
    CONNECT_TIMEOUT,
    DEFAULT_HEADERS,
    LOGIN_PATH,
    NOTES_PATH,
    READ_TIMEOUT,
    REGISTER_PATH,
    USER_PROFILE_PATH,
)
from networking.errors import DecodeError, HttpStatusError, TransportError
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

ModelT = TypeVar("ModelT", bound=pydantic.BaseModel)


class HttpRemoteApiService(RemoteApiServiceInterface):
    """
    Taskie backend client over HTTP.

    Features:
    - Shared connection pool (one httpx.Client per service)
    - Standard JSON headers on every request
    - Raw token in Authorization (no "Bearer" prefix, the backend expects it verbatim)
    - Failures classified into TransportError / HttpStatusError / DecodeError
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        add_task_path: str = DEFAULT_ADD_TASK_PATH,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize HTTP service.

        Args:
            base_url: Backend root, e.g. "https://taskie-rw.herokuapp.com"
            add_task_path: Endpoint for creating tasks
            transport: Custom httpx transport (tests pass httpx.MockTransport)

        Example:
            service = HttpRemoteApiService("https://taskie-rw.herokuapp.com")
            response = service.login_user(UserDataRequest(...))
        """
        self.logger = logging.getLogger(__name__)
        self.base_url = base_url.rstrip("/")
        self.add_task_path = add_task_path

        self._client = httpx.Client(
            base_url=self.base_url,
            headers=DEFAULT_HEADERS,
            timeout=httpx.Timeout(READ_TIMEOUT, connect=CONNECT_TIMEOUT),
            transport=transport,
        )

        self.logger.info(f"HTTP API service initialized ({self.base_url})")

    # =========================================================================
    # ENDPOINTS
    # =========================================================================

    def register_user(self, request: UserDataRequest) -> RegisterResponse:
        return self._request(
            "POST",
            REGISTER_PATH,
            RegisterResponse,
            json=request.model_dump(),
        )

    def login_user(self, request: UserDataRequest) -> LoginResponse:
        return self._request(
            "POST",
            LOGIN_PATH,
            LoginResponse,
            json=request.model_dump(),
        )

    def get_notes(self, token: str) -> GetTasksResponse:
        return self._request("GET", NOTES_PATH, GetTasksResponse, token=token)

    def add_task(self, token: str, request: AddTaskRequest) -> Task:
        return self._request(
            "POST",
            self.add_task_path,
            Task,
            token=token,
            json=request.model_dump(by_alias=True),
        )

    def complete_task(self, token: str, task_id: str) -> CompleteNoteResponse:
        return self._request(
            "POST",
            COMPLETE_TASK_PATH,
            CompleteNoteResponse,
            token=token,
            params={"id": task_id},
        )

    def get_user_profile(self, token: str) -> UserProfileResponse:
        return self._request("GET", USER_PROFILE_PATH, UserProfileResponse, token=token)

    def close(self) -> None:
        self._client.close()
        self.logger.debug("HTTP client closed")

    # =========================================================================
    # REQUEST PLUMBING
    # =========================================================================

    def _request(
        self,
        method: str,
        path: str,
        model: Type[ModelT],
        token: Optional[str] = None,
        json: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, str]] = None,
    ) -> ModelT:
        """
        Send one request and decode the body into `model`.

        Raises:
            TransportError: Connection, timeout or IO failure
            HttpStatusError: Non-2xx response
            DecodeError: Empty body, invalid JSON, or unexpected shape
        """
        headers = {AUTHORIZATION_HEADER: token} if token is not None else None

        self.logger.debug(f"{method} {path}")

        try:
            response = self._client.request(
                method,
                path,
                json=json,
                params=params,
                headers=headers,
            )
        except httpx.TimeoutException as e:
            raise TransportError(f"{method} {path} timed out: {e}") from e
        except httpx.HTTPError as e:
            raise TransportError(f"{method} {path} failed: {e}") from e

        if not response.is_success:
            raise HttpStatusError(
                f"{method} {path} returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        return self._decode(response, model)

    def _decode(self, response: httpx.Response, model: Type[ModelT]) -> ModelT:
        """Validate a response body against a pydantic model"""
        if not response.content.strip():
            raise DecodeError(f"Empty response body from {response.request.url.path}")

        try:
            return model.model_validate_json(response.content)
        except pydantic.ValidationError as e:
            raise DecodeError(
                f"Unexpected {model.__name__} from {response.request.url.path}: "
                f"{e.error_count()} error(s)"
            ) from e
