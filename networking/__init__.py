"""
Networking Module

Typed client for the Taskie task backend.

Public API:
    - RemoteApi: One method per backend operation, returns Result
    - AsyncRemoteApi: Same operations on a background thread pool
    - MainThreadDispatcher: Delivers async callbacks on the owner thread
    - Session: Login token holder
    - Success / Failure / Result: Operation outcome
    - ApiError and subclasses: Failure classification
    - create_remote_api: Factory function

Usage:
    from networking import Session, create_remote_api
    from networking.models import UserDataRequest

    api = create_remote_api(Session())
    result = api.login_user(UserDataRequest(name="A", email="a@a.com", password="p"))
"""

from networking.async_api import AsyncRemoteApi
from networking.auth.session import Session
from networking.constants import ErrorKind
from networking.dispatcher import MainThreadDispatcher
from networking.errors import (
    ApiError,
    DecodeError,
    EmptyResultError,
    HttpStatusError,
    NotAuthenticatedError,
    TransportError,
    ValidationError,
)
from networking.factory import RemoteApiFactory, create_remote_api
from networking.remote_api import RemoteApi
from networking.result import Failure, Result, Success

# Public API
__all__ = [
    "ApiError",
    "AsyncRemoteApi",
    "DecodeError",
    "EmptyResultError",
    "ErrorKind",
    "Failure",
    "HttpStatusError",
    "MainThreadDispatcher",
    "NotAuthenticatedError",
    "RemoteApi",
    "RemoteApiFactory",
    "Result",
    "Session",
    "Success",
    "TransportError",
    "ValidationError",
    "create_remote_api",
]
