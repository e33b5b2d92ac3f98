"""
Data models for the Taskie API.

Public API:
    - Task, UserProfile: domain objects
    - UserDataRequest, AddTaskRequest: request bodies
    - *Response: decoded response bodies
"""

from networking.models.requests import AddTaskRequest, UserDataRequest
from networking.models.responses import (
    CompleteNoteResponse,
    GetTasksResponse,
    LoginResponse,
    RegisterResponse,
    UserProfileResponse,
)
from networking.models.task import Task, UserProfile

__all__ = [
    "AddTaskRequest",
    "CompleteNoteResponse",
    "GetTasksResponse",
    "LoginResponse",
    "RegisterResponse",
    "Task",
    "UserDataRequest",
    "UserProfile",
    "UserProfileResponse",
]
