"""
Response Models

Shapes of the JSON bodies returned by each endpoint.
Optional fields are the ones the server may omit; RemoteApi decides whether
their absence is an error.
"""

from typing import List, Optional

from pydantic import BaseModel

from networking.models.task import Task


class LoginResponse(BaseModel):
    token: Optional[str]  # key required, value may be null or blank


class RegisterResponse(BaseModel):
    message: str


class GetTasksResponse(BaseModel):
    notes: Optional[List[Task]] = None


class CompleteNoteResponse(BaseModel):
    message: Optional[str] = None


class UserProfileResponse(BaseModel):
    email: Optional[str] = None
    name: Optional[str] = None
