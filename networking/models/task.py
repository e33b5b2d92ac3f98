"""
Task Models

Domain objects handed back to callers of RemoteApi.
Field names are Pythonic; wire names (camelCase) are kept as aliases so the
same model decodes server JSON and encodes it back.
"""

from pydantic import BaseModel, ConfigDict, Field


class Task(BaseModel):
    """
    A single task (called a "note" by the backend).

    The id is assigned by the server and never changes. Completion is
    one-way from the client's side: there is no "uncomplete" call.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    title: str = ""
    content: str = ""
    is_completed: bool = Field(default=False, alias="isCompleted")
    priority: int = Field(default=1, alias="taskPriority")


class UserProfile(BaseModel):
    """
    Read-only profile view, computed on fetch.

    task_count is the number of incomplete tasks fetched alongside the
    profile, not a server-side value.
    """

    model_config = ConfigDict(frozen=True)

    email: str
    name: str
    task_count: int = 0
