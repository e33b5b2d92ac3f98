"""Request bodies sent to the Taskie backend."""

from pydantic import BaseModel, ConfigDict, Field


class UserDataRequest(BaseModel):
    """Credentials for register and login"""

    name: str
    email: str
    password: str


class AddTaskRequest(BaseModel):
    """New task payload (server assigns the id)"""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    content: str = ""
    task_priority: int = Field(default=1, alias="taskPriority")
