from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr


# PUBLIC_INTERFACE
class TaskCreate(BaseModel):
    """
    Schema for creating a new task.

    Decoding is structural only: title must be a string and done a boolean.
    Unknown keys, including a client supplied id, are ignored.
    """

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {
                "title": "buy milk",
                "done": False,
            }
        },
    )

    title: StrictStr = Field(..., description="Title of the task")
    done: StrictBool = Field(default=False, description="Completion flag")


# PUBLIC_INTERFACE
class TaskOut(BaseModel):
    """
    Schema returned by the API for a task.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "buy milk",
                "done": False,
            }
        }
    )

    id: int = Field(..., description="Unique identifier of the task")
    title: str = Field(..., description="Title of the task")
    done: bool = Field(..., description="Completion flag")
