"""
Todo Pydantic schemas
Request and response models for the /todos endpoints
Reference: https://docs.pydantic.dev/latest/concepts/models/
"""
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, TypeAdapter, model_validator


class TodoCreate(BaseModel):
    """
    Schema for creating a todo

    Field names are matched case-insensitively ("Task" fills task) and
    unknown fields are ignored. A JSON null leaves the default in place.
    """
    model_config = ConfigDict(extra="ignore")

    task: StrictStr = Field(default="", description="Task text")
    completed: StrictBool = Field(default=False, description="Whether the task is completed")

    @model_validator(mode="before")
    @classmethod
    def fold_field_names(cls, data: Any) -> Any:
        """Map keys onto fields ignoring case; later duplicates win"""
        if data is None:
            return {}
        if not isinstance(data, dict):
            # Left for field validation to reject
            return data
        folded = {}
        for key, value in data.items():
            name = key.lower()
            if name in cls.model_fields and value is not None:
                folded[name] = value
        return folded


class TodoResponse(BaseModel):
    """
    Wire format of a todo: {"id": int, "task": str, "completed": bool}
    created_at stays server-side
    """
    model_config = ConfigDict(from_attributes=True)  # Allow creation from ORM objects

    id: int = Field(..., description="Todo ID")
    task: str = Field(..., description="Task text")
    completed: bool = Field(..., description="Whether the task is completed")


# An empty table is sent as null rather than []
TodoListAdapter = TypeAdapter(Optional[List[TodoResponse]])
