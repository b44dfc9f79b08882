from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, StrictInt

from kanban.schemas._fields import Title, Description


class TaskCreate(BaseModel):
    title: Title = Field(default=None, validate_default=True)
    description: Description = None
    column_id: StrictInt


class TaskUpdate(BaseModel):
    id: StrictInt
    title: Title = Field(default=None, validate_default=True)
    description: Description = None
    column_id: StrictInt


class TaskDelete(BaseModel):
    id: StrictInt


class TaskMove(BaseModel):
    id: StrictInt
    target_column_id: StrictInt


class TaskRead(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    column_id: int
    order: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
