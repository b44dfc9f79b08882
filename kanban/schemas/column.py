from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, StrictInt

from kanban.schemas._fields import Title


class ColumnCreate(BaseModel):
    title: Title = Field(default=None, validate_default=True)


class ColumnUpdate(BaseModel):
    id: StrictInt
    title: Title = Field(default=None, validate_default=True)


class ColumnDelete(BaseModel):
    id: StrictInt


class ColumnRead(BaseModel):
    id: int
    title: str
    order: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
