from typing import List
from pydantic import BaseModel

from kanban.schemas.column import ColumnRead
from kanban.schemas.task import TaskRead


class BoardRead(BaseModel):
    columns: List[ColumnRead]
    tasks: List[TaskRead]
