from kanban.db.models.column import BoardColumn
from kanban.db.models.task import Task

__all__ = ["BoardColumn", "Task"]
