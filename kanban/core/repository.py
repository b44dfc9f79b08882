"""
Column and task persistence with order-position bookkeeping.

Positions are assigned append-only: a new column goes after the highest
existing order, a new or moved task after the highest order in its column.
Deletes never renumber siblings, so gaps are normal and reads sort by order
with ids as the tie-break.

The max read and the following insert/update are separate statements with
no lock, so two concurrent appends to the same column can both get the same
order. Readers tolerate the tie.

Functions flush but never commit; the caller owns the transaction.
"""
import logging
from typing import Any, Mapping, Optional, Sequence

from sqlalchemy import select, delete, func
from sqlalchemy.ext.asyncio import AsyncSession

from kanban.core.errors import NotFoundError
from kanban.db.models import BoardColumn, Task

logger = logging.getLogger(__name__)

FIRST_COLUMN_ORDER = 1
FIRST_TASK_ORDER = 0

TASK_EDITABLE_FIELDS = ("title", "description", "column_id")


# --- Ordering --- #
async def next_column_order(db: AsyncSession) -> int:
    result = await db.execute(select(func.max(BoardColumn.order)))
    last: Optional[int] = result.scalar_one_or_none()
    return FIRST_COLUMN_ORDER if last is None else last + 1


async def next_task_order(db: AsyncSession, column_id: int) -> int:
    result = await db.execute(
        select(func.max(Task.order)).where(Task.column_id == column_id)
    )
    last: Optional[int] = result.scalar_one_or_none()
    return FIRST_TASK_ORDER if last is None else last + 1


# --- Columns --- #
async def list_columns(db: AsyncSession) -> Sequence[BoardColumn]:
    result = await db.execute(
        select(BoardColumn).order_by(BoardColumn.order, BoardColumn.id)
    )
    return result.scalars().all()


async def get_column(db: AsyncSession, column_id: int) -> BoardColumn:
    column = await db.get(BoardColumn, column_id)
    if column is None:
        raise NotFoundError("Column", column_id)
    return column


async def create_column(db: AsyncSession, title: str) -> BoardColumn:
    column = BoardColumn(title=title, order=await next_column_order(db))
    db.add(column)
    await db.flush()
    logger.info(f"Created column {column.id} at order {column.order}")
    return column


async def update_column(db: AsyncSession, column_id: int, title: str) -> BoardColumn:
    column = await get_column(db, column_id)
    column.title = title
    await db.flush()
    return column


async def delete_column(db: AsyncSession, column_id: int) -> None:
    """Delete a column and every task in it."""
    await get_column(db, column_id)

    # Delete owned tasks first so stores without ON DELETE CASCADE behave the same
    await db.execute(delete(Task).where(Task.column_id == column_id))
    await db.execute(delete(BoardColumn).where(BoardColumn.id == column_id))
    await db.flush()
    logger.info(f"Deleted column {column_id} with its tasks")


# --- Tasks --- #
async def list_tasks(db: AsyncSession) -> Sequence[Task]:
    result = await db.execute(
        select(Task).order_by(Task.order, Task.column_id, Task.id)
    )
    return result.scalars().all()


async def get_task(db: AsyncSession, task_id: int) -> Task:
    task = await db.get(Task, task_id)
    if task is None:
        raise NotFoundError("Task", task_id)
    return task


async def create_task(
    db: AsyncSession,
    title: str,
    column_id: int,
    description: Optional[str] = None,
) -> Task:
    # column_id is checked by the foreign key on flush, not here
    task = Task(
        title=title,
        description=description,
        column_id=column_id,
        order=await next_task_order(db, column_id),
    )
    db.add(task)
    await db.flush()
    logger.info(f"Created task {task.id} in column {column_id} at order {task.order}")
    return task


async def update_task(db: AsyncSession, task_id: int, fields: Mapping[str, Any]) -> Task:
    """
    Edit a task in place. Only the editable keys present in `fields` are
    written, so an absent description is left as stored. Changing column_id
    here keeps the current order; use move_task to append.
    """
    task = await get_task(db, task_id)
    for name in TASK_EDITABLE_FIELDS:
        if name in fields:
            setattr(task, name, fields[name])
    await db.flush()
    return task


async def delete_task(db: AsyncSession, task_id: int) -> bool:
    result = await db.execute(delete(Task).where(Task.id == task_id))
    await db.flush()
    return result.rowcount > 0


async def move_task(db: AsyncSession, task_id: int, target_column_id: int) -> Task:
    task = await get_task(db, task_id)
    task.order = await next_task_order(db, target_column_id)
    task.column_id = target_column_id
    await db.flush()
    logger.info(f"Moved task {task_id} to column {target_column_id} at order {task.order}")
    return task
