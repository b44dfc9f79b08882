"""
Board actions called by the HTTP layer.

Each action validates its payload, runs the repository call, commits and
returns an ActionResult. Validation, not-found and database failures all
come back as values; nothing here raises to the caller.

The board is never cached, so the next read sees the write. Clients that
hold a copy revalidate through the board ETag.
"""
import asyncio
import hashlib
import logging
from typing import Any, Awaitable, Callable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from kanban.core import config, repository
from kanban.core.errors import NotFoundError
from kanban.core.validation import validate_payload
from kanban.schemas.board import BoardRead
from kanban.schemas.column import ColumnCreate, ColumnUpdate, ColumnDelete, ColumnRead
from kanban.schemas.result import ActionResult
from kanban.schemas.task import TaskCreate, TaskUpdate, TaskDelete, TaskMove, TaskRead

logger = logging.getLogger(__name__)

PERSISTENCE_ERRORS = (SQLAlchemyError, OSError)


def _error_detail(exc: Exception) -> str:
    # Prefer the driver's message over SQLAlchemy's wrapper text
    orig = getattr(exc, "orig", None)
    return str(orig if orig is not None else exc) or "Unknown error occurred"


async def _commit(
    db: AsyncSession,
    verb: str,
    entity: str,
    operation: Callable[[], Awaitable[Any]],
) -> ActionResult:
    try:
        data = await operation()
        await db.commit()
    except NotFoundError as e:
        await db.rollback()
        logger.warning(f"{verb} {entity}: {e}")
        return ActionResult.fail("not_found", f"{e.entity} not found")
    except PERSISTENCE_ERRORS as e:
        await db.rollback()
        logger.error(f"Failed to {verb} {entity}", exc_info=True)
        return ActionResult.fail("persistence", f"Failed to {verb} {entity}", _error_detail(e))

    return ActionResult.ok(data)


def _invalid(entity: str, errors) -> ActionResult:
    logger.warning(f"Invalid {entity} data: {errors}")
    return ActionResult.fail("validation", f"Invalid {entity} data", errors)


# --- Columns --- #
async def create_column(db: AsyncSession, payload) -> ActionResult:
    data, errors = validate_payload(ColumnCreate, payload)
    if errors:
        return _invalid("column", errors)

    async def run():
        await repository.create_column(db, data.title)

    return await _commit(db, "create", "column", run)


async def update_column(db: AsyncSession, payload) -> ActionResult:
    data, errors = validate_payload(ColumnUpdate, payload)
    if errors:
        return _invalid("column", errors)

    async def run():
        await repository.update_column(db, data.id, data.title)

    return await _commit(db, "update", "column", run)


async def delete_column(db: AsyncSession, payload) -> ActionResult:
    data, errors = validate_payload(ColumnDelete, payload)
    if errors:
        return _invalid("column", errors)

    async def run():
        await repository.delete_column(db, data.id)

    return await _commit(db, "delete", "column", run)


# --- Tasks --- #
async def create_task(db: AsyncSession, payload) -> ActionResult:
    """Create a task at the tail of its column; the result carries the new row."""
    data, errors = validate_payload(TaskCreate, payload)
    if errors:
        return _invalid("task", errors)

    async def run():
        task = await repository.create_task(
            db, data.title, data.column_id, description=data.description
        )
        return TaskRead.model_validate(task)

    return await _commit(db, "create", "task", run)


async def update_task(db: AsyncSession, payload) -> ActionResult:
    data, errors = validate_payload(TaskUpdate, payload)
    if errors:
        return _invalid("task", errors)

    # Only keys the caller sent; a missing description stays as stored
    fields = data.model_dump(include=data.model_fields_set - {"id"})

    async def run():
        await repository.update_task(db, data.id, fields)

    return await _commit(db, "update", "task", run)


async def delete_task(db: AsyncSession, payload) -> ActionResult:
    data, errors = validate_payload(TaskDelete, payload)
    if errors:
        return _invalid("task", errors)

    async def run():
        if not await repository.delete_task(db, data.id):
            logger.info(f"Delete task {data.id}: no such row")

    return await _commit(db, "delete", "task", run)


async def move_task(db: AsyncSession, payload) -> ActionResult:
    data, errors = validate_payload(TaskMove, payload)
    if errors:
        return _invalid("task", errors)

    async def run():
        await repository.move_task(db, data.id, data.target_column_id)

    return await _commit(db, "move", "task", run)


# --- Reads --- #
async def get_board(db: AsyncSession) -> BoardRead:
    """Columns and tasks in display order, read fresh from the database every time."""
    columns = await repository.list_columns(db)
    tasks = await repository.list_tasks(db)

    if config.BOARD_READ_DELAY > 0:
        await asyncio.sleep(config.BOARD_READ_DELAY)

    return BoardRead(
        columns=[ColumnRead.model_validate(c) for c in columns],
        tasks=[TaskRead.model_validate(t) for t in tasks],
    )


def board_etag(board: BoardRead) -> str:
    """Content tag for the board; any committed write, from any process, changes it."""
    digest = hashlib.sha1(board.model_dump_json().encode("utf-8")).hexdigest()
    return f'"{digest}"'
