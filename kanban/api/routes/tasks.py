from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from kanban.api.responses import action_response
from kanban.core import actions, repository
from kanban.db.session import get_db
from kanban.schemas.task import TaskRead

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.get("/", response_model=List[TaskRead])
async def list_tasks(db: AsyncSession = Depends(get_db)):
    return await repository.list_tasks(db)


@router.post("/")
async def create_task(data: dict, db: AsyncSession = Depends(get_db)):
    result = await actions.create_task(db, data)
    return action_response(result, status.HTTP_201_CREATED)


@router.patch("/{task_id}")
async def update_task(
    task_id: int,
    data: dict,
    db: AsyncSession = Depends(get_db),
):
    """Edit title, description or column. Order is left alone."""
    result = await actions.update_task(db, {**data, "id": task_id})
    return action_response(result)


@router.post("/{task_id}/move")
async def move_task(
    task_id: int,
    data: dict,
    db: AsyncSession = Depends(get_db),
):
    """Append the task to the end of the target column."""
    result = await actions.move_task(db, {**data, "id": task_id})
    return action_response(result)


@router.delete("/{task_id}")
async def delete_task(task_id: int, db: AsyncSession = Depends(get_db)):
    result = await actions.delete_task(db, {"id": task_id})
    return action_response(result)
