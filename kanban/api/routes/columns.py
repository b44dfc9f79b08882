from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from kanban.api.responses import action_response
from kanban.core import actions, repository
from kanban.db.session import get_db
from kanban.schemas.column import ColumnRead

router = APIRouter(prefix="/api/columns", tags=["columns"])


@router.get("/", response_model=List[ColumnRead])
async def list_columns(db: AsyncSession = Depends(get_db)):
    """List columns in board order."""
    return await repository.list_columns(db)


@router.post("/")
async def create_column(data: dict, db: AsyncSession = Depends(get_db)):
    result = await actions.create_column(db, data)
    return action_response(result, status.HTTP_201_CREATED)


@router.patch("/{column_id}")
async def update_column(
    column_id: int,
    data: dict,
    db: AsyncSession = Depends(get_db),
):
    result = await actions.update_column(db, {**data, "id": column_id})
    return action_response(result)


@router.delete("/{column_id}")
async def delete_column(column_id: int, db: AsyncSession = Depends(get_db)):
    """Delete a column along with its tasks."""
    result = await actions.delete_column(db, {"id": column_id})
    return action_response(result)
