from typing import List, Optional

from fastapi import APIRouter, Depends, Header, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from kanban.core import actions
from kanban.data.assignees import ASSIGNEES
from kanban.db.session import get_db
from kanban.schemas.assignee import AssigneeRead
from kanban.schemas.board import BoardRead

router = APIRouter(prefix="/api", tags=["board"])


@router.get("/board", response_model=BoardRead)
async def get_board(
    response: Response,
    if_none_match: Optional[str] = Header(default=None),
    db: AsyncSession = Depends(get_db),
):
    """Full board: columns and tasks in display order. 304 when the client's copy is current."""
    board = await actions.get_board(db)
    etag = actions.board_etag(board)
    if if_none_match == etag:
        return Response(status_code=status.HTTP_304_NOT_MODIFIED, headers={"ETag": etag})

    response.headers["ETag"] = etag
    return board


@router.get("/assignees", response_model=List[AssigneeRead])
async def list_assignees():
    return ASSIGNEES
