from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, DateTime, func
from kanban.db.base import Base


def utcnow():
    return datetime.now(timezone.utc)


class BoardColumn(Base):
    __tablename__ = "columns"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    # Unique only by construction: append-only max + 1, no constraint
    order = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), default=utcnow, server_default=func.now(), onupdate=utcnow
    )
