import os
import sys
import logging
import logging.config
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from contextlib import asynccontextmanager

from kanban.core.config import APP_ENV, CORS_ORIGINS
from kanban.db.base import Base
from kanban.db import models  # noqa: F401  (registers tables on Base.metadata)
from kanban.db.session import engine, async_session, close_db
from kanban.api.routes import board, columns, tasks

# Load logging config if present
if os.path.exists("logging.conf"):
    logging.config.fileConfig("logging.conf", disable_existing_loggers=False)
else:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stdout,
    )
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup logic
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database initialized")

    yield  # App runs here

    await close_db()
    logger.info("Shutting down...")


app = FastAPI(
    title="Kanban Board API",
    version="0.1",
    lifespan=lifespan,
)

# Dev-only CORS settings
if APP_ENV == "development":
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    logger.info("CORS allowed for development environment")
elif CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    logger.info(f"CORS restricted to {CORS_ORIGINS}")

# API routes
app.include_router(board.router)
app.include_router(columns.router)
app.include_router(tasks.router)


@app.api_route("/api/health", methods=["GET", "HEAD"])
async def health():
    status = {"api": "ok", "database": None}
    http_status = 200

    try:
        async with async_session() as db:
            await db.execute(text("SELECT 1"))
        status["database"] = "connected"
    except Exception as e:
        logger.error(f"Health check: database unreachable: {e}")
        status["database"] = f"error: {e}"
        http_status = 503

    return JSONResponse(content=status, status_code=http_status)
