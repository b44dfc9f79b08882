import os

from sqlalchemy.engine import URL

# Local development defaults; override all of these outside a dev machine.
POSTGRES_HOST = os.getenv("POSTGRES_HOST", "localhost")
POSTGRES_PORT = int(os.getenv("POSTGRES_PORT") or 5432)
POSTGRES_USER = os.getenv("POSTGRES_USER", "postgres")
POSTGRES_PASSWORD = os.getenv("POSTGRES_PASSWORD", "postgres")
POSTGRES_DB = os.getenv("POSTGRES_DB", "kanban")


def database_url() -> str:
    """DATABASE_URL if set, otherwise an asyncpg URL built from the POSTGRES_* settings."""
    override = os.getenv("DATABASE_URL")
    if override:
        return override
    return URL.create(
        "postgresql+asyncpg",
        username=POSTGRES_USER,
        password=POSTGRES_PASSWORD,
        host=POSTGRES_HOST,
        port=POSTGRES_PORT,
        database=POSTGRES_DB,
    ).render_as_string(hide_password=False)


SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"

# Detect environment (default to production)
APP_ENV = os.getenv("APP_ENV", "production").lower()
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()]

# Simulated latency for board reads, used to exercise UI loading states
BOARD_READ_DELAY = float(os.getenv("BOARD_READ_DELAY") or 0)


def alembic_url() -> str:
    """database_url() escaped for alembic's ConfigParser, where "%" starts an interpolation."""
    return database_url().replace("%", "%%")
