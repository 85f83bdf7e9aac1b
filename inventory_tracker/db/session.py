# inventory_tracker/db/session.py
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from inventory_tracker.core.config import settings

# Seconds a SQLite connection waits for a concurrent movement to release the write lock.
SQLITE_BUSY_TIMEOUT = 15


def connect_args_for(url: str) -> dict[str, Any]:
    if not url.startswith("sqlite"):
        return {}
    args: dict[str, Any] = {"timeout": SQLITE_BUSY_TIMEOUT}
    if "+aiosqlite" not in url:
        args["check_same_thread"] = False
    return args


class Base(DeclarativeBase):
    pass


# Sync engine: Alembic, seed fixtures in tests.
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    connect_args=connect_args_for(settings.DATABASE_URL),
)

SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)
