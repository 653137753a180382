"""
Database engine and session factory
"""
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.core.config import settings
from app.db.base import Base

engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    echo=False,
    # SQLite connections are shared across FastAPI's threadpool
    connect_args={"check_same_thread": False} if settings.is_sqlite else {},
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def create_tables() -> None:
    """Create missing tables on SQLite; Postgres deployments run `alembic upgrade head`"""
    from app import models  # noqa: F401  registers every model on Base.metadata

    if settings.is_sqlite:
        Base.metadata.create_all(bind=engine)
