"""
Agency Backend - Main Application Entry Point
"""
import logging
from urllib.parse import urlparse, urlunparse

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import OperationalError, SQLAlchemyError

from app.api.router import api_router
from app.core.config import settings
from app.core.constants import DEFAULT_VERSION
from app.core.errors import (
    http_exception_handler,
    validation_exception_handler,
    persistence_exception_handler,
    confirmation_exception_handler,
    invalid_status_exception_handler,
    not_found_exception_handler,
    generic_exception_handler,
)
from app.core.exceptions import (
    ConfirmationRequired,
    EntityNotFound,
    InvalidStatus,
    PersistenceError,
)
from app.core.logging import setup_logging
from app.db.session import SessionLocal, create_tables
from app.services.bootstrap_service import ensure_initial_admin

# Setup logging first
setup_logging()
logger = logging.getLogger(__name__)


def _mask_database_url(url: str) -> str:
    """Mask password in DATABASE_URL for safe logging; show full path for sqlite."""
    try:
        parsed = urlparse(url)
        if parsed.scheme == "sqlite":
            return url
        if parsed.password:
            netloc = f"{parsed.username}:****@{parsed.hostname or ''}"
            if parsed.port:
                netloc += f":{parsed.port}"
            return urlunparse(parsed._replace(netloc=netloc))
    except ValueError:
        return "***"
    return url


create_tables()

app = FastAPI(
    title="Agency Backend",
    description="Marketing site content, customer bookings and orders, careers and admin operations",
    version=settings.VERSION or DEFAULT_VERSION
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register exception handlers
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(PersistenceError, persistence_exception_handler)
app.add_exception_handler(ConfirmationRequired, confirmation_exception_handler)
app.add_exception_handler(InvalidStatus, invalid_status_exception_handler)
app.add_exception_handler(EntityNotFound, not_found_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)


def _is_no_such_table(err: BaseException) -> bool:
    return "no such table" in str(err).lower()


async def _handle_operational_error(request, exc: OperationalError):
    if _is_no_such_table(exc):
        return JSONResponse(
            status_code=500,
            content={"detail": "Run alembic upgrade head"},
        )
    return await generic_exception_handler(request, exc)


app.add_exception_handler(OperationalError, _handle_operational_error)

# Include all API routes under /api/v1
app.include_router(api_router, prefix="/api/v1")


@app.on_event("startup")
def startup_log_config() -> None:
    """Log DATABASE_URL at startup so it can be verified against Alembic."""
    logger.info("DATABASE_URL (app): %s", _mask_database_url(settings.DATABASE_URL))


@app.on_event("startup")
def bootstrap_initial_admin() -> None:
    """Make sure the system always has at least one admin user"""
    db = SessionLocal()
    try:
        ensure_initial_admin(db)
    except OperationalError as e:
        db.rollback()
        if _is_no_such_table(e):
            logger.warning("Database tables not ready yet, skipping initial bootstrap")
        else:
            logger.error("Database error during admin bootstrap: %s", e)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Error during initial admin bootstrap: %s", e)
    finally:
        db.close()
