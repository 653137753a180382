"""
Pytest configuration and fixtures
"""
import os

# Keep the app's own engine off the working directory during tests
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.pop("VERIFY_ADMIN_URL", None)

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlalchemy.engine import Engine

from app.main import app
from app.db.base import Base
from app.core.deps import get_db
from app.core.security import create_access_token, hash_password
from app import models  # noqa: F401  register every model on Base.metadata
from app.models.user import User
from app.models.user_role import AppRole, UserRoleAssignment


# Use in-memory SQLite for testing
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


# Enable foreign keys for SQLite
@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_conn, connection_record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db():
    """Create a fresh database for each test"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db):
    """Test client fixture with database override"""
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def make_user(db, email, password="secret123", role=None, full_name=None, phone=None, active=True):
    """Create a user, with a role row when role is given"""
    user = User(
        email=email,
        password_hash=hash_password(password),
        full_name=full_name,
        phone=phone,
        active=active,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    if role is not None:
        db.add(UserRoleAssignment(user_id=user.id, role=role.value if isinstance(role, AppRole) else role))
        db.commit()
        db.refresh(user)
    return user


def auth_headers(user, expires_minutes=None):
    token = create_access_token({"sub": str(user.id), "email": user.email}, expires_minutes=expires_minutes)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def customer_user(db):
    """Signed-up customer (no role row)"""
    return make_user(db, "customer@example.com", full_name="Test Customer", phone="01700000000")


@pytest.fixture
def admin_user(db):
    return make_user(db, "admin@example.com", role=AppRole.ADMIN, full_name="Site Admin")


@pytest.fixture
def staff_user(db):
    return make_user(db, "staff@example.com", role=AppRole.STAFF, full_name="Staff Member")


@pytest.fixture
def customer_headers(customer_user):
    return auth_headers(customer_user)


@pytest.fixture
def admin_headers(admin_user):
    return auth_headers(admin_user)


@pytest.fixture
def user_factory(db):
    """make_user bound to the test session"""
    def _make(email, **kwargs):
        return make_user(db, email, **kwargs)
    return _make


@pytest.fixture
def headers_for():
    return auth_headers
