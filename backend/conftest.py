"""
Pytest configuration file for backend testing.
"""
import os
import sys
from pathlib import Path

# Add the backend directory to Python path so imports work correctly
backend_dir = Path(__file__).parent
if str(backend_dir) not in sys.path:
    sys.path.insert(0, str(backend_dir))

# Tests never touch a real database server
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "testing")

from decimal import Decimal
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from core.auth import User as AuthUser, create_access_token
from core.database import Base, get_db

# Import all models so their tables are registered on Base.metadata
from modules.sales.models.sales_models import Product, User, UserRole
from modules.settings.models import settings_models  # noqa: F401


@pytest.fixture
def test_engine():
    """Fresh in-memory database per test"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(test_engine) -> Generator[Session, None, None]:
    """Create a test database session."""
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestingSessionLocal()
    yield session
    session.close()


@pytest.fixture
def client(db_session: Session):
    """Create a test client that shares the test session."""
    from app.main import app

    def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def admin_user(db_session: Session) -> User:
    user = User(username="admin", role=UserRole.ADMIN, full_name="Administrator")
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture
def agent_user(db_session: Session) -> User:
    user = User(username="agent1", role=UserRole.AGENT, full_name="Field Agent One")
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture
def sample_product(db_session: Session) -> Product:
    product = Product(name="Solar Lamp", sku="SL-100", price=Decimal("25.00"))
    db_session.add(product)
    db_session.commit()
    return product


def _auth_headers(user: User) -> dict:
    token = create_access_token(
        AuthUser(id=user.id, username=user.username, role=user.role, full_name=user.full_name)
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers_admin(admin_user: User) -> dict:
    return _auth_headers(admin_user)


@pytest.fixture
def auth_headers_agent(agent_user: User) -> dict:
    return _auth_headers(agent_user)
