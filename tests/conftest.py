import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.api.deps import get_schema_store
from app.core.schema_store import InMemorySchemaStore, SqlSchemaStore
from app.db.base import Base


@pytest.fixture()
def store():
    return InMemorySchemaStore()


@pytest.fixture(autouse=True)
def override_get_schema_store(store):
    app.dependency_overrides[get_schema_store] = lambda: store
    yield
    app.dependency_overrides.clear()


@pytest.fixture()
def client():
    return TestClient(app)


@pytest.fixture()
def sql_store():
    """
    SqlSchemaStore over a private in-memory SQLite database. StaticPool keeps
    the single connection alive so every session sees the same tables.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)
    try:
        yield SqlSchemaStore(factory)
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()
