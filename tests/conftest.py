import os
import tempfile
from decimal import Decimal
from pathlib import Path

# Set environment variables BEFORE any imports that might use settings
# Use a temporary directory for test database to avoid permission issues
_test_db_dir = tempfile.mkdtemp()
_test_db_path = os.path.join(_test_db_dir, "test_acme.db")
os.environ["DATABASE_URL"] = f"sqlite:///{_test_db_path}"
os.environ["GLOBAL_PREFIX"] = "/api"

import pytest
from alembic import command
from alembic.config import Config
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from acme_api.domain.entities import CarBrand
from acme_api.main import app
from acme_api.repositories.memory import (
    InMemoryCarBrandRepository,
    InMemoryCarInsuranceQuoteRepository,
)
from acme_api.services.quote import QuoteService

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"

BRANDS = [
    CarBrand(id=1, name="Audi", minimum_driver_age=18, yearly_premium=Decimal(250)),
    CarBrand(id=2, name="BMW", minimum_driver_age=18, yearly_premium=Decimal(150)),
    CarBrand(id=3, name="Porsche", minimum_driver_age=25, yearly_premium=Decimal(500)),
]


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test and run migrations."""
    temp_db_dir = tempfile.mkdtemp()
    test_db_path = os.path.join(temp_db_dir, "test.db")
    test_db_url = f"sqlite:///{test_db_path}"

    test_engine = create_engine(
        test_db_url,
        connect_args={"check_same_thread": False},
    )

    # Enable WAL mode to reduce locking issues
    @event.listens_for(test_engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    TestingSessionLocal = sessionmaker(
        autocommit=False, autoflush=False, bind=test_engine
    )

    # Run Alembic migrations to set up the database schema and seed data
    alembic_cfg = Config(str(ALEMBIC_INI))
    alembic_cfg.set_main_option("sqlalchemy.url", test_db_url)
    command.upgrade(alembic_cfg, "head")

    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        test_engine.dispose()

        # Clean up - remove test database file and directory
        for suffix in ["", "-wal", "-shm"]:
            path = f"{test_db_path}{suffix}"
            if os.path.exists(path):
                os.remove(path)
        if os.path.exists(temp_db_dir):
            os.rmdir(temp_db_dir)


@pytest.fixture(scope="function")
def db(db_session):
    """Alias for db_session to match test naming conventions."""
    return db_session


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database dependency override."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    from acme_api.api.deps import get_db

    app.dependency_overrides[get_db] = override_get_db

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def brand_repository() -> InMemoryCarBrandRepository:
    return InMemoryCarBrandRepository(BRANDS)


@pytest.fixture(scope="function")
def quote_repository() -> InMemoryCarInsuranceQuoteRepository:
    return InMemoryCarInsuranceQuoteRepository()


@pytest.fixture(scope="function")
def quote_service(brand_repository, quote_repository) -> QuoteService:
    """Quote service wired to in-memory repositories seeded with BRANDS."""
    return QuoteService(brand_repository, quote_repository)
