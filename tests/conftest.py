import os
import tempfile

# Set environment variables BEFORE any imports that might use settings
_test_db_dir = tempfile.mkdtemp()
_test_db_path = os.path.join(_test_db_dir, "test_pet_insurance.db")
os.environ["DATABASE_URL"] = f"sqlite:///{_test_db_path}"
os.environ["QUOTING_SERVICE_URL"] = "http://quoting.test/api/v1/quotations"

import pytest
from alembic import command
from alembic.config import Config
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, sessionmaker

import app.repositories.quotation as quotation_repo
from app.api.deps import get_db, get_event_notifier, get_quotation_client
from app.domain.policy import PolicyIssuedEvent
from app.domain.quotation import Quotation
from app.main import app


class RepositoryQuotationLookupClient:
    """Lookup client that reads the quotations table directly instead of going over HTTP."""

    def __init__(self, db: Session):
        self.db = db
        self.calls: list[str] = []

    async def find_by_id(self, quotation_id: str) -> Quotation | None:
        self.calls.append(quotation_id)
        return quotation_repo.get_quotation_by_id(self.db, quotation_id)


class RecordingEventNotifier:
    def __init__(self, error: Exception | None = None):
        self.events: list[PolicyIssuedEvent] = []
        self.error = error

    async def publish_policy_issued(self, event: PolicyIssuedEvent) -> None:
        if self.error is not None:
            raise self.error
        self.events.append(event)


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test and run migrations."""
    temp_db_dir = tempfile.mkdtemp()
    test_db_path = os.path.join(temp_db_dir, "test.db")
    test_db_url = f"sqlite:///{test_db_path}"

    test_engine = create_engine(
        test_db_url,
        connect_args={"check_same_thread": False},
        poolclass=None,  # Don't use connection pooling for SQLite
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

    alembic_cfg = Config("alembic.ini")
    alembic_cfg.set_main_option("sqlalchemy.url", test_db_url)
    command.upgrade(alembic_cfg, "head")

    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        test_engine.dispose()

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
def lookup_client(db: Session) -> RepositoryQuotationLookupClient:
    return RepositoryQuotationLookupClient(db)


@pytest.fixture(scope="function")
def notifier() -> RecordingEventNotifier:
    return RecordingEventNotifier()


@pytest.fixture(scope="function")
def client(db_session, lookup_client, notifier):
    """Create a test client with database, lookup and notifier overrides."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_quotation_client] = lambda: lookup_client
    app.dependency_overrides[get_event_notifier] = lambda: notifier

    yield TestClient(app)

    app.dependency_overrides.clear()
