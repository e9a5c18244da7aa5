import os

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from cliptails.config import ClipHistorySettings, get_settings
from cliptails.database import Base, DatabaseSessionGenerator
from cliptails.host import DocumentContext, MemoryHost, MemoryStatusDisplay
from cliptails.persistence import MemoryStateStorage
from cliptails.session import ClipHistorySession
from cliptails.store import HistoryStore


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, now: int = 1_000) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> int:
        self.now += ms
        return self.now


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's environment out of settings under test."""
    for key in list(os.environ):
        if key.startswith(("TAILS_", "CLIPTAILS_")):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(scope="session")
def test_database_url():
    """Provide a test database URL (in-memory SQLite)."""
    return "sqlite:///:memory:"


@pytest.fixture(scope="session")
def engine(test_database_url):
    """Create a test database engine."""
    engine = create_engine(
        test_database_url,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(engine) -> DatabaseSessionGenerator:
    """Session generator on the shared engine; tables are dropped after each test."""
    generator = DatabaseSessionGenerator(engine=engine)
    generator.init_db()
    try:
        yield generator
    finally:
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def settings() -> ClipHistorySettings:
    return ClipHistorySettings(capacity=5)


@pytest.fixture
def store(clock) -> HistoryStore:
    return HistoryStore(capacity=5, clock=clock)


@pytest.fixture
def python_doc() -> DocumentContext:
    return DocumentContext(language_id="python", eol="\n", file_path="/src/app/main.py")


@pytest.fixture
def host() -> MemoryHost:
    return MemoryHost(language_id="python", file_path="/src/app/main.py")


@pytest.fixture
def storage() -> MemoryStateStorage:
    return MemoryStateStorage()


@pytest.fixture
def status() -> MemoryStatusDisplay:
    return MemoryStatusDisplay()


@pytest.fixture
def session(settings, host, storage, status, clock) -> ClipHistorySession:
    session = ClipHistorySession(
        settings, host, storage=storage, status=status, clock=clock
    )
    session.load()
    return session
