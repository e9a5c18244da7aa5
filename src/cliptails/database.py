"""
cliptails.database

Shared SQLAlchemy declarative base and session management for ORM entities.

Overview:
- Provides a single `declarative_base()` instance (`Base`) inherited by every
    SQLAlchemy entity in the package.
- Includes a utility class for generating SQLAlchemy sessions bound to the
    configured engine.

Contents:
- Base:
    Singleton `declarative_base` instance.

- DatabaseSessionGenerator:
    - __init__(settings: DatabaseSettings | None = None, engine=None):
        Builds an engine from the settings, or reuses the one given.
    - get_session() -> Session:
        Creates a new synchronous SQLAlchemy session.
    - init_db():
        Creates all tables defined in the ORM models.

Design Notes:
- Passing an existing engine lets tests share one in-memory SQLite database.
- SQLite file URLs get their parent directory created on demand.
"""

from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from cliptails.config import DatabaseSettings


Base = declarative_base()
"""Singleton `declarative_base` instance for ORM models."""


class DatabaseSessionGenerator:
    """
    Utility class to generate SQLAlchemy sessions bound to a specific engine.

    Attributes:
        engine (sqlalchemy.engine.Engine): The SQLAlchemy engine to bind sessions to.
    """

    def __init__(
        self, settings: DatabaseSettings | None = None, engine: Engine | None = None
    ):
        if engine is None:
            settings = settings or DatabaseSettings()
            url = make_url(settings.database_url)
            if url.get_backend_name() == "sqlite" and url.database not in (
                None,
                "",
                ":memory:",
            ):
                Path(url.database).parent.mkdir(parents=True, exist_ok=True)
            engine = create_engine(url)
        self.engine = engine
        self._session_factory = sessionmaker(bind=self.engine)

    def get_session(self) -> Session:
        """
        Creates a new SQLAlchemy session bound to the configured engine.

        Returns:
            sqlalchemy.orm.Session: A new session instance.
        """
        return self._session_factory()

    def init_db(self):
        """
        Initializes the database by creating all tables defined in the ORM models.
        """
        # Register entities on Base.metadata before create_all.
        from cliptails.models import workspace_state  # noqa: F401

        Base.metadata.create_all(self.engine)
