"""
Database - Mastery Store Engine and Sessions

Builds the SQLAlchemy engine behind SqlKeyValueStore. Defaults to a local
SQLite file; any SQLAlchemy URL can be supplied through DATABASE_URL.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from core.quiz.models import Base


DB_DIR = Path(__file__).parent.parent.parent / "logs"
DEFAULT_DB_NAME = "quiz_state"


def is_test_mode() -> bool:
    """Check if running in test mode."""
    return os.getenv("TEST_MODE", "false").lower() == "true"


def get_database_url() -> str:
    """
    Get the database URL from environment variables.

    Uses TEST_MODE to switch to the test database: 'quiz_state' in the URL
    is replaced with 'test_quiz_state'.

    Returns:
        SQLAlchemy connection string
    """
    base_url = os.getenv("DATABASE_URL")
    if not base_url:
        base_url = f"sqlite:///{DB_DIR / DEFAULT_DB_NAME}.db"

    if is_test_mode():
        return base_url.replace(DEFAULT_DB_NAME, f"test_{DEFAULT_DB_NAME}")
    return base_url


def get_engine(db_url: Optional[str] = None) -> Engine:
    """
    Get SQLAlchemy engine for the mastery store.

    Args:
        db_url: Explicit URL; falls back to get_database_url()
    """
    db_url = db_url or get_database_url()
    if db_url.startswith("sqlite:///") and ":memory:" not in db_url:
        Path(db_url.removeprefix("sqlite:///")).parent.mkdir(parents=True, exist_ok=True)
        return create_engine(db_url, echo=False)
    if db_url.startswith("sqlite"):
        # In-memory databases must share one connection across sessions
        return create_engine(
            db_url,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
            echo=False
        )
    return create_engine(
        db_url,
        pool_size=5,
        max_overflow=10,
        pool_pre_ping=True,
        echo=False
    )


@lru_cache(maxsize=None)
def _default_engine() -> Engine:
    return get_engine()


def get_session_factory(engine: Optional[Engine] = None) -> sessionmaker:
    """
    Get a session factory bound to engine (the default engine if omitted).
    """
    return sessionmaker(bind=engine or _default_engine(), expire_on_commit=False)


def init_db(engine: Optional[Engine] = None) -> None:
    """
    Create the mastery_state table if it does not exist.

    Safe to call multiple times.
    """
    Base.metadata.create_all(engine or _default_engine())
