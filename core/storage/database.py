"""
Database - engine and session handling for the key-value store.

Uses SQLAlchemy with a SQLite file by default; any SQLAlchemy URL works.
This module handles ONLY connection setup and schema creation.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from sqlalchemy import create_engine, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.engine.url import make_url
from sqlalchemy.orm import Session, sessionmaker

from core.config import get_database_url
from core.storage.models import Base

# Shared engine (reused across Streamlit reruns)
_engine: Optional[Engine] = None


def create_store_engine(url: str) -> Engine:
    """
    Create an engine for the given URL.

    For SQLite files the parent directory is created so a fresh checkout
    works without setup.

    Args:
        url: SQLAlchemy connection string

    Returns:
        SQLAlchemy Engine instance
    """
    parsed = make_url(url)
    if parsed.drivername.startswith("sqlite"):
        if parsed.database and parsed.database != ":memory:":
            Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            echo=False
        )
    return create_engine(
        url,
        pool_size=5,
        max_overflow=10,
        pool_pre_ping=True,
        echo=False
    )


def get_engine() -> Engine:
    """
    Get the shared engine for the configured DATABASE_URL.

    Returns:
        SQLAlchemy Engine instance
    """
    global _engine

    if _engine is None:
        _engine = create_store_engine(get_database_url())
    return _engine


def make_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Session factory bound to an engine."""
    return sessionmaker(bind=engine, expire_on_commit=False)


def init_db(engine: Optional[Engine] = None) -> None:
    """
    Create the store table if it doesn't exist.

    Safe to call multiple times.
    """
    engine = engine or get_engine()
    inspector = inspect(engine)
    if 'store_entries' not in inspector.get_table_names():
        Base.metadata.create_all(engine)


def reset_db(engine: Optional[Engine] = None) -> None:
    """
    DANGEROUS: Delete every stored collection and the selector.
    """
    engine = engine or get_engine()
    Base.metadata.drop_all(engine)
    init_db(engine)
