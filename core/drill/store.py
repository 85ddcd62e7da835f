"""
Session stores - key-value slots for the serialized SessionState.

Two backends:
- SqlStateStore: SQLAlchemy table (SQLite by default, any URL works)
- MemoryStateStore: plain dict, nothing outlives the process

Writes are not retried; a failing write propagates to the caller.
"""

from __future__ import annotations
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional
import logging

from sqlalchemy import create_engine, inspect
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from core.drill.models import Base, StoredSession

logger = logging.getLogger(__name__)


class StateStore:
    """
    Interface for a string-keyed slot store.
    """

    def read(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def write(self, key: str, payload: str) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> None:
        raise NotImplementedError


class MemoryStateStore(StateStore):
    """Dict-backed store (tests, Streamlit "session" backend)."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self.slots: dict[str, str] = dict(initial or {})

    def read(self, key: str) -> Optional[str]:
        return self.slots.get(key)

    def write(self, key: str, payload: str) -> None:
        self.slots[key] = payload

    def delete(self, key: str) -> None:
        self.slots.pop(key, None)


def _build_engine(database_url: str) -> Engine:
    url = make_url(database_url)

    if url.get_backend_name() != "sqlite":
        return create_engine(
            database_url,
            pool_pre_ping=True,    # Verify connections before use
            echo=False
        )

    if url.database in (None, "", ":memory:"):
        # One shared connection, otherwise every checkout sees an empty DB
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    Path(url.database).parent.mkdir(parents=True, exist_ok=True)
    return create_engine(database_url, connect_args={"check_same_thread": False})


class SqlStateStore(StateStore):
    """
    SQLAlchemy-backed store, one row per key in ``drill_state``.
    """

    def __init__(self, database_url: str):
        self.engine = _build_engine(database_url)
        self._session_factory = sessionmaker(bind=self.engine, expire_on_commit=False)
        self.init_db()

    def init_db(self) -> None:
        """
        Create the table if missing. Safe to call multiple times.
        """
        if StoredSession.__tablename__ not in inspect(self.engine).get_table_names():
            Base.metadata.create_all(self.engine)
            logger.info("Created %s table", StoredSession.__tablename__)

    def _session(self) -> Session:
        return self._session_factory()

    def read(self, key: str) -> Optional[str]:
        session = self._session()
        try:
            row = session.get(StoredSession, key)
            return row.payload if row is not None else None
        finally:
            session.close()

    def write(self, key: str, payload: str) -> None:
        session = self._session()
        try:
            row = session.get(StoredSession, key)
            now = datetime.now(timezone.utc)
            if row is None:
                session.add(StoredSession(key=key, payload=payload, updated_at=now))
            else:
                row.payload = payload
                row.updated_at = now
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def delete(self, key: str) -> None:
        session = self._session()
        try:
            session.query(StoredSession).filter(StoredSession.key == key).delete()
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
