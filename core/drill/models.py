"""
SQLAlchemy ORM model for the drill session store.

One row per storage key; the payload is the JSON blob from the codec.
"""

from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class StoredSession(Base):
    """
    A single key-value slot holding a serialized SessionState.
    """
    __tablename__ = 'drill_state'

    key = Column(String(255), primary_key=True, nullable=False)
    payload = Column(Text, nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<StoredSession({self.key}, {self.updated_at})>"
