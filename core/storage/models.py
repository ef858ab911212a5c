"""
SQLAlchemy ORM model for the key-value store.

Values are opaque serialized strings; the store never inspects them.
"""

from sqlalchemy import Column, DateTime, String, Text, func
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class StoreEntry(Base):
    """
    One key/value pair (an item collection or the active selector).
    """
    __tablename__ = 'store_entries'

    key = Column(String(255), primary_key=True, nullable=False)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<StoreEntry({self.key}, {len(self.value or '')} chars)>"
