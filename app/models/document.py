"""
CollectionDocument — one whole collection stored as a single row.

The SQL backend writes the same JSON array the file backend would write,
keyed by collection name ("users", "developers"). Saving replaces the
payload wholesale, so concurrent writers still resolve as last write wins.
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class CollectionDocument(Base):
    __tablename__ = "collection_documents"

    name: Mapped[str] = mapped_column(String(64), primary_key=True)

    # JSON array of records, camelCase keys
    payload: Mapped[str] = mapped_column(Text, nullable=False, default="[]")

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
