"""
HR API Backend — Document SQLAlchemy Model
============================================

What:  ORM model for the `documents` table, the physical home of every
       collection (branches, employees).
How:   One row per document. `collection` names the logical collection,
       `data` holds the schema-less record body as JSON. The id is generated
       in Python and never changes.
Who:   Used by DocumentStore for all reads and writes, and by Alembic.

Table Design:
    - id: opaque 32-char hex string (random UUID), unique across collections
    - collection: indexed, every query filters on it
    - data: JSON object, the record minus its id
    - created_at / updated_at: UTC, timezone-aware; created_at orders scans
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Dict

from sqlalchemy import JSON, DateTime, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from hrapi.database import Base


def generate_document_id() -> str:
    """Returns a new opaque document id."""
    return uuid.uuid4().hex


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Document(Base):
    """
    A single stored document within a named collection.

    Query Patterns:
        - Scan collection:   WHERE collection = :c ORDER BY created_at
        - Point lookup:      WHERE collection = :c AND id = :id
        - Field equality:    WHERE collection = :c AND data->>'field' = :v
    """

    __tablename__ = "documents"

    id: Mapped[str] = mapped_column(
        String(64),
        primary_key=True,
        default=generate_document_id,
        comment="Store-generated opaque document id",
    )

    collection: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Logical collection name, e.g. branches or employees",
    )

    data: Mapped[Dict[str, Any]] = mapped_column(
        JSON,
        nullable=False,
        default=dict,
        comment="Document body without the id",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        comment="When this document was created (UTC)",
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
        comment="When this document was last overwritten (UTC)",
    )

    __table_args__ = (
        Index("idx_documents_collection", "collection"),
    )

    def __repr__(self) -> str:
        return f"<Document(id={self.id}, collection='{self.collection}')>"
