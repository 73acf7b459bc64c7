"""
HR API Backend — Document Store Adapter
=========================================

What:  Generic create/read/update/delete/query operations against a named
       document collection, keyed by collection name and document id.
How:   Thin wrapper around an AsyncSession and the `documents` table. Every
       method is one statement; nothing is cached or retried.
Who:   Constructed per request by `get_document_store` and handed to the
       resource services.

Failure Semantics:
    Store errors (SQLAlchemyError and friends) propagate unmodified. Missing
    documents are not errors: lookups return None, and update/delete on an
    unknown id silently affect no rows. Guarding against that is the caller's
    job.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence

from fastapi import Depends
from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from hrapi.database import get_db_session
from hrapi.models.document import Document, generate_document_id

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoredDocument:
    """A document as read from the store: its id and its body."""
    id: str
    data: Dict[str, Any]


@dataclass(frozen=True)
class FieldFilter:
    """Equality condition on one top-level field of a document body."""
    field: str
    value: Any


def _field_matches(field: str, value: Any):
    """
    Builds the SQL condition `data[field] == value`.

    JSON values have to be unwrapped to a concrete SQL type before comparing.
    The accessor follows the Python type of the value; bool is checked before
    int because bool is an int subclass. All numbers compare as floats so
    that 999 matches a stored 999 or 999.0.
    """
    element = Document.data[field]
    if isinstance(value, bool):
        return element.as_boolean() == value
    if isinstance(value, (int, float)):
        return element.as_float() == float(value)
    return element.as_string() == str(value)


def _to_stored(document: Document) -> StoredDocument:
    return StoredDocument(id=document.id, data=dict(document.data or {}))


class DocumentStore:
    """
    Collection-oriented access to the document database.

    Usage:
        store = DocumentStore(session)
        doc_id = await store.create_document("branches", {"name": "Downtown"})
        doc = await store.get_document_by_id("branches", doc_id)
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_documents(self, collection: str) -> List[StoredDocument]:
        """Returns every document in the collection, oldest first."""
        result = await self.session.execute(
            select(Document)
            .where(Document.collection == collection)
            .order_by(Document.created_at, Document.id)
        )
        return [_to_stored(doc) for doc in result.scalars().all()]

    async def get_document_by_id(
        self, collection: str, document_id: str
    ) -> Optional[StoredDocument]:
        """Point lookup. Returns None when no such document exists."""
        result = await self.session.execute(
            select(Document).where(
                Document.collection == collection,
                Document.id == document_id,
            )
        )
        document = result.scalar_one_or_none()
        if document is None:
            return None
        return _to_stored(document)

    async def create_document(self, collection: str, data: Mapping[str, Any]) -> str:
        """Stores `data` as a new document and returns its generated id."""
        document = Document(
            id=generate_document_id(),
            collection=collection,
            data=dict(data),
        )
        self.session.add(document)
        # Flush so the INSERT runs now and any store error surfaces here
        await self.session.flush()
        logger.debug("Created document %s in %s", document.id, collection)
        return document.id

    async def update_document(
        self, collection: str, document_id: str, data: Mapping[str, Any]
    ) -> None:
        """Overwrites the document body with `data` (the complete record)."""
        await self.session.execute(
            update(Document)
            .where(
                Document.collection == collection,
                Document.id == document_id,
            )
            .values(data=dict(data))
        )
        logger.debug("Updated document %s in %s", document_id, collection)

    async def delete_document(self, collection: str, document_id: str) -> None:
        """Deletes the document. No-op if it does not exist."""
        await self.session.execute(
            delete(Document)
            .where(
                Document.collection == collection,
                Document.id == document_id,
            )
        )
        logger.debug("Deleted document %s from %s", document_id, collection)

    async def get_documents_by_field_values(
        self, collection: str, filters: Sequence[FieldFilter]
    ) -> List[StoredDocument]:
        """Returns documents whose fields equal every given filter value."""
        query = select(Document).where(Document.collection == collection)
        for condition in filters:
            query = query.where(_field_matches(condition.field, condition.value))
        query = query.order_by(Document.created_at, Document.id)

        result = await self.session.execute(query)
        return [_to_stored(doc) for doc in result.scalars().all()]


async def get_document_store(
    # scope="function": the commit runs before the response is sent, so a
    # failed commit still turns into an error response
    session: AsyncSession = Depends(get_db_session, scope="function"),
) -> DocumentStore:
    """FastAPI dependency: a DocumentStore bound to the request's session."""
    return DocumentStore(session)
