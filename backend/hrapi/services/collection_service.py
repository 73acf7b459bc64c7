"""
HR API Backend — Collection Service Base
==========================================

What:  Shared CRUD logic for services backed by one document collection.
How:   Subclasses name their collection and their Pydantic record model.
       Every method turns one domain operation into one or two DocumentStore
       calls and maps stored documents to records.
Who:   BranchService and EmployeeService.

Contract:
    - Not-found is a return value (None / False), never an exception.
    - Store errors propagate unchanged; nothing is caught at this layer.
    - create() performs no field validation: requests are validated before
      they reach a service.
    - update() is read-merge-write: it only ever stores complete records.
"""

import logging
from typing import Any, ClassVar, Generic, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel

from hrapi.repositories.document_store import DocumentStore, StoredDocument

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class CollectionService(Generic[RecordT]):
    """
    Base class for a resource service over a single collection.

    Subclasses set:
        collection:  document collection name, e.g. "branches"
        model:       Pydantic model built from {"id": ..., **stored_fields}
    """

    collection: ClassVar[str]
    model: ClassVar[Type[BaseModel]]

    def __init__(self, store: DocumentStore):
        self.store = store

    def _to_record(self, document: StoredDocument) -> RecordT:
        return self.model.model_validate({**document.data, "id": document.id})

    def _to_records(self, documents: List[StoredDocument]) -> List[RecordT]:
        return [self._to_record(document) for document in documents]

    async def get_all(self) -> List[RecordT]:
        """Returns every record in the collection (empty list when none)."""
        documents = await self.store.get_documents(self.collection)
        return self._to_records(documents)

    async def get_by_id(self, record_id: str) -> Optional[RecordT]:
        """Returns the record, or None if it does not exist."""
        document = await self.store.get_document_by_id(self.collection, record_id)
        if document is None:
            return None
        return self._to_record(document)

    async def create(self, data: Mapping[str, Any]) -> RecordT:
        """
        Persists `data` as a new record and returns it with its new id.

        Any `id` key in `data` is dropped; ids only come from the store.
        """
        fields = {key: value for key, value in data.items() if key != "id"}
        record_id = await self.store.create_document(self.collection, fields)
        logger.info("Created %s record %s", self.collection, record_id)
        return self.model.model_validate({**fields, "id": record_id})

    async def update(self, record_id: str, changes: Mapping[str, Any]) -> Optional[RecordT]:
        """
        Overlays `changes` on the stored record and persists the result.

        Every key present in `changes` is applied, whatever its value; keys
        that are absent leave the stored value untouched. Returns None, with
        no write, when the record does not exist.
        """
        document = await self.store.get_document_by_id(self.collection, record_id)
        if document is None:
            return None

        merged = dict(document.data)
        merged.update({key: value for key, value in changes.items() if key != "id"})

        await self.store.update_document(self.collection, record_id, merged)
        logger.info("Updated %s record %s (%s)", self.collection, record_id, ", ".join(changes) or "no changes")
        return self.model.model_validate({**merged, "id": record_id})

    async def delete(self, record_id: str) -> bool:
        """Deletes the record. Returns False, with no write, if it does not exist."""
        document = await self.store.get_document_by_id(self.collection, record_id)
        if document is None:
            return False

        await self.store.delete_document(self.collection, record_id)
        logger.info("Deleted %s record %s", self.collection, record_id)
        return True
