"""
HR API Backend — Branch Service
=================================

What:  Business operations on branches: list, get, create, update, delete.
How:   All behavior comes from CollectionService over the "branches" collection.
Who:   Injected into the branch routes via get_branch_service().

Deleting a branch never touches employees that reference it.
"""

from fastapi import Depends

from hrapi.repositories.document_store import DocumentStore, get_document_store
from hrapi.schemas.branch import Branch
from hrapi.services.collection_service import CollectionService

BRANCH_COLLECTION = "branches"


class BranchService(CollectionService[Branch]):
    """Branch records stored in the `branches` collection."""

    collection = BRANCH_COLLECTION
    model = Branch


async def get_branch_service(
    store: DocumentStore = Depends(get_document_store),
) -> BranchService:
    """FastAPI dependency: a BranchService for the current request."""
    return BranchService(store)
