"""
HR API Backend — Employee Service
===================================

What:  Business operations on employees, plus listings filtered by branch or
       department.
How:   CRUD comes from CollectionService over the "employees" collection; the
       filtered listings are equality queries on the stored document fields.
Who:   Injected into the employee routes via get_employee_service().

Referential integrity:
    branchId is a soft reference. Creating or updating an employee never
    checks that the branch exists, and filtering by an unknown branch simply
    returns an empty list.
"""

from typing import List, Union

from fastapi import Depends

from hrapi.repositories.document_store import DocumentStore, FieldFilter, get_document_store
from hrapi.schemas.employee import Employee
from hrapi.services.collection_service import CollectionService

EMPLOYEE_COLLECTION = "employees"


class EmployeeService(CollectionService[Employee]):
    """Employee records stored in the `employees` collection."""

    collection = EMPLOYEE_COLLECTION
    model = Employee

    async def get_by_branch(self, branch_id: Union[int, float]) -> List[Employee]:
        """Returns employees whose branchId equals `branch_id` (empty list when none)."""
        documents = await self.store.get_documents_by_field_values(
            self.collection,
            [FieldFilter(field="branchId", value=branch_id)],
        )
        return self._to_records(documents)

    async def get_by_department(self, department: str) -> List[Employee]:
        """Returns employees in `department`, matched exactly (empty list when none)."""
        documents = await self.store.get_documents_by_field_values(
            self.collection,
            [FieldFilter(field="department", value=department)],
        )
        return self._to_records(documents)


async def get_employee_service(
    store: DocumentStore = Depends(get_document_store),
) -> EmployeeService:
    """FastAPI dependency: an EmployeeService for the current request."""
    return EmployeeService(store)
