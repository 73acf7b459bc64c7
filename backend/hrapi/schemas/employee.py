"""
HR API Backend — Employee Schemas
===================================

What:  Pydantic model for an employee record as returned by the API.

Field naming:
    The wire format and the stored documents use `branchId`. The Python
    attribute is `branch_id`; the alias keeps both sides in camelCase.
"""

from typing import Union

from pydantic import BaseModel, ConfigDict, Field

# Keys as they appear in request bodies and stored documents
EMPLOYEE_FIELDS = ("name", "position", "department", "email", "phone", "branchId")


class Employee(BaseModel):
    """
    An employee. `branch_id` is a soft reference to a Branch: nothing checks
    that the branch exists.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(description="Store-generated employee id")
    name: str = Field(description="Full name")
    position: str = Field(description="Job title")
    department: str = Field(description="Department name")
    email: str = Field(description="Work email address")
    phone: str = Field(description="Contact phone number")
    # int first so whole numbers are not turned into floats
    branch_id: Union[int, float] = Field(alias="branchId", description="Id of the employee's branch")
