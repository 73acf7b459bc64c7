"""
HR API Backend — Branch Schemas
=================================

What:  Pydantic model for a branch record as returned by the API.
"""

from pydantic import BaseModel, Field

BRANCH_FIELDS = ("name", "address", "phone")


class Branch(BaseModel):
    """A branch office. `id` is assigned by the store and never changes."""
    id: str = Field(description="Store-generated branch id")
    name: str = Field(description="Branch display name")
    address: str = Field(description="Street address")
    phone: str = Field(description="Contact phone number")
