"""Create documents table

Revision ID: 001
Revises: None
Create Date: 2026-10-17 00:00:00.000000+00:00

What:  Creates the `documents` table that holds every collection
       (branches, employees) as JSON documents.

Rollback: downgrade() drops the table (destructive, all data lost).
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the documents table and its collection index."""
    op.create_table(
        "documents",
        sa.Column(
            "id",
            sa.String(64),
            nullable=False,
            comment="Store-generated opaque document id",
        ),
        sa.Column(
            "collection",
            sa.String(100),
            nullable=False,
            comment="Logical collection name, e.g. branches or employees",
        ),
        sa.Column(
            "data",
            sa.JSON(),
            nullable=False,
            comment="Document body without the id",
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="When this document was created (UTC)",
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="When this document was last overwritten (UTC)",
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    # Every query filters on collection first
    op.create_index("idx_documents_collection", "documents", ["collection"])


def downgrade() -> None:
    """Drop the documents table entirely."""
    op.drop_index("idx_documents_collection", table_name="documents")
    op.drop_table("documents")
