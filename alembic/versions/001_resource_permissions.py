"""Resource permissions - one JSONB permissions document per resource.

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "resource_permissions",
        sa.Column("id", sa.Text(), primary_key=True),
        sa.Column("fields", JSONB(), nullable=False, server_default=sa.text("'{}'::jsonb")),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )
    # Actor lookups: "which documents can group X read"
    op.create_index(
        "ix_resource_permissions_fields",
        "resource_permissions",
        ["fields"],
        postgresql_using="gin",
    )


def downgrade() -> None:
    op.drop_index("ix_resource_permissions_fields", table_name="resource_permissions")
    op.drop_table("resource_permissions")
