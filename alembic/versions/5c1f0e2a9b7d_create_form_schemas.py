"""create form_schemas

Revision ID: 5c1f0e2a9b7d
Revises:
Create Date: 2026-10-19 09:12:40.118204
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision: str = "5c1f0e2a9b7d"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

JSONType = sa.JSON().with_variant(postgresql.JSONB(), "postgresql")


def upgrade() -> None:
    op.create_table(
        "form_schemas",
        sa.Column("schema_id", sa.String(length=36), primary_key=True),
        sa.Column("schema_name", sa.String(length=200), nullable=False),
        sa.Column("schema_version", sa.String(length=40), nullable=False),
        sa.Column("description", sa.String(length=500), nullable=True),
        sa.Column("form_config", JSONType, nullable=False),
        sa.Column("status", sa.String(length=40), nullable=False),
        sa.Column("tags", JSONType, nullable=True),
        sa.Column("created_by", sa.String(length=200), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_form_schemas_schema_name", "form_schemas", ["schema_name"])
    op.create_index("ix_form_schemas_status", "form_schemas", ["status"])


def downgrade() -> None:
    op.drop_index("ix_form_schemas_status", table_name="form_schemas")
    op.drop_index("ix_form_schemas_schema_name", table_name="form_schemas")
    op.drop_table("form_schemas")
