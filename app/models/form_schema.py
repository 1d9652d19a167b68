from datetime import datetime

from sqlalchemy import JSON, DateTime, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base

JSONType = JSON().with_variant(JSONB, "postgresql")


class FormSchemaRecord(Base):
    __tablename__ = "form_schemas"

    # generated UUID string, also accepted as a form id at /api/validate
    schema_id: Mapped[str] = mapped_column(String(36), primary_key=True)

    schema_name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    schema_version: Mapped[str] = mapped_column(String(40), nullable=False, default="1.0")
    description: Mapped[str | None] = mapped_column(String(500), nullable=True)

    # FormConfig dumped by alias (camelCase), re-validated on read
    form_config: Mapped[dict] = mapped_column(JSONType, nullable=False)

    status: Mapped[str] = mapped_column(String(40), nullable=False, default="active", index=True)
    tags: Mapped[list | None] = mapped_column(JSONType, nullable=True)
    created_by: Mapped[str] = mapped_column(String(200), nullable=False, default="system")

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=datetime.utcnow)
