from __future__ import annotations

import logging
import uuid
from datetime import datetime

from app.core.builtin_forms import BUILTIN_FORMS, contact_form, registration_form
from app.core.schema_store import SchemaStore
from app.schemas.form_schema import FormSchema, SchemaCreateRequest, SchemaMetadata
from app.schemas.forms import FormConfig

logger = logging.getLogger(__name__)

DEFAULT_VERSION = "1.0"
DEFAULT_CREATOR = "system"
ACTIVE = "active"


class SchemaService:
    def __init__(self, store: SchemaStore) -> None:
        self.store = store

    def create_schema(self, request: SchemaCreateRequest) -> FormSchema:
        now = datetime.utcnow()
        schema = FormSchema(
            schema_id=str(uuid.uuid4()),
            schema_name=request.schema_name,
            schema_version=request.schema_version or DEFAULT_VERSION,
            description=request.description,
            form_config=request.form_config,
            created_at=now,
            updated_at=now,
            created_by=request.created_by or DEFAULT_CREATOR,
            status=ACTIVE,
            tags=request.tags,
        )
        self.store.put(schema)
        logger.info("Created schema %s (%s)", schema.schema_id, schema.schema_name)
        return schema

    def get_schema(self, schema_id: str) -> FormSchema | None:
        return self.store.get(schema_id)

    def list_schemas(
        self,
        *,
        status: str | None = None,
        tag: str | None = None,
        name: str | None = None,
    ) -> list[FormSchema]:
        # first given filter wins
        if status is not None:
            return self.store.list(lambda s: s.status == status)
        if tag is not None:
            return self.store.list(lambda s: s.tags is not None and tag in s.tags)
        if name is not None:
            return self.store.list(lambda s: s.schema_name == name)
        return self.store.list()

    def list_metadata(self) -> list[SchemaMetadata]:
        return [s.to_metadata() for s in self.store.list()]

    def update_schema(self, schema_id: str, request: SchemaCreateRequest) -> FormSchema | None:
        existing = self.store.get(schema_id)
        if existing is None:
            return None

        updated = existing.model_copy(
            update={
                "schema_name": request.schema_name,
                "schema_version": request.schema_version or existing.schema_version,
                "description": request.description,
                "form_config": request.form_config,
                "tags": request.tags,
                "updated_at": datetime.utcnow(),
            }
        )
        self.store.put(updated)
        logger.info("Updated schema %s", schema_id)
        return updated

    def update_status(self, schema_id: str, status: str) -> FormSchema | None:
        existing = self.store.get(schema_id)
        if existing is None:
            return None

        updated = existing.model_copy(update={"status": status, "updated_at": datetime.utcnow()})
        self.store.put(updated)
        logger.info("Schema %s status -> %s", schema_id, status)
        return updated

    def delete_schema(self, schema_id: str) -> bool:
        deleted = self.store.delete(schema_id)
        if deleted:
            logger.info("Deleted schema %s", schema_id)
        return deleted

    def initialize_default_schemas(self) -> list[FormSchema]:
        defaults = [
            SchemaCreateRequest(
                schema_name="user-registration",
                schema_version=DEFAULT_VERSION,
                description="User registration form schema",
                form_config=registration_form(),
                created_by=DEFAULT_CREATOR,
                tags=["registration", "user", "onboarding"],
            ),
            SchemaCreateRequest(
                schema_name="contact-form",
                schema_version=DEFAULT_VERSION,
                description="Contact us form schema",
                form_config=contact_form(),
                created_by=DEFAULT_CREATOR,
                tags=["contact", "support", "inquiry"],
            ),
        ]
        created = [self.create_schema(r) for r in defaults]
        logger.info("Default form schemas initialized: %d", len(created))
        return created


class FormCatalog:
    """
    Form lookup for the validation engine: built-in forms by key, then active
    stored schemas by schema id.
    """

    def __init__(self, store: SchemaStore | None = None, builtins: dict[str, FormConfig] | None = None) -> None:
        self.store = store
        self.builtins = BUILTIN_FORMS if builtins is None else builtins

    def all_forms(self) -> dict[str, FormConfig]:
        return dict(self.builtins)

    def get_form_config(self, form_id: str) -> FormConfig | None:
        form = self.builtins.get(form_id)
        if form is not None:
            return form

        if self.store is None:
            return None
        schema = self.store.get(form_id)
        if schema is None or schema.status != ACTIVE:
            return None
        return schema.form_config
