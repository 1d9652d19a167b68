from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Callable

from sqlalchemy.orm import Session, sessionmaker

from app.models.form_schema import FormSchemaRecord
from app.schemas.form_schema import FormSchema
from app.schemas.forms import FormConfig

SchemaPredicate = Callable[[FormSchema], bool]


class SchemaStore(ABC):
    """
    Keyed store of authored schemas. Values are immutable FormSchema models;
    a put replaces the whole entry.
    """

    @abstractmethod
    def get(self, schema_id: str) -> FormSchema | None: ...

    @abstractmethod
    def put(self, schema: FormSchema) -> FormSchema: ...

    @abstractmethod
    def delete(self, schema_id: str) -> bool: ...

    @abstractmethod
    def list(self, predicate: SchemaPredicate | None = None) -> list[FormSchema]: ...

    def count(self) -> int:
        return len(self.list())


class InMemorySchemaStore(SchemaStore):
    def __init__(self) -> None:
        self._schemas: dict[str, FormSchema] = {}
        self._lock = threading.RLock()

    def get(self, schema_id: str) -> FormSchema | None:
        with self._lock:
            return self._schemas.get(schema_id)

    def put(self, schema: FormSchema) -> FormSchema:
        with self._lock:
            self._schemas[schema.schema_id] = schema
        return schema

    def delete(self, schema_id: str) -> bool:
        with self._lock:
            return self._schemas.pop(schema_id, None) is not None

    def list(self, predicate: SchemaPredicate | None = None) -> list[FormSchema]:
        with self._lock:
            snapshot = list(self._schemas.values())
        if predicate is None:
            return snapshot
        return [s for s in snapshot if predicate(s)]

    def count(self) -> int:
        with self._lock:
            return len(self._schemas)


def _record_to_schema(r: FormSchemaRecord) -> FormSchema:
    return FormSchema(
        schema_id=r.schema_id,
        schema_name=r.schema_name,
        schema_version=r.schema_version,
        description=r.description,
        form_config=FormConfig.model_validate(r.form_config),
        status=r.status,
        tags=r.tags,
        created_at=r.created_at,
        updated_at=r.updated_at,
        created_by=r.created_by,
    )


class SqlSchemaStore(SchemaStore):
    """Backed by the form_schemas table; one session per operation."""

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    def _session(self) -> Session:
        return self._session_factory()

    def get(self, schema_id: str) -> FormSchema | None:
        with self._session() as db:
            r = db.get(FormSchemaRecord, schema_id)
            return _record_to_schema(r) if r else None

    def put(self, schema: FormSchema) -> FormSchema:
        with self._session() as db, db.begin():
            r = db.get(FormSchemaRecord, schema.schema_id)
            if r is None:
                r = FormSchemaRecord(schema_id=schema.schema_id)
                db.add(r)
            r.schema_name = schema.schema_name
            r.schema_version = schema.schema_version
            r.description = schema.description
            r.form_config = schema.form_config.model_dump(mode="json", by_alias=True)
            r.status = schema.status
            r.tags = list(schema.tags) if schema.tags is not None else None
            r.created_by = schema.created_by
            r.created_at = schema.created_at
            r.updated_at = schema.updated_at
        return schema

    def delete(self, schema_id: str) -> bool:
        with self._session() as db, db.begin():
            r = db.get(FormSchemaRecord, schema_id)
            if r is None:
                return False
            db.delete(r)
            return True

    def list(self, predicate: SchemaPredicate | None = None) -> list[FormSchema]:
        with self._session() as db:
            rows = db.query(FormSchemaRecord).order_by(FormSchemaRecord.created_at.asc()).all()
            out = [_record_to_schema(r) for r in rows]
        if predicate is None:
            return out
        return [s for s in out if predicate(s)]

    def count(self) -> int:
        with self._session() as db:
            return db.query(FormSchemaRecord).count()
