from functools import lru_cache

from fastapi import Depends

from app.core.config import settings
from app.core.schema_service import FormCatalog, SchemaService
from app.core.schema_store import InMemorySchemaStore, SchemaStore, SqlSchemaStore


@lru_cache(maxsize=1)
def get_schema_store() -> SchemaStore:
    """
    Process-wide store, chosen by SCHEMA_STORE. Tests override this
    dependency with a fresh store.
    """
    if settings.SCHEMA_STORE == "database":
        from app.db.session import SessionLocal

        return SqlSchemaStore(SessionLocal)
    if settings.SCHEMA_STORE != "memory":
        raise RuntimeError(f"Unknown SCHEMA_STORE: {settings.SCHEMA_STORE}")
    return InMemorySchemaStore()


def get_schema_service(store: SchemaStore = Depends(get_schema_store)) -> SchemaService:
    return SchemaService(store)


def get_form_catalog(store: SchemaStore = Depends(get_schema_store)) -> FormCatalog:
    return FormCatalog(store)
