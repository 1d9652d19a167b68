from fastapi import APIRouter, Depends

from app.api.deps import get_schema_store
from app.core.schema_store import SchemaStore

router = APIRouter(tags=["health"])


@router.get("/health")
def health(store: SchemaStore = Depends(get_schema_store)):
    # touches the store so a broken database surfaces here
    return {"status": "ok", "schemas": store.count()}
