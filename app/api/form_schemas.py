from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from app.api.deps import get_schema_service
from app.core.schema_service import SchemaService
from app.schemas.form_schema import (
    FormSchema,
    SchemaCreateRequest,
    SchemaMetadata,
    SchemaStatusUpdate,
)
from app.schemas.forms import FormConfig

router = APIRouter(prefix="/api/schemas", tags=["schemas"])


def _get_schema_or_404(service: SchemaService, schema_id: str) -> FormSchema:
    schema = service.get_schema(schema_id)
    if not schema:
        raise HTTPException(status_code=404, detail="Schema not found")
    return schema


@router.post("", response_model=FormSchema, status_code=status.HTTP_201_CREATED)
def create_schema(
    payload: SchemaCreateRequest,
    service: SchemaService = Depends(get_schema_service),
):
    return service.create_schema(payload)


@router.get("", response_model=list[FormSchema])
def list_schemas(
    status_filter: str | None = Query(default=None, alias="status"),
    tag: str | None = None,
    name: str | None = None,
    service: SchemaService = Depends(get_schema_service),
):
    return service.list_schemas(status=status_filter, tag=tag, name=name)


@router.get("/metadata", response_model=list[SchemaMetadata])
def list_schema_metadata(service: SchemaService = Depends(get_schema_service)):
    return service.list_metadata()


@router.get("/{schema_id}", response_model=FormSchema)
def get_schema(schema_id: str, service: SchemaService = Depends(get_schema_service)):
    return _get_schema_or_404(service, schema_id)


@router.put("/{schema_id}", response_model=FormSchema)
def update_schema(
    schema_id: str,
    payload: SchemaCreateRequest,
    service: SchemaService = Depends(get_schema_service),
):
    schema = service.update_schema(schema_id, payload)
    if not schema:
        raise HTTPException(status_code=404, detail="Schema not found")
    return schema


@router.patch("/{schema_id}/status", response_model=FormSchema)
def update_schema_status(
    schema_id: str,
    payload: SchemaStatusUpdate,
    service: SchemaService = Depends(get_schema_service),
):
    if not payload.status:
        raise HTTPException(status_code=400, detail="Missing status")

    schema = service.update_status(schema_id, payload.status)
    if not schema:
        raise HTTPException(status_code=404, detail="Schema not found")
    return schema


@router.delete("/{schema_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_schema(schema_id: str, service: SchemaService = Depends(get_schema_service)):
    if not service.delete_schema(schema_id):
        raise HTTPException(status_code=404, detail="Schema not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{schema_id}/form-config", response_model=FormConfig)
def get_schema_form_config(schema_id: str, service: SchemaService = Depends(get_schema_service)):
    return _get_schema_or_404(service, schema_id).form_config
