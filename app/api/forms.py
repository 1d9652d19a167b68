from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_form_catalog
from app.core.schema_service import FormCatalog
from app.schemas.forms import FormConfig

router = APIRouter(prefix="/api/forms", tags=["forms"])


def _builtin_or_404(catalog: FormCatalog, key: str) -> FormConfig:
    form = catalog.all_forms().get(key)
    if not form:
        raise HTTPException(status_code=404, detail="Form not found")
    return form


@router.get("", response_model=dict[str, FormConfig])
def list_forms(catalog: FormCatalog = Depends(get_form_catalog)):
    return catalog.all_forms()


@router.get("/registration", response_model=FormConfig)
def get_registration_form(catalog: FormCatalog = Depends(get_form_catalog)):
    return _builtin_or_404(catalog, "registration")


@router.get("/contact", response_model=FormConfig)
def get_contact_form(catalog: FormCatalog = Depends(get_form_catalog)):
    return _builtin_or_404(catalog, "contact")


@router.get("/{form_id}", response_model=FormConfig)
def get_form(form_id: str, catalog: FormCatalog = Depends(get_form_catalog)):
    return _builtin_or_404(catalog, form_id)
