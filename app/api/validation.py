from fastapi import APIRouter, Depends

from app.api.deps import get_form_catalog
from app.core.config import settings
from app.core.form_validation import validate_submission
from app.core.schema_service import FormCatalog
from app.schemas.validation import FormSubmission, ValidationResult

router = APIRouter(prefix="/api/validate", tags=["validation"])


@router.post("", response_model=ValidationResult)
def validate_form(
    submission: FormSubmission,
    catalog: FormCatalog = Depends(get_form_catalog),
):
    # failures are reported in the body; the request itself always succeeds
    return validate_submission(
        submission,
        catalog,
        skip_hidden_fields=settings.SKIP_HIDDEN_FIELDS,
    )
