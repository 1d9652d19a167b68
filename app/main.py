import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.deps import get_schema_store
from app.api.form_schemas import router as form_schemas_router
from app.api.forms import router as forms_router
from app.api.health import router as health_router
from app.api.root import router as root_router
from app.api.validation import router as validation_router
from app.core.config import settings
from app.core.schema_service import SchemaService

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # same store the request dependencies resolve to
    store = app.dependency_overrides.get(get_schema_store, get_schema_store)()
    if settings.SEED_DEFAULT_SCHEMAS and store.count() == 0:
        SchemaService(store).initialize_default_schemas()
    logger.info("Schema store ready (%s, %d schemas)", settings.SCHEMA_STORE, store.count())
    yield


app = FastAPI(title="Dynamic Forms Backend", lifespan=lifespan)

# CORS middleware for frontend access
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["*"],
)

app.include_router(root_router)
app.include_router(health_router)
app.include_router(forms_router)
app.include_router(validation_router)
app.include_router(form_schemas_router)
