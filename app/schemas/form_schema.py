from datetime import datetime

from pydantic import Field

from app.schemas.forms import CamelModel, FormConfig


class SchemaCreateRequest(CamelModel):
    schema_name: str = Field(min_length=1, max_length=200)
    schema_version: str | None = Field(default=None, max_length=40)
    description: str | None = Field(default=None, max_length=500)
    form_config: FormConfig
    created_by: str | None = Field(default=None, max_length=200)
    tags: list[str] | None = None


class SchemaStatusUpdate(CamelModel):
    status: str | None = Field(default=None, max_length=40)


class SchemaMetadata(CamelModel):
    schema_id: str
    schema_name: str
    schema_version: str
    description: str | None
    status: str
    tags: list[str] | None
    created_at: datetime
    updated_at: datetime
    created_by: str


class FormSchema(SchemaMetadata):
    form_config: FormConfig

    def to_metadata(self) -> SchemaMetadata:
        return SchemaMetadata(**self.model_dump(exclude={"form_config"}))
