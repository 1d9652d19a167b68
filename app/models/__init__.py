from app.models.form_schema import FormSchemaRecord

__all__ = ["FormSchemaRecord"]
