from webhook_models.schema.builder import (
    build_record_class,
    load_schema_document,
    register_schema_document,
    resolve_type,
)
from webhook_models.schema.config import FieldSchemaConfig, RecordSchemaConfig, SchemaDocument

__all__ = [
    "FieldSchemaConfig",
    "RecordSchemaConfig",
    "SchemaDocument",
    "build_record_class",
    "load_schema_document",
    "register_schema_document",
    "resolve_type",
]
