from webhook_models.core.exceptions import (
    FieldAccessError,
    MalformedInputError,
    MissingRequiredError,
    RecordRegistryError,
    SchemaConfigError,
    WebhookModelsException,
)
from webhook_models.core.fields import Default, FieldKind, FieldSpec, nullable_field
from webhook_models.core.nullable import Nullable
from webhook_models.core.record import Record

__all__ = [
    "Default",
    "FieldAccessError",
    "FieldKind",
    "FieldSpec",
    "MalformedInputError",
    "MissingRequiredError",
    "Nullable",
    "Record",
    "RecordRegistryError",
    "SchemaConfigError",
    "WebhookModelsException",
    "nullable_field",
]
