"""webhook_models.

Record types for a webhook-delivery platform's REST API, with tri-state
(absent / null / value) optional fields that round-trip faithfully through JSON.

Public API for clients building request bodies and parsing responses.
"""

from webhook_models.core import (
    Default,
    FieldAccessError,
    FieldKind,
    FieldSpec,
    MalformedInputError,
    MissingRequiredError,
    Nullable,
    Record,
    RecordRegistryError,
    SchemaConfigError,
    WebhookModelsException,
    nullable_field,
)
from webhook_models.registry import RecordRegistry, register_record

__version__ = "0.1.0"

__all__ = [
    "Default",
    "FieldAccessError",
    "FieldKind",
    "FieldSpec",
    "MalformedInputError",
    "MissingRequiredError",
    "Nullable",
    "Record",
    "RecordRegistry",
    "RecordRegistryError",
    "SchemaConfigError",
    "WebhookModelsException",
    "nullable_field",
    "register_record",
]
