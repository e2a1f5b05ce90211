from __future__ import annotations

import keyword
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

FieldKindName = Literal["required", "optional", "nullable"]

# Attribute names every record already carries.
RESERVED_FIELD_NAMES = frozenset(
    {
        "construct",
        "copy",
        "dict",
        "json",
        "parse_obj",
        "schema",
        "validate",
        "field_spec",
        "field_specs",
        "from_dict",
        "from_json",
        "get",
        "get_ok",
        "has",
        "set",
        "set_nil",
        "to_bytes",
        "to_dict",
        "to_json",
        "unset",
        "with_defaults",
    }
)


def _check_identifier(value: str, what: str) -> str:
    if not value.isidentifier() or keyword.iskeyword(value):
        raise ValueError(f"{what} {value!r} is not a valid Python identifier")
    if value.startswith("_"):
        raise ValueError(f"{what} {value!r} must not start with an underscore")
    return value


class FieldSchemaConfig(BaseModel):
    """One row of a record's field classification table.

    ``type`` is one of string, boolean, integer, number, datetime, object,
    array, any, or the name of a registered record type. ``items`` gives the
    element type of an array.
    """

    name: str
    json_key: Optional[str] = None
    kind: FieldKindName = "optional"
    type: str = "string"
    items: Optional[str] = None
    default: Any = None
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        _check_identifier(value, "field name")
        if value.startswith("model_") or value in RESERVED_FIELD_NAMES:
            raise ValueError(f"field name {value!r} is reserved")
        return value

    @property
    def has_default(self) -> bool:
        return "default" in self.model_fields_set

    @model_validator(mode="after")
    def _validate_shape(self) -> "FieldSchemaConfig":
        if self.kind == "nullable" and self.has_default:
            raise ValueError(f"nullable field {self.name!r} cannot declare a default")
        if self.items is not None and self.type != "array":
            raise ValueError(f"items is only allowed on array fields (field {self.name!r})")
        return self


class RecordSchemaConfig(BaseModel):
    name: str
    description: Optional[str] = None
    fields: List[FieldSchemaConfig] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        return _check_identifier(value, "record name")

    @model_validator(mode="after")
    def _validate_unique_fields(self) -> "RecordSchemaConfig":
        names = [f.name for f in self.fields]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"duplicate field names in {self.name}: {duplicates}")
        keys = [f.json_key for f in self.fields if f.json_key]
        duplicates = sorted({k for k in keys if keys.count(k) > 1})
        if duplicates:
            raise ValueError(f"duplicate JSON keys in {self.name}: {duplicates}")
        return self


class SchemaDocument(BaseModel):
    records: List[RecordSchemaConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def _validate_unique_records(self) -> "SchemaDocument":
        names = [r.name for r in self.records]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"duplicate record names: {duplicates}")
        return self
