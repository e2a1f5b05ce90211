"""Turn schema documents into Record classes.

Example (schema.yaml):
    records:
      - name: EventTypeUpdate
        fields:
          - {name: archived, kind: optional, type: boolean, default: false}
          - {name: description, kind: required, type: string}
          - {name: feature_flag, kind: nullable, type: string}

    >>> doc = load_schema_document("schema.yaml")
    >>> register_schema_document(doc)
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Annotated, Any, Callable, Dict, List, Optional, Type, Union

from pydantic import Field, TypeAdapter, ValidationError, create_model

from webhook_models.core.exceptions import SchemaConfigError
from webhook_models.core.fields import Default, nullable_field
from webhook_models.core.logger import get_logger
from webhook_models.core.nullable import Nullable
from webhook_models.core.record import Record
from webhook_models.registry import RecordRegistry
from webhook_models.schema.config import FieldSchemaConfig, RecordSchemaConfig, SchemaDocument

logger = get_logger(__name__)

RecordResolver = Callable[[str], Optional[Type[Record]]]

_SCALAR_TYPES: Dict[str, Any] = {
    "string": str,
    "boolean": bool,
    "integer": int,
    "number": float,
    "datetime": datetime,
    "object": Dict[str, Any],
    "any": Any,
}


def resolve_type(type_name: str, items: Optional[str] = None, *, resolve: RecordResolver = RecordRegistry.try_get) -> Any:
    if type_name == "array":
        return List[resolve_type(items or "any", resolve=resolve)]  # type: ignore[misc]
    if type_name in _SCALAR_TYPES:
        return _SCALAR_TYPES[type_name]
    record_class = resolve(type_name)
    if record_class is None:
        raise SchemaConfigError(f"Unknown field type {type_name!r}: not a builtin type or registered record")
    return record_class


def _field_definition(record_name: str, field: FieldSchemaConfig, resolve: RecordResolver) -> tuple:
    py_type = resolve_type(field.type, field.items, resolve=resolve)

    kwargs: Dict[str, Any] = {}
    if field.json_key:
        kwargs["alias"] = field.json_key
    if field.description:
        kwargs["description"] = field.description

    if field.kind == "nullable":
        return Nullable[py_type], nullable_field(**kwargs)  # type: ignore[valid-type]

    annotation: Any = py_type if field.kind == "required" else Optional[py_type]
    if field.has_default:
        try:
            value = TypeAdapter(py_type).validate_python(field.default)
        except ValidationError as exc:
            raise SchemaConfigError(
                f"Default for {record_name}.{field.name} does not match type {field.type!r}: {exc}"
            ) from exc
        annotation = Annotated[annotation, Default(value)]

    if field.kind == "required":
        return annotation, Field(**kwargs)
    return annotation, Field(None, **kwargs)


def build_record_class(config: RecordSchemaConfig, *, resolve: RecordResolver = RecordRegistry.try_get) -> Type[Record]:
    """Create a Record subclass from its schema declaration."""
    definitions = {f.name: _field_definition(config.name, f, resolve) for f in config.fields}
    record_class = create_model(  # type: ignore[call-overload]
        config.name,
        __base__=Record,
        __module__=__name__,
        **definitions,
    )
    record_class.__doc__ = config.description
    return record_class


def register_schema_document(document: SchemaDocument, *, overwrite: bool = False) -> List[Type[Record]]:
    """Build and register every record of a document, in order.

    Later records may use earlier ones as field types.
    """
    built: List[Type[Record]] = []
    for config in document.records:
        record_class = build_record_class(config)
        RecordRegistry.register(name=config.name, record_class=record_class, overwrite=overwrite)
        logger.info(f"Registered record type {config.name} ({len(config.fields)} fields)")
        built.append(record_class)
    return built


def load_schema_document(path: Union[str, Path]) -> SchemaDocument:
    """Read and validate a JSON or YAML schema document."""
    schema_file = Path(path)
    if not schema_file.exists():
        raise SchemaConfigError(f"Schema file not found: {schema_file}")

    with open(schema_file, "r") as f:
        if schema_file.suffix == ".json":
            try:
                raw = json.load(f)
            except json.JSONDecodeError as exc:
                raise SchemaConfigError(f"Invalid JSON in {schema_file}: {exc}") from exc
        elif schema_file.suffix in (".yaml", ".yml"):
            import yaml

            try:
                raw = yaml.safe_load(f)
            except yaml.YAMLError as exc:
                raise SchemaConfigError(f"Invalid YAML in {schema_file}: {exc}") from exc
        else:
            raise SchemaConfigError(
                f"Unsupported schema format: {schema_file.suffix}. Use .json or .yaml"
            )

    try:
        document = SchemaDocument.model_validate(raw or {})
    except ValidationError as exc:
        raise SchemaConfigError(f"Invalid schema document {schema_file}: {exc}") from exc

    logger.debug(f"Loaded {len(document.records)} record schemas from {schema_file}")
    return document
