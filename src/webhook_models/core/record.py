"""Generic record base class.

Every API schema type is a ``Record`` subclass. Its pydantic field
declarations are the field classification table: the annotation decides the
kind (``Nullable[...]`` is optional-nullable, a field without a default is
required, anything else is optional-value), the alias is the JSON key and a
``Default(...)`` marker in ``Annotated`` metadata is the declared default.

Example:
    >>> class EventTypeUpdate(Record):
    ...     archived: Annotated[Optional[bool], Default(False)] = None
    ...     description: str
    ...     feature_flag: Nullable[str] = nullable_field()
    >>> update = EventTypeUpdate(description="d")
    >>> update.to_dict()
    {'archived': False, 'description': 'd'}
    >>> update.set_nil("featureFlag")
    >>> update.to_dict()
    {'archived': False, 'description': 'd', 'featureFlag': None}
"""

from __future__ import annotations

import contextvars
from contextlib import contextmanager
from functools import lru_cache
from typing import Any, Dict, Iterator, Mapping, Tuple, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, SerializerFunctionWrapHandler, ValidationError, model_serializer
from pydantic.alias_generators import to_camel

from webhook_models.core.exceptions import FieldAccessError, MalformedInputError
from webhook_models.core.fields import FieldKind, FieldSpec, classify
from webhook_models.core.nullable import Nullable

R = TypeVar("R", bound="Record")

# Set while from_dict/from_json run. pydantic calls an overridden __init__ for
# dict input too, and decode must not apply declared defaults.
_DECODING: contextvars.ContextVar[bool] = contextvars.ContextVar("decoding", default=False)


@contextmanager
def _decoding() -> Iterator[None]:
    token = _DECODING.set(True)
    try:
        yield
    finally:
        _DECODING.reset(token)


@lru_cache(maxsize=None)
def _specs_for(record_class: Type["Record"]) -> Tuple[FieldSpec, ...]:
    return tuple(classify(name, info) for name, info in record_class.model_fields.items())


@lru_cache(maxsize=None)
def _lookup_for(record_class: Type["Record"]) -> Dict[str, FieldSpec]:
    lookup: Dict[str, FieldSpec] = {}
    for spec in _specs_for(record_class):
        lookup[spec.name] = spec
        lookup.setdefault(spec.json_key, spec)
    return lookup


class Record(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )

    def __init__(self, **data: Any) -> None:
        for spec in () if _DECODING.get() else self.field_specs():
            if spec.kind is FieldKind.REQUIRED or not spec.has_default:
                continue
            if spec.name not in data and spec.json_key not in data:
                data[spec.name] = spec.initial_value()
        super().__init__(**data)

    @classmethod
    def with_defaults(cls: Type[R]) -> R:
        """Build a record holding only declared defaults.

        Required fields with a declared default get it, other required fields
        are ``None`` until assigned and encode as ``null``. Optional fields
        without one stay absent, so the result is not guaranteed to be a valid
        API payload.
        """
        values: Dict[str, Any] = {}
        for spec in cls.field_specs():
            if spec.has_default or spec.kind is FieldKind.NULLABLE:
                values[spec.name] = spec.initial_value()
            elif spec.kind is FieldKind.REQUIRED:
                values[spec.name] = None
        return cls.model_construct(**values)

    @classmethod
    def field_specs(cls) -> Tuple[FieldSpec, ...]:
        return _specs_for(cls)

    @classmethod
    def field_spec(cls, name: str) -> FieldSpec:
        """Look up a field by python name or JSON key."""
        try:
            return _lookup_for(cls)[name]
        except KeyError:
            raise FieldAccessError(cls.__name__, name, "unknown field") from None

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def get(self, name: str) -> Any:
        """Return the field value, or ``None`` when absent or explicitly null."""
        spec = self.field_spec(name)
        value = getattr(self, spec.name)
        if spec.kind is FieldKind.NULLABLE:
            return value.get()
        return value

    def get_ok(self, name: str) -> Tuple[Any, bool]:
        """Return ``(value, present)``; an explicit null gives ``(None, True)``."""
        spec = self.field_spec(name)
        value = getattr(self, spec.name)
        if spec.kind is FieldKind.NULLABLE:
            return value.get(), value.is_set()
        if spec.kind is FieldKind.OPTIONAL:
            return value, value is not None
        return value, True

    def has(self, name: str) -> bool:
        return self.get_ok(name)[1]

    def set(self, name: str, value: Any) -> None:
        """Assign a field; on a nullable field ``None`` stores an explicit null."""
        spec = self.field_spec(name)
        setattr(self, spec.name, value)

    def set_nil(self, name: str) -> None:
        spec = self.field_spec(name)
        if spec.kind is not FieldKind.NULLABLE:
            raise FieldAccessError(type(self).__name__, name, f"{spec.kind.value} fields cannot hold an explicit null")
        getattr(self, spec.name).set_nil()

    def unset(self, name: str) -> None:
        """Return a field to the absent state."""
        spec = self.field_spec(name)
        if spec.kind is FieldKind.REQUIRED:
            raise FieldAccessError(type(self).__name__, name, "required fields cannot be unset")
        if spec.kind is FieldKind.NULLABLE:
            getattr(self, spec.name).unset()
        else:
            setattr(self, spec.name, None)

    # ------------------------------------------------------------------
    # Encode
    # ------------------------------------------------------------------

    @model_serializer(mode="wrap")
    def _encode(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        data = handler(self)
        for spec in self.field_specs():
            key = spec.json_key if spec.json_key in data else spec.name
            if key not in data:
                continue
            value = getattr(self, spec.name)
            if spec.kind is FieldKind.NULLABLE and not value.is_set():
                del data[key]
            elif spec.kind is FieldKind.OPTIONAL and value is None:
                del data[key]
        return data

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

    def to_bytes(self) -> bytes:
        return self.to_json().encode("utf-8")

    # ------------------------------------------------------------------
    # Decode
    # ------------------------------------------------------------------

    @classmethod
    def from_dict(cls: Type[R], data: Mapping[str, Any]) -> R:
        try:
            with _decoding():
                return cls.model_validate(data)
        except ValidationError as exc:
            raise MalformedInputError.from_validation_error(cls.__name__, exc) from exc

    @classmethod
    def from_json(cls: Type[R], data: Union[str, bytes, bytearray]) -> R:
        try:
            with _decoding():
                return cls.model_validate_json(data)
        except ValidationError as exc:
            raise MalformedInputError.from_validation_error(cls.__name__, exc) from exc


__all__ = ["Nullable", "Record"]
