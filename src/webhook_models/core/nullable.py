"""Tri-state wrapper for optional-nullable record fields.

A ``Nullable[T]`` is in exactly one of three states:

- unset: never touched, the key is left out of encoded output
- explicit null: ``set(None)`` or ``set_nil()``, encoded as ``null``
- value: ``set(v)``, encoded as ``v``

Decoding goes through ``Nullable.__get_pydantic_core_schema__``, which every
nullable field of every record shares: a key that is present in the input
(``null`` included) produces a set wrapper, a missing key keeps the field's
default unset wrapper.
"""

from __future__ import annotations

from typing import Any, Generic, Optional, TypeVar, get_args

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

T = TypeVar("T")


class Nullable(Generic[T]):
    def __init__(self) -> None:
        self._value: Optional[T] = None
        self._is_set = False

    @classmethod
    def of(cls, value: Optional[T]) -> "Nullable[T]":
        """Return a wrapper already set to ``value`` (``None`` means explicit null)."""
        wrapper: Nullable[T] = cls()
        wrapper.set(value)
        return wrapper

    def get(self) -> Optional[T]:
        """Return the value, or ``None`` when unset or explicitly null."""
        return self._value

    def set(self, value: Optional[T]) -> None:
        self._value = value
        self._is_set = True

    def set_nil(self) -> None:
        self.set(None)

    def is_set(self) -> bool:
        return self._is_set

    def is_null(self) -> bool:
        """True only for the explicit-null state."""
        return self._is_set and self._value is None

    def unset(self) -> None:
        self._value = None
        self._is_set = False

    def __bool__(self) -> bool:
        return self._is_set and self._value is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Nullable):
            return NotImplemented
        return self._is_set == other._is_set and self._value == other._value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if not self._is_set:
            return "Nullable(<unset>)"
        return f"Nullable({self._value!r})"

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        args = get_args(source)
        inner = handler.generate_schema(args[0]) if args else core_schema.any_schema()
        payload = core_schema.nullable_schema(inner)

        # Any value that reaches the validator came from a present key.
        from_wire = core_schema.no_info_after_validator_function(cls.of, payload)

        def from_python(value: Any, validate: core_schema.ValidatorFunctionWrapHandler) -> "Nullable[Any]":
            if isinstance(value, Nullable):
                if not value.is_set():
                    return cls()
                return validate(value.get())
            return validate(value)

        return core_schema.json_or_python_schema(
            json_schema=from_wire,
            python_schema=core_schema.no_info_wrap_validator_function(from_python, from_wire),
            serialization=core_schema.wrap_serializer_function_ser_schema(
                _serialize_payload,
                info_arg=False,
                schema=payload,
            ),
        )


def _serialize_payload(value: Any, serialize: core_schema.SerializerFunctionWrapHandler) -> Any:
    if isinstance(value, Nullable):
        return serialize(value.get())
    return serialize(value)
