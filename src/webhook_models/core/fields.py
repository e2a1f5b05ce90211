from __future__ import annotations

import copy
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, get_origin

from pydantic import Field
from pydantic.fields import FieldInfo

from webhook_models.core.nullable import Nullable


class FieldKind(str, Enum):
    REQUIRED = "required"
    OPTIONAL = "optional"
    NULLABLE = "nullable"


@dataclass(frozen=True)
class Default:
    """Declared default, applied by record constructors but never by decode.

    Used as ``Annotated`` metadata:

        archived: Annotated[Optional[bool], Default(False)] = None
    """

    value: Any

    def resolve(self) -> Any:
        return copy.deepcopy(self.value)


@dataclass(frozen=True)
class FieldSpec:
    name: str
    json_key: str
    kind: FieldKind
    declared: Optional[Default] = None

    @property
    def has_default(self) -> bool:
        return self.declared is not None

    @property
    def default(self) -> Any:
        return self.declared.resolve() if self.declared is not None else None

    def initial_value(self) -> Any:
        """Value a constructor assigns when the caller leaves this field out."""
        if self.kind is FieldKind.NULLABLE:
            return Nullable.of(self.default) if self.declared is not None else Nullable()
        return self.default


def nullable_field(**kwargs: Any) -> Any:
    """Field definition for a ``Nullable[...]`` attribute: starts unset."""
    return Field(default_factory=Nullable, **kwargs)


def is_nullable_annotation(annotation: Any) -> bool:
    return annotation is Nullable or get_origin(annotation) is Nullable


def classify(name: str, info: FieldInfo) -> FieldSpec:
    declared = next((m for m in info.metadata if isinstance(m, Default)), None)
    json_key = info.serialization_alias or info.alias or name

    if is_nullable_annotation(info.annotation):
        kind = FieldKind.NULLABLE
    elif info.is_required():
        kind = FieldKind.REQUIRED
    else:
        kind = FieldKind.OPTIONAL

    return FieldSpec(name=name, json_key=json_key, kind=kind, declared=declared)
