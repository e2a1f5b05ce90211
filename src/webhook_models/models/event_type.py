from __future__ import annotations

from datetime import datetime
from typing import Annotated, Optional

from pydantic import Field

from webhook_models.core.fields import Default, nullable_field
from webhook_models.core.nullable import Nullable
from webhook_models.core.record import Record
from webhook_models.models._types import EventTypeName, FeatureFlag, JsonSchemas
from webhook_models.registry import register_record

_SCHEMAS_DESCRIPTION = "The schema for the event type for a specific version as a JSON schema."


@register_record("EventTypeUpdate")
class EventTypeUpdate(Record):
    archived: Annotated[Optional[bool], Default(False)] = None
    description: str
    feature_flag: Nullable[FeatureFlag] = nullable_field()
    schemas: Optional[JsonSchemas] = Field(None, description=_SCHEMAS_DESCRIPTION)


@register_record("EventTypeIn")
class EventTypeIn(Record):
    archived: Annotated[Optional[bool], Default(False)] = None
    description: str
    feature_flag: Nullable[FeatureFlag] = nullable_field()
    name: EventTypeName
    schemas: Optional[JsonSchemas] = Field(None, description=_SCHEMAS_DESCRIPTION)


@register_record("EventTypeOut")
class EventTypeOut(Record):
    archived: Annotated[Optional[bool], Default(False)] = None
    created_at: datetime
    description: str
    feature_flag: Nullable[FeatureFlag] = nullable_field()
    name: EventTypeName
    schemas: Optional[JsonSchemas] = Field(None, description=_SCHEMAS_DESCRIPTION)
    updated_at: datetime
