from __future__ import annotations

from typing import Annotated

from webhook_models.core.fields import Default, nullable_field
from webhook_models.core.nullable import Nullable
from webhook_models.core.record import Record
from webhook_models.models._types import Uid
from webhook_models.registry import register_record


@register_record("EndpointCreatedEventData")
class EndpointCreatedEventData(Record):
    app_id: str
    app_uid: Nullable[Uid] = nullable_field()
    endpoint_id: str
    endpoint_uid: Nullable[Uid] = nullable_field()


@register_record("EndpointCreatedEvent")
class EndpointCreatedEvent(Record):
    """Sent when an endpoint is created."""

    data: EndpointCreatedEventData
    type: Annotated[str, Default("endpoint.created")]
