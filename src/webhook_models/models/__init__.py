"""Built-in record types of the webhook API."""

from webhook_models.models.application import ApplicationIn, ApplicationOut
from webhook_models.models.dashboard import DashboardAccessOut
from webhook_models.models.endpoint import EndpointCreatedEvent, EndpointCreatedEventData
from webhook_models.models.event_type import EventTypeIn, EventTypeOut, EventTypeUpdate

__all__ = [
    "ApplicationIn",
    "ApplicationOut",
    "DashboardAccessOut",
    "EndpointCreatedEvent",
    "EndpointCreatedEventData",
    "EventTypeIn",
    "EventTypeOut",
    "EventTypeUpdate",
]
