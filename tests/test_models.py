import json
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from webhook_models.core.exceptions import MalformedInputError, MissingRequiredError
from webhook_models.models import (
    ApplicationIn,
    ApplicationOut,
    DashboardAccessOut,
    EndpointCreatedEvent,
    EndpointCreatedEventData,
    EventTypeIn,
    EventTypeOut,
)


def test_dashboard_access_out_round_trip():
    raw = '{"token":"tok","url":"https://app.example.test/login"}'
    rec = DashboardAccessOut.from_json(raw)

    assert rec.token == "tok"
    assert json.loads(rec.to_json()) == json.loads(raw)


def test_endpoint_created_event_requires_type():
    data = EndpointCreatedEventData(app_id="app_1", endpoint_id="ep_1")

    with pytest.raises(ValidationError, match="type"):
        EndpointCreatedEvent(data=data)

    event = EndpointCreatedEvent(data=data, type="endpoint.created")
    assert event.to_dict() == {
        "data": {"appId": "app_1", "endpointId": "ep_1"},
        "type": "endpoint.created",
    }


def test_endpoint_created_event_nested_tri_state():
    raw = {
        "data": {"appId": "app_1", "appUid": None, "endpointId": "ep_1", "endpointUid": "my-endpoint"},
        "type": "endpoint.created",
    }
    event = EndpointCreatedEvent.from_json(json.dumps(raw))

    assert event.data.app_uid.is_set() is True
    assert event.data.app_uid.get() is None
    assert event.data.endpoint_uid.get() == "my-endpoint"
    assert event.to_dict() == raw


def test_endpoint_created_event_decode_requires_type():
    with pytest.raises(MissingRequiredError) as exc:
        EndpointCreatedEvent.from_json('{"data":{"appId":"a","endpointId":"e"}}')

    assert exc.value.missing == ["type"]


def test_endpoint_created_event_with_defaults():
    event = EndpointCreatedEvent.with_defaults()

    assert event.type == "endpoint.created"
    assert event.data is None


def test_event_type_in_validates_name():
    with pytest.raises(MalformedInputError) as exc:
        EventTypeIn.from_dict({"name": "bad name!", "description": "d"})

    assert [loc for loc, _ in exc.value.problems] == ["name"]


def test_event_type_out_datetimes():
    raw = {
        "createdAt": "2024-01-01T00:00:00Z",
        "description": "A user signed up",
        "name": "user.signup",
        "updatedAt": "2024-01-02T00:00:00Z",
        "featureFlag": None,
        "schemas": {"1": {"type": "object", "properties": {"id": {"type": "string"}}}},
    }
    out = EventTypeOut.from_dict(raw)

    assert out.created_at == datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert out.feature_flag.is_null()
    assert out.schemas["1"]["type"] == "object"
    assert out.to_dict() == raw


def test_application_in_tri_state_fields():
    app = ApplicationIn(name="My app", uid="my-app")
    app.set_nil("rateLimit")

    assert app.to_dict() == {"name": "My app", "rateLimit": None, "uid": "my-app"}


def test_application_in_rejects_out_of_range_rate_limit():
    with pytest.raises(MalformedInputError) as exc:
        ApplicationIn.from_json('{"name":"a","rateLimit":0}')

    assert [loc for loc, _ in exc.value.problems] == ["rateLimit"]


def test_application_out_metadata_optional():
    raw = {
        "createdAt": "2024-01-01T00:00:00Z",
        "id": "app_2",
        "name": "My app",
        "updatedAt": "2024-01-01T00:00:00Z",
        "rateLimit": 10,
    }
    app = ApplicationOut.from_dict(raw)

    assert app.metadata is None
    assert app.rate_limit.get() == 10
    assert app.uid.is_set() is False
    assert app.to_dict() == raw
