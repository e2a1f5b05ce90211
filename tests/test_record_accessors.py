import pytest
from pydantic import ValidationError

from webhook_models.core.exceptions import FieldAccessError
from webhook_models.core.fields import FieldKind
from webhook_models.core.nullable import Nullable
from webhook_models.models import EndpointCreatedEvent, EventTypeUpdate


def test_field_specs_classify_every_field():
    specs = {s.name: s for s in EventTypeUpdate.field_specs()}

    assert specs["archived"].kind is FieldKind.OPTIONAL
    assert specs["archived"].default is False
    assert specs["description"].kind is FieldKind.REQUIRED
    assert specs["description"].has_default is False
    assert specs["feature_flag"].kind is FieldKind.NULLABLE
    assert specs["feature_flag"].json_key == "featureFlag"
    assert specs["schemas"].kind is FieldKind.OPTIONAL


def test_required_field_with_declared_default():
    spec = EndpointCreatedEvent.field_spec("type")

    assert spec.kind is FieldKind.REQUIRED
    assert spec.default == "endpoint.created"

    with pytest.raises(ValidationError):
        EndpointCreatedEvent(data={"appId": "a", "endpointId": "e"})


def test_field_spec_accepts_python_name_or_json_key():
    assert EventTypeUpdate.field_spec("featureFlag") is EventTypeUpdate.field_spec("feature_flag")


def test_unknown_field_raises():
    with pytest.raises(FieldAccessError, match="unknown field"):
        EventTypeUpdate.field_spec("nope")


def test_get_and_get_ok_for_nullable_states():
    rec = EventTypeUpdate(description="d")
    assert rec.get_ok("featureFlag") == (None, False)

    rec.set_nil("featureFlag")
    assert rec.get("featureFlag") is None
    assert rec.get_ok("featureFlag") == (None, True)

    rec.set("featureFlag", "beta")
    assert rec.get("featureFlag") == "beta"
    assert rec.get_ok("featureFlag") == ("beta", True)


def test_has_reflects_presence():
    rec = EventTypeUpdate.from_dict({"description": "d"})

    assert rec.has("description") is True
    assert rec.has("archived") is False
    assert rec.has("featureFlag") is False

    rec.set("archived", True)
    rec.set_nil("featureFlag")

    assert rec.has("archived") is True
    assert rec.has("featureFlag") is True


def test_set_none_on_nullable_is_explicit_null():
    rec = EventTypeUpdate(description="d")
    rec.set("feature_flag", None)

    assert rec.feature_flag == Nullable.of(None)
    assert rec.to_dict()["featureFlag"] is None


def test_attribute_assignment_wraps_raw_values():
    rec = EventTypeUpdate(description="d")
    rec.feature_flag = "beta"

    assert isinstance(rec.feature_flag, Nullable)
    assert rec.feature_flag.get() == "beta"


def test_assigning_a_wrapper_keeps_its_state():
    rec = EventTypeUpdate(description="d", feature_flag=Nullable.of("beta"))
    assert rec.feature_flag == Nullable.of("beta")

    rec.feature_flag = Nullable()
    assert rec.feature_flag.is_set() is False


def test_set_validates_value_type():
    rec = EventTypeUpdate(description="d")

    with pytest.raises(ValidationError):
        rec.set("archived", "not-a-bool")


def test_unset_optional_value():
    rec = EventTypeUpdate(description="d", schemas={"1": {"type": "object"}})
    rec.unset("schemas")
    rec.unset("archived")

    assert rec.to_dict() == {"description": "d"}


def test_unset_nullable():
    rec = EventTypeUpdate(description="d")
    rec.set("featureFlag", "beta")
    rec.unset("featureFlag")

    assert rec.has("featureFlag") is False


def test_unset_required_is_rejected():
    rec = EventTypeUpdate(description="d")

    with pytest.raises(FieldAccessError, match="required fields cannot be unset"):
        rec.unset("description")


def test_set_nil_on_non_nullable_is_rejected():
    rec = EventTypeUpdate(description="d")

    with pytest.raises(FieldAccessError, match="explicit null"):
        rec.set_nil("archived")
