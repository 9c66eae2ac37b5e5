"""Tool Schema: tests for the generic argument validator.

Tests cover:
    - Required fields, primitive types, enum membership, opaque maps
    - Optional fields: absent omitted, explicit null rejected
    - First violation reported in declaration order
    - Non-object argument bags
    - JSON Schema rendering for tools/list
"""

import math

import pytest

from baas_mcp.core.domain_types import FieldKind
from baas_mcp.core.errors import ToolValidationError
from baas_mcp.core.tool_schema import (
    FieldSpec, ToolSchema, boolean, mapping, number, one_of, string,
    validate_arguments,
)

_SCHEMA = ToolSchema((
    string("meetingUrl"),
    string("botName"),
    string("webhookUrl", required=False),
    boolean("reserved"),
    number("limit", required=False),
    one_of("platform", ("Google", "Microsoft"), required=False),
    mapping("extra", required=False),
))

_VALID = {"meetingUrl": "https://meet.example/abc", "botName": "Notetaker", "reserved": False}


def _violation(arguments) -> ToolValidationError:
    with pytest.raises(ToolValidationError) as exc:
        validate_arguments(_SCHEMA, arguments)
    return exc.value


def test_valid_arguments_pass_through():
    assert validate_arguments(_SCHEMA, dict(_VALID)) == _VALID


def test_missing_required_field_is_reported():
    args = dict(_VALID)
    del args["meetingUrl"]
    err = _violation(args)
    assert err.field == "meetingUrl"
    assert "required" in err.message


def test_first_violation_follows_declaration_order():
    err = _violation({"reserved": "yes"})
    assert err.field == "meetingUrl"


def test_wrong_string_type_rejected():
    err = _violation({**_VALID, "botName": 42})
    assert err.field == "botName"
    assert "expected string, got number" in err.message


def test_boolean_rejects_truthy_strings():
    err = _violation({**_VALID, "reserved": "false"})
    assert err.field == "reserved"


def test_number_accepts_int_and_float():
    assert validate_arguments(_SCHEMA, {**_VALID, "limit": 10})["limit"] == 10
    assert validate_arguments(_SCHEMA, {**_VALID, "limit": 2.5})["limit"] == 2.5


def test_number_rejects_bool():
    err = _violation({**_VALID, "limit": True})
    assert err.field == "limit"
    assert "got boolean" in err.message


def test_number_rejects_nan():
    err = _violation({**_VALID, "limit": math.nan})
    assert "NaN" in err.message


@pytest.mark.parametrize("value", [math.inf, -math.inf])
def test_number_rejects_infinity(value):
    err = _violation({**_VALID, "limit": value})
    assert err.field == "limit"
    assert "finite" in err.message


def test_enum_value_outside_set_rejected():
    err = _violation({**_VALID, "platform": "Apple"})
    assert err.field == "platform"
    assert "'Google'" in err.message and "'Apple'" in err.message


def test_enum_value_inside_set_accepted():
    assert validate_arguments(_SCHEMA, {**_VALID, "platform": "Microsoft"})["platform"] == "Microsoft"


def test_map_accepts_any_object():
    extra = {"team": "sales", "nested": {"deep": [1, 2]}}
    assert validate_arguments(_SCHEMA, {**_VALID, "extra": extra})["extra"] == extra


def test_map_rejects_list():
    err = _violation({**_VALID, "extra": ["a"]})
    assert err.field == "extra"
    assert "got array" in err.message


def test_absent_optional_fields_are_omitted():
    result = validate_arguments(_SCHEMA, dict(_VALID))
    assert "webhookUrl" not in result
    assert "limit" not in result


def test_explicit_null_for_optional_field_rejected():
    err = _violation({**_VALID, "webhookUrl": None})
    assert err.field == "webhookUrl"
    assert "got null" in err.message


def test_unknown_keys_dropped():
    result = validate_arguments(_SCHEMA, {**_VALID, "surprise": 1})
    assert "surprise" not in result


def test_none_arguments_treated_as_empty_object():
    assert validate_arguments(ToolSchema(), None) == {}
    err = _violation(None)
    assert err.field == "meetingUrl"


def test_non_object_arguments_rejected():
    err = _violation(["meetingUrl"])
    assert err.field == "arguments"
    assert "got array" in err.message


def test_enum_field_requires_choices():
    with pytest.raises(ValueError):
        FieldSpec("platform", FieldKind.ENUM)


def test_json_schema_rendering():
    schema = ToolSchema((
        string("uuid", description="Calendar UUID"),
        one_of("platform", ("Google", "Microsoft"), required=False),
        number("limit", required=False),
        mapping("extra", required=False),
    )).to_json_schema()
    assert schema["type"] == "object"
    assert schema["required"] == ["uuid"]
    assert schema["properties"]["uuid"] == {"type": "string", "description": "Calendar UUID"}
    assert schema["properties"]["platform"] == {"type": "string", "enum": ["Google", "Microsoft"]}
    assert schema["properties"]["limit"] == {"type": "number"}
    assert schema["properties"]["extra"]["type"] == "object"


def test_empty_schema_renders_no_required():
    assert ToolSchema().to_json_schema() == {
        "type": "object", "properties": {}, "required": [],
    }
