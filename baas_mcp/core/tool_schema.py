"""Tool Schema: tagged field descriptors and the single generic argument validator.

Invariants:
    - Every field is a scalar, an enum, or an opaque map (no nested validation)
    - validate_arguments() reports the FIRST violation in field declaration order
    - Validated output contains only declared fields that were supplied
    - Absent optional fields are omitted; an explicit null is a type violation
    - bool is never accepted as a number; NaN and infinities are never accepted

Design Decisions:
    - One validator driven by declarative tables instead of one ad-hoc shape per tool
    - Unknown extra keys dropped silently: callers may send more than the schema
      declares without being rejected
    - to_json_schema() renders the same descriptors the validator uses, so the
      schema the agent sees cannot drift from the one enforced
"""

import math
from dataclasses import dataclass
from typing import Any

from baas_mcp.core.domain_types import FieldKind
from baas_mcp.core.errors import ToolValidationError


@dataclass(frozen=True)
class FieldSpec:
    """One named argument with its primitive constraint and optionality."""
    name: str
    kind: FieldKind
    required: bool = True
    choices: tuple[str, ...] = ()
    description: str | None = None

    def __post_init__(self):
        if self.kind is FieldKind.ENUM and not self.choices:
            raise ValueError(f"Enum field '{self.name}' declares no choices")


@dataclass(frozen=True)
class ToolSchema:
    """Ordered field descriptors for one tool."""
    fields: tuple[FieldSpec, ...] = ()

    def to_json_schema(self) -> dict:
        """Render as a JSON Schema object for tools/list."""
        properties = {f.name: _field_json_schema(f) for f in self.fields}
        return {
            "type": "object",
            "properties": properties,
            "required": [f.name for f in self.fields if f.required],
        }


# ─── Field constructors ──────────────────────────────────────────

def string(name: str, required: bool = True, description: str | None = None) -> FieldSpec:
    return FieldSpec(name, FieldKind.STRING, required, description=description)


def number(name: str, required: bool = True, description: str | None = None) -> FieldSpec:
    return FieldSpec(name, FieldKind.NUMBER, required, description=description)


def boolean(name: str, required: bool = True, description: str | None = None) -> FieldSpec:
    return FieldSpec(name, FieldKind.BOOLEAN, required, description=description)


def one_of(
    name: str, choices: tuple[str, ...], required: bool = True,
    description: str | None = None,
) -> FieldSpec:
    return FieldSpec(name, FieldKind.ENUM, required, tuple(choices), description)


def mapping(name: str, required: bool = True, description: str | None = None) -> FieldSpec:
    return FieldSpec(name, FieldKind.MAP, required, description=description)


# ─── Validation ──────────────────────────────────────────────────

def validate_arguments(schema: ToolSchema, arguments: Any) -> dict:
    """Check raw call arguments against schema. Raises ToolValidationError."""
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, dict):
        raise ToolValidationError(
            f"arguments must be an object, got {_type_name(arguments)}",
            field="arguments",
        )

    validated: dict = {}
    for spec in schema.fields:
        if spec.name not in arguments:
            if spec.required:
                raise ToolValidationError(
                    f"{spec.name}: required field is missing", field=spec.name,
                )
            continue
        value = arguments[spec.name]
        problem = _check_value(spec, value)
        if problem:
            raise ToolValidationError(f"{spec.name}: {problem}", field=spec.name)
        validated[spec.name] = value
    return validated


def _check_value(spec: FieldSpec, value: Any) -> str | None:
    """Return a violation description, or None when value satisfies spec."""
    if spec.kind is FieldKind.STRING:
        if not isinstance(value, str):
            return f"expected string, got {_type_name(value)}"
    elif spec.kind is FieldKind.NUMBER:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return f"expected number, got {_type_name(value)}"
        if isinstance(value, float) and math.isnan(value):
            return "expected number, got NaN"
        if isinstance(value, float) and math.isinf(value):
            return "expected finite number, got Infinity"
    elif spec.kind is FieldKind.BOOLEAN:
        if not isinstance(value, bool):
            return f"expected boolean, got {_type_name(value)}"
    elif spec.kind is FieldKind.ENUM:
        if not isinstance(value, str) or value not in spec.choices:
            allowed = ", ".join(repr(c) for c in spec.choices)
            return f"expected one of {allowed}, got {value!r}"
    elif spec.kind is FieldKind.MAP:
        if not isinstance(value, dict) or not all(isinstance(k, str) for k in value):
            return f"expected object, got {_type_name(value)}"
    return None


def _type_name(value: Any) -> str:
    """JSON-flavoured type name for error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, dict):
        return "object"
    if isinstance(value, (list, tuple)):
        return "array"
    return type(value).__name__


def _field_json_schema(spec: FieldSpec) -> dict:
    if spec.kind is FieldKind.ENUM:
        prop: dict = {"type": "string", "enum": list(spec.choices)}
    elif spec.kind is FieldKind.MAP:
        prop = {"type": "object", "additionalProperties": {}}
    else:
        prop = {"type": spec.kind.value}
    if spec.description:
        prop["description"] = spec.description
    return prop
