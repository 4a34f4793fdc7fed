"""Shape of the stencil settings document.

The schema is a small tree of explicit type predicates. Validation walks the
tree in declaration order and returns every violation it finds, so the order
of issues is stable between runs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Union

from ..parsing.source_location import to_json_pointer


PathToken = Union[str, int]


@dataclass(frozen=True)
class SchemaIssue:
    message: str
    path: Tuple[PathToken, ...] = ()

    @property
    def dotted_path(self) -> str:
        return ".".join(str(token) for token in self.path)

    @property
    def yaml_path(self) -> str:
        return to_json_pointer(self.path)


@dataclass(frozen=True)
class TypeSpec:
    types: Tuple[type, ...]
    label: str
    # Message reported for zero-length values; None allows them
    empty_message: Optional[str] = None


@dataclass(frozen=True)
class ListSpec:
    item: "SchemaSpec"


@dataclass(frozen=True)
class MappingSpec:
    """Open mapping; scalar keys are read as their text form."""
    value: "SchemaSpec"


@dataclass(frozen=True)
class ObjectSpec:
    fields: Dict[str, "FieldSpec"]
    allow_extra: bool = True


SchemaSpec = Union[TypeSpec, ListSpec, MappingSpec, ObjectSpec]


@dataclass(frozen=True)
class FieldSpec:
    spec: SchemaSpec
    required: bool = False


def describe_value_type(value: Any) -> str:
    """Return a YAML/JSON flavoured name for the type of *value*."""
    if value is None:
        return "null"
    # bool is a subclass of int
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def mapping_key(key: Any) -> str:
    """Text form of a scalar mapping key (`8080` -> "8080", `true` -> "true")."""
    if key is None:
        return ""
    if isinstance(key, bool):
        return "true" if key else "false"
    return str(key)


def _mismatch(label: str, value: Any, path: Tuple[PathToken, ...]) -> SchemaIssue:
    return SchemaIssue(message=f"Expected {label}, received {describe_value_type(value)}", path=path)


def _validate_spec(spec: SchemaSpec, value: Any, *, path: Tuple[PathToken, ...]) -> List[SchemaIssue]:
    if isinstance(spec, TypeSpec):
        if not isinstance(value, spec.types):
            return [_mismatch(spec.label, value, path)]
        if spec.empty_message is not None and len(value) == 0:
            return [SchemaIssue(message=spec.empty_message, path=path)]
        return []

    if isinstance(spec, ListSpec):
        if not isinstance(value, list):
            return [_mismatch("array", value, path)]
        issues: List[SchemaIssue] = []
        for idx, item in enumerate(value):
            issues.extend(_validate_spec(spec.item, item, path=path + (idx,)))
        return issues

    if isinstance(spec, MappingSpec):
        if not isinstance(value, dict):
            return [_mismatch("object", value, path)]
        issues = []
        for key, item in value.items():
            issues.extend(_validate_spec(spec.value, item, path=path + (mapping_key(key),)))
        return issues

    if isinstance(spec, ObjectSpec):
        if not isinstance(value, dict):
            return [_mismatch("object", value, path)]
        issues = []
        for field_name, field_spec in spec.fields.items():
            if field_name not in value:
                if field_spec.required:
                    issues.append(SchemaIssue(message="Required", path=path + (field_name,)))
                continue
            issues.extend(_validate_spec(field_spec.spec, value[field_name], path=path + (field_name,)))
        if not spec.allow_extra:
            for field_name in value:
                if field_name not in spec.fields:
                    issues.append(SchemaIssue(message=f"Unknown field '{field_name}'", path=path + (str(field_name),)))
        return issues

    return [SchemaIssue(message="Internal error: unknown schema spec", path=path)]


# -------------------------
# Stencil settings definition
# -------------------------

_STR = TypeSpec((str,), "string")
_ANY = TypeSpec((object,), "any")


def _required_str(empty_message: str) -> FieldSpec:
    return FieldSpec(TypeSpec((str,), "string", empty_message=empty_message), required=True)


STENCIL_SETTINGS_SCHEMA = ObjectSpec(
    fields={
        "id": _required_str("Stencil ID is required"),
        "name": _required_str("Stencil name is required"),
        "version": _required_str("Version is required"),
        "type": _required_str("Stencil type is required"),
        "description": FieldSpec(_STR),
        "files": FieldSpec(ListSpec(_STR)),
        "include": FieldSpec(ListSpec(_STR)),
        "extend": FieldSpec(_STR),
        "variables": FieldSpec(MappingSpec(_ANY)),
        "metadata": FieldSpec(MappingSpec(_ANY)),
    },
    allow_extra=True,
)


def validate_settings(data: Any) -> List[SchemaIssue]:
    """Validate a parsed settings document, returning every violation found."""
    return _validate_spec(STENCIL_SETTINGS_SCHEMA, data, path=())
