"""
HR API Backend — Request Rule Interpreter
===========================================

What:  Validates the body, path params and query string of a request against
       a declarative RequestSchema before the route handler runs.
How:   Schemas are plain data (FieldRule / ObjectRule / RequestSchema). One
       interpreter walks them, coerces numbers, and raises ValidationError on
       the first failing rule. `validate_request(schema)` wraps that as a
       FastAPI dependency that hands the handler a ValidatedRequest.
Who:   Route modules, via `Depends(validate_request(branch_schemas["create"]))`.

Checking order:
    sections: body → params → query
    fields:   declared order, then unknown keys (when not allowed)
    per field: required → type → empty string → email format

Error format:
    "Validation error: <Section>: <field message>"
    e.g. "Validation error: Body: Branch name cannot be empty"
"""

import json
import math
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Literal, Optional

from fastapi import Request
from pydantic import BaseModel, Field
from pydantic.networks import validate_email

from hrapi.exceptions import ValidationError

# Same shape a JSON number may take inside a string, surrounding blanks allowed
_NUMERIC_STRING = re.compile(r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:e[+-]?\d+)?\s*$", re.IGNORECASE)

SECTIONS = ("body", "params", "query")

MAX_SAFE_INTEGER = 2 ** 53 - 1

# Marks "no request body" apart from a JSON null body
_NO_BODY = object()


class FieldRule(BaseModel):
    """
    Rule for one field of a request section.

    kind:      "string" or "number"
    required:  missing key is an error when True
    email:     string must be a valid email address
    messages:  overrides keyed by failure: required, base, empty, email, number
    """
    name: str
    kind: Literal["string", "number"] = "string"
    required: bool = False
    email: bool = False
    messages: Dict[str, str] = Field(default_factory=dict)

    def message(self, failure: str) -> str:
        if failure in self.messages:
            return self.messages[failure]
        defaults = {
            "required": f'"{self.name}" is required',
            "base": f'"{self.name}" must be a string',
            "empty": f'"{self.name}" is not allowed to be empty',
            "email": f'"{self.name}" must be a valid email',
            "number": f'"{self.name}" must be a number',
        }
        return defaults[failure]


class ObjectRule(BaseModel):
    """Ordered field rules for one request section."""
    rules: List[FieldRule] = Field(default_factory=list)
    allow_unknown: bool = False


class RequestSchema(BaseModel):
    """Rules for an endpoint. Sections left as None are not checked."""
    body: Optional[ObjectRule] = None
    params: Optional[ObjectRule] = None
    query: Optional[ObjectRule] = None


def _messages(**overrides: Optional[str]) -> Dict[str, str]:
    return {failure: text for failure, text in overrides.items() if text is not None}


def string_field(
    name: str,
    required: bool = False,
    email: bool = False,
    required_msg: Optional[str] = None,
    empty: Optional[str] = None,
    invalid_email: Optional[str] = None,
) -> FieldRule:
    """Shorthand for a string FieldRule with optional custom messages."""
    return FieldRule(
        name=name,
        kind="string",
        required=required,
        email=email,
        messages=_messages(required=required_msg, empty=empty, email=invalid_email),
    )


def number_field(
    name: str,
    required: bool = False,
    required_msg: Optional[str] = None,
    not_a_number: Optional[str] = None,
) -> FieldRule:
    """Shorthand for a number FieldRule with optional custom messages."""
    return FieldRule(
        name=name,
        kind="number",
        required=required,
        messages=_messages(required=required_msg, number=not_a_number),
    )


@dataclass
class ValidatedRequest:
    """Request sections after validation and coercion."""
    body: Dict[str, Any] = field(default_factory=dict)
    params: Dict[str, Any] = field(default_factory=dict)
    query: Dict[str, Any] = field(default_factory=dict)


class _RuleFailure(Exception):
    def __init__(self, failure: str):
        self.failure = failure
        super().__init__(failure)


def _coerce_number(value: Any) -> Any:
    if isinstance(value, bool):
        raise _RuleFailure("number")
    if isinstance(value, str):
        if not _NUMERIC_STRING.match(value):
            raise _RuleFailure("number")
        value = float(value)
    if not isinstance(value, (int, float)):
        raise _RuleFailure("number")
    if isinstance(value, float) and (math.isinf(value) or math.isnan(value)):
        raise _RuleFailure("number")
    # Outside this range numbers lose integer precision
    if abs(value) > MAX_SAFE_INTEGER:
        raise _RuleFailure("number")
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _is_email(value: str) -> bool:
    # validate_email also accepts "Name <addr>"; only bare addresses count here
    if "<" in value or ">" in value:
        return False
    try:
        validate_email(value)
    except ValueError:
        return False
    return True


def _check_string(rule: FieldRule, value: Any) -> str:
    if not isinstance(value, str):
        raise _RuleFailure("base")
    if value == "":
        raise _RuleFailure("empty")
    if rule.email and not _is_email(value):
        raise _RuleFailure("email")
    return value


def check_field(rule: FieldRule, value: Any) -> Any:
    """Checks one present value against its rule and returns it coerced."""
    if rule.kind == "number":
        return _coerce_number(value)
    return _check_string(rule, value)


def validate_section(section: str, rule: ObjectRule, data: Any) -> Dict[str, Any]:
    """
    Runs one request section through its ObjectRule.

    Returns a copy of the section with coerced values. Unknown keys are
    passed through when allowed and rejected otherwise.

    Raises:
        ValidationError: on the first failing rule
    """
    if not isinstance(data, dict):
        raise ValidationError(section, '"value" must be of type object')

    validated: Dict[str, Any] = dict(data) if rule.allow_unknown else {}
    known = set()

    for field_rule in rule.rules:
        known.add(field_rule.name)
        if field_rule.name not in data:
            if field_rule.required:
                raise ValidationError(section, field_rule.message("required"), field=field_rule.name)
            continue
        try:
            validated[field_rule.name] = check_field(field_rule, data[field_rule.name])
        except _RuleFailure as failure:
            raise ValidationError(
                section, field_rule.message(failure.failure), field=field_rule.name
            ) from None

    if not rule.allow_unknown:
        for key in data:
            if key not in known:
                raise ValidationError(section, f'"{key}" is not allowed', field=key)

    return validated


def validate_sections(
    schema: RequestSchema,
    body: Any = _NO_BODY,
    params: Optional[Dict[str, Any]] = None,
    query: Optional[Dict[str, Any]] = None,
) -> ValidatedRequest:
    """
    Validates every section the schema declares, in body → params → query order.

    Sections without rules are passed through untouched. An omitted body
    counts as empty; `None` is a JSON null body and fails the object check.
    """
    raw = {
        "body": {} if body is _NO_BODY else body,
        "params": params or {},
        "query": query or {},
    }
    result = {}
    for section in SECTIONS:
        rule = getattr(schema, section)
        if rule is None:
            result[section] = raw[section] if isinstance(raw[section], dict) else {}
        else:
            result[section] = validate_section(section, rule, raw[section])
    return ValidatedRequest(**result)


async def _read_json_body(request: Request) -> Any:
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        return json.loads(raw)
    except ValueError:
        raise ValidationError("body", "Malformed JSON body") from None


def validate_request(schema: RequestSchema) -> Callable:
    """
    Builds a FastAPI dependency enforcing `schema`.

    Usage:
        @router.post("/branches")
        async def create_branch(
            validated: ValidatedRequest = Depends(validate_request(branch_schemas["create"])),
        ): ...

    On failure the dependency raises ValidationError, which the global handler
    turns into 400 {"error": "Validation error: ..."}; the handler never runs.
    """

    async def dependency(request: Request) -> ValidatedRequest:
        body = await _read_json_body(request) if schema.body is not None else _NO_BODY
        return validate_sections(
            schema,
            body=body,
            params=dict(request.path_params),
            query=dict(request.query_params),
        )

    return dependency
