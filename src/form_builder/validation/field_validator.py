"""
Runtime validation of submitted field values.

Rules run in a fixed order and the first failure wins, so a field
reports at most one error at a time.
"""

import functools
import logging
import re
from typing import Any, Mapping

from pydantic import ValidationError

from form_builder.field_kinds import get_field_kind
from form_builder.models.schema import (
    BaseField,
    FormSchema,
    coerce_schema,
    parse_field,
    resolve_constraint,
)
from form_builder.models.validation_result import FormValidationResult
from form_builder.formatting import format_number

logger = logging.getLogger("form_builder.validation")

ALPHANUMERIC = re.compile(r"[a-zA-Z0-9]+")
EMAIL_SHAPE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def is_missing(value: Any) -> bool:
    """A required field is missing when None, empty text or an empty list."""
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (list, tuple)):
        return len(value) == 0
    return False


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@functools.lru_cache(maxsize=256)
def _compile_pattern(pattern: str) -> re.Pattern | None:
    try:
        return re.compile(pattern)
    except re.error as e:
        logger.warning(f"Ignoring invalid pattern {pattern!r}: {e}")
        return None


def _check_string(field: BaseField, value: str) -> str | None:
    label = field.label

    min_length = resolve_constraint(field, "min_length")
    if min_length and len(value) < min_length:
        return f"{label} must be at least {min_length} characters"

    max_length = resolve_constraint(field, "max_length")
    if max_length and len(value) > max_length:
        return f"{label} must be no more than {max_length} characters"

    if resolve_constraint(field, "alphanumeric") and not ALPHANUMERIC.fullmatch(value):
        return f"{label} must contain only letters and numbers"

    pattern = resolve_constraint(field, "pattern")
    if pattern:
        regex = _compile_pattern(pattern)
        if regex is not None and not regex.search(value):
            return f"{label} format is invalid"

    wants_email = get_field_kind(field).string_format == "email" or resolve_constraint(field, "email")
    if wants_email and value and not EMAIL_SHAPE.fullmatch(value):
        return f"{label} must be a valid email address"

    return None


def _check_number(field: BaseField, value: int | float) -> str | None:
    label = field.label

    minimum = resolve_constraint(field, "min")
    if _is_number(minimum) and value < minimum:
        return f"{label} must be at least {format_number(minimum)}"

    maximum = resolve_constraint(field, "max")
    if _is_number(maximum) and value > maximum:
        return f"{label} must be no more than {format_number(maximum)}"

    return None


def validate_field(field: BaseField | Mapping[str, Any], value: Any) -> str | None:
    """
    Validate a candidate value against a field's constraints.

    Args:
        field: The field definition (model or raw mapping). A raw mapping
            may leave out ``name`` and ``label``.
        value: The submitted value.

    Returns:
        The first error message, or None if the value is acceptable.
    """
    if not isinstance(field, BaseField):
        if not isinstance(field, Mapping):
            return None
        try:
            field = parse_field({"name": "", "label": "", **field})
        except ValidationError as e:
            logger.debug(f"Cannot validate against unusable field definition: {e.error_count()} errors")
            return None

    if field.required and is_missing(value):
        return f"{field.label} is required"

    if isinstance(value, str):
        return _check_string(field, value)

    if _is_number(value):
        return _check_number(field, value)

    return None


def validate_data(
    schema: FormSchema | Mapping[str, Any] | None,
    data: Mapping[str, Any] | None,
) -> FormValidationResult:
    """
    Validate every field of a schema, visible or not.

    Args:
        schema: The form schema.
        data: Submission data.

    Returns:
        FormValidationResult with one message per failing field.
    """
    schema = coerce_schema(schema)
    data = data or {}
    errors: dict[str, str] = {}

    if schema is not None:
        for _, field in schema.iter_fields():
            error = validate_field(field, data.get(field.name))
            if error:
                errors[field.name] = error

    return FormValidationResult(is_valid=not errors, errors=errors)
