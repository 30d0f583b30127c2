"""
Structural validation of authored form schemas.

Stricter than the renderer: a schema that fails here must not be
saved or rendered. Checks stop at the first blocking error; once a
schema passes, non-blocking warnings are collected.
"""

import logging
from collections import Counter
from typing import Any, Mapping

from form_builder.field_kinds import FIELD_TYPES
from pydantic import ValidationError

from form_builder.models.schema import FormSchema
from form_builder.models.validation_result import SchemaValidationResult

logger = logging.getLogger("form_builder.validation")

SECTION_WIDTHS = (25, 50, 75, 100)


def _is_blank(value: Any) -> bool:
    return value is None or value == ""


def _valid_width(width: Any) -> bool:
    return not isinstance(width, bool) and width in SECTION_WIDTHS


def _first_error(raw: Any) -> str | None:
    if not isinstance(raw, Mapping) or not isinstance(raw.get("sections"), list):
        return 'Invalid form structure: missing required field "sections" (must be an array)'

    for section in raw["sections"]:
        if not isinstance(section, Mapping):
            return "Invalid section structure: unnamed section - missing required fields (id, name, fields)"

        name = section.get("name")
        if (
            _is_blank(section.get("id"))
            or _is_blank(name)
            or not isinstance(section.get("fields"), list)
        ):
            return (
                f"Invalid section structure: {name or 'unnamed section'}"
                " - missing required fields (id, name, fields)"
            )

        if not _valid_width(section.get("width")):
            return f'Invalid section width in "{name}": must be 25, 50, 75, or 100'

        for field in section["fields"]:
            if not isinstance(field, Mapping) or any(
                _is_blank(field.get(key)) for key in ("type", "name", "label")
            ):
                return (
                    f'Invalid field in section "{name}":'
                    " missing required properties (type, name, label)"
                )

            field_type = field["type"]
            if field_type not in FIELD_TYPES:
                return (
                    f'Invalid field type "{field_type}" in section "{name}".'
                    f" Valid types: {', '.join(FIELD_TYPES)}"
                )

            options = field.get("options")
            if field_type == "select" and (not isinstance(options, list) or not options):
                return f'Select field "{field["label"]}" in section "{name}" must have options array'

    return None


def _collect_warnings(raw: Mapping[str, Any]) -> list[str]:
    warnings: list[str] = []
    fields = [field for section in raw["sections"] for field in section["fields"]]
    names = Counter(str(field["name"]) for field in fields)

    for name, count in names.items():
        if count > 1:
            warnings.append(f'Field name "{name}" is used {count} times')

    for field in fields:
        logic = field.get("conditionalLogic")
        if isinstance(logic, Mapping) and logic.get("enabled") and str(logic.get("fieldId")) not in names:
            warnings.append(
                f'Field "{field["name"]}" depends on unknown field "{logic.get("fieldId")}"'
            )

        prices = field.get("optionPrices")
        options = field.get("options")
        option_count = len(options) if isinstance(options, list) else 0
        if isinstance(prices, list) and len(prices) > option_count:
            warnings.append(
                f'Field "{field["name"]}" has more option prices than options'
            )

        if field["type"] == "select" and field.get("multiple"):
            warnings.append(
                f'Field "{field["name"]}" sets multiple, which is not supported; it renders as a single select'
            )

    return warnings


def _model_error(e: ValidationError) -> str:
    first = e.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    return f"Invalid property at {location}: {first['msg']}"


def validate_schema(raw: Any) -> SchemaValidationResult:
    """
    Check a raw schema document before it is trusted.

    Args:
        raw: Parsed JSON document (or a FormSchema).

    Returns:
        SchemaValidationResult; ``error`` holds the first problem found.

    Example:
        >>> validate_schema({"sections": [{"id": 1, "name": "S", "width": 33, "fields": []}]}).valid
        False
    """
    if isinstance(raw, FormSchema):
        raw = raw.to_json_dict()

    error = _first_error(raw)
    if error is not None:
        logger.debug(f"Schema rejected: {error}")
        return SchemaValidationResult(valid=False, error=error)

    try:
        FormSchema.model_validate(raw)
    except ValidationError as e:
        error = _model_error(e)
        logger.debug(f"Schema rejected: {error}")
        return SchemaValidationResult(valid=False, error=error)

    return SchemaValidationResult(valid=True, warnings=_collect_warnings(raw))
