"""
Admin JSON editor support.

Helpers behind the product form editor: check pasted JSON, pretty-print
it, offer a sample, and convert legacy custom fields to a schema.
"""

import json
import logging
from typing import Any, Mapping

from pydantic import BaseModel, Field

from form_builder.config import get_config
from form_builder.models.schema import FormSchema, Section, parse_field
from form_builder.validation.schema_validator import validate_schema

logger = logging.getLogger("form_builder.editor")


class SchemaValidationError(ValueError):
    """An authored schema document is not usable."""


class EditorState(BaseModel):
    """Outcome of checking the editor's JSON text."""

    is_valid: bool = False
    error: str | None = None
    warnings: list[str] = Field(default_factory=list)
    form_schema: FormSchema | None = None


SAMPLE_SCHEMA: dict[str, Any] = {
    "sections": [
        {
            "id": 1,
            "name": "Basic Information",
            "width": 100,
            "isPadding": True,
            "collapsible": True,
            "expanded": True,
            "fields": [
                {
                    "type": "text",
                    "label": "Full Name",
                    "name": "fullName",
                    "placeholder": "Enter your full name",
                    "required": True,
                },
                {
                    "type": "email",
                    "label": "Email Address",
                    "name": "email",
                    "placeholder": "example@email.com",
                    "required": True,
                },
            ],
        },
        {
            "id": 2,
            "name": "Preferences",
            "width": 100,
            "collapsible": True,
            "expanded": True,
            "fields": [
                {
                    "type": "select",
                    "label": "Preferred Theme",
                    "name": "theme",
                    "options": ["Light", "Dark", "Auto"],
                    "defaultValue": "Auto",
                    "required": False,
                },
                {
                    "type": "number",
                    "label": "Age",
                    "name": "age",
                    "placeholder": "Enter your age",
                    "min": 18,
                    "max": 120,
                    "required": False,
                },
            ],
        },
    ]
}


def _indent(indent: int | None) -> int:
    return get_config().json_indent if indent is None else indent


def sample_schema_json(indent: int | None = None) -> str:
    """Sample schema text to start editing from."""
    return json.dumps(SAMPLE_SCHEMA, indent=_indent(indent), ensure_ascii=False)


def format_schema_json(text: str, indent: int | None = None) -> str:
    """
    Pretty-print JSON text.

    The text only has to be valid JSON, not a valid schema.

    Raises:
        ValueError: If the text is not valid JSON.
    """
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Cannot format invalid JSON: {e}") from e
    return json.dumps(parsed, indent=_indent(indent), ensure_ascii=False)


def load_schema(raw: Any) -> FormSchema:
    """
    Validate and parse an authored schema.

    Args:
        raw: JSON text or a parsed document.

    Returns:
        The parsed FormSchema.

    Raises:
        SchemaValidationError: With the first problem found.
    """
    if isinstance(raw, FormSchema):
        return raw
    if isinstance(raw, (str, bytes)):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError as e:
            raise SchemaValidationError(f"JSON Syntax Error: {e}") from e

    result = validate_schema(raw)
    if not result.valid:
        raise SchemaValidationError(result.error)

    return FormSchema.model_validate(raw)


def check_schema_json(text: str) -> EditorState:
    """
    Check the editor's JSON text.

    Blank text is neither valid nor an error. Otherwise the first
    syntax or schema error is reported verbatim.
    """
    if not text or not text.strip():
        return EditorState()

    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        return EditorState(error=f"JSON Syntax Error: {e}")

    result = validate_schema(raw)
    if not result.valid:
        return EditorState(error=result.error)

    schema = FormSchema.model_validate(raw)
    for warning in result.warnings:
        logger.info(f"Schema warning: {warning}")
    return EditorState(is_valid=True, warnings=result.warnings, form_schema=schema)


def _migrated_field(custom_field: Mapping[str, Any]) -> dict[str, Any]:
    label = str(custom_field.get("label", ""))
    field: dict[str, Any] = {
        "name": custom_field.get("name"),
        "label": label,
        "required": bool(custom_field.get("required", False)),
    }
    placeholder = f"Enter {label.lower()}"

    legacy_type = custom_field.get("type")
    if legacy_type == "number":
        field.update(type="number", placeholder=placeholder, min=0, step=1)
    elif legacy_type == "email":
        field.update(type="email", placeholder="example@email.com")
    elif legacy_type == "date":
        field.update(type="date")
    elif legacy_type == "textarea":
        field.update(type="textarea", placeholder=placeholder, rows=4)
    else:
        field.update(type="text", placeholder=placeholder)
    return field


def migrate_custom_fields(
    custom_fields: list[Mapping[str, Any]],
    product_name: str = "Generator",
) -> FormSchema:
    """
    Convert legacy flat custom fields into a one-section schema.

    Args:
        custom_fields: Items with ``name``, ``label``, ``type`` and ``required``.
        product_name: Used for the section title.

    Returns:
        FormSchema with a single full-width section.
    """
    section = Section(
        id=1,
        name=f"{product_name} Configuration",
        width=100,
        is_padding=True,
        collapsible=False,
        expanded=True,
        fields=[parse_field(_migrated_field(item)) for item in custom_fields],
    )
    return FormSchema(sections=[section])
