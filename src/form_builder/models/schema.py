"""
Form schema models.

These models describe the JSON document an admin attaches to a product:
sections of fields, with per-field validation, conditional visibility
and per-option pricing. Keys use camelCase in JSON and snake_case in Python.
"""

import json
import logging
from typing import Annotated, Any, Literal, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator
from pydantic.alias_generators import to_camel

logger = logging.getLogger("form_builder.models")

Number = int | float
OptionPriceType = Literal["fixed", "percentage"]
FormDisplayMode = Literal["sidebar", "fullwidth"]

# Submission values keyed by field name.
FormSubmissionData = dict[str, Any]


class FormModel(BaseModel):
    """Base model accepting both the JSON (camelCase) and Python names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_json_dict(self) -> dict[str, Any]:
        """Export in the stored JSON shape."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ConditionalLogic(FormModel):
    """Show a field only when another field holds a given value."""

    enabled: bool = False
    field_id: str = Field(default="", description="Name of the controlling field")
    value: str = Field(default="", description="Expected value; empty means 'must be empty'")


class FieldValidation(FormModel):
    """Nested validation block of a field."""

    alphanumeric: bool | None = None
    min_length: int | None = None
    max_length: int | None = None
    min: Number | None = None
    max: Number | None = None
    pattern: str | None = None
    email: bool | None = None


class BaseField(FormModel):
    """Properties shared by every field kind."""

    id: int | str | None = None
    type: str
    name: str = Field(..., description="Submission data key")
    label: str = Field(..., description="Display text")
    placeholder: str | None = None
    default_value: Any = None
    description: str | None = None
    required: bool = False
    conditional_logic: ConditionalLogic | None = None
    validation: FieldValidation | None = None

    # Flat validation properties of the older schema format
    alphanumeric: bool | None = None
    min_length: int | None = None
    max_length: int | None = None
    pattern: str | None = None

    readonly: bool = False
    disabled: bool = False

    @field_validator("placeholder", "description", mode="before")
    @classmethod
    def coerce_display_text(cls, v: Any) -> str | None:
        """Numbers become text; other non-text values are ignored."""
        if v is None or isinstance(v, str):
            return v
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return None


def resolve_constraint(field: BaseField, key: str) -> Any:
    """
    Read a validation constraint, flat property first.

    ``field.min_length`` wins over ``field.validation.min_length``; the
    nested value is used only when the flat one is absent.
    """
    value = getattr(field, key, None)
    if value is None and field.validation is not None:
        value = getattr(field.validation, key, None)
    return value


class TextField(BaseField):
    type: Literal["text"] = "text"
    # Autocomplete suggestions; may carry prices like a select
    options: list[str] | None = None
    option_prices: list[Number | None] | None = None
    option_price_type: OptionPriceType = "fixed"


class EmailField(BaseField):
    type: Literal["email"] = "email"


class TextareaField(BaseField):
    type: Literal["textarea"] = "textarea"
    rows: int | None = None
    cols: int | None = None


class NumberField(BaseField):
    type: Literal["number"] = "number"
    min: Number | None = None
    max: Number | None = None
    step: Number | None = None


class DateField(BaseField):
    type: Literal["date"] = "date"
    min: str | None = Field(default=None, description="ISO date lower bound")
    max: str | None = Field(default=None, description="ISO date upper bound")


class SelectField(BaseField):
    type: Literal["select"] = "select"
    options: list[str] = Field(default_factory=list)
    option_prices: list[Number | None] | None = None
    option_price_type: OptionPriceType = "fixed"
    multiple: bool = False


FormField = Annotated[
    Union[TextField, EmailField, TextareaField, NumberField, DateField, SelectField],
    Field(discriminator="type"),
]

_FIELD_ADAPTER: TypeAdapter[FormField] = TypeAdapter(FormField)


def parse_field(raw: Mapping[str, Any] | BaseField) -> BaseField:
    """Parse a single field definition into its typed model."""
    if isinstance(raw, BaseField):
        return raw
    return _FIELD_ADAPTER.validate_python(raw)


class Section(FormModel):
    """A named group of fields occupying a share of the form width."""

    id: int | str | None = None
    name: str = ""
    width: int = Field(default=100, description="25, 50, 75 or 100 percent")
    is_padding: bool = False
    collapsible: bool = False
    expanded: bool = True
    fields: list[FormField] = Field(default_factory=list)


class FormSchema(FormModel):
    """Root form builder document."""

    sections: list[Section] = Field(default_factory=list)

    def iter_fields(self):
        """Yield ``(section, field)`` pairs in document order."""
        for section in self.sections:
            for field in section.fields:
                yield section, field

    def get_field(self, name: str) -> BaseField | None:
        """Find a field by name; the first match wins."""
        for _, field in self.iter_fields():
            if field.name == name:
                return field
        return None

    @property
    def field_names(self) -> list[str]:
        return [field.name for _, field in self.iter_fields()]


def coerce_schema(raw: Any) -> FormSchema | None:
    """
    Build a FormSchema from loosely shaped input without raising.

    Sections that are not objects or lack a ``fields`` list are dropped, and
    so are fields that do not parse. Returns None when there is no schema.

    Args:
        raw: A FormSchema, a mapping, a JSON string or None.

    Returns:
        The usable part of the schema, or None.
    """
    if raw is None:
        return None
    if isinstance(raw, FormSchema):
        return raw
    if isinstance(raw, (str, bytes)):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.debug(f"Schema is not valid JSON: {e}")
            return None
    if not isinstance(raw, Mapping):
        logger.debug(f"Schema must be an object, got {type(raw).__name__}")
        return None

    raw_sections = raw.get("sections")
    if not isinstance(raw_sections, list):
        return FormSchema()

    sections: list[Section] = []
    for index, raw_section in enumerate(raw_sections):
        if not isinstance(raw_section, Mapping) or not isinstance(raw_section.get("fields"), list):
            logger.debug(f"Skipping malformed section at index {index}")
            continue
        try:
            section = Section.model_validate({**raw_section, "fields": []})
        except ValidationError as e:
            logger.debug(f"Skipping section at index {index}: {e.error_count()} errors")
            continue

        for raw_field in raw_section["fields"]:
            try:
                section.fields.append(parse_field(raw_field))
            except ValidationError:
                name = raw_field.get("name") if isinstance(raw_field, Mapping) else None
                logger.debug(f"Skipping malformed field {name!r} in section {section.name!r}")
        sections.append(section)

    return FormSchema(sections=sections)
