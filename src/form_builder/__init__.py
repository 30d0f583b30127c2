"""
Form Builder: declarative product forms.

A JSON schema describes sections of fields. The engine validates the
schema when it is authored, renders it, validates values as buyers fill
it in, prices the selected options and summarizes submitted data.

Simple Usage:
    from form_builder import FormRenderer, load_schema

    schema = load_schema(schema_json)

    renderer = FormRenderer(schema, base_price=50.0)
    renderer.on_field_change("tier", "Pro")
    renderer.on_field_blur("tier")

    result = renderer.validate_all()
    total = renderer.base_price + renderer.total_price

Standalone pieces:
    from form_builder import calculate_price, is_visible, summarize, validate_field

    validate_field(field, "abc")             # error message or None
    calculate_price(schema, data, 50.0)      # additional charges
    summarize(schema, data, compact=True)    # display rows or None

Logging:
    from form_builder.logging_setup import setup_logging

    setup_logging(verbose=True, file_path="form_builder.jsonl")
"""

from form_builder.renderer import FormRenderer
from form_builder.models import (
    ConditionalLogic,
    FieldValidation,
    FormField,
    FormPricingCalculation,
    FormSchema,
    FormSubmissionData,
    FormSummary,
    FormValidationResult,
    RenderedForm,
    SchemaValidationResult,
    Section,
    coerce_schema,
)
from form_builder.field_kinds import FIELD_KINDS, FIELD_TYPES
from form_builder.validation import validate_data, validate_field, validate_schema
from form_builder.visibility import is_visible
from form_builder.pricing import calculate_price, calculate_pricing
from form_builder.summary import summarize
from form_builder.editor import (
    EditorState,
    SchemaValidationError,
    check_schema_json,
    format_schema_json,
    load_schema,
    migrate_custom_fields,
)
from form_builder.logging_setup import (
    setup_logging,
    disable_logging,
    enable_logging,
)

__all__ = [
    # Main interface
    "FormRenderer",
    # Models
    "ConditionalLogic",
    "FieldValidation",
    "FormField",
    "FormPricingCalculation",
    "FormSchema",
    "FormSubmissionData",
    "FormSummary",
    "FormValidationResult",
    "RenderedForm",
    "SchemaValidationResult",
    "Section",
    "coerce_schema",
    # Field kinds
    "FIELD_KINDS",
    "FIELD_TYPES",
    # Engine
    "validate_data",
    "validate_field",
    "validate_schema",
    "is_visible",
    "calculate_price",
    "calculate_pricing",
    "summarize",
    # Admin editor
    "EditorState",
    "SchemaValidationError",
    "check_schema_json",
    "format_schema_json",
    "load_schema",
    "migrate_custom_fields",
    # Logging
    "setup_logging",
    "disable_logging",
    "enable_logging",
]

__version__ = "0.1.0"
