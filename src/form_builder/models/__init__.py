"""
Data models for the form builder engine.

This module contains Pydantic models for:
- Form schema documents (sections, fields, conditional logic)
- Validation results
- Pricing breakdowns
- Render and summary output
"""

from form_builder.models.schema import (
    BaseField,
    ConditionalLogic,
    DateField,
    EmailField,
    FieldValidation,
    FormDisplayMode,
    FormField,
    FormSchema,
    FormSubmissionData,
    NumberField,
    OptionPriceType,
    Section,
    SelectField,
    TextareaField,
    TextField,
    coerce_schema,
    parse_field,
    resolve_constraint,
)
from form_builder.models.validation_result import (
    FormValidationResult,
    SchemaValidationResult,
)
from form_builder.models.pricing import (
    AdditionalCharge,
    FormPricingCalculation,
)
from form_builder.models.rendered import (
    RenderedField,
    RenderedForm,
    RenderedSection,
)
from form_builder.models.summary import (
    FormSummary,
    SummaryGroup,
    SummaryItem,
)

__all__ = [
    # Schema
    "BaseField",
    "ConditionalLogic",
    "DateField",
    "EmailField",
    "FieldValidation",
    "FormDisplayMode",
    "FormField",
    "FormSchema",
    "FormSubmissionData",
    "NumberField",
    "OptionPriceType",
    "Section",
    "SelectField",
    "TextareaField",
    "TextField",
    "coerce_schema",
    "parse_field",
    "resolve_constraint",
    # Validation
    "FormValidationResult",
    "SchemaValidationResult",
    # Pricing
    "AdditionalCharge",
    "FormPricingCalculation",
    # Output
    "RenderedField",
    "RenderedForm",
    "RenderedSection",
    "FormSummary",
    "SummaryGroup",
    "SummaryItem",
]
