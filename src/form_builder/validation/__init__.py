"""
Validation for form schemas and submitted values.
"""

from form_builder.validation.field_validator import (
    is_missing,
    validate_data,
    validate_field,
)
from form_builder.validation.schema_validator import (
    SECTION_WIDTHS,
    validate_schema,
)

__all__ = [
    "is_missing",
    "validate_data",
    "validate_field",
    "SECTION_WIDTHS",
    "validate_schema",
]
