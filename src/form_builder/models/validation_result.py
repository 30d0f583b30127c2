"""
Validation result models.

Two kinds of results: runtime validation of submitted values and
structural validation of an authored schema document.
"""

from pydantic import BaseModel, Field


class FormValidationResult(BaseModel):
    """Result of validating submission data against a form schema."""

    is_valid: bool = Field(..., description="Whether every field passed")
    errors: dict[str, str] = Field(
        default_factory=dict, description="Field name to error message"
    )

    @property
    def error_count(self) -> int:
        """Get the number of fields with errors."""
        return len(self.errors)

    def get_field_error(self, field_name: str) -> str | None:
        """Get the error message for a specific field."""
        return self.errors.get(field_name)


class SchemaValidationResult(BaseModel):
    """Result of checking a raw schema document at authoring time."""

    valid: bool = Field(..., description="Whether the schema may be used")
    error: str | None = Field(default=None, description="First blocking error")
    warnings: list[str] = Field(
        default_factory=list, description="Non-blocking remarks"
    )
