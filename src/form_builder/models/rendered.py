"""
Rendering obligation models.

What a front end has to present for one render pass: which sections,
which visible fields, their widgets, current values and errors.
"""

from typing import Any

from pydantic import BaseModel, Field


class RenderedField(BaseModel):
    """A visible field with everything needed to draw its input."""

    name: str
    type: str
    label: str
    widget: str = Field(..., description="Input widget to use")
    attributes: dict[str, Any] = Field(default_factory=dict)
    value: Any = None
    default_value: Any = None
    placeholder: str | None = None
    description: str | None = None
    error: str | None = None
    required: bool = False
    disabled: bool = False
    readonly: bool = False
    price_annotation: str | None = Field(
        default=None, description="Charge of the currently selected option"
    )


class RenderedSection(BaseModel):
    """A section laid out on a four-column grid."""

    id: int | str | None = None
    name: str = ""
    column_span: int = Field(default=4, description="Columns out of 4")
    collapsible: bool = False
    expanded: bool = True
    is_padding: bool = False
    fields: list[RenderedField] = Field(default_factory=list)


class RenderedForm(BaseModel):
    """Output of one render pass."""

    available: bool = True
    message: str | None = None
    display_mode: str = "sidebar"
    sections: list[RenderedSection] = Field(default_factory=list)
    total_price: float = 0.0
    read_only: bool = False

    @property
    def visible_field_names(self) -> list[str]:
        return [field.name for section in self.sections for field in section.fields]
