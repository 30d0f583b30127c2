"""
Form Renderer.

Owns the submission data of one form session and ties the validators,
visibility rules and pricing together on every change and blur.
"""

import logging
from typing import Any, Callable, Mapping

from form_builder.config import get_config
from form_builder.field_kinds import get_field_kind
from form_builder.formatting import format_charge
from form_builder.models.pricing import FormPricingCalculation
from form_builder.models.rendered import RenderedField, RenderedForm, RenderedSection
from form_builder.models.schema import (
    BaseField,
    FormSchema,
    FormSubmissionData,
    Section,
    coerce_schema,
)
from form_builder.models.validation_result import FormValidationResult
from form_builder.pricing import calculate_pricing, selected_option_price
from form_builder.validation.field_validator import validate_data, validate_field
from form_builder.visibility import is_field_visible

logger = logging.getLogger("form_builder.renderer")

NO_CONFIGURATION_MESSAGE = "No form configuration available for this product."
GRID_COLUMNS = 4

DataCallback = Callable[[FormSubmissionData], None]
PriceCallback = Callable[[float], None]


def column_span(section: Section, display_mode: str) -> int:
    """Columns a section spans on the four-column grid."""
    if display_mode == "sidebar":
        return GRID_COLUMNS
    return {25: 1, 50: 2, 75: 3}.get(section.width, GRID_COLUMNS)


class FormRenderer:
    """
    Stateful form session.

    Usage:
        renderer = FormRenderer(
            schema,
            base_price=50.0,
            on_price_change=lambda total: print(total),
        )

        renderer.on_field_change("tier", "Pro")
        renderer.on_field_blur("tier")

        result = renderer.validate_all()
        view = renderer.render()
    """

    def __init__(
        self,
        schema: FormSchema | Mapping[str, Any] | None,
        display_mode: str | None = None,
        base_price: float = 0.0,
        initial_data: Mapping[str, Any] | None = None,
        on_data_change: DataCallback | None = None,
        on_price_change: PriceCallback | None = None,
        read_only: bool = False,
        include_hidden_values: bool | None = None,
    ):
        """
        Initialize the renderer.

        Args:
            schema: Form schema; malformed parts are skipped, None means
                the product has no form.
            display_mode: "sidebar" or "fullwidth". If None, uses
                config.default_display_mode.
            base_price: Product base price used for percentage charges.
            initial_data: Previously submitted data to resume from.
            on_data_change: Called with a snapshot of the data after every change.
            on_price_change: Called with the additional total after every change.
            read_only: Preview mode; changes are ignored.
            include_hidden_values: Whether fields hidden by conditions are
                priced. If None, uses config.include_hidden_values.
        """
        config = get_config()
        self.schema = coerce_schema(schema)
        self.display_mode = display_mode or config.default_display_mode
        self.base_price = base_price
        self.read_only = read_only
        self.include_hidden_values = (
            config.include_hidden_values
            if include_hidden_values is None
            else include_hidden_values
        )
        self.on_data_change = on_data_change
        self.on_price_change = on_price_change

        self._data: FormSubmissionData = dict(initial_data or {})
        self._errors: dict[str, str] = {}
        self._pricing = self._calculate_pricing()

        self._notify()

    @property
    def has_configuration(self) -> bool:
        return self.schema is not None

    @property
    def data(self) -> FormSubmissionData:
        """Snapshot of the current submission data."""
        return dict(self._data)

    @property
    def errors(self) -> dict[str, str]:
        return dict(self._errors)

    @property
    def total_price(self) -> float:
        """Additional charge total of the current selections."""
        return self._pricing.additional_total

    def pricing(self) -> FormPricingCalculation:
        """Breakdown of the current charges."""
        return self._pricing

    def find_field(self, name: str) -> BaseField | None:
        if self.schema is None:
            return None
        return self.schema.get_field(name)

    def on_field_change(self, name: str, value: Any) -> None:
        """
        Store a new value for a field.

        Clears the field's error but does not validate; validation runs
        on blur. Price and data callbacks fire on every change.
        """
        if self.read_only:
            logger.debug(f"Ignoring change to {name!r} in read-only form")
            return

        self._data[name] = value
        self._errors.pop(name, None)
        self._pricing = self._calculate_pricing()
        self._notify()

    def on_field_blur(self, name: str) -> str | None:
        """
        Validate one field against its current value.

        Returns:
            The field's error message, or None.
        """
        field = self.find_field(name)
        error = validate_field(field, self._data.get(name)) if field is not None else None

        if error:
            self._errors[name] = error
        else:
            self._errors.pop(name, None)
        return error

    def validate_all(self) -> FormValidationResult:
        """
        Validate every field, including fields currently hidden.

        Replaces the stored errors with the result.
        """
        result = validate_data(self.schema, self._data)
        self._errors = dict(result.errors)
        logger.debug(f"Form validation: {result.error_count} errors")
        return result

    def render(self) -> RenderedForm:
        """Describe what has to be shown for the current state."""
        if self.schema is None:
            return RenderedForm(
                available=False,
                message=NO_CONFIGURATION_MESSAGE,
                display_mode=self.display_mode,
                read_only=self.read_only,
            )

        sections = [
            RenderedSection(
                id=section.id,
                name=section.name,
                column_span=column_span(section, self.display_mode),
                collapsible=section.collapsible,
                expanded=section.expanded,
                is_padding=section.is_padding,
                fields=[
                    self._render_field(field)
                    for field in section.fields
                    if is_field_visible(field, self._data)
                ],
            )
            for section in self.schema.sections
        ]

        return RenderedForm(
            display_mode=self.display_mode,
            sections=sections,
            total_price=self.total_price,
            read_only=self.read_only,
        )

    def _render_field(self, field: BaseField) -> RenderedField:
        kind = get_field_kind(field)
        value = self._data.get(field.name)

        if getattr(field, "multiple", False):
            logger.debug(f"Field {field.name!r} requests multiple selection; rendering single select")

        price = selected_option_price(field, value)
        annotation = None
        if price is not None:
            annotation = format_charge(price, getattr(field, "option_price_type", "fixed"))

        return RenderedField(
            name=field.name,
            type=field.type,
            label=field.label,
            widget=kind.widget,
            attributes=kind.attributes(field),
            value=value,
            default_value=field.default_value,
            placeholder=field.placeholder,
            description=field.description,
            error=self._errors.get(field.name),
            required=field.required,
            disabled=self.read_only or field.disabled,
            readonly=field.readonly,
            price_annotation=annotation,
        )

    def _calculate_pricing(self) -> FormPricingCalculation:
        return calculate_pricing(
            self.schema,
            self._data,
            self.base_price,
            include_hidden=self.include_hidden_values,
        )

    def _notify(self) -> None:
        if self.on_data_change is not None:
            self.on_data_change(self.data)
        if self.on_price_change is not None:
            self.on_price_change(self.total_price)
