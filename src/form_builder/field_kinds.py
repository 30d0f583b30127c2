"""
Field kind registry.

The one place that knows the six field types. Each kind names its model,
how its input widget is described and how a submitted value is shown in
summaries. The schema validator, field validator, renderer and summarizer
all dispatch through ``FIELD_KINDS``.
"""

from dataclasses import dataclass
from typing import Any, Callable

from form_builder.formatting import format_charge, format_date, format_value
from form_builder.models.schema import (
    BaseField,
    DateField,
    EmailField,
    NumberField,
    SelectField,
    TextareaField,
    TextField,
    resolve_constraint,
)
from form_builder.pricing import selected_option_price

DEFAULT_TEXTAREA_ROWS = 4


@dataclass(frozen=True)
class FieldKind:
    """How one field type is described, shown and checked."""

    model: type[BaseField]
    widget: str
    attributes: Callable[[BaseField], dict[str, Any]]
    format_value: Callable[[BaseField, Any], str]
    string_format: str | None = None


def _drop_none(attributes: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in attributes.items() if value is not None}


def _option_items(field: BaseField) -> list[dict[str, Any]]:
    items = []
    price_type = getattr(field, "option_price_type", "fixed")
    for option in getattr(field, "options", None) or []:
        price = selected_option_price(field, option)
        items.append({
            "value": option,
            "label": option,
            "price": format_charge(price, price_type) if price is not None else None,
        })
    return items


def _text_attributes(field: TextField) -> dict[str, Any]:
    return _drop_none({
        "input_type": "text",
        "min_length": resolve_constraint(field, "min_length") or None,
        "max_length": resolve_constraint(field, "max_length") or None,
        "suggestions": _option_items(field) if field.options else None,
    })


def _email_attributes(field: EmailField) -> dict[str, Any]:
    return {"input_type": "email"}


def _textarea_attributes(field: TextareaField) -> dict[str, Any]:
    return _drop_none({
        "rows": field.rows or DEFAULT_TEXTAREA_ROWS,
        "cols": field.cols,
    })


def _number_attributes(field: NumberField) -> dict[str, Any]:
    return _drop_none({
        "input_type": "number",
        "min": field.min,
        "max": field.max,
        "step": field.step,
    })


def _date_attributes(field: DateField) -> dict[str, Any]:
    return _drop_none({"min": field.min, "max": field.max})


def _select_attributes(field: SelectField) -> dict[str, Any]:
    # Multi-select is not supported; always a single choice.
    return {
        "options": _option_items(field),
        "multiple": False,
        "price_type": field.option_price_type,
    }


def _format_plain(field: BaseField, value: Any) -> str:
    return format_value(value)


def _format_option(field: BaseField, value: Any) -> str:
    price = selected_option_price(field, value)
    if price is None:
        return format_value(value)
    return f"{value} ({format_charge(price, getattr(field, 'option_price_type', 'fixed'))})"


def _format_date(field: BaseField, value: Any) -> str:
    if isinstance(value, (bool, list, tuple)) or not value:
        return format_value(value)
    return format_date(value)


FIELD_KINDS: dict[str, FieldKind] = {
    "text": FieldKind(TextField, "input", _text_attributes, _format_plain),
    "email": FieldKind(EmailField, "input", _email_attributes, _format_plain, string_format="email"),
    "textarea": FieldKind(TextareaField, "textarea", _textarea_attributes, _format_plain),
    "number": FieldKind(NumberField, "input", _number_attributes, _format_plain),
    "date": FieldKind(DateField, "date_picker", _date_attributes, _format_date),
    "select": FieldKind(SelectField, "select", _select_attributes, _format_option),
}

FIELD_TYPES: tuple[str, ...] = tuple(FIELD_KINDS)


def get_field_kind(field: BaseField) -> FieldKind:
    """Kind of a parsed field; parsed fields always have a known type."""
    return FIELD_KINDS[field.type]
