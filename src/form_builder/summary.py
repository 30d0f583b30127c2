"""
Form summaries.

Read-only label/value rows for showing submitted data in carts and
order details, where the form can no longer be edited.
"""

from typing import Any, Mapping

from form_builder.field_kinds import get_field_kind
from form_builder.models.schema import FormSchema, coerce_schema
from form_builder.models.summary import FormSummary, SummaryGroup, SummaryItem
from form_builder.visibility import is_field_visible

NO_DATA_MESSAGE = "No form data provided"


def _is_empty(value: Any) -> bool:
    return value is None or value == "" or (isinstance(value, (list, tuple)) and not value)


def summarize(
    schema: FormSchema | Mapping[str, Any] | None,
    data: Mapping[str, Any] | None,
    show_empty: bool = False,
    compact: bool = False,
    include_hidden: bool = True,
) -> FormSummary | None:
    """
    Project submitted data into display rows.

    Args:
        schema: The form schema the data was collected with.
        data: Submitted values.
        show_empty: Keep rows for empty fields and return a placeholder
            summary instead of None when there is nothing to show.
        compact: Flat list instead of rows grouped by section.
        include_hidden: Whether to show fields hidden by conditions.

    Returns:
        FormSummary, or None when there is nothing to show and
        ``show_empty`` is False.
    """
    schema = coerce_schema(schema)
    data = data or {}

    if schema is None or not data:
        if not show_empty:
            return None
        return FormSummary(compact=compact, placeholder=NO_DATA_MESSAGE)

    items: list[SummaryItem] = []
    for section, field in schema.iter_fields():
        value = data.get(field.name)
        if not show_empty and _is_empty(value):
            continue
        if not include_hidden and not is_field_visible(field, data):
            continue
        items.append(
            SummaryItem(
                label=field.label,
                value=get_field_kind(field).format_value(field, value),
                section=section.name,
            )
        )

    if not items and not show_empty:
        return None

    groups: list[SummaryGroup] = []
    if not compact:
        grouped: dict[str, list[SummaryItem]] = {}
        for item in items:
            grouped.setdefault(item.section or "General", []).append(item)
        titled = len(grouped) > 1
        groups = [
            SummaryGroup(title=name if titled else None, items=rows)
            for name, rows in grouped.items()
        ]

    return FormSummary(compact=compact, items=items, groups=groups)
