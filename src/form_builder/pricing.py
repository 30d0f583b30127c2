"""
Dynamic pricing from selected options.

Fields carrying ``optionPrices`` add a charge for the selected option:
a fixed amount, or a percentage of the product's base price.
"""

import logging
from typing import Any, Mapping

from form_builder.models.pricing import AdditionalCharge, FormPricingCalculation
from form_builder.models.schema import BaseField, FormSchema, coerce_schema
from form_builder.visibility import is_field_visible

logger = logging.getLogger("form_builder.pricing")


def selected_option_price(field: BaseField, value: Any) -> float | None:
    """
    Look up the price attached to the selected option of a field.

    Returns None when the field has no prices, the value is not one of
    its options, or the option's price is missing or zero.
    """
    options = getattr(field, "options", None)
    prices = getattr(field, "option_prices", None)
    if not options or not prices or not value or not isinstance(value, str):
        return None
    try:
        index = options.index(value)
    except ValueError:
        return None
    if index >= len(prices):
        return None
    price = prices[index]
    if not price:
        return None
    return price


def option_charge(field: BaseField, value: Any, base_price: float) -> float:
    """Amount a field's current value adds to the base price."""
    price = selected_option_price(field, value)
    if price is None:
        return 0.0
    if getattr(field, "option_price_type", "fixed") == "percentage":
        return base_price * (price / 100)
    return float(price)


def calculate_pricing(
    schema: FormSchema | Mapping[str, Any] | None,
    data: Mapping[str, Any] | None,
    base_price: float,
    include_hidden: bool = True,
) -> FormPricingCalculation:
    """
    Compute the per-field charges and the final price.

    Args:
        schema: The form schema.
        data: Current submission data.
        base_price: Product base price; percentage charges are taken of it.
        include_hidden: Whether to charge for fields hidden by conditions.

    Returns:
        FormPricingCalculation with one entry per charging field.
    """
    schema = coerce_schema(schema)
    data = data or {}
    charges: list[AdditionalCharge] = []

    if schema is not None:
        for _, field in schema.iter_fields():
            value = data.get(field.name)
            price = selected_option_price(field, value)
            if price is None:
                continue
            if not include_hidden and not is_field_visible(field, data):
                continue
            charges.append(
                AdditionalCharge(
                    field_name=field.name,
                    label=field.label,
                    option=value,
                    charge=option_charge(field, value, base_price),
                    type=getattr(field, "option_price_type", "fixed"),
                )
            )

    additional = sum((charge.charge for charge in charges), 0.0)
    logger.debug(f"Priced {len(charges)} options, additional total {additional}")
    return FormPricingCalculation(
        base_price=base_price,
        additional_charges=charges,
        total_price=base_price + additional,
    )


def calculate_price(
    schema: FormSchema | Mapping[str, Any] | None,
    data: Mapping[str, Any] | None,
    base_price: float,
    include_hidden: bool = True,
) -> float:
    """Additional charge total; add it to the base price for the final total."""
    return calculate_pricing(schema, data, base_price, include_hidden).additional_total
