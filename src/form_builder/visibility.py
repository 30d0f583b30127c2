"""
Conditional visibility.

A field with enabled conditional logic is shown only while the
controlling field holds the expected value. An empty expected value
means "shown while the controlling field is empty".
"""

import logging
from typing import Any, Mapping

from pydantic import ValidationError

from form_builder.models.schema import BaseField, ConditionalLogic

logger = logging.getLogger("form_builder.visibility")


def is_visible(
    logic: ConditionalLogic | Mapping[str, Any] | None,
    data: Mapping[str, Any] | None,
) -> bool:
    """
    Decide whether a field is currently visible.

    Args:
        logic: The field's conditional logic, if any.
        data: Current submission data.

    Returns:
        True when there is no enabled condition or the condition holds.
    """
    if logic is None:
        return True
    if isinstance(logic, Mapping):
        try:
            logic = ConditionalLogic.model_validate(logic)
        except ValidationError:
            logger.debug("Ignoring malformed conditional logic")
            return True
    if not logic.enabled:
        return True

    controlling_value = (data or {}).get(logic.field_id)

    if logic.value == "":
        return not controlling_value or (
            isinstance(controlling_value, str) and controlling_value.strip() == ""
        )
    return isinstance(controlling_value, str) and controlling_value == logic.value


def is_field_visible(field: BaseField, data: Mapping[str, Any] | None) -> bool:
    return is_visible(field.conditional_logic, data)
