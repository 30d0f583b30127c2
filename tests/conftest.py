"""Shared fixtures for form builder tests."""

import pytest

from form_builder.config import get_config


@pytest.fixture
def tier_schema() -> dict:
    """One section with a required name and a priced tier select."""
    return {
        "sections": [
            {
                "id": 1,
                "name": "Order",
                "width": 100,
                "fields": [
                    {"type": "text", "name": "name", "label": "Name", "required": True},
                    {
                        "type": "select",
                        "name": "tier",
                        "label": "Tier",
                        "options": ["Basic", "Pro"],
                        "optionPrices": [0, 20],
                    },
                ],
            }
        ]
    }


@pytest.fixture
def conditional_schema() -> dict:
    """A delivery address that only shows for shipped orders."""
    return {
        "sections": [
            {
                "id": "delivery",
                "name": "Delivery",
                "width": 50,
                "fields": [
                    {
                        "type": "select",
                        "name": "delivery",
                        "label": "Delivery",
                        "options": ["Download", "Shipping"],
                        "optionPrices": [0, 5],
                    },
                    {
                        "type": "textarea",
                        "name": "address",
                        "label": "Address",
                        "required": True,
                        "conditionalLogic": {
                            "enabled": True,
                            "fieldId": "delivery",
                            "value": "Shipping",
                        },
                    },
                    {
                        "type": "select",
                        "name": "wrapping",
                        "label": "Gift Wrapping",
                        "options": ["No", "Yes"],
                        "optionPrices": [0, 3],
                        "conditionalLogic": {
                            "enabled": True,
                            "fieldId": "delivery",
                            "value": "Shipping",
                        },
                    },
                ],
            }
        ]
    }


@pytest.fixture(autouse=True)
def restore_config():
    """Undo update_config() calls made by a test."""
    config = get_config()
    saved = dict(vars(config))
    yield
    for key, value in saved.items():
        setattr(config, key, value)
