"""Tests for form builder data models."""

import pytest
from pydantic import ValidationError

from form_builder.models import (
    FieldValidation,
    FormSchema,
    FormSummary,
    FormValidationResult,
    NumberField,
    SelectField,
    SummaryGroup,
    SummaryItem,
    TextField,
    coerce_schema,
    parse_field,
    resolve_constraint,
)


class TestFormSchema:
    """Tests for parsing the stored JSON shape."""

    def test_parse_camel_case_document(self, tier_schema):
        """Test parsing a schema written with JSON property names."""
        schema = FormSchema.model_validate(tier_schema)
        section = schema.sections[0]
        assert section.name == "Order"
        assert isinstance(section.fields[0], TextField)
        assert isinstance(section.fields[1], SelectField)
        assert section.fields[1].option_prices == [0, 20]
        assert section.fields[1].option_price_type == "fixed"

    def test_export_uses_json_names(self, tier_schema):
        """Test exporting back to camelCase keys."""
        exported = FormSchema.model_validate(tier_schema).to_json_dict()
        select = exported["sections"][0]["fields"][1]
        assert select["optionPrices"] == [0, 20]
        assert select["optionPriceType"] == "fixed"
        assert "isPadding" in exported["sections"][0]

    def test_unknown_field_type_rejected(self):
        """Test that the strict parser rejects unknown field kinds."""
        with pytest.raises(ValidationError):
            parse_field({"type": "checkbox", "name": "c", "label": "C"})

    def test_get_field(self, tier_schema):
        """Test finding a field by name."""
        schema = FormSchema.model_validate(tier_schema)
        assert schema.get_field("tier").label == "Tier"
        assert schema.get_field("missing") is None
        assert schema.field_names == ["name", "tier"]


class TestCoerceSchema:
    """Tests for the lenient schema loader."""

    def test_none_means_no_schema(self):
        """Test that a missing schema stays missing."""
        assert coerce_schema(None) is None

    def test_invalid_json_text(self):
        """Test that unparsable text yields no schema."""
        assert coerce_schema("{not json") is None

    def test_missing_sections(self):
        """Test a document without sections renders nothing."""
        assert coerce_schema({}).sections == []

    def test_malformed_parts_dropped(self):
        """Test that broken sections and fields are skipped."""
        schema = coerce_schema({
            "sections": [
                {"id": 1, "name": "No fields"},
                "not a section",
                {
                    "id": 2,
                    "name": "Mixed",
                    "width": 33,
                    "fields": [
                        {"type": "checkbox", "name": "c", "label": "C"},
                        {"type": "text", "label": "No name"},
                        {"type": "number", "name": "qty", "label": "Quantity"},
                    ],
                },
            ]
        })
        assert len(schema.sections) == 1
        assert schema.sections[0].name == "Mixed"
        assert schema.field_names == ["qty"]

    def test_cosmetic_property_types_tolerated(self):
        """Test that odd placeholder and description values keep the field."""
        schema = coerce_schema({"sections": [{"id": 1, "name": "S", "width": 100, "fields": [
            {"type": "text", "name": "a", "label": "A", "placeholder": 7},
            {"type": "text", "name": "b", "label": "B", "description": {"en": "x"}},
            {"type": "text", "name": "c", "label": "C", "conditionalLogic": {"enabled": False}},
        ]}]})
        assert schema.field_names == ["a", "b", "c"]
        assert schema.get_field("a").placeholder == "7"
        assert schema.get_field("b").description is None
        assert schema.get_field("c").conditional_logic.field_id == ""

    def test_json_text_accepted(self):
        """Test loading from JSON text."""
        schema = coerce_schema('{"sections": [{"id": 1, "name": "S", "width": 100, "fields": []}]}')
        assert schema.sections[0].name == "S"


class TestResolveConstraint:
    """Tests for flat versus nested validation properties."""

    def test_flat_wins(self):
        """Test that a flat property takes precedence."""
        field = TextField(
            name="code",
            label="Code",
            min_length=2,
            validation=FieldValidation(min_length=10),
        )
        assert resolve_constraint(field, "min_length") == 2

    def test_nested_fallback(self):
        """Test that the nested value is used when the flat one is absent."""
        field = NumberField(name="qty", label="Qty", validation=FieldValidation(max=9))
        assert resolve_constraint(field, "max") == 9

    def test_absent(self):
        """Test a constraint declared nowhere."""
        field = TextField(name="code", label="Code")
        assert resolve_constraint(field, "pattern") is None
        assert resolve_constraint(field, "min") is None


class TestFormValidationResult:
    """Tests for FormValidationResult model."""

    def test_valid_result(self):
        """Test valid validation result."""
        result = FormValidationResult(is_valid=True)
        assert result.error_count == 0
        assert result.get_field_error("name") is None

    def test_invalid_result(self):
        """Test invalid validation result with errors."""
        result = FormValidationResult(
            is_valid=False,
            errors={"name": "Name is required"},
        )
        assert result.error_count == 1
        assert result.get_field_error("name") == "Name is required"


class TestFormSummary:
    """Tests for summary text output."""

    def test_compact_lines(self):
        """Test compact output with an empty value."""
        summary = FormSummary(
            compact=True,
            items=[SummaryItem(label="Name", value="Alice"), SummaryItem(label="Notes", value="")],
        )
        assert summary.to_lines() == ["Name: Alice", "Notes: -"]

    def test_grouped_lines(self):
        """Test section headers between groups."""
        first = SummaryItem(label="Name", value="Alice", section="Contact")
        second = SummaryItem(label="Tier", value="Pro", section="Plan")
        summary = FormSummary(
            items=[first, second],
            groups=[
                SummaryGroup(title="Contact", items=[first]),
                SummaryGroup(title="Plan", items=[second]),
            ],
        )
        assert summary.to_lines() == ["Contact", "Name: Alice", "", "Plan", "Tier: Pro"]

    def test_placeholder(self):
        """Test the no-data placeholder."""
        summary = FormSummary(placeholder="No form data provided")
        assert summary.is_empty
        assert summary.to_lines() == ["No form data provided"]
