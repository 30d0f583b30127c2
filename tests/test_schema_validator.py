"""Tests for authoring-time schema validation."""

import pytest

from form_builder.editor import SAMPLE_SCHEMA, SchemaValidationError, load_schema
from form_builder.models import FormSchema
from form_builder.renderer import FormRenderer
from form_builder.validation import validate_schema


def _section(**overrides) -> dict:
    section = {"id": 1, "name": "S", "width": 100, "fields": []}
    section.update(overrides)
    return section


class TestStructure:
    """Tests for blocking errors."""

    def test_sample_is_valid(self):
        """Test the editor sample schema."""
        result = validate_schema(SAMPLE_SCHEMA)
        assert result.valid
        assert result.error is None

    def test_empty_sections_allowed(self):
        """Test that an empty form is legal."""
        assert validate_schema({"sections": []}).valid

    def test_missing_sections(self):
        """Test documents without a sections array."""
        for raw in ({}, {"sections": {}}, [], None, "text"):
            result = validate_schema(raw)
            assert not result.valid
            assert "sections" in result.error

    def test_bad_width(self):
        """Test a width outside 25/50/75/100."""
        result = validate_schema({"sections": [_section(width=33)]})
        assert not result.valid
        assert result.error == 'Invalid section width in "S": must be 25, 50, 75, or 100'

    def test_boolean_width(self):
        """Test that true is not a width."""
        assert not validate_schema({"sections": [_section(width=True)]}).valid

    def test_missing_width(self):
        """Test a section without width."""
        section = _section()
        del section["width"]
        assert not validate_schema({"sections": [section]}).valid

    def test_section_missing_id(self):
        """Test a section without an id."""
        result = validate_schema({"sections": [_section(id=None)]})
        assert result.error == "Invalid section structure: S - missing required fields (id, name, fields)"

    def test_section_fields_not_array(self):
        """Test a section whose fields is not an array."""
        result = validate_schema({"sections": [_section(fields={"a": 1})]})
        assert not result.valid

    def test_field_missing_label(self):
        """Test a field without a label."""
        result = validate_schema({"sections": [_section(fields=[{"type": "text", "name": "a"}])]})
        assert result.error == 'Invalid field in section "S": missing required properties (type, name, label)'

    def test_unknown_field_type(self):
        """Test an unrecognized field kind."""
        result = validate_schema(
            {"sections": [_section(fields=[{"type": "checkbox", "name": "a", "label": "A"}])]}
        )
        assert result.error == (
            'Invalid field type "checkbox" in section "S". '
            "Valid types: text, email, textarea, number, date, select"
        )

    def test_select_without_options(self):
        """Test that a select needs a non-empty options array."""
        for options in (None, [], "A,B"):
            field = {"type": "select", "name": "tier", "label": "Tier"}
            if options is not None:
                field["options"] = options
            result = validate_schema({"sections": [_section(fields=[field])]})
            assert result.error == 'Select field "Tier" in section "S" must have options array'

    def test_first_error_reported(self):
        """Test that checking stops at the first problem."""
        result = validate_schema({
            "sections": [
                _section(name="First", width=10),
                _section(name="Second", width=20),
            ]
        })
        assert "First" in result.error
        assert "Second" not in result.error

    def test_model_input(self, tier_schema):
        """Test validating an already parsed schema."""
        assert validate_schema(FormSchema.model_validate(tier_schema)).valid


class TestWarnings:
    """Tests for non-blocking warnings."""

    def test_clean_schema_has_no_warnings(self, tier_schema):
        """Test a schema without remarks."""
        assert validate_schema(tier_schema).warnings == []

    def test_duplicate_names(self):
        """Test fields sharing a name."""
        fields = [
            {"type": "text", "name": "a", "label": "A"},
            {"type": "text", "name": "a", "label": "A again"},
        ]
        result = validate_schema({"sections": [_section(fields=fields)]})
        assert result.valid
        assert result.warnings == ['Field name "a" is used 2 times']

    def test_unknown_condition_target(self):
        """Test conditional logic pointing nowhere."""
        fields = [{
            "type": "text",
            "name": "a",
            "label": "A",
            "conditionalLogic": {"enabled": True, "fieldId": "ghost", "value": "x"},
        }]
        result = validate_schema({"sections": [_section(fields=fields)]})
        assert result.warnings == ['Field "a" depends on unknown field "ghost"']

    def test_extra_prices_and_multiple(self):
        """Test surplus prices and the unsupported multiple flag."""
        fields = [{
            "type": "select",
            "name": "tier",
            "label": "Tier",
            "options": ["A"],
            "optionPrices": [1, 2],
            "multiple": True,
        }]
        result = validate_schema({"sections": [_section(fields=fields)]})
        assert result.valid
        assert len(result.warnings) == 2


class TestAcceptedSchemasLoad:
    """Tests that every accepted schema loads without losing fields."""

    def test_numeric_placeholder(self):
        """Test that a numeric placeholder keeps the field and its prices."""
        fields = [{
            "type": "select",
            "name": "s",
            "label": "S",
            "options": ["x"],
            "optionPrices": [3],
            "placeholder": 7,
        }]
        schema = {"sections": [_section(fields=fields)]}
        assert validate_schema(schema).valid

        renderer = FormRenderer(schema)
        renderer.on_field_change("s", "x")
        assert renderer.total_price == 3
        assert renderer.find_field("s").placeholder == "7"

    def test_condition_without_field_id(self):
        """Test a disabled condition that names no controlling field."""
        fields = [{
            "type": "text",
            "name": "a",
            "label": "A",
            "required": True,
            "conditionalLogic": {"enabled": False},
        }]
        schema = {"sections": [_section(fields=fields)]}
        assert validate_schema(schema).valid

        renderer = FormRenderer(schema)
        assert renderer.render().visible_field_names == ["a"]
        assert renderer.validate_all().errors == {"a": "A is required"}

    def test_untyped_property_rejected(self):
        """Test that a property of the wrong type blocks the schema."""
        fields = [{
            "type": "select",
            "name": "s",
            "label": "S",
            "options": ["x"],
            "optionPrices": ["cheap"],
        }]
        schema = {"sections": [_section(fields=fields)]}
        result = validate_schema(schema)
        assert not result.valid
        assert result.error.startswith("Invalid property at sections.0.fields.0.")

        with pytest.raises(SchemaValidationError) as exc_info:
            load_schema(schema)
        assert str(exc_info.value) == result.error
