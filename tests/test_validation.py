"""Tests for export document validation."""

import pytest

from entity_generator.core.schemas import ValidationResult
from entity_generator.validation.schema_validator import SchemaValidator


def dump(entity):
    return entity.model_dump(mode="json", by_alias=True, exclude_none=True)


class TestSchemaValidator:
    """Test SchemaValidator against exported documents."""

    def test_valid_document(self, material_entity, order_line_entity):
        """Should accept documents produced from built entities."""
        validator = SchemaValidator()
        result: ValidationResult = validator.validate_document(
            [dump(material_entity), dump(order_line_entity)]
        )

        assert result.is_valid
        assert not result.errors
        assert not result.warnings

    def test_document_must_be_array(self):
        """Should reject a document that is not an array."""
        result = SchemaValidator().validate_document({"className": "CTab_X"})

        assert not result.is_valid
        assert "<root>" in result.errors[0]

    def test_missing_required_property(self, material_entity):
        """Should report missing entity properties."""
        entity = dump(material_entity)
        del entity["className"]

        result = SchemaValidator().validate_document([entity])

        assert not result.is_valid
        assert any("className" in error for error in result.errors)

    def test_broken_partition(self, material_entity):
        """Should detect field groups that do not cover the non-key fields."""
        entity = dump(material_entity)
        entity["businessFields"] = entity["businessFields"][1:]

        result = SchemaValidator().validate_document([entity])

        assert not result.is_valid
        assert "partition" in result.errors[0]

    def test_warnings_for_unusual_entities(self, helper):
        """Should warn about missing keys and detail tables without foreign keys."""
        from entity_generator.core.schemas import EntityModel

        entity = EntityModel(
            sheet_name="Bga_Order_Line(明細)",
            folder_name="Bga",
            module_name="Order",
            detail_name="Line",
            fields=(helper.field("Ol_Qty", "int"),),
        )

        result = SchemaValidator().validate_document([dump(entity)])

        assert result.is_valid
        assert len(result.warnings) == 2

    def test_invalid_schema_rejected(self):
        """Should refuse to build a validator from an invalid JSON Schema."""
        from jsonschema import SchemaError

        with pytest.raises(SchemaError):
            SchemaValidator({"type": "not_a_type"})
