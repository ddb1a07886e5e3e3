"""Validation of exported entity documents against their JSON Schema."""

from __future__ import annotations

from typing import Any

from jsonschema import Draft7Validator

from entity_generator.core.schemas import ValidationResult

FIELD_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "name": {"type": "string", "minLength": 1},
        "declaredType": {"type": "string"},
        "length": {"type": "string"},
        "comment": {"type": "string"},
        "commentExtra": {"type": "string"},
        "example": {"type": "string"},
        "isPrimaryKey": {"type": "boolean"},
        "isRequired": {"type": "boolean"},
        "remark": {"type": "string"},
        "resolvedType": {"type": "string", "minLength": 1},
        "storageDescriptor": {"type": "string", "minLength": 1},
        "isNullable": {"type": "boolean"},
    },
    "required": [
        "name",
        "declaredType",
        "comment",
        "isPrimaryKey",
        "isRequired",
        "resolvedType",
        "storageDescriptor",
        "isNullable",
    ],
}

ENTITY_DOCUMENT_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "Entity Document",
    "type": "array",
    "items": {
        "type": "object",
        "properties": {
            "sheetName": {"type": "string"},
            "folderName": {"type": "string", "minLength": 1},
            "moduleName": {"type": "string"},
            "detailName": {"type": "string"},
            "description": {"type": "string"},
            "prefix": {"type": "string"},
            "fields": {"type": "array", "items": {"$ref": "#/definitions/field"}},
            "isDetail": {"type": "boolean"},
            "className": {"type": "string", "pattern": "^CTab_"},
            "tableName": {"type": "string"},
            "fileName": {"type": "string"},
            "filePath": {"type": "string"},
            "namespacePath": {"type": "string"},
            "primaryKeyField": {"$ref": "#/definitions/field"},
            "businessFields": {
                "type": "array",
                "items": {"$ref": "#/definitions/field"},
            },
            "creatorFields": {
                "type": "array",
                "items": {"$ref": "#/definitions/field"},
            },
            "editorFields": {
                "type": "array",
                "items": {"$ref": "#/definitions/field"},
            },
            "foreignKeyField": {"$ref": "#/definitions/field"},
        },
        "required": [
            "sheetName",
            "folderName",
            "moduleName",
            "description",
            "fields",
            "isDetail",
            "className",
            "tableName",
            "filePath",
            "namespacePath",
            "businessFields",
            "creatorFields",
            "editorFields",
        ],
    },
    "definitions": {"field": FIELD_SCHEMA},
}


class SchemaValidator:
    """Validates exported entity documents.

    Documents are checked against the entity document JSON Schema (Draft 7)
    plus consistency checks on the derived field groupings.
    """

    def __init__(self, schema: dict[str, Any] = ENTITY_DOCUMENT_SCHEMA) -> None:
        """Initialize the validator.

        Args:
            schema: JSON Schema the documents must satisfy
        """
        Draft7Validator.check_schema(schema)
        self.schema = schema
        self.validator = Draft7Validator(schema)

    def validate_document(self, document: list[dict[str, Any]]) -> ValidationResult:
        """Validate an exported entity document.

        Args:
            document: Entity document as produced by the exporter

        Returns:
            ValidationResult with validation status and any errors/warnings
        """
        result = ValidationResult(is_valid=True)

        for error in sorted(self.validator.iter_errors(document), key=str):
            location = "/".join(str(part) for part in error.absolute_path) or "<root>"
            result.add_error(f"{location}: {error.message}")

        if result.is_valid:
            for index, entity in enumerate(document):
                self._validate_partition(entity, index, result)
                self._validate_structure(entity, index, result)

        return result

    def _validate_partition(
        self, entity: dict[str, Any], index: int, result: ValidationResult
    ) -> None:
        """Check that the field groups cover the non-key fields exactly once.

        Args:
            entity: Serialized entity
            index: Position of the entity in the document
            result: Result to append errors to
        """
        key = entity.get("primaryKeyField")
        expected = [f["name"] for f in entity["fields"] if f != key]
        if key is not None and len(expected) == len(entity["fields"]):
            result.add_error(f"{index}: primaryKeyField is not one of the fields")

        grouped = [
            f["name"]
            for group in ("businessFields", "creatorFields", "editorFields")
            for f in entity[group]
        ]
        if sorted(grouped) != sorted(expected):
            result.add_error(
                f"{index}: field groups do not partition the non-key fields"
            )

    def _validate_structure(
        self, entity: dict[str, Any], index: int, result: ValidationResult
    ) -> None:
        """Add warnings for entities that generate unusual code.

        Args:
            entity: Serialized entity
            index: Position of the entity in the document
            result: Result to append warnings to
        """
        name = entity.get("sheetName", index)
        if "primaryKeyField" not in entity:
            result.add_warning(f"{name}: entity has no primary key")
        if entity["isDetail"] and "foreignKeyField" not in entity:
            result.add_warning(f"{name}: detail entity has no foreign key field")
        if not entity["fields"]:
            result.add_warning(f"{name}: entity has no fields")
