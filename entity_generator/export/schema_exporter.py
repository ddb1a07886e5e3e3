"""JSON export of entity models."""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from entity_generator.core.config import config
from entity_generator.core.exceptions import ValidationError
from entity_generator.core.schemas import EntityModel
from entity_generator.io.output_manager import OutputManager
from entity_generator.logger import logger
from entity_generator.validation.schema_validator import SchemaValidator


class SchemaExporter:
    """Serializes entity models, derived views included, to JSON.

    Keys are camelCase and fields without a value are left out.
    """

    def __init__(
        self,
        output_manager: OutputManager | None = None,
        validator: SchemaValidator | None = None,
        indent: int = config.json_indent,
    ) -> None:
        """Initialize the exporter.

        Args:
            output_manager: Writer used by ``export_to_file``
            validator: Validator applied to every exported document
            indent: JSON indentation
        """
        self.output_manager = output_manager or OutputManager()
        self.validator = validator or SchemaValidator()
        self.indent = indent

    def to_document(self, entities: Sequence[EntityModel]) -> list[dict[str, Any]]:
        """Materialize entities as JSON-ready dictionaries.

        Args:
            entities: Entities in workbook order

        Returns:
            One dictionary per entity

        Raises:
            ValidationError: If the document does not match the entity document schema
        """
        document = [
            entity.model_dump(mode="json", by_alias=True, exclude_none=True)
            for entity in entities
        ]

        result = self.validator.validate_document(document)
        if not result.is_valid:
            raise ValidationError(result.errors)
        for warning in result.warnings:
            logger.warning("Export: %s", warning)

        return document

    def export(self, entities: Sequence[EntityModel]) -> str:
        """Serialize entities to JSON text.

        Args:
            entities: Entities in workbook order

        Returns:
            Indented JSON array with non-ASCII text left unescaped
        """
        return json.dumps(
            self.to_document(entities), indent=self.indent, ensure_ascii=False
        )

    def export_to_file(self, entities: Sequence[EntityModel], output_path: Path) -> Path:
        """Serialize entities and write the JSON document to a file.

        Args:
            entities: Entities in workbook order
            output_path: Destination of the JSON document

        Returns:
            Path where the document was written
        """
        written = self.output_manager.write_json(self.export(entities), output_path)
        logger.info("JSON written to: %s (%d entities)", written, len(entities))
        return written
