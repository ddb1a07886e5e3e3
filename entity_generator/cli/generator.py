"""Main class that orchestrates entity generation."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from entity_generator.core.config import config
from entity_generator.core.constants import CONTEXT_FILE_NAME
from entity_generator.core.exceptions import (
    EntityGenerationError,
    EntityWriteError,
    ValidationError,
)
from entity_generator.core.schemas import BuildResult, EntityModel
from entity_generator.export.schema_exporter import SchemaExporter
from entity_generator.io.output_manager import OutputManager
from entity_generator.io.workbook_reader import read_worksheets
from entity_generator.logger import logger, setup_logger
from entity_generator.parsing.entity_builder import EntityModelBuilder
from entity_generator.rendering.code_generator import CodeGenerator
from entity_generator.rendering.registration import render_registration_block

REGISTRATION_HEADER = f"    // DbSet declarations for {CONTEXT_FILE_NAME}"


class EntityGenerator:
    """Main class that orchestrates the entity generation process.

    This class reads the workbook, builds one entity model per worksheet and
    either writes entity source files or exports the models as JSON.
    """

    def __init__(
        self, workbook_path: Path, project_root: Path = config.project_root
    ) -> None:
        """Initialize the entity generator.

        Args:
            workbook_path: Path to the schema workbook
            project_root: Root directory generated entity files are written under
        """
        self.workbook_path = workbook_path
        self.project_root = project_root
        self.output_manager = OutputManager(project_root)
        self.builder = EntityModelBuilder()
        self.code_generator = CodeGenerator(self.output_manager)
        self.exporter = SchemaExporter(self.output_manager)
        self.registration_block = ""

    def run(
        self,
        json_mode: bool = False,
        json_output: Path | None = None,
        verbose: bool = False,
    ) -> str:
        """Run the complete generation process.

        Args:
            json_mode: Export JSON instead of writing entity files
            json_output: File to write the JSON export to (implies json_mode)
            verbose: Enable debug logging

        Returns:
            Text for the console: the JSON document or the DbSet registration block

        Raises:
            SystemExit: If any critical error occurs during generation
        """
        try:
            setup_logger(verbose)
            return self.run_for_testing(json_mode, json_output)
        except FileNotFoundError as e:
            logger.error("Missing required input file: %s", e, exc_info=True)
            sys.exit(config.exit_codes.error_file_not_found)
        except EntityWriteError as e:
            logger.error("Generation stopped, earlier files kept: %s", e, exc_info=True)
            sys.exit(config.exit_codes.error_write_failed)
        except ValidationError as e:
            logger.error("Export validation error: %s", e, exc_info=True)
            sys.exit(config.exit_codes.error_validation_failed)
        except EntityGenerationError as e:
            logger.error("Entity generation error: %s", e, exc_info=True)
            sys.exit(config.exit_codes.error_invalid_workbook)
        except Exception:
            logger.exception("Unexpected error occurred")
            sys.exit(config.exit_codes.error_unexpected)

    def run_for_testing(
        self, json_mode: bool = False, json_output: Path | None = None
    ) -> str:
        """Run the generation process, raising instead of exiting.

        Returns:
            Text for the console: the JSON document or the DbSet registration block

        Raises:
            EntityGenerationError: If reading, writing or validation fails
            FileNotFoundError: If the workbook is missing
        """
        if json_mode or json_output is not None:
            return self.export_json(json_output)

        paths = self.generate_all_entities()
        logger.info("Generation completed successfully! Generated %d file(s).", len(paths))
        if not self.registration_block:
            return ""
        logger.info("Add the printed DbSet declarations to %s", CONTEXT_FILE_NAME)
        return f"{REGISTRATION_HEADER}\n\n{self.registration_block}"

    def load_entities(self) -> BuildResult:
        """Read the workbook and build entity models.

        Returns:
            BuildResult with entities and diagnostics in worksheet order
        """
        result = self.builder.build_all(read_worksheets(self.workbook_path))
        for diagnostic in result.diagnostics:
            logger.log(
                logging.getLevelName(diagnostic.level.upper()), "%s", diagnostic
            )
        logger.info(
            "Parsed %d worksheet(s) into entities with %d warning(s)",
            len(result.entities),
            len(result.warnings),
        )
        return result

    def generate_all_entities(self) -> list[Path]:
        """Write an entity source file for every worksheet.

        Returns:
            List of paths where entity files were written
        """
        result = self.load_entities()

        generated_files: list[Path] = []
        for entity in result.entities:
            self._log_entity(entity)
            generated_files.append(self.code_generator.generate(entity))

        self.registration_block = render_registration_block(result.entities)
        return generated_files

    def export_json(self, output_path: Path | None = None) -> str:
        """Export all entities as JSON.

        Args:
            output_path: Optional file to write the document to

        Returns:
            The JSON document, or an empty string when it was written to a file
        """
        result = self.load_entities()
        if output_path is not None:
            self.exporter.export_to_file(result.entities, output_path)
            return ""
        return self.exporter.export(result.entities)

    def _log_entity(self, entity: EntityModel) -> None:
        """Log the analysis summary of an entity before it is generated."""
        key = entity.primary_key_field
        logger.info("Analyzing entity: %s", entity.description)
        logger.info("- Sheet name: %s", entity.sheet_name)
        logger.info("- Folder: %s, Module: %s", entity.folder_name, entity.module_name)
        if entity.is_detail:
            logger.info("- Detail: %s", entity.detail_name)
        logger.info("- Prefix: %s", entity.prefix)
        logger.info("- File path: %s", entity.file_path)
        logger.info("- Primary key type: %s", key.resolved_type if key else "none")
        if entity.foreign_key_field is not None:
            logger.info("- Foreign key: %s", entity.foreign_key_field.name)
        for field in (*entity.business_fields, *entity.creator_fields, *entity.editor_fields):
            logger.debug(
                "  - %s (%s%s) - %s",
                field.name,
                field.resolved_type,
                "?" if field.is_nullable else "",
                field.comment,
            )
