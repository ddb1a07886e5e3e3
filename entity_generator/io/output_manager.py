"""File system operations for generated output."""

from __future__ import annotations

from pathlib import Path

from entity_generator.core.config import config
from entity_generator.core.exceptions import EntityWriteError
from entity_generator.core.schemas import EntityModel

# Generated C# sources carry a byte-order mark for Visual Studio tooling.
SOURCE_ENCODING = "utf-8-sig"
JSON_ENCODING = "utf-8"


class OutputManager:
    """Manages file system operations for output generation.

    This class resolves entity file paths under the project root and writes
    generated sources and JSON documents, creating directories as needed.
    """

    def __init__(self, project_root: Path = config.project_root) -> None:
        """Initialize the output manager.

        Args:
            project_root: Directory the entity file paths are relative to
        """
        self.project_root = project_root

    def get_entity_path(self, entity: EntityModel) -> Path:
        """Get the absolute destination of an entity's source file.

        Args:
            entity: Entity whose file path is resolved

        Returns:
            Path under the project root
        """
        return self.project_root.joinpath(*entity.file_path.split("/"))

    def write_entity_source(self, entity: EntityModel, content: str) -> Path:
        """Write generated source for an entity, replacing any existing file.

        Args:
            entity: Entity the source belongs to
            content: Rendered source text

        Returns:
            Path where the file was written

        Raises:
            EntityWriteError: If unable to create directories or write the file
        """
        output_path = self.get_entity_path(entity)
        self._write_text(output_path, content, SOURCE_ENCODING)
        return output_path

    def write_json(self, document: str, output_path: Path) -> Path:
        """Write a serialized JSON document.

        Args:
            document: JSON text
            output_path: Destination file

        Returns:
            Path where the file was written

        Raises:
            EntityWriteError: If unable to write the file
        """
        self._write_text(output_path, document, JSON_ENCODING)
        return output_path

    def _write_text(self, output_path: Path, content: str, encoding: str) -> None:
        try:
            # Create directory structure if it doesn't exist
            output_path.parent.mkdir(parents=True, exist_ok=True)

            with open(output_path, "w", encoding=encoding, newline="\n") as f:
                f.write(content)
        except OSError as e:
            raise EntityWriteError(output_path, e) from e
