"""Builds entity models from worksheets."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from entity_generator.core.constants import PRIMARY_KEY_PREFIX, UNKNOWN_PREFIX
from entity_generator.core.schemas import (
    BuildResult,
    Diagnostic,
    DiagnosticKind,
    EntityModel,
    FieldDescriptor,
    SheetNameMatch,
    Worksheet,
)
from entity_generator.mapping.type_mapper import resolve_field
from entity_generator.parsing.field_parser import parse_fields
from entity_generator.parsing.sheet_name_parser import parse_sheet_name


def extract_prefix(fields: Sequence[FieldDescriptor]) -> str:
    """Extract the column name prefix shared by an entity's fields.

    Uses the first non-key field containing an underscore, then the primary key
    name without its ``PK_`` prefix.

    Args:
        fields: Entity fields in row order

    Returns:
        The prefix, or ``"Unknown"`` when none can be derived
    """
    for field in fields:
        if not field.is_primary_key and "_" in field.name:
            prefix = field.name.split("_")[0]
            if prefix:
                return prefix
            break

    key = next((f for f in fields if f.is_primary_key), None)
    if key is not None and key.name.startswith(PRIMARY_KEY_PREFIX):
        prefix = key.name[len(PRIMARY_KEY_PREFIX) :]
        if prefix:
            return prefix

    return UNKNOWN_PREFIX


class EntityModelBuilder:
    """Turns worksheets into resolved entity models.

    Recoverable anomalies are collected as diagnostics instead of being raised,
    so a bad worksheet never stops the rest of the workbook.
    """

    def __init__(self) -> None:
        """Initialize the builder with an empty diagnostic log."""
        self.diagnostics: list[Diagnostic] = []

    def build(self, worksheet: Worksheet) -> EntityModel | None:
        """Build one entity model from a worksheet.

        Args:
            worksheet: Worksheet title and rows

        Returns:
            The entity model, or None when the title cannot be parsed
        """
        title = worksheet.title
        parsed = parse_sheet_name(title)

        if not parsed.matched:
            self._record(
                DiagnosticKind.SHEET_SKIPPED,
                title,
                f"Skipping worksheet with unparseable name: {title}",
            )
            return None

        if parsed.status is SheetNameMatch.FALLBACK:
            self._record(
                DiagnosticKind.SHEET_NAME_FALLBACK,
                title,
                f"Worksheet name is missing its closing parenthesis, "
                f"using fallback parsing: {title}",
            )

        fields = [resolve_field(field) for field in parse_fields(worksheet.rows)]

        key_names = [f.name for f in fields if f.is_primary_key]
        if len(key_names) > 1:
            self._record(
                DiagnosticKind.DUPLICATE_PRIMARY_KEY,
                title,
                f"Multiple primary key rows ({', '.join(key_names)}); "
                f"using {key_names[0]}",
            )

        return EntityModel(
            sheet_name=title,
            folder_name=parsed.folder_name or "",
            module_name=parsed.module_name or "",
            detail_name=parsed.detail_name,
            description=parsed.description or "",
            prefix=extract_prefix(fields),
            fields=tuple(fields),
        )

    def build_all(self, worksheets: Iterable[Worksheet]) -> BuildResult:
        """Build entity models for every worksheet, in workbook order.

        Args:
            worksheets: Worksheets to process, consumed lazily

        Returns:
            BuildResult with the entities and the diagnostics raised for them
        """
        start = len(self.diagnostics)
        entities: list[EntityModel] = []
        for worksheet in worksheets:
            entity = self.build(worksheet)
            if entity is not None:
                entities.append(entity)
        return BuildResult(entities=entities, diagnostics=self.diagnostics[start:])

    def _record(self, kind: DiagnosticKind, sheet_name: str, message: str) -> None:
        self.diagnostics.append(
            Diagnostic(kind=kind, level="warning", sheet_name=sheet_name, message=message)
        )
