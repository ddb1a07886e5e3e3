"""Pydantic models for worksheets, fields, entities and diagnostics."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel

from entity_generator.core import derive


class CamelModel(BaseModel):
    """Base model serialised with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Worksheet(BaseModel):
    """One worksheet as produced by the workbook reader."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Worksheet title")
    rows: tuple[tuple[Any, ...], ...] = Field(
        default=(), description="Cell values in row order, header row included"
    )


class FieldDescriptor(CamelModel):
    """One schema column read from a worksheet row.

    ``resolved_type``, ``storage_descriptor`` and ``is_nullable`` are empty
    until the field has been passed through the type mapper.
    """

    name: str = Field(..., min_length=1, description="Column name")
    declared_type: str = Field("", description="Declared storage type, e.g. nvarchar(50)")
    length: str | None = None
    comment: str = ""
    comment_extra: str | None = None
    example: str | None = None
    is_primary_key: bool = False
    is_required: bool = False
    remark: str | None = None
    resolved_type: str = Field("", description="Target language type name")
    storage_descriptor: str = Field(
        "", description="Column TypeName token: quoted literal or PropertyConfig symbol"
    )
    is_nullable: bool = True


class EntityModel(CamelModel):
    """One generated entity class.

    Naming and field groupings are computed on access from the stored names and
    fields and are included when the model is serialised.
    """

    sheet_name: str
    folder_name: str
    module_name: str
    detail_name: str | None = None
    description: str = ""
    prefix: str = ""
    fields: tuple[FieldDescriptor, ...] = ()

    @computed_field(alias="isDetail")
    @property
    def is_detail(self) -> bool:
        return derive.is_detail(self.detail_name)

    @computed_field(alias="className")
    @property
    def class_name(self) -> str:
        return derive.class_name(self.folder_name, self.module_name, self.detail_name)

    @computed_field(alias="tableName")
    @property
    def table_name(self) -> str:
        return derive.table_name(self.folder_name, self.module_name, self.detail_name)

    @computed_field(alias="fileName")
    @property
    def file_name(self) -> str:
        return derive.file_name(self.folder_name, self.module_name, self.detail_name)

    @computed_field(alias="filePath")
    @property
    def file_path(self) -> str:
        return derive.file_path(self.folder_name, self.module_name, self.detail_name)

    @computed_field(alias="namespacePath")
    @property
    def namespace_path(self) -> str:
        return derive.namespace_path(self.folder_name, self.module_name)

    @computed_field(alias="primaryKeyField")
    @property
    def primary_key_field(self) -> FieldDescriptor | None:
        return derive.primary_key_field(self.fields)

    @computed_field(alias="businessFields")
    @property
    def business_fields(self) -> list[FieldDescriptor]:
        return derive.business_fields(self.fields)

    @computed_field(alias="creatorFields")
    @property
    def creator_fields(self) -> list[FieldDescriptor]:
        return derive.creator_fields(self.fields)

    @computed_field(alias="editorFields")
    @property
    def editor_fields(self) -> list[FieldDescriptor]:
        return derive.editor_fields(self.fields)

    @computed_field(alias="foreignKeyField")
    @property
    def foreign_key_field(self) -> FieldDescriptor | None:
        return derive.foreign_key_field(self.fields, self.detail_name)

    @property
    def master_class_name(self) -> str:
        """Header entity class referenced by a detail table's relation."""
        return derive.master_class_name(self.folder_name, self.module_name)


class SheetNameMatch(str, Enum):
    """How a worksheet title was recognised."""

    PRIMARY = "primary"
    FALLBACK = "fallback"
    UNMATCHED = "unmatched"


class SheetNameParseResult(BaseModel):
    """Tagged result of parsing a worksheet title."""

    model_config = ConfigDict(frozen=True)

    status: SheetNameMatch
    folder_name: str | None = None
    module_name: str | None = None
    detail_name: str | None = None
    description: str | None = None

    @property
    def matched(self) -> bool:
        return self.status is not SheetNameMatch.UNMATCHED


class DiagnosticKind(str, Enum):
    SHEET_NAME_FALLBACK = "sheet_name_fallback"
    SHEET_SKIPPED = "sheet_skipped"
    DUPLICATE_PRIMARY_KEY = "duplicate_primary_key"


class Diagnostic(BaseModel):
    """A recoverable anomaly met while building entities."""

    model_config = ConfigDict(frozen=True)

    kind: DiagnosticKind
    level: str = Field("warning", description="Logging level name")
    sheet_name: str
    message: str

    def __str__(self) -> str:
        return f"[{self.sheet_name}] {self.message}"


class BuildResult(BaseModel):
    """Entities built from a workbook plus the diagnostics collected on the way."""

    entities: list[EntityModel] = Field(default_factory=list)
    diagnostics: list[Diagnostic] = Field(default_factory=list)

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.level == "warning"]


class ValidationResult(BaseModel):
    """Result of export document validation with type safety."""

    is_valid: bool = Field(..., description="Whether the document passed validation")
    errors: list[str] = Field(
        default_factory=list, description="Validation error messages"
    )
    warnings: list[str] = Field(
        default_factory=list, description="Validation warning messages"
    )

    def add_error(self, message: str) -> None:
        """Add an error message to the validation result."""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str) -> None:
        """Add a warning message to the validation result."""
        self.warnings.append(message)
