"""Pure functions deriving entity naming and field groupings.

Every derived view on ``EntityModel`` delegates here, so the values are always
recomputed from the stored folder/module/detail names and field list.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from entity_generator.core.constants import (
    CLASS_NAME_PREFIX,
    CREATOR_SUFFIXES,
    EDITOR_SUFFIXES,
    ENTITY_BASE_PATH,
    FOREIGN_KEY_PREFIXES,
    NAMESPACE_ROOT,
    SOURCE_EXTENSION,
)

if TYPE_CHECKING:
    from entity_generator.core.schemas import FieldDescriptor


def is_detail(detail_name: str | None) -> bool:
    return bool(detail_name)


def class_name(folder_name: str, module_name: str, detail_name: str | None) -> str:
    return f"{CLASS_NAME_PREFIX}{folder_name}{module_name}{detail_name or ''}"


def master_class_name(folder_name: str, module_name: str) -> str:
    """Class name of the header entity a detail table belongs to."""
    return f"{CLASS_NAME_PREFIX}{folder_name}{module_name}"


def table_name(folder_name: str, module_name: str, detail_name: str | None) -> str:
    if is_detail(detail_name):
        return f"{folder_name}_{module_name}_{detail_name}"
    return f"{folder_name}_{module_name}"


def namespace_path(folder_name: str, module_name: str) -> str:
    return f"{NAMESPACE_ROOT}.{folder_name}.{module_name}"


def file_name(folder_name: str, module_name: str, detail_name: str | None) -> str:
    return f"{class_name(folder_name, module_name, detail_name)}{SOURCE_EXTENSION}"


def file_path(folder_name: str, module_name: str, detail_name: str | None) -> str:
    """Project-relative path of the generated source file (POSIX separators)."""
    name = file_name(folder_name, module_name, detail_name)
    return f"{ENTITY_BASE_PATH}/{folder_name}/{module_name}/{name}"


def is_creator_field(name: str) -> bool:
    return name.endswith(tuple(CREATOR_SUFFIXES))


def is_editor_field(name: str) -> bool:
    return name.endswith(tuple(EDITOR_SUFFIXES))


def is_audit_field(name: str) -> bool:
    return is_creator_field(name) or is_editor_field(name)


def primary_key_field(
    fields: Sequence[FieldDescriptor],
) -> FieldDescriptor | None:
    """Return the first primary-key field; later key rows are ignored."""
    return next((f for f in fields if f.is_primary_key), None)


def _non_key_fields(fields: Sequence[FieldDescriptor]) -> list[FieldDescriptor]:
    key = primary_key_field(fields)
    return [f for f in fields if f is not key]


def business_fields(fields: Sequence[FieldDescriptor]) -> list[FieldDescriptor]:
    return [f for f in _non_key_fields(fields) if not is_audit_field(f.name)]


def creator_fields(fields: Sequence[FieldDescriptor]) -> list[FieldDescriptor]:
    return [f for f in _non_key_fields(fields) if is_creator_field(f.name)]


def editor_fields(fields: Sequence[FieldDescriptor]) -> list[FieldDescriptor]:
    return [f for f in _non_key_fields(fields) if is_editor_field(f.name)]


def foreign_key_field(
    fields: Sequence[FieldDescriptor], detail_name: str | None
) -> FieldDescriptor | None:
    if not is_detail(detail_name):
        return None
    return next(
        (f for f in fields if f.name.startswith(FOREIGN_KEY_PREFIXES)),
        None,
    )
