"""Declared storage type to C# type and Column TypeName mapping."""

from __future__ import annotations

import re

from entity_generator.core.constants import (
    CREATOR_SUFFIXES,
    DEFAULT_DECIMAL_PRECISION,
    DEFAULT_DECIMAL_SCALE,
    DEFAULT_STRING_LENGTH,
    EDITOR_SUFFIXES,
    STATUS_CODE_DESCRIPTOR,
    STATUS_CODE_TYPE,
    TABLE_ID,
    TYPE_BOOL,
    TYPE_DECIMAL,
    TYPE_GUID,
    TYPE_INT,
    TYPE_LONG,
    TYPE_STRING,
)
from entity_generator.core.schemas import FieldDescriptor

# Order matters: "bigint" contains "int" and must be tested first.
TYPE_PRECEDENCE: tuple[tuple[tuple[str, ...], str], ...] = (
    (("bigint",), TYPE_LONG),
    (("int",), TYPE_INT),
    (("datetime",), TYPE_LONG),  # stored as ticks
    (("decimal",), TYPE_DECIMAL),
    (("bit",), TYPE_BOOL),
    (("uniqueidentifier",), TYPE_GUID),
    (("nvarchar", "varchar", "char"), TYPE_STRING),
)

STRING_LENGTH_PATTERN = re.compile(r"char\((\d+)\)")
NVARCHAR_LENGTH_PATTERN = re.compile(r"nvarchar\((\d+)\)")
DECIMAL_PATTERN = re.compile(r"decimal\((\d+),(\d+)\)")


def quote(value: str) -> str:
    """Render a literal TypeName argument."""
    return f'"{value}"'


def _matching_keyword(declared_type: str) -> str | None:
    lowered = declared_type.lower()
    for keywords, _ in TYPE_PRECEDENCE:
        for keyword in keywords:
            if keyword in lowered:
                return keywords[0]
    return None


def resolve_language_type(declared_type: str) -> str:
    """Infer the C# type from a declared storage type (case-insensitive)."""
    lowered = declared_type.lower()
    for keywords, language_type in TYPE_PRECEDENCE:
        if any(keyword in lowered for keyword in keywords):
            return language_type
    return TYPE_STRING


def _string_length(lowered: str, pattern: re.Pattern[str]) -> str:
    match = pattern.search(lowered)
    return match.group(1) if match else DEFAULT_STRING_LENGTH


def column_descriptor(declared_type: str) -> str:
    """Column TypeName literal for a plain (non-key, non-audit) field."""
    lowered = declared_type.lower()
    keyword = _matching_keyword(declared_type)

    if keyword == "bigint":
        return quote("bigint")
    if keyword == "int":
        return quote("int")
    if keyword == "datetime":
        return quote("bigint")
    if keyword == "decimal":
        match = DECIMAL_PATTERN.search(lowered)
        if match:
            return quote(f"decimal({match.group(1)},{match.group(2)})")
        return quote(f"decimal({DEFAULT_DECIMAL_PRECISION},{DEFAULT_DECIMAL_SCALE})")
    if keyword == "bit":
        return quote("bit")
    if keyword == "uniqueidentifier":
        return quote("uniqueidentifier")
    if keyword == "nvarchar":
        if STATUS_CODE_TYPE in lowered:
            return quote(STATUS_CODE_DESCRIPTOR)
        return quote(f"nvarchar({_string_length(lowered, STRING_LENGTH_PATTERN)})")
    return quote(declared_type)


def primary_key_descriptor(declared_type: str) -> str:
    """Column TypeName for a primary key field.

    Numeric and GUID keys use the project's table id type; nvarchar keys keep
    their literal type. Other key types are described like a plain field.
    """
    lowered = declared_type.lower()
    if "bigint" in lowered or "uniqueidentifier" in lowered:
        return TABLE_ID
    if "nvarchar" in lowered:
        return quote(f"nvarchar({_string_length(lowered, NVARCHAR_LENGTH_PATTERN)})")
    return column_descriptor(declared_type)


def audit_override(name: str) -> tuple[str, str, bool] | None:
    """Fixed (type, descriptor, nullable) for creator/editor audit columns."""
    for suffix, (language_type, descriptor) in CREATOR_SUFFIXES.items():
        if name.endswith(suffix):
            return language_type, descriptor, False
    for suffix, (language_type, descriptor) in EDITOR_SUFFIXES.items():
        if name.endswith(suffix):
            return language_type, descriptor, True
    return None


def resolve_field(field: FieldDescriptor) -> FieldDescriptor:
    """Resolve a parsed field's C# type, TypeName and nullability.

    Audit column suffixes override whatever the worksheet declares.

    Args:
        field: Field as read from the worksheet

    Returns:
        A resolved copy of the field
    """
    resolved_type = resolve_language_type(field.declared_type)
    if field.is_primary_key:
        descriptor = primary_key_descriptor(field.declared_type)
    else:
        descriptor = column_descriptor(field.declared_type)
    is_nullable = not field.is_required

    override = audit_override(field.name)
    if override is not None:
        resolved_type, descriptor, is_nullable = override

    return field.model_copy(
        update={
            "resolved_type": resolved_type,
            "storage_descriptor": descriptor,
            "is_nullable": is_nullable,
        }
    )
