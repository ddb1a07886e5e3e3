"""Tests for storage type mapping."""

import pytest

from entity_generator.core.schemas import FieldDescriptor
from entity_generator.mapping.type_mapper import (
    column_descriptor,
    primary_key_descriptor,
    resolve_field,
    resolve_language_type,
)


def make_field(name="Mat_Value", declared_type="nvarchar(50)", **kwargs):
    return FieldDescriptor(name=name, declared_type=declared_type, **kwargs)


class TestLanguageType:
    """Test C# type inference precedence."""

    @pytest.mark.parametrize(
        "declared_type,expected",
        [
            ("bigint", "long"),
            ("BIGINT", "long"),
            ("int", "int"),
            ("smallint", "int"),
            ("datetime", "long"),
            ("datetime2", "long"),
            ("decimal(18,2)", "decimal"),
            ("bit", "bool"),
            ("uniqueidentifier", "Guid"),
            ("nvarchar(50)", "string"),
            ("varchar(20)", "string"),
            ("char(3)", "string"),
            ("text", "string"),
            ("", "string"),
        ],
    )
    def test_precedence(self, declared_type, expected):
        """Should resolve declared types in fixed precedence order."""
        assert resolve_language_type(declared_type) == expected


class TestColumnDescriptor:
    """Test TypeName literals for plain fields."""

    @pytest.mark.parametrize(
        "declared_type,expected",
        [
            ("bigint", '"bigint"'),
            ("int", '"int"'),
            ("datetime", '"bigint"'),
            ("decimal(10,4)", '"decimal(10,4)"'),
            ("decimal", '"decimal(18,2)"'),
            ("bit", '"bit"'),
            ("uniqueidentifier", '"uniqueidentifier"'),
            ("nvarchar(1)", '"character(1)"'),
            ("nvarchar(10)", '"nvarchar(10)"'),
            ("NVARCHAR(200)", '"nvarchar(200)"'),
            ("nvarchar(max)", '"nvarchar(50)"'),
            ("varchar(20)", '"nvarchar(20)"'),
            ("char(3)", '"nvarchar(3)"'),
            ("Money", '"Money"'),
        ],
    )
    def test_descriptor(self, declared_type, expected):
        """Should produce the expected quoted descriptor."""
        assert column_descriptor(declared_type) == expected


class TestPrimaryKeyDescriptor:
    """Test TypeName for key fields."""

    def test_bigint_and_guid_keys_use_table_id(self):
        """Should use the table id symbol for bigint and GUID keys."""
        assert primary_key_descriptor("bigint") == "PropertyConfig.TableID"
        assert primary_key_descriptor("uniqueidentifier") == "PropertyConfig.TableID"

    def test_nvarchar_key_keeps_literal(self):
        """Should keep nvarchar keys as literals with their length."""
        assert primary_key_descriptor("nvarchar(20)") == '"nvarchar(20)"'
        assert primary_key_descriptor("nvarchar") == '"nvarchar(50)"'

    def test_other_keys_use_column_mapping(self):
        """Should describe other key types like plain fields."""
        assert primary_key_descriptor("int") == '"int"'


class TestResolveField:
    """Test full field resolution including audit overrides."""

    def test_returns_resolved_copy(self):
        """Should leave the parsed field untouched and return a resolved copy."""
        field = make_field(declared_type="decimal(10,2)", is_required=True)

        resolved = resolve_field(field)

        assert field.resolved_type == ""
        assert resolved.resolved_type == "decimal"
        assert resolved.storage_descriptor == '"decimal(10,2)"'
        assert resolved.is_nullable is False
        assert resolved.name == field.name

    def test_nullable_follows_required(self):
        """Should make optional fields nullable."""
        assert resolve_field(make_field(is_required=False)).is_nullable is True
        assert resolve_field(make_field(is_required=True)).is_nullable is False

    def test_primary_key(self):
        """Should describe a bigint key with the table id symbol."""
        resolved = resolve_field(
            make_field("PK_Material", "bigint", is_primary_key=True, is_required=True)
        )

        assert resolved.resolved_type == "long"
        assert resolved.storage_descriptor == "PropertyConfig.TableID"

    def test_unrecognized_type_is_string_with_verbatim_descriptor(self):
        """Should fall back to string with the declared type quoted verbatim."""
        resolved = resolve_field(make_field(declared_type="Geography"))

        assert resolved.resolved_type == "string"
        assert resolved.storage_descriptor == '"Geography"'

    @pytest.mark.parametrize(
        "suffix,resolved_type,descriptor,nullable",
        [
            ("_CreateId", "long", "PropertyConfig.TableID", False),
            ("_CreateCode", "string", "PropertyConfig.TableCode", False),
            ("_CreateDate", "long", "PropertyConfig.TableTime", False),
            ("_CreateIp", "string", "PropertyConfig.TableIP", False),
            ("_EditId", "long", "PropertyConfig.TableID", True),
            ("_EditCode", "string", "PropertyConfig.TableCode", True),
            ("_EditDate", "long", "PropertyConfig.TableTime", True),
            ("_EditIp", "string", "PropertyConfig.TableIP", True),
        ],
    )
    def test_audit_overrides(self, suffix, resolved_type, descriptor, nullable):
        """Should force the fixed audit shape regardless of the worksheet."""
        for declared_type in ("nvarchar(50)", "bit", "datetime"):
            for required in (True, False):
                resolved = resolve_field(
                    make_field(f"Mat{suffix}", declared_type, is_required=required)
                )
                assert resolved.resolved_type == resolved_type
                assert resolved.storage_descriptor == descriptor
                assert resolved.is_nullable is nullable

    def test_create_id_on_nvarchar_optional_column(self):
        """Should still resolve X_CreateId to a non-nullable table id."""
        resolved = resolve_field(make_field("X_CreateId", "nvarchar(50)", is_required=False))

        assert resolved.resolved_type == "long"
        assert resolved.storage_descriptor == "PropertyConfig.TableID"
        assert resolved.is_nullable is False

    def test_override_is_idempotent(self):
        """Should give the same result when resolving twice."""
        once = resolve_field(make_field("X_EditDate", "nvarchar(50)"))

        assert resolve_field(once) == once

    def test_suffix_match_is_case_sensitive(self):
        """Should not treat differently cased suffixes as audit columns."""
        resolved = resolve_field(make_field("X_createid", "nvarchar(50)"))

        assert resolved.resolved_type == "string"
        assert resolved.is_nullable is True

    def test_resolution_ignores_other_fields(self):
        """Should resolve a field the same way regardless of its neighbours."""
        field = make_field("Mat_Price", "decimal(12,3)")

        assert resolve_field(field) == resolve_field(field.model_copy())
