"""Tests for the DbSet registration block."""

from entity_generator.core.schemas import EntityModel
from entity_generator.rendering.registration import (
    group_by_folder,
    render_registration_block,
)


def make_entity(folder_name, module_name, description=""):
    return EntityModel(
        sheet_name=f"{folder_name}_{module_name}({description})",
        folder_name=folder_name,
        module_name=module_name,
        description=description,
    )


def test_group_by_folder_keeps_discovery_order():
    entities = [
        make_entity("Bga", "Material"),
        make_entity("Sys", "User"),
        make_entity("Bga", "Order"),
    ]

    groups = group_by_folder(entities)

    assert list(groups) == ["Bga", "Sys"]
    assert [e.module_name for e in groups["Bga"]] == ["Material", "Order"]


def test_render_registration_block():
    entities = [make_entity("Bga", "Material", "料件項目"), make_entity("Sys", "User", "使用者")]

    block = render_registration_block(entities)

    assert block.splitlines() == [
        "    #region Bga相關",
        "",
        "    /// <summary>",
        "    /// 料件項目",
        "    /// </summary>",
        "    public DbSet<CTab_BgaMaterial> CTab_BgaMaterial { get; set; }",
        "",
        "    #endregion",
        "",
        "    #region Sys相關",
        "",
        "    /// <summary>",
        "    /// 使用者",
        "    /// </summary>",
        "    public DbSet<CTab_SysUser> CTab_SysUser { get; set; }",
        "",
        "    #endregion",
    ]


def test_render_registration_block_empty():
    assert render_registration_block([]) == ""
