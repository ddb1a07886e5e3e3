"""DbSet registration snippet for the persistence context."""

from __future__ import annotations

from collections.abc import Iterable

from entity_generator.core.schemas import EntityModel

INDENT = " " * 4


def group_by_folder(entities: Iterable[EntityModel]) -> dict[str, list[EntityModel]]:
    """Group entities by folder name, keeping first-discovery order."""
    groups: dict[str, list[EntityModel]] = {}
    for entity in entities:
        groups.setdefault(entity.folder_name, []).append(entity)
    return groups


def render_registration_block(entities: Iterable[EntityModel]) -> str:
    """Render ``DbSet`` declarations to paste into the entity context class.

    Args:
        entities: Generated entities in workbook order

    Returns:
        One ``#region`` per folder containing a documented declaration per entity
    """
    lines: list[str] = []
    for folder_name, group in group_by_folder(entities).items():
        lines.append(f"{INDENT}#region {folder_name}相關")
        lines.append("")
        for entity in group:
            lines.append(f"{INDENT}/// <summary>")
            lines.append(f"{INDENT}/// {entity.description}")
            lines.append(f"{INDENT}/// </summary>")
            lines.append(
                f"{INDENT}public DbSet<{entity.class_name}> {entity.class_name} {{ get; set; }}"
            )
            lines.append("")
        lines.append(f"{INDENT}#endregion")
        lines.append("")
    return "\n".join(lines)
