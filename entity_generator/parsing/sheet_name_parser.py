"""Worksheet title parsing.

Titles follow ``<Folder>_<ModulePart>(<Description>)``, e.g.
``Bga_Material(料件項目)``. Workbook applications cap title length, so a long
description may lose its closing parenthesis; those titles are still accepted
through a fallback pattern and tagged so the caller can warn about them.
"""

from __future__ import annotations

import re

from entity_generator.core.schemas import SheetNameMatch, SheetNameParseResult

PRIMARY_PATTERN = re.compile(r"^([^_]+)_(.+?)\((.+?)\)$")
FALLBACK_PATTERN = re.compile(r"^([^_]+)_(.+?)\((.+)$")


def split_module_part(module_part: str) -> tuple[str, str | None]:
    """Split a module part into module name and detail name.

    Args:
        module_part: Text between the folder underscore and the description

    Returns:
        Tuple of module name and detail name (None for header tables)
    """
    if "_" not in module_part:
        return module_part, None
    module_name, *rest = module_part.split("_")
    return module_name, "".join(rest)


def parse_sheet_name(sheet_title: str) -> SheetNameParseResult:
    """Parse a worksheet title into folder, module, detail and description.

    Args:
        sheet_title: Worksheet title as stored in the workbook

    Returns:
        SheetNameParseResult tagged PRIMARY, FALLBACK or UNMATCHED
    """
    for pattern, status in (
        (PRIMARY_PATTERN, SheetNameMatch.PRIMARY),
        (FALLBACK_PATTERN, SheetNameMatch.FALLBACK),
    ):
        match = pattern.match(sheet_title)
        if match is None:
            continue
        folder_name, module_part, description = match.groups()
        module_name, detail_name = split_module_part(module_part)
        return SheetNameParseResult(
            status=status,
            folder_name=folder_name,
            module_name=module_name,
            detail_name=detail_name,
            description=description,
        )

    return SheetNameParseResult(status=SheetNameMatch.UNMATCHED)
