"""C# entity class rendering."""

from __future__ import annotations

from pathlib import Path

from entity_generator.core.constants import TYPE_STRING
from entity_generator.core.schemas import EntityModel, FieldDescriptor
from entity_generator.io.output_manager import OutputManager
from entity_generator.logger import logger

BASE_USINGS = (
    "Microsoft.EntityFrameworkCore",
    "Project_Model",
    "System.ComponentModel.DataAnnotations",
    "System.ComponentModel.DataAnnotations.Schema",
)
JSON_SERIALIZATION_USING = "System.Text.Json.Serialization"

CLASS_INDENT = " " * 4
MEMBER_INDENT = " " * 8


def csharp_string(value: str) -> str:
    """Escape text for use inside a single-line C# string literal."""
    return (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\r", "\\r")
        .replace("\n", "\\n")
    )


def comment_text(field: FieldDescriptor) -> str:
    if field.comment_extra:
        return f"{field.comment}：「{field.comment_extra}」"
    return field.comment


def default_initializer(field: FieldDescriptor) -> str:
    """Required strings start out empty; nothing else gets an initializer."""
    if field.resolved_type == TYPE_STRING and not field.is_nullable:
        return " = string.Empty;"
    return ""


def doc_lines(text: str, indent: str) -> list[str]:
    """One ``///`` line per line of cell text."""
    return [f"{indent}/// {line}" for line in text.splitlines() or [""]]


def summary(text: str, indent: str) -> list[str]:
    return [
        f"{indent}/// <summary>",
        *doc_lines(text, indent),
        f"{indent}/// </summary>",
    ]


def example(text: str, indent: str) -> list[str]:
    lines = text.splitlines()
    if lines == [text]:
        return [f"{indent}/// <example>{text}</example>"]
    return [f"{indent}/// <example>", *doc_lines(text, indent), f"{indent}/// </example>"]


class CodeGenerator:
    """Renders entity models as Entity Framework classes and writes them out.

    Rendering is pure; only ``generate`` touches the file system.
    """

    def __init__(self, output_manager: OutputManager | None = None) -> None:
        """Initialize the code generator.

        Args:
            output_manager: Writer used by ``generate`` (defaults to the configured project root)
        """
        self.output_manager = output_manager or OutputManager()

    def generate(self, entity: EntityModel) -> Path:
        """Render an entity and write it to its file path.

        Args:
            entity: Entity to generate

        Returns:
            Path of the written source file

        Raises:
            EntityWriteError: If the file cannot be written
        """
        content = self.render(entity)
        output_path = self.output_manager.write_entity_source(entity, content)
        logger.info("Generated %s", entity.file_path)
        return output_path

    def render(self, entity: EntityModel) -> str:
        """Render the complete source text of an entity class.

        Args:
            entity: Entity to render

        Returns:
            Source text, newline terminated
        """
        has_relation = entity.is_detail and entity.foreign_key_field is not None

        lines = [f"using {name};" for name in BASE_USINGS]
        if has_relation:
            lines.append(f"using {JSON_SERIALIZATION_USING};")
        lines.append("")

        lines.append(f"namespace {entity.namespace_path}")
        lines.append("{")
        lines.extend(summary(entity.description, CLASS_INDENT))
        lines.append(f'{CLASS_INDENT}[Table("{csharp_string(entity.table_name)}")]')
        lines.append(f'{CLASS_INDENT}[Comment("{csharp_string(entity.description)}")]')
        lines.append(f"{CLASS_INDENT}public class {entity.class_name}")
        lines.append(CLASS_INDENT + "{")

        if has_relation:
            lines.extend(self.render_relation(entity))
            lines.append("")

        members: list[list[str]] = []
        if entity.primary_key_field is not None:
            members.append(self.render_field(entity.primary_key_field, is_key=True))
        for field in (
            *entity.business_fields,
            *entity.creator_fields,
            *entity.editor_fields,
        ):
            members.append(self.render_field(field))

        for index, member in enumerate(members):
            # The key is written directly after the class brace or relation
            # block; every other member is separated by a blank line.
            if index > 0 or entity.primary_key_field is None:
                lines.append("")
            lines.extend(member)

        lines.append(CLASS_INDENT + "}")
        lines.append("}")
        return "\n".join(lines) + "\n"

    def render_relation(self, entity: EntityModel) -> list[str]:
        """Render the navigation property from a detail table to its header."""
        foreign_key = entity.foreign_key_field
        if foreign_key is None:
            return []

        master = entity.master_class_name
        return [
            f"{MEMBER_INDENT}#region 資料庫關聯",
            "",
            f'{MEMBER_INDENT}#region 外來鍵，[ForeignKey("外來鍵參照欄位")]，'
            "若沒設定ForeignKey Code First會自動生成欄位",
            "",
            *summary(f"{entity.folder_name}{entity.module_name}", MEMBER_INDENT),
            f'{MEMBER_INDENT}[ForeignKey("{foreign_key.name}")]',
            f"{MEMBER_INDENT}[JsonIgnore]",
            f"{MEMBER_INDENT}public virtual {master} {master} {{ get; set; }}",
            "",
            f"{MEMBER_INDENT}#endregion",
            "",
            f"{MEMBER_INDENT}#endregion",
        ]

    def render_field(self, field: FieldDescriptor, is_key: bool = False) -> list[str]:
        """Render one property with its documentation and attributes.

        Args:
            field: Resolved field to render
            is_key: Whether to mark the property as the entity key

        Returns:
            Source lines of the property
        """
        lines = summary(field.comment, MEMBER_INDENT)
        if field.example:
            lines.extend(example(field.example, MEMBER_INDENT))

        if is_key:
            lines.append(f"{MEMBER_INDENT}[Key]")
            lines.append(f"{MEMBER_INDENT}[DatabaseGenerated(DatabaseGeneratedOption.None)]")

        lines.append(
            f'{MEMBER_INDENT}[Column("{field.name}", TypeName = {field.storage_descriptor})]'
        )
        lines.append(f'{MEMBER_INDENT}[Comment("{csharp_string(comment_text(field))}")]')

        nullable = "?" if field.is_nullable else ""
        lines.append(
            f"{MEMBER_INDENT}public {field.resolved_type}{nullable} {field.name} "
            f"{{ get; set; }}{default_initializer(field)}"
        )
        return lines
