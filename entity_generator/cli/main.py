"""Command line interface for the entity generator."""

from pathlib import Path

import click

from entity_generator.cli.generator import EntityGenerator
from entity_generator.core.config import config


@click.command()
@click.version_option(version="0.1.0", prog_name="entity-generator")
@click.argument(
    "workbook",
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option("--json", "json_mode", is_flag=True, help="Print the entities as JSON")
@click.option(
    "--output-json",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the entities as JSON to this file",
)
@click.option(
    "--project-root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Root directory entity files are written under",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(
    workbook: Path,
    json_mode: bool,
    output_json: Path | None,
    project_root: Path | None,
    verbose: bool,
) -> None:
    """Generate Entity Framework classes from a schema WORKBOOK.

    Without options, one entity file is written per worksheet and the DbSet
    registration code is printed for the entity context.
    """
    generator = EntityGenerator(workbook, project_root or config.project_root)
    output = generator.run(json_mode=json_mode, json_output=output_json, verbose=verbose)
    if output:
        click.echo(output)


if __name__ == "__main__":
    cli()
