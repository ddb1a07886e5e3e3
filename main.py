"""
Entity Generator

Entry point for the entity generator script.
"""

from entity_generator.cli.main import cli


def main() -> None:
    """
    Entry point for the entity generator script.

    Parses the command line and runs the generation process.
    """
    cli()


if __name__ == "__main__":
    main()
