"""Command line entry points."""

from entity_generator.cli.generator import EntityGenerator
from entity_generator.cli.main import cli

__all__ = ["EntityGenerator", "cli"]
