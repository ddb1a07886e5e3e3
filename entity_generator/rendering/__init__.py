"""Source code rendering for entity models."""

from entity_generator.rendering.code_generator import CodeGenerator
from entity_generator.rendering.registration import render_registration_block

__all__ = ["CodeGenerator", "render_registration_block"]
