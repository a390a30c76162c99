"""Setup stages applied after the base project is scaffolded.

Quick usage::

    from create_stack.setup import build_registry

    registry = build_registry()
    result = await registry.execute_all(context)
"""

from create_stack.core.generator import GeneratorRegistry
from create_stack.setup.animation import AnimationGenerator
from create_stack.setup.database import DatabaseGenerator
from create_stack.setup.extras import ExtrasGenerator
from create_stack.setup.scaffold import ScaffoldGenerator
from create_stack.setup.styling import StylingGenerator
from create_stack.setup.testing import TestingGenerator, get_testing_deps
from create_stack.setup.tooling import ToolingGenerator
from create_stack.setup.ui import UIGenerator

PIPELINE = (
    StylingGenerator,
    UIGenerator,
    DatabaseGenerator,
    AnimationGenerator,
    ToolingGenerator,
    TestingGenerator,
    ExtrasGenerator,
)


def build_registry() -> GeneratorRegistry:
    """Return a registry holding the setup pipeline in execution order."""
    registry = GeneratorRegistry()
    for generator_cls in PIPELINE:
        registry.register(generator_cls())
    return registry


__all__ = [
    "AnimationGenerator",
    "DatabaseGenerator",
    "ExtrasGenerator",
    "PIPELINE",
    "ScaffoldGenerator",
    "StylingGenerator",
    "TestingGenerator",
    "ToolingGenerator",
    "UIGenerator",
    "build_registry",
    "get_testing_deps",
]
