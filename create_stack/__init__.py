"""create-stack -- interactive scaffolding for JavaScript project stacks.

Asks a handful of questions (framework, styling, database, tooling, ...) and
then drives the selected package manager and the official generator CLIs to
assemble a starter project on disk.

Quick usage::

    from create_stack import create_project, validate_project_config

    config = validate_project_config({
        "project_name": "my-app",
        "framework": "react",
        "variant": "ts",
        "package_manager": "pnpm",
        "meta_framework": "none",
        "styling": "tailwind",
        "ui": [],
        "database": "prisma",
        "animation": [],
        "tooling": ["eslint", "prettier"],
        "testing": ["vitest"],
        "extras": ["git"],
        "confirm": True,
    })
    exit_code = await create_project(config)
"""

__version__ = "1.0.0"

from create_stack.config import ProjectConfig, validate_project_config  # noqa: E402
from create_stack.create import create_project  # noqa: E402

__all__ = [
    "ProjectConfig",
    "__version__",
    "create_project",
    "validate_project_config",
]
