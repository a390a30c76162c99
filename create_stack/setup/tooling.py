"""Code quality tooling: Prettier and Biome.

ESLint ships with every scaffold template, so selecting it installs nothing.
"""

from __future__ import annotations

from typing import Any

from create_stack.config import Styling, Tooling
from create_stack.core.context import ExecutionContext
from create_stack.core.generator import Generator
from create_stack.setup.helpers import classified, install_dev

PRETTIER_TAILWIND_PLUGIN = "prettier-plugin-tailwindcss"


def prettier_config(styling: Styling) -> dict[str, Any]:
    return {
        "semi": True,
        "singleQuote": True,
        "tabWidth": 2,
        "trailingComma": "es5",
        "plugins": [PRETTIER_TAILWIND_PLUGIN] if styling is Styling.TAILWIND else [],
    }


def tooling_packages(tooling: frozenset[Tooling], styling: Styling) -> list[str]:
    packages: list[str] = []
    if Tooling.PRETTIER in tooling:
        packages.append("prettier")
        if styling is Styling.TAILWIND:
            packages.append(PRETTIER_TAILWIND_PLUGIN)
    if Tooling.BIOME in tooling:
        packages.append("@biomejs/biome")
    return packages


class ToolingGenerator(Generator):
    name = "tooling"
    description = "Set up code quality tools"
    reads = frozenset({"tooling", "styling"})
    after = ("styling",)

    def should_run(self, context: ExecutionContext) -> bool:
        return bool(context.config.tooling)

    async def execute(self, context: ExecutionContext) -> None:
        config = context.config
        packages = tooling_packages(config.tooling, config.styling)
        with context.reporter.task(
            "Setting up code quality tools...",
            success="Code quality tools configured",
            failure="Failed to setup tooling",
        ), classified(
            context,
            packages=packages,
            install_message="Failed to install code quality tools",
            file_message="Failed to write tooling configuration",
        ):
            if Tooling.PRETTIER in config.tooling:
                await context.fs.write_json(
                    context.path(".prettierrc"), prettier_config(config.styling)
                )
            if packages:
                await install_dev(context, *packages)
