"""Base project scaffolding via Vite or a meta-framework's own CLI."""

from __future__ import annotations

from create_stack.config import MetaFramework, PackageManager, ProjectConfig, Styling
from create_stack.core.context import ExecutionContext
from create_stack.core.errors import CommandExecutionError, ScaffoldingError
from create_stack.core.generator import Generator
from create_stack.core.package_manager import PackageManagerCommands


def scaffold_command(
    config: ProjectConfig, pm: PackageManagerCommands
) -> tuple[str, list[str]]:
    """Return ``(executable, args)`` that creates the base project.

    The command is run from the parent directory and creates
    ``config.project_name`` inside it.
    """
    name = config.project_name
    meta = config.meta_framework

    if meta is MetaFramework.NONE:
        template = config.framework.value + ("-ts" if config.is_typescript else "")
        if config.package_manager is PackageManager.DENO:
            return "deno", ["run", "-A", "npm:create-vite@latest", name, "--", "--template", template]
        return pm.pm, ["create", "vite@latest", name, "--", "--template", template]

    if meta is MetaFramework.NEXTJS:
        return _nextjs_command(config)

    if meta is MetaFramework.ASTRO:
        return pm.pm, [
            "create", "astro@latest", name, "--",
            "--template", "minimal",
            "--typescript", "strict",
            "--no-git", "--no-install",
        ]

    if meta is MetaFramework.REMIX:
        return pm.pmx, pm.exec_args(
            "create-remix@latest", name, "--typescript", "--no-git-init", "--no-install"
        )

    if meta is MetaFramework.NUXT:
        return pm.pmx, pm.exec_args("nuxi@latest", "init", name, "--no-install")

    # sveltekit
    return pm.pm, [
        "create", "svelte@latest", name, "--",
        "--template", "skeleton",
        "--typescript", "--no-install",
    ]


def _nextjs_command(config: ProjectConfig) -> tuple[str, list[str]]:
    pm = config.package_manager
    if pm is PackageManager.NPM:
        command, args = "npx", ["create-next-app@latest"]
    elif pm is PackageManager.DENO:
        command, args = "deno", ["run", "-A", "npm:create-next-app@latest"]
    else:
        command, args = pm.value, ["create", "next-app@latest"]

    args += [
        config.project_name,
        "--yes",
        "--typescript", "--eslint", "--app", "--src-dir",
        "--turbopack",
        "--disable-git",
        "--skip-install",
    ]
    if config.styling is Styling.TAILWIND:
        args.append("--tailwind")
    args += ["--import-alias", "@/*"]
    return command, args


class ScaffoldGenerator(Generator):
    """Creates the project directory with the framework's own tooling.

    Always runs, and runs before the package install and the setup pipeline;
    the orchestrator calls it directly rather than through the registry.
    """

    name = "scaffold"
    description = "Scaffold the base project"
    reads = frozenset(
        {"project_name", "framework", "variant", "meta_framework", "package_manager", "styling"}
    )

    def should_run(self, context: ExecutionContext) -> bool:
        return True

    async def execute(self, context: ExecutionContext) -> None:
        meta = context.config.meta_framework
        tool = "Vite" if meta is MetaFramework.NONE else meta.value
        command, args = scaffold_command(context.config, context.pm)
        try:
            await context.runner.run(command, args, cwd=context.project_path.parent)
        except CommandExecutionError as exc:
            raise ScaffoldingError(f"Failed to scaffold project with {tool}", exc.details) from exc
        except OSError as exc:
            raise ScaffoldingError(
                f"Failed to scaffold project with {tool}", {"error": str(exc)}
            ) from exc
