"""Extras: Git, Husky, environment files, Docker and VS Code settings."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Any

from create_stack.config import Extra
from create_stack.core.context import ExecutionContext
from create_stack.core.errors import CommandExecutionError
from create_stack.core.generator import Generator
from create_stack.setup.helpers import classified, install_dev, pmx

VSCODE_EXTENSIONS: dict[str, Any] = {
    "recommendations": [
        "dbaeumer.vscode-eslint",
        "esbenp.prettier-vscode",
        "bradlc.vscode-tailwindcss",
        "prisma.prisma",
    ]
}

VSCODE_SETTINGS: dict[str, Any] = {
    "editor.formatOnSave": True,
    "editor.defaultFormatter": "esbenp.prettier-vscode",
    "editor.codeActionsOnSave": {"source.fixAll.eslint": "explicit"},
}


class ExtrasGenerator(Generator):
    """Applies each selected extra in a fixed order: git, husky, env, docker, vscode."""

    name = "extras"
    description = "Add extras"
    reads = frozenset({"extras"})

    def should_run(self, context: ExecutionContext) -> bool:
        return bool(context.config.extras)

    async def execute(self, context: ExecutionContext) -> None:
        extras = context.config.extras
        with context.reporter.task(
            "Adding extras...", success="Extras added", failure="Failed to add extras"
        ):
            if Extra.GIT in extras:
                await setup_git(context)
            if Extra.HUSKY in extras:
                await setup_husky(context)
            if Extra.ENV in extras:
                await setup_env_files(context)
            if Extra.DOCKER in extras:
                await setup_docker(context)
            if Extra.VSCODE in extras:
                await setup_vscode(context)


async def setup_git(context: ExecutionContext) -> None:
    """Initialise a repository and write ``.gitignore``."""
    try:
        await context.runner.run("git", ["init"], cwd=context.project_path)
    except CommandExecutionError as exc:
        raise CommandExecutionError(
            "git init", exc.exit_code, "Failed to initialize Git repository", exc.stderr
        ) from exc

    with _file_errors(context, "Failed to write .gitignore"):
        await context.fs.write_text(
            context.path(".gitignore"), context.renderer.render("extras/gitignore.j2")
        )


async def setup_husky(context: ExecutionContext) -> None:
    with classified(
        context,
        packages="husky",
        install_message="Failed to setup Husky",
        file_message="Failed to setup Husky",
    ):
        await install_dev(context, "husky", "lint-staged")
        await pmx(context, "husky", "init")


async def setup_env_files(context: ExecutionContext) -> None:
    """Write ``.env`` and ``.env.local``; prepend the example block to ``.env.example``.

    An ``.env.example`` that already mentions ``DATABASE_URL`` is left alone.
    """
    fs = context.fs
    render = context.renderer.render
    with _file_errors(context, "Failed to create env files"):
        await fs.write_text(context.path(".env"), render("extras/env.j2"))
        await fs.write_text(context.path(".env.local"), render("extras/env.local.j2"))

        example = context.path(".env.example")
        existing = await fs.read_text(example) if await fs.exists(example) else ""
        if "DATABASE_URL" not in existing:
            await fs.write_text(example, render("extras/env.example.j2") + existing)


async def setup_docker(context: ExecutionContext) -> None:
    render = context.renderer.render
    with _file_errors(context, "Failed to create Docker files"):
        await context.fs.write_text(context.path("Dockerfile"), render("extras/Dockerfile.j2"))
        await context.fs.write_text(context.path(".dockerignore"), render("extras/dockerignore.j2"))


async def setup_vscode(context: ExecutionContext) -> None:
    with _file_errors(context, "Failed to create VSCode settings"):
        vscode_dir = await context.fs.ensure_dir(context.path(".vscode"))
        await context.fs.write_json(vscode_dir / "extensions.json", VSCODE_EXTENSIONS)
        await context.fs.write_json(vscode_dir / "settings.json", VSCODE_SETTINGS)


def _file_errors(context: ExecutionContext, message: str) -> AbstractContextManager[None]:
    return classified(context, packages=(), install_message=message, file_message=message)
