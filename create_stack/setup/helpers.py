"""Helpers shared by the setup stages."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import contextmanager

from create_stack.core.context import ExecutionContext
from create_stack.core.errors import CommandExecutionError, FileOperationError, classify_failure


@contextmanager
def classified(
    context: ExecutionContext,
    *,
    packages: str | Sequence[str],
    install_message: str,
    file_message: str,
) -> Iterator[None]:
    """Re-raise command and filesystem failures as taxonomy errors.

    A failed command becomes an ``InstallationError`` for *packages*; a
    failed file operation becomes a ``FileOperationError`` carrying the
    stage's message.  Anything else passes through untouched.
    """
    try:
        yield
    except (CommandExecutionError, FileOperationError, OSError) as exc:
        error = classify_failure(
            exc,
            packages=packages,
            path=context.project_path,
            install_message=install_message,
            file_message=file_message,
        )
        if error is None:
            raise
        raise error from exc


async def install(context: ExecutionContext, *packages: str) -> None:
    """Add *packages* as runtime dependencies of the project."""
    await context.runner.run(
        context.pm.pm, context.pm.install_args(*packages), cwd=context.project_path
    )


async def install_dev(context: ExecutionContext, *packages: str) -> None:
    """Add *packages* as development dependencies of the project."""
    await context.runner.run(
        context.pm.pm, context.pm.dev_args(*packages), cwd=context.project_path
    )


async def pmx(context: ExecutionContext, package: str, *args: str) -> None:
    """Run *package* through the package manager's runner without installing it."""
    await context.runner.run(
        context.pm.pmx, context.pm.exec_args(package, *args), cwd=context.project_path
    )
