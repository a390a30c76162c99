"""Project creation orchestrator.

Runs one project-creation session end to end:

1. Refuse to touch an existing directory.
2. Scaffold the base project with Vite or the chosen meta-framework.
3. Install the scaffold's own dependencies.
4. Run the setup pipeline (styling, ui, database, animation, tooling,
   testing, extras), stopping at the first failure.
5. Print next steps, or the formatted error.

Nothing is retried and nothing is rolled back: a failed run leaves the
partially created project on disk.
"""

from __future__ import annotations

from pathlib import Path

from create_stack.config import ProjectConfig
from create_stack.core.context import ExecutionContext, create_execution_context
from create_stack.core.errors import format_error
from create_stack.core.generator import GeneratorRegistry
from create_stack.core.package_manager import get_package_manager_commands
from create_stack.core.services import FileSystem, ProcessRunner, ProgressReporter
from create_stack.setup import ScaffoldGenerator, build_registry
from create_stack.setup.helpers import classified
from create_stack.templates import TemplateRenderer
from create_stack.utils import console, print_dim, print_error, print_next_steps

FAILURE_LABEL = "Something went wrong"


async def create_project(
    config: ProjectConfig,
    *,
    cwd: str | Path | None = None,
    runner: ProcessRunner | None = None,
    fs: FileSystem | None = None,
    reporter: ProgressReporter | None = None,
    renderer: TemplateRenderer | None = None,
    registry: GeneratorRegistry | None = None,
) -> int:
    """Create the project described by *config* inside *cwd*.

    Args:
        config: Validated project selections.
        cwd: Parent directory for the new project (defaults to the current
            working directory).
        runner: Process runner; replaced by a recording double in tests.
        fs: Filesystem service.
        reporter: Progress reporter; defaults to spinners on the shared console.
        renderer: Template renderer.
        registry: Setup pipeline; defaults to ``build_registry()``.

    Returns:
        The process exit status: ``0`` on success, ``1`` on any failure.
    """
    pm = get_package_manager_commands(config.package_manager)
    project_path = Path(cwd or Path.cwd()).resolve() / config.project_name

    if project_path.exists():
        console.print()
        print_error(f"  Directory {config.project_name} already exists!")
        return 1

    context = create_execution_context(
        config,
        pm,
        project_path,
        runner=runner,
        fs=fs,
        reporter=reporter or ProgressReporter(console),
        renderer=renderer,
    )
    pipeline = registry if registry is not None else build_registry()

    try:
        with context.reporter.task(
            "Creating project...", success="Project scaffolded", failure=FAILURE_LABEL
        ):
            await ScaffoldGenerator().execute(context)

        with context.reporter.task(
            "Installing dependencies...", success="Dependencies installed", failure=FAILURE_LABEL
        ):
            await install_base_dependencies(context)

        result = await pipeline.execute_all(context)
    except Exception as exc:
        report_failure(exc)
        return 1

    if not result.ok:
        report_failure(result.error)
        return 1

    print_next_steps(config.project_name, pm.pm_run)
    return 0


async def install_base_dependencies(context: ExecutionContext) -> None:
    """Run ``<pm> install`` inside the freshly scaffolded project."""
    with classified(
        context,
        packages=(),
        install_message="Failed to install dependencies",
        file_message="Failed to install dependencies",
    ):
        await context.runner.run(context.pm.pm, ["install"], cwd=context.project_path)


def report_failure(error: object) -> None:
    """Print the formatted message and, when present, its details."""
    formatted = format_error(error)
    print_error(formatted.message)
    if formatted.details:
        print_dim(formatted.details)
