"""Execution context shared by every generator in a run."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from create_stack.config import ProjectConfig
from create_stack.core.package_manager import PackageManagerCommands
from create_stack.core.services import FileSystem, ProcessRunner, ProgressReporter
from create_stack.templates import TemplateRenderer


@dataclass(frozen=True)
class ExecutionContext:
    """Everything a generator needs, bundled once per project-creation run.

    The context is frozen: stages read the configuration and commands and act
    on the filesystem or external processes, never on the context itself.
    Progress handles are not stored here; each stage obtains its own from
    ``reporter``.

    Attributes:
        config: The user's validated selections.
        pm: Command vocabulary of the selected package manager.
        project_path: Absolute path of the project being created.
        runner: External command execution.
        fs: File operations.
        reporter: Progress spinners.
        renderer: Template rendering for generated files.
    """

    config: ProjectConfig
    pm: PackageManagerCommands
    project_path: Path
    runner: ProcessRunner = field(default_factory=ProcessRunner)
    fs: FileSystem = field(default_factory=FileSystem)
    reporter: ProgressReporter = field(default_factory=ProgressReporter)
    renderer: TemplateRenderer = field(default_factory=TemplateRenderer)

    def path(self, *parts: str) -> Path:
        """Return ``project_path`` joined with *parts*."""
        return self.project_path.joinpath(*parts)


def create_execution_context(
    config: ProjectConfig,
    pm: PackageManagerCommands,
    project_path: Path,
    *,
    runner: ProcessRunner | None = None,
    fs: FileSystem | None = None,
    reporter: ProgressReporter | None = None,
    renderer: TemplateRenderer | None = None,
) -> ExecutionContext:
    """Create the context for one run, filling in default collaborators."""
    return ExecutionContext(
        config=config,
        pm=pm,
        project_path=Path(project_path).resolve(),
        runner=runner or ProcessRunner(),
        fs=fs or FileSystem(),
        reporter=reporter or ProgressReporter(),
        renderer=renderer or TemplateRenderer(),
    )
