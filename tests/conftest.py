"""Shared pytest fixtures for the create-stack test suite.

Provides reusable fixtures for:
- A recording process runner (no external commands are ever run)
- A recording filesystem that writes real files under ``tmp_path``
- A silent progress reporter that keeps every handle it creates
- ProjectConfig / ExecutionContext factories
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any, NamedTuple

import pytest

from create_stack.config import ProjectConfig
from create_stack.core.context import ExecutionContext, create_execution_context
from create_stack.core.errors import CommandExecutionError
from create_stack.core.package_manager import get_package_manager_commands
from create_stack.core.services import (
    FileSystem,
    ProcessRunner,
    ProgressHandle,
    ProgressReporter,
)


# ---------------------------------------------------------------------------
# Test doubles
# ---------------------------------------------------------------------------


class Call(NamedTuple):
    command: str
    args: list[str]
    cwd: Path | None


class RecordingRunner(ProcessRunner):
    """Records every command instead of running it.

    Args:
        fail_on: Optional predicate ``(command, args) -> bool``; matching
            calls raise ``CommandExecutionError`` with exit code 1.
    """

    def __init__(self, fail_on: Callable[[str, list[str]], bool] | None = None) -> None:
        self.calls: list[Call] = []
        self.fail_on = fail_on

    async def run(
        self,
        command: str,
        args: Sequence[str] = (),
        *,
        cwd: Path | None = None,
        capture: bool = True,
    ) -> None:
        argv = list(args)
        self.calls.append(Call(command, argv, cwd))
        if self.fail_on is not None and self.fail_on(command, argv):
            line = " ".join([command, *argv])
            raise CommandExecutionError(line, 1, f"Command failed: {line}", "simulated failure")

    @property
    def commands(self) -> list[list[str]]:
        """Each call flattened to ``[command, *args]``."""
        return [[call.command, *call.args] for call in self.calls]


class RecordingFileSystem(FileSystem):
    """Real filesystem operations that also record what was written."""

    def __init__(self) -> None:
        self.writes: list[Path] = []
        self.dirs: list[Path] = []

    async def write_text(self, path: Path, content: str) -> Path:
        self.writes.append(Path(path))
        return await super().write_text(path, content)

    async def ensure_dir(self, path: Path) -> Path:
        self.dirs.append(Path(path))
        return await super().ensure_dir(path)


class RecordingReporter(ProgressReporter):
    """Silent reporter that keeps every handle it hands out."""

    def __init__(self) -> None:
        super().__init__(console=None)
        self.handles: list[ProgressHandle] = []

    def start(self, label: str) -> ProgressHandle:
        handle = super().start(label)
        self.handles.append(handle)
        return handle


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def fs() -> RecordingFileSystem:
    return RecordingFileSystem()


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """An existing, empty project directory (as if freshly scaffolded)."""
    path = tmp_path / "my-app"
    path.mkdir()
    return path


BASE_ANSWERS: dict[str, Any] = {
    "project_name": "my-app",
    "framework": "react",
    "variant": "ts",
    "meta_framework": "none",
    "package_manager": "pnpm",
    "styling": "tailwind",
    "ui": [],
    "database": "none",
    "animation": [],
    "tooling": [],
    "testing": [],
    "extras": [],
    "confirm": True,
}


@pytest.fixture
def make_config() -> Callable[..., ProjectConfig]:
    """Factory for ``ProjectConfig``: a React + TypeScript + Tailwind project
    named ``my-app`` with nothing else selected, overridable per field.
    """

    def _make(**overrides: Any) -> ProjectConfig:
        return ProjectConfig(**{**BASE_ANSWERS, **overrides})

    return _make


@pytest.fixture
def make_context(
    project_dir: Path,
    runner: RecordingRunner,
    fs: RecordingFileSystem,
    reporter: RecordingReporter,
    make_config: Callable[..., ProjectConfig],
) -> Callable[..., ExecutionContext]:
    """Factory for an ``ExecutionContext`` wired to the recording doubles."""

    def _make(**config_overrides: Any) -> ExecutionContext:
        config = make_config(**config_overrides)
        return create_execution_context(
            config,
            get_package_manager_commands(config.package_manager),
            project_dir,
            runner=runner,
            fs=fs,
            reporter=reporter,
        )

    return _make
