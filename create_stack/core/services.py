"""Collaborators the generators talk to.

* ``ProcessRunner`` -- runs external commands, raising
  ``CommandExecutionError`` on any failure.
* ``FileSystem`` -- the handful of file operations the stages need.  Calls
  are awaited, the blocking work happens in a worker thread.
* ``ProgressReporter`` / ``ProgressHandle`` -- the spinner shown while a
  stage runs.  ``start()`` returns a handle that the caller finishes with
  ``succeed()`` or ``fail()``; ``task()`` wraps that in a context manager so
  the spinner can never be left running.
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from enum import Enum
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.status import Status

from create_stack.core.errors import CommandExecutionError, FileOperation, FileOperationError
from create_stack.utils import run_command

# ---------------------------------------------------------------------------
# Process execution
# ---------------------------------------------------------------------------


class ProcessRunner:
    """Runs external commands on behalf of the stages.

    Only success or failure is reported back; stdout is never inspected.
    """

    async def run(
        self,
        command: str,
        args: Sequence[str] = (),
        *,
        cwd: Path | None = None,
        capture: bool = True,
    ) -> None:
        """Run ``command *args`` and wait for it to finish.

        Args:
            command: Executable name.
            args: Argument vector.
            cwd: Working directory for the child process.
            capture: Capture output (``True``) or let it inherit the terminal.

        Raises:
            CommandExecutionError: On a non-zero or missing exit status, or
                when the executable cannot be found.
        """
        argv = [command, *args]
        command_line = " ".join(argv)
        try:
            returncode, _stdout, stderr = await run_command(argv, cwd=cwd, capture=capture)
        except FileNotFoundError as exc:
            raise CommandExecutionError(
                command_line, None, f"Command not found: {command}", str(exc)
            ) from exc

        if returncode is None or returncode != 0:
            raise CommandExecutionError(
                command_line,
                returncode,
                f"Command failed: {command_line}",
                stderr or None,
            )


# ---------------------------------------------------------------------------
# Filesystem
# ---------------------------------------------------------------------------


class FileSystem:
    """Async facade over the file operations used by the stages.

    A failed operation raises ``FileOperationError`` naming the path and
    whether it was a read or a write.
    """

    async def exists(self, path: Path) -> bool:
        return await asyncio.to_thread(Path(path).exists)

    async def read_text(self, path: Path) -> str:
        with _file_operation(path, FileOperation.READ):
            return await asyncio.to_thread(Path(path).read_text, "utf-8")

    async def write_text(self, path: Path, content: str) -> Path:
        """Create or overwrite *path* with *content* (parents are created)."""
        out = Path(path)
        with _file_operation(out, FileOperation.WRITE):
            await asyncio.to_thread(_write_file, out, content)
        return out

    async def write_json(self, path: Path, data: Any, indent: int = 2) -> Path:
        """Write *data* as JSON with *indent* spaces and a trailing newline."""
        content = json.dumps(data, indent=indent, ensure_ascii=False) + "\n"
        return await self.write_text(path, content)

    async def ensure_dir(self, path: Path) -> Path:
        """Create *path* (and parents) if it does not exist."""
        dir_path = Path(path)
        with _file_operation(dir_path, FileOperation.WRITE):
            await asyncio.to_thread(dir_path.mkdir, parents=True, exist_ok=True)
        return dir_path


def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


@contextmanager
def _file_operation(path: Path, operation: FileOperation) -> Iterator[None]:
    try:
        yield
    except OSError as exc:
        target = exc.filename or path
        raise FileOperationError(
            target,
            operation,
            f"Failed to {operation.value} {target}",
            {"errno": exc.errno, "error": exc.strerror or str(exc)},
        ) from exc


# ---------------------------------------------------------------------------
# Progress reporting
# ---------------------------------------------------------------------------


class ProgressState(str, Enum):
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class ProgressHandle:
    """One spinner, from ``start`` until it succeeds or fails.

    Finishing an already-finished handle is a no-op, so the first outcome
    recorded is the one the user sees.
    """

    def __init__(self, label: str, console: Console | None = None) -> None:
        self.label = label
        self.state = ProgressState.RUNNING
        self._console = console
        self._status: Status | None = None
        if console is not None:
            self._status = console.status(escape(label))
            self._status.start()

    @property
    def finished(self) -> bool:
        return self.state is not ProgressState.RUNNING

    def succeed(self, label: str | None = None) -> None:
        self._finish(ProgressState.SUCCEEDED, label, "[green]✔[/green]")

    def fail(self, label: str | None = None) -> None:
        self._finish(ProgressState.FAILED, label, "[red]✖[/red]")

    def _finish(self, state: ProgressState, label: str | None, symbol: str) -> None:
        if self.finished:
            return
        self.state = state
        if label is not None:
            self.label = label
        if self._status is not None:
            self._status.stop()
        if self._console is not None:
            self._console.print(f"{symbol} {escape(self.label)}")


class ProgressReporter:
    """Creates progress handles.

    Args:
        console: Console to render spinners on.  ``None`` gives silent
            handles that still track their state.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console

    def start(self, label: str) -> ProgressHandle:
        return ProgressHandle(label, self.console)

    @contextmanager
    def task(self, label: str, *, success: str, failure: str) -> Iterator[ProgressHandle]:
        """Run a block under a spinner.

        The spinner succeeds with *success* when the block returns and fails
        with *failure* when it raises; the exception is re-raised.
        """
        handle = self.start(label)
        try:
            yield handle
        except BaseException:
            handle.fail(failure)
            raise
        handle.succeed(success)
