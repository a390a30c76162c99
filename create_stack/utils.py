"""Shared utility functions for create-stack.

Provides async command execution and the Rich-based console helpers used for
every piece of user-facing output.
"""

from __future__ import annotations

import asyncio
import os
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

console = Console()

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    capture: bool = True,
    env: dict[str, str] | None = None,
) -> tuple[int | None, str, str]:
    """Run an external command asynchronously.

    No timeout is applied; a hung process hangs the caller.

    Args:
        cmd: Executable followed by its arguments.
        cwd: Working directory for the child process.
        capture: Whether to capture stdout/stderr (if ``False`` they inherit
            the parent's streams).
        env: Optional extra environment variables merged on top of ``os.environ``.

    Returns:
        A ``(returncode, stdout, stderr)`` tuple.  If *capture* is ``False``
        the stdout/stderr strings will be empty.

    Raises:
        FileNotFoundError: If the executable does not exist.
    """
    merged_env: dict[str, str] | None = None
    if env:
        merged_env = {**os.environ, **env}

    stdout_pipe = asyncio.subprocess.PIPE if capture else None
    stderr_pipe = asyncio.subprocess.PIPE if capture else None

    process = await asyncio.create_subprocess_exec(
        *cmd,
        stdout=stdout_pipe,
        stderr=stderr_pipe,
        cwd=str(cwd) if cwd else None,
        env=merged_env,
    )
    stdout_bytes, stderr_bytes = await process.communicate()

    stdout_str = (stdout_bytes or b"").decode("utf-8", errors="replace").strip()
    stderr_str = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
    return (process.returncode, stdout_str, stderr_str)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------

BANNER_TITLE = "create-stack"
BANNER_TAGLINE = "Build your perfect project stack"


def print_banner() -> None:
    """Print the welcome banner shown before the prompts."""
    title = Text(BANNER_TITLE, style="bold bright_green")
    title.append(f"\n{BANNER_TAGLINE}", style="dim")
    console.print(Panel(title, border_style="bright_cyan", expand=False, padding=(1, 4)))


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")


def print_dim(message: str) -> None:
    """Print secondary detail text (stack traces, JSON payloads)."""
    console.print(f"[dim]{escape(message)}[/dim]")


def print_next_steps(project_name: str, pm_run: str) -> None:
    """Print the completion message with the commands to run next."""
    console.print()
    print_success("  Done.")
    console.print()
    console.print(f"[dim]  cd[/dim] {escape(project_name)}")
    console.print(f"[dim]  {escape(pm_run)}[/dim] dev")
    console.print()
