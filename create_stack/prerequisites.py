"""Checks for the external tools a project run depends on."""

from __future__ import annotations

import re
import shutil

from rich.markup import escape

from create_stack.config import PackageManager
from create_stack.utils import console, run_command

_VERSION_RE = re.compile(r"v?(\d+)")


async def node_version() -> str | None:
    """Return ``node --version`` output, or ``None`` if node cannot be run."""
    try:
        returncode, stdout, _stderr = await run_command(["node", "--version"])
    except FileNotFoundError:
        return None
    if returncode != 0:
        return None
    return stdout or None


async def check_prerequisites(
    package_manager: PackageManager | str, min_node_major: int = 22
) -> list[str]:
    """Return a human-readable issue for every missing prerequisite.

    Checks the Node.js major version, the selected package manager and git.
    An empty list means everything is available.
    """
    pm = PackageManager(package_manager).value
    issues: list[str] = []

    version = await node_version()
    if version is None:
        issues.append(f"Node.js {min_node_major}+ required (node not found)")
    else:
        match = _VERSION_RE.match(version)
        major = int(match.group(1)) if match else 0
        if major < min_node_major:
            issues.append(f"Node.js {min_node_major}+ required (found {version})")

    if shutil.which(pm) is None:
        issues.append(f"{pm} is not installed")

    if shutil.which("git") is None:
        issues.append("git is not installed (required for git init)")

    return issues


def print_prerequisite_warnings(issues: list[str]) -> bool:
    """Print *issues*; return ``True`` if there were any."""
    if not issues:
        return False
    console.print()
    console.print("[yellow]  Prerequisites check:[/yellow]")
    for issue in issues:
        console.print(f"[red]    {escape(issue)}[/red]")
    console.print()
    return True
