"""Tests for the prerequisite checks."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest

from create_stack.prerequisites import (
    check_prerequisites,
    node_version,
    print_prerequisite_warnings,
)

pytestmark = pytest.mark.unit


def _which(available: set[str]):
    return lambda name: f"/usr/bin/{name}" if name in available else None


class TestNodeVersion:
    @pytest.mark.asyncio
    async def test_reports_version(self):
        with patch("create_stack.prerequisites.run_command", AsyncMock(return_value=(0, "v22.4.1", ""))):
            assert await node_version() == "v22.4.1"

    @pytest.mark.asyncio
    async def test_missing_node(self):
        with patch("create_stack.prerequisites.run_command", AsyncMock(side_effect=FileNotFoundError)):
            assert await node_version() is None

    @pytest.mark.asyncio
    async def test_failing_node(self):
        with patch("create_stack.prerequisites.run_command", AsyncMock(return_value=(1, "", "err"))):
            assert await node_version() is None


class TestCheckPrerequisites:
    @pytest.mark.asyncio
    async def test_all_present(self):
        with patch("create_stack.prerequisites.node_version", AsyncMock(return_value="v22.0.0")), \
                patch("create_stack.prerequisites.shutil.which", side_effect=_which({"pnpm", "git"})):
            assert await check_prerequisites("pnpm") == []

    @pytest.mark.asyncio
    async def test_old_node(self):
        with patch("create_stack.prerequisites.node_version", AsyncMock(return_value="v18.19.0")), \
                patch("create_stack.prerequisites.shutil.which", side_effect=_which({"npm", "git"})):
            issues = await check_prerequisites("npm")
        assert issues == ["Node.js 22+ required (found v18.19.0)"]

    @pytest.mark.asyncio
    async def test_custom_minimum(self):
        with patch("create_stack.prerequisites.node_version", AsyncMock(return_value="v20.1.0")), \
                patch("create_stack.prerequisites.shutil.which", side_effect=_which({"npm", "git"})):
            assert await check_prerequisites("npm", min_node_major=20) == []

    @pytest.mark.asyncio
    async def test_everything_missing(self):
        with patch("create_stack.prerequisites.node_version", AsyncMock(return_value=None)), \
                patch("create_stack.prerequisites.shutil.which", side_effect=_which(set())):
            issues = await check_prerequisites("bun")
        assert issues == [
            "Node.js 22+ required (node not found)",
            "bun is not installed",
            "git is not installed (required for git init)",
        ]


class TestPrintWarnings:
    def test_no_issues(self):
        with patch("create_stack.prerequisites.console") as mock_console:
            assert print_prerequisite_warnings([]) is False
        mock_console.print.assert_not_called()

    def test_issues_printed(self):
        with patch("create_stack.prerequisites.console") as mock_console:
            assert print_prerequisite_warnings(["bun is not installed"]) is True
        printed = [c.args[0] for c in mock_console.print.call_args_list if c.args]
        assert any("bun is not installed" in line for line in printed)
        assert any("Prerequisites check:" in line for line in printed)
