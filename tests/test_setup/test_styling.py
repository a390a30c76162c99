"""Tests for the styling stage."""

from __future__ import annotations

import errno
from unittest.mock import AsyncMock, patch

import pytest

from create_stack.core.errors import FileOperation, FileOperationError, InstallationError
from create_stack.core.services import ProgressState
from create_stack.setup.styling import TAILWIND_DIRECTIVE, StylingGenerator

pytestmark = pytest.mark.unit


class TestShouldRun:
    @pytest.mark.parametrize(
        "styling, meta, expected",
        [
            ("tailwind", "none", True),
            ("tailwind", "astro", True),
            ("tailwind", "nextjs", False),
            ("styled", "nextjs", True),
            ("unocss", "none", True),
            ("cssmodules", "none", False),
            ("vanilla", "none", False),
        ],
    )
    def test_activation(self, make_context, runner, fs, styling, meta, expected):
        context = make_context(styling=styling, meta_framework=meta)
        assert StylingGenerator().should_run(context) is expected
        assert runner.calls == []
        assert fs.writes == []


class TestTailwind:
    @pytest.mark.asyncio
    async def test_vite_install_and_new_stylesheet(self, make_context, runner):
        context = make_context(styling="tailwind")
        await StylingGenerator().execute(context)

        assert runner.commands == [["pnpm", "add", "-D", "tailwindcss", "@tailwindcss/vite"]]
        assert runner.calls[0].cwd == context.project_path
        assert not context.path("postcss.config.mjs").exists()
        assert context.path("src", "index.css").read_text() == TAILWIND_DIRECTIVE

    @pytest.mark.asyncio
    async def test_meta_framework_uses_postcss(self, make_context, runner):
        context = make_context(styling="tailwind", meta_framework="astro", package_manager="npm")
        await StylingGenerator().execute(context)

        assert runner.commands == [[
            "npm", "install", "-D",
            "tailwindcss", "@tailwindcss/postcss", "postcss", "autoprefixer",
        ]]
        assert '"@tailwindcss/postcss": {}' in context.path("postcss.config.mjs").read_text()

    @pytest.mark.asyncio
    async def test_prepends_to_existing_stylesheet(self, make_context, project_dir):
        (project_dir / "src").mkdir()
        (project_dir / "src" / "app.css").write_text("body { margin: 0; }\n")
        context = make_context(styling="tailwind")

        await StylingGenerator().execute(context)

        assert context.path("src", "app.css").read_text() == (
            TAILWIND_DIRECTIVE + "body { margin: 0; }\n"
        )
        assert not context.path("src", "index.css").exists()

    @pytest.mark.asyncio
    async def test_first_candidate_wins(self, make_context, project_dir):
        (project_dir / "src").mkdir()
        (project_dir / "src" / "index.css").write_text(":root {}\n")
        (project_dir / "src" / "global.css").write_text("html {}\n")
        context = make_context(styling="tailwind")

        await StylingGenerator().execute(context)

        assert context.path("src", "index.css").read_text() == TAILWIND_DIRECTIVE + ":root {}\n"
        assert context.path("src", "global.css").read_text() == "html {}\n"

    @pytest.mark.asyncio
    async def test_progress_succeeds(self, make_context, reporter):
        await StylingGenerator().execute(make_context(styling="tailwind"))
        (handle,) = reporter.handles
        assert handle.state is ProgressState.SUCCEEDED
        assert handle.label == "Tailwind CSS configured"

    @pytest.mark.asyncio
    async def test_install_failure(self, make_context, runner, reporter):
        runner.fail_on = lambda command, args: True
        context = make_context(styling="tailwind")

        with pytest.raises(InstallationError) as exc_info:
            await StylingGenerator().execute(context)

        assert exc_info.value.packages == ("tailwindcss", "@tailwindcss/vite")
        assert exc_info.value.message == "Failed to install Tailwind CSS"
        assert not context.path("src", "index.css").exists()
        assert reporter.handles[0].state is ProgressState.FAILED
        assert reporter.handles[0].label == "Failed to setup Tailwind CSS"

    @pytest.mark.asyncio
    async def test_write_failure(self, make_context, fs):
        context = make_context(styling="tailwind")
        denied = PermissionError(errno.EACCES, "Permission denied", str(context.path("src")))
        with patch.object(fs, "write_text", AsyncMock(side_effect=denied)):
            with pytest.raises(FileOperationError) as exc_info:
                await StylingGenerator().execute(context)
        assert exc_info.value.message == "Failed to configure Tailwind CSS"

    @pytest.mark.asyncio
    async def test_unreadable_stylesheet_reports_read(self, make_context):
        context = make_context(styling="tailwind")
        context.path("src", "index.css").mkdir(parents=True)
        with pytest.raises(FileOperationError) as exc_info:
            await StylingGenerator().execute(context)
        error = exc_info.value
        assert error.operation is FileOperation.READ
        assert error.file_path == str(context.path("src", "index.css"))
        assert error.message == "Failed to configure Tailwind CSS"


class TestOtherStyling:
    @pytest.mark.asyncio
    async def test_styled_components_runtime_install(self, make_context, runner, reporter):
        await StylingGenerator().execute(make_context(styling="styled", package_manager="npm"))
        assert runner.commands == [["npm", "install", "styled-components"]]
        assert reporter.handles[0].label == "Styled Components added"

    @pytest.mark.asyncio
    async def test_unocss_dev_install(self, make_context, runner):
        await StylingGenerator().execute(make_context(styling="unocss", package_manager="bun"))
        assert runner.commands == [["bun", "add", "-d", "unocss"]]

    @pytest.mark.asyncio
    async def test_styled_failure(self, make_context, runner):
        runner.fail_on = lambda command, args: "styled-components" in args
        with pytest.raises(InstallationError) as exc_info:
            await StylingGenerator().execute(make_context(styling="styled"))
        assert exc_info.value.package_name == "styled-components"
