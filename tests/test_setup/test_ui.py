"""Tests for the UI component library stage."""

from __future__ import annotations

import json

import pytest

from create_stack.core.errors import InstallationError
from create_stack.core.services import ProgressState
from create_stack.setup.ui import (
    COMPONENTS_JSON,
    SHADCN_DEV_PACKAGES,
    TSCONFIG,
    UIGenerator,
    ui_packages,
)

pytestmark = pytest.mark.unit

RADIX = [
    "@radix-ui/react-dialog",
    "@radix-ui/react-dropdown-menu",
    "@radix-ui/react-tooltip",
    "@radix-ui/react-slot",
]


class TestShouldRun:
    def test_empty_selection(self, make_context):
        assert not UIGenerator().should_run(make_context())

    def test_none_only(self, make_context):
        assert not UIGenerator().should_run(make_context(ui=["none"]))

    def test_real_library(self, make_context):
        assert UIGenerator().should_run(make_context(ui=["radix"]))


class TestUIPackages:
    def test_catalogue_order(self):
        assert ui_packages(frozenset({"primevue", "naive"})) == ["naive-ui", "primevue"]

    def test_shadcn_has_no_runtime_packages(self):
        assert ui_packages(frozenset({"shadcn"})) == []


class TestLibraries:
    @pytest.mark.asyncio
    async def test_batched_runtime_install(self, make_context, runner, reporter):
        await UIGenerator().execute(make_context(ui=["headless", "radix"]))
        assert runner.commands == [["pnpm", "add", *RADIX, "@headlessui/react"]]
        assert reporter.handles[0].label == "UI components added"

    @pytest.mark.asyncio
    async def test_install_failure(self, make_context, runner, reporter):
        runner.fail_on = lambda command, args: True
        with pytest.raises(InstallationError) as exc_info:
            await UIGenerator().execute(make_context(ui=["ark"]))
        assert exc_info.value.packages == ("@ark-ui/react",)
        assert exc_info.value.message == "Failed to install UI components"
        assert reporter.handles[0].state is ProgressState.FAILED
        assert reporter.handles[0].label == "Failed to setup UI components"


class TestShadcnVite:
    @pytest.mark.asyncio
    async def test_full_setup(self, make_context, runner, project_dir):
        (project_dir / "vite.config.ts").write_text("export default {}\n")
        (project_dir / "tsconfig.app.json").write_text("{}\n")
        context = make_context(ui=["shadcn"], styling="tailwind")

        await UIGenerator().execute(context)

        assert runner.commands == [
            ["pnpm", "add", "-D", "@types/node"],
            ["pnpm", "add", "-D", *SHADCN_DEV_PACKAGES],
        ]
        vite_config = context.path("vite.config.ts").read_text()
        assert 'import tailwindcss from "@tailwindcss/vite"' in vite_config
        assert "plugins: [react(), tailwindcss()]" in vite_config
        assert json.loads(context.path("tsconfig.json").read_text()) == TSCONFIG
        assert json.loads(context.path("tsconfig.app.json").read_text()) == TSCONFIG
        assert json.loads(context.path("components.json").read_text()) == COMPONENTS_JSON
        assert "export function cn" in context.path("src", "lib", "utils.ts").read_text()
        assert context.path("src", "components", "ui").is_dir()
        assert context.path("src", "hooks").is_dir()

    @pytest.mark.asyncio
    async def test_without_tailwind(self, make_context, project_dir):
        (project_dir / "vite.config.ts").write_text("export default {}\n")
        context = make_context(ui=["shadcn"], styling="cssmodules")

        await UIGenerator().execute(context)

        vite_config = context.path("vite.config.ts").read_text()
        assert "tailwindcss" not in vite_config
        assert "plugins: [react()]" in vite_config

    @pytest.mark.asyncio
    async def test_missing_optional_files_not_created(self, make_context):
        context = make_context(ui=["shadcn"])
        await UIGenerator().execute(context)
        assert not context.path("vite.config.ts").exists()
        assert not context.path("tsconfig.app.json").exists()
        assert context.path("tsconfig.json").exists()

    @pytest.mark.asyncio
    async def test_shadcn_with_other_libraries(self, make_context, runner):
        await UIGenerator().execute(make_context(ui=["shadcn", "headless"]))
        assert runner.commands[-1] == ["pnpm", "add", "@headlessui/react"]
        assert len(runner.commands) == 3


class TestShadcnMetaFrameworks:
    @pytest.mark.asyncio
    async def test_nextjs_uses_shadcn_cli(self, make_context, runner):
        context = make_context(ui=["shadcn"], meta_framework="nextjs")
        await UIGenerator().execute(context)
        assert runner.commands == [[
            "pnpm", "dlx", "shadcn@latest", "init",
            "--yes", "--defaults", "--force", "--template", "next",
        ]]
        assert not context.path("components.json").exists()

    @pytest.mark.asyncio
    async def test_nextjs_with_deno(self, make_context, runner):
        await UIGenerator().execute(
            make_context(ui=["shadcn"], meta_framework="nextjs", package_manager="deno")
        )
        assert runner.commands[0][:4] == ["deno", "run", "-A", "npm:shadcn@latest"]

    @pytest.mark.asyncio
    async def test_astro_skips_vite_config(self, make_context, runner):
        context = make_context(ui=["shadcn"], meta_framework="astro")
        await UIGenerator().execute(context)
        assert runner.commands == [["pnpm", "add", "-D", *SHADCN_DEV_PACKAGES]]
        assert not context.path("tsconfig.json").exists()
        assert context.path("components.json").exists()
