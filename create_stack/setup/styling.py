"""Styling setup: Tailwind CSS, Styled Components or UnoCSS."""

from __future__ import annotations

from create_stack.config import MetaFramework, Styling
from create_stack.core.context import ExecutionContext
from create_stack.core.generator import Generator
from create_stack.setup.helpers import classified, install, install_dev

TAILWIND_DIRECTIVE = '@import "tailwindcss";\n'

# Checked in order; the first existing file receives the directive.
CSS_CANDIDATES: tuple[str, ...] = ("index.css", "app.css", "styles.css", "global.css")


class StylingGenerator(Generator):
    """Installs and wires up the selected styling solution.

    Next.js scaffolds with ``--tailwind`` itself, so Tailwind is skipped there.
    CSS Modules and vanilla CSS need nothing beyond the scaffold.
    """

    name = "styling"
    description = "Set up the styling solution"
    reads = frozenset({"styling", "meta_framework"})

    def should_run(self, context: ExecutionContext) -> bool:
        styling = context.config.styling
        if styling is Styling.TAILWIND:
            return context.config.meta_framework is not MetaFramework.NEXTJS
        return styling in (Styling.STYLED, Styling.UNOCSS)

    async def execute(self, context: ExecutionContext) -> None:
        styling = context.config.styling
        if styling is Styling.TAILWIND:
            await self._setup_tailwind(context)
        elif styling is Styling.STYLED:
            with context.reporter.task(
                "Adding Styled Components...",
                success="Styled Components added",
                failure="Failed to add Styled Components",
            ), classified(
                context,
                packages="styled-components",
                install_message="Failed to install Styled Components",
                file_message="Failed to install Styled Components",
            ):
                await install(context, "styled-components")
        elif styling is Styling.UNOCSS:
            with context.reporter.task(
                "Adding UnoCSS...",
                success="UnoCSS added",
                failure="Failed to add UnoCSS",
            ), classified(
                context,
                packages="unocss",
                install_message="Failed to install UnoCSS",
                file_message="Failed to install UnoCSS",
            ):
                await install_dev(context, "unocss")

    async def _setup_tailwind(self, context: ExecutionContext) -> None:
        if context.config.meta_framework is MetaFramework.NONE:
            packages = ["tailwindcss", "@tailwindcss/vite"]
        else:
            packages = ["tailwindcss", "@tailwindcss/postcss", "postcss", "autoprefixer"]

        with context.reporter.task(
            "Setting up Tailwind CSS...",
            success="Tailwind CSS configured",
            failure="Failed to setup Tailwind CSS",
        ), classified(
            context,
            packages=packages,
            install_message="Failed to install Tailwind CSS",
            file_message="Failed to configure Tailwind CSS",
        ):
            await install_dev(context, *packages)
            if context.config.meta_framework is not MetaFramework.NONE:
                await context.fs.write_text(
                    context.path("postcss.config.mjs"),
                    context.renderer.render("styling/postcss.config.mjs.j2"),
                )
            await add_tailwind_directive(context)


async def add_tailwind_directive(context: ExecutionContext) -> None:
    """Prepend the Tailwind import to the project's main stylesheet.

    Creates ``src/index.css`` with just the directive when none of the
    candidate stylesheets exists.
    """
    for filename in CSS_CANDIDATES:
        css_path = context.path("src", filename)
        if await context.fs.exists(css_path):
            existing = await context.fs.read_text(css_path)
            await context.fs.write_text(css_path, TAILWIND_DIRECTIVE + existing)
            return
    await context.fs.write_text(context.path("src", "index.css"), TAILWIND_DIRECTIVE)
