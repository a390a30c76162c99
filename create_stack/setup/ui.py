"""UI component library setup."""

from __future__ import annotations

from typing import Any

from create_stack.config import MetaFramework, Styling, UILibrary
from create_stack.core.context import ExecutionContext
from create_stack.core.generator import Generator
from create_stack.setup.helpers import classified, install, install_dev, pmx

UI_PACKAGES: dict[UILibrary, tuple[str, ...]] = {
    UILibrary.RADIX: (
        "@radix-ui/react-dialog",
        "@radix-ui/react-dropdown-menu",
        "@radix-ui/react-tooltip",
        "@radix-ui/react-slot",
    ),
    UILibrary.HEADLESS: ("@headlessui/react",),
    UILibrary.ARK: ("@ark-ui/react",),
    UILibrary.NAIVE: ("naive-ui",),
    UILibrary.PRIMEVUE: ("primevue",),
}

SHADCN_DEV_PACKAGES: tuple[str, ...] = (
    "class-variance-authority",
    "clsx",
    "tailwind-merge",
    "tailwindcss-animate",
    "lucide-react",
)

TSCONFIG: dict[str, Any] = {
    "compilerOptions": {
        "target": "ES2022",
        "useDefineForClassFields": True,
        "module": "ESNext",
        "lib": ["ES2022", "DOM", "DOM.Iterable"],
        "types": ["vite/client"],
        "skipLibCheck": True,
        "moduleResolution": "bundler",
        "allowImportingTsExtensions": True,
        "verbatimModuleSyntax": True,
        "moduleDetection": "force",
        "noEmit": True,
        "strict": True,
        "noUnusedLocals": True,
        "noUnusedParameters": True,
        "noFallthroughCasesInSwitch": True,
        "baseUrl": ".",
        "paths": {"@/*": ["./src/*"]},
    },
    "include": ["src"],
}

COMPONENTS_JSON: dict[str, Any] = {
    "$schema": "https://ui.shadcn.com/schema.json",
    "style": "new-york",
    "rsc": False,
    "tsx": True,
    "tailwind": {
        "config": "",
        "css": "src/index.css",
        "baseColor": "neutral",
        "cssVariables": True,
        "prefix": "",
    },
    "aliases": {
        "components": "@/components",
        "utils": "@/lib/utils",
        "ui": "@/components/ui",
        "lib": "@/lib",
        "hooks": "@/hooks",
    },
    "iconLibrary": "lucide",
}


def ui_packages(selected: frozenset[UILibrary]) -> list[str]:
    """Runtime packages for every selected library except shadcn, in catalogue order."""
    packages: list[str] = []
    for library in UILibrary:
        if library in selected:
            packages.extend(UI_PACKAGES.get(library, ()))
    return packages


class UIGenerator(Generator):
    """Adds component libraries.

    shadcn/ui is configured in place (or through its own CLI on Next.js);
    every other library is a single batched runtime install.
    """

    name = "ui"
    description = "Add UI component libraries"
    reads = frozenset({"ui", "meta_framework", "styling"})
    after = ("styling",)

    def should_run(self, context: ExecutionContext) -> bool:
        return bool(context.config.ui - {UILibrary.NONE})

    async def execute(self, context: ExecutionContext) -> None:
        packages = ui_packages(context.config.ui)
        with context.reporter.task(
            "Adding UI components...",
            success="UI components added",
            failure="Failed to setup UI components",
        ), classified(
            context,
            packages=packages or ["shadcn"],
            install_message="Failed to install UI components",
            file_message="Failed to configure UI components",
        ):
            if UILibrary.SHADCN in context.config.ui:
                await setup_shadcn(context)
            if packages:
                await install(context, *packages)


async def setup_shadcn(context: ExecutionContext) -> None:
    meta = context.config.meta_framework
    fs = context.fs

    if meta is MetaFramework.NONE:
        await install_dev(context, "@types/node")

        vite_config = context.path("vite.config.ts")
        if await fs.exists(vite_config):
            await fs.write_text(
                vite_config,
                context.renderer.render(
                    "ui/vite.config.ts.j2",
                    {"tailwind": context.config.styling is Styling.TAILWIND},
                ),
            )

        await fs.write_json(context.path("tsconfig.json"), TSCONFIG)
        tsconfig_app = context.path("tsconfig.app.json")
        if await fs.exists(tsconfig_app):
            await fs.write_json(tsconfig_app, TSCONFIG)

    if meta is MetaFramework.NEXTJS:
        await pmx(
            context,
            "shadcn@latest", "init", "--yes", "--defaults", "--force", "--template", "next",
        )
        return

    await install_dev(context, *SHADCN_DEV_PACKAGES)
    await fs.write_json(context.path("components.json"), COMPONENTS_JSON)
    await fs.ensure_dir(context.path("src", "lib"))
    await fs.write_text(
        context.path("src", "lib", "utils.ts"), context.renderer.render("ui/utils.ts.j2")
    )
    await fs.ensure_dir(context.path("src", "components", "ui"))
    await fs.ensure_dir(context.path("src", "hooks"))
