"""Database / ORM setup.

Each supported database has one sub-flow: install its packages, then write
its client module (and schema or config files where the tool needs them).
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from create_stack.config import Database
from create_stack.core.context import ExecutionContext
from create_stack.core.generator import Generator
from create_stack.setup.helpers import classified, install, install_dev, pmx

DISPLAY_NAMES: dict[Database, str] = {
    Database.PRISMA: "Prisma",
    Database.DRIZZLE: "Drizzle",
    Database.SUPABASE: "Supabase",
    Database.MONGOOSE: "Mongoose",
    Database.FIREBASE: "Firebase",
    Database.SQLITE: "SQLite",
}

# Variable whose presence in .env.example means the block was already added.
ENV_MARKERS: dict[str, str] = {
    "database/supabase/env.j2": "VITE_SUPABASE_URL",
    "database/firebase/env.j2": "VITE_FIREBASE_API_KEY",
}


class DatabaseGenerator(Generator):
    name = "database"
    description = "Set up the database client or ORM"
    reads = frozenset({"database", "variant"})

    def should_run(self, context: ExecutionContext) -> bool:
        return context.config.database is not Database.NONE

    async def execute(self, context: ExecutionContext) -> None:
        database = context.config.database
        flow = SUB_FLOWS[database]
        display = DISPLAY_NAMES[database]
        with context.reporter.task(
            "Setting up database/ORM...",
            success=f"{database.value} configured",
            failure=f"Failed to setup {database.value}",
        ), classified(
            context,
            packages=database.value,
            install_message=f"Failed to setup {display}",
            file_message=f"Failed to write {display} files",
        ):
            await flow(context)


# ---------------------------------------------------------------------------
# Sub-flows
# ---------------------------------------------------------------------------


async def setup_prisma(context: ExecutionContext) -> None:
    await install_dev(context, "prisma")
    await install(context, "@prisma/client")
    await pmx(context, "prisma", "init", "--datasource-provider", "sqlite")

    render = context.renderer.render
    await context.fs.write_text(
        context.path("prisma", "schema.prisma"), render("database/prisma/schema.prisma.j2")
    )
    await _write_lib_module(context, "db", "database/prisma/client.j2")


async def setup_drizzle(context: ExecutionContext) -> None:
    await install_dev(context, "drizzle-kit")
    await install(context, "drizzle-orm", "better-sqlite3")
    if context.config.is_typescript:
        await install_dev(context, "@types/better-sqlite3")

    render = context.renderer.render
    fs = context.fs
    await fs.write_text(
        context.path("drizzle.config.ts"), render("database/drizzle/drizzle.config.ts.j2")
    )
    await fs.ensure_dir(context.path("src", "db"))
    await fs.write_text(context.path("src", "db", "schema.ts"), render("database/drizzle/schema.ts.j2"))
    await fs.write_text(context.path("src", "db", "index.ts"), render("database/drizzle/index.ts.j2"))


async def setup_supabase(context: ExecutionContext) -> None:
    await install(context, "@supabase/supabase-js")
    await _write_lib_module(context, "supabase", "database/supabase/client.j2")
    await append_env_example(context, "database/supabase/env.j2")


async def setup_mongoose(context: ExecutionContext) -> None:
    await install(context, "mongoose")
    await _write_lib_module(context, "mongodb", "database/mongoose/connection.j2")


async def setup_firebase(context: ExecutionContext) -> None:
    await install(context, "firebase")
    await _write_lib_module(context, "firebase", "database/firebase/config.j2")
    await append_env_example(context, "database/firebase/env.j2")


async def setup_sqlite(context: ExecutionContext) -> None:
    await install(context, "better-sqlite3")
    if context.config.is_typescript:
        await install_dev(context, "@types/better-sqlite3")
    await _write_lib_module(context, "db", "database/sqlite/client.j2")


SUB_FLOWS: dict[Database, Callable[[ExecutionContext], Awaitable[None]]] = {
    Database.PRISMA: setup_prisma,
    Database.DRIZZLE: setup_drizzle,
    Database.SUPABASE: setup_supabase,
    Database.MONGOOSE: setup_mongoose,
    Database.FIREBASE: setup_firebase,
    Database.SQLITE: setup_sqlite,
}


# ---------------------------------------------------------------------------
# File helpers
# ---------------------------------------------------------------------------


async def _write_lib_module(context: ExecutionContext, stem: str, template: str) -> None:
    """Render *template* to ``src/lib/<stem>.<ts|js>``."""
    lib_dir = await context.fs.ensure_dir(context.path("src", "lib"))
    content = context.renderer.render(template, {"typed": context.config.is_typescript})
    await context.fs.write_text(lib_dir / f"{stem}.{context.config.source_extension}", content)


async def append_env_example(context: ExecutionContext, template: str) -> None:
    """Append a block of variables to ``.env.example`` unless it is already there."""
    env_path = context.path(".env.example")
    existing = ""
    if await context.fs.exists(env_path):
        existing = await context.fs.read_text(env_path)
    if ENV_MARKERS[template] in existing:
        return
    await context.fs.write_text(env_path, existing + context.renderer.render(template))
