"""Interactive questions that build a ``ProjectConfig``.

Single choices use ``rich.prompt.Prompt`` with a fixed ``choices`` list.
Multi-selections are typed as a comma- or space-separated list; an empty
answer keeps the default and ``none`` clears it.  Several questions depend on
earlier answers (meta-framework on framework, UI libraries and databases on
the meta-framework), so the choice lists are computed by plain functions.

Ctrl+C propagates as ``KeyboardInterrupt``; the CLI turns it into a clean
cancel.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any

from rich.console import Console
from rich.prompt import Confirm, Prompt

from create_stack.config import (
    PROJECT_NAME_PATTERN,
    Animation,
    Extra,
    Framework,
    MetaFramework,
    PackageManager,
    ProjectConfig,
    Styling,
    Testing,
    Tooling,
    UILibrary,
    Variant,
    validate_project_config,
)
from create_stack.utils import console as default_console

DEFAULT_PROJECT_NAME = "my-project"
CLEAR_SELECTION = "none"

_SEPARATORS = re.compile(r"[,\s]+")


# ---------------------------------------------------------------------------
# Choice lists
# ---------------------------------------------------------------------------


def meta_framework_choices(framework: Framework) -> list[MetaFramework]:
    """Meta-frameworks available for *framework*; ``none`` (Vite only) is always first."""
    if framework is Framework.REACT:
        extra = [MetaFramework.NEXTJS, MetaFramework.ASTRO, MetaFramework.REMIX]
    elif framework is Framework.VUE:
        extra = [MetaFramework.NUXT, MetaFramework.ASTRO]
    elif framework is Framework.SVELTE:
        extra = [MetaFramework.SVELTEKIT, MetaFramework.ASTRO]
    else:
        extra = [MetaFramework.ASTRO]
    return [MetaFramework.NONE, *extra]


def ui_choices(framework: Framework, meta_framework: MetaFramework) -> list[UILibrary]:
    if framework is Framework.REACT or meta_framework is MetaFramework.NEXTJS:
        return [UILibrary.SHADCN, UILibrary.RADIX, UILibrary.HEADLESS, UILibrary.ARK]
    if framework is Framework.VUE:
        return [UILibrary.HEADLESS, UILibrary.NAIVE, UILibrary.PRIMEVUE]
    return [UILibrary.NONE]


def database_choices(meta_framework: MetaFramework) -> list[str]:
    """Database options; SQLite only applies to plain Vite and Remix projects."""
    choices = ["none", "prisma", "drizzle", "supabase", "mongoose", "firebase"]
    if meta_framework in (MetaFramework.NONE, MetaFramework.REMIX):
        choices.insert(3, "sqlite")
    return choices


# ---------------------------------------------------------------------------
# Prompt primitives
# ---------------------------------------------------------------------------


def ask_project_name(console: Console) -> str:
    """Ask until the answer is a valid directory name."""
    while True:
        name = Prompt.ask("Project name", default=DEFAULT_PROJECT_NAME, console=console).strip()
        if not name:
            console.print("[red]Project name is required[/red]")
        elif not re.match(PROJECT_NAME_PATTERN, name):
            console.print("[red]Only letters, numbers, - and _ allowed[/red]")
        else:
            return name


def ask_select(console: Console, message: str, choices: Sequence[str], default: str | None = None) -> str:
    return Prompt.ask(
        message,
        choices=list(choices),
        default=default if default is not None else choices[0],
        console=console,
    )


def ask_multiselect(
    console: Console,
    message: str,
    choices: Sequence[str],
    default: Sequence[str] = (),
) -> list[str]:
    """Ask for zero or more of *choices*.

    Returns the selected values in *choices* order.
    """
    allowed = list(choices)
    console.print(f"[dim]{message} options: {', '.join(allowed)}[/dim]")
    while True:
        answer = Prompt.ask(
            message,
            default=",".join(default),
            show_default=bool(default),
            console=console,
        )
        tokens = [t for t in _SEPARATORS.split(answer.strip()) if t]
        if tokens == [CLEAR_SELECTION] and CLEAR_SELECTION not in allowed:
            return []
        unknown = [t for t in tokens if t not in allowed]
        if unknown:
            console.print(f"[red]Unknown option(s): {', '.join(unknown)}[/red]")
            continue
        return [c for c in allowed if c in tokens]


def _values(members: Sequence[Any]) -> list[str]:
    return [m.value for m in members]


# ---------------------------------------------------------------------------
# Full questionnaire
# ---------------------------------------------------------------------------


def collect_answers(console: Console | None = None) -> dict[str, Any]:
    """Ask every question in order and return the raw answers."""
    console = console or default_console
    answers: dict[str, Any] = {}

    answers["project_name"] = ask_project_name(console)
    answers["framework"] = ask_select(console, "Framework", _values(list(Framework)))
    answers["variant"] = ask_select(console, "Language", _values(list(Variant)))

    framework = Framework(answers["framework"])
    answers["meta_framework"] = ask_select(
        console, "Meta-framework", _values(meta_framework_choices(framework))
    )
    meta = MetaFramework(answers["meta_framework"])

    answers["package_manager"] = ask_select(
        console, "Package manager", _values(list(PackageManager)), default=PackageManager.PNPM.value
    )
    answers["styling"] = ask_select(console, "Styling", _values(list(Styling)))
    answers["ui"] = ask_multiselect(console, "UI components", _values(ui_choices(framework, meta)))
    answers["database"] = ask_select(console, "Database/ORM", database_choices(meta))
    answers["animation"] = ask_multiselect(console, "Animation", _values(list(Animation)))
    answers["tooling"] = ask_multiselect(
        console,
        "Code quality",
        _values(list(Tooling)),
        default=[Tooling.ESLINT.value, Tooling.PRETTIER.value],
    )
    answers["testing"] = ask_multiselect(console, "Testing", _values(list(Testing)))
    answers["extras"] = ask_multiselect(
        console, "Extras", _values(list(Extra)), default=[Extra.GIT.value]
    )
    answers["confirm"] = Confirm.ask("Create project?", default=True, console=console)
    return answers


def prompt_project_config(console: Console | None = None) -> ProjectConfig:
    """Run the questionnaire and validate the answers.

    Raises:
        ConfigurationError: If the combined answers are not a valid configuration.
        KeyboardInterrupt: If the user cancels.
    """
    return validate_project_config(collect_answers(console))
