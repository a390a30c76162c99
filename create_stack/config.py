"""create-stack configuration.

Two models live here:

* ``ProjectConfig`` -- the user's validated answers.  Created once (from the
  interactive prompts or an answers file), validated, and immutable for the
  rest of the run.
* ``Settings`` -- knobs for the tool itself (where projects are created,
  prerequisite checks), read from the environment.

Both are Pydantic v2 models so invalid input is rejected at construction time.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from create_stack.core.errors import ConfigurationError

PROJECT_NAME_PATTERN = r"^[A-Za-z0-9_-]+$"


# ---------------------------------------------------------------------------
# Choice domains
# ---------------------------------------------------------------------------


class Framework(str, Enum):
    REACT = "react"
    VUE = "vue"
    SVELTE = "svelte"
    SOLID = "solid"
    VANILLA = "vanilla"


class Variant(str, Enum):
    TS = "ts"
    JS = "js"


class MetaFramework(str, Enum):
    NONE = "none"
    NEXTJS = "nextjs"
    ASTRO = "astro"
    REMIX = "remix"
    NUXT = "nuxt"
    SVELTEKIT = "sveltekit"


class PackageManager(str, Enum):
    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"
    BUN = "bun"
    DENO = "deno"


class Styling(str, Enum):
    TAILWIND = "tailwind"
    CSS_MODULES = "cssmodules"
    STYLED = "styled"
    UNOCSS = "unocss"
    VANILLA = "vanilla"


class UILibrary(str, Enum):
    SHADCN = "shadcn"
    RADIX = "radix"
    HEADLESS = "headless"
    ARK = "ark"
    NAIVE = "naive"
    PRIMEVUE = "primevue"
    NONE = "none"


class Database(str, Enum):
    NONE = "none"
    PRISMA = "prisma"
    DRIZZLE = "drizzle"
    SUPABASE = "supabase"
    MONGOOSE = "mongoose"
    FIREBASE = "firebase"
    SQLITE = "sqlite"


class Animation(str, Enum):
    MOTION = "motion"
    GSAP = "gsap"
    LENIS = "lenis"
    AUTO_ANIMATE = "autoAnimate"
    ANIMEJS = "animejs"


class Tooling(str, Enum):
    ESLINT = "eslint"
    PRETTIER = "prettier"
    BIOME = "biome"


class Testing(str, Enum):
    VITEST = "vitest"
    JEST = "jest"
    PLAYWRIGHT = "playwright"
    CYPRESS = "cypress"


class Extra(str, Enum):
    GIT = "git"
    HUSKY = "husky"
    DOCKER = "docker"
    ENV = "env"
    VSCODE = "vscode"


# ---------------------------------------------------------------------------
# Project configuration
# ---------------------------------------------------------------------------


class ProjectConfig(BaseModel):
    """The user's validated project selections.

    Multi-valued answers are ``frozenset``s: order carries no meaning and
    duplicates cannot exist.  Stages iterate them in catalogue order so the
    generated install commands are deterministic.  Every field is required:
    an answers file has to spell out each choice, empty selections included.
    """

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(
        ...,
        min_length=1,
        pattern=PROJECT_NAME_PATTERN,
        description="Directory name of the new project",
    )
    framework: Framework
    variant: Variant
    meta_framework: MetaFramework
    package_manager: PackageManager
    styling: Styling
    ui: frozenset[UILibrary]
    database: Database
    animation: frozenset[Animation]
    tooling: frozenset[Tooling]
    testing: frozenset[Testing]
    extras: frozenset[Extra]
    confirm: bool

    @property
    def is_typescript(self) -> bool:
        """``True`` when the TypeScript variant was chosen."""
        return self.variant is Variant.TS

    @property
    def source_extension(self) -> str:
        """File extension for generated source files (``ts`` or ``js``)."""
        return "ts" if self.is_typescript else "js"

    @classmethod
    def load(cls, path: Path) -> "ProjectConfig":
        """Load and validate an answers file (JSON).

        Raises:
            ConfigurationError: If the file content is not a valid configuration.
        """
        raw = Path(path).read_text(encoding="utf-8")
        try:
            return cls.model_validate_json(raw)
        except ValidationError as exc:
            raise _configuration_error(exc) from exc


def validate_project_config(raw: dict[str, Any] | ProjectConfig) -> ProjectConfig:
    """Validate a raw answers mapping into a ``ProjectConfig``.

    Raises:
        ConfigurationError: Listing every violated field constraint.
    """
    if isinstance(raw, ProjectConfig):
        return raw
    try:
        return ProjectConfig.model_validate(raw)
    except ValidationError as exc:
        raise _configuration_error(exc) from exc


def _configuration_error(
    exc: ValidationError, subject: str = "project configuration"
) -> ConfigurationError:
    errors = [
        {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
        for err in exc.errors()
    ]
    return ConfigurationError(
        f"Invalid {subject} ({len(errors)} error(s))",
        {"errors": errors},
    )


# ---------------------------------------------------------------------------
# Tool settings
# ---------------------------------------------------------------------------


class Settings(BaseModel):
    """Settings for the create-stack tool itself."""

    output_dir: Path = Field(default=Path("."), description="Directory new projects are created in")
    min_node_major: int = Field(default=22, ge=1, description="Minimum supported Node.js major version")
    skip_prerequisites: bool = Field(default=False, description="Skip the tool-availability checks")

    @classmethod
    def from_env(cls) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            CREATE_STACK_OUTPUT_DIR, CREATE_STACK_MIN_NODE, CREATE_STACK_SKIP_CHECKS.

        Raises:
            ConfigurationError: If a variable holds a value the setting rejects.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("CREATE_STACK_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["CREATE_STACK_OUTPUT_DIR"])
        if os.environ.get("CREATE_STACK_MIN_NODE"):
            kwargs["min_node_major"] = os.environ["CREATE_STACK_MIN_NODE"]
        if os.environ.get("CREATE_STACK_SKIP_CHECKS"):
            kwargs["skip_prerequisites"] = os.environ["CREATE_STACK_SKIP_CHECKS"].lower() in (
                "1",
                "true",
                "yes",
            )
        try:
            return cls(**kwargs)
        except ValidationError as exc:
            raise _configuration_error(exc, "tool settings") from exc
