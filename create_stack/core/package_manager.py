"""Package-manager command tables.

Every stage builds its external invocations by concatenating these vectors
with package names, so the table has to be exhaustive and exact.
"""

from __future__ import annotations

from types import MappingProxyType

from pydantic import BaseModel, ConfigDict

from create_stack.config import PackageManager
from create_stack.core.errors import ConfigurationError


class PackageManagerCommands(BaseModel):
    """Command vocabulary for one package manager.

    Attributes:
        pm: Primary executable (``npm``, ``pnpm``, ...).
        pmx: Executable used to run a package without installing it.
        pmx_args: Arguments placed before the package name when running *pmx*.
        pm_install: Arguments that add runtime dependencies.
        pm_dev: Arguments that add development dependencies.
        pm_run: Prefix for running a ``package.json`` script.
    """

    model_config = ConfigDict(frozen=True)

    pm: str
    pmx: str
    pmx_args: tuple[str, ...]
    pm_install: tuple[str, ...]
    pm_dev: tuple[str, ...]
    pm_run: str

    def install_args(self, *packages: str) -> list[str]:
        """Arguments for ``<pm>`` that add *packages* as runtime dependencies."""
        return [*self.pm_install, *packages]

    def dev_args(self, *packages: str) -> list[str]:
        """Arguments for ``<pm>`` that add *packages* as dev dependencies."""
        return [*self.pm_dev, *packages]

    def exec_args(self, package: str, *args: str) -> list[str]:
        """Arguments for ``<pmx>`` that run *package* with *args*.

        A prefix ending in ``:`` (deno's ``npm:`` specifier) is joined to the
        package name instead of being passed as a separate argument.
        """
        prefix = list(self.pmx_args)
        if prefix and prefix[-1].endswith(":"):
            return [*prefix[:-1], prefix[-1] + package, *args]
        return [*prefix, package, *args]


_COMMANDS: MappingProxyType[PackageManager, PackageManagerCommands] = MappingProxyType(
    {
        PackageManager.NPM: PackageManagerCommands(
            pm=PackageManager.NPM.value,
            pmx="npx",
            pmx_args=(),
            pm_install=("install",),
            pm_dev=("install", "-D"),
            pm_run="npm run",
        ),
        PackageManager.YARN: PackageManagerCommands(
            pm=PackageManager.YARN.value,
            pmx="yarn",
            pmx_args=("dlx",),
            pm_install=("add",),
            pm_dev=("add", "-D"),
            pm_run="yarn",
        ),
        PackageManager.PNPM: PackageManagerCommands(
            pm=PackageManager.PNPM.value,
            pmx="pnpm",
            pmx_args=("dlx",),
            pm_install=("add",),
            pm_dev=("add", "-D"),
            pm_run="pnpm",
        ),
        PackageManager.BUN: PackageManagerCommands(
            pm=PackageManager.BUN.value,
            pmx="bunx",
            pmx_args=(),
            pm_install=("add",),
            pm_dev=("add", "-d"),
            pm_run="bun",
        ),
        PackageManager.DENO: PackageManagerCommands(
            pm=PackageManager.DENO.value,
            pmx="deno",
            pmx_args=("run", "-A", "npm:"),
            pm_install=("add",),
            pm_dev=("add", "--dev"),
            pm_run="deno task",
        ),
    }
)


def get_package_manager_commands(pm: PackageManager | str) -> PackageManagerCommands:
    """Return the command vocabulary for *pm*.

    Raises:
        ConfigurationError: If *pm* is not one of the supported package managers.
    """
    try:
        return _COMMANDS[PackageManager(pm)]
    except ValueError as exc:
        raise ConfigurationError(
            f"Unsupported package manager: {pm}",
            {"supported": [m.value for m in PackageManager]},
        ) from exc
