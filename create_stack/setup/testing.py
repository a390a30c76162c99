"""Testing framework setup."""

from __future__ import annotations

from create_stack.config import Framework, Testing
from create_stack.core.context import ExecutionContext
from create_stack.core.generator import Generator
from create_stack.setup.helpers import classified, install_dev

VITEST_FRAMEWORK_PACKAGES: dict[Framework, tuple[str, ...]] = {
    Framework.REACT: ("@testing-library/react", "@testing-library/jest-dom"),
    Framework.VUE: ("@testing-library/vue", "@testing-library/jest-dom"),
    Framework.SVELTE: ("@testing-library/svelte", "@testing-library/jest-dom"),
    Framework.SOLID: ("solid-testing-library",),
    Framework.VANILLA: (),
}


def get_testing_deps(framework: Framework, testing: frozenset[Testing]) -> list[str]:
    """Dev dependencies for the selected test tools.

    Lists are concatenated in catalogue order and not deduplicated.
    """
    deps: list[str] = []
    if Testing.VITEST in testing:
        deps += ["vitest", "jsdom", *VITEST_FRAMEWORK_PACKAGES[framework]]
    if Testing.JEST in testing:
        deps += ["jest", "@types/jest", "ts-jest"]
    if Testing.PLAYWRIGHT in testing:
        deps.append("@playwright/test")
    if Testing.CYPRESS in testing:
        deps.append("cypress")
    return deps


class TestingGenerator(Generator):
    __test__ = False  # not a pytest test class

    name = "testing"
    description = "Set up testing frameworks"
    reads = frozenset({"testing", "framework"})

    def should_run(self, context: ExecutionContext) -> bool:
        return bool(context.config.testing)

    async def execute(self, context: ExecutionContext) -> None:
        deps = get_testing_deps(context.config.framework, context.config.testing)
        with context.reporter.task(
            "Setting up testing...",
            success="Testing configured",
            failure="Failed to setup testing",
        ), classified(
            context,
            packages=deps,
            install_message="Failed to install testing dependencies",
            file_message="Failed to install testing dependencies",
        ):
            await install_dev(context, *deps)
