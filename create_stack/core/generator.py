"""Generator registry and the fail-fast pipeline.

A *generator* is one self-describing unit of setup work: it decides from the
configuration whether it has anything to do (``should_run``) and then does it
(``execute``).  The registry keeps generators in registration order, which is
also their execution order.

Ordering requirements are declared rather than implied: a generator lists the
configuration fields it reads (``reads``) and the generators whose work must
already be done before it runs (``after``).  ``register`` rejects unknown
fields and out-of-order registration, so the order a registry is built in
cannot silently break a dependency.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass, field

from create_stack.config import ProjectConfig
from create_stack.core.context import ExecutionContext
from create_stack.core.errors import ConfigurationError, CreateStackError

# ---------------------------------------------------------------------------
# Generator contract
# ---------------------------------------------------------------------------


class Generator(ABC):
    """Base class for every pipeline stage.

    Subclasses set ``name`` and ``description`` and implement both methods.
    ``should_run`` must be side-effect free: it may be called any number of
    times without touching the context, the filesystem or any process.
    """

    name: str = ""
    description: str = ""
    reads: frozenset[str] = frozenset()
    after: tuple[str, ...] = ()

    @abstractmethod
    def should_run(self, context: ExecutionContext) -> bool:
        """Return ``True`` if the configuration selects anything for this stage."""

    @abstractmethod
    async def execute(self, context: ExecutionContext) -> None:
        """Do the stage's work.

        Raises:
            CreateStackError: A classified failure; the pipeline stops.
        """

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"


# ---------------------------------------------------------------------------
# Pipeline results
# ---------------------------------------------------------------------------


@dataclass
class PipelineResult:
    """Outcome of one ``execute_all`` run.

    Attributes:
        completed: Names of generators that executed successfully, in order.
        skipped: Names of generators whose ``should_run`` returned ``False``.
        failed: Name of the generator that failed, if any.
        error: The classified failure raised by ``failed``.
    """

    completed: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failed: str | None = None
    error: CreateStackError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class GeneratorRegistry:
    """Ordered, name-unique collection of generators."""

    def __init__(self) -> None:
        self._generators: dict[str, Generator] = {}

    def register(self, generator: Generator) -> None:
        """Append *generator* to the pipeline.

        Raises:
            ConfigurationError: If the name is already registered, if
                ``reads`` names a field ``ProjectConfig`` does not have, or if
                a generator listed in ``after`` has not been registered yet.
        """
        name = generator.name
        if name in self._generators:
            raise ConfigurationError(f'Generator "{name}" is already registered')

        unknown = sorted(set(generator.reads) - set(ProjectConfig.model_fields))
        if unknown:
            raise ConfigurationError(
                f'Generator "{name}" reads unknown configuration fields',
                {"fields": unknown},
            )

        missing = [dep for dep in generator.after if dep not in self._generators]
        if missing:
            raise ConfigurationError(
                f'Generator "{name}" must be registered after {", ".join(missing)}',
                {"generator": name, "after": missing},
            )

        self._generators[name] = generator

    def get(self, name: str) -> Generator | None:
        return self._generators.get(name)

    def get_all(self) -> list[Generator]:
        """All generators in registration order."""
        return list(self._generators.values())

    def __len__(self) -> int:
        return len(self._generators)

    def __iter__(self) -> Iterator[Generator]:
        return iter(self.get_all())

    async def execute_all(self, context: ExecutionContext) -> PipelineResult:
        """Run every active generator in registration order.

        Each generator's ``should_run`` is evaluated just before it would run;
        ``execute`` is awaited to completion before the next generator is
        considered.  The first classified failure stops the pipeline and is
        returned in the result.  Unclassified exceptions propagate unchanged.
        """
        result = PipelineResult()
        for generator in self.get_all():
            if not generator.should_run(context):
                result.skipped.append(generator.name)
                continue
            try:
                await generator.execute(context)
            except CreateStackError as exc:
                result.failed = generator.name
                result.error = exc
                return result
            result.completed.append(generator.name)
        return result
