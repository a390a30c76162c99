"""Error taxonomy for create-stack.

Every failure that the orchestrator knows how to report derives from
``CreateStackError`` and carries a stable machine-readable ``code`` plus an
optional JSON-serialisable ``details`` payload.  Stages raise these at the
point a lower-level failure is caught; the orchestrator is the only place that
turns them into console output and an exit status.
"""

from __future__ import annotations

import json
import traceback
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, TypeGuard


class FileOperation(str, Enum):
    """Kinds of filesystem operation a ``FileOperationError`` can describe."""

    READ = "read"
    WRITE = "write"
    DELETE = "delete"
    COPY = "copy"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class CreateStackError(Exception):
    """Base class for every classified create-stack failure.

    Attributes:
        message: Human-readable description.
        code: Stable string code (``SCAFFOLDING_ERROR``, ...).
        details: Optional structured payload printed as JSON on failure.
    """

    def __init__(self, message: str, code: str, details: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details


class ScaffoldingError(CreateStackError):
    """Raised when the base project could not be created."""

    def __init__(self, message: str, details: Any = None) -> None:
        super().__init__(message, "SCAFFOLDING_ERROR", details)


class InstallationError(CreateStackError):
    """Raised when a set of packages failed to install."""

    def __init__(
        self,
        packages: str | Sequence[str],
        message: str,
        details: Any = None,
    ) -> None:
        super().__init__(message, "INSTALLATION_ERROR", details)
        if isinstance(packages, str):
            packages = [packages]
        self.packages: tuple[str, ...] = tuple(packages)

    @property
    def package_name(self) -> str:
        """The offending package names joined with ``", "``."""
        return ", ".join(self.packages)


class FileOperationError(CreateStackError):
    """Raised when reading, writing, deleting or copying a path failed."""

    def __init__(
        self,
        file_path: str | Path,
        operation: FileOperation | str,
        message: str,
        details: Any = None,
    ) -> None:
        super().__init__(message, "FILE_OPERATION_ERROR", details)
        self.file_path = str(file_path)
        self.operation = FileOperation(operation)


class CommandExecutionError(CreateStackError):
    """Raised when an external command exits non-zero (or never reports a status)."""

    def __init__(
        self,
        command: str,
        exit_code: int | None,
        message: str,
        stderr: str | None = None,
    ) -> None:
        super().__init__(
            message,
            "COMMAND_EXECUTION_ERROR",
            {"command": command, "exit_code": exit_code, "stderr": stderr},
        )
        self.command = command
        self.exit_code = exit_code
        self.stderr = stderr


class ConfigurationError(CreateStackError):
    """Raised when project configuration (or the generator set) is invalid."""

    def __init__(self, message: str, details: Any = None) -> None:
        super().__init__(message, "CONFIGURATION_ERROR", details)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def is_create_stack_error(value: object) -> TypeGuard[CreateStackError]:
    """Return ``True`` if *value* is any classified create-stack error."""
    return isinstance(value, CreateStackError)


def classify_failure(
    exc: BaseException,
    *,
    packages: str | Sequence[str],
    path: str | Path,
    install_message: str,
    file_message: str,
) -> CreateStackError | None:
    """Translate a low-level failure raised inside a stage.

    * ``CommandExecutionError`` (a package-manager or CLI call failed) becomes
      an ``InstallationError`` for *packages*.
    * ``FileOperationError`` raised by the filesystem service keeps its path,
      operation kind and details, and takes *file_message* as its message.
    * A bare ``OSError`` carrying an errno becomes a write
      ``FileOperationError`` for the offending path, or *path* when the error
      does not name one.

    Returns ``None`` for anything else so the caller re-raises it unchanged.
    """
    if isinstance(exc, CommandExecutionError):
        return InstallationError(packages, install_message, exc.details)
    if isinstance(exc, FileOperationError):
        return FileOperationError(exc.file_path, exc.operation, file_message, exc.details)
    if isinstance(exc, OSError) and exc.errno is not None:
        return FileOperationError(
            exc.filename or path,
            FileOperation.WRITE,
            file_message,
            {"errno": exc.errno, "error": exc.strerror or str(exc)},
        )
    return None


@dataclass(frozen=True)
class FormattedError:
    """User-facing rendering of an arbitrary failure."""

    message: str
    details: str | None = None


def format_error(error: object) -> FormattedError:
    """Format any raised value for display.

    Classified errors render their details as indented JSON; other exceptions
    render their traceback; anything else is converted with ``str``.
    """
    if is_create_stack_error(error):
        details = None
        if error.details:
            details = json.dumps(error.details, indent=2, default=str)
        return FormattedError(message=error.message, details=details)

    if isinstance(error, BaseException):
        tb = "".join(traceback.format_exception(type(error), error, error.__traceback__))
        return FormattedError(message=str(error), details=tb)

    return FormattedError(message=str(error))
