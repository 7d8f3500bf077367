"""create-revite exception classes."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from create_revite.validation import ValidationResult

__all__ = [
    "CommandExecutionError",
    "ExecutableNotFoundError",
    "InputError",
    "InvalidProjectNameError",
    "InvalidTemplateError",
    "PatchAnchorNotFoundError",
    "ProjectExistsError",
    "ReviteError",
]


class ReviteError(Exception):
    """Base exception for create-revite related errors."""


class InputError(ReviteError):
    """Raised for bad user input detected before any external process runs."""


class InvalidProjectNameError(InputError):
    """Raised when the project directory is not a valid package name."""

    def __init__(self, name: str, result: "ValidationResult") -> None:
        super().__init__(f"Invalid project name: {name!r}")
        self.name = name
        self.result = result


class ProjectExistsError(InputError):
    """Raised when the target directory already exists."""

    def __init__(self, directory: str) -> None:
        super().__init__(f'Directory "{directory}" already exists.')
        self.directory = directory


class InvalidTemplateError(InputError):
    """Raised when an unknown template is requested."""

    def __init__(self, template: str, available: "list[str]") -> None:
        super().__init__(f'Invalid template "{template}". Available templates: {", ".join(available)}')
        self.template = template
        self.available = available


class ExecutableNotFoundError(ReviteError):
    """Raised when the package manager executable is not found."""

    def __init__(self, executable: str) -> None:
        super().__init__(f"Executable {executable!r} not found.")
        self.executable = executable


class CommandExecutionError(ReviteError):
    """Raised when an external command exits with a non-zero status."""

    def __init__(self, command: "list[str]", return_code: int) -> None:
        super().__init__(f'Command "{" ".join(command)}" failed with exit code {return_code}')
        self.command = command
        self.return_code = return_code


class PatchAnchorNotFoundError(ReviteError):
    """Raised when a generated file no longer contains the text a patch expects."""

    def __init__(self, path: "Path", anchor: str) -> None:
        super().__init__(f"Could not patch {path}: expected to find {anchor!r}. The generator output may have changed.")
        self.path = path
        self.anchor = anchor
