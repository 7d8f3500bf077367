"""Target directory resolution."""

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from create_revite.console import logger
from create_revite.exceptions import InvalidProjectNameError, ProjectExistsError
from create_revite.validation import validate_project_name

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = (
    "CURRENT_DIRECTORY",
    "NON_EMPTY_DIRECTORY_PROMPT",
    "ResolvedTarget",
    "is_effectively_empty",
    "resolve_target",
)

CURRENT_DIRECTORY = "."
NON_EMPTY_DIRECTORY_PROMPT = "Current directory is not empty. Continue anyway?"


@dataclass(frozen=True)
class ResolvedTarget:
    """Where the project will be created.

    Attributes:
        path: Absolute path of the project directory.
        project_name: Name of the project (the directory's base name).
        use_current_directory: Whether the project is created in place.
    """

    path: Path
    project_name: str
    use_current_directory: bool = False

    @property
    def generator_target(self) -> str:
        """Target argument for the generator, relative to :attr:`parent`."""
        return CURRENT_DIRECTORY if self.use_current_directory else self.path.name

    @property
    def parent(self) -> Path:
        """Directory the generator runs in.

        In-place projects run the generator inside the directory itself,
        so the ``.`` target refers back to it.
        """
        return self.path if self.use_current_directory else self.path.parent


def is_effectively_empty(path: Path) -> bool:
    """Check whether a directory only contains hidden entries.

    Returns:
        True if every entry name starts with a period.
    """
    return all(entry.name.startswith(".") for entry in path.iterdir())


def resolve_target(
    directory: "str | None",
    *,
    cwd: "Path | None" = None,
    confirm: "Callable[[str], bool]",
) -> "ResolvedTarget | None":
    """Resolve the project directory from the positional argument.

    Args:
        directory: The directory argument, ``"."`` or None for the current directory.
        cwd: Working directory to resolve against. Defaults to :meth:`Path.cwd`.
        confirm: Asks the user a yes/no question. Only called when creating the
            project in a current directory that has visible entries.

    Raises:
        InvalidProjectNameError: If the directory name is not a valid package name.
        ProjectExistsError: If something already exists at the target path.

    Returns:
        The resolved target, or None if the user declined to continue.
    """
    cwd = (cwd or Path.cwd()).resolve()

    if not directory or directory == CURRENT_DIRECTORY:
        if not is_effectively_empty(cwd) and not confirm(NON_EMPTY_DIRECTORY_PROMPT):
            return None
        return ResolvedTarget(path=cwd, project_name=cwd.name, use_current_directory=True)

    result = validate_project_name(directory)
    if not result.is_valid:
        raise InvalidProjectNameError(directory, result)

    path = (cwd / directory).resolve()
    if path.exists() or path.is_symlink():
        raise ProjectExistsError(directory)

    logger.debug("Resolved project %s to %s", directory, path)
    return ResolvedTarget(path=path, project_name=directory)
