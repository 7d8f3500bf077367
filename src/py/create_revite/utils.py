"""Utility helpers for create-revite."""

from importlib.util import find_spec
from pathlib import Path


def get_package_path(*parts: str) -> Path:
    """Resolve a path inside the installed create-revite package.

    Args:
        *parts: Path segments relative to the package root.

    Returns:
        The resolved package path.
    """
    spec = find_spec("create_revite")
    if spec and spec.origin:
        return Path(spec.origin).parent.joinpath(*parts)
    # Fallback for uncommon import contexts.
    return Path(__file__).resolve().parent.joinpath(*parts)


def read_text_file(path: Path, *, encoding: str = "utf-8") -> str:
    """Read a text file with consistent encoding.

    Args:
        path: File path to read.
        encoding: Text encoding.

    Returns:
        File contents.
    """
    return path.read_text(encoding=encoding)


def write_text_file(path: Path, content: str, *, encoding: str = "utf-8") -> None:
    """Write a text file with consistent encoding and Unix newlines."""
    path.write_text(content, encoding=encoding, newline="\n")


def format_command(command: "list[str] | None") -> str:
    """Join a command for display.

    Returns:
        The command as a single space separated string.
    """
    return " ".join(command) if command else ""
