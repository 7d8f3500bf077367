"""Tailwind CSS wiring for generated projects.

The edits target the default output of ``create-vite``'s React templates. Every
substitution is anchored on exact text from that output: when the anchor is
missing the patch fails loudly instead of silently rewriting the file unchanged,
and when the replacement is already present the substitution is skipped so the
patch can be re-applied safely.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from create_revite.console import logger
from create_revite.exceptions import PatchAnchorNotFoundError
from create_revite.templates import get_app_template
from create_revite.utils import read_text_file, write_text_file

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from create_revite.templates import TemplateType

__all__ = (
    "TAILWIND_STYLESHEET",
    "VITE_CONFIG_EDITS",
    "TextEdit",
    "apply_edits",
    "app_component_path",
    "patch_vite_config",
    "remove_app_stylesheet",
    "vite_config_path",
    "write_app_component",
    "write_tailwind_stylesheet",
)

TAILWIND_STYLESHEET = '@import "tailwindcss";\n'


@dataclass(frozen=True)
class TextEdit:
    """An exact-text substitution.

    Attributes:
        anchor: Text that must be present in the file.
        replacement: Text the anchor is replaced with (first occurrence only).
    """

    anchor: str
    replacement: str


VITE_CONFIG_EDITS: tuple[TextEdit, ...] = (
    TextEdit(
        anchor="import { defineConfig } from 'vite'",
        replacement="import { defineConfig } from 'vite'\nimport tailwindcss from '@tailwindcss/vite'",
    ),
    TextEdit(
        anchor="plugins: [react()]",
        replacement="plugins: [react(), tailwindcss()]",
    ),
)


def vite_config_path(project_dir: "Path", use_typescript: bool) -> "Path":
    return project_dir / ("vite.config.ts" if use_typescript else "vite.config.js")


def app_component_path(project_dir: "Path", use_typescript: bool) -> "Path":
    return project_dir / "src" / ("App.tsx" if use_typescript else "App.jsx")


def apply_edits(content: str, edits: "Sequence[TextEdit]", path: "Path") -> str:
    """Apply substitutions to file content.

    Args:
        content: Current file content.
        edits: Substitutions to apply in order.
        path: File the content came from, for error messages.

    Raises:
        PatchAnchorNotFoundError: If an anchor is missing and its replacement is not already present.

    Returns:
        The patched content.
    """
    for edit in edits:
        if edit.replacement in content:
            logger.debug("Skipping edit in %s, already applied", path)
            continue
        if edit.anchor not in content:
            raise PatchAnchorNotFoundError(path, edit.anchor)
        content = content.replace(edit.anchor, edit.replacement, 1)
    return content


def patch_vite_config(project_dir: "Path", use_typescript: bool) -> "Path":
    """Register the Tailwind CSS Vite plugin in the generated build config.

    The file is only written once every edit has been applied.

    Returns:
        Path of the patched file.
    """
    path = vite_config_path(project_dir, use_typescript)
    content = apply_edits(read_text_file(path), VITE_CONFIG_EDITS, path)
    write_text_file(path, content)
    return path


def write_tailwind_stylesheet(project_dir: "Path") -> "Path":
    """Replace the entry stylesheet with the Tailwind CSS import.

    Returns:
        Path of the stylesheet.
    """
    path = project_dir / "src" / "index.css"
    write_text_file(path, TAILWIND_STYLESHEET)
    return path


def write_app_component(project_dir: "Path", use_typescript: bool, template: "str | TemplateType") -> "Path":
    """Replace the generated App component with a template.

    Returns:
        Path of the component.
    """
    path = app_component_path(project_dir, use_typescript)
    write_text_file(path, get_app_template(template))
    return path


def remove_app_stylesheet(project_dir: "Path") -> bool:
    """Delete the generated component stylesheet, which the templates do not import.

    Returns:
        True if a file was removed.
    """
    path = project_dir / "src" / "App.css"
    if not path.exists():
        return False
    path.unlink()
    return True
