"""Application templates for the generated ``App`` component.

Each template is a complete, self-contained component shipped as package data.
The same source is used for the JavaScript and TypeScript variants.
"""

from dataclasses import dataclass
from enum import Enum
from functools import cache
from typing import TYPE_CHECKING

from create_revite.utils import get_package_path, read_text_file

if TYPE_CHECKING:
    from pathlib import Path

__all__ = (
    "APP_TEMPLATES",
    "DEFAULT_TEMPLATE",
    "AppTemplate",
    "TemplateType",
    "get_app_template",
    "get_available_templates",
    "get_template",
    "is_valid_template",
)


class TemplateType(str, Enum):
    """Available App component templates."""

    BASIC = "basic"
    DASHBOARD = "dashboard"
    LANDING = "landing"
    BLOG = "blog"


@dataclass(frozen=True)
class AppTemplate:
    """An App component template.

    Attributes:
        type: Template type enum
        description: Brief description shown in the --template help
        filename: Source file under ``templates/app``
    """

    type: TemplateType
    description: str
    filename: str

    @property
    def path(self) -> "Path":
        """Location of the template source inside the package."""
        return get_package_path("templates", "app", self.filename)

    @property
    def source(self) -> str:
        """The template source text."""
        return _read_source(self.path)


APP_TEMPLATES: dict[TemplateType, AppTemplate] = {
    TemplateType.BASIC: AppTemplate(
        type=TemplateType.BASIC,
        description="Centered welcome screen with the Vite and React logos",
        filename="basic.jsx",
    ),
    TemplateType.DASHBOARD: AppTemplate(
        type=TemplateType.DASHBOARD,
        description="Header, stat cards and a recent activity list",
        filename="dashboard.jsx",
    ),
    TemplateType.LANDING: AppTemplate(
        type=TemplateType.LANDING,
        description="Navigation, hero section, feature grid and footer",
        filename="landing.jsx",
    ),
    TemplateType.BLOG: AppTemplate(
        type=TemplateType.BLOG,
        description="Featured post, post grid and newsletter signup",
        filename="blog.jsx",
    ),
}

DEFAULT_TEMPLATE = TemplateType.BASIC


@cache
def _read_source(path: "Path") -> str:
    return read_text_file(path)


def get_available_templates() -> list[AppTemplate]:
    """Get all available App templates.

    Returns:
        List of templates in declaration order.
    """
    return list(APP_TEMPLATES.values())


def is_valid_template(template: "str | TemplateType") -> bool:
    """Check whether a template identifier names a known template.

    Returns:
        True if the identifier is known.
    """
    return get_template(template) is not None


def get_template(template: "str | TemplateType") -> "AppTemplate | None":
    """Get a template by identifier.

    Args:
        template: Template type or its string value.

    Returns:
        The template, or None if not found.
    """
    try:
        return APP_TEMPLATES[TemplateType(template)]
    except ValueError:
        return None


def get_app_template(template: "str | TemplateType") -> str:
    """Get the App component source for a template.

    Unknown identifiers fall back to the basic template.

    Args:
        template: Template type or its string value.

    Returns:
        The component source text.
    """
    return (get_template(template) or APP_TEMPLATES[DEFAULT_TEMPLATE]).source
