"""create-revite: scaffold React + Vite + Tailwind CSS projects.

The command line entry point is ``create-revite``. The same flow is available
programmatically:

    from create_revite import ProjectMaterializer, ProjectRequest, get_executor

    materializer = ProjectMaterializer(get_executor("node"), confirm=lambda _: True)
    materializer.run(ProjectRequest(directory="my-app", template="dashboard"))
"""

from create_revite.config import LoggingConfig, ScaffoldConfig
from create_revite.executor import JSExecutor, get_executor
from create_revite.materializer import MaterializeResult, ProjectMaterializer, ProjectRequest
from create_revite.resolver import ResolvedTarget, resolve_target
from create_revite.templates import TemplateType, get_app_template
from create_revite.validation import ValidationResult, validate_project_name

__all__ = (
    "JSExecutor",
    "LoggingConfig",
    "MaterializeResult",
    "ProjectMaterializer",
    "ProjectRequest",
    "ResolvedTarget",
    "ScaffoldConfig",
    "TemplateType",
    "ValidationResult",
    "get_app_template",
    "get_executor",
    "resolve_target",
    "validate_project_name",
)
