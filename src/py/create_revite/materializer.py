"""Project materialization.

Runs the scaffolding stages in a fixed order: validate options, resolve the
target, run the generator, wire in Tailwind CSS, install dependencies and
report. Each stage must finish before the next one starts and the first
failure aborts the rest. Nothing is rolled back; a failed run leaves whatever
the generator wrote on disk.
"""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from create_revite.config import ScaffoldConfig
from create_revite.console import logger
from create_revite.exceptions import InvalidTemplateError
from create_revite.patching import (
    patch_vite_config,
    remove_app_stylesheet,
    write_app_component,
    write_tailwind_stylesheet,
)
from create_revite.reporter import NullReporter
from create_revite.resolver import resolve_target
from create_revite.templates import DEFAULT_TEMPLATE, TemplateType, is_valid_template
from create_revite.utils import format_command

if TYPE_CHECKING:
    from pathlib import Path

    from create_revite.executor import JSExecutor
    from create_revite.reporter import Reporter
    from create_revite.resolver import ResolvedTarget

__all__ = ("MaterializeResult", "ProjectMaterializer", "ProjectRequest")

FAILED_STAGE = "Failed to create project"


@dataclass(frozen=True)
class ProjectRequest:
    """Parsed command line options.

    Attributes:
        directory: Target directory name, ``"."`` or None for the current directory.
        use_typescript: Generate the TypeScript variant.
        use_tailwind: Wire Tailwind CSS into the project.
        template: App component template identifier.
    """

    directory: "str | None" = None
    use_typescript: bool = False
    use_tailwind: bool = True
    template: str = DEFAULT_TEMPLATE.value

    @property
    def vite_template(self) -> str:
        """The generator's language variant selector."""
        return "react-ts" if self.use_typescript else "react"


@dataclass(frozen=True)
class MaterializeResult:
    """Summary of a created project."""

    target: "ResolvedTarget"
    template: TemplateType
    tailwind: bool
    next_steps: list[list[str]] = field(default_factory=list)


class ProjectMaterializer:
    """Create a project from a :class:`ProjectRequest`.

    Args:
        executor: Package manager used for every external command.
        reporter: Receives stage progress. Defaults to discarding it.
        confirm: Yes/no prompt used when the current directory is not empty.
        config: Scaffolding settings.
        cwd: Working directory the target is resolved against.
    """

    def __init__(
        self,
        executor: "JSExecutor",
        *,
        reporter: "Reporter | None" = None,
        confirm: "Callable[[str], bool]",
        config: "ScaffoldConfig | None" = None,
        cwd: "Path | None" = None,
    ) -> None:
        self.executor = executor
        self.reporter: "Reporter" = reporter or NullReporter()
        self.confirm = confirm
        self.config = config or ScaffoldConfig()
        self.cwd = cwd

    def run(self, request: ProjectRequest) -> "MaterializeResult | None":
        """Run every stage.

        Raises:
            InvalidTemplateError: If the template is unknown.
            InvalidProjectNameError: If the directory is not a valid package name.
            ProjectExistsError: If the target directory already exists.
            ExecutableNotFoundError: If the package manager is not installed.
            CommandExecutionError: If the generator or package manager fails.
            PatchAnchorNotFoundError: If generated files do not have the expected shape.

        Returns:
            The result, or None if the user cancelled.
        """
        template = self.validate_options(request)

        target = resolve_target(request.directory, cwd=self.cwd, confirm=self.confirm)
        if target is None:
            self.reporter.info("[yellow]Operation cancelled.[/]")
            return None

        self.reporter.info(f"[blue]Creating a new React + Vite + Tailwind app in [green]{target.path}[/][/]")
        self.reporter.info(f"[dim]Using template: [cyan]{template.value}[/][/]")

        with self._stage("Creating Vite project...", "Vite project created"):
            self.create_vite_project(target, request)

        if request.use_tailwind:
            with self._stage("Installing Tailwind CSS...", "Tailwind CSS installed"):
                self.install_tailwind(target, request.use_typescript, template)

        with self._stage("Installing dependencies...", "Dependencies installed"):
            self.executor.install(target.path)

        result = MaterializeResult(
            target=target,
            template=template,
            tailwind=request.use_tailwind,
            next_steps=[self.executor.dev_command, self.executor.build_command, self.executor.preview_command],
        )
        self.report_success(result)
        return result

    @staticmethod
    def validate_options(request: ProjectRequest) -> TemplateType:
        """Reject unknown templates before anything touches the filesystem.

        Raises:
            InvalidTemplateError: If the template is unknown.

        Returns:
            The template type.
        """
        if not is_valid_template(request.template):
            raise InvalidTemplateError(request.template, [t.value for t in TemplateType])
        return TemplateType(request.template)

    def create_vite_project(self, target: "ResolvedTarget", request: ProjectRequest) -> None:
        """Run the generator in the target's parent directory."""
        target.parent.mkdir(parents=True, exist_ok=True)
        self.executor.create(
            self.config.generator,
            [target.generator_target, "--template", request.vite_template, "--yes"],
            cwd=target.parent,
        )

    def install_tailwind(self, target: "ResolvedTarget", use_typescript: bool, template: TemplateType) -> None:
        """Add Tailwind CSS and rewrite the generated files to use it."""
        project_dir = target.path
        self.executor.add(self.config.tailwind_packages, cwd=project_dir)
        logger.debug("Patched %s", patch_vite_config(project_dir, use_typescript))
        logger.debug("Wrote %s", write_tailwind_stylesheet(project_dir))
        logger.debug("Wrote %s", write_app_component(project_dir, use_typescript, template))
        if remove_app_stylesheet(project_dir):
            logger.debug("Removed App.css from %s", project_dir)

    def report_success(self, result: MaterializeResult) -> None:
        target = result.target
        self.reporter.succeed(f"Success! Created [cyan]{target.project_name}[/] at [cyan]{target.path}[/]")

        dev, build, preview = result.next_steps
        self.reporter.info("")
        self.reporter.info("Inside that directory, you can run several commands:")
        self.reporter.info("")
        self.reporter.info(f"[cyan]  {format_command(dev)}[/]")
        self.reporter.info("    Starts the development server.")
        self.reporter.info("")
        self.reporter.info(f"[cyan]  {format_command(build)}[/]")
        self.reporter.info("    Bundles the app into static files for production.")
        self.reporter.info("")
        self.reporter.info(f"[cyan]  {format_command(preview)}[/]")
        self.reporter.info("    Preview the production build locally.")
        self.reporter.info("")
        self.reporter.info("We suggest that you begin by typing:")
        self.reporter.info("")
        if not target.use_current_directory:
            self.reporter.info(f"[cyan]  cd {target.project_name}[/]")
        self.reporter.info(f"[cyan]  {format_command(dev)}[/]")
        self.reporter.info("")
        self.reporter.info("[blue]Happy coding! 🚀[/]")

    @contextmanager
    def _stage(self, start: str, done: str) -> Iterator[None]:
        self.reporter.start_stage(start)
        try:
            yield
        except BaseException:
            self.reporter.fail(FAILED_STAGE)
            raise
        self.reporter.succeed(done)
