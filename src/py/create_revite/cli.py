import logging
import sys
from typing import TYPE_CHECKING, Optional

from click import Choice, argument, command, option, version_option

from create_revite.__metadata__ import __version__
from create_revite.config import EXECUTOR_NAMES
from create_revite.templates import get_available_templates

if TYPE_CHECKING:
    from create_revite.config import ScaffoldConfig
    from create_revite.validation import ValidationResult

_TEMPLATE_HELP = "Choose template: " + "; ".join(
    f"{template.type.value} ({template.description})" for template in get_available_templates()
)


def _configure_logging(config: "ScaffoldConfig") -> None:
    from create_revite.console import logger

    if not config.logging.is_verbose:
        return
    logger.setLevel(logging.DEBUG)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)


def _print_validation_result(result: "ValidationResult") -> None:
    from rich.markup import escape

    from create_revite.console import err_console

    err_console.print("[red]Invalid project name:[/]")
    for error in result.errors:
        err_console.print(f"[red]  • {escape(error)}[/]")
    for warning in result.warnings:
        err_console.print(f"[yellow]  • {escape(warning)}[/]")


def _confirm(message: str) -> bool:
    from rich.prompt import Confirm

    try:
        return Confirm.ask(message, default=False)
    except EOFError:
        return False


@command(name="create-revite", help="Create React + Vite + Tailwind projects.")
@version_option(__version__, prog_name="create-revite")
@argument("project_directory", required=False, default=None)
@option("-ts", "--typescript", "typescript", help="Use the TypeScript template.", is_flag=True, default=False)
@option(
    "--tailwind/--no-tailwind",
    help="Install and configure Tailwind CSS.",
    default=True,
    show_default=True,
)
@option("-t", "--template", help=_TEMPLATE_HELP, default="basic", show_default=True)
@option(
    "-e",
    "--executor",
    help="Package manager to use. Defaults to REVITE_EXECUTOR or node (npm).",
    type=Choice([*EXECUTOR_NAMES, "npm"], case_sensitive=False),
    default=None,
    required=False,
)
@option("--verbose", type=bool, help="Enable verbose output.", default=False, is_flag=True)
@option("--quiet", type=bool, help="Only print errors and the final result.", default=False, is_flag=True)
def create_revite(
    project_directory: "Optional[str]",
    typescript: "bool",
    tailwind: "bool",
    template: "str",
    executor: "Optional[str]",
    verbose: "bool",
    quiet: "bool",
) -> None:
    """Create a new project."""
    from rich.markup import escape

    from create_revite.config import LoggingConfig, ScaffoldConfig
    from create_revite.console import console, err_console
    from create_revite.exceptions import InputError, InvalidProjectNameError, ReviteError
    from create_revite.executor import get_executor
    from create_revite.materializer import ProjectMaterializer, ProjectRequest
    from create_revite.reporter import ConsoleReporter
    from create_revite.utils import format_command

    logging_config = LoggingConfig()
    if verbose:
        logging_config = LoggingConfig(level="verbose")
    elif quiet:
        logging_config = LoggingConfig(level="quiet")

    try:
        config = (
            ScaffoldConfig(logging=logging_config)
            if executor is None
            else ScaffoldConfig(executor=executor, logging=logging_config)
        )
    except ValueError as e:
        err_console.print(f"[red]{escape(str(e))}[/]")
        sys.exit(1)
    _configure_logging(config)

    def _echo_command(cmd: "list[str]") -> None:
        console.print(f"[dim]$ {escape(format_command(cmd))}[/]")

    materializer = ProjectMaterializer(
        get_executor(config.executor, on_command=_echo_command if config.logging.is_verbose else None),
        reporter=ConsoleReporter(quiet=config.logging.is_quiet),
        confirm=_confirm,
        config=config,
    )
    request = ProjectRequest(
        directory=project_directory,
        use_typescript=typescript,
        use_tailwind=tailwind,
        template=template,
    )

    try:
        materializer.run(request)
    except InvalidProjectNameError as e:
        _print_validation_result(e.result)
        sys.exit(1)
    except InputError as e:
        err_console.print(f"[red]{escape(str(e))}[/]")
        sys.exit(1)
    except (ReviteError, OSError) as e:
        err_console.print("[red]Error creating project:[/]", escape(str(e)))
        sys.exit(1)


def main() -> None:
    """Console script entry point."""
    create_revite()
