"""Package manager executors.

This module provides executor classes for the supported JavaScript package
managers (npm, pnpm, Yarn, Bun). Every command runs in the foreground with the
parent's standard streams so the user sees the tool's own progress output.
"""

import platform
import shutil
import subprocess
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from create_revite.console import logger
from create_revite.exceptions import CommandExecutionError, ExecutableNotFoundError

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

__all__ = (
    "BunExecutor",
    "JSExecutor",
    "NodeExecutor",
    "PnpmExecutor",
    "YarnExecutor",
    "get_executor",
)


class JSExecutor:
    """Base class for package manager executors."""

    bin_name: ClassVar[str]
    runner: ClassVar["tuple[str, ...]"]
    """One-off package runner, e.g. ``npx`` or ``pnpm dlx``."""
    add_subcommand: ClassVar[str] = "add"

    def __init__(
        self,
        executable_path: "Path | str | None" = None,
        on_command: "Callable[[list[str]], None] | None" = None,
    ) -> None:
        self.executable_path = executable_path
        self.on_command = on_command

    def _resolve_executable(self, name: "str | None" = None) -> str:
        name = name or self.bin_name
        if self.executable_path and name == self.bin_name:
            return str(self.executable_path)
        path = shutil.which(name)
        if path is None:
            raise ExecutableNotFoundError(name)
        return path

    def _run(self, command: "list[str]", cwd: Path) -> None:
        display = [Path(command[0]).name, *command[1:]]
        logger.debug("Running %s in %s", " ".join(display), cwd)
        if self.on_command is not None:
            self.on_command(display)
        process = subprocess.run(
            command,
            cwd=cwd,
            shell=platform.system() == "Windows",
            check=False,
            stdin=None,  # inherit for prompts
            stdout=None,  # inherit for live output
            stderr=None,
        )
        if process.returncode != 0:
            raise CommandExecutionError(display, process.returncode)

    def execute(self, args: "Sequence[str]", cwd: Path) -> None:
        """Execute a package manager command and wait for it to finish.

        Raises:
            CommandExecutionError: If the command exits with a non-zero status.
        """
        executable = self._resolve_executable()
        # Avoid double-prefixing the executable when callers pass it explicitly
        args = list(args)
        command = args if args and Path(args[0]).name == Path(executable).name else [executable, *args]
        self._run(command, cwd)

    def create(self, package: str, args: "Sequence[str]", cwd: Path) -> None:
        """Run a generator package through the one-off runner."""
        runner, *runner_args = self.runner
        self._run([self._resolve_executable(runner), *runner_args, package, *args], cwd)

    def add(self, packages: "Sequence[str]", cwd: Path) -> None:
        """Add packages to the project in ``cwd``."""
        self.execute([self.add_subcommand, *packages], cwd)

    def install(self, cwd: Path) -> None:
        """Install every dependency declared by the project in ``cwd``."""
        self.execute(["install"], cwd)

    @property
    def dev_command(self) -> list[str]:
        """Get the command to start the dev server (e.g., npm run dev)."""
        return [self.bin_name, "run", "dev"]

    @property
    def build_command(self) -> list[str]:
        """Get the command to build for production (e.g., npm run build)."""
        return [self.bin_name, "run", "build"]

    @property
    def preview_command(self) -> list[str]:
        """Get the command to preview the production build (e.g., npm run preview)."""
        return [self.bin_name, "run", "preview"]


class NodeExecutor(JSExecutor):
    """Node.js executor."""

    bin_name = "npm"
    runner = ("npx",)
    add_subcommand = "install"


class PnpmExecutor(JSExecutor):
    """PNPM executor."""

    bin_name = "pnpm"
    runner = ("pnpm", "dlx")


class YarnExecutor(JSExecutor):
    """Yarn executor."""

    bin_name = "yarn"
    runner = ("yarn", "dlx")


class BunExecutor(JSExecutor):
    """Bun executor."""

    bin_name = "bun"
    runner = ("bunx",)


_EXECUTORS: "dict[str, type[JSExecutor]]" = {
    "node": NodeExecutor,
    "pnpm": PnpmExecutor,
    "yarn": YarnExecutor,
    "bun": BunExecutor,
}


def get_executor(name: str, on_command: "Callable[[list[str]], None] | None" = None) -> JSExecutor:
    """Create the executor for a configured package manager name.

    Args:
        name: One of ``node``, ``pnpm``, ``yarn`` or ``bun``.
        on_command: Optional callback receiving each command before it runs.

    Raises:
        ValueError: If the name is not a supported executor.

    Returns:
        The executor instance.
    """
    try:
        executor_cls = _EXECUTORS[name]
    except KeyError:
        msg = f"Unknown executor: {name!r}. Expected one of: {', '.join(_EXECUTORS)}"
        raise ValueError(msg) from None
    return executor_cls(on_command=on_command)
