"""Configuration for create-revite.

Defaults are read from ``REVITE_*`` environment variables so CI jobs and wrapper
scripts can change behaviour without passing flags. Explicit CLI options always
win over the environment.
"""

import os
from dataclasses import dataclass, field
from typing import Literal

__all__ = (
    "DEFAULT_GENERATOR",
    "EXECUTOR_NAMES",
    "TAILWIND_PACKAGES",
    "LoggingConfig",
    "ScaffoldConfig",
    "get_default_log_level",
)

DEFAULT_GENERATOR = "create-vite@latest"
TAILWIND_PACKAGES: tuple[str, ...] = ("tailwindcss", "@tailwindcss/vite")
EXECUTOR_NAMES: tuple[str, ...] = ("node", "pnpm", "yarn", "bun")

_EXECUTOR_ALIASES = {"npm": "node"}


def get_default_log_level() -> "Literal['quiet', 'normal', 'verbose']":
    """Get default log level from environment variable.

    Checks REVITE_LOG_LEVEL environment variable.
    Falls back to "normal" if not set or invalid.

    Returns:
        The log level from environment or "normal" default.
    """
    env_level = os.getenv("REVITE_LOG_LEVEL", "").lower()
    match env_level:
        case "quiet" | "normal" | "verbose":
            return env_level
        case _:
            return "normal"


@dataclass
class LoggingConfig:
    """Console output configuration.

    Attributes:
        level: Output verbosity.
            - "quiet": errors, prompts and the final result only
            - "normal": stage progress and next-step instructions (default)
            - "verbose": also echo every external command before it runs
            Can also be set via REVITE_LOG_LEVEL environment variable.
    """

    level: "Literal['quiet', 'normal', 'verbose']" = field(default_factory=get_default_log_level)

    @property
    def is_quiet(self) -> bool:
        return self.level == "quiet"

    @property
    def is_verbose(self) -> bool:
        return self.level == "verbose"


@dataclass
class ScaffoldConfig:
    """Scaffolding settings.

    Attributes:
        executor: Package manager used for the generator, added packages and install.
            Reads REVITE_EXECUTOR; ``npm`` is accepted as an alias of ``node``.
        generator: Generator package run through the executor's one-off runner.
            Reads REVITE_GENERATOR.
        tailwind_packages: Packages added when Tailwind CSS is enabled.
        logging: Console output configuration.
    """

    executor: str = field(default_factory=lambda: os.getenv("REVITE_EXECUTOR", "node"))
    generator: str = field(default_factory=lambda: os.getenv("REVITE_GENERATOR", DEFAULT_GENERATOR))
    tailwind_packages: tuple[str, ...] = TAILWIND_PACKAGES
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def __post_init__(self) -> None:
        """Normalize the executor name.

        Raises:
            ValueError: If the executor is not supported.
        """
        executor = self.executor.strip().lower()
        executor = _EXECUTOR_ALIASES.get(executor, executor)
        if executor not in EXECUTOR_NAMES:
            msg = f"Invalid executor: {self.executor!r}. Expected one of: {', '.join(EXECUTOR_NAMES)}"
            raise ValueError(msg)
        self.executor = executor
