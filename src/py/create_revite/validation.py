"""Package name validation.

Project directories double as npm package names, so they are checked against
the same rules npm applies when publishing: problems that make a name unusable
are reported as errors, while problems that only prevent *new* packages from
using it are reported as warnings.
"""

import re
from dataclasses import dataclass
from urllib.parse import quote

__all__ = ("ValidationResult", "validate_project_name")

MAX_NAME_LENGTH = 214
BLACKLISTED_NAMES = frozenset({"node_modules", "favicon.ico"})
CORE_MODULE_NAMES = frozenset(
    {
        "assert",
        "assert/strict",
        "async_hooks",
        "buffer",
        "child_process",
        "cluster",
        "console",
        "constants",
        "crypto",
        "dgram",
        "diagnostics_channel",
        "dns",
        "dns/promises",
        "domain",
        "events",
        "fs",
        "fs/promises",
        "http",
        "http2",
        "https",
        "inspector",
        "inspector/promises",
        "module",
        "net",
        "os",
        "path",
        "path/posix",
        "path/win32",
        "perf_hooks",
        "process",
        "punycode",
        "querystring",
        "readline",
        "readline/promises",
        "repl",
        "stream",
        "stream/consumers",
        "stream/promises",
        "stream/web",
        "string_decoder",
        "sys",
        "timers",
        "timers/promises",
        "tls",
        "trace_events",
        "tty",
        "url",
        "util",
        "util/types",
        "v8",
        "vm",
        "wasi",
        "worker_threads",
        "zlib",
    }
)

_SCOPED_PACKAGE_PATTERN = re.compile(r"^(?:@([^/]+?)/)?([^/]+?)$")
_SPECIAL_CHARACTERS = re.compile(r"[~'!()*]")
# Characters encodeURIComponent leaves untouched, beyond ASCII letters and digits.
_URL_SAFE = "-_.!~*'()"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a project name.

    Attributes:
        valid_for_new_packages: No errors and no warnings.
        valid_for_old_packages: No errors.
        errors: Messages for problems that make the name unusable.
        warnings: Messages for problems that only affect new packages.
    """

    valid_for_new_packages: bool
    valid_for_old_packages: bool
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        """Whether the name can be used for a freshly scaffolded project."""
        return self.valid_for_new_packages


def _is_url_friendly(value: "str | None") -> bool:
    return value is not None and quote(value, safe=_URL_SAFE) == value


def validate_project_name(name: str) -> ValidationResult:
    """Validate a proposed project directory name.

    Args:
        name: The candidate name.

    Returns:
        The validation result with ordered error and warning messages.
    """
    errors: list[str] = []
    warnings: list[str] = []

    if not name:
        errors.append("name length must be greater than zero")
    if name.startswith("."):
        errors.append("name cannot start with a period")
    if name.startswith("_"):
        errors.append("name cannot start with an underscore")
    if name.strip() != name:
        errors.append("name cannot contain leading or trailing spaces")
    if name.lower() in BLACKLISTED_NAMES:
        errors.append(f"{name.lower()} is a blacklisted name")

    if name.lower() in CORE_MODULE_NAMES:
        warnings.append(f"{name} is a core module name")
    if len(name) > MAX_NAME_LENGTH:
        warnings.append(f"name can no longer contain more than {MAX_NAME_LENGTH} characters")
    if name.lower() != name:
        warnings.append("name can no longer contain capital letters")
    if _SPECIAL_CHARACTERS.search(name.split("/")[-1]):
        warnings.append("name can no longer contain special characters (\"~'!()*\")")

    if not _is_url_friendly(name):
        match = _SCOPED_PACKAGE_PATTERN.match(name)
        if match and match.group(2).startswith("."):
            errors.append("name cannot start with a period")
        if not (match and _is_url_friendly(match.group(1)) and _is_url_friendly(match.group(2))):
            errors.append("name can only contain URL-friendly characters")

    return ValidationResult(
        valid_for_new_packages=not errors and not warnings,
        valid_for_old_packages=not errors,
        errors=tuple(errors),
        warnings=tuple(warnings),
    )
