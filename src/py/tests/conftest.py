from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from create_revite.executor import JSExecutor
from create_revite.exceptions import CommandExecutionError

# Environment variables that may affect test behavior - clear before each test
_REVITE_ENV_VARS = [
    "REVITE_EXECUTOR",
    "REVITE_GENERATOR",
    "REVITE_LOG_LEVEL",
]

VITE_CONFIG = """import { defineConfig } from 'vite'
import react from '@vitejs/plugin-react'

// https://vite.dev/config/
export default defineConfig({
  plugins: [react()],
})
"""

INDEX_CSS = """:root {
  font-family: system-ui, Avenir, Helvetica, Arial, sans-serif;
}
"""

APP_COMPONENT = """import './App.css'

function App() {
  return <h1>Vite + React</h1>
}

export default App
"""


@pytest.fixture(autouse=True)
def clean_revite_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear create-revite environment variables before each test for isolation."""
    for var in _REVITE_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    yield


def write_generated_project(project_dir: Path, *, typescript: bool = False) -> None:
    """Write the files create-vite's React templates produce that the patch touches."""
    ext = "ts" if typescript else "js"
    (project_dir / "src").mkdir(parents=True, exist_ok=True)
    (project_dir / f"vite.config.{ext}").write_text(VITE_CONFIG)
    (project_dir / "src" / "index.css").write_text(INDEX_CSS)
    (project_dir / "src" / f"App.{ext}x").write_text(APP_COMPONENT)
    (project_dir / "src" / "App.css").write_text("#root { margin: 0 auto; }\n")
    (project_dir / "package.json").write_text('{"name": "%s"}\n' % project_dir.name)


class FakeExecutor(JSExecutor):
    """Record commands and simulate the generator instead of spawning processes."""

    bin_name = "npm"
    runner = ("npx",)
    add_subcommand = "install"

    def __init__(
        self,
        *,
        fail_on: "str | None" = None,
        typescript: bool = False,
        generate: bool = True,
        vite_config: "str | None" = None,
    ) -> None:
        super().__init__()
        self.vite_config = vite_config
        self.calls: list[tuple[str, list[str], Path]] = []
        self.fail_on = fail_on
        self.typescript = typescript
        self.generate = generate

    def _record(self, kind: str, args: "list[str]", cwd: Path) -> None:
        self.calls.append((kind, args, cwd))
        if self.fail_on == kind:
            raise CommandExecutionError(["npm", *args], 1)

    def create(self, package: str, args: "list[str]", cwd: Path) -> None:
        self._record("create", [package, *args], cwd)
        if self.generate:
            target = cwd / args[0]
            target.mkdir(parents=True, exist_ok=True)
            write_generated_project(target, typescript=self.typescript)
            if self.vite_config is not None:
                ext = "ts" if self.typescript else "js"
                (target / f"vite.config.{ext}").write_text(self.vite_config)

    def add(self, packages: "list[str]", cwd: Path) -> None:
        self._record("add", list(packages), cwd)

    def install(self, cwd: Path) -> None:
        self._record("install", [], cwd)

    @property
    def kinds(self) -> list[str]:
        return [kind for kind, _, _ in self.calls]


@pytest.fixture
def fake_executor() -> FakeExecutor:
    return FakeExecutor()


@pytest.fixture
def make_executor() -> "type[FakeExecutor]":
    return FakeExecutor


@pytest.fixture
def make_generated_project() -> "Callable[..., None]":
    return write_generated_project
