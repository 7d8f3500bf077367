"""Tests for create_revite.cli module."""

from pathlib import Path
from typing import Any
from unittest.mock import Mock, patch

import pytest
from click.testing import CliRunner

from create_revite.__metadata__ import __version__
from create_revite.cli import create_revite
from create_revite.templates import get_app_template, get_available_templates


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def in_tmp_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _flat(output: str) -> str:
    return " ".join(output.split())


def test_help(runner: CliRunner) -> None:
    result = runner.invoke(create_revite, ["--help"])

    assert result.exit_code == 0
    assert "Create React + Vite + Tailwind projects." in result.output
    assert "--no-tailwind" in result.output
    assert "-ts, --typescript" in result.output


def test_help_lists_templates(runner: CliRunner) -> None:
    result = runner.invoke(create_revite, ["--help"])

    assert result.exit_code == 0
    for template in get_available_templates():
        assert f"{template.type.value} ({template.description})" in _flat(result.output)


def test_version(runner: CliRunner) -> None:
    result = runner.invoke(create_revite, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_create_named_project(runner: CliRunner, in_tmp_path: Path, fake_executor: Any) -> None:
    with patch("create_revite.executor.get_executor", return_value=fake_executor) as mock_get:
        result = runner.invoke(create_revite, ["my-app", "--template", "dashboard"])

    assert result.exit_code == 0, result.output
    assert mock_get.call_args.args[0] == "node"
    assert fake_executor.kinds == ["create", "add", "install"]
    project = in_tmp_path / "my-app"
    assert (project / "src" / "App.jsx").read_text() == get_app_template("dashboard")
    output = _flat(result.output)
    assert "Success! Created my-app" in output
    assert "cd my-app" in output
    assert "npm run dev" in output


def test_typescript_without_tailwind(runner: CliRunner, in_tmp_path: Path, make_executor: Any) -> None:
    executor = make_executor(typescript=True)
    (in_tmp_path / ".git").mkdir()

    with patch("create_revite.executor.get_executor", return_value=executor):
        result = runner.invoke(create_revite, [".", "-ts", "--no-tailwind"])

    assert result.exit_code == 0, result.output
    assert executor.calls[0][1] == ["create-vite@latest", ".", "--template", "react-ts", "--yes"]
    assert executor.kinds == ["create", "install"]
    assert f"cd {in_tmp_path.name}" not in _flat(result.output)


def test_long_typescript_flag(runner: CliRunner, in_tmp_path: Path, make_executor: Any) -> None:
    executor = make_executor(typescript=True)

    with patch("create_revite.executor.get_executor", return_value=executor):
        result = runner.invoke(create_revite, ["my-app", "--typescript", "-t", "landing"])

    assert result.exit_code == 0, result.output
    assert (in_tmp_path / "my-app" / "src" / "App.tsx").read_text() == get_app_template("landing")


def test_invalid_name(runner: CliRunner, in_tmp_path: Path, fake_executor: Any) -> None:
    with patch("create_revite.executor.get_executor", return_value=fake_executor):
        result = runner.invoke(create_revite, ["My App"])

    assert result.exit_code == 1
    output = _flat(result.output)
    assert "Invalid project name:" in output
    assert "name can only contain URL-friendly characters" in output
    assert "name can no longer contain capital letters" in output
    assert fake_executor.calls == []
    assert list(in_tmp_path.iterdir()) == []


def test_existing_directory(runner: CliRunner, in_tmp_path: Path, fake_executor: Any) -> None:
    (in_tmp_path / "my-app").mkdir()

    with patch("create_revite.executor.get_executor", return_value=fake_executor):
        result = runner.invoke(create_revite, ["my-app"])

    assert result.exit_code == 1
    assert 'Directory "my-app" already exists.' in _flat(result.output)
    assert fake_executor.calls == []


def test_unknown_template(runner: CliRunner, in_tmp_path: Path, fake_executor: Any) -> None:
    with patch("create_revite.executor.get_executor", return_value=fake_executor):
        result = runner.invoke(create_revite, ["my-app", "--template", "fancy"])

    assert result.exit_code == 1
    assert 'Invalid template "fancy". Available templates: basic, dashboard, landing, blog' in _flat(result.output)
    assert fake_executor.calls == []
    assert list(in_tmp_path.iterdir()) == []


def test_generator_failure(runner: CliRunner, in_tmp_path: Path, make_executor: Any) -> None:
    executor = make_executor(fail_on="create")

    with patch("create_revite.executor.get_executor", return_value=executor):
        result = runner.invoke(create_revite, ["my-app"])

    assert result.exit_code == 1
    output = _flat(result.output)
    assert "Failed to create project" in output
    assert "Error creating project:" in output
    assert "create-vite@latest my-app --template react --yes" in output
    assert "failed with exit code 1" in output
    assert executor.kinds == ["create"]


def test_declined_prompt_exits_cleanly(runner: CliRunner, in_tmp_path: Path, fake_executor: Any) -> None:
    (in_tmp_path / "index.html").write_text("<html></html>\n")

    with (
        patch("create_revite.executor.get_executor", return_value=fake_executor),
        patch("create_revite.cli._confirm", return_value=False) as mock_confirm,
    ):
        result = runner.invoke(create_revite, [])

    assert result.exit_code == 0
    mock_confirm.assert_called_once_with("Current directory is not empty. Continue anyway?")
    assert "Operation cancelled." in result.output
    assert fake_executor.calls == []
    assert [p.name for p in in_tmp_path.iterdir()] == ["index.html"]


def test_closed_input_at_prompt_cancels(runner: CliRunner, in_tmp_path: Path, fake_executor: Any) -> None:
    (in_tmp_path / "index.html").write_text("<html></html>\n")

    with patch("create_revite.executor.get_executor", return_value=fake_executor):
        result = runner.invoke(create_revite, [], input="")

    assert result.exit_code == 0, result.output
    assert "Operation cancelled." in result.output
    assert "Aborted!" not in result.output
    assert fake_executor.calls == []
    assert [p.name for p in in_tmp_path.iterdir()] == ["index.html"]


def test_confirm_prompt_reads_answer(runner: CliRunner, in_tmp_path: Path, fake_executor: Any) -> None:
    (in_tmp_path / "index.html").write_text("<html></html>\n")

    with patch("create_revite.executor.get_executor", return_value=fake_executor):
        result = runner.invoke(create_revite, ["."], input="y\n")

    assert result.exit_code == 0, result.output
    assert fake_executor.kinds == ["create", "add", "install"]


def test_executor_option(runner: CliRunner, in_tmp_path: Path, fake_executor: Any) -> None:
    with patch("create_revite.executor.get_executor", return_value=fake_executor) as mock_get:
        result = runner.invoke(create_revite, ["my-app", "-e", "bun"])

    assert result.exit_code == 0, result.output
    assert mock_get.call_args.args[0] == "bun"


def test_executor_from_environment(
    runner: CliRunner, in_tmp_path: Path, fake_executor: Any, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("REVITE_EXECUTOR", "npm")

    with patch("create_revite.executor.get_executor", return_value=fake_executor) as mock_get:
        result = runner.invoke(create_revite, ["my-app"])

    assert result.exit_code == 0, result.output
    assert mock_get.call_args.args[0] == "node"


def test_invalid_executor_from_environment(
    runner: CliRunner, in_tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("REVITE_EXECUTOR", "deno")

    result = runner.invoke(create_revite, ["my-app"])

    assert result.exit_code == 1
    assert "Invalid executor: 'deno'" in _flat(result.output)


def test_verbose_echoes_commands(runner: CliRunner, in_tmp_path: Path, fake_executor: Any) -> None:
    with patch("create_revite.executor.get_executor", return_value=fake_executor) as mock_get:
        result = runner.invoke(create_revite, ["my-app", "--verbose"])

    assert result.exit_code == 0, result.output
    assert mock_get.call_args.kwargs["on_command"] is not None


def test_quiet_hides_instructions(runner: CliRunner, in_tmp_path: Path, fake_executor: Any) -> None:
    with patch("create_revite.executor.get_executor", return_value=fake_executor) as mock_get:
        result = runner.invoke(create_revite, ["my-app", "--quiet"])

    assert result.exit_code == 0, result.output
    assert mock_get.call_args.kwargs["on_command"] is None
    output = _flat(result.output)
    assert "Success! Created my-app" in output
    assert "Happy coding" not in output


def test_missing_executable(runner: CliRunner, in_tmp_path: Path) -> None:
    with patch("shutil.which", Mock(return_value=None)):
        result = runner.invoke(create_revite, ["my-app"])

    assert result.exit_code == 1
    assert "Error creating project: Executable 'npx' not found." in _flat(result.output)
