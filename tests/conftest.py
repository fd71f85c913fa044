"""Shared test fixtures for expressgen.

Provides router-file texts, isolated config environments, output state
management, generated-project fixtures and a CLI runner. These fixtures are
discovered by pytest and available to all test modules.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from expressgen.output import OutputFormat, OutputManager, reset_output, set_output


ROUTER_INDEX = (
    "import { Router } from 'express';\n"
    "const router = Router();\n"
    "export default router;\n"
)
"""Router file exactly as ``expressgen new`` writes it."""


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The manager keeps references to sys.stdout/sys.stderr from creation
    time; once CliRunner restores the real streams those references are
    stale.
    """
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Router text fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def router_index() -> str:
    """Fresh router-aggregator text."""
    return ROUTER_INDEX


@pytest.fixture
def router_without_imports() -> str:
    """Router text with a declaration and export but no import line."""
    return "const router = Router();\nexport default router;\n"


# ---------------------------------------------------------------------------
# Config isolation fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate configuration to a temporary directory.

    Points XDG_CONFIG_HOME and XDG_DATA_HOME below tmp_path, forces the
    XDG code path, clears EXPRESSGEN_* variables and changes the working
    directory to ``tmp_path / "work"``.

    Returns:
        The working directory.
    """
    monkeypatch.setattr("expressgen.config._is_xdg_platform", lambda: True)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.delenv("EXPRESSGEN_PORT", raising=False)

    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work


# ---------------------------------------------------------------------------
# Project fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """A freshly generated project at ``tmp_path / "demo"``."""
    from expressgen.scaffold import create_project

    result = create_project(tmp_path, "demo")
    return result.project_path


# ---------------------------------------------------------------------------
# Output fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def quiet_output() -> OutputManager:
    """Install a quiet PLAIN OutputManager for tests that ignore output."""
    output = OutputManager(format=OutputFormat.PLAIN, quiet=True)
    set_output(output)
    yield output
    reset_output()


# ---------------------------------------------------------------------------
# CLI runner fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()
