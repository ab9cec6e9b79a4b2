"""Shared test fixtures for gallery-cli tests.

Provides CliRunner fixtures and gallery.yaml helpers for testing CLI commands.
"""

from __future__ import annotations

from collections.abc import Generator
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from click.testing import CliRunner
import pytest
import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

GALLERY_YAML_FILENAME = "gallery.yaml"


@pytest.fixture(autouse=True)
def isolate_native_columns(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's GALLERY_NATIVE_COLUMNS out of the tests."""
    monkeypatch.delenv("GALLERY_NATIVE_COLUMNS", raising=False)


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Undo logging configuration applied by the cli group callback."""
    root = logging.getLogger()
    level = root.level
    yield
    structlog.reset_defaults()
    root.setLevel(level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click test runner.

    Returns:
        CliRunner instance for testing CLI commands.
    """
    return CliRunner()


@pytest.fixture
def isolated_runner(cli_runner: CliRunner) -> Generator[CliRunner, None, None]:
    """Create a Click test runner with an isolated filesystem.

    Yields:
        CliRunner instance with isolated filesystem.
    """
    with cli_runner.isolated_filesystem():
        yield cli_runner


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def valid_gallery_yaml(fixtures_dir: Path, tmp_path: Path) -> Path:
    """Copy the valid gallery fixture to tmp_path as gallery.yaml.

    Returns:
        Path to the copied gallery.yaml.
    """
    path = tmp_path / GALLERY_YAML_FILENAME
    path.write_text((fixtures_dir / "valid_gallery.yaml").read_text())
    return path


@pytest.fixture
def invalid_gallery_yaml(fixtures_dir: Path) -> Path:
    """Return the path to the invalid gallery fixture."""
    return fixtures_dir / "invalid_gallery.yaml"


@pytest.fixture
def create_gallery_yaml(isolated_runner: CliRunner) -> Callable[..., Path]:
    """Factory fixture to create gallery.yaml files with custom content.

    Args:
        isolated_runner: CliRunner with isolated filesystem.

    Returns:
        Function that writes the given content and returns its path.
    """

    def _create(content: str, filename: str = GALLERY_YAML_FILENAME) -> Path:
        path = Path(filename)
        path.write_text(content)
        return path

    return _create
