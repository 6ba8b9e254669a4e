"""
Pytest configuration and shared fixtures for goxplatforms tests.
"""

import logging

import pytest
from pathlib import Path


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture
def sample_config_yaml(tmp_path: Path) -> Path:
    """Create sample goxplatforms.yaml configuration."""
    config_content = """version: 1
go_version: go1.9.2

targets:
  os: [linux, "!plan9"]
  arch: amd64 arm64
"""
    config_file = tmp_path / "goxplatforms.yaml"
    config_file.write_text(config_content)
    return config_file


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo logging.basicConfig(force=True) calls made by the CLI."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def in_tmp_cwd(tmp_path: Path, monkeypatch) -> Path:
    """Run the test with the temporary directory as working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
