"""Pytest configuration and shared fixtures for the mdsnow test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import logging
import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings
from utils import MARKDOWN_SAMPLES

from mdsnow.alerts import merge_alerts

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture
def markdown_samples() -> dict:
    """Provide the shared Markdown sample catalog."""
    return MARKDOWN_SAMPLES


@pytest.fixture
def builtin_alerts():
    """Provide the merged built-in alert catalog."""
    return merge_alerts()


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch) -> Path:
    """Run the test inside an empty directory with no config file in reach.

    The home directory and the ``MDSNOW_CONFIG`` variable are redirected as
    well, so config discovery cannot pick up files from the developer machine.
    """
    workdir = tmp_path / "work"
    home = tmp_path / "home"
    workdir.mkdir()
    home.mkdir()
    monkeypatch.chdir(workdir)
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: home))
    monkeypatch.delenv("MDSNOW_CONFIG", raising=False)
    return workdir


@pytest.fixture(autouse=True)
def _restore_package_logging():
    """Restore the ``mdsnow`` logger after tests that configure logging."""
    package_logger = logging.getLogger("mdsnow")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield
    for handler in package_logger.handlers:
        if handler not in handlers:
            handler.close()
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
