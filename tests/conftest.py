"""Pytest configuration and fixtures for the test suite."""

from __future__ import annotations

import pytest

from core.config import HookSettings
from fakes import FakeRunner, ok


@pytest.fixture
def settings(tmp_path):
    """Settings isolated from any .env file, pointing at a temp project."""
    return HookSettings(_env_file=None, project_dir=tmp_path)


@pytest.fixture
def all_tools_runner():
    """Runner where astyle, cargo and make are installed and clean."""
    return FakeRunner(
        installed=["astyle", "cargo", "make"],
        results={
            ("cargo", "fmt", "--version"): ok(["cargo", "fmt", "--version"], "rustfmt 1.7.0-stable\n"),
        },
    )
