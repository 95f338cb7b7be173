"""Shared pytest fixtures for the hakk test suite.

Provides reusable fixtures for:
- A defaults file location inside a temporary directory
- A ConfigStore bound to that location
- Sample defaults file contents (valid and malformed)
- A working directory that is restored after each test
"""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Callable

import pytest

from hakk.config import EffectiveConfig
from hakk.store import ConfigStore


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    """Location of a (not yet existing) defaults file."""
    return tmp_path / "home" / ".hakk"


@pytest.fixture
def store(config_path: Path) -> ConfigStore:
    """A ConfigStore that reads and writes ``config_path``."""
    config_path.parent.mkdir(parents=True, exist_ok=True)
    return ConfigStore(config_path)


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty working directory; the original cwd is restored afterwards."""
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work


# ---------------------------------------------------------------------------
# Defaults file contents
# ---------------------------------------------------------------------------

@pytest.fixture
def write_defaults(config_path: Path) -> Callable[[str], Path]:
    """Return a helper that writes dedented text to the defaults file."""

    def _write(content: str) -> Path:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(textwrap.dedent(content).lstrip(), encoding="utf-8")
        return config_path

    return _write


@pytest.fixture
def full_defaults_text() -> str:
    return """
        [metadata]
        organization = "com.example"

        [versions]
        scala = "2.11.8"
        akka = "2.4.1"
    """


@pytest.fixture
def missing_akka_text() -> str:
    return """
        [metadata]
        organization = "com.example"

        [versions]
        scala = "2.11.8"
    """


# ---------------------------------------------------------------------------
# Configs
# ---------------------------------------------------------------------------

@pytest.fixture
def effective_config() -> EffectiveConfig:
    """An EffectiveConfig with every field distinct."""
    return EffectiveConfig(
        organization="com.example",
        scala_version="2.11.8",
        akka_version="2.4.1",
        project_version="1.0.0",
    )
