"""Integration tests for the install-then-generate flow.

These tests drive ``hakk.cli.main`` end-to-end against a temporary home and
working directory and inspect what ends up on disk.  The git test runs the
real ``git`` binary and is skipped when it is not installed.
"""

from __future__ import annotations

import os
import shutil
import tomllib
from pathlib import Path

import pytest

from hakk.cli import main
from hakk.store import ConfigStore


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------

@pytest.mark.integration
class TestInstallThenGenerate:
    """Defaults saved with --install are picked up by the next run."""

    def test_install_then_generate(self, store: ConfigStore, config_path: Path, workdir: Path) -> None:
        assert main(["--install", "--org", "acme", "--scala", "2.12.1"], store=store) == 0

        saved = tomllib.loads(config_path.read_text(encoding="utf-8"))
        assert saved == {
            "metadata": {"organization": "acme"},
            "versions": {"scala": "2.12.1", "akka": "2.4.0"},
        }

        assert main(["shop", "--no-git", "--ver", "0.2.0"], store=store) == 0
        build = (workdir / "shop" / "build.sbt").read_text(encoding="utf-8")
        assert 'name := "shop"' in build
        assert 'organization := "acme"' in build
        assert 'version := "0.2.0"' in build
        assert 'scalaVersion := "2.12.1"' in build
        assert '"2.4.0"' in build

    def test_reinstall_without_org_drops_it(
        self, store: ConfigStore, config_path: Path, workdir: Path
    ) -> None:
        main(["--install", "--org", "acme"], store=store)
        main(["--install", "--akka", "2.5.0"], store=store)

        saved = tomllib.loads(config_path.read_text(encoding="utf-8"))
        assert "metadata" not in saved
        assert saved["versions"] == {"scala": "2.11.7", "akka": "2.5.0"}

        assert main(["shop", "--no-git"], store=store) == 0
        build = (workdir / "shop" / "build.sbt").read_text(encoding="utf-8")
        assert 'organization := "shop"' in build

    def test_regenerate_over_existing_project(
        self, store: ConfigStore, workdir: Path
    ) -> None:
        assert main(["shop", "--no-git"], store=store) == 0
        # main() leaves the process inside the project root.
        os.chdir(workdir)
        assert main(["shop", "--no-git", "--ver", "2.0"], store=store) == 0
        build = (workdir / "shop" / "build.sbt").read_text(encoding="utf-8")
        assert 'version := "2.0"' in build


@pytest.mark.integration
@pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")
class TestGitRepository:
    def test_generate_creates_git_repo(self, store: ConfigStore, workdir: Path) -> None:
        assert main(["repo-project"], store=store) == 0
        root = workdir / "repo-project"
        assert (root / ".git").is_dir()
        assert (root / "build.sbt").is_file()
