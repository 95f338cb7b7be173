"""Main scaffolding orchestrator.

Turns an :class:`~hakk.config.EffectiveConfig` and a project name into a
:class:`ScaffoldPlan` (the directories to create and the rendered
``build.sbt``) and applies that plan to the file system.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from jinja2 import TemplateNotFound
from pydantic import BaseModel, ConfigDict, Field

from hakk.config import EffectiveConfig
from hakk.errors import ScaffoldError
from hakk.utils import ensure_dir, write_text

from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# sbt project layout
# ---------------------------------------------------------------------------

BUILD_DESCRIPTOR = "build.sbt"
BUILD_TEMPLATE = "build.sbt.j2"

# Relative to the project root; "" is the root itself.
PROJECT_DIRECTORIES: tuple[str, ...] = (
    "",
    "src",
    "src/main",
    "src/main/scala",
    "src/main/java",
    "src/main/resources",
    "src/test",
    "src/test/scala",
    "src/test/java",
    "src/test/resources",
)


# ---------------------------------------------------------------------------
# Plan model
# ---------------------------------------------------------------------------


class ScaffoldPlan(BaseModel):
    """Everything needed to lay out one project on disk."""

    model_config = ConfigDict(frozen=True)

    root_directory: Path = Field(..., description="Project root, e.g. ./my-project")
    subdirectories: list[Path] = Field(
        ..., description="Directories to create, root first, parents before children"
    )
    build_descriptor_content: str = Field(..., description="Rendered build.sbt")

    @property
    def build_descriptor_path(self) -> Path:
        return self.root_directory / BUILD_DESCRIPTOR


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Scaffolds an sbt project with Scala and Java source roots.

    The generated tree is::

        <name>/
            build.sbt
            src/main/{scala,java,resources}
            src/test/{scala,java,resources}
    """

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    # -- Planning ----------------------------------------------------------

    def plan(
        self,
        project_name: str,
        config: EffectiveConfig,
        base_dir: str | Path = ".",
    ) -> ScaffoldPlan:
        """Compute the directories and ``build.sbt`` content for a project.

        Nothing is written to disk.

        Raises:
            ScaffoldError: If the ``build.sbt`` template cannot be found.
        """
        root = Path(base_dir) / project_name
        subdirectories = [root / rel if rel else root for rel in PROJECT_DIRECTORIES]
        return ScaffoldPlan(
            root_directory=root,
            subdirectories=subdirectories,
            build_descriptor_content=self.render_build_descriptor(project_name, config),
        )

    def render_build_descriptor(self, project_name: str, config: EffectiveConfig) -> str:
        """Render ``build.sbt`` for *project_name*.

        Values are inserted verbatim, without escaping.
        """
        context = {
            "name": project_name,
            "organization": config.organization,
            "version": config.project_version,
            "scala_version": config.scala_version,
            "akka_version": config.akka_version,
        }
        try:
            return self.renderer.render(BUILD_TEMPLATE, context)
        except TemplateNotFound as exc:
            raise ScaffoldError(
                f"Build template {BUILD_TEMPLATE} not found in {self.renderer.template_dir}",
                path=self.renderer.template_dir / BUILD_TEMPLATE,
            ) from exc

    # -- Applying ----------------------------------------------------------

    async def apply(self, plan: ScaffoldPlan) -> Path:
        """Create the planned directories and write ``build.sbt``.

        Existing directories are accepted as they are, so applying the same
        plan twice succeeds.  On failure, whatever was already created is
        left in place.

        Returns:
            The project root.

        Raises:
            ScaffoldError: Naming the directory or file that could not be
                created.
        """
        for directory in plan.subdirectories:
            try:
                await asyncio.to_thread(ensure_dir, directory)
            except (OSError, UnicodeError) as exc:
                raise ScaffoldError(
                    f"Could not create directory {directory}: {exc}", path=directory
                ) from exc

        descriptor = plan.build_descriptor_path
        try:
            await asyncio.to_thread(write_text, descriptor, plan.build_descriptor_content)
        except (OSError, UnicodeError) as exc:
            raise ScaffoldError(f"Could not write {descriptor}: {exc}", path=descriptor) from exc

        return plan.root_directory

    async def generate(
        self,
        project_name: str,
        config: EffectiveConfig,
        base_dir: str | Path = ".",
    ) -> Path:
        """Plan and apply in one step.  Returns the project root."""
        return await self.apply(self.plan(project_name, config, base_dir))
