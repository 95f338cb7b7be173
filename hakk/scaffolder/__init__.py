"""hakk scaffolder -- lays out a new sbt project on disk.

Quick usage::

    from hakk.config import ConfigOverrides, resolve_generate
    from hakk.scaffolder import ProjectGenerator

    config = resolve_generate("my-project", None, ConfigOverrides())
    generator = ProjectGenerator()
    project_path = await generator.generate("my-project", config)
"""

from hakk.scaffolder.generator import ProjectGenerator, ScaffoldPlan
from hakk.scaffolder.templates import TemplateRenderer

__all__ = [
    "ProjectGenerator",
    "ScaffoldPlan",
    "TemplateRenderer",
]
