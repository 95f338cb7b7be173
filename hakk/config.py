"""hakk configuration models and precedence rules.

Three layers feed the configuration used for one invocation, highest
precedence first:

1. Values passed on the command line (:class:`ConfigOverrides`).
2. Values read from the per-user defaults file (:class:`PersistedConfig`).
3. The built-in fallback constants below.

Each field is resolved independently.  The resolver functions never touch the
file system; the caller loads the persisted file once and passes it in.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr

DEFAULT_SCALA_VERSION = "2.11.7"
DEFAULT_AKKA_VERSION = "2.4.0"
DEFAULT_PROJECT_VERSION = "0.1-SNAPSHOT"


class PersistedConfig(BaseModel):
    """Defaults stored in ``~/.hakk``.

    Both versions are required; a file that lacks either is rejected as a
    whole.  ``organization`` is optional and, when absent, is derived from the
    project name at generation time.
    """

    model_config = ConfigDict(frozen=True)

    organization: StrictStr | None = Field(default=None)
    scala_version: StrictStr
    akka_version: StrictStr

    @classmethod
    def from_toml(cls, data: dict[str, Any]) -> "PersistedConfig":
        """Build a ``PersistedConfig`` from a parsed TOML document.

        Reads ``versions.scala`` and ``versions.akka`` (both must be strings)
        and ``metadata.organization`` (ignored unless it is a non-empty string).

        Raises:
            pydantic.ValidationError: If either version is missing or not a
                string.
        """
        versions = data.get("versions")
        if not isinstance(versions, dict):
            versions = {}
        metadata = data.get("metadata")
        organization = metadata.get("organization") if isinstance(metadata, dict) else None
        if not isinstance(organization, str) or not organization:
            organization = None

        return cls.model_validate(
            {
                "organization": organization,
                "scala_version": versions.get("scala"),
                "akka_version": versions.get("akka"),
            }
        )


class ConfigOverrides(BaseModel):
    """Values supplied explicitly on this invocation's command line."""

    organization: str | None = None
    project_version: str | None = None
    scala_version: str | None = None
    akka_version: str | None = None


class EffectiveConfig(BaseModel):
    """Fully resolved configuration for one project generation run."""

    model_config = ConfigDict(frozen=True)

    organization: str = Field(..., min_length=1)
    scala_version: str
    akka_version: str
    project_version: str

    def as_dict(self) -> dict[str, str]:
        """Return a ``{label: value}`` mapping for display."""
        return {
            "organization": self.organization,
            "version": self.project_version,
            "scala": self.scala_version,
            "akka": self.akka_version,
        }


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------


def _first(*candidates: str | None) -> str | None:
    for value in candidates:
        if value is not None:
            return value
    return None


def _resolve_versions(
    persisted: PersistedConfig | None, overrides: ConfigOverrides
) -> tuple[str, str]:
    scala = _first(
        overrides.scala_version,
        persisted.scala_version if persisted else None,
        DEFAULT_SCALA_VERSION,
    )
    akka = _first(
        overrides.akka_version,
        persisted.akka_version if persisted else None,
        DEFAULT_AKKA_VERSION,
    )
    return scala, akka


def resolve_install(
    persisted: PersistedConfig | None, overrides: ConfigOverrides
) -> PersistedConfig:
    """Compute the defaults to write in install mode.

    Versions follow the usual precedence.  The organization is taken from
    the override alone: there is no project name to fall back to, and an
    organization stored previously is not carried over.  An empty
    override is stored as no organization at all.

    Raises:
        ValueError: If a project version override is present; install mode
            has no field to store it in.
    """
    if overrides.project_version is not None:
        raise ValueError("A project version cannot be stored as a default.")

    scala, akka = _resolve_versions(persisted, overrides)
    return PersistedConfig(
        organization=overrides.organization or None,
        scala_version=scala,
        akka_version=akka,
    )


def resolve_generate(
    project_name: str,
    persisted: PersistedConfig | None,
    overrides: ConfigOverrides,
) -> EffectiveConfig:
    """Compute the configuration used to generate *project_name*.

    Organization falls back to the project name itself when neither an
    override nor a persisted value exists.  An empty organization counts as
    absent.
    """
    scala, akka = _resolve_versions(persisted, overrides)
    organization = _first(
        overrides.organization or None,
        (persisted.organization or None) if persisted else None,
        project_name,
    )
    project_version = _first(overrides.project_version, DEFAULT_PROJECT_VERSION)
    return EffectiveConfig(
        organization=organization,
        scala_version=scala,
        akka_version=akka,
        project_version=project_version,
    )
