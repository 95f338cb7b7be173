"""Persistence of hakk defaults in ``~/.hakk``.

The file is TOML with an optional ``[metadata]`` table holding the
organization and a ``[versions]`` table holding the Scala and Akka versions.
Reading is forgiving: a missing file means "no defaults", a malformed one is
reported and then ignored.  Writing is strict and raises
:class:`~hakk.errors.ConfigStoreError` on any failure.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

import tomli_w
from pydantic import ValidationError

from hakk.config import PersistedConfig
from hakk.errors import ConfigStoreError
from hakk.utils import console, print_raw, print_warning

CONFIG_FILENAME = ".hakk"


class ConfigStore:
    """Loads and saves :class:`PersistedConfig` at a fixed path.

    Args:
        path: Location of the defaults file.  Defaults to ``~/.hakk``; the
            home directory is looked up lazily so that a missing home only
            matters when the file is actually needed.
    """

    def __init__(self, path: str | Path | None = None) -> None:
        self._path = Path(path) if path is not None else None

    @property
    def path(self) -> Path:
        """The defaults file location.

        Raises:
            ConfigStoreError: If no explicit path was given and the home
                directory cannot be determined.
        """
        if self._path is None:
            try:
                home = Path.home()
            except (RuntimeError, KeyError) as exc:
                raise ConfigStoreError("Cannot locate your home directory.") from exc
            self._path = home / CONFIG_FILENAME
        return self._path

    # -- Reading -----------------------------------------------------------

    def load(self) -> PersistedConfig | None:
        """Read the defaults file.

        Returns ``None`` when the file does not exist or cannot be read.  When
        the file exists but is not valid TOML, or does not provide both
        ``versions.scala`` and ``versions.akka`` as strings, its contents are
        printed with a warning and ``None`` is returned; nothing from such a
        file is used, not even the organization.
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except (ConfigStoreError, OSError, UnicodeDecodeError):
            return None

        try:
            config = PersistedConfig.from_toml(tomllib.loads(raw))
        except (tomllib.TOMLDecodeError, ValidationError):
            print_warning("Found defaults file but could not parse contents!")
            console.print("Contents were:")
            print_raw(raw)
            return None

        return config

    # -- Writing -----------------------------------------------------------

    def render(self, config: PersistedConfig) -> str:
        """Return the file content :meth:`save` would write for *config*.

        The ``[metadata]`` table is left out entirely when no organization is
        set; ``[versions]`` is always present.
        """
        document: dict[str, Any] = {}
        if config.organization:
            document["metadata"] = {"organization": config.organization}
        document["versions"] = {
            "scala": config.scala_version,
            "akka": config.akka_version,
        }
        return tomli_w.dumps(document)

    def save(self, config: PersistedConfig) -> Path:
        """Overwrite the defaults file with *config* and echo what was written.

        Returns:
            The path that was written.

        Raises:
            ConfigStoreError: If the home directory is unknown or the file
                cannot be created or written.
        """
        target = self.path
        content = self.render(config)
        try:
            target.write_text(content, encoding="utf-8")
        except (OSError, UnicodeError) as exc:
            raise ConfigStoreError(f"Could not write to {target}: {exc}", path=target) from exc

        console.print(f"Wrote to file {target}:", markup=False, highlight=False, soft_wrap=True)
        print_raw(content)
        return target
