"""Locate and read svcdocs.yaml."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import DocsConfig

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Resolve the svcdocs.yaml that applies to a project.

    A file in the project directory shadows the per-user one. A file that
    cannot be read or does not validate is reported and ignored, so
    generation always proceeds with some configuration.
    """

    CONFIG_FILENAME = "svcdocs.yaml"
    USER_CONFIG_DIR = Path.home() / ".svcdocs"

    def __init__(self, project_path: Path | str | None = None):
        self.project_path = Path(project_path) if project_path else Path.cwd()

    @property
    def project_file(self) -> Path:
        return self.project_path / self.CONFIG_FILENAME

    def candidates(self) -> Iterator[Path]:
        """Config locations in lookup order."""
        yield self.project_file
        yield self.USER_CONFIG_DIR / self.CONFIG_FILENAME

    def find(self) -> Path | None:
        return next((path for path in self.candidates() if path.is_file()), None)

    def load(self) -> DocsConfig:
        path = self.find()
        if path is None:
            logger.debug(f"No {self.CONFIG_FILENAME} found, using defaults")
            return DocsConfig()

        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
            config = DocsConfig.model_validate(data or {})
        except (OSError, UnicodeDecodeError, yaml.YAMLError, ValidationError) as e:
            logger.warning(f"Ignoring {path}: {e}")
            return DocsConfig()

        logger.debug(f"Using config {path}")
        return config

    def write_starter(self, force: bool = False) -> Path:
        """Write the default configuration to the project directory.

        Raises:
            FileExistsError: The project already has a config and ``force``
                is not set.
        """
        path = self.project_file
        if path.exists() and not force:
            raise FileExistsError(path)

        path.parent.mkdir(parents=True, exist_ok=True)
        text = yaml.safe_dump(DocsConfig().model_dump(), sort_keys=False)
        path.write_text(text, encoding="utf-8")
        logger.info(f"Wrote {path}")
        return path


def load_config(project_path: Path | str | None = None) -> DocsConfig:
    """Configuration for ``project_path`` (default: the working directory)."""
    return ConfigLoader(project_path).load()
