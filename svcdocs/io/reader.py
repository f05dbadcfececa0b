"""Read service IR documents."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ..models import Service

logger = logging.getLogger(__name__)


class ServiceLoadError(Exception):
    """IR document could not be read or validated."""

    def __init__(self, path: Path | None, message: str):
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


class ServiceLoader:
    """Read and validate service IR files (YAML or JSON)."""

    def load(self, path: Path | str) -> Service:
        """Read and parse a single IR file."""
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (yaml.YAMLError, OSError, ValueError) as e:
            raise ServiceLoadError(path, f"failed to read: {e}") from e

        if not isinstance(data, dict):
            raise ServiceLoadError(path, "expected a mapping at the top level")

        if not data.get("source_path"):
            data = {**data, "source_path": str(path)}

        service = self.parse(data, path)
        logger.info(
            f"Loaded service {service.title} from {path} "
            f"({len(service.interfaces)} interfaces, {len(service.types)} types)"
        )
        return service

    def parse(self, data: dict[str, Any], path: Path | None = None) -> Service:
        """Validate an already-parsed IR mapping."""
        try:
            return Service.model_validate(data)
        except ValidationError as e:
            raise ServiceLoadError(path, f"invalid service IR: {e}") from e
