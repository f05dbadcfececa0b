"""Provenance banner placed at the top of generated documents."""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, Field

from . import __version__
from .config import DocsConfig
from .models import Service


class PackageInfo(BaseModel):
    """Generator package identity shown in the banner."""

    name: str
    version: str
    homepage: str | None = Field(default=None)


DEFAULT_PACKAGE = PackageInfo(name="svcdocs", version=__version__)


def build_banner(
    service: Service,
    package: PackageInfo = DEFAULT_PACKAGE,
    config: DocsConfig | None = None,
) -> Iterator[str]:
    """Yield banner lines (without comment delimiters)."""
    yield f"This file was generated by {package.name}@{package.version}"
    yield ""
    yield "Changes to this file may cause incorrect behavior and will be lost if"
    yield "the documentation is regenerated."
    if service.source_path:
        yield ""
        yield "To make changes to the contents of this file:"
        yield f"1. Edit {service.source_path}"
        yield f"2. Run {package.name} generate {service.source_path}"
        if config is not None and config.output_dir:
            yield f"   (output directory: {config.output_dir})"
    if package.homepage:
        yield ""
        yield f"About {package.name}: {package.homepage}"
