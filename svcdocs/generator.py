"""Generate one documentation file per service interface."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from functools import partial

from .banner import DEFAULT_PACKAGE, PackageInfo, build_banner
from .config import DocsConfig
from .docs import DocumentRenderer, InterfaceClosure
from .models import Interface, Service
from .naming import build_docs_filepath

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DocFile:
    """Rendered document and its path segments relative to the output dir."""

    path: list[str]
    contents: str


class DocsGenerator:
    """Run the closure resolver and renderer for every interface.

    Interfaces share nothing but the read-only service, so they can be
    rendered on a thread pool when ``settings.max_workers`` is above 1.
    """

    def __init__(
        self,
        service: Service,
        config: DocsConfig | None = None,
        package: PackageInfo = DEFAULT_PACKAGE,
    ):
        self.service = service
        self.config = config or DocsConfig()
        self.renderer = DocumentRenderer(
            service,
            self.config,
            banner=partial(build_banner, package=package, config=self.config),
        )

    def build(self) -> list[DocFile]:
        """Render all interfaces, in declared order."""
        interfaces = self.service.interfaces
        max_workers = self.config.settings.max_workers

        if max_workers <= 1 or len(interfaces) <= 1:
            files = [self.build_interface(interface) for interface in interfaces]
        else:
            with ThreadPoolExecutor(max_workers=max_workers) as executor:
                # map() keeps input order regardless of completion order
                files = list(executor.map(self.build_interface, interfaces))

        logger.info(f"Rendered {len(files)} document(s) for {self.service.title}")
        return files

    def build_interface(self, interface: Interface) -> DocFile:
        closure = InterfaceClosure(self.service, interface)
        return DocFile(
            path=build_docs_filepath(interface, self.service),
            contents=self.renderer.render_text(interface, closure),
        )


def generate_docs(service: Service, config: DocsConfig | None = None) -> list[DocFile]:
    """Render documentation for every interface of a service."""
    return DocsGenerator(service, config).build()
