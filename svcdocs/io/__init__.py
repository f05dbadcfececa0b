"""Reading service IR files and writing rendered documents."""

from .reader import ServiceLoader, ServiceLoadError
from .writer import DocsWriter

__all__ = [
    "DocsWriter",
    "ServiceLoadError",
    "ServiceLoader",
]
