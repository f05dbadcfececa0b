"""svcdocs - Markdown reference documentation for service interfaces."""

__version__ = "0.1.0"

from .generator import DocFile, generate_docs

__all__ = ["DocFile", "generate_docs", "__version__"]
