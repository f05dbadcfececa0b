"""Write rendered documents to disk."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from ..generator import DocFile

logger = logging.getLogger(__name__)


class DocsWriter:
    """Write rendered documents below an output directory."""

    def write(self, files: Iterable[DocFile], output_dir: Path | str) -> list[Path]:
        """Write every document, returning the written paths."""
        output_dir = Path(output_dir)
        written = []
        for doc in files:
            path = output_dir.joinpath(*doc.path)
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                f.write(doc.contents)
            logger.info(f"Wrote {path}")
            written.append(path)
        return written
