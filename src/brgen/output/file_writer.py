"""
File writer for generated BR sources.

Places ``BR.java`` under the directory matching its package and leaves the
file untouched when the content is already current, so timestamps only move
when the property set does.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from brgen.writer.br_writer import BR_CLASS_NAME

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WriteResult:
    """Outcome of persisting one generated file."""

    path: Path
    changed: bool


class BRFileWriter:
    """Writes BR sources below an output root."""

    def __init__(self, output_dir: Path):
        self.output_dir = Path(output_dir)

    def target_path(self, package_name: str) -> Path:
        """Return ``<output_dir>/<package as dirs>/BR.java``."""
        package_dir = self.output_dir.joinpath(*package_name.split("."))
        return package_dir / f"{BR_CLASS_NAME}.java"

    def write(self, package_name: str, source: str) -> WriteResult:
        path = self.target_path(package_name)

        if path.exists() and path.read_bytes() == source.encode("utf-8"):
            logger.debug(f"{path} is up to date")
            return WriteResult(path=path, changed=False)

        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(source)

        logger.info(f"Wrote {path}")
        return WriteResult(path=path, changed=True)
