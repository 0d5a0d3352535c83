"""Vault discovery: finding markdown notes and the ones marked for publishing."""

import logging
import os
import stat
from pathlib import Path
from typing import Iterable, List, Optional

logger = logging.getLogger(__name__)

MARKDOWN_SEGMENT = "md"
MARKER_SEGMENT = "pub"
PUBLICATION_MARKER = "#pub#"


def is_markdown_name(name: str) -> bool:
    """Check whether splitting a filename on dots yields an ``md`` segment.

    ``note.md`` and ``a.md.bak`` match, ``note.mdx`` and a bare ``md`` do not.
    """
    segments = name.split(".")
    return len(segments) > 1 and MARKDOWN_SEGMENT in segments


def is_marked_for_publication(name: str) -> bool:
    """Check whether a filename carries the ``#pub#`` publication marker.

    Any ``#``-delimited segment equal to ``pub`` counts, so ``pub#x.md``
    and ``x#pub`` match too.
    """
    return MARKER_SEGMENT in name.split("#")


def strip_marker(name: str) -> str:
    """Remove the first ``#pub#`` from a filename."""
    return name.replace(PUBLICATION_MARKER, "", 1)


def filter_marked(files: Iterable[Path]) -> List[Path]:
    """Keep only the files whose name is marked for publication, in order."""
    return [f for f in files if is_marked_for_publication(f.name)]


class VaultDiscovery:
    """Collects markdown files from a vault, skipping excluded names."""

    def __init__(self, base_dir: Path, exclude: Optional[Iterable[str]] = None):
        """Initialize VaultDiscovery.

        Args:
            base_dir: Root of the note vault
            exclude: Base names skipped at any depth (files or directories)
        """
        self.base_dir = Path(base_dir)
        self.exclude = frozenset(exclude or [])

    def collect(self) -> List[Path]:
        """Walk the vault depth-first and return every markdown file.

        Children are visited in name order so repeated runs over the same
        tree give the same sequence.
        """
        files: List[Path] = []
        self._walk(self.base_dir, files)
        return files

    def _walk(self, entry: Path, files: List[Path]) -> None:
        try:
            mode = os.stat(entry).st_mode
        except OSError as e:
            logger.debug("Skipping %s: %s", entry, e)
            return

        if stat.S_ISDIR(mode):
            try:
                names = sorted(os.listdir(entry))
            except OSError as e:
                logger.debug("Skipping unreadable directory %s: %s", entry, e)
                return
            for name in names:
                if name in self.exclude:
                    continue
                self._walk(entry / name, files)
        elif is_markdown_name(entry.name):
            files.append(entry)
