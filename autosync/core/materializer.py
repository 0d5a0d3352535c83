"""Copying marked notes into the Hugo posts directory."""

import logging
import os
from pathlib import Path
from typing import List, Optional, Sequence

from autosync.core.commands import CommandRunner
from autosync.core.discovery import strip_marker
from autosync.core.models import CommandError, Config, MaterializedPost, MaterializeError
from autosync.transforms.frontmatter import ensure_frontmatter

logger = logging.getLogger(__name__)

# Write and execute for owner and group, no read bits.
DEFAULT_POST_MODE = 0o330


class PostMaterializer:
    """Turns each marked note into a Hugo post and clears its marker.

    For every note: ``hugo new posts/<name>`` scaffolds the post, the note's
    content replaces the scaffold, and the note is renamed without ``#pub#``.
    """

    hugo_command = "hugo"
    posts_section = "posts"

    def __init__(
        self,
        config: Config,
        runner: Optional[CommandRunner] = None,
        file_mode: int = DEFAULT_POST_MODE,
    ):
        """Initialize PostMaterializer.

        Args:
            config: Loaded autosync config
            runner: Command runner used for ``hugo new``
            file_mode: Permission bits for newly created post files
        """
        self.config = config
        self.runner = runner or CommandRunner()
        self.file_mode = file_mode

    def materialize_all(self, sources: Sequence[Path]) -> List[MaterializedPost]:
        """Materialize notes in order, stopping at the first failure."""
        return [self.materialize(source) for source in sources]

    def materialize(self, source: Path) -> MaterializedPost:
        """Materialize a single marked note.

        Args:
            source: Path to the note, still carrying its marker

        Returns:
            MaterializedPost describing where the note went

        Raises:
            CommandError: If ``hugo new`` fails
            MaterializeError: If the note can't be read or the post can't be written
        """
        source = Path(source)
        published_name = strip_marker(source.name)
        published_source = source.with_name(published_name)
        destination = self.config.blog.posts_dir / published_name
        logger.info("%s", published_source)

        def remove_destination(_: CommandError) -> None:
            self._remove(destination)

        self.runner.run(
            self.hugo_command,
            ["new", f"{self.posts_section}{os.sep}{published_name}"],
            cwd=self.config.blog.hugo_build_dir,
            on_error=remove_destination,
        )

        try:
            data = source.read_bytes()
        except OSError as e:
            self._remove(destination)
            raise MaterializeError(source, f"An error occurred while reading source file ({e})") from e

        if self.config.frontmatter.enabled:
            try:
                data = ensure_frontmatter(
                    data,
                    Path(published_name).stem,
                    author=self.config.frontmatter.author,
                )
            except UnicodeDecodeError as e:
                self._remove(destination)
                raise MaterializeError(source, "Source file is not valid UTF-8") from e

        try:
            self._write(destination, data)
        except OSError as e:
            self._remove(destination)
            raise MaterializeError(destination, f"An error occurred while writing post file ({e})") from e

        renamed = True
        try:
            source.rename(published_source)
        except OSError as e:
            renamed = False
            logger.warning("⚠️ Could not rename %s to %s: %s", source, published_source, e)

        return MaterializedPost(
            source=source,
            published_source=published_source,
            destination=destination,
            renamed=renamed,
        )

    def _write(self, destination: Path, data: bytes) -> None:
        # Mode only applies when the file is created; an existing scaffold keeps its bits.
        fd = os.open(destination, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, self.file_mode)
        with os.fdopen(fd, "wb") as f:
            f.write(data)

    def _remove(self, destination: Path) -> None:
        try:
            destination.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning("⚠️ Could not remove %s: %s", destination, e)
