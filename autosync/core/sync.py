"""The sync pipeline: discover, filter, materialize, publish."""

import logging
from typing import Optional

from autosync.core.commands import CommandRunner
from autosync.core.discovery import VaultDiscovery, filter_marked
from autosync.core.materializer import PostMaterializer
from autosync.core.models import Config, SyncResult
from autosync.core.publisher import SitePublisher

logger = logging.getLogger(__name__)


def run_sync(config: Config, runner: Optional[CommandRunner] = None) -> SyncResult:
    """Publish every marked note in the vault.

    The site is only rebuilt and pushed if at least one note was marked.

    Args:
        config: Loaded autosync config
        runner: Command runner shared by every stage

    Returns:
        SyncResult describing what was found and published

    Raises:
        AutosyncError: On the first failure; later notes are not processed
    """
    runner = runner or CommandRunner()
    result = SyncResult()

    discovery = VaultDiscovery(config.src.base_dir, exclude=config.src.exclude)
    result.discovered = discovery.collect()
    result.selected = filter_marked(result.discovered)
    logger.debug(
        "Found %d markdown files, %d marked for publication",
        len(result.discovered), len(result.selected),
    )

    materializer = PostMaterializer(config, runner=runner)
    result.posts = materializer.materialize_all(result.selected)

    if not result.selected:
        logger.info("📉 Nothing to do")
        return result

    SitePublisher(config, runner=runner).publish()
    result.published = True
    return result
