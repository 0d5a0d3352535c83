"""Command-line entry point for autosync."""

import logging
import os
from pathlib import Path
from typing import Optional

from autosync.core.config import load_config, locate_config
from autosync.core.models import AutosyncError
from autosync.core.sync import run_sync

logger = logging.getLogger("autosync")

LOG_FORMAT = "%(asctime)s %(message)s"
LOG_DATE_FORMAT = "%Y/%m/%d %H:%M:%S"


def setup_logging(level: Optional[str] = None) -> None:
    """Configure console logging in the ``YYYY/MM/DD HH:MM:SS message`` layout."""
    level = (level or os.environ.get("AUTOSYNC_LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )


def main(config_path: Optional[Path] = None) -> int:
    """Run a full sync using ``~/.autosync.config.json``.

    Returns:
        0 on success (with or without posts to publish), 1 on failure
    """
    setup_logging()
    try:
        config = load_config(locate_config(config_path))
        result = run_sync(config)
    except AutosyncError as e:
        logger.error("❌ %s", e)
        return 1

    if result.published:
        logger.info("✅ Published %d post(s)", len(result.posts))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
