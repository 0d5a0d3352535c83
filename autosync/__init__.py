"""
autosync - Publish marked Obsidian notes to a Hugo blog

Scans a vault for markdown notes whose filename carries the ``#pub#``
marker and, for each one:
- Scaffolds a Hugo post with ``hugo new``
- Copies the note into the posts directory
- Renames the note to drop the marker

Then rebuilds the site and commits and pushes the pages and project repos.
"""

from autosync.core.models import AutosyncError, CommandError, Config, ConfigError, MaterializedPost, MaterializeError, SyncResult
from autosync.core.config import load_config, locate_config
from autosync.core.commands import CommandRunner
from autosync.core.discovery import VaultDiscovery
from autosync.core.materializer import PostMaterializer
from autosync.core.publisher import SitePublisher
from autosync.core.sync import run_sync

__version__ = "0.1.0"

__all__ = [
    "AutosyncError",
    "CommandError",
    "Config",
    "ConfigError",
    "MaterializedPost",
    "MaterializeError",
    "SyncResult",
    "load_config",
    "locate_config",
    "CommandRunner",
    "VaultDiscovery",
    "PostMaterializer",
    "SitePublisher",
    "run_sync",
]
