"""Core components for autosync."""

from autosync.core.models import (
    AutosyncError,
    BlogConfig,
    CommandError,
    Config,
    ConfigError,
    FrontmatterConfig,
    MaterializedPost,
    MaterializeError,
    SourceConfig,
    SyncResult,
)
from autosync.core.config import default_config_path, load_config, locate_config
from autosync.core.commands import CommandRunner
from autosync.core.discovery import (
    VaultDiscovery,
    filter_marked,
    is_markdown_name,
    is_marked_for_publication,
    strip_marker,
)
from autosync.core.materializer import PostMaterializer
from autosync.core.publisher import SitePublisher
from autosync.core.sync import run_sync

__all__ = [
    "AutosyncError",
    "BlogConfig",
    "CommandError",
    "Config",
    "ConfigError",
    "FrontmatterConfig",
    "MaterializedPost",
    "MaterializeError",
    "SourceConfig",
    "SyncResult",
    "default_config_path",
    "load_config",
    "locate_config",
    "CommandRunner",
    "VaultDiscovery",
    "filter_marked",
    "is_markdown_name",
    "is_marked_for_publication",
    "strip_marker",
    "PostMaterializer",
    "SitePublisher",
    "run_sync",
]
