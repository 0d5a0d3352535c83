"""Loading the autosync configuration file."""

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from autosync.core.models import Config, ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".autosync.config.json"


def default_config_path() -> Path:
    """Return the per-user config location, ``~/.autosync.config.json``."""
    try:
        home = Path.home()
    except RuntimeError as e:
        raise ConfigError("Can't read user home dir") from e
    return home / CONFIG_FILENAME


def locate_config(path: Optional[Path] = None) -> Path:
    """Check that the config file exists and is a regular file.

    Args:
        path: Config location (default: ``default_config_path()``)

    Returns:
        The config path

    Raises:
        ConfigError: If the path is missing or is not a regular file
    """
    path = Path(path) if path is not None else default_config_path()
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")
    return path


def load_config(path: Path, check_dirs: bool = True) -> Config:
    """Read and parse the JSON config file.

    Args:
        path: Path to the config file
        check_dirs: Whether to require every configured directory to exist

    Returns:
        The parsed Config

    Raises:
        ConfigError: If the file can't be read, isn't valid JSON, lacks a
            required key, or names a directory that doesn't exist
    """
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Can't load config file: {e}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Error parsing config file: {e}") from e

    try:
        config = Config.model_validate(data)
    except ValidationError as exc:
        error_details = [
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        ]
        raise ConfigError(f"Invalid config: {'; '.join(error_details)}") from exc

    if check_dirs:
        missing = [d for d in config.required_dirs() if not d.is_dir()]
        if missing:
            dirs = ', '.join(str(d) for d in missing)
            raise ConfigError(f"Configured directories not found: {dirs}")

    logger.debug("Loaded config from %s", path)
    return config
