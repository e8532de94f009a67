# linguify:header:start
#
#   project      : Linguify
#   file         : io.py
#   file_relpath : src/linguify/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 The Linguify Authors
#
# linguify:header:end

"""JSON I/O helpers for the Linguify configuration.

The config file location is always passed in by the caller; this module keeps
no process-wide "current config path" state.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

from linguify.config.logging import get_logger
from linguify.config.model import Config
from linguify.constants import CONFIG_FILE_NAME
from linguify.core.errors import LinguifyError
from linguify.core.guards import is_structure

if TYPE_CHECKING:
    from linguify.config.logging import LinguifyLogger

logger: LinguifyLogger = get_logger(__name__)


class ConfigError(LinguifyError):
    """Raised when a config file cannot be read or does not hold a JSON object."""


def default_config_path(cwd: Path | None = None) -> Path:
    """Return the default config file location for ``cwd`` (the process CWD if None)."""
    return (cwd or Path.cwd()) / CONFIG_FILE_NAME


def config_to_json(config: Config) -> str:
    """Render ``config`` as JSON text, indented with ``config.json_indentation``."""
    return json.dumps(config.to_dict(), indent=config.json_indentation, ensure_ascii=False) + "\n"


def load_config(path: Path) -> Config:
    """Load a config file.

    Args:
        path (Path): Path to the JSON config file.

    Returns:
        Config: The parsed config.

    Raises:
        ConfigError: If the file cannot be read, is not valid JSON, or its root
            is not a JSON object.
    """
    logger.debug("Loading config from %s", path)
    try:
        data: Any = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in config file {path}: {exc}") from exc

    if not is_structure(data):
        raise ConfigError(f"Config file {path} must contain a JSON object")
    return Config.from_dict(data)


def save_config(config: Config, path: Path) -> None:
    """Write ``config`` to ``path`` as JSON, replacing any existing file.

    Raises:
        OSError: If the file cannot be written.
    """
    logger.debug("Writing config to %s", path)
    path.write_text(config_to_json(config), encoding="utf-8")
