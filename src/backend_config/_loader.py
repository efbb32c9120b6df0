"""Config loader: maps a run mode to its document and decodes it.

Run mode ``m`` lives at ``<config_dir>/<m>.yaml``; ``config_dir`` defaults
to ``config`` relative to the working directory.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping

from ._document import read_document
from ._root import RootConfig, load_from_document
from ._types import ConfigFileNotFoundError, InvalidValueError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = "config"
DOCUMENT_SUFFIX = ".yaml"


def locate(run_mode: str, config_dir: str | Path = DEFAULT_CONFIG_DIR) -> Path:
    """Return the document path for *run_mode*. Does not touch the filesystem."""
    if not run_mode or "/" in run_mode or "\\" in run_mode or run_mode in (".", ".."):
        raise InvalidValueError("runMode", "loader", f"{run_mode!r} is not a valid run mode")
    return Path(config_dir) / f"{run_mode}{DOCUMENT_SUFFIX}"


def is_available(run_mode: str, config_dir: str | Path = DEFAULT_CONFIG_DIR) -> bool:
    """Report whether a document exists for *run_mode*, without reading it."""
    return locate(run_mode, config_dir).is_file()


def load(
    run_mode: str,
    server_id: str,
    secrets: Mapping[str, str],
    config_dir: str | Path = DEFAULT_CONFIG_DIR,
) -> RootConfig:
    """Read, parse and validate the configuration for *run_mode*.

    Any ``ConfigError`` raised while reading or decoding propagates
    unchanged; there is no partial configuration.
    """
    path = locate(run_mode, config_dir)
    if not path.is_file():
        raise ConfigFileNotFoundError(path, run_mode)

    logger.debug("Loading %s configuration from %s", run_mode, path)
    document = read_document(path)
    config = load_from_document(run_mode, server_id, secrets, document)
    logger.info(
        "Loaded %s configuration for server %s (%s)",
        run_mode,
        server_id,
        ", ".join(role.value for role, _ in config.servers()),
    )
    return config
