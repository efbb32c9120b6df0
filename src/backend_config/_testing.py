"""Test utilities for backend-config."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from ._loader import DEFAULT_CONFIG_DIR, locate
from ._secrets import PASSWORDS_FILE


def api_server(port: int = 8080, host: str = "localhost", scheme: str = "http") -> dict[str, Any]:
    """Raw ``apiServer``-shaped section, as it would appear in a document."""
    return {"port": port, "publicHost": host, "publicPort": port, "publicScheme": scheme}


def write_config_tree(
    root: Path,
    documents: dict[str, dict[str, Any]],
    *,
    passwords: dict[str, dict[str, str]] | None = None,
) -> Path:
    """Write one YAML document per run mode (and optionally a passwords file).

    Returns the created configuration directory, suitable as ``config_dir``::

        config_dir = write_config_tree(tmp_path, {"development": {"apiServer": api_server()}})
        cfg = load("development", "default", {}, config_dir=config_dir)
    """
    config_dir = root / DEFAULT_CONFIG_DIR
    config_dir.mkdir(parents=True, exist_ok=True)
    for run_mode, document in documents.items():
        locate(run_mode, config_dir).write_text(yaml.safe_dump(document), encoding="utf-8")
    if passwords is not None:
        (config_dir / PASSWORDS_FILE).write_text(yaml.safe_dump(passwords), encoding="utf-8")
    return config_dir
