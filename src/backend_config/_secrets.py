"""Secret store sources.

The decoders accept any ``Mapping[str, str]``. ``load_secrets`` builds one
from the conventional sources, in increasing precedence:

1. ``shared`` section of ``<config_dir>/passwords.yaml``
2. ``<run_mode>`` section of the same file
3. Environment variables named ``BACKEND_SECRET_<KEY>`` (key upper-cased)
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Mapping

from ._casters import STR, ensure_mapping, read_field
from ._document import read_document
from ._sections import CACHE_SECRET, DATABASE_SECRET, LEGACY_CACHE_SECRET, SERVICE_SECRET

logger = logging.getLogger(__name__)

SecretStore = Mapping[str, str]

PASSWORDS_FILE = "passwords.yaml"
SHARED_SECTION = "shared"
ENV_PREFIX = "BACKEND_SECRET"

WELL_KNOWN_SECRETS = (DATABASE_SECRET, CACHE_SECRET, LEGACY_CACHE_SECRET, SERVICE_SECRET)


def env_name(key: str) -> str:
    """Environment variable consulted for secret *key*."""
    return f"{ENV_PREFIX}_{key}".upper()


def _read_section(document: Mapping[str, Any], name: str, label: str) -> dict[str, str]:
    raw = document.get(name)
    if raw is None:
        return {}
    section = ensure_mapping(raw, label)
    return {
        str(key): read_field(section, key, label, STR)
        for key, value in section.items()
        if value is not None
    }


def load_secrets(
    run_mode: str,
    config_dir: str | Path = "config",
    environ: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Materialize the secret store for *run_mode*.

    A missing passwords file is not an error; only environment values are
    returned then. Keys found in the file are also looked up in the
    environment, as are the well-known keys. An environment variable set to
    the empty string overrides the file too, which blanks that secret: the
    decoders treat empty secrets as absent.
    """
    environ = os.environ if environ is None else environ
    path = Path(config_dir) / PASSWORDS_FILE

    secrets: dict[str, str] = {}
    if path.exists():
        document = read_document(path)
        secrets.update(_read_section(document, SHARED_SECTION, f"passwords.{SHARED_SECTION}"))
        secrets.update(_read_section(document, run_mode, f"passwords.{run_mode}"))
        logger.debug("Loaded %d secret(s) from %s", len(secrets), path)
    else:
        logger.debug("No passwords file at %s", path)

    for key in sorted(set(secrets) | set(WELL_KNOWN_SECRETS)):
        value = environ.get(env_name(key))
        if value is not None:
            secrets[key] = value
            logger.debug("Secret '%s' taken from environment", key)

    return secrets
