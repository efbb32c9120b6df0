"""Typed, validated startup configuration for multi-server backends.

Reads a run-mode-specific YAML document plus a separate secret store and
produces an immutable ``RootConfig``, failing fast on the first problem.
"""

from ._version import __version__
from ._document import parse_document, read_document
from ._formatter import render
from ._loader import is_available, load, locate
from ._root import DEFAULT_MAX_REQUEST_SIZE, RootConfig, default_config, load_from_document
from ._secrets import SecretStore, load_secrets
from ._sections import (
    CacheConnection,
    DatabaseConnection,
    ServerEndpoint,
    ServerRole,
    decode_cache,
    decode_database,
    decode_server,
)
from ._types import (
    ConfigError,
    ConfigFileNotFoundError,
    DocumentSyntaxError,
    InvalidValueError,
    MissingFieldError,
    MissingSecretError,
    Secret,
    TypeMismatchError,
)

__all__ = [
    "__version__",
    # Loading
    "load",
    "locate",
    "is_available",
    "load_from_document",
    "default_config",
    "load_secrets",
    "SecretStore",
    # Documents
    "parse_document",
    "read_document",
    # Values
    "RootConfig",
    "ServerEndpoint",
    "ServerRole",
    "DatabaseConnection",
    "CacheConnection",
    "Secret",
    "DEFAULT_MAX_REQUEST_SIZE",
    # Section decoders
    "decode_server",
    "decode_database",
    "decode_cache",
    # Rendering
    "render",
    # Errors
    "ConfigError",
    "ConfigFileNotFoundError",
    "DocumentSyntaxError",
    "MissingFieldError",
    "TypeMismatchError",
    "MissingSecretError",
    "InvalidValueError",
]
