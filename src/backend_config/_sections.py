"""Typed section values and their decoders.

Each decoder takes one raw sub-document (plus the secret store where the
section needs a password) and returns a frozen model, or raises the first
``ConfigError`` it meets. Passwords are only ever read from the secret
store; a ``password`` key in the document is ignored.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field

from ._casters import BOOL, PORT, SCHEME, STR, ensure_mapping, read_field
from ._types import MissingSecretError, Secret

DATABASE_SECRET = "database"
CACHE_SECRET = "cache"
LEGACY_CACHE_SECRET = "redis"
SERVICE_SECRET = "serviceSecret"


class ServerRole(str, Enum):
    """Display tag of a configured server."""

    API = "api"
    INSIGHTS = "insights"
    WEB = "web"


class _Section(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True, extra="forbid")


class ServerEndpoint(_Section):
    """Where a server listens and how it is reached from outside."""

    port: int = Field(ge=1, le=65535)
    public_host: str
    public_port: int = Field(ge=1, le=65535)
    public_scheme: str


class DatabaseConnection(_Section):
    """Postgres connection settings. Always carries a resolved password."""

    host: str
    port: int = Field(ge=1, le=65535)
    name: str
    user: str
    password: Secret[str]
    require_ssl: bool = False
    is_unix_socket: bool = False


class CacheConnection(_Section):
    """Redis connection settings; the password is optional."""

    enabled: bool = False
    host: str
    port: int = Field(ge=1, le=65535)
    user: str | None = None
    password: Secret[str] | None = None


# ---------------------------------------------------------------------------
# Secret lookup
# ---------------------------------------------------------------------------


def get_secret(secrets: Mapping[str, str], key: str) -> Secret[str] | None:
    """Return the secret stored under *key*, or ``None`` when absent or empty."""
    value = secrets.get(key)
    if not value:
        return None
    return Secret(value)


# ---------------------------------------------------------------------------
# Decoders
# ---------------------------------------------------------------------------


def decode_server(raw: Any, label: str) -> ServerEndpoint:
    """Decode a server section. All four fields are required."""
    section = ensure_mapping(raw, label)
    return ServerEndpoint(
        port=read_field(section, "port", label, PORT),
        public_host=read_field(section, "publicHost", label, STR),
        public_port=read_field(section, "publicPort", label, PORT),
        public_scheme=read_field(section, "publicScheme", label, SCHEME),
    )


def decode_database(
    raw: Any,
    secrets: Mapping[str, str],
    label: str = "database",
) -> DatabaseConnection:
    """Decode the database section.

    Document fields are checked before the secret store, so a malformed
    section is reported even when the password is missing too.
    """
    section = ensure_mapping(raw, label)
    fields = {
        "host": read_field(section, "host", label, STR),
        "port": read_field(section, "port", label, PORT),
        "name": read_field(section, "name", label, STR),
        "user": read_field(section, "user", label, STR),
        "require_ssl": read_field(section, "requireSsl", label, BOOL, default=False),
        "is_unix_socket": read_field(section, "isUnixSocket", label, BOOL, default=False),
    }

    password = get_secret(secrets, DATABASE_SECRET)
    if password is None:
        raise MissingSecretError(DATABASE_SECRET, section=label)

    return DatabaseConnection(password=password, **fields)


def decode_cache(
    raw: Any,
    secrets: Mapping[str, str],
    label: str = "cache",
) -> CacheConnection:
    """Decode the cache section. A missing cache secret leaves it unauthenticated.

    The password is read from the ``cache`` secret, or from the older
    ``redis`` secret when ``cache`` is absent.
    """
    section = ensure_mapping(raw, label)
    password = get_secret(secrets, CACHE_SECRET) or get_secret(secrets, LEGACY_CACHE_SECRET)
    return CacheConnection(
        enabled=read_field(section, "enabled", label, BOOL, default=False),
        host=read_field(section, "host", label, STR),
        port=read_field(section, "port", label, PORT),
        user=read_field(section, "user", label, STR, default=None),
        password=password,
    )
