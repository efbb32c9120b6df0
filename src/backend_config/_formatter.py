"""Human-readable, redacted rendering of a ``RootConfig``."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._types import MASK

if TYPE_CHECKING:
    from ._root import RootConfig
    from ._sections import CacheConnection, DatabaseConnection, ServerEndpoint, ServerRole


def _render_server(role: ServerRole, server: ServerEndpoint) -> list[str]:
    tag = role.value
    return [
        f"{tag} port: {server.port}",
        f"{tag} public host: {server.public_host}",
        f"{tag} public port: {server.public_port}",
        f"{tag} public scheme: {server.public_scheme}",
    ]


def _render_database(database: DatabaseConnection) -> list[str]:
    # The password line is unconditional: a database section always has one.
    return [
        f"database host: {database.host}",
        f"database port: {database.port}",
        f"database name: {database.name}",
        f"database user: {database.user}",
        f"database require SSL: {str(database.require_ssl).lower()}",
        f"database unix socket: {str(database.is_unix_socket).lower()}",
        f"database pass: {MASK}",
    ]


def _render_cache(cache: CacheConnection) -> list[str]:
    lines = [
        f"cache host: {cache.host}",
        f"cache port: {cache.port}",
    ]
    if cache.user is not None:
        lines.append(f"cache user: {cache.user}")
    if cache.password is not None:
        lines.append(f"cache pass: {MASK}")
    return lines


def render(config: RootConfig) -> str:
    """Render *config* as one ``label: value`` line per setting.

    Sections appear in declaration order (api, insights, web, database,
    cache); absent sections produce no lines. Passwords are always shown as
    ``********`` and the service secret is never shown.
    """
    lines: list[str] = []
    for role, server in config.servers():
        lines.extend(_render_server(role, server))
    if config.database is not None:
        lines.extend(_render_database(config.database))
    if config.cache is not None:
        lines.extend(_render_cache(config.cache))
    return "".join(f"{line}\n" for line in lines)
