"""Root configuration model and the document-to-config composition step."""

from __future__ import annotations

from typing import Any, Iterator, Mapping

from pydantic import BaseModel, ConfigDict, Field

from ._casters import POSITIVE_INT, ensure_mapping, read_field
from ._sections import (
    SERVICE_SECRET,
    CacheConnection,
    DatabaseConnection,
    ServerEndpoint,
    ServerRole,
    decode_cache,
    decode_database,
    decode_server,
    get_secret,
)
from ._types import MissingFieldError, Secret

DEFAULT_MAX_REQUEST_SIZE = 524288
ROOT_SECTION = "root"


class RootConfig(BaseModel):
    """Validated startup configuration of one server process.

    Built once at startup and never mutated; assigning to any attribute
    raises ``pydantic.ValidationError``.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True, extra="forbid")

    run_mode: str = "development"
    server_id: str = "default"
    max_request_size: int = Field(default=DEFAULT_MAX_REQUEST_SIZE, gt=0)
    api_server: ServerEndpoint
    insights_server: ServerEndpoint | None = None
    web_server: ServerEndpoint | None = None
    database: DatabaseConnection | None = None
    cache: CacheConnection | None = None
    service_secret: Secret[str] | None = None

    def servers(self) -> Iterator[tuple[ServerRole, ServerEndpoint]]:
        """Yield ``(role, endpoint)`` for each configured server, api first."""
        yield ServerRole.API, self.api_server
        if self.insights_server is not None:
            yield ServerRole.INSIGHTS, self.insights_server
        if self.web_server is not None:
            yield ServerRole.WEB, self.web_server

    @classmethod
    def from_document(
        cls,
        run_mode: str,
        server_id: str,
        secrets: Mapping[str, str],
        document: Any,
    ) -> "RootConfig":
        return load_from_document(run_mode, server_id, secrets, document)

    def __str__(self) -> str:
        from ._formatter import render

        return render(self)


def load_from_document(
    run_mode: str,
    server_id: str,
    secrets: Mapping[str, str],
    document: Any,
) -> RootConfig:
    """Decode a parsed document into a ``RootConfig``.

    ``apiServer`` is the only section whose absence is fatal. Optional
    sections are decoded only when present and any error they raise
    propagates unchanged. The cache section is read from ``cache``, or from
    the older ``redis`` key when ``cache`` is absent.
    """
    root = ensure_mapping(document, ROOT_SECTION)

    api_raw = root.get("apiServer")
    if api_raw is None:
        raise MissingFieldError("apiServer", ROOT_SECTION)
    api_server = decode_server(api_raw, "apiServer")

    insights_raw = root.get("insightsServer")
    insights_server = (
        decode_server(insights_raw, "insightsServer") if insights_raw is not None else None
    )

    web_raw = root.get("webServer")
    web_server = decode_server(web_raw, "webServer") if web_raw is not None else None

    max_request_size = read_field(
        root, "maxRequestSize", ROOT_SECTION, POSITIVE_INT, default=DEFAULT_MAX_REQUEST_SIZE
    )

    database_raw = root.get("database")
    database = (
        decode_database(database_raw, secrets, "database") if database_raw is not None else None
    )

    cache_label = "cache" if root.get("cache") is not None else "redis"
    cache_raw = root.get(cache_label)
    cache = decode_cache(cache_raw, secrets, cache_label) if cache_raw is not None else None

    return RootConfig(
        run_mode=run_mode,
        server_id=server_id,
        max_request_size=max_request_size,
        api_server=api_server,
        insights_server=insights_server,
        web_server=web_server,
        database=database,
        cache=cache,
        service_secret=get_secret(secrets, SERVICE_SECRET),
    )


def default_config(run_mode: str = "development", server_id: str = "default") -> RootConfig:
    """Bare configuration: an api server on ``http://localhost:8080`` and nothing else."""
    return RootConfig(
        run_mode=run_mode,
        server_id=server_id,
        api_server=ServerEndpoint(
            port=8080,
            public_host="localhost",
            public_port=8080,
            public_scheme="http",
        ),
    )
