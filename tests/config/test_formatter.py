"""Tests for _formatter.py — redacted rendering."""

import pytest

from backend_config._formatter import render
from backend_config._root import default_config, load_from_document
from backend_config._testing import api_server

DATABASE = {"host": "db", "port": 5432, "name": "app", "user": "admin"}


def _render(document, secrets=None):
    return render(load_from_document("development", "default", secrets or {}, document))


class TestServers:
    def test_api_lines(self):
        assert render(default_config()) == (
            "api port: 8080\n"
            "api public host: localhost\n"
            "api public port: 8080\n"
            "api public scheme: http\n"
        )

    def test_section_order(self):
        out = _render(
            {
                "cache": {"host": "redis", "port": 6379},
                "database": DATABASE,
                "webServer": api_server(port=8082),
                "insightsServer": api_server(port=8081),
                "apiServer": api_server(port=8080),
            },
            {"database": "s3cr3t"},
        )
        positions = [
            out.index(prefix)
            for prefix in ("api port", "insights port", "web port", "database host", "cache host")
        ]
        assert positions == sorted(positions)


class TestDatabase:
    def test_password_masked(self):
        out = _render({"apiServer": api_server(), "database": DATABASE}, {"database": "s3cr3t"})
        assert "database pass: ********" in out
        assert "s3cr3t" not in out

    def test_all_lines(self):
        out = _render(
            {"apiServer": api_server(), "database": dict(DATABASE, requireSsl=True)},
            {"database": "s3cr3t"},
        )
        assert "database host: db\n" in out
        assert "database port: 5432\n" in out
        assert "database name: app\n" in out
        assert "database user: admin\n" in out
        assert "database require SSL: true\n" in out
        assert "database unix socket: false\n" in out


class TestCache:
    def test_no_password_line_without_secret(self):
        out = _render({"apiServer": api_server(), "cache": {"host": "redis", "port": 6379}})
        assert "cache host: redis\n" in out
        assert "cache port: 6379\n" in out
        assert "pass" not in out
        assert "cache user" not in out

    def test_user_and_masked_password(self):
        out = _render(
            {"apiServer": api_server(), "cache": {"host": "redis", "port": 6379, "user": "u"}},
            {"cache": "cache-pw"},
        )
        assert "cache user: u\n" in out
        assert "cache pass: ********\n" in out
        assert "cache-pw" not in out


@pytest.mark.parametrize("password", ["s3cr3t", "hunter2", "********-tail", "p@ss word"])
def test_no_secret_ever_rendered(password):
    cfg = load_from_document(
        "production",
        "default",
        {"database": password, "cache": password, "serviceSecret": password},
        {
            "apiServer": api_server(),
            "database": DATABASE,
            "cache": {"host": "redis", "port": 6379},
        },
    )
    assert password not in render(cfg)
    assert password not in str(cfg)
    assert password not in repr(cfg)
