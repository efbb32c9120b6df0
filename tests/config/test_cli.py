"""Tests for cli.py — show and check commands."""

import pytest
from click.testing import CliRunner

from backend_config.cli import main
from backend_config._testing import api_server, write_config_tree

DATABASE = {"host": "db", "port": 5432, "name": "app", "user": "admin"}


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def config_dir(tmp_path):
    return write_config_tree(
        tmp_path,
        {
            "development": {"apiServer": api_server(), "database": DATABASE},
            "broken": {"webServer": api_server()},
        },
        passwords={"development": {"database": "s3cr3t"}},
    )


class TestShow:
    def test_prints_redacted_config(self, runner, config_dir):
        result = runner.invoke(main, ["show", "development", "--config-dir", str(config_dir)])
        assert result.exit_code == 0
        assert "api port: 8080" in result.output
        assert "database pass: ********" in result.output
        assert "s3cr3t" not in result.output

    def test_config_dir_from_environment(self, runner, config_dir):
        result = runner.invoke(
            main, ["show", "development"], env={"BACKEND_CONFIG_DIR": str(config_dir)}
        )
        assert result.exit_code == 0
        assert "database host: db" in result.output

    def test_unknown_run_mode(self, runner, config_dir):
        result = runner.invoke(main, ["show", "production", "--config-dir", str(config_dir)])
        assert result.exit_code == 1
        assert "Error:" in result.output


class TestCheck:
    def test_ok(self, runner, config_dir):
        result = runner.invoke(main, ["check", "development", "--config-dir", str(config_dir)])
        assert result.exit_code == 0
        assert "OK" in result.output

    def test_reports_first_error(self, runner, config_dir):
        result = runner.invoke(main, ["check", "broken", "--config-dir", str(config_dir)])
        assert result.exit_code == 1
        assert "apiServer" in result.output

    def test_missing_secret(self, runner, config_dir):
        result = runner.invoke(
            main,
            ["check", "development", "--config-dir", str(config_dir)],
            env={"BACKEND_SECRET_DATABASE": ""},
        )
        assert result.exit_code == 1
        assert "database" in result.output

    def test_undecodable_document(self, runner, tmp_path):
        (tmp_path / "development.yaml").write_bytes(b"apiServer:\n  publicHost: \xff\xfe\n")
        result = runner.invoke(main, ["check", "development", "--config-dir", str(tmp_path)])
        assert result.exit_code == 1
        assert "Error:" in result.output
