"""Tests for _testing.py — config tree helpers."""

import yaml

from backend_config._testing import api_server, write_config_tree


class TestApiServer:
    def test_document_shape(self):
        assert api_server(port=9000, host="example.com", scheme="https") == {
            "port": 9000,
            "publicHost": "example.com",
            "publicPort": 9000,
            "publicScheme": "https",
        }


class TestWriteConfigTree:
    def test_writes_one_file_per_run_mode(self, tmp_path):
        config_dir = write_config_tree(
            tmp_path,
            {"development": {"apiServer": api_server()}, "production": {"maxRequestSize": 1}},
        )
        assert config_dir == tmp_path / "config"
        assert sorted(p.name for p in config_dir.iterdir()) == [
            "development.yaml",
            "production.yaml",
        ]
        loaded = yaml.safe_load((config_dir / "production.yaml").read_text(encoding="utf-8"))
        assert loaded == {"maxRequestSize": 1}

    def test_writes_passwords(self, tmp_path):
        config_dir = write_config_tree(tmp_path, {}, passwords={"shared": {"cache": "pw"}})
        assert (config_dir / "passwords.yaml").exists()
