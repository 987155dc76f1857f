"""Tests for config loading and client construction."""

import json

import pytest

from embedhook.client import build_webhook_client
from utils.config import DEFAULT_CONFIG, load_config, save_config


@pytest.fixture(autouse=True)
def no_sleep(monkeypatch):
    monkeypatch.setattr("utils.config.time.sleep", lambda _: None)


class TestLoadConfig:
    def test_missing_file_created_and_exits(self, tmp_path):
        path = tmp_path / "config.json"
        with pytest.raises(SystemExit):
            load_config(str(path))
        assert json.loads(path.read_text(encoding="utf-8")) == DEFAULT_CONFIG

    def test_empty_webhook_exits(self, tmp_path, capsys):
        path = tmp_path / "config.json"
        save_config(dict(DEFAULT_CONFIG), str(path))
        with pytest.raises(SystemExit):
            load_config(str(path))
        assert "webhook" in capsys.readouterr().out

    def test_defaults_filled_in(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"webhook": "https://hooks.example/abc"}), encoding="utf-8")
        config = load_config(str(path))
        assert config["webhook"] == "https://hooks.example/abc"
        assert config["username"] == ""
        assert config["timeout"] is None

    @pytest.mark.parametrize("timeout", ["abc", "5", -1, True, [3]])
    def test_invalid_timeout_exits(self, tmp_path, capsys, timeout):
        path = tmp_path / "config.json"
        save_config({**DEFAULT_CONFIG, "webhook": "https://hooks.example/abc", "timeout": timeout}, str(path))
        with pytest.raises(SystemExit):
            load_config(str(path))
        assert "timeout" in capsys.readouterr().out

    def test_numeric_timeout_accepted(self, tmp_path):
        path = tmp_path / "config.json"
        save_config({**DEFAULT_CONFIG, "webhook": "https://hooks.example/abc", "timeout": 2.5}, str(path))
        assert load_config(str(path))["timeout"] == 2.5

    def test_round_trip(self, tmp_path):
        path = tmp_path / "config.json"
        config = {**DEFAULT_CONFIG, "webhook": "https://hooks.example/abc", "timeout": 5}
        save_config(config, str(path))
        assert load_config(str(path)) == config


class TestBuildWebhookClient:
    def test_uses_url_and_timeout(self):
        client = build_webhook_client({"webhook": "https://hooks.example/abc", "timeout": 5})
        assert client.url == "https://hooks.example/abc"
        assert client.timeout == 5.0
        client.close()

    def test_no_timeout(self):
        client = build_webhook_client({"webhook": "https://hooks.example/abc", "timeout": None})
        assert client.timeout is None
        client.close()

    def test_missing_webhook(self):
        client = build_webhook_client({})
        assert client.url == ""
        client.close()
