"""Tests for dashboard config loading and the debug log."""

import json

from mql_dashboard import config


def test_defaults_without_file(monkeypatch, tmp_path):
    monkeypatch.setattr(config, "DASHBOARD_CONFIG_PATH", str(tmp_path / "missing.json"))
    cfg = config.load_dashboard_config()
    assert cfg["team_name"] == "Marketing Team"
    assert cfg["collection_agent_id"] == config.DEFAULT_COLLECTION_AGENT_ID
    assert cfg["insights_agent_id"] == config.DEFAULT_INSIGHTS_AGENT_ID


def test_file_overrides_and_ignores_unknown_keys(monkeypatch, tmp_path):
    path = tmp_path / "dashboard_config.json"
    path.write_text(json.dumps({"team_name": "Growth", "insights_agent_id": "abc", "other": 1}), encoding="utf-8")
    monkeypatch.setattr(config, "DASHBOARD_CONFIG_PATH", str(path))
    cfg = config.load_dashboard_config()
    assert cfg == {"team_name": "Growth", "collection_agent_id": config.DEFAULT_COLLECTION_AGENT_ID, "insights_agent_id": "abc"}


def test_broken_file_falls_back(monkeypatch, tmp_path):
    path = tmp_path / "dashboard_config.json"
    path.write_text("{not json", encoding="utf-8")
    monkeypatch.setattr(config, "DASHBOARD_CONFIG_PATH", str(path))
    assert config.load_dashboard_config()["team_name"] == "Marketing Team"


def test_env_agent_ids(monkeypatch, tmp_path):
    monkeypatch.setattr(config, "DASHBOARD_CONFIG_PATH", str(tmp_path / "missing.json"))
    monkeypatch.setenv("COLLECTION_AGENT_ID", "env-collector")
    assert config.load_dashboard_config()["collection_agent_id"] == "env-collector"


def test_placeholder_agent_key_ignored(monkeypatch):
    monkeypatch.setenv("AGENT_API_KEY", "your-agent-key-here")
    assert config.get_agent_api_key() == ""


def test_log_event_appends_json_lines():
    config.log_event("first", {"a": 1}, "T")
    config.log_event("second", {"b": 2})
    lines = config.LOG_PATH.read_text(encoding="utf-8").splitlines()
    assert [json.loads(l)["message"] for l in lines] == ["first", "second"]
    assert json.loads(lines[0])["hypothesisId"] == "T"


def test_log_event_never_raises(monkeypatch, tmp_path):
    monkeypatch.setattr(config, "LOG_PATH", tmp_path / "no" / "such" / "dir" / "debug.log")
    config.log_event("lost", {})
