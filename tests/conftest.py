"""Pytest configuration and fixtures for mql-dashboard tests."""

import pytest

from mql_dashboard import config


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch, tmp_path):
    """No real agent / LLM backends and a throwaway debug log for every test."""
    for key in ("AGENT_API_KEY", "MISTRAL_API_KEY", "OPENAI_API_KEY"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(config, "LOG_PATH", tmp_path / "debug.log")
    yield


@pytest.fixture
def example_roster():
    """Six members: five responded (12, 18, 9, 15, 21 MQLs) and one overdue with none."""
    return [
        {"id": "1", "name": "Sarah Chen", "email": "sarah@example.com", "activities": "Webinars", "mql_count": 12, "status": "responded", "timestamp": "2024-01-15 10:30 AM", "reminders": 0},
        {"id": "2", "name": "Marcus Johnson", "email": "marcus@example.com", "activities": "Posts", "mql_count": 18, "status": "responded", "timestamp": "2024-01-15 11:45 AM", "reminders": 0},
        {"id": "3", "name": "Emily Rodriguez", "email": "emily@example.com", "activities": "Demos", "mql_count": 9, "status": "responded", "timestamp": "2024-01-15 12:00 PM", "reminders": 0},
        {"id": "4", "name": "James Park", "email": "james@example.com", "activities": "Campaigns", "mql_count": 15, "status": "responded", "timestamp": "2024-01-15 09:15 AM", "reminders": 0},
        {"id": "5", "name": "Lisa Chen", "email": "lisa@example.com", "activities": "Advisory board", "mql_count": 21, "status": "responded", "timestamp": "2024-01-15 02:00 PM", "reminders": 0},
        {"id": "6", "name": "David Okafor", "email": "david@example.com", "activities": "", "mql_count": 0, "status": "overdue", "reminders": 0},
    ]


@pytest.fixture
def insight_response():
    return {
        "result": "Dashboard ready",
        "confidence": 0.92,
        "metadata": {"processing_time": "1.2s", "records_processed": 6, "dashboard_status": "ready", "total_mqls": 0},
    }
