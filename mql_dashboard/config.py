"""
MQL Dashboard - Shared configuration, paths, constants, and helpers.
"""

from __future__ import annotations

import os
import pathlib
import json
import time

from dotenv import load_dotenv

# ── Path resolution ──────────────────────────────────────────────────────────
PROJECT_ROOT = str(pathlib.Path(__file__).resolve().parent.parent)

load_dotenv(os.path.join(PROJECT_ROOT, ".env"))

LOG_PATH = pathlib.Path(os.getenv("DASHBOARD_DEBUG_LOG") or os.path.join(PROJECT_ROOT, "debug.log"))
DASHBOARD_CONFIG_PATH = os.path.join(PROJECT_ROOT, "dashboard_config.json")


# ── Debug logger ─────────────────────────────────────────────────────────────
def log_event(m: str, d: dict, h: str = "A") -> None:
    """Append one JSON line to the debug log. Never raises."""
    try:
        p = {"id": f"log_{id(d)}", "timestamp": int(time.time() * 1000), "location": "mql_dashboard", "message": m, "data": d, "hypothesisId": h}
        with open(LOG_PATH, "a", encoding="utf-8") as f:
            f.write(json.dumps(p, default=str) + "\n")
    except OSError:
        pass


# ── Agent endpoint ───────────────────────────────────────────────────────────
AGENT_API_URL = os.getenv("AGENT_API_URL", "https://agent-prod.studio.lyzr.ai/v3/inference/chat/")
AGENT_USER_ID = os.getenv("AGENT_USER_ID", "marketing-dashboard@local")
AGENT_TIMEOUT_SECONDS = int(os.getenv("AGENT_TIMEOUT_SECONDS", "60") or 60)

DEFAULT_COLLECTION_AGENT_ID = "68fd262d058210757bf63fc4"
DEFAULT_INSIGHTS_AGENT_ID = "68fd2650be2defc486f4567a"


def get_agent_api_key() -> str:
    """Read at call time so a key added to the environment after import is picked up."""
    key = os.getenv("AGENT_API_KEY") or ""
    if key == "your-agent-key-here":
        return ""
    return key


# ── Dashboard config persistence ─────────────────────────────────────────────
def load_dashboard_config() -> dict:
    """Load optional dashboard_config.json. Returns dict with team_name, collection_agent_id, insights_agent_id."""
    default = {
        "team_name": "Marketing Team",
        "collection_agent_id": os.getenv("COLLECTION_AGENT_ID", DEFAULT_COLLECTION_AGENT_ID),
        "insights_agent_id": os.getenv("INSIGHTS_AGENT_ID", DEFAULT_INSIGHTS_AGENT_ID),
    }
    if not os.path.isfile(DASHBOARD_CONFIG_PATH):
        return default
    try:
        with open(DASHBOARD_CONFIG_PATH, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            return default
        return {**default, **{k: data.get(k) or default[k] for k in default}}
    except (OSError, ValueError) as e:
        log_event("load_dashboard_config failed", {"err": str(e)[:200]}, "CFG")
        return default


# ── Constants ─────────────────────────────────────────────────────────────────
# Members at these roster positions are marked responded by a simulated collection run
COLLECTION_RESPONDED_PREFIX = 4
COLLECTION_TIMESTAMP_STEP_MINUTES = 15

COLLECTION_STATUS_STARTED = "Initiating data collection..."
COLLECTION_STATUS_FAILED = "Error during collection. Please try again."
INSIGHTS_STATUS_FAILED = "Dashboard generation failed. Please try again."

STATUS_CONFIG = {
    "responded": {"bg": "#f0fdf4", "color": "#15803d", "label": "Responded", "icon": "✅"},
    "pending": {"bg": "#fffbeb", "color": "#b45309", "label": "Pending", "icon": "⏳"},
    "overdue": {"bg": "#fef2f2", "color": "#b91c1c", "label": "Overdue", "icon": "⚠️"},
}

METRIC_STATUS_COLORS = {
    "positive": "#16a34a",
    "pending": "#d97706",
    "neutral": "#4b5563",
}

# Engagement wording thresholds (response rate %)
STRONG_ENGAGEMENT_RATE = 75
MODERATE_ENGAGEMENT_RATE = 50

SEED_TEAM = [
    {"id": "1", "name": "Sarah Chen", "email": "sarah.chen@example.com", "activities": "Led 3 webinars, attended 2 industry events", "mql_count": 12, "status": "responded", "timestamp": "2024-01-15 10:30 AM", "reminders": 0},
    {"id": "2", "name": "Marcus Johnson", "email": "marcus.johnson@example.com", "activities": "Published 5 thought leadership posts", "mql_count": 18, "status": "responded", "timestamp": "2024-01-15 11:45 AM", "reminders": 0},
    {"id": "3", "name": "Emily Rodriguez", "email": "emily.rodriguez@example.com", "activities": "Conducted 4 product demos", "mql_count": 9, "status": "pending", "reminders": 0},
    {"id": "4", "name": "James Park", "email": "james.park@example.com", "activities": "Managed 2 campaign launches", "mql_count": 15, "status": "responded", "timestamp": "2024-01-15 09:15 AM", "reminders": 0},
    {"id": "5", "name": "Lisa Chen", "email": "lisa.chen@example.com", "activities": "Attended customer advisory board", "mql_count": 21, "status": "responded", "timestamp": "2024-01-15 02:00 PM", "reminders": 0},
    {"id": "6", "name": "David Okafor", "email": "david.okafor@example.com", "activities": "No update submitted", "mql_count": 0, "status": "overdue", "reminders": 0},
]
