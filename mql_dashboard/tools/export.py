"""
MQL Dashboard - Report export (JSON download / clipboard text) and re-import.
"""

from __future__ import annotations

import json
from typing import List, Optional, Tuple

from mql_dashboard.state import DashboardInsight, TeamMember


def export_filename(selected_date: str) -> str:
    return f"marketing-report-{selected_date}.json"


def build_export_payload(roster: List[TeamMember], snapshot: Optional[DashboardInsight]) -> dict:
    return {"team_data": roster, "insights": snapshot}


def export_json(roster: List[TeamMember], snapshot: Optional[DashboardInsight]) -> str:
    """Indented JSON document for the download button and the copy-to-clipboard block."""
    return json.dumps(build_export_payload(roster, snapshot), indent=2, ensure_ascii=False)


def _is_count(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_member(i: int, member) -> None:
    if not isinstance(member, dict):
        raise ValueError(f"team_data[{i}] is not an object")
    if not isinstance(member.get("id"), str):
        raise ValueError(f"team_data[{i}] has no string id")
    for key in ("mql_count", "reminders"):
        if key in member and not _is_count(member[key]):
            raise ValueError(f"team_data[{i}].{key} is not an integer")
    for key in ("name", "email", "activities", "status", "timestamp"):
        if member.get(key) is not None and not isinstance(member[key], str):
            raise ValueError(f"team_data[{i}].{key} is not a string")


def load_export(text: str) -> Tuple[List[TeamMember], Optional[DashboardInsight]]:
    """
    Inverse of export_json. Raises ValueError if the document is not an export:
    team_data must be a list of member objects with string ids, insights an object or null.
    """
    data = json.loads(text)
    if not isinstance(data, dict) or "team_data" not in data:
        raise ValueError("Not a marketing report export: missing team_data")
    team_data = data["team_data"]
    if not isinstance(team_data, list):
        raise ValueError("team_data is not a list")
    for i, member in enumerate(team_data):
        _check_member(i, member)
    insights = data.get("insights")
    if insights is not None and not isinstance(insights, dict):
        raise ValueError("insights is not an object")
    return team_data, insights
