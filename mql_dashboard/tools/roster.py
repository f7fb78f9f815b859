"""
MQL Dashboard - Team roster: seed data, simulated collection, reminders.
"""

from __future__ import annotations

import copy
from datetime import datetime, timedelta
from typing import List, Optional

from mql_dashboard.config import (
    SEED_TEAM,
    STATUS_CONFIG,
    COLLECTION_RESPONDED_PREFIX,
    COLLECTION_TIMESTAMP_STEP_MINUTES,
)
from mql_dashboard.state import TeamMember


def seed_roster() -> List[TeamMember]:
    """Fresh copy of the static seed team, safe to mutate."""
    return copy.deepcopy(SEED_TEAM)


def status_config(status: str) -> dict:
    """Colour / label / icon for a status; unknown statuses render as pending."""
    return STATUS_CONFIG.get(status, STATUS_CONFIG["pending"])


def format_timestamp(dt: datetime) -> str:
    return dt.strftime("%Y-%m-%d %I:%M %p")


def simulate_collection(
    roster: List[TeamMember],
    now: Optional[datetime] = None,
    responded_prefix: int = COLLECTION_RESPONDED_PREFIX,
) -> List[TeamMember]:
    """
    Apply a simulated collection run and return the updated roster (input is not modified).

    The first `responded_prefix` members are marked responded with timestamps spaced
    15 minutes apart going back from `now`. Everyone else becomes pending, except
    members already overdue, who stay overdue. MQL counts are left alone.
    """
    now = now or datetime.now()
    updated = []
    for idx, member in enumerate(roster):
        m = dict(member)
        if idx < responded_prefix:
            m["status"] = "responded"
            m["timestamp"] = format_timestamp(now - timedelta(minutes=idx * COLLECTION_TIMESTAMP_STEP_MINUTES))
        else:
            m["status"] = "overdue" if member.get("status") == "overdue" else "pending"
            m.pop("timestamp", None)
        updated.append(m)
    return updated


def find_member(roster: List[TeamMember], member_id: str) -> TeamMember:
    for m in roster:
        if m.get("id") == member_id:
            return m
    raise KeyError(f"No team member with id {member_id!r}")


def remind_member(roster: List[TeamMember], member_id: str) -> int:
    """Increment the member's reminder counter in place. Returns the new count."""
    member = find_member(roster, member_id)
    member["reminders"] = int(member.get("reminders") or 0) + 1
    return member["reminders"]


def non_responder_members(roster: List[TeamMember]) -> List[TeamMember]:
    return [m for m in roster if m.get("status") != "responded"]
