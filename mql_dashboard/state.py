"""
MQL Dashboard - Record shapes shared by the agents, tools, and UI.
"""

from __future__ import annotations

from typing import TypedDict


class TeamMember(TypedDict, total=False):
    id: str
    name: str
    email: str
    activities: str
    mql_count: int
    status: str
    timestamp: str
    reminders: int


class DashboardInsight(TypedDict, total=False):
    total_mqls: int
    response_rate: int
    average_mqls: int
    top_performer: str
    pending_count: int
    non_responders: list
    activity_members: list
    insights: list
    agent_summary: str
    confidence: float
    records_processed: int
    processing_time: str
    last_updated: str


class AgentResponse(TypedDict, total=False):
    result: str
    confidence: float
    metadata: dict
