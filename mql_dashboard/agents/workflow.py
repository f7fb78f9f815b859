"""
MQL Dashboard - Collect and generate actions: prompt building, agent call, result merge.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Tuple, Union

from mql_dashboard.config import (
    COLLECTION_STATUS_FAILED,
    INSIGHTS_STATUS_FAILED,
    load_dashboard_config,
    log_event,
)
from mql_dashboard.agents import responses
from mql_dashboard.state import AgentResponse, DashboardInsight, TeamMember
from mql_dashboard.tools.metrics import build_insight_sentences, build_team_summary, compute_aggregates
from mql_dashboard.tools.roster import simulate_collection

Period = Union[str, Tuple[str, str]]


def describe_period(period: Period) -> str:
    """'2024-01-15' or ('2024-01-08', '2024-01-14') -> prompt text."""
    if isinstance(period, (tuple, list)):
        start, end = period
        return f"{start} to {end}"
    return str(period)


def build_collection_prompt(period: Period) -> str:
    return (
        f"Please collect weekly marketing activities and MQL data from our team members for the week of {describe_period(period)}. "
        "Include activities and MQL counts for at least 5 team members."
    )


def build_insights_prompt(roster: List[TeamMember]) -> str:
    return (
        f"Generate dashboard insights from this team data: {build_team_summary(roster)}. "
        "Provide total MQLs, response rate percentage, average MQLs per person, top performer name, "
        "list of non-responders, and 3-4 key insights about team performance and trends."
    )


def run_collection(
    roster: List[TeamMember],
    period: Period,
    agent_id: Optional[str] = None,
    now: Optional[datetime] = None,
) -> Tuple[List[TeamMember], str, bool]:
    """
    Request team updates for the period.

    Returns (roster, status_message, ok). On failure the roster returned is the
    one passed in, unchanged.
    """
    agent_id = agent_id or load_dashboard_config()["collection_agent_id"]
    try:
        result = responses.call_collection_agent(build_collection_prompt(period), agent_id)
        if result is None:
            return roster, COLLECTION_STATUS_FAILED, False
        updated = simulate_collection(roster, now=now)
    except Exception as e:
        log_event("run_collection failed", {"err": str(e)[:200]}, "COLLECT")
        return roster, COLLECTION_STATUS_FAILED, False
    log_event("run_collection ok", {"period": describe_period(period), "metadata": result.get("metadata", {})}, "COLLECT")
    return updated, f"✓ {result.get('result', '')}".rstrip(), True


def build_snapshot(roster: List[TeamMember], result: AgentResponse, now: Optional[datetime] = None) -> DashboardInsight:
    """Merge local aggregates with agent metadata. Only total_mqls may come from the agent."""
    now = now or datetime.now()
    agg = compute_aggregates(roster)
    meta = result.get("metadata") or {}
    agent_total = meta.get("total_mqls")
    total = agent_total if isinstance(agent_total, int) and not isinstance(agent_total, bool) and agent_total > 0 else agg["total_mqls"]
    return {
        "total_mqls": total,
        "response_rate": agg["response_rate"],
        "average_mqls": agg["average_mqls"],
        "top_performer": agg["top_performer"],
        "pending_count": agg["pending_count"],
        "non_responders": agg["non_responders"],
        "activity_members": agg["activity_members"],
        "insights": build_insight_sentences(agg, total=total),
        "agent_summary": result.get("result", ""),
        "confidence": result.get("confidence", 0.0),
        "records_processed": meta.get("records_processed", 0),
        "processing_time": meta.get("processing_time", ""),
        "last_updated": now.strftime("%Y-%m-%d %I:%M:%S %p"),
    }


def run_insights(
    roster: List[TeamMember],
    previous: Optional[DashboardInsight] = None,
    agent_id: Optional[str] = None,
    now: Optional[datetime] = None,
) -> Tuple[Optional[DashboardInsight], Optional[str]]:
    """
    Generate a fresh dashboard snapshot.

    Returns (snapshot, error). On failure the previous snapshot comes back
    untouched together with an error message.
    """
    agent_id = agent_id or load_dashboard_config()["insights_agent_id"]
    try:
        result = responses.call_insights_agent(build_insights_prompt(roster), agent_id)
        if result is None:
            return previous, INSIGHTS_STATUS_FAILED
        snapshot = build_snapshot(roster, result, now=now)
    except Exception as e:
        log_event("run_insights failed", {"err": str(e)[:200]}, "INSIGHTS")
        return previous, INSIGHTS_STATUS_FAILED
    log_event("run_insights ok", {"total_mqls": snapshot["total_mqls"], "response_rate": snapshot["response_rate"]}, "INSIGHTS")
    return snapshot, None
