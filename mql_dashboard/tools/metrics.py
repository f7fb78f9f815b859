"""
MQL Dashboard - Aggregate metrics over the roster and templated insight sentences.
"""

from __future__ import annotations

import math
from typing import List, Optional

from mql_dashboard.config import STRONG_ENGAGEMENT_RATE, MODERATE_ENGAGEMENT_RATE
from mql_dashboard.state import TeamMember


def round_half_up(x: float) -> int:
    """Nearest integer, halves rounded up (12.5 -> 13), matching the dashboard's published figures."""
    return int(math.floor(x + 0.5))


def responded_count(roster: List[TeamMember]) -> int:
    return sum(1 for m in roster if m.get("status") == "responded")


def response_rate(roster: List[TeamMember]) -> int:
    """Percent of members who responded, rounded. 0 for an empty roster."""
    if not roster:
        return 0
    return round_half_up(responded_count(roster) / len(roster) * 100)


def total_mqls(roster: List[TeamMember]) -> int:
    return sum(int(m.get("mql_count") or 0) for m in roster)


def average_mqls(roster: List[TeamMember]) -> int:
    """Total MQLs across the roster divided by the number of responders, rounded. 0 if nobody responded."""
    responders = responded_count(roster)
    if responders == 0:
        return 0
    return round_half_up(total_mqls(roster) / responders)


def top_performer(roster: List[TeamMember]) -> Optional[TeamMember]:
    """Member with the strictly highest MQL count; the earliest wins a tie."""
    best = None
    for m in roster:
        if best is None or int(m.get("mql_count") or 0) > int(best.get("mql_count") or 0):
            best = m
    return best


def non_responders(roster: List[TeamMember]) -> List[str]:
    return [m.get("name", "") for m in roster if m.get("status") != "responded"]


def first_name(name: str) -> str:
    parts = (name or "").split()
    return parts[0] if parts else ""


def compute_aggregates(roster: List[TeamMember]) -> dict:
    top = top_performer(roster)
    names = non_responders(roster)
    return {
        "total_mqls": total_mqls(roster),
        "response_rate": response_rate(roster),
        "average_mqls": average_mqls(roster),
        "top_performer": top.get("name", "") if top else "",
        "top_performer_mqls": int(top.get("mql_count") or 0) if top else 0,
        "non_responders": names,
        "pending_count": len(names),
        "activity_members": [m.get("id", "") for m in roster if m.get("status") == "responded"],
    }


def build_team_summary(roster: List[TeamMember]) -> str:
    return "; ".join(
        f"{m.get('name', '')}: {m.get('mql_count', 0)} MQLs, Status: {m.get('status', '')}, Activities: {m.get('activities', '')}"
        for m in roster
    )


def engagement_label(rate: int) -> str:
    if rate >= STRONG_ENGAGEMENT_RATE:
        return "strong"
    if rate >= MODERATE_ENGAGEMENT_RATE:
        return "moderate"
    return "low"


def build_insight_sentences(aggregates: dict, total: Optional[int] = None) -> List[str]:
    """Fixed narrative lines filled from the aggregates. `total` overrides the local MQL total."""
    rate = aggregates.get("response_rate", 0)
    avg = aggregates.get("average_mqls", 0)
    total = aggregates.get("total_mqls", 0) if total is None else total
    lines = [
        f"Team demonstrated {engagement_label(rate)} engagement with a {rate}% response rate",
        f"Team generated {total} MQLs, averaging {avg} per responding member",
    ]
    if avg:
        above = round_half_up((aggregates.get("top_performer_mqls", 0) - avg) / avg * 100)
        lines.append(f"Top performer ({first_name(aggregates.get('top_performer', ''))}) contributed {above}% above team average")
    else:
        lines.append("No MQL activity has been reported yet")
    if aggregates.get("non_responders"):
        lines.append("Recommended focus on engagement for non-respondents this week")
    else:
        lines.append("All team members have responded this week")
    return lines
