"""
MQL Dashboard - Reusable cards: metrics, team activity, non-responders, insights.
"""

from __future__ import annotations

from html import escape
from typing import Callable, List, Optional

import streamlit as st

from mql_dashboard.config import METRIC_STATUS_COLORS
from mql_dashboard.state import TeamMember
from mql_dashboard.tools.roster import status_config


def metric_card(label: str, value, icon: str = "", status: str = "neutral", trend: Optional[str] = None) -> None:
    color = METRIC_STATUS_COLORS.get(status or "neutral", METRIC_STATUS_COLORS["neutral"])
    trend_html = f'<div style="font-size: 12px; color: #16a34a; margin-top: 6px;">📈 {escape(trend)}</div>' if trend else ""
    st.markdown(
        f'<div style="background: white; border: 1px solid #e5e7eb; border-radius: 8px; padding: 16px;">'
        f'<div style="display: flex; justify-content: space-between;">'
        f'<span style="font-size: 14px; color: #4b5563; font-weight: 500;">{escape(label)}</span>'
        f'<span style="font-size: 24px;">{icon}</span></div>'
        f'<div style="font-size: 26px; font-weight: bold; color: {color}; margin-top: 8px;">{escape(str(value))}</div>'
        f"{trend_html}</div>",
        unsafe_allow_html=True,
    )


def status_badge(status: str) -> str:
    cfg = status_config(status)
    return (
        f'<span style="background-color: {cfg["bg"]}; color: {cfg["color"]}; padding: 2px 8px; '
        f'border-radius: 9999px; font-size: 12px; font-weight: 600;">{cfg["icon"]} {cfg["label"]}</span>'
    )


def team_activity_card(member: TeamMember) -> None:
    cfg = status_config(member.get("status", ""))
    with st.container(border=True):
        st.markdown(
            f'<div style="background-color: {cfg["bg"]}; padding: 10px 12px; border-radius: 6px; display: flex; justify-content: space-between;">'
            f'<div><div style="font-weight: 600; color: #111827;">{escape(member.get("name", ""))}</div>{status_badge(member.get("status", ""))}</div>'
            f'<div style="text-align: right;"><div style="font-size: 24px; font-weight: bold; color: #9333ea;">{int(member.get("mql_count") or 0)}</div>'
            f'<div style="font-size: 12px; color: #6b7280;">MQLs</div></div></div>',
            unsafe_allow_html=True,
        )
        st.write(member.get("activities", ""))
        if member.get("timestamp"):
            st.caption(f"Submitted: {member['timestamp']}")
        if member.get("reminders"):
            st.caption(f"Reminders sent: {member['reminders']}")


def non_responders_list(names: List[str], roster: List[TeamMember], on_remind: Callable[[str], None]) -> None:
    """Action Required card. Remind buttons resolve names back to roster ids."""
    if not names:
        st.success("✅ All team members have responded!")
        return
    with st.container(border=True):
        st.markdown("**⚠️ Action Required**")
        st.caption("Team members who haven't responded yet")
        by_name = {}
        for m in roster:
            by_name.setdefault(m.get("name", ""), m)
        for name in names:
            member = by_name.get(name)
            col_name, col_btn = st.columns([3, 1])
            with col_name:
                reminders = int((member or {}).get("reminders") or 0)
                st.write(name + (f"  ·  reminded {reminders}x" if reminders else ""))
            with col_btn:
                if member is not None:
                    st.button("Remind", key=f"remind_{member['id']}", on_click=on_remind, args=(member["id"],))


def insights_summary(insights: List[str], agent_summary: str = "") -> None:
    with st.container(border=True):
        st.markdown("**Key Insights**")
        for insight in insights:
            st.markdown(f"📈 {insight}")
        if agent_summary:
            st.caption(f"Agent summary: {agent_summary}")
