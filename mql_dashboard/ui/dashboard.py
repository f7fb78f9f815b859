"""
MQL Dashboard - Request Updates card, Overview tab, and Insights tab.
"""

from __future__ import annotations

import streamlit as st

from mql_dashboard.config import COLLECTION_STATUS_STARTED
from mql_dashboard.agents.workflow import run_collection, run_insights
from mql_dashboard.tools.metrics import first_name
from mql_dashboard.tools.roster import remind_member
from mql_dashboard.ui.components import metric_card, non_responders_list, insights_summary, team_activity_card


def activity_members(snapshot: dict, roster: list) -> list:
    """Roster members whose ids the snapshot lists for activity cards, in roster order."""
    ids = snapshot.get("activity_members")
    if not isinstance(ids, list):
        return []
    return [m for m in roster if m.get("id") in ids]


def _remind(member_id: str) -> None:
    remind_member(st.session_state["team_data"], member_id)


def _trend(current: int, previous, suffix: str = "") -> str | None:
    if previous is None or current == previous:
        return None
    diff = current - previous
    return f"{'+' if diff > 0 else ''}{diff}{suffix} since last generate"


def render_request_updates(selected_date: str) -> None:
    """CTA card: one collection-agent call per click."""
    with st.container(border=True):
        col_text, col_btn = st.columns([3, 1])
        with col_text:
            st.subheader("Request Team Updates")
            st.caption("Collect weekly activities and MQL data from team members")
        with col_btn:
            clicked = st.button("Request Updates", key="request_updates", type="primary")
        if clicked:
            with st.spinner(COLLECTION_STATUS_STARTED):
                roster, status, ok = run_collection(
                    st.session_state["team_data"],
                    selected_date,
                    agent_id=st.session_state.get("collection_agent_id"),
                )
            st.session_state["team_data"] = roster
            st.session_state["collection_status"] = status
            st.session_state["collection_ok"] = ok
        if st.session_state.get("collection_status"):
            if st.session_state.get("collection_ok", True):
                st.info(st.session_state["collection_status"])
            else:
                st.error(st.session_state["collection_status"])


def _generate() -> None:
    with st.spinner("Generating..."):
        previous = st.session_state.get("insights")
        snapshot, error = run_insights(
            st.session_state["team_data"],
            previous,
            agent_id=st.session_state.get("insights_agent_id"),
        )
    if error:
        st.session_state["insights_error"] = error
        return
    st.session_state["previous_insights"] = previous
    st.session_state["insights"] = snapshot
    st.session_state["insights_error"] = None


def render_overview() -> None:
    """Overview tab contents."""
    insights = st.session_state.get("insights")
    if st.session_state.get("insights_error"):
        st.error(st.session_state["insights_error"])
    if not insights:
        with st.container(border=True):
            st.write("Generate dashboard to see aggregate metrics")
            if st.button("Generate Dashboard", key="generate_dashboard", type="primary"):
                _generate()
                st.rerun()
        return

    previous = st.session_state.get("previous_insights") or {}
    st.subheader("Key Metrics")
    col1, col2, col3, col4 = st.columns(4)
    with col1:
        metric_card("Total MQLs", insights.get("total_mqls", 0), icon="🎯", status="positive", trend=_trend(insights.get("total_mqls", 0), previous.get("total_mqls")))
    with col2:
        metric_card("Response Rate", f"{insights.get('response_rate', 0)}%", icon="👥", status="positive", trend=_trend(insights.get("response_rate", 0), previous.get("response_rate"), "%"))
    with col3:
        metric_card("Avg MQLs/Person", insights.get("average_mqls", 0), icon="📈", status="neutral")
    with col4:
        metric_card("Top Performer", first_name(insights.get("top_performer", "")) or "-", icon="🏆", status="positive")

    col_left, col_right = st.columns(2)
    with col_left:
        non_responders_list(insights.get("non_responders", []), st.session_state["team_data"], _remind)
    with col_right:
        insights_summary(insights.get("insights", []), insights.get("agent_summary", ""))

    submitted = activity_members(insights, st.session_state["team_data"])
    if submitted:
        st.subheader("Submitted Updates")
        cols = st.columns(3)
        for i, member in enumerate(submitted):
            with cols[i % 3]:
                team_activity_card(member)

    if st.button("Regenerate Dashboard", key="regenerate_dashboard"):
        _generate()
        st.rerun()
    st.caption(f"Last updated: {insights.get('last_updated', '')}")


def render_insights() -> None:
    """Insights tab contents."""
    insights = st.session_state.get("insights")
    if insights:
        insights_summary(insights.get("insights", []), insights.get("agent_summary", ""))
    else:
        st.info("Generate dashboard to view insights")
