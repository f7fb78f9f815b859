"""
MQL Dashboard - Sidebar: reminders summary, report export, agent settings.
"""

from __future__ import annotations

from typing import Optional

import streamlit as st

from mql_dashboard.config import load_dashboard_config, log_event
from mql_dashboard.tools.export import export_filename, export_json, load_export
from mql_dashboard.tools.roster import non_responder_members


def import_report(raw: bytes) -> Optional[str]:
    """Replace the session roster and snapshot with an exported report. Returns an error message, None on success."""
    try:
        team_data, insights = load_export(raw.decode("utf-8"))
    except ValueError as e:
        log_event("import_report rejected", {"err": str(e)[:200]}, "EXPORT")
        return f"Could not load report: {e}"
    st.session_state["team_data"] = team_data
    st.session_state["insights"] = insights
    st.session_state["previous_insights"] = None
    st.session_state["insights_error"] = None
    return None


def _agent_id_input(label: str, key: str) -> None:
    # widget keys are dropped while hidden; the override lives under `key` and re-seeds the box
    widget_key = f"{key}_input"
    if widget_key not in st.session_state:
        st.session_state[widget_key] = st.session_state[key]
    st.session_state[key] = st.text_input(label, key=widget_key)


def render_sidebar(selected_date: str) -> None:
    """Render the Dashboard Options sidebar. Agent IDs are kept in session_state."""
    roster = st.session_state["team_data"]
    snapshot = st.session_state.get("insights")
    cfg = load_dashboard_config()
    st.session_state.setdefault("collection_agent_id", cfg["collection_agent_id"])
    st.session_state.setdefault("insights_agent_id", cfg["insights_agent_id"])

    service_mode = st.sidebar.selectbox("Service Mode", ["Manager", "Admin"], key="service_mode")

    with st.sidebar:
        st.header("⚙️ Dashboard Options")

        st.subheader("🔔 Reminders")
        waiting = len(non_responder_members(roster))
        if waiting:
            st.warning(f"{waiting} team member{'s' if waiting != 1 else ''} haven't responded yet")
        else:
            st.success("Everyone has responded.")

        st.divider()
        st.subheader("📤 Export Data")
        report = export_json(roster, snapshot)
        st.download_button(
            "Export Report",
            data=report,
            file_name=export_filename(selected_date),
            mime="application/json",
            key="export_report",
            type="primary",
        )
        with st.expander("Copy report JSON", expanded=False):
            st.caption("Use the copy icon to put the report on your clipboard.")
            st.code(report, language="json")

        if service_mode == "Admin":
            st.divider()
            st.subheader("🤖 Agents")
            _agent_id_input("Collection agent ID", "collection_agent_id")
            _agent_id_input("Insights agent ID", "insights_agent_id")

            st.divider()
            st.subheader("📥 Load Report")
            uploaded = st.file_uploader("Restore an exported report", type=["json"], key="import_report")
            if uploaded is not None and st.button("Load into dashboard", key="load_report"):
                error = import_report(uploaded.read())
                if error:
                    st.error(error)
                else:
                    st.success(f"Loaded {len(st.session_state['team_data'])} team members.")
